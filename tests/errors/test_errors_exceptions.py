import unittest

from gdriveconnect.errors.exceptions import (
    ApiError,
    AuthError,
    ConflictError,
    GDriveConnectError,
    HttpErrorInfo,
    InvalidArgumentError,
    NotFoundError,
    PermissionError,
    QuotaExceededError,
    RateLimitError,
    map_http_error,
)


class TestExceptions(unittest.TestCase):
    def test_base_error_keeps_details_and_cause(self) -> None:
        cause = RuntimeError("root")
        err = GDriveConnectError("msg", details={"k": "v"}, cause=cause)
        self.assertEqual(str(err), "msg")
        self.assertEqual(err.details["k"], "v")
        self.assertIs(err.cause, cause)
        self.assertIsNone(err.status_code)

    def test_map_http_error_basic(self) -> None:
        cases = {
            400: InvalidArgumentError,
            401: AuthError,
            404: NotFoundError,
            409: ConflictError,
            412: ConflictError,
            429: RateLimitError,
        }
        for status, expected in cases.items():
            with self.subTest(status=status):
                err = map_http_error(HttpErrorInfo(status_code=status))
                self.assertIsInstance(err, expected)
                self.assertEqual(err.status_code, status)

    def test_map_http_error_403_quota_vs_permission(self) -> None:
        err = map_http_error(
            HttpErrorInfo(status_code=403, reason="quotaExceeded", message="quota")
        )
        self.assertIsInstance(err, QuotaExceededError)

        err = map_http_error(
            HttpErrorInfo(status_code=403, reason="insufficientPermissions", message="x")
        )
        self.assertIsInstance(err, PermissionError)

    def test_map_http_error_other_is_api_error(self) -> None:
        self.assertIsInstance(map_http_error(HttpErrorInfo(status_code=503)), ApiError)
        self.assertIsInstance(map_http_error(HttpErrorInfo(status_code=418)), ApiError)

    def test_map_http_error_default_message_and_details(self) -> None:
        err = map_http_error(
            HttpErrorInfo(status_code=404, reason="notFound", details={"domain": "global"})
        )
        self.assertEqual(str(err), "HTTP error 404")
        self.assertEqual(err.details["reason"], "notFound")
        self.assertEqual(err.details["domain"], "global")


if __name__ == "__main__":
    unittest.main()
