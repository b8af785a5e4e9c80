import tempfile
import unittest
from pathlib import Path

from gdriveconnect.auth import AuthInfo


class TestAuthInfo(unittest.TestCase):
    def test_auth_info_valid_oauth(self) -> None:
        info = AuthInfo.oauth("/tmp/client_secrets.json", "/tmp/token.json")
        self.assertEqual(info.kind, "oauth")
        self.assertEqual(info.client_secrets_file, "/tmp/client_secrets.json")
        self.assertEqual(info.token_file, "/tmp/token.json")

    def test_auth_info_invalid_kind(self) -> None:
        with self.assertRaises(ValueError):
            AuthInfo(kind="service_account", data={})

    def test_auth_info_missing_keys(self) -> None:
        with self.assertRaises(ValueError):
            AuthInfo(kind="oauth", data={"client_secrets_file": "x"})

    def test_auth_info_blank_path(self) -> None:
        with self.assertRaises(ValueError):
            AuthInfo.oauth("x", "   ")

    def test_has_token(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            token_file = Path(tmp) / "token.json"
            info = AuthInfo.oauth(str(Path(tmp) / "secrets.json"), str(token_file))
            self.assertFalse(info.has_token)
            token_file.write_text("{}", encoding="utf-8")
            self.assertTrue(info.has_token)


if __name__ == "__main__":
    unittest.main()
