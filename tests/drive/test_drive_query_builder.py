import unittest
from datetime import datetime, timezone
from unittest.mock import Mock

from gdriveconnect.drive.query_builder import DriveFileQueryBuilder, quote
from gdriveconnect.errors import InvalidArgumentError
from gdriveconnect.models import DriveFilesPage


class TestDriveFileQueryBuilder(unittest.TestCase):
    def test_quote_escapes(self) -> None:
        self.assertEqual(quote("it's"), "'it\\'s'")
        self.assertEqual(quote("a\\b"), "'a\\\\b'")

    def test_clauses_joined_in_call_order(self) -> None:
        q = (
            DriveFileQueryBuilder(Mock())
            .parent_is("P1")
            .title_contains("Bob's")
            .trashed(False)
            .starred()
            .build_query()
        )
        self.assertEqual(
            q,
            "'P1' in parents and title contains 'Bob\\'s' "
            "and trashed = false and starred = true",
        )

    def test_no_clauses_is_none(self) -> None:
        self.assertIsNone(DriveFileQueryBuilder(Mock()).build_query())

    def test_dates_and_folders(self) -> None:
        dt = datetime(2025, 1, 2, 3, 4, 5, tzinfo=timezone.utc)
        q = DriveFileQueryBuilder(Mock()).is_folder().modified_after(dt).build_query()
        self.assertEqual(
            q,
            "mimeType = 'application/vnd.google-apps.folder' "
            "and modifiedDate > '2025-01-02T03:04:05Z'",
        )

    def test_max_results_bounds(self) -> None:
        builder = DriveFileQueryBuilder(Mock())
        with self.assertRaises(InvalidArgumentError):
            builder.max_results(0)
        with self.assertRaises(InvalidArgumentError):
            builder.max_results(1001)
        builder.max_results(1000)

    def test_get_page_passes_query_token_and_limit(self) -> None:
        page = DriveFilesPage()
        fetcher = Mock(return_value=page)

        result = (
            DriveFileQueryBuilder(fetcher)
            .hidden(False)
            .from_page("tok")
            .max_results(10)
            .get_page()
        )

        self.assertIs(result, page)
        fetcher.assert_called_once_with("hidden = false", "tok", 10)

    def test_empty_page_token_starts_from_first_page(self) -> None:
        fetcher = Mock(return_value=DriveFilesPage())
        DriveFileQueryBuilder(fetcher).from_page("").get_page()
        fetcher.assert_called_once_with(None, None, None)


if __name__ == "__main__":
    unittest.main()
