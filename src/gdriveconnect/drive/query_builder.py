"""Fluent builder for Drive v2 file listing queries."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Callable, Optional

from gdriveconnect.errors import InvalidArgumentError
from gdriveconnect.models import DriveFilesPage
from gdriveconnect.util.mime import FOLDER_MIME
from gdriveconnect.util.time import to_rfc3339

logger = logging.getLogger(__name__)

MAX_RESULTS_LIMIT = 1000

# (q, page_token, max_results) -> page
PageFetcher = Callable[[Optional[str], Optional[str], Optional[int]], DriveFilesPage]


def quote(value: str) -> str:
    """Quote a string literal for the Drive query language."""
    escaped = value.replace("\\", "\\\\").replace("'", "\\'")
    return f"'{escaped}'"


class DriveFileQueryBuilder:
    """
    Builds a `q` expression for `files.list` and fetches one page with it.

    Filters are joined with ``and`` in the order they were added. The query
    language itself is not validated locally.

    Example usage:
        page = (drive.drive_file_query()
            .parent_is("root")
            .title_contains("report")
            .trashed(False)
            .max_results(50)
            .get_page())
    """

    def __init__(self, fetcher: PageFetcher) -> None:
        self._fetcher = fetcher
        self._clauses: list[str] = []
        self._page_token: Optional[str] = None
        self._max_results: Optional[int] = None

    def title_is(self, title: str) -> "DriveFileQueryBuilder":
        return self._add(f"title = {quote(title)}")

    def title_is_not(self, title: str) -> "DriveFileQueryBuilder":
        return self._add(f"title != {quote(title)}")

    def title_contains(self, text: str) -> "DriveFileQueryBuilder":
        return self._add(f"title contains {quote(text)}")

    def full_text_contains(self, text: str) -> "DriveFileQueryBuilder":
        return self._add(f"fullText contains {quote(text)}")

    def mime_type_is(self, mime_type: str) -> "DriveFileQueryBuilder":
        return self._add(f"mimeType = {quote(mime_type)}")

    def mime_type_is_not(self, mime_type: str) -> "DriveFileQueryBuilder":
        return self._add(f"mimeType != {quote(mime_type)}")

    def is_folder(self) -> "DriveFileQueryBuilder":
        return self.mime_type_is(FOLDER_MIME)

    def is_not_folder(self) -> "DriveFileQueryBuilder":
        return self.mime_type_is_not(FOLDER_MIME)

    def parent_is(self, parent_id: str) -> "DriveFileQueryBuilder":
        """Restrict to children of a folder ID (or "root")."""
        return self._add(f"{quote(parent_id)} in parents")

    def modified_after(self, dt: datetime) -> "DriveFileQueryBuilder":
        return self._add(f"modifiedDate > {quote(to_rfc3339(dt, timespec='seconds'))}")

    def modified_before(self, dt: datetime) -> "DriveFileQueryBuilder":
        return self._add(f"modifiedDate < {quote(to_rfc3339(dt, timespec='seconds'))}")

    def last_viewed_by_me_after(self, dt: datetime) -> "DriveFileQueryBuilder":
        return self._add(
            f"lastViewedByMeDate > {quote(to_rfc3339(dt, timespec='seconds'))}"
        )

    def last_viewed_by_me_before(self, dt: datetime) -> "DriveFileQueryBuilder":
        return self._add(
            f"lastViewedByMeDate < {quote(to_rfc3339(dt, timespec='seconds'))}"
        )

    def trashed(self, value: bool = True) -> "DriveFileQueryBuilder":
        return self._add(f"trashed = {_bool(value)}")

    def starred(self, value: bool = True) -> "DriveFileQueryBuilder":
        return self._add(f"starred = {_bool(value)}")

    def hidden(self, value: bool = True) -> "DriveFileQueryBuilder":
        return self._add(f"hidden = {_bool(value)}")

    def max_results(self, count: int) -> "DriveFileQueryBuilder":
        if count < 1 or count > MAX_RESULTS_LIMIT:
            raise InvalidArgumentError(
                f"max_results must be between 1 and {MAX_RESULTS_LIMIT}",
                details={"max_results": count},
            )
        self._max_results = count
        return self

    def from_page(self, page_token: Optional[str]) -> "DriveFileQueryBuilder":
        """Continue a listing from a previous page's next_page_token."""
        self._page_token = page_token or None
        return self

    def build_query(self) -> Optional[str]:
        if not self._clauses:
            return None
        return " and ".join(self._clauses)

    def get_page(self) -> DriveFilesPage:
        q = self.build_query()
        logger.debug("Listing files q=%r page_token=%r", q, self._page_token)
        return self._fetcher(q, self._page_token, self._max_results)

    def _add(self, clause: str) -> "DriveFileQueryBuilder":
        self._clauses.append(clause)
        return self


def _bool(value: bool) -> str:
    return "true" if value else "false"
