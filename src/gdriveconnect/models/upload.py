"""Parameters for multipart uploads."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal, Optional

Visibility = Literal["DEFAULT", "PRIVATE"]


@dataclass(slots=True, frozen=True)
class UploadParameters:
    """
    Options for `files.insert` uploads.

    Values are passed through to Drive as query parameters; only options
    that are set (not None) are sent.
    """

    convert: Optional[bool] = None
    ocr: Optional[bool] = None
    ocr_language: Optional[str] = None
    pinned: Optional[bool] = None
    timed_text_language: Optional[str] = None
    timed_text_track_name: Optional[str] = None
    use_content_as_indexable_text: Optional[bool] = None
    visibility: Optional[Visibility] = None

    def to_query(self) -> dict[str, Any]:
        mapping = {
            "convert": self.convert,
            "ocr": self.ocr,
            "ocrLanguage": self.ocr_language,
            "pinned": self.pinned,
            "timedTextLanguage": self.timed_text_language,
            "timedTextTrackName": self.timed_text_track_name,
            "useContentAsIndexableText": self.use_content_as_indexable_text,
            "visibility": self.visibility,
        }
        return {k: v for k, v in mapping.items() if v is not None}
