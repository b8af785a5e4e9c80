from __future__ import annotations

FOLDER_MIME: str = "application/vnd.google-apps.folder"

# Used for uploads whose content type is neither given nor set on the metadata.
DEFAULT_CONTENT_TYPE: str = "application/octet-stream"


def is_folder(mime_type: str | None) -> bool:
    return mime_type == FOLDER_MIME


def resolve_content_type(*candidates: str | None) -> str:
    """Return the first non-empty candidate, else DEFAULT_CONTENT_TYPE."""
    for candidate in candidates:
        if isinstance(candidate, str) and candidate.strip():
            return candidate
    return DEFAULT_CONTENT_TYPE
