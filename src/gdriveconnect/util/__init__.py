from .mime import DEFAULT_CONTENT_TYPE, FOLDER_MIME, is_folder, resolve_content_type
from .text import has_text, is_whitespace
from .time import normalize_dt, parse_rfc3339, parse_rfc3339_or_none, to_rfc3339

__all__ = [
    "DEFAULT_CONTENT_TYPE",
    "FOLDER_MIME",
    "is_folder",
    "resolve_content_type",
    "has_text",
    "is_whitespace",
    "parse_rfc3339",
    "parse_rfc3339_or_none",
    "to_rfc3339",
    "normalize_dt",
]
