"""OAuth scopes accepted by the Drive API."""

from __future__ import annotations

DRIVE: str = "https://www.googleapis.com/auth/drive"
DRIVE_FILE: str = "https://www.googleapis.com/auth/drive.file"
DRIVE_APPS_READONLY: str = "https://www.googleapis.com/auth/drive.apps.readonly"
DRIVE_READONLY: str = "https://www.googleapis.com/auth/drive.readonly"
DRIVE_READONLY_METADATA: str = "https://www.googleapis.com/auth/drive.readonly.metadata"

DRIVE_SCOPES: tuple[str, ...] = (
    DRIVE,
    DRIVE_FILE,
    DRIVE_APPS_READONLY,
    DRIVE_READONLY,
    DRIVE_READONLY_METADATA,
)

DEFAULT_SCOPES: tuple[str, ...] = (DRIVE,)
