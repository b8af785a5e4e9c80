"""Public model exports for gdriveconnect."""

from __future__ import annotations

from .drive_file import DriveFile, DriveFileParent, DriveFilesPage
from .permission import (
    AdditionalRole,
    PermissionRole,
    PermissionType,
    UserPermission,
    UserPermissionsList,
)
from .upload import UploadParameters

__all__ = [
    "DriveFile",
    "DriveFileParent",
    "DriveFilesPage",
    "UploadParameters",
    "UserPermission",
    "UserPermissionsList",
    "PermissionRole",
    "PermissionType",
    "AdditionalRole",
]
