"""gdriveconnect public API."""

from __future__ import annotations

from gdriveconnect.auth import DEFAULT_SCOPES, DRIVE_SCOPES, AuthInfo, OAuthClient
from gdriveconnect.drive import DriveFileQueryBuilder, DriveOperations, DriveTemplate
from gdriveconnect.errors import (
    ApiError,
    AuthError,
    ConflictError,
    GDriveConnectError,
    HttpErrorInfo,
    InvalidArgumentError,
    InvalidStateError,
    NetworkError,
    NotFoundError,
    PermissionError,
    QuotaExceededError,
    RateLimitError,
    map_http_error,
)
from gdriveconnect.gdata import ElementBuilder, to_xml
from gdriveconnect.models import (
    AdditionalRole,
    DriveFile,
    DriveFileParent,
    DriveFilesPage,
    PermissionRole,
    PermissionType,
    UploadParameters,
    UserPermission,
    UserPermissionsList,
)

__all__ = [
    # Drive
    "DriveOperations",
    "DriveTemplate",
    "DriveFileQueryBuilder",
    # GData
    "ElementBuilder",
    "to_xml",
    # Auth
    "AuthInfo",
    "OAuthClient",
    "DEFAULT_SCOPES",
    "DRIVE_SCOPES",
    # Models
    "DriveFile",
    "DriveFileParent",
    "DriveFilesPage",
    "UploadParameters",
    "UserPermission",
    "UserPermissionsList",
    "PermissionRole",
    "PermissionType",
    "AdditionalRole",
    # Errors
    "GDriveConnectError",
    "InvalidStateError",
    "AuthError",
    "PermissionError",
    "InvalidArgumentError",
    "NotFoundError",
    "ConflictError",
    "RateLimitError",
    "QuotaExceededError",
    "NetworkError",
    "ApiError",
    "HttpErrorInfo",
    "map_http_error",
]
