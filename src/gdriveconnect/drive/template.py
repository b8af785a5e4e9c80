"""Drive v2 implementation of DriveOperations."""

from __future__ import annotations

import io
import json
import logging
from typing import Any, Callable, Optional, Sequence, TypeVar

from googleapiclient.errors import HttpError
from googleapiclient.http import MediaIoBaseUpload

from gdriveconnect.auth import DEFAULT_SCOPES, AuthInfo, OAuthClient
from gdriveconnect.errors import (
    ApiError,
    GDriveConnectError,
    HttpErrorInfo,
    InvalidArgumentError,
    NetworkError,
    map_http_error,
)
from gdriveconnect.models import (
    DriveFile,
    DriveFilesPage,
    UploadParameters,
    UserPermission,
    UserPermissionsList,
)
from gdriveconnect.util.mime import resolve_content_type

from .fields import FILE_FIELDS, LIST_FIELDS, PERMISSION_FIELDS, PERMISSION_LIST_FIELDS
from .operations import UploadContent
from .query_builder import DriveFileQueryBuilder

logger = logging.getLogger(__name__)

T = TypeVar("T")

ROOT_FOLDER_ID = "root"


class DriveTemplate:
    """
    DriveOperations backed by a googleapiclient Drive v2 service.

    Notes:
        - No retries, caching or pagination loops: each method is one request
          and every failure is raised to the caller as a mapped exception.
        - `supports_all_drives` is applied to all requests consistently.
    """

    def __init__(
        self,
        auth_info: AuthInfo,
        *,
        scopes: Optional[Sequence[str]] = None,
        supports_all_drives: bool = True,
    ) -> None:
        self._supports_all_drives = supports_all_drives

        use_scopes = list(scopes) if scopes is not None else list(DEFAULT_SCOPES)
        client = OAuthClient(auth_info)
        self._service = client.build_drive_service(use_scopes, ensure_valid=True)

    @classmethod
    def from_service(
        cls,
        service: Any,
        *,
        supports_all_drives: bool = True,
    ) -> "DriveTemplate":
        """Create a template from a pre-built Drive service (useful for tests)."""
        obj = cls.__new__(cls)
        obj._supports_all_drives = supports_all_drives
        obj._service = service
        return obj

    # ----------------------------
    # Files
    # ----------------------------
    def get_file(self, id: str) -> DriveFile:
        req = self._service.files().get(
            fileId=id,
            fields=FILE_FIELDS,
            **self._common_get_kwargs(),
        )
        return DriveFile.from_api(self._execute("files.get", req.execute, file_id=id))

    def drive_file_query(self) -> DriveFileQueryBuilder:
        return DriveFileQueryBuilder(self._list_page)

    def get_root_files(self, page_token: Optional[str] = None) -> DriveFilesPage:
        return self.get_files(ROOT_FOLDER_ID, page_token)

    def get_files(self, parent_id: str, page_token: Optional[str] = None) -> DriveFilesPage:
        return (
            self.drive_file_query()
            .parent_is(parent_id)
            .trashed(False)
            .from_page(page_token)
            .get_page()
        )

    def get_trashed_files(self, page_token: Optional[str] = None) -> DriveFilesPage:
        return self.drive_file_query().trashed(True).from_page(page_token).get_page()

    def trash(self, id: str) -> DriveFile:
        req = self._service.files().trash(
            fileId=id,
            fields=FILE_FIELDS,
            **self._common_write_kwargs(),
        )
        return DriveFile.from_api(self._execute("files.trash", req.execute, file_id=id))

    def untrash(self, id: str) -> DriveFile:
        req = self._service.files().untrash(
            fileId=id,
            fields=FILE_FIELDS,
            **self._common_write_kwargs(),
        )
        return DriveFile.from_api(self._execute("files.untrash", req.execute, file_id=id))

    def star(self, id: str) -> DriveFile:
        return self._patch_label(id, "starred", True)

    def unstar(self, id: str) -> DriveFile:
        return self._patch_label(id, "starred", False)

    def hide(self, id: str) -> DriveFile:
        return self._patch_label(id, "hidden", True)

    def unhide(self, id: str) -> DriveFile:
        return self._patch_label(id, "hidden", False)

    def delete(self, id: str) -> None:
        req = self._service.files().delete(
            fileId=id,
            **self._common_write_kwargs(),
        )
        self._execute("files.delete", req.execute, file_id=id)

    def upload(
        self,
        content: UploadContent,
        metadata: DriveFile,
        parameters: Optional[UploadParameters] = None,
        *,
        content_type: Optional[str] = None,
    ) -> DriveFile:
        """
        Upload content with metadata as one multipart/related request.

        Args:
            content: Bytes or a readable binary stream. A stream is read once,
                from its current position to EOF, and is not rewound or closed.
                Non-seekable streams (pipes, sockets) are accepted.
            metadata: Title, parents etc. of the new file.
            parameters: Optional insert options (convert, ocr, ...).
            content_type: MIME type of the content part. Defaults to the
                metadata MIME type, then application/octet-stream.
        """
        data = self._execute("upload.read", lambda: _read_content(content))
        mimetype = resolve_content_type(content_type, metadata.mime_type)
        media = MediaIoBaseUpload(io.BytesIO(data), mimetype=mimetype, resumable=False)
        query = parameters.to_query() if parameters is not None else {}

        req = self._service.files().insert(
            body=metadata.to_api_body(),
            media_body=media,
            fields=FILE_FIELDS,
            **query,
            **self._common_write_kwargs(),
        )
        return DriveFile.from_api(self._execute("files.insert[upload]", req.execute))

    def create_file_metadata(self, metadata: DriveFile) -> DriveFile:
        req = self._service.files().insert(
            body=metadata.to_api_body(),
            fields=FILE_FIELDS,
            **self._common_write_kwargs(),
        )
        return DriveFile.from_api(self._execute("files.insert", req.execute))

    def create_folder(self, parent_id: str, name: str) -> DriveFile:
        return self.create_file_metadata(DriveFile.folder(parent_id, name))

    # ----------------------------
    # Permissions
    # ----------------------------
    def get_permissions(self, file_id: str) -> UserPermissionsList:
        req = self._service.permissions().list(
            fileId=file_id,
            fields=PERMISSION_LIST_FIELDS,
            **self._common_get_kwargs(),
        )
        data = self._execute("permissions.list", req.execute, file_id=file_id)
        return UserPermissionsList.from_api(data)

    def add_permission(
        self,
        file_id: str,
        permission: UserPermission,
        send_notification_emails: bool,
    ) -> UserPermission:
        req = self._service.permissions().insert(
            fileId=file_id,
            body=permission.to_api_body(),
            sendNotificationEmails=send_notification_emails,
            fields=PERMISSION_FIELDS,
            **self._common_write_kwargs(),
        )
        data = self._execute("permissions.insert", req.execute, file_id=file_id)
        return UserPermission.from_api(data)

    def update_permission(
        self,
        file_id: str,
        permission_id: str,
        permission: UserPermission,
    ) -> UserPermission:
        req = self._service.permissions().update(
            fileId=file_id,
            permissionId=permission_id,
            body=permission.to_update_body(),
            fields=PERMISSION_FIELDS,
            **self._common_write_kwargs(),
        )
        data = self._execute("permissions.update", req.execute, file_id=file_id)
        return UserPermission.from_api(data)

    def remove_permission(self, file_id: str, permission_id: str) -> None:
        req = self._service.permissions().delete(
            fileId=file_id,
            permissionId=permission_id,
            **self._common_write_kwargs(),
        )
        self._execute("permissions.delete", req.execute, file_id=file_id)

    # ----------------------------
    # Internals
    # ----------------------------
    def _common_get_kwargs(self) -> dict[str, Any]:
        if not self._supports_all_drives:
            return {}
        return {"supportsAllDrives": True}

    def _common_list_kwargs(self) -> dict[str, Any]:
        if not self._supports_all_drives:
            return {}
        return {"supportsAllDrives": True, "includeItemsFromAllDrives": True}

    def _common_write_kwargs(self) -> dict[str, Any]:
        if not self._supports_all_drives:
            return {}
        return {"supportsAllDrives": True}

    def _patch_label(self, file_id: str, label: str, value: bool) -> DriveFile:
        req = self._service.files().patch(
            fileId=file_id,
            body={"labels": {label: value}},
            fields=FILE_FIELDS,
            **self._common_write_kwargs(),
        )
        data = self._execute("files.patch", req.execute, file_id=file_id)
        return DriveFile.from_api(data)

    def _list_page(
        self,
        q: Optional[str],
        page_token: Optional[str],
        max_results: Optional[int],
    ) -> DriveFilesPage:
        kwargs: dict[str, Any] = {"fields": LIST_FIELDS}
        if q:
            kwargs["q"] = q
        if page_token:
            kwargs["pageToken"] = page_token
        if max_results is not None:
            kwargs["maxResults"] = max_results

        req = self._service.files().list(**kwargs, **self._common_list_kwargs())
        return DriveFilesPage.from_api(self._execute("files.list", req.execute))

    def _execute(self, operation: str, func: Callable[[], T], **context: Any) -> T:
        logger.debug("Drive %s %s", operation, context or "")
        try:
            return func()
        except Exception as exc:
            mapped = _map_exception(exc)
            mapped.details.setdefault("operation", operation)
            for key, value in context.items():
                mapped.details.setdefault(key, value)
            logger.warning(
                "Drive %s failed: %s (status=%s)",
                operation,
                mapped,
                mapped.status_code,
            )
            raise mapped from exc


def _map_exception(exc: Exception) -> GDriveConnectError:
    if isinstance(exc, GDriveConnectError):
        return exc

    if isinstance(exc, HttpError):
        return map_http_error(_http_error_to_info(exc), cause=exc)

    if isinstance(exc, (OSError, TimeoutError)):
        return NetworkError("Network error", cause=exc)

    return ApiError("Drive API error", cause=exc)


def _http_error_to_info(exc: HttpError) -> HttpErrorInfo:
    status_code = getattr(getattr(exc, "resp", None), "status", None)
    reason = getattr(getattr(exc, "resp", None), "reason", None)

    message = None
    details: dict[str, Any] = {}

    content = getattr(exc, "content", None)
    if isinstance(content, (bytes, bytearray)):
        try:
            payload = json.loads(content.decode("utf-8"))
        except (UnicodeDecodeError, ValueError):
            payload = None

        err = payload.get("error") if isinstance(payload, dict) else None
        if isinstance(err, dict):
            message = err.get("message") or None
            errors = err.get("errors") or []
            if errors and isinstance(errors, list) and isinstance(errors[0], dict):
                details["domain"] = errors[0].get("domain")
                if isinstance(errors[0].get("reason"), str):
                    reason = errors[0]["reason"]

    if not isinstance(status_code, int):
        status_code = 0

    return HttpErrorInfo(
        status_code=status_code,
        reason=reason if isinstance(reason, str) else None,
        message=message,
        details=details or None,
    )


def _read_content(content: UploadContent) -> bytes:
    if isinstance(content, (bytes, bytearray)):
        return bytes(content)
    data = content.read()
    if not isinstance(data, (bytes, bytearray)):
        raise InvalidArgumentError(
            "upload content must be bytes or a binary stream",
            details={"content_type": type(data).__name__},
        )
    return bytes(data)
