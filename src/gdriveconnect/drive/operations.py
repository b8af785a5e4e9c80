"""Interface of the Drive operations exposed by gdriveconnect."""

from __future__ import annotations

from typing import BinaryIO, Optional, Protocol, Union

from gdriveconnect.models import (
    DriveFile,
    DriveFilesPage,
    UploadParameters,
    UserPermission,
    UserPermissionsList,
)

from .query_builder import DriveFileQueryBuilder

UploadContent = Union[bytes, bytearray, BinaryIO]


class DriveOperations(Protocol):
    """
    Operations on Drive files, folders and permissions.

    Requires one of the scopes in `gdriveconnect.auth.DRIVE_SCOPES`. Every
    call is one synchronous request; failures are raised as
    `GDriveConnectError` subclasses and never retried.
    """

    def get_file(self, id: str) -> DriveFile:
        """Return the file with this ID. Raises NotFoundError if absent."""

    def drive_file_query(self) -> DriveFileQueryBuilder:
        """Return a new query builder for filtered listings."""

    def get_root_files(self, page_token: Optional[str] = None) -> DriveFilesPage:
        """List non-trashed files and folders under the root folder."""

    def get_files(self, parent_id: str, page_token: Optional[str] = None) -> DriveFilesPage:
        """List non-trashed files and folders under a folder ID (or "root")."""

    def get_trashed_files(self, page_token: Optional[str] = None) -> DriveFilesPage:
        """List trashed files and folders."""

    def trash(self, id: str) -> DriveFile:
        """Move a file to trash."""

    def untrash(self, id: str) -> DriveFile:
        """Restore a file from trash."""

    def star(self, id: str) -> DriveFile:
        """Star a file."""

    def unstar(self, id: str) -> DriveFile:
        """Remove the star from a file."""

    def hide(self, id: str) -> DriveFile:
        """Hide a file."""

    def unhide(self, id: str) -> DriveFile:
        """Unhide a file."""

    def delete(self, id: str) -> None:
        """Permanently delete a file."""

    def upload(
        self,
        content: UploadContent,
        metadata: DriveFile,
        parameters: Optional[UploadParameters] = None,
        *,
        content_type: Optional[str] = None,
    ) -> DriveFile:
        """Upload content and metadata in a single multipart request."""

    def create_file_metadata(self, metadata: DriveFile) -> DriveFile:
        """Create an empty file with metadata only."""

    def create_folder(self, parent_id: str, name: str) -> DriveFile:
        """Create a folder under a folder ID (or "root")."""

    def get_permissions(self, file_id: str) -> UserPermissionsList:
        """Return the permissions of a file."""

    def add_permission(
        self,
        file_id: str,
        permission: UserPermission,
        send_notification_emails: bool,
    ) -> UserPermission:
        """Grant a permission; Drive e-mails the grantee if asked to."""

    def update_permission(
        self,
        file_id: str,
        permission_id: str,
        permission: UserPermission,
    ) -> UserPermission:
        """Change the role and additional roles of a permission."""

    def remove_permission(self, file_id: str, permission_id: str) -> None:
        """Remove a permission from a file."""
