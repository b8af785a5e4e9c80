"""Data model for Drive v2 file resources."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Iterator, Optional

from gdriveconnect.util.mime import FOLDER_MIME, is_folder
from gdriveconnect.util.time import parse_rfc3339_or_none


@dataclass(slots=True, frozen=True)
class DriveFileParent:
    """Reference to a parent folder (by ID)."""

    id: str
    is_root: bool = False

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> "DriveFileParent":
        return cls(id=str(data.get("id", "")), is_root=bool(data.get("isRoot", False)))

    def to_api_body(self) -> dict[str, Any]:
        return {"id": self.id}


@dataclass(slots=True)
class DriveFile:
    """
    Snapshot of a Drive file or folder.

    Notes:
        - The client never holds an authoritative copy; every instance is the
          state the server returned for one call.
        - `id` is None for metadata that has not been created on Drive yet.
    """

    title: str
    mime_type: Optional[str] = None
    id: Optional[str] = None
    description: Optional[str] = None
    parents: list[DriveFileParent] = field(default_factory=list)

    trashed: bool = False
    starred: bool = False
    hidden: bool = False
    restricted: bool = False
    viewed: bool = False

    created_date: Optional[datetime] = None
    modified_date: Optional[datetime] = None
    last_viewed_by_me_date: Optional[datetime] = None
    file_size: Optional[int] = None
    md5_checksum: Optional[str] = None
    original_filename: Optional[str] = None
    file_extension: Optional[str] = None
    download_url: Optional[str] = None
    alternate_link: Optional[str] = None
    icon_link: Optional[str] = None
    thumbnail_link: Optional[str] = None
    owner_names: list[str] = field(default_factory=list)
    last_modifying_user_name: Optional[str] = None
    editable: bool = False
    shared: bool = False
    export_links: dict[str, str] = field(default_factory=dict)

    @classmethod
    def new(
        cls,
        title: str,
        *,
        mime_type: Optional[str] = None,
        parent_id: Optional[str] = None,
        description: Optional[str] = None,
    ) -> "DriveFile":
        """Metadata for a file that is about to be created."""
        parents = [DriveFileParent(parent_id)] if parent_id else []
        return cls(
            title=title,
            mime_type=mime_type,
            parents=parents,
            description=description,
        )

    @classmethod
    def folder(cls, parent_id: str, name: str) -> "DriveFile":
        return cls.new(name, mime_type=FOLDER_MIME, parent_id=parent_id)

    @property
    def is_folder(self) -> bool:
        return is_folder(self.mime_type)

    @property
    def parent_ids(self) -> list[str]:
        return [p.id for p in self.parents]

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> "DriveFile":
        labels = data.get("labels") or {}
        raw_parents = data.get("parents") or []
        parents = [
            DriveFileParent.from_api(p) for p in raw_parents if isinstance(p, dict)
        ]

        size = None
        if isinstance(data.get("fileSize"), str) and data["fileSize"].isdigit():
            size = int(data["fileSize"])
        elif isinstance(data.get("fileSize"), int):
            size = data["fileSize"]

        owner_names = data.get("ownerNames") or []
        export_links = data.get("exportLinks") or {}

        return cls(
            id=_str_or_none(data.get("id")),
            title=data.get("title") if isinstance(data.get("title"), str) else "",
            mime_type=_str_or_none(data.get("mimeType")),
            description=_str_or_none(data.get("description")),
            parents=parents,
            trashed=bool(labels.get("trashed", False)),
            starred=bool(labels.get("starred", False)),
            hidden=bool(labels.get("hidden", False)),
            restricted=bool(labels.get("restricted", False)),
            viewed=bool(labels.get("viewed", False)),
            created_date=parse_rfc3339_or_none(data.get("createdDate")),
            modified_date=parse_rfc3339_or_none(data.get("modifiedDate")),
            last_viewed_by_me_date=parse_rfc3339_or_none(data.get("lastViewedByMeDate")),
            file_size=size,
            md5_checksum=_str_or_none(data.get("md5Checksum")),
            original_filename=_str_or_none(data.get("originalFilename")),
            file_extension=_str_or_none(data.get("fileExtension")),
            download_url=_str_or_none(data.get("downloadUrl")),
            alternate_link=_str_or_none(data.get("alternateLink")),
            icon_link=_str_or_none(data.get("iconLink")),
            thumbnail_link=_str_or_none(data.get("thumbnailLink")),
            owner_names=list(owner_names) if isinstance(owner_names, list) else [],
            last_modifying_user_name=_str_or_none(data.get("lastModifyingUserName")),
            editable=bool(data.get("editable", False)),
            shared=bool(data.get("shared", False)),
            export_links=dict(export_links) if isinstance(export_links, dict) else {},
        )

    def to_api_body(self) -> dict[str, Any]:
        """Request body with the writable fields that are set."""
        body: dict[str, Any] = {}
        if self.title:
            body["title"] = self.title
        if self.mime_type:
            body["mimeType"] = self.mime_type
        if self.description:
            body["description"] = self.description
        if self.parents:
            body["parents"] = [p.to_api_body() for p in self.parents]

        labels = {
            name: True
            for name in ("starred", "hidden", "trashed", "restricted")
            if getattr(self, name)
        }
        if labels:
            body["labels"] = labels
        return body


@dataclass(slots=True)
class DriveFilesPage:
    """One page of a file listing plus the token for the next page."""

    items: list[DriveFile] = field(default_factory=list)
    next_page_token: Optional[str] = None

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> "DriveFilesPage":
        items = [DriveFile.from_api(f) for f in data.get("items", []) or []]
        token = data.get("nextPageToken")
        return cls(items=items, next_page_token=token if token else None)

    @property
    def has_next(self) -> bool:
        return self.next_page_token is not None

    def __iter__(self) -> Iterator[DriveFile]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)


def _str_or_none(value: Any) -> Optional[str]:
    return value if isinstance(value, str) else None
