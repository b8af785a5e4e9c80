"""Permission models for Drive v2."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterator, Optional, TypeVar

E = TypeVar("E", bound=Enum)


class PermissionRole(Enum):
    OWNER = "owner"
    WRITER = "writer"
    READER = "reader"


class PermissionType(Enum):
    USER = "user"
    GROUP = "group"
    DOMAIN = "domain"
    ANYONE = "anyone"


class AdditionalRole(Enum):
    COMMENTER = "commenter"


@dataclass(slots=True)
class UserPermission:
    """An access grant (role + grantee) on a Drive file."""

    role: Optional[PermissionRole] = None
    type: Optional[PermissionType] = None
    value: Optional[str] = None
    id: Optional[str] = None
    name: Optional[str] = None
    email_address: Optional[str] = None
    additional_roles: set[AdditionalRole] = field(default_factory=set)
    with_link: bool = False

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> "UserPermission":
        additional = {
            role
            for role in (_parse_enum(AdditionalRole, r) for r in data.get("additionalRoles") or [])
            if role is not None
        }
        return cls(
            id=_str_or_none(data.get("id")),
            role=_parse_enum(PermissionRole, data.get("role")),
            type=_parse_enum(PermissionType, data.get("type")),
            value=_str_or_none(data.get("value")),
            name=_str_or_none(data.get("name")),
            email_address=_str_or_none(data.get("emailAddress")),
            additional_roles=additional,
            with_link=bool(data.get("withLink", False)),
        )

    def to_api_body(self) -> dict[str, Any]:
        body: dict[str, Any] = {}
        if self.role is not None:
            body["role"] = self.role.value
        if self.type is not None:
            body["type"] = self.type.value
        if self.value:
            body["value"] = self.value
        if self.additional_roles:
            body["additionalRoles"] = sorted(r.value for r in self.additional_roles)
        if self.with_link:
            body["withLink"] = True
        return body

    def to_update_body(self) -> dict[str, Any]:
        """Only role and additional roles can be changed on an existing permission."""
        body: dict[str, Any] = {}
        if self.role is not None:
            body["role"] = self.role.value
        body["additionalRoles"] = sorted(r.value for r in self.additional_roles)
        return body


@dataclass(slots=True)
class UserPermissionsList:
    """Permissions of one file, keyed by permission ID."""

    permissions: dict[str, UserPermission] = field(default_factory=dict)
    etag: Optional[str] = None

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> "UserPermissionsList":
        permissions: dict[str, UserPermission] = {}
        for item in data.get("items", []) or []:
            perm = UserPermission.from_api(item)
            if perm.id is not None:
                permissions[perm.id] = perm
        return cls(permissions=permissions, etag=_str_or_none(data.get("etag")))

    def get(self, permission_id: str) -> Optional[UserPermission]:
        return self.permissions.get(permission_id)

    def __contains__(self, permission_id: object) -> bool:
        return permission_id in self.permissions

    def __iter__(self) -> Iterator[UserPermission]:
        return iter(self.permissions.values())

    def __len__(self) -> int:
        return len(self.permissions)


def _parse_enum(enum_cls: type[E], value: Any) -> Optional[E]:
    try:
        return enum_cls(value)
    except ValueError:
        return None


def _str_or_none(value: Any) -> Optional[str]:
    return value if isinstance(value, str) else None
