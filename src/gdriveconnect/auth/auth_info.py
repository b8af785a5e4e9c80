"""Authentication information for gdriveconnect."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any

_REQUIRED_KEYS: tuple[str, ...] = ("client_secrets_file", "token_file")


@dataclass(slots=True, frozen=True)
class AuthInfo:
    """
    Where the OAuth client secrets and the authorized-user token live.

    kind must be "oauth"; data must include `client_secrets_file` and
    `token_file` (non-empty paths). The token file need not exist yet; it is
    written after the first authorization flow.
    """

    kind: str
    data: dict[str, Any]

    def __post_init__(self) -> None:
        if self.kind != "oauth":
            raise ValueError("AuthInfo.kind must be 'oauth'")

        if not isinstance(self.data, dict):
            raise TypeError("AuthInfo.data must be a dict")

        for key in _REQUIRED_KEYS:
            value = self.data.get(key)
            if not isinstance(value, str) or not value.strip():
                raise ValueError(f"AuthInfo.data['{key}'] must be a non-empty string")

    @classmethod
    def oauth(cls, client_secrets_file: str, token_file: str) -> "AuthInfo":
        return cls(
            kind="oauth",
            data={"client_secrets_file": client_secrets_file, "token_file": token_file},
        )

    @property
    def client_secrets_file(self) -> str:
        return str(self.data["client_secrets_file"])

    @property
    def token_file(self) -> str:
        return str(self.data["token_file"])

    @property
    def has_token(self) -> bool:
        """True if a previously authorized token is on disk."""
        return os.path.exists(self.token_file)
