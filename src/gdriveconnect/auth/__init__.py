"""Public auth exports for gdriveconnect."""

from __future__ import annotations

from .auth_info import AuthInfo
from .oauth_client import OAuthClient
from .scopes import DEFAULT_SCOPES, DRIVE_SCOPES

__all__ = ["AuthInfo", "OAuthClient", "DEFAULT_SCOPES", "DRIVE_SCOPES"]
