"""Drive API binding for gdriveconnect."""

from __future__ import annotations

from .operations import DriveOperations, UploadContent
from .query_builder import DriveFileQueryBuilder
from .template import ROOT_FOLDER_ID, DriveTemplate

__all__ = [
    "DriveOperations",
    "DriveTemplate",
    "DriveFileQueryBuilder",
    "UploadContent",
    "ROOT_FOLDER_ID",
]
