"""Field selections for Drive v2 responses."""

from __future__ import annotations

FILE_FIELDS: str = (
    "id,"
    "title,"
    "mimeType,"
    "description,"
    "parents(id,isRoot),"
    "labels,"
    "createdDate,"
    "modifiedDate,"
    "lastViewedByMeDate,"
    "fileSize,"
    "md5Checksum,"
    "originalFilename,"
    "fileExtension,"
    "downloadUrl,"
    "alternateLink,"
    "iconLink,"
    "thumbnailLink,"
    "ownerNames,"
    "lastModifyingUserName,"
    "editable,"
    "shared,"
    "exportLinks"
)

LIST_FIELDS: str = f"nextPageToken,items({FILE_FIELDS})"

PERMISSION_FIELDS: str = (
    "id,name,role,type,value,emailAddress,additionalRoles,withLink"
)

PERMISSION_LIST_FIELDS: str = f"etag,items({PERMISSION_FIELDS})"
