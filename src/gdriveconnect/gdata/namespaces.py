"""XML namespaces used in Atom/GData request bodies."""

from __future__ import annotations

from xml.etree import ElementTree as ET

ATOM_NS: str = "http://www.w3.org/2005/Atom"
GDATA_NS: str = "http://schemas.google.com/g/2005"
APP_NS: str = "http://www.w3.org/2007/app"
OPENSEARCH_NS: str = "http://a9.com/-/spec/opensearch/1.1/"
BATCH_NS: str = "http://schemas.google.com/gdata/batch"
GCAL_NS: str = "http://schemas.google.com/gCal/2005"
GCONTACT_NS: str = "http://schemas.google.com/contact/2008"

KIND_SCHEME: str = "http://schemas.google.com/g/2005#kind"

PREFIXES: dict[str, str] = {
    "atom": ATOM_NS,
    "gd": GDATA_NS,
    "app": APP_NS,
    "openSearch": OPENSEARCH_NS,
    "batch": BATCH_NS,
    "gCal": GCAL_NS,
    "gContact": GCONTACT_NS,
}

for _prefix, _uri in PREFIXES.items():
    ET.register_namespace(_prefix, _uri)

_URI_TO_PREFIX: dict[str, str] = {uri: prefix for prefix, uri in PREFIXES.items()}


def qname(uri: str | None, name: str) -> str:
    """
    Clark-notation tag for name in uri.

    A "prefix:" on name is dropped; the serialized prefix comes from the
    registered namespace map.
    """
    local = name.rpartition(":")[2]
    if not uri:
        return local
    return f"{{{uri}}}{local}"


def prefixed_name(tag: str) -> str:
    """Return "gd:when"-style name for a Clark-notation tag, when the namespace is known."""
    if not tag.startswith("{"):
        return tag
    uri, _, local = tag[1:].partition("}")
    prefix = _URI_TO_PREFIX.get(uri)
    return f"{prefix}:{local}" if prefix else local
