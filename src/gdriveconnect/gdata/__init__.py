"""Atom/GData request body construction."""

from __future__ import annotations

from .element_builder import (
    ElementBuilder,
    new_atom_entry_builder,
    new_gdata_element_builder,
    to_xml,
)
from .namespaces import (
    APP_NS,
    ATOM_NS,
    BATCH_NS,
    GCAL_NS,
    GCONTACT_NS,
    GDATA_NS,
    KIND_SCHEME,
    OPENSEARCH_NS,
    prefixed_name,
    qname,
)

__all__ = [
    "ElementBuilder",
    "new_atom_entry_builder",
    "new_gdata_element_builder",
    "to_xml",
    "ATOM_NS",
    "GDATA_NS",
    "APP_NS",
    "OPENSEARCH_NS",
    "BATCH_NS",
    "GCAL_NS",
    "GCONTACT_NS",
    "KIND_SCHEME",
    "qname",
    "prefixed_name",
]
