"""Fluent builder of ElementTree elements for Atom/GData entries."""

from __future__ import annotations

from enum import Enum
from typing import Optional, Union
from xml.etree import ElementTree as ET

from gdriveconnect.errors import InvalidStateError
from gdriveconnect.util.text import has_text

from .namespaces import ATOM_NS, GDATA_NS, KIND_SCHEME, qname


class ElementBuilder:
    """
    Builds one XML element and its subtree.

    Optional string values that are None or blank are skipped rather than
    rejected, so entries with optional fields can be built without checks
    at the call site. `set_value`, `set_category_kind` and
    `add_namespaced_attribute` always write.

    `get_element()` hands the element over to the caller: afterwards the
    builder is spent and any further call raises InvalidStateError.
    Children and attributes keep the order in which they were added.
    """

    def __init__(self, name: str, uri: str) -> None:
        self._element: Optional[ET.Element] = ET.Element(qname(uri, name))

    @classmethod
    def new_atom_entry_builder(cls) -> "ElementBuilder":
        return cls("entry", ATOM_NS)

    @classmethod
    def new_gdata_element_builder(cls, name: str) -> "ElementBuilder":
        return cls(f"gd:{name}", GDATA_NS)

    @property
    def consumed(self) -> bool:
        return self._element is None

    def get_element(self) -> ET.Element:
        element = self._live()
        self._element = None
        return element

    def add_element(self, child: "ElementBuilder") -> "ElementBuilder":
        """Append child's element as the last child; child is consumed."""
        element = self._live()
        if child is self:
            raise InvalidStateError("ElementBuilder cannot be added to itself")
        element.append(child.get_element())
        return self

    def add_namespaced_attribute(
        self,
        namespace: str,
        name: str,
        value: str,
    ) -> "ElementBuilder":
        self._live().set(qname(namespace, name), value if value is not None else "")
        return self

    def add_attribute(self, name: str, value: Union[str, bool, None]) -> "ElementBuilder":
        """Set an attribute; booleans become "true"/"false", blank strings are skipped."""
        element = self._live()
        if isinstance(value, bool):
            element.set(name, "true" if value else "false")
        elif has_text(value):
            element.set(name, value)
        return self

    def add_enum_element(
        self,
        namespace: str,
        name: str,
        value: Optional[Enum],
    ) -> "ElementBuilder":
        """Append <name>value.name.lower()</name>; None is skipped."""
        element = self._live()
        if value is not None:
            child = ET.SubElement(element, qname(namespace, name))
            child.text = value.name.lower()
        return self

    def add_simple_atom_element(self, name: str, value: Optional[str]) -> "ElementBuilder":
        return self._add_text_element(ATOM_NS, name, value)

    def add_gdata_element(self, name: str, value: Optional[str]) -> "ElementBuilder":
        return self._add_text_element(GDATA_NS, f"gd:{name}", value)

    def set_title(self, title: Optional[str]) -> "ElementBuilder":
        return self.add_simple_atom_element("title", title)

    def set_rel(self, rel: Optional[str]) -> "ElementBuilder":
        return self.add_attribute("rel", rel)

    def set_href(self, href: Optional[str]) -> "ElementBuilder":
        return self.add_attribute("href", href)

    def set_value(self, value: str) -> "ElementBuilder":
        """Append value as text after the current last child."""
        element = self._live()
        text = value if value is not None else ""
        if len(element):
            last = element[-1]
            last.tail = (last.tail or "") + text
        else:
            element.text = (element.text or "") + text
        return self

    def set_category_kind(self, term: str) -> "ElementBuilder":
        element = self._live()
        category = ET.SubElement(element, qname(ATOM_NS, "category"))
        category.set("scheme", KIND_SCHEME)
        category.set("term", term if term is not None else "")
        return self

    def _add_text_element(
        self,
        uri: str,
        name: str,
        value: Optional[str],
    ) -> "ElementBuilder":
        element = self._live()
        if has_text(value):
            child = ET.SubElement(element, qname(uri, name))
            child.text = value
        return self

    def _live(self) -> ET.Element:
        if self._element is None:
            raise InvalidStateError(
                "ElementBuilder was already finalized by get_element()"
            )
        return self._element


def new_atom_entry_builder() -> ElementBuilder:
    return ElementBuilder.new_atom_entry_builder()


def new_gdata_element_builder(name: str) -> ElementBuilder:
    return ElementBuilder.new_gdata_element_builder(name)


def to_xml(element: ET.Element) -> bytes:
    """Serialize a built element as UTF-8 XML (no declaration)."""
    return ET.tostring(element, encoding="utf-8")
