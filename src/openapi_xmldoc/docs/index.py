"""XML documentation members, indexed by canonical member name.

Documentation files look like::

    <doc>
      <members>
        <member name="M:Acme.Widgets.WidgetController.Get(System.Int32)">
          <summary>Gets a widget</summary>
          <param name="id" example="42">The widget id</param>
          <response code="404">Widget not found</response>
        </member>
      </members>
    </doc>
"""

import xml.etree.ElementTree as ET
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import Iterable, Iterator, Mapping
from xml.sax.saxutils import escape

from loguru import logger

from openapi_xmldoc.docs.text import humanize
from openapi_xmldoc.errors import DocumentationSourceError


@dataclass(frozen=True)
class DocNode:
    """Read-only accessor over one XML element."""

    element: ET.Element

    @property
    def name(self) -> str:
        return self.attribute("name")

    def attribute(self, name: str) -> str:
        return self.element.get(name, "")

    def child(self, name: str) -> "DocNode | None":
        found = self.element.find(name)
        return DocNode(found) if found is not None else None

    def children(self, name: str) -> list["DocNode"]:
        return [DocNode(e) for e in self.element.findall(name)]

    def find_child(self, name: str, attribute: str, value: str) -> "DocNode | None":
        """First child called ``name`` whose ``attribute`` equals ``value``."""
        for node in self.children(name):
            if node.attribute(attribute) == value:
                return node
        return None

    @property
    def text(self) -> str:
        """All descendant text, markup removed."""
        return "".join(self.element.itertext()).strip()

    @property
    def inner_xml(self) -> str:
        """Markup between the element tags, with text left escaped."""
        parts = [escape(self.element.text or "")]
        parts.extend(ET.tostring(child, encoding="unicode") for child in self.element)
        return "".join(parts)

    def humanized(self) -> str:
        return humanize(self.inner_xml)


class DocIndex:
    """Immutable mapping from member name to its documentation node.

    Later members with the same name replace earlier ones.
    """

    def __init__(self, members: Mapping[str, DocNode]):
        self._members = MappingProxyType(dict(members))

    @classmethod
    def build(cls, nodes: Iterable[DocNode]) -> "DocIndex":
        members: dict[str, DocNode] = {}
        for node in nodes:
            members[node.name] = node
        return cls(members)

    @classmethod
    def from_xml(cls, *sources: str) -> "DocIndex":
        """Build an index from one or more XML documents, later sources winning."""
        return cls.build(node for source in sources for node in _member_nodes(source))

    @classmethod
    def load(cls, *file_paths: Path) -> "DocIndex":
        sources = []
        for file_path in file_paths:
            try:
                sources.append(file_path.read_text(encoding="utf-8"))
            except OSError as e:
                raise DocumentationSourceError(f"Cannot read {file_path}: {e}") from e
        index = cls.from_xml(*sources)
        logger.info("Indexed {} documented members from {} file(s)", len(index), len(file_paths))
        return index

    def lookup(self, identifier: str | None) -> DocNode | None:
        if identifier is None:
            return None
        node = self._members.get(identifier)
        if node is None:
            logger.debug("No documentation for {}", identifier)
        return node

    def __contains__(self, identifier: object) -> bool:
        return identifier in self._members

    def __len__(self) -> int:
        return len(self._members)

    def __iter__(self) -> Iterator[str]:
        return iter(self._members)


def _member_nodes(source: str) -> list[DocNode]:
    try:
        root = ET.fromstring(source)
    except ET.ParseError as e:
        raise DocumentationSourceError(f"Invalid XML documentation: {e}") from e
    return [DocNode(member) for member in root.iterfind("members/member")]
