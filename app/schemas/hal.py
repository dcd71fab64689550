"""
==============================================================================
HAL Schemas Module
==============================================================================

Pydantic models for HAL (Hypertext Application Language) documents.

This module implements:
- Link: A single HAL link object
- LinkRelations: Curie registry that shortens custom relation URIs
- LinksBuilder: Fluent builder for the ``_links`` section
- HalDocument: Base document with ``_links`` and ``_embedded``

Document Shape:
--------------
{
  "title": "...",
  "_links": {
    "self": {"href": "/api/products/42"},
    "curies": [{"href": "http://example.com/rels/{rel}", "name": "ex", "templated": true}],
    "ex:product": [{"href": "/api/products/42", "title": "..."}]
  },
  "_embedded": {
    "ex:product": [{...}]
  }
}

==============================================================================
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


APPLICATION_HAL_JSON = "application/hal+json"

REL_SELF = "self"
REL_CURIES = "curies"


class Link(BaseModel):
    """
    HAL link object.

    Only ``href`` is required; unset attributes are left out of the
    serialized document.
    """

    model_config = ConfigDict(frozen=True)

    href: str = Field(..., min_length=1)
    templated: Optional[bool] = None
    type: Optional[str] = None
    title: Optional[str] = None
    name: Optional[str] = None

    @classmethod
    def self_link(cls, href: str) -> "Link":
        return cls(href=href)

    @classmethod
    def templated_link(
        cls,
        href: str,
        title: Optional[str] = None,
        type: Optional[str] = APPLICATION_HAL_JSON
    ) -> "Link":
        """Create a link whose href is an RFC 6570 URI template."""
        return cls(href=href, templated=True, title=title, type=type)

    @classmethod
    def curi(cls, name: str, rel_template: str) -> "Link":
        """Create a curie link for the ``curies`` relation."""
        return cls(href=rel_template, name=name, templated=True)


class LinkRelations:
    """
    Registry of curies used to compact custom link-relation URIs.

    Example:
        >>> rels = LinkRelations({"ex": "http://example.com/rels/{rel}"})
        >>> rels.resolve("http://example.com/rels/product")
        'ex:product'
        >>> rels.expand("ex:product")
        'http://example.com/rels/product'
    """

    def __init__(self, curies: Optional[Dict[str, str]] = None) -> None:
        self._curies: Dict[str, str] = dict(curies or {})

    @property
    def curies(self) -> List[Link]:
        """Curie links in registration order."""
        return [Link.curi(name, template) for name, template in self._curies.items()]

    def uri(self, name: str, rel: str) -> str:
        """Expand a short relation name with the template registered as ``name``."""
        return self._curies[name].replace("{rel}", rel)

    def resolve(self, rel: str) -> str:
        """
        Compact a full relation URI into curied form.

        Relations not covered by any curie are returned unchanged.
        """
        for name, template in self._curies.items():
            prefix, _, suffix = template.partition("{rel}")
            if (
                rel.startswith(prefix)
                and rel.endswith(suffix)
                and len(rel) > len(prefix) + len(suffix)
            ):
                short = rel[len(prefix):len(rel) - len(suffix)]
                return f"{name}:{short}"
        return rel

    def expand(self, rel: str) -> str:
        """Expand a curied relation into the full URI; others are returned unchanged."""
        name, sep, short = rel.partition(":")
        if sep and name in self._curies:
            return self.uri(name, short)
        return rel


class LinksBuilder:
    """
    Fluent builder for the ``_links`` section of a HAL document.

    Relations added with ``with_link`` render as a single link object,
    those added with ``with_links`` always render as an array. An empty
    list adds no relation. Custom relation URIs are compacted through
    the LinkRelations registry, and a ``curies`` array is emitted when
    any curie is registered.
    """

    def __init__(self, relations: Optional[LinkRelations] = None) -> None:
        self._relations = relations or LinkRelations()
        self._links: Dict[str, Union[Link, List[Link]]] = {}

    def with_link(self, rel: str, link: Link) -> "LinksBuilder":
        self._links[self._relations.resolve(rel)] = link
        return self

    def with_links(self, rel: str, links: List[Link]) -> "LinksBuilder":
        if not links:
            return self
        key = self._relations.resolve(rel)
        existing = self._links.get(key)
        if isinstance(existing, list):
            existing.extend(links)
        else:
            self._links[key] = list(links)
        return self

    def build(self) -> Dict[str, Union[Link, List[Link]]]:
        links = dict(self._links)
        curies = self._relations.curies
        if curies:
            links[REL_CURIES] = curies
        return links


class HalDocument(BaseModel):
    """
    Base HAL document.

    Subclasses add their own attributes as regular fields. Embedded
    documents are stored already serialized, keyed by relation.
    """

    model_config = ConfigDict(populate_by_name=True)

    links: Dict[str, Union[Link, List[Link]]] = Field(
        default_factory=dict,
        alias="_links"
    )
    embedded: Optional[Dict[str, List[Dict[str, Any]]]] = Field(
        default=None,
        alias="_embedded"
    )

    def to_json(self) -> Dict[str, Any]:
        """Serialize to a JSON-compatible dict using HAL property names."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
