"""
Pydantic models for name-space entries.

The serialised form of :class:`Namespace` is a HAL ``curies`` entry::

    {"name": "ex", "href": "http://example.com/rels/{rel}", "templated": true}
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from halns.namespaces import REL, NamespaceRegistry


class Namespace(BaseModel):
    """A single named template."""

    name: str = Field(..., min_length=1, description="CURIE prefix")
    href: str = Field(..., description="Template containing {rel}")
    templated: bool = Field(True, description="Whether href holds the placeholder")

    model_config = ConfigDict(extra="forbid")

    @model_validator(mode="after")
    def derive_templated(self) -> "Namespace":
        """Set ``templated`` from ``href`` and reject a contradicting value."""
        templated = REL in self.href
        if "templated" not in self.model_fields_set:
            self.templated = templated
        elif self.templated != templated:
            raise ValueError(
                f"templated={self.templated} does not match href {self.href!r}"
            )
        return self

    @classmethod
    def from_template(cls, name: str, template: str) -> "Namespace":
        return cls(name=name, href=template, templated=REL in template)


class NamespaceDocument(BaseModel):
    """An ordered collection of name-spaces."""

    namespaces: List[Namespace] = Field(default_factory=list)

    model_config = ConfigDict(extra="forbid")

    @field_validator("namespaces", mode="before")
    @classmethod
    def coerce_mapping(cls, v: Any) -> Any:
        """Accept ``{name: href}`` as well as a list of entries."""
        if v is None:
            return []
        if isinstance(v, dict):
            return [{"name": name, "href": href} for name, href in v.items()]
        return v

    @classmethod
    def from_registry(cls, registry: NamespaceRegistry) -> "NamespaceDocument":
        return cls(
            namespaces=[
                Namespace.from_template(name, template)
                for name, template in registry.namespaces.items()
            ]
        )

    def to_registry(self, registry: Optional[NamespaceRegistry] = None) -> NamespaceRegistry:
        """Add the entries, in order, to *registry* (or a new one)."""
        if registry is None:
            registry = NamespaceRegistry()
        for ns in self.namespaces:
            registry.add(ns.name, ns.href)
        return registry

    def to_dict(self) -> Dict[str, str]:
        """Convert to a plain ``name -> href`` mapping."""
        return {ns.name: ns.href for ns in self.namespaces}


def to_curies(registry: NamespaceRegistry) -> List[Dict[str, Any]]:
    """Export *registry* as a list of HAL ``curies`` entries."""
    return [ns.model_dump() for ns in NamespaceDocument.from_registry(registry).namespaces]
