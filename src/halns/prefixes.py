"""Build registries from RDF prefix maps.

A prefix map binds a prefix to a namespace IRI, e.g. ``foaf`` to
``http://xmlns.com/foaf/0.1/``.  Appending ``{rel}`` to the namespace
turns it into a template, so ``foaf:name`` expands the same way an RDF
toolkit would expand it.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Optional

from rdflib import Graph

from halns.namespaces import REL, NamespaceRegistry

logger = logging.getLogger(__name__)

__all__ = [
    "STANDARD_PREFIXES",
    "registry_from_graph",
    "registry_from_prefixes",
    "template_from_namespace",
]

STANDARD_PREFIXES: dict[str, str] = {
    "rdf": "http://www.w3.org/1999/02/22-rdf-syntax-ns#",
    "rdfs": "http://www.w3.org/2000/01/rdf-schema#",
    "owl": "http://www.w3.org/2002/07/owl#",
    "xsd": "http://www.w3.org/2001/XMLSchema#",
    "skos": "http://www.w3.org/2004/02/skos/core#",
    "dc": "http://purl.org/dc/elements/1.1/",
    "dcterms": "http://purl.org/dc/terms/",
    "foaf": "http://xmlns.com/foaf/0.1/",
    "void": "http://rdfs.org/ns/void#",
    "sh": "http://www.w3.org/ns/shacl#",
    "schema": "https://schema.org/",
    "prov": "http://www.w3.org/ns/prov#",
}


def template_from_namespace(namespace: str) -> str:
    """Return the template for a namespace IRI.

    Examples::

        >>> template_from_namespace("http://xmlns.com/foaf/0.1/")
        'http://xmlns.com/foaf/0.1/{rel}'
    """
    namespace = namespace.strip("<>")
    if REL in namespace:
        return namespace
    return f"{namespace}{REL}"


def registry_from_prefixes(
    prefixes: Mapping[str, str],
    registry: Optional[NamespaceRegistry] = None,
) -> NamespaceRegistry:
    """Add every ``prefix -> namespace`` pair to *registry*.

    A new registry is created when none is given.  Prefixes are added in
    the mapping's order, which is also the order :meth:`compact` tries
    them in.
    """
    if registry is None:
        registry = NamespaceRegistry()
    for prefix, namespace in prefixes.items():
        registry.add(prefix, template_from_namespace(str(namespace)))
    logger.debug("Registered %d prefixes", len(prefixes))
    return registry


def registry_from_graph(
    graph: Graph,
    registry: Optional[NamespaceRegistry] = None,
) -> NamespaceRegistry:
    """Add the namespace bindings of an :class:`rdflib.Graph`.

    The default (empty) prefix is skipped since it cannot appear before
    a CURIE colon in a useful way.
    """
    prefixes = {
        str(prefix): str(namespace)
        for prefix, namespace in graph.namespaces()
        if prefix
    }
    return registry_from_prefixes(prefixes, registry)
