"""halns: name-space registry for HAL link relation CURIEs.

Main modules:
- namespaces: NamespaceRegistry, compacting URIs to CURIEs and back
- prefixes: registries built from RDF prefix maps and rdflib graphs
- models: pydantic models for name-space entries and HAL curies
- config: environment settings and YAML name-space files
"""

from .config import NamespaceConfigError, load_namespaces
from .models import Namespace, NamespaceDocument, to_curies
from .namespaces import REL, NamespaceRegistry
from .prefixes import STANDARD_PREFIXES, registry_from_graph, registry_from_prefixes

# Import version information
from .version import VERSION

__all__ = [
    "REL",
    "STANDARD_PREFIXES",
    "VERSION",
    "Namespace",
    "NamespaceConfigError",
    "NamespaceDocument",
    "NamespaceRegistry",
    "load_namespaces",
    "registry_from_graph",
    "registry_from_prefixes",
    "to_curies",
]
