"""Name-space registry for compact URIs (CURIEs).

A registry maps a short *name* to a URI *template* holding the
``{rel}`` placeholder.  It answers two questions:

- :meth:`NamespaceRegistry.compact` — which CURIE stands for this URI?
- :meth:`NamespaceRegistry.expand` — which URI does this CURIE stand for?

Both are plain string operations.  No match is answered with ``None``.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterator, Mapping
from typing import Optional

logger = logging.getLogger(__name__)

#: Placeholder marking where the CURIE argument goes inside a template.
REL = "{rel}"


def split_template(template: str) -> Optional[tuple[str, str]]:
    """Split *template* around its first placeholder.

    Returns ``(left, right)`` or ``None`` when the template has no
    placeholder.
    """
    index = template.find(REL)
    if index < 0:
        return None
    return template[:index], template[index + len(REL):]


class NamespaceRegistry:
    """Registry of CURIE name-spaces.

    Lookups walk the templates in insertion order, so when several
    templates match the same URI the first one registered wins.
    Re-registering a name replaces its template but keeps its position.

    Writers serialise on a lock and publish a fresh mapping; readers
    use whichever mapping is current when they start.
    """

    def __init__(self, templates: Optional[Mapping[str, str]] = None) -> None:
        self._lock = threading.Lock()
        self._templates: dict[str, str] = dict(templates or {})

    # -- registration ---------------------------------------------------

    def add(self, name: str, template: str) -> NamespaceRegistry:
        """Add a name-space to this registry.

        Parameters
        ----------
        name:
            Prefix used before the colon in CURIEs.
        template:
            Expanded reference containing ``{rel}`` where the CURIE
            argument is substituted.  A template without the placeholder
            is kept but never matches.

        Returns
        -------
        NamespaceRegistry
            ``self``, so calls can be chained.
        """
        if REL not in template:
            logger.debug("Template for %r has no %s placeholder", name, REL)
        with self._lock:
            templates = dict(self._templates)
            templates[name] = template
            self._templates = templates
        return self

    # -- queries --------------------------------------------------------

    def compact(self, uri: str) -> Optional[str]:
        """Convert an expanded reference to its CURIE.

        Parameters
        ----------
        uri:
            Full reference, compared literally against each template.

        Returns
        -------
        str or None
            ``name:value`` for the first matching template, or ``None``.
        """
        for name, template in self._templates.items():
            parts = split_template(template)
            if parts is None:
                continue
            left, right = parts
            # left and right must not overlap inside uri
            if len(uri) < len(left) + len(right):
                continue
            if uri.startswith(left) and uri.endswith(right):
                value = uri[len(left):len(uri) - len(right)]
                return f"{name}:{value}"
        return None

    def expand(self, curie: str) -> Optional[str]:
        """Convert a CURIE to its expanded reference.

        The name is everything before the first colon; everything after
        it replaces the first ``{rel}`` of the named template.

        Returns ``None`` when there is no colon, the name is unknown, or
        its template has no placeholder.
        """
        name, sep, arg = curie.partition(":")
        if not sep:
            return None
        template = self._templates.get(name)
        if template is None:
            return None
        if REL not in template:
            return None
        return template.replace(REL, arg, 1)

    # -- introspection --------------------------------------------------

    @property
    def namespaces(self) -> dict[str, str]:
        """Copy of the registered templates, keyed by name."""
        return dict(self._templates)

    def get(self, name: str) -> Optional[str]:
        return self._templates.get(name)

    def __contains__(self, name: object) -> bool:
        return name in self._templates

    def __len__(self) -> int:
        return len(self._templates)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._templates))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._templates!r})"
