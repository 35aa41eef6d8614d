"""Shared fixtures."""

from __future__ import annotations

import pytest


@pytest.fixture()
def namespaces_file(tmp_path):
    """YAML name-space file in mapping form."""
    path = tmp_path / "namespaces.yaml"
    path.write_text(
        "namespaces:\n"
        '  rel: "http://example.com/rels/{rel}"\n'
        '  x: "http://x.io/{rel}/item"\n'
    )
    return path


@pytest.fixture()
def namespaces_list_file(tmp_path):
    """YAML name-space file in list form."""
    path = tmp_path / "namespaces_list.yaml"
    path.write_text(
        "namespaces:\n"
        "  - name: rel\n"
        '    href: "http://example.com/rels/{rel}"\n'
        "  - name: plain\n"
        '    href: "http://example.com/plain"\n'
        "    templated: false\n"
    )
    return path
