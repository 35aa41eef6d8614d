"""Configuration loaded from environment variables and YAML files."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional, Union

import yaml
from pydantic import ValidationError

from halns.models import NamespaceDocument
from halns.namespaces import NamespaceRegistry

logger = logging.getLogger(__name__)


class NamespaceConfigError(ValueError):
    """A name-space file could not be read or is malformed."""


class Config:
    """Default configuration."""

    # YAML file with a top-level ``namespaces`` key ("" = none)
    NAMESPACES_FILE = os.getenv("HALNS_NAMESPACES_FILE", "")

    LOG_LEVEL = (os.getenv("HALNS_LOG_LEVEL") or "WARNING").upper()


class TestConfig(Config):
    """Configuration overrides for testing."""

    NAMESPACES_FILE = ""
    LOG_LEVEL = "DEBUG"


def load_namespaces(
    path: Union[str, Path],
    registry: Optional[NamespaceRegistry] = None,
) -> NamespaceRegistry:
    """Populate a registry from a YAML name-space file.

    The file holds a ``namespaces`` key, either a ``name: href`` mapping
    or a list of ``{name, href}`` entries.  Entries are added in file
    order.

    Parameters
    ----------
    path:
        Path to the YAML file.
    registry:
        Registry to add to; a new one is created if omitted.

    Raises
    ------
    NamespaceConfigError
        If the file is missing or unreadable, is not valid UTF-8 YAML,
        or does not match the expected layout.
    """
    path = Path(path)
    if not path.exists():
        logger.error("Namespace file not found: %s", path)
        raise NamespaceConfigError(f"Namespace file not found: {path}")

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        logger.error("YAML Error loading %s: %s", path, e)
        raise NamespaceConfigError(f"Invalid YAML in {path}: {e}") from e
    except (UnicodeDecodeError, OSError) as e:
        logger.error("Cannot read %s: %s", path, e)
        raise NamespaceConfigError(f"Cannot read namespace file {path}: {e}") from e

    if not isinstance(data, dict):
        raise NamespaceConfigError(
            f"Expected a mapping at the top of {path}, got {type(data).__name__}"
        )

    try:
        document = NamespaceDocument.model_validate(
            {"namespaces": data.get("namespaces")}
        )
    except ValidationError as e:
        logger.error("Invalid namespace file %s: %s", path, e)
        raise NamespaceConfigError(f"Invalid namespace file {path}: {e}") from e

    logger.info("Loaded %d namespaces from %s", len(document.namespaces), path)
    return document.to_registry(registry)


def registry_from_config(
    config: type[Config] = Config,
    path: Optional[Union[str, Path]] = None,
) -> NamespaceRegistry:
    """Registry from *path*, else the configured name-space file.

    An empty registry is returned when neither is set.
    """
    path = path or config.NAMESPACES_FILE
    if not path:
        return NamespaceRegistry()
    return load_namespaces(path)
