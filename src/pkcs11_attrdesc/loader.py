"""
Loading attribute tables from YAML and the shared default registry.
"""

import logging
import os
import threading
from importlib import resources
from importlib.resources.abc import Traversable
from pathlib import Path

import yaml
from pydantic import ValidationError

from .models import AttributeTable
from .registry import AttributeRegistry, AttributeRegistryError


logger = logging.getLogger("pkcs11-attrdesc")

TABLE_ENV_VAR = "PKCS11_ATTRDESC_TABLE"

_default_registry: AttributeRegistry | None = None
_default_lock = threading.Lock()


class RegistryLoadError(AttributeRegistryError):
    """Attribute table file could not be parsed or validated."""
    pass


def packaged_table() -> Traversable:
    """Return the attribute table resource shipped with the package.

    The resource need not be a file on disk (e.g. zip imports); open it
    through ``importlib.resources.as_file`` to get a real path.
    """
    return resources.files("pkcs11_attrdesc") / "data" / "attributes.yaml"


def load_table(path: str | Path) -> AttributeTable:
    """Parse and validate an attribute table document.

    Args:
        path: Path to YAML file

    Raises:
        FileNotFoundError: If the YAML file doesn't exist
        RegistryLoadError: If the YAML is malformed or fails validation
    """
    with open(path, "r", encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise RegistryLoadError(f"{path}: invalid YAML: {e}") from e

    if not isinstance(data, dict) or "attributes" not in data:
        raise RegistryLoadError(f"{path}: table must contain an 'attributes' key")

    try:
        return AttributeTable.model_validate(data)
    except ValidationError as e:
        raise RegistryLoadError(f"{path}: invalid attribute table: {e}") from e


def load_registry(path: str | Path) -> AttributeRegistry:
    """Build a registry from a pre-sorted YAML table.

    Raises:
        FileNotFoundError: If the YAML file doesn't exist
        RegistryLoadError: If the YAML is malformed or fails validation
        RegistryInvariantViolation: If names are duplicated or out of order
    """
    table = load_table(path)
    registry = AttributeRegistry(table.attributes, require_sorted=True, revision=table.revision)
    logger.debug(
        f"Loaded {len(registry)} attribute descriptors from {path} "
        f"(revision {table.revision or 'unknown'})"
    )
    return registry


def default_registry() -> AttributeRegistry:
    """Return the process-wide registry, building it on first use.

    The table comes from ``$PKCS11_ATTRDESC_TABLE`` when set, otherwise
    from the table packaged with this module. Initialization runs at most
    once; later calls return the same object without locking.
    """
    global _default_registry

    registry = _default_registry
    if registry is not None:
        return registry

    with _default_lock:
        if _default_registry is None:
            override = os.environ.get(TABLE_ENV_VAR)
            if override:
                logger.debug(f"Using attribute table from {TABLE_ENV_VAR}={override}")
                _default_registry = load_registry(Path(override))
            else:
                with resources.as_file(packaged_table()) as path:
                    _default_registry = load_registry(path)
        return _default_registry


def reset_default_registry() -> None:
    """Forget the cached default registry so the next call rebuilds it."""
    global _default_registry

    with _default_lock:
        _default_registry = None
