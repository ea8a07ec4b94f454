"""
PKCS#11 attribute name resolution (CKA_* name -> CK_ATTRIBUTE_TYPE).

Case-insensitive binary search over the attribute table generated from
the PKCS#11 header.
"""

from .loader import (
    RegistryLoadError,
    default_registry,
    load_registry,
    load_table,
    reset_default_registry,
)
from .models import AttributeDescriptor, AttributeTable
from .registry import (
    AttributeRegistry,
    AttributeRegistryError,
    RegistryInvariantViolation,
    compare_names,
    fold_name,
)
from .resolver import NOT_FOUND, AttributeNameResolver, get_attribute_type_from_name

try:
    from importlib.metadata import version as _get_version
    __version__ = _get_version("pkcs11-attrdesc")
except Exception:
    __version__ = "0.1.0"  # Fallback if metadata unavailable
__all__ = [
    "NOT_FOUND",
    "AttributeDescriptor",
    "AttributeNameResolver",
    "AttributeRegistry",
    "AttributeRegistryError",
    "AttributeTable",
    "RegistryInvariantViolation",
    "RegistryLoadError",
    "compare_names",
    "default_registry",
    "fold_name",
    "get_attribute_type_from_name",
    "load_registry",
    "load_table",
    "reset_default_registry",
]
