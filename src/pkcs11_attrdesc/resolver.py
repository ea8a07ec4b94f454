"""
Attribute name to attribute type resolution.
"""

from .loader import default_registry
from .models import AttributeDescriptor, CK_ULONG_MAX
from .registry import AttributeRegistry


NOT_FOUND = CK_ULONG_MAX


class AttributeNameResolver:
    """Resolves PKCS#11 attribute names to their CK_ATTRIBUTE_TYPE codes.

    Matching ignores ASCII case only; no trimming, no partial matches.
    Lookups are pure and safe to call from any number of threads.

    Example:
        >>> resolver = AttributeNameResolver()
        >>> resolver.resolve("cka_label")
        3
        >>> resolver.resolve("CKA_DOES_NOT_EXIST") is None
        True
        >>> hex(resolver.resolve_code("CKA_DOES_NOT_EXIST"))
        '0xffffffff'
    """

    def __init__(self, registry: AttributeRegistry | None = None) -> None:
        """Initialize against ``registry``, or the default registry if omitted."""
        self._registry = registry if registry is not None else default_registry()

    @property
    def registry(self) -> AttributeRegistry:
        """The registry this resolver searches."""
        return self._registry

    def lookup(self, name: str) -> AttributeDescriptor | None:
        """Return the descriptor matching ``name``, or None."""
        return self._registry.find(name)

    def resolve(self, name: str) -> int | None:
        """Return the attribute type for ``name``, or None if unknown."""
        descriptor = self._registry.find(name)
        if descriptor is None:
            return None
        return descriptor.code

    def resolve_code(self, name: str) -> int:
        """Return the attribute type for ``name``, or NOT_FOUND (0xFFFFFFFF)."""
        code = self.resolve(name)
        return NOT_FOUND if code is None else code

    def __contains__(self, name: object) -> bool:
        return name in self._registry


def get_attribute_type_from_name(name: str) -> int:
    """Resolve ``name`` against the default registry, NOT_FOUND on a miss."""
    return AttributeNameResolver().resolve_code(name)
