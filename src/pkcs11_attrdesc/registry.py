"""
Sorted, read-only registry of PKCS#11 attribute descriptors.

Names are ordered and searched under ASCII-only case folding, which must
match the order the attribute table was generated in.
"""

import logging
import string
from bisect import bisect_left
from typing import Iterable, Iterator

from .models import AttributeDescriptor


logger = logging.getLogger("pkcs11-attrdesc")

_ASCII_FOLD = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


class AttributeRegistryError(Exception):
    """Base error for attribute registry failures."""
    pass


class RegistryInvariantViolation(AttributeRegistryError):
    """Attribute table holds duplicate or out-of-order names."""
    pass


def fold_name(name: str) -> str:
    """Fold A-Z to a-z, leaving every other character untouched.

    Unlike ``str.lower()`` or ``str.casefold()`` this never touches
    non-ASCII characters, so "İ" and "ı" stay distinct from "i".
    """
    return name.translate(_ASCII_FOLD)


def compare_names(a: str, b: str) -> int:
    """Compare two attribute names ignoring ASCII case.

    Returns:
        Negative if ``a`` sorts before ``b``, zero if they are equal ignoring
        case, positive otherwise. A proper prefix sorts first.
    """
    folded_a = fold_name(a)
    folded_b = fold_name(b)
    return (folded_a > folded_b) - (folded_a < folded_b)


class AttributeRegistry:
    """Immutable attribute table ordered by case-insensitive name.

    Construction validates the table: names must be unique ignoring case.
    With ``require_sorted=True`` the input must also already be in order,
    otherwise it is sorted once here.

    Example:
        >>> registry = AttributeRegistry([
        ...     AttributeDescriptor(name="CKA_TOKEN", code=0x01),
        ...     AttributeDescriptor(name="CKA_CLASS", code=0x00),
        ... ])
        >>> [d.name for d in registry]
        ['CKA_CLASS', 'CKA_TOKEN']
        >>> registry.find("cka_token").code
        1
    """

    def __init__(
        self,
        descriptors: Iterable[AttributeDescriptor] = (),
        *,
        require_sorted: bool = False,
        revision: str | None = None,
    ) -> None:
        entries = list(descriptors)
        keys = [fold_name(d.name) for d in entries]

        if not require_sorted:
            order = sorted(range(len(entries)), key=keys.__getitem__)
            entries = [entries[i] for i in order]
            keys = [keys[i] for i in order]

        for index in range(1, len(keys)):
            previous, current = keys[index - 1], keys[index]
            if previous == current:
                message = (
                    f"duplicate attribute name {entries[index].name!r} "
                    f"(clashes with {entries[index - 1].name!r})"
                )
                logger.error(message)
                raise RegistryInvariantViolation(message)
            if previous > current:
                message = (
                    f"attribute {entries[index].name!r} at position {index} "
                    f"sorts before {entries[index - 1].name!r}"
                )
                logger.error(message)
                raise RegistryInvariantViolation(message)

        self._entries: tuple[AttributeDescriptor, ...] = tuple(entries)
        self._keys: tuple[str, ...] = tuple(keys)
        self.revision = revision

    compare = staticmethod(compare_names)

    def find(self, name: str) -> AttributeDescriptor | None:
        """Binary search for ``name`` ignoring ASCII case.

        Args:
            name: Attribute name to look up

        Returns:
            The matching descriptor, or None when no entry matches

        Raises:
            TypeError: If name is not a str
        """
        if not isinstance(name, str):
            raise TypeError(f"attribute name must be str, not {type(name).__name__}")

        key = fold_name(name)
        index = bisect_left(self._keys, key)
        if index < len(self._keys) and self._keys[index] == key:
            return self._entries[index]
        return None

    def __len__(self) -> int:
        return len(self._entries)

    def __getitem__(self, index: int) -> AttributeDescriptor:
        return self._entries[index]

    def __iter__(self) -> Iterator[AttributeDescriptor]:
        return iter(self._entries)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.find(name) is not None

    def __repr__(self) -> str:
        return f"AttributeRegistry(size={len(self)}, revision={self.revision!r})"
