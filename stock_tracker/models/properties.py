"""
Name -> field lookup for editable record properties
"""
from enum import Enum
from typing import Dict, TypeVar

from stock_tracker.core.exceptions import InvalidInputError

P = TypeVar("P", bound=Enum)


def normalize_property_name(name: str) -> str:
    return name.strip().lower().replace("_", "-")


def lookup_property(name: str, aliases: Dict[str, P], kind: str) -> P:
    """
    Resolve a user supplied property name

    Args:
        name: Raw property name, any case, dashes or underscores
        aliases: Normalized name -> property
        kind: Record kind used in the error message ("user", "stock")

    Raises:
        InvalidInputError: If the name is unknown
    """
    try:
        return aliases[normalize_property_name(name)]
    except KeyError:
        known = ", ".join(sorted({p.value for p in aliases.values()}))
        raise InvalidInputError(
            f"Property {name!r} not recognized for {kind}. Choose from: {known}"
        ) from None


def build_aliases(table: Dict[P, tuple]) -> Dict[str, P]:
    return {alias: prop for prop, names in table.items() for alias in names}
