"""
Variant Registry - Look up text variants by name.

Built-in variants register themselves when screentext.variants is
imported; callers add their own with the register_variant decorator.
"""

from typing import Any, Dict, List, Type

from .base import TextVariant


# Variant name -> class
_VARIANTS: Dict[str, Type[TextVariant]] = {}


def register_variant(cls: Type[TextVariant]) -> Type[TextVariant]:
    """
    Class decorator that makes a variant available to create_variant().

    Usage:
        @register_variant
        class TimerVariant(RegionVariant):
            name = "timer"
            ...

    A later registration under the same name replaces the earlier one.
    """
    _VARIANTS[cls.name] = cls
    return cls


def create_variant(name: str, **kwargs: Any) -> TextVariant:
    """
    Instantiate a registered variant.

    Args:
        name: Registered name ("numeric", "word", ...)
        **kwargs: Constructor arguments, usually at least region=Region(...)

    Returns:
        New variant instance

    Raises:
        ValueError: If no variant is registered under name
    """
    try:
        variant_class = _VARIANTS[name]
    except KeyError:
        known = ", ".join(sorted(_VARIANTS))
        raise ValueError(f"Unknown variant: {name}. Available: {known}") from None
    return variant_class(**kwargs)


def available_variants() -> List[str]:
    """Names of all registered variants, in registration order."""
    return list(_VARIANTS)


def get_variant_info() -> List[Dict[str, str]]:
    """Name and description of every registered variant, for help output."""
    return [
        {"name": variant_class.name, "description": variant_class.description}
        for variant_class in _VARIANTS.values()
    ]
