from gust.variants.resolver import ResolvedClass, resolve, split_important
from gust.variants.tokens import (
    STATIC_VARIANT_NAMES,
    VariantKind,
    VariantToken,
    lookup_variant,
)

__all__ = [
    "ResolvedClass",
    "STATIC_VARIANT_NAMES",
    "VariantKind",
    "VariantToken",
    "lookup_variant",
    "resolve",
    "split_important",
]
