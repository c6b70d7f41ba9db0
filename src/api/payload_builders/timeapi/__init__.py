"""Payload builders timeapi.io (conversão, tradução e cálculos)."""

from api.payload_builders.timeapi.calculation import (
    build_calculation_body,
    build_conversion_body,
    build_translation_body,
    normalize_dst_ambiguity,
)

__all__ = [
    "build_calculation_body",
    "build_conversion_body",
    "build_translation_body",
    "normalize_dst_ambiguity",
]
