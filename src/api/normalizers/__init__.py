"""Normalizers — conversão de payloads externos para o output dos entrypoints.

Estrutura:
- timeapi/: hora atual, consultas de dia e pass-through
"""

from .timeapi import normalize_current_time, normalize_day_of_week, normalize_day_of_year

__all__ = [
    "normalize_current_time",
    "normalize_day_of_week",
    "normalize_day_of_year",
]
