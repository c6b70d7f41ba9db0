"""Normalizers timeapi.io — payload decodificado → output do entrypoint.

Todo output inclui `source` com a URL exata invocada.
"""

from api.normalizers.timeapi.current_time import COMPONENT_FIELDS, normalize_current_time
from api.normalizers.timeapi.day_lookup import (
    DAY_OF_WEEK_MATCHERS,
    DAY_OF_YEAR_MATCHERS,
    normalize_day_of_week,
    normalize_day_of_year,
)
from api.normalizers.timeapi.matchers import PayloadMatcher, match_payload
from api.normalizers.timeapi.passthrough import list_with_count, text_status, with_source

__all__ = [
    "COMPONENT_FIELDS",
    "DAY_OF_WEEK_MATCHERS",
    "DAY_OF_YEAR_MATCHERS",
    "PayloadMatcher",
    "list_with_count",
    "match_payload",
    "normalize_current_time",
    "normalize_day_of_week",
    "normalize_day_of_year",
    "text_status",
    "with_source",
]
