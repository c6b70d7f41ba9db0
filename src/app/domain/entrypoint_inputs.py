"""Contratos de input dos entrypoints.

Os campos usam aliases camelCase (formato do payload recebido) e
nomes snake_case no código. A validação acontece antes de qualquer IO.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

IPV4_PATTERN = (
    r"^((25[0-5]|2[0-4]\d|1\d\d|[1-9]?\d)\.){3}"
    r"(25[0-5]|2[0-4]\d|1\d\d|[1-9]?\d)$"
)
DATE_PATTERN = r"^\d{4}-\d{2}-\d{2}$"
DATE_TIME_PATTERN = r"^\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}$"
TIME_SPAN_PATTERN = r"^\d+:\d{2}:\d{2}:\d{2}(\.\d{1,3})?$"

DstAmbiguity = Literal["", "earlier", "later"]


class EntrypointInput(BaseModel):
    """Base dos contratos: aceita alias ou nome do campo."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class EmptyInput(EntrypointInput):
    """Entrypoints sem parâmetros."""


class TimeZoneInput(EntrypointInput):
    time_zone: str = Field(
        ...,
        alias="timeZone",
        min_length=1,
        description="IANA timezone identifier, e.g. America/Denver.",
    )


class CoordinateInput(EntrypointInput):
    latitude: float = Field(..., ge=-90, le=90, description="Latitude in decimal degrees.")
    longitude: float = Field(..., ge=-180, le=180, description="Longitude in decimal degrees.")


class IpAddressInput(EntrypointInput):
    ip_address: str = Field(
        ...,
        alias="ipAddress",
        pattern=IPV4_PATTERN,
        description="IPv4 address, e.g. 237.71.232.203.",
    )


class _DstAmbiguityMixin(EntrypointInput):
    dst_ambiguity: DstAmbiguity = Field(
        default="",
        alias="dstAmbiguity",
        description="Resolves ambiguous local times at DST transitions (earlier|later).",
    )

    @field_validator("dst_ambiguity", mode="before")
    @classmethod
    def _normalize_dst_ambiguity(cls, value: object) -> object:
        if value is None:
            return ""
        if isinstance(value, str):
            return value.strip().lower()
        return value


class ConversionInput(_DstAmbiguityMixin):
    from_time_zone: str = Field(..., alias="fromTimeZone", min_length=1)
    date_time: str = Field(
        ...,
        alias="dateTime",
        pattern=DATE_TIME_PATTERN,
        description="Local date and time, format yyyy-MM-dd HH:mm:ss.",
    )
    to_time_zone: str = Field(..., alias="toTimeZone", min_length=1)


class TranslationInput(EntrypointInput):
    date_time: str = Field(
        ...,
        alias="dateTime",
        pattern=DATE_TIME_PATTERN,
        description="Date and time, format yyyy-MM-dd HH:mm:ss.",
    )
    language_code: str = Field(
        ...,
        alias="languageCode",
        pattern=r"^[A-Za-z]{2,3}([-_][A-Za-z]{2})?$",
        description="Target language code (2-3 letters, optional region), e.g. de, fil or pt-BR.",
    )


class DateInput(EntrypointInput):
    date: str = Field(..., pattern=DATE_PATTERN, description="Calendar date, format yyyy-MM-dd.")


class CurrentCalculationInput(_DstAmbiguityMixin):
    time_zone: str = Field(..., alias="timeZone", min_length=1)
    time_span: str = Field(
        ...,
        alias="timeSpan",
        pattern=TIME_SPAN_PATTERN,
        description="Span as d:hh:mm:ss with optional .fff, e.g. 16:03:45:17.",
    )


class CustomCalculationInput(CurrentCalculationInput):
    date_time: str = Field(
        ...,
        alias="dateTime",
        pattern=DATE_TIME_PATTERN,
        description="Starting local date and time, format yyyy-MM-dd HH:mm:ss.",
    )


__all__ = [
    "ConversionInput",
    "CoordinateInput",
    "CurrentCalculationInput",
    "CustomCalculationInput",
    "DateInput",
    "EmptyInput",
    "EntrypointInput",
    "IpAddressInput",
    "TimeZoneInput",
    "TranslationInput",
]
