"""Normalizers que repassam o payload decodificado sem reestruturar."""

from __future__ import annotations

from typing import Any


def with_source(payload: Any, *, source: str) -> dict[str, Any]:
    """Anexa a URL invocada ao payload, que segue inalterado em `data`."""
    return {"data": payload, "source": source}


def list_with_count(payload: Any, *, source: str, field_name: str = "timeZones") -> dict[str, Any]:
    """Lista vira `{field_name, count, source}`; outro formato cai em `data`."""
    if isinstance(payload, list):
        return {field_name: payload, "count": len(payload), "source": source}
    return with_source(payload, source=source)


def text_status(text: str, *, source: str) -> dict[str, Any]:
    """Corpo textual (ex: health check) vira `{status, source}`."""
    return {"status": text.strip(), "source": source}
