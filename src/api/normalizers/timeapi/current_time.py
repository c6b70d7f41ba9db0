"""Normalização das consultas de hora atual (zona, coordenada, IP)."""

from __future__ import annotations

from typing import Any

COMPONENT_FIELDS = ("year", "month", "day", "hour", "minute", "seconds", "milliSeconds")


def normalize_current_time(
    payload: Any,
    *,
    source: str,
    fallback_time_zone: str | None = None,
) -> dict[str, Any]:
    """Reestrutura a resposta de hora atual.

    Campos numéricos vão para `components`; data/hora, dia da semana e DST
    ficam no topo. `timeZone` usa o valor do upstream e, na ausência,
    o fallback informado pelo chamador.

    Args:
        payload: JSON decodificado do upstream
        source: URL exata invocada
        fallback_time_zone: Timezone usada quando o upstream omite o campo

    Returns:
        Output do entrypoint
    """
    fields: dict[str, Any] = payload if isinstance(payload, dict) else {}
    time_zone = fields.get("timeZone")
    return {
        "timeZone": time_zone if time_zone is not None else fallback_time_zone,
        "dateTime": fields.get("dateTime"),
        "date": fields.get("date"),
        "time": fields.get("time"),
        "components": {name: fields.get(name) for name in COMPONENT_FIELDS},
        "dayOfWeek": fields.get("dayOfWeek"),
        "dstActive": fields.get("dstActive"),
        "source": source,
    }
