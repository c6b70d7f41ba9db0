"""Identidade do agente publicada no manifesto."""

from __future__ import annotations

AGENT_NAME = "timezone-agent"
AGENT_VERSION = "0.2.0"
AGENT_DESCRIPTION = (
    "Returns current times, timezone metadata, conversions and date calculations "
    "for IANA timezones using timeapi.io."
)
