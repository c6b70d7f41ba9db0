"""Constantes da aplicação."""

from app.constants.agent import AGENT_DESCRIPTION, AGENT_NAME, AGENT_VERSION

__all__ = ["AGENT_DESCRIPTION", "AGENT_NAME", "AGENT_VERSION"]
