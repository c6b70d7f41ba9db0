"""Connectors — adapters de borda para APIs externas.

Estrutura:
- timeapi/: timeapi.io (hora, timezones, conversão, cálculos)
"""

__all__: list[str] = []
