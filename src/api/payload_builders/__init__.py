"""Payload builders — corpos JSON para APIs externas.

Estrutura:
- timeapi/: conversão, tradução e cálculos de hora
"""

__all__: list[str] = []
