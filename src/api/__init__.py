"""API — camada de borda com a timeapi.io e rotas HTTP do agente.

Responsabilidades:
- Montar URLs, headers e corpos das chamadas à timeapi.io
- Classificar respostas (rede, status, corpo vazio, JSON inválido)
- Normalizar payloads decodificados para o output dos entrypoints
- Expor endpoints HTTP (health, manifesto, invocação)

Subpastas:
- connectors/: cliente HTTP e falhas classificadas
- normalizers/: payload decodificado → output do entrypoint
- payload_builders/: corpos JSON das rotas POST
- routes/: endpoints HTTP

NÃO PODE conter: registro de entrypoints nem contratos de input.
"""
