"""App — entrypoints, contratos de input e composição do serviço.

Subpastas:
- bootstrap/: composition root (logging, validação de settings, resumo de startup)
- entrypoints/: registro e handlers por chave
- domain/: contratos de input (pydantic)
- observability/: correlation_id por invocação
- constants/: identidade do agente

Padrão: app executa; api adapta; config apoia.
"""
