"""API: camada de borda do callback.

Responsabilidades:
- Receber requests da plataforma (handshake e mensagens)
- Ler query params e corpo bruto
- Delegar ao codec e ao coordinator
- Mapear erros tipados do codec para status HTTP

Subpastas:
- connectors/: adapters do callback por plataforma
- routes/: endpoints HTTP (callback, health)

NÃO PODE conter: regras de negócio nem criptografia.
"""
