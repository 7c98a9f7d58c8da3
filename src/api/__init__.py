"""API: camada de borda HTTP.

Responsabilidades:
- Receber requisições de consulta/criação de clientes
- Converter query params e body para chamadas ao coordinator
- Converter resultados do coordinator em respostas HTTP

Subpastas:
- routes/: endpoints HTTP (clientes, health)

NÃO PODE conter: chamadas ao token endpoint ou ao upstream, regras de validação.
"""
