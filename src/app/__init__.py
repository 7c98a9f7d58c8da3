"""App: orquestração, serviços e infraestrutura do gateway.

Subpastas:
- bootstrap/: composition root (factories, inicialização, wiring)
- coordinators/: fluxo end-to-end por requisição (validação → token → upstream)
- services/: regras puras (validação, máscara de e-mail)
- infra/: implementações concretas de IO (OAuth2, API de clientes)
- protocols/: contratos/interfaces
- domain/: modelos do domínio de clientes
- observability/: correlation_id e métricas

Padrão: app executa; api adapta; utils apoia.
"""
