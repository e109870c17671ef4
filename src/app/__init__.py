"""App: orquestração, casos de uso e infraestrutura.

Subpastas:
- bootstrap/: composition root (inicialização, wiring)
- domain/: modelos de domínio
- use_cases/: casos de uso (resolver → fetch → extração)
- services/: regras puras (versão, parse de ICS)
- infra/: implementações concretas de IO (httpx)
- protocols/: contratos/interfaces
- observability/: correlation_id e métricas

Padrão: app executa; api adapta; config configura; utils apoia.
"""
