"""API: camada de borda HTTP.

Responsabilidades:
- Definir endpoints (datas de release, health)
- Ler query params e headers do request
- Mapear resultados e erros do app para respostas HTTP com CORS

Subpastas:
- routes/: endpoints HTTP e builder de respostas

NÃO PODE conter: IO com o upstream, parse de ICS, regras de versão.
"""
