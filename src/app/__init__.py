"""App: aplicação concreta sobre o núcleo de efeitos.

Subpastas:
- bootstrap/: composition root (factories, inicialização, wiring)
- constants/: superfícies, abas e IDs de notificação
- state/: modelo imutável do estado da aplicação
- logic/: efeitos concretos e regras de roteamento
- use_cases/: pontos de entrada chamados pela plataforma
- infra/: implementações concretas (store em memória, pontes de plataforma)
- protocols/: contratos/interfaces
- observability/: correlation_id e métricas via logs estruturados

Padrão: app executa; api adapta; effects coordena; utils apoia.
"""
