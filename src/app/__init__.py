"""App: coração do sistema: orquestração, casos de uso e infraestrutura.

Subpastas:
- bootstrap/: composition root (factories, inicialização, wiring)
- use_cases/: casos de uso (init_app)
- domain/: modelos de domínio (projeto, ambiente, manifesto, regras de nome)
- infra/: implementações concretas de IO (registry, provisionador,
  workspace, terminal)
- protocols/: contratos/interfaces dos colaboradores
- observability/: id da invocação para logs estruturados

Padrão: cli adapta; app executa; fsm governa; utils apoia.
"""
