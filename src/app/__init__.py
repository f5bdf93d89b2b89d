"""App — núcleo do cliente: domínio, casos de uso, apresentação e wiring.

Subpastas:
- bootstrap/: composition root (factories, inicialização, instâncias compartilhadas)
- domain/: modelos de domínio (Hero, Transformation, Credentials)
- use_cases/: casos de uso (login, heróis, transformações)
- infra/: implementações concretas (store de token em memória)
- protocols/: contratos/interfaces
- presentation/: view models, estados de tela e StateBinding

Padrão: app orquestra; api transporta; config configura; utils apoia.
"""
