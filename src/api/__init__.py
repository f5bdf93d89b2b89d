"""API — camada de transporte HTTP do cliente.

Responsabilidades:
- Descrever requisições (ApiRequest) e montar URL, headers e corpo
- Aplicar interceptors (autenticação Bearer)
- Executar a chamada e classificar erros (ApiErrorResponse)
- Decodificar respostas para modelos de domínio

Subpastas:
- networking/: descritor, interceptors, sessão, executor e taxonomia de erros
- requests/: factories de descritores por endpoint (login, heróis, transformações)

NÃO PODE conter: regras de validação de credenciais, estado de tela, orquestração de use cases.
"""
