# src/pipechain/core/__init__.py
"""
Core do pipechain.

Componentes principais:
    - pipeline → Outcome, protocolo de Pipe, type tags, logger e trace
    - engine   → cadeia imutável e Pipeline com gate de validação de tipo
    - config   → resolução de configuração (defaults + arquivos) e EngineSettings

Princípios fundamentais:
    - Falhas de pipe são dados (Failure), não exceções para o chamador
    - Exceções sinalizam apenas erros de programação/configuração
    - Nenhum objeto retornado ao chamador é mutado depois
"""
