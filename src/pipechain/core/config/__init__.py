# src/pipechain/core/config/__init__.py
"""
Camada de configuração do pipechain.

    - loader   → DEFAULT_CONFIG + arquivos YAML/JSON em camadas
    - merge    → deep-merge determinístico
    - settings → EngineSettings validado
    - errors   → hierarquia de ConfigError
"""
