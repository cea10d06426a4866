# src/pipechain/core/config/errors.py
"""
Exceções canônicas da camada de configuração do pipechain.

Todas as falhas de leitura, merge e validação de configuração herdam de
`ConfigError`, permitindo captura genérica sem confundir erros de
configuração com falhas de pipes (que nunca são exceções).

Invariantes:
    - Toda exceção deste módulo herda de `ConfigError`
    - Erros estruturais são fatais: nenhuma configuração parcial é produzida
"""


class ConfigError(Exception):
    """Exceção base para erros de configuração."""


class ConfigFileNotFoundError(ConfigError):
    """Um arquivo de configuração pedido explicitamente não existe."""


class UnsupportedConfigFormatError(ConfigError):
    """
    Extensão de arquivo não suportada.

    Formatos suportados (v1):
        - YAML (.yaml, .yml)
        - JSON (.json)

    O formato nunca é inferido pelo conteúdo.
    """


class InvalidConfigRootTypeError(ConfigError):
    """O conteúdo raiz do arquivo não é um mapa chave-valor."""


class ConfigTypeConflictError(ConfigError):
    """
    Conflito de tipos entre base e override durante o deep-merge.

    Exemplo:
        - base:     {"engine": {"strict_chaining": true}}
        - override: {"engine": "off"}
    """


class InvalidSettingError(ConfigError):
    """Uma chave conhecida da configuração tem valor inválido."""
