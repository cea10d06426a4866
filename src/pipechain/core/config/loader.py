# src/pipechain/core/config/loader.py
"""
Loader de configuração do pipechain.

A configuração efetiva é montada em camadas:
    1. `DEFAULT_CONFIG` embutido (sempre presente)
    2. zero ou mais arquivos, na ordem dada; cada um vence os anteriores

Cada arquivo é YAML ou JSON e deve ter um mapa na raiz. A resolução usa
`deep_merge`, então a mesma lista de arquivos sempre produz a mesma
configuração.

Limites explícitos:
    - Não valida valores (ver `settings.EngineSettings.from_config`)
    - Não lê variáveis de ambiente
    - Não cria arquivos ausentes
"""

from pathlib import Path
from typing import Any, Dict, Optional, Union
import json

import yaml  # PyYAML

from .merge import deep_merge
from .errors import (
    ConfigFileNotFoundError,
    InvalidConfigRootTypeError,
    UnsupportedConfigFormatError,
)


PathLike = Union[str, Path]

DEFAULT_CONFIG: Dict[str, Any] = {
    "engine": {
        "strict_chaining": True,
        "error_delimiter": "/",
    },
    "logging": {
        "name": "pipechain",
        "level": "WARNING",
    },
}


def read_config_file(path: PathLike) -> Dict[str, Any]:
    """
    Lê um único arquivo de configuração.

    Arquivos vazios valem como `{}`.

    Raises:
        ConfigFileNotFoundError: Se o arquivo não existir.
        UnsupportedConfigFormatError: Se a extensão não for .yaml, .yml ou .json.
        InvalidConfigRootTypeError: Se a raiz não for um mapa.
    """
    file = Path(path)
    if not file.exists():
        raise ConfigFileNotFoundError(f"Arquivo de configuração não encontrado: {file}")

    suffix = file.suffix.lower()

    with file.open("r", encoding="utf-8") as f:
        if suffix in {".yaml", ".yml"}:
            data = yaml.safe_load(f)
        elif suffix == ".json":
            text = f.read()
            data = json.loads(text) if text.strip() else None
        else:
            raise UnsupportedConfigFormatError(f"Formato não suportado: {file.suffix}")

    if data is None:
        return {}

    if not isinstance(data, dict):
        raise InvalidConfigRootTypeError(
            f"Config root deve ser dict, recebido: {type(data).__name__}"
        )

    return data


def load_config(
    *paths: PathLike,
    base: Optional[Dict[str, Any]] = None,
) -> Dict[str, Any]:
    """
    Resolve a configuração efetiva a partir dos defaults e dos arquivos dados.

    Args:
        *paths: Arquivos a aplicar, do menos para o mais prioritário.
        base: Camada inicial; `DEFAULT_CONFIG` quando omitida.

    Returns:
        Novo dicionário com a configuração resolvida.
    """
    effective = deep_merge(DEFAULT_CONFIG if base is None else base, {})

    for path in paths:
        effective = deep_merge(effective, read_config_file(path))

    return effective
