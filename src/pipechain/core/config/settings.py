# src/pipechain/core/config/settings.py
"""
Configuração tipada do engine.

`EngineSettings` é a visão validada do dicionário produzido por
`load_config`. É o único objeto de configuração que a cadeia e o
`Pipeline` conhecem.

Chaves reconhecidas:
    - engine.strict_chaining  → checagem de tipo a cada `append` (bool)
    - engine.error_delimiter  → separador usado por `tap_error` (str)
    - logging.name            → logger stdlib usado quando nenhum é fornecido
    - logging.level           → nível desse logger

Chaves desconhecidas são ignoradas.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict

from .errors import InvalidSettingError
from .loader import DEFAULT_CONFIG, PathLike, load_config


_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET"}


def _section(config: Dict[str, Any], name: str) -> Dict[str, Any]:
    section = config.get(name) or {}
    if not isinstance(section, dict):
        raise InvalidSettingError(f"Seção '{name}' deve ser um mapa, recebido: {type(section).__name__}")
    return section


@dataclass(frozen=True)
class EngineSettings:
    """Parâmetros de execução de uma cadeia (imutável)."""

    strict_chaining: bool = True
    error_delimiter: str = "/"
    logger_name: str = "pipechain"
    log_level: str = "WARNING"

    @classmethod
    def from_config(cls, config: Dict[str, Any]) -> "EngineSettings":
        engine = _section(config, "engine")
        log = _section(config, "logging")

        strict = engine.get("strict_chaining", cls.strict_chaining)
        if not isinstance(strict, bool):
            raise InvalidSettingError("engine.strict_chaining deve ser bool")

        delimiter = engine.get("error_delimiter", cls.error_delimiter)
        if not isinstance(delimiter, str):
            raise InvalidSettingError("engine.error_delimiter deve ser str")

        name = log.get("name", cls.logger_name)
        if not isinstance(name, str) or not name.strip():
            raise InvalidSettingError("logging.name deve ser uma string não vazia")

        level = str(log.get("level", cls.log_level)).upper()
        if level not in _LEVELS:
            raise InvalidSettingError(
                f"logging.level inválido: {level!r} (esperado um de {sorted(_LEVELS)})"
            )

        return cls(
            strict_chaining=strict,
            error_delimiter=delimiter,
            logger_name=name,
            log_level=level,
        )


def load_settings(*paths: PathLike) -> EngineSettings:
    """Atalho: `load_config(*paths)` seguido de `EngineSettings.from_config`."""
    return EngineSettings.from_config(load_config(*paths, base=DEFAULT_CONFIG))
