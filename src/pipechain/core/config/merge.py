# src/pipechain/core/config/merge.py
"""
Deep-merge de camadas de configuração.

Política (v1):
    - dict + dict → recursão por chave
    - list        → substituída por inteiro
    - escalar     → substituído pelo override
    - tipos diferentes para a mesma chave → ConfigTypeConflictError

Os inputs nunca são mutados; o resultado é sempre um dicionário novo.
"""

from copy import deepcopy
from typing import Any, Dict, List

from .errors import ConfigTypeConflictError


def _path(parents: List[str], key: str) -> str:
    return ".".join([*parents, str(key)])


def deep_merge(
    base: Dict[str, Any],
    override: Dict[str, Any],
    *,
    _parents: List[str] | None = None,
) -> Dict[str, Any]:
    """
    Combina `override` sobre `base` e retorna um novo dicionário.

    Args:
        base: Camada inferior (ex.: defaults embutidos).
        override: Camada superior; vence em qualquer chave em comum.

    Raises:
        ConfigTypeConflictError: Se a mesma chave tiver tipos incompatíveis.
            A mensagem traz o caminho completo (`engine.strict_chaining`).
    """
    parents = _parents or []

    if not isinstance(base, dict) or not isinstance(override, dict):
        raise ConfigTypeConflictError(
            f"Deep-merge requer dicts, recebido: "
            f"{type(base).__name__} vs {type(override).__name__}"
        )

    merged: Dict[str, Any] = deepcopy(base)

    for key, new in override.items():
        if key not in merged:
            merged[key] = deepcopy(new)
            continue

        old = merged[key]

        if isinstance(old, dict) and isinstance(new, dict):
            merged[key] = deep_merge(old, new, _parents=[*parents, str(key)])
        elif isinstance(new, list) and isinstance(old, list):
            merged[key] = deepcopy(new)
        elif old is None or new is None or type(old) is type(new):
            merged[key] = deepcopy(new)
        else:
            raise ConfigTypeConflictError(
                f"Conflito de tipo em '{_path(parents, key)}': "
                f"{type(old).__name__} vs {type(new).__name__}"
            )

    return merged
