"""
Capacidade de logging do pipechain.

O engine só precisa de um destino para duas espécies de mensagem:
informativas (`Tap`) e de erro (recuperação same-type e `TapError`).
Esse destino é o `PipelineLogger`, uma capacidade externa cujo ciclo de
vida nunca pertence ao engine.

Implementações fornecidas:
    - qualquer `logging.Logger` da stdlib (satisfaz o protocolo como está)
    - `EventLogger`: registro estruturado em memória, inspecionável
    - `get_logger(name)`: logger da árvore `pipechain`, configurado de forma
      idempotente por `setup_logging`

Invariantes:
    - Eventos do EventLogger sempre incluem `pipeline_id`, `level`,
      `message` e `timestamp`
    - A ordem de inserção dos eventos é preservada

Limites explícitos:
    - Não é seguro para pipelines concorrentes compartilhando o mesmo logger
    - Não persiste eventos
"""

from __future__ import annotations

import copy
import logging
import sys
import threading
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Protocol, runtime_checkable


ROOT_LOGGER = "pipechain"

INFO = "INFO"
ERROR = "ERROR"


@runtime_checkable
class PipelineLogger(Protocol):
    """Destino das mensagens do engine. Fire-and-forget."""

    def info(self, message: str) -> Any:
        ...

    def error(self, message: str) -> Any:
        ...


@dataclass
class EventLogger:
    """
    Logger estruturado em memória.

    Cada chamada vira um evento `dict`, na ordem em que ocorreu:

        {"pipeline_id": ..., "level": "INFO", "message": ..., "timestamp": ...}
    """
    pipeline_id: str = "pipeline"
    events: List[Dict[str, Any]] = field(default_factory=list, init=False)

    def log(self, *, level: str, message: str, **extra: Any) -> None:
        event = {
            "pipeline_id": self.pipeline_id,
            "level": level,
            "message": message,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }
        event.update(extra)
        self.events.append(event)

    def info(self, message: str) -> None:
        self.log(level=INFO, message=message)

    def error(self, message: str) -> None:
        self.log(level=ERROR, message=message)

    def messages(self, level: Optional[str] = None) -> List[str]:
        return [
            e["message"] for e in self.events
            if level is None or e["level"] == level
        ]


# -----------------------------
# stdlib logging
# -----------------------------

_lock = threading.Lock()
_setup_done = False


class _Formatter(logging.Formatter):
    """Formata registros como ``[tag] message``, removendo o prefixo ``pipechain.``."""

    def format(self, record: logging.LogRecord) -> str:
        name = record.name
        if name.startswith(ROOT_LOGGER + "."):
            name = name[len(ROOT_LOGGER) + 1:]
        # o registro é compartilhado entre handlers
        tagged = copy.copy(record)
        tagged.msg = f"[{name}] {record.getMessage()}"
        tagged.args = None
        return super().format(tagged)


def setup_logging(level: Optional[str] = None) -> None:
    """Configura o logger raiz ``pipechain``.

    O handler (``StreamHandler(sys.stderr)``) é anexado uma única vez e a
    propagação é desligada. ``level``, quando informado, é aplicado a cada
    chamada; na primeira configuração sem ``level`` vale ``WARNING``.
    """
    global _setup_done
    with _lock:
        root = logging.getLogger(ROOT_LOGGER)
        if not _setup_done:
            root.setLevel((level or "WARNING").upper())
            handler = logging.StreamHandler(sys.stderr)
            handler.setFormatter(_Formatter())
            root.addHandler(handler)
            root.propagate = False
            _setup_done = True
        elif level is not None:
            root.setLevel(level.upper())


def get_logger(name: str = ROOT_LOGGER) -> logging.Logger:
    """Retorna um logger da árvore ``pipechain``.

    Nomes fora da árvore são prefixados (``engine`` → ``pipechain.engine``).
    Não altera o nível já configurado.
    """
    setup_logging()
    if name != ROOT_LOGGER and not name.startswith(ROOT_LOGGER + "."):
        name = f"{ROOT_LOGGER}.{name}"
    return logging.getLogger(name)
