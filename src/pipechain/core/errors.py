"""
pipechain — Canonical Error Payloads (v1)

Este módulo define o padrão canônico de erros que circulam dentro de um
`Failure`. Falhas de pipe não são exceções para o chamador: são dados,
carregados pelo `Outcome` até o fim da configuração do pipeline.

Todo erro deve ser:

- explícito
- serializável
- legível por humanos (a `message` é exatamente o que o chamador vê)

Nenhuma decisão implícita é permitida.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, Optional


# ---------------------------------------------------------------------------
# Payload canônico
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ErrorPayload:
    """
    Payload canônico de erro do pipechain.

    Campos:
    - type: código estável do erro (não é texto livre)
    - message: mensagem curta e humana; é o texto exposto por `Outcome.messages`
    - details: dados estruturados relevantes para diagnóstico
    - hint: ação sugerida ao desenvolvedor do pipeline
    """

    type: str
    message: str
    details: Dict[str, Any] = field(default_factory=dict, compare=False, hash=False)
    hint: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Retorna representação serializável do erro."""
        return asdict(self)


# ---------------------------------------------------------------------------
# Catálogo canônico de tipos de erro (v1)
# ---------------------------------------------------------------------------

OUTCOME_ERROR = "OUTCOME_ERROR"
PIPE_EXECUTION_ERROR = "PIPE_EXECUTION_ERROR"
PIPELINE_RETURN_TYPE_ERROR = "PIPELINE_RETURN_TYPE_ERROR"

RETURN_TYPE_MESSAGE = "The return type '{type_name}' is not valid."


# ---------------------------------------------------------------------------
# Helpers de fábrica
# ---------------------------------------------------------------------------

def outcome_error(message: str) -> ErrorPayload:
    return ErrorPayload(type=OUTCOME_ERROR, message=message)


def exception_message(exc: BaseException) -> str:
    """Descrição legível de uma exceção levantada por um pipe.

    `str(exc)` quando não vazio; caso contrário, o nome da classe da exceção.
    """
    return str(exc) or exc.__class__.__name__


def pipe_execution_error(
    *,
    exc: BaseException,
    pipe: Optional[str] = None,
    step_index: Optional[int] = None,
    hint: str = "Corrija o pipe indicado ou garanta que sua entrada seja válida. Pipes que mudam de tipo não têm fallback.",
) -> ErrorPayload:
    return ErrorPayload(
        type=PIPE_EXECUTION_ERROR,
        message=exception_message(exc),
        details={
            "pipe": pipe,
            "step_index": step_index,
            "exc_type": exc.__class__.__name__,
        },
        hint=hint,
    )


def return_type_error(
    *,
    actual: str,
    declared: str,
    hint: str = "Ajuste o último pipe da cadeia ou o tipo de saída declarado no Pipeline.",
) -> ErrorPayload:
    return ErrorPayload(
        type=PIPELINE_RETURN_TYPE_ERROR,
        message=RETURN_TYPE_MESSAGE.format(type_name=actual),
        details={
            "actual_type": actual,
            "declared_type": declared,
        },
        hint=hint,
    )
