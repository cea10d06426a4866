"""
pipechain — Canonical Exceptions (v1)

Este módulo define as exceções tipadas internas do pipechain.

Objetivo:
- Sinalizar erros de programação e de configuração do pipeline
  (assinatura de pipe inválida, cadeia mal tipada, pipeline não configurado)
- Nunca transportar falhas de execução de pipes: essas viajam como
  `Failure` dentro do `Outcome`

Regras:
- Exceções carregam apenas dados estruturados (serializáveis) em `details`.
- A mensagem deve ser curta e humana.
"""

from __future__ import annotations

from typing import Any, Dict, Optional


class PipeChainException(Exception):
    """Base class para exceções internas do pipechain."""

    def __init__(
        self,
        message: str,
        *,
        details: Optional[Dict[str, Any]] = None,
        hint: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.details: Dict[str, Any] = dict(details or {})
        self.hint = hint

    def __str__(self) -> str:
        return self.message


# ---------------------------------------------------------------------------
# Construção da cadeia
# ---------------------------------------------------------------------------

class ChainConfigurationError(PipeChainException, TypeError):
    """A configuração do pipeline não produziu uma cadeia utilizável."""


class ChainTypeError(PipeChainException, TypeError):
    """O tipo atual da cadeia não é aceito pela entrada do próximo pipe."""


class PipeSignatureError(PipeChainException, TypeError):
    """O pipe não tem a assinatura exigida (ex.: fonte que não é auto-mapeável)."""


# ---------------------------------------------------------------------------
# Outcome / Pipeline
# ---------------------------------------------------------------------------

class OutcomeAccessError(PipeChainException, ValueError):
    """Acesso ao valor de um `Failure`."""


class PipelineNotConfiguredError(PipeChainException):
    """`run()` chamado em um pipeline sem resultado (nem semeado, nem configurado)."""
