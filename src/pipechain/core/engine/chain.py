# src/pipechain/core/engine/chain.py
"""
Cadeia de pipes do pipechain.

Este módulo implementa o builder imutável que o callback de configuração
de um `Pipeline` recebe e devolve:

    - PipelineSource → ponto de partida; aceita apenas um pipe auto-mapeável
      (entrada e saída do mesmo tipo) que semeia a cadeia
    - ChainStep      → estado da cadeia: `Outcome` atual, tipo atual,
      logger, configuração e trace; cada operação retorna um novo ChainStep

Execução:
    Cada `append` executa o pipe imediatamente, de forma síncrona, antes de
    retornar. Não há execução adiada nem paralela.

Política de erros por pipe:
    - cadeia já em falha        → pipe não executa, erro propagado (SKIPPED)
    - pipe executa              → Success(resultado) (SUCCESS)
    - pipe falha, same-type     → logger.error(mensagem), segue com o valor
                                  anterior (RECOVERED)
    - pipe falha, muda de tipo  → Failure([mensagem]), nada é logado (FAILED)

Invariantes:
    - Nenhuma operação altera um ChainStep já retornado
    - No máximo um erro vivo por cadeia (falha faz curto-circuito)
    - Taps nunca alteram outcome nem tipo

Limites explícitos:
    - Não valida o tipo final contra o Pipeline (ver pipeline.py)
    - Não faz retry, timeout ou cancelamento
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Callable, Generic, Tuple, TypeVar

from pipechain.core.config.settings import EngineSettings
from pipechain.core.errors import exception_message, pipe_execution_error
from pipechain.core.exceptions import ChainTypeError, PipeSignatureError
from pipechain.core.pipeline.logger import PipelineLogger
from pipechain.core.pipeline.outcome import Failure, Outcome, Success
from pipechain.core.pipeline.pipe import Pipe, pipe_name
from pipechain.core.pipeline.typetags import is_assignable, same_type, type_name
from pipechain.core.pipeline.types import StepRecord, StepStatus


T = TypeVar("T")
U = TypeVar("U")


def _record(index: int, p: Any, status: StepStatus, error: str | None = None) -> StepRecord:
    return StepRecord(
        index=index,
        pipe=pipe_name(p),
        input_type=type_name(p.input_type),
        output_type=type_name(p.output_type),
        status=status,
        error=error,
    )


@dataclass(frozen=True)
class ChainStep(Generic[T]):
    """Estado imutável da cadeia após um ou mais pipes."""

    outcome: Outcome[T]
    current_type: Any
    logger: PipelineLogger = field(repr=False, compare=False)
    settings: EngineSettings = field(default_factory=EngineSettings, repr=False, compare=False)
    records: Tuple[StepRecord, ...] = ()

    def append(self, p: Pipe[T, U]) -> "ChainStep[U]":
        """
        Aplica `p` ao valor atual e retorna a cadeia resultante.

        Raises:
            ChainTypeError: Com `strict_chaining`, se o tipo atual da cadeia
                não for aceito por `p.input_type`. Nada é executado.
        """
        if self.settings.strict_chaining and not is_assignable(self.current_type, p.input_type):
            raise ChainTypeError(
                f"Pipe '{pipe_name(p)}' expects '{type_name(p.input_type)}' "
                f"but the chain carries '{type_name(self.current_type)}'",
                details={
                    "pipe": pipe_name(p),
                    "step_index": len(self.records),
                    "chain_type": type_name(self.current_type),
                    "input_type": type_name(p.input_type),
                },
                hint="Insira um pipe de conversão ou corrija os tipos declarados.",
            )

        index = len(self.records)

        if self.outcome.is_failed:
            return self._next(
                Failure(self.outcome.errors),
                p.output_type,
                _record(index, p, StepStatus.SKIPPED),
            )

        previous = self.outcome.value
        try:
            result = p.execute(previous)
        except Exception as exc:  # noqa: BLE001 - qualquer falha de pipe vira dado
            message = exception_message(exc)
            if same_type(p.input_type, p.output_type):
                self.logger.error(message)
                return self._next(
                    Success(previous),
                    p.output_type,
                    _record(index, p, StepStatus.RECOVERED, message),
                )
            return self._next(
                Failure((pipe_execution_error(exc=exc, pipe=pipe_name(p), step_index=index),)),
                p.output_type,
                _record(index, p, StepStatus.FAILED, message),
            )

        return self._next(Success(result), p.output_type, _record(index, p, StepStatus.SUCCESS))

    def tap(self, generator: Callable[[T], str]) -> "ChainStep[T]":
        """Loga `generator(valor)` como info quando a cadeia está em sucesso."""
        if self.outcome.is_success:
            self.logger.info(generator(self.outcome.value))
        return replace(self)

    def tap_error(self, generator: Callable[[str], str]) -> "ChainStep[T]":
        """Loga `generator(mensagens unidas)` como erro quando a cadeia está em falha."""
        if self.outcome.is_failed:
            joined = self.outcome.joined_messages(self.settings.error_delimiter)
            self.logger.error(generator(joined))
        return replace(self)

    def _next(self, outcome: Outcome[Any], current_type: Any, record: StepRecord) -> "ChainStep[Any]":
        return replace(
            self,
            outcome=outcome,
            current_type=current_type,
            records=self.records + (record,),
        )


@dataclass(frozen=True)
class PipelineSource:
    """Ponto de partida da cadeia, entregue ao callback de `Pipeline.configure`."""

    logger: PipelineLogger = field(repr=False)
    settings: EngineSettings = field(default_factory=EngineSettings)

    def append(self, p: Pipe[T, T], seed: Any = None) -> ChainStep[T]:
        """
        Executa o pipe fonte com `seed` (None por padrão) e inicia a cadeia.

        Uma falha aqui não tem recuperação: não existe valor anterior.
        Nada é logado.

        Raises:
            PipeSignatureError: Se o pipe não for auto-mapeável.
        """
        if not same_type(p.input_type, p.output_type):
            raise PipeSignatureError(
                f"Source pipe '{pipe_name(p)}' must map a type onto itself, "
                f"got '{type_name(p.input_type)}' -> '{type_name(p.output_type)}'",
                details={
                    "pipe": pipe_name(p),
                    "input_type": type_name(p.input_type),
                    "output_type": type_name(p.output_type),
                },
                hint="Declare o pipe fonte com entrada e saída do mesmo tipo.",
            )

        try:
            result = p.execute(seed)
        except Exception as exc:  # noqa: BLE001
            return ChainStep(
                outcome=Failure((pipe_execution_error(exc=exc, pipe=pipe_name(p), step_index=0),)),
                current_type=p.output_type,
                logger=self.logger,
                settings=self.settings,
                records=(_record(0, p, StepStatus.FAILED, exception_message(exc)),),
            )

        return ChainStep(
            outcome=Success(result),
            current_type=p.output_type,
            logger=self.logger,
            settings=self.settings,
            records=(_record(0, p, StepStatus.SUCCESS),),
        )
