# src/pipechain/core/engine/pipeline.py
"""
Pipeline do pipechain (invólucro externo + gate de validação de tipo).

Fluxo:
    Pipeline[TOut](logger)
        .configure(lambda source: source.append(...).append(...))
        .run()

`configure` cria um `PipelineSource` novo, chama o callback uma única vez
(cada `append` executa seu pipe na hora), valida o tipo final da cadeia
contra `TOut` e retorna um NOVO Pipeline carregando o resultado. `run`
apenas devolve esse resultado, sem recomputar nada.

Gate de validação:
    - roda uma vez, depois que toda a cadeia executou
    - compara apenas tipos (`is_assignable(tipo_final, TOut)`), nunca o
      conteúdo do outcome
    - tipo compatível   → o outcome da cadeia segue como está (inclusive Failure)
    - tipo incompatível → Failure com um único erro
      "The return type '<tipo>' is not valid.", substituindo qualquer erro de pipe

Limites explícitos:
    - Não persiste definições de pipeline
    - Não reexecuta pipes em `run`
"""

from __future__ import annotations

from typing import Any, Callable, Generic, Optional, Tuple, TypeVar, get_args

from pipechain.core.config.settings import EngineSettings
from pipechain.core.errors import return_type_error
from pipechain.core.exceptions import ChainConfigurationError, PipelineNotConfiguredError
from pipechain.core.pipeline.logger import PipelineLogger, get_logger, setup_logging
from pipechain.core.pipeline.outcome import Failure, Outcome
from pipechain.core.pipeline.typetags import is_assignable, type_name
from pipechain.core.pipeline.types import StepRecord

from .chain import ChainStep, PipelineSource


TOut = TypeVar("TOut")

_UNSET: Any = object()


class Pipeline(Generic[TOut]):
    """
    Pipeline tipado por `TOut`, o tipo que o chamador espera ao final.

    O tipo declarado vem de `output_type=` ou da subscrição
    (`Pipeline[list[str]](logger)`).
    """

    def __init__(
        self,
        logger: Optional[PipelineLogger] = None,
        source: Optional[Outcome[TOut]] = None,
        *,
        output_type: Any = _UNSET,
        settings: Optional[EngineSettings] = None,
        records: Tuple[StepRecord, ...] = (),
    ) -> None:
        self.settings = settings or EngineSettings()
        if logger is None:
            setup_logging(self.settings.log_level)
            logger = get_logger(self.settings.logger_name)
        self.logger: PipelineLogger = logger
        self._source = source
        self._output_type = output_type
        self.records: Tuple[StepRecord, ...] = tuple(records)

    @property
    def output_type(self) -> Any:
        """Tipo de saída declarado (explícito ou via `Pipeline[T]`)."""
        if self._output_type is not _UNSET:
            return self._output_type
        orig = getattr(self, "__orig_class__", None)
        args = get_args(orig) if orig is not None else ()
        if args and not isinstance(args[0], TypeVar):
            return args[0]
        raise ChainConfigurationError(
            "Pipeline output type is not declared",
            hint="Use Pipeline[T](...) ou Pipeline(..., output_type=T).",
        )

    def configure(self, build: Callable[[PipelineSource], ChainStep[Any]]) -> "Pipeline[TOut]":
        """
        Executa o callback de configuração e retorna um novo Pipeline com o resultado.

        Raises:
            ChainConfigurationError: Se o tipo de saída não estiver declarado
                ou se o callback não retornar um `ChainStep`.
        """
        declared = self.output_type
        chain = build(PipelineSource(logger=self.logger, settings=self.settings))

        if not isinstance(chain, ChainStep):
            raise ChainConfigurationError(
                "Pipeline configuration must return a chain step",
                details={"received": type(chain).__name__},
                hint="Retorne o resultado de source.append(...) a partir do callback.",
            )

        return Pipeline(
            self.logger,
            self._validate(chain, declared),
            output_type=declared,
            settings=self.settings,
            records=chain.records,
        )

    def run(self) -> Outcome[TOut]:
        """Devolve o outcome armazenado. Nenhuma computação ocorre aqui."""
        if self._source is None:
            raise PipelineNotConfiguredError(
                "Pipeline has no outcome: call configure() first",
                hint="Configure o pipeline ou semeie-o com um Outcome no construtor.",
            )
        return self._source

    @staticmethod
    def _validate(chain: ChainStep[Any], declared: Any) -> Outcome[Any]:
        if is_assignable(chain.current_type, declared):
            return chain.outcome
        return Failure((
            return_type_error(actual=type_name(chain.current_type), declared=type_name(declared)),
        ))

    def __repr__(self) -> str:
        state = "unconfigured" if self._source is None else (
            "success" if self._source.is_success else "failed"
        )
        declared = "?" if self._output_type is _UNSET else type_name(self._output_type)
        return f"Pipeline[{declared}]({state})"
