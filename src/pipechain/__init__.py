# src/pipechain/__init__.py
"""
pipechain — pipelines tipados de pipes encadeados.

Um pipeline é uma sequência estritamente linear de pipes, em que a saída
de cada pipe alimenta a entrada do próximo. Cada pipe executa assim que é
adicionado à cadeia; uma falha interrompe os pipes seguintes, exceto
quando o pipe que falhou não muda o tipo (recuperação same-type).

Arquitetura em alto nível:
    - core.pipeline → Outcome, protocolo de Pipe, type tags, logger, trace
    - core.engine   → cadeia imutável (append/tap/tap_error) e Pipeline
    - core.config   → defaults, arquivos YAML/JSON e EngineSettings

Uso mínimo:

    from pipechain import Pipeline, pipe

    result = (
        Pipeline[int](logger)
        .configure(lambda source: source
            .append(pipe(lambda _: "42", input_type=str, output_type=str))
            .append(pipe(int, input_type=str, output_type=int)))
        .run()
    )

Limites explícitos:
    - Sem execução paralela, distribuída ou assíncrona
    - Sem retry, timeout ou persistência de definições
"""
from .core.config.settings import EngineSettings, load_settings
from .core.engine.chain import ChainStep, PipelineSource
from .core.engine.pipeline import Pipeline
from .core.errors import ErrorPayload
from .core.exceptions import (
    ChainConfigurationError,
    ChainTypeError,
    OutcomeAccessError,
    PipeChainException,
    PipelineNotConfiguredError,
    PipeSignatureError,
)
from .core.pipeline.logger import EventLogger, PipelineLogger, get_logger, setup_logging
from .core.pipeline.outcome import Failure, Outcome, Success
from .core.pipeline.pipe import BasePipe, FunctionPipe, Pipe, pipe
from .core.pipeline.types import StepRecord, StepStatus

__all__ = [
    "Pipeline",
    "PipelineSource",
    "ChainStep",
    "Pipe",
    "BasePipe",
    "FunctionPipe",
    "pipe",
    "Outcome",
    "Success",
    "Failure",
    "ErrorPayload",
    "StepRecord",
    "StepStatus",
    "PipelineLogger",
    "EventLogger",
    "get_logger",
    "setup_logging",
    "EngineSettings",
    "load_settings",
    "PipeChainException",
    "ChainConfigurationError",
    "ChainTypeError",
    "PipeSignatureError",
    "OutcomeAccessError",
    "PipelineNotConfiguredError",
]
