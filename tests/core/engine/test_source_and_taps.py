# tests/core/engine/test_source_and_taps.py
"""
Testes do ponto de partida da cadeia (`PipelineSource`) e dos hooks de log
(`ChainStep.tap`, `ChainStep.tap_error`).

Os testes asseguram que:
- a fonte aceita apenas pipes auto-mapeáveis
- a fonte recebe `seed` (None por padrão)
- uma falha na fonte vira Failure sem log
- `tap` só loga em sucesso e nunca chama o gerador em falha
- `tap_error` só loga em falha, unindo as mensagens com o delimitador configurado
- taps não alteram outcome nem tipo
"""

import pytest

try:
    from pipechain.core.config.settings import EngineSettings
    from pipechain.core.engine.chain import ChainStep, PipelineSource
    from pipechain.core.errors import ErrorPayload
    from pipechain.core.exceptions import PipeSignatureError
    from pipechain.core.pipeline.outcome import Outcome
    from pipechain.core.pipeline.types import StepStatus
except Exception as e:  # noqa: BLE001
    PipelineSource = None
    _IMPORT_ERR = e
else:
    _IMPORT_ERR = None


def _require_imports():
    if _IMPORT_ERR is not None:
        pytest.fail(f"Missing PipelineSource/ChainStep. Import error: {_IMPORT_ERR}")


# -----------------------------
# Source
# -----------------------------

def test_source_rejects_type_changing_pipe(event_logger, make_pipe):
    _require_imports()
    source = PipelineSource(logger=event_logger)
    not_self_mapping = make_pipe(str, int, 1)

    with pytest.raises(PipeSignatureError):
        source.append(not_self_mapping)

    assert not_self_mapping.calls == []


def test_source_passes_seed_to_pipe(event_logger, make_pipe):
    _require_imports()
    seeded = make_pipe(int, int, responses={41: 42})

    chain = PipelineSource(logger=event_logger).append(seeded, seed=41)

    assert seeded.calls == [41]
    assert chain.outcome.value == 42
    assert chain.current_type is int


def test_source_failure_is_not_logged(event_logger, make_pipe):
    """
    Verifica que a falha do pipe fonte não tem recuperação nem log.

    Invariantes:
        - Failure com exatamente um erro
        - O trace registra a fonte como FAILED
        - Nenhum evento no logger
    """
    _require_imports()
    chain = PipelineSource(logger=event_logger).append(
        make_pipe(str, str, raises=ValueError("no source"))
    )

    assert chain.outcome.messages == ("no source",)
    assert chain.records[0].status == StepStatus.FAILED
    assert event_logger.events == []


def test_source_is_reusable(event_logger, make_pipe):
    _require_imports()
    source = PipelineSource(logger=event_logger)

    a = source.append(make_pipe(str, str, "a"))
    b = source.append(make_pipe(str, str, "b"))

    assert (a.outcome.value, b.outcome.value) == ("a", "b")


# -----------------------------
# Tap
# -----------------------------

def test_tap_logs_once_per_call_on_success(event_logger, make_pipe):
    _require_imports()
    chain = PipelineSource(logger=event_logger).append(make_pipe(str, str, "hello"))

    tapped = chain.tap(lambda v: f"got {v}").tap(lambda v: v.upper())

    assert event_logger.messages("INFO") == ["got hello", "HELLO"]
    assert tapped.outcome == chain.outcome
    assert tapped.current_type is chain.current_type
    assert tapped is not chain


def test_tap_never_calls_generator_on_failure(event_logger, make_pipe):
    _require_imports()
    chain = PipelineSource(logger=event_logger).append(make_pipe(str, str, raises=ValueError("x")))

    def generator(value):
        raise AssertionError("generator must not run on failure")

    chain.tap(generator)

    assert event_logger.messages("INFO") == []


# -----------------------------
# TapError
# -----------------------------

def test_tap_error_is_silent_on_success(event_logger, make_pipe):
    _require_imports()
    chain = PipelineSource(logger=event_logger).append(make_pipe(str, str, "ok"))

    same = chain.tap_error(lambda errors: f"failed: {errors}")

    assert event_logger.events == []
    assert same.outcome.value == "ok"


def test_tap_error_joins_all_messages_in_order(event_logger):
    """
    Verifica a união das mensagens quando a falha carrega mais de um erro
    (caso construído externamente, já que a cadeia só mantém um erro vivo).
    """
    _require_imports()
    chain = ChainStep(
        outcome=Outcome.fail("first", ErrorPayload(type="CUSTOM", message="second")),
        current_type=str,
        logger=event_logger,
    )

    chain.tap_error(lambda errors: f"failed: {errors}")

    assert event_logger.messages("ERROR") == ["failed: first/second"]


def test_tap_error_uses_configured_delimiter(event_logger):
    _require_imports()
    chain = ChainStep(
        outcome=Outcome.fail("a", "b", "c"),
        current_type=str,
        logger=event_logger,
        settings=EngineSettings(error_delimiter=" | "),
    )

    chain.tap_error(lambda errors: errors)

    assert event_logger.messages("ERROR") == ["a | b | c"]
