# tests/conftest.py
"""
Fixtures compartilhados para testes do pipechain.

Este módulo define fixtures reutilizáveis que fornecem:
- um logger estruturado em memória (EventLogger) usado como espião
- uma fábrica de pipes falsos que registram as entradas recebidas
- configurações YAML mínimas e determinísticas

Decisões arquiteturais:
    - Pipes falsos implementam o protocolo `Pipe` por duck typing
    - Imports do core são feitos de forma lazy para que falhas de import
      apareçam como erro do teste, e não como erro de coleta

Invariantes:
    - Nenhuma fixture executa pipeline real
    - Nenhuma fixture realiza I/O
    - Todas as fixtures são seguras para execução em paralelo
"""

import pytest


# =====================================================
# Logger
# =====================================================

@pytest.fixture
def event_logger():
    """
    Logger estruturado em memória, novo a cada teste.

    Usado como espião: os testes inspecionam `event_logger.messages("INFO")`
    e `event_logger.messages("ERROR")` para verificar quantas vezes, e com
    qual texto, o engine chamou o logger.
    """
    from pipechain.core.pipeline.logger import EventLogger
    return EventLogger(pipeline_id="pipeline-test-001")


# =====================================================
# Pipes falsos
# =====================================================

class FakePipe:
    """
    Pipe falso com resposta programável.

    - `returns`: valor devolvido para qualquer entrada
    - `responses`: mapa entrada → saída, consultado antes de `returns`
    - `raises`: exceção levantada em toda chamada
    - `calls`: entradas recebidas, na ordem
    """

    def __init__(self, input_type, output_type, returns=None, *, responses=None, raises=None, name=None):
        self.input_type = input_type
        self.output_type = output_type
        self.returns = returns
        self.responses = dict(responses or {})
        self.raises = raises
        self.name = name or f"fake[{getattr(input_type, '__name__', input_type)}->{getattr(output_type, '__name__', output_type)}]"
        self.calls = []

    def execute(self, value):
        self.calls.append(value)
        if self.raises is not None:
            raise self.raises
        if self.responses and value in self.responses:
            return self.responses[value]
        return self.returns


@pytest.fixture
def make_pipe():
    """
    Fábrica de `FakePipe`.

        make_pipe(str, int, 1)
        make_pipe(str, str, responses={"a": "b"})
        make_pipe(str, bool, raises=ValueError("boom"))
    """
    return FakePipe


# =====================================================
# Config
# =====================================================

@pytest.fixture
def config_defaults_yaml() -> str:
    """YAML de configuração base semelhante ao uso real do projeto."""
    return """\
engine:
  strict_chaining: true
  error_delimiter: "/"
logging:
  name: pipechain
  level: WARNING
"""


@pytest.fixture
def config_local_yaml() -> str:
    """YAML de override local: afrouxa a checagem e muda o delimitador."""
    return """\
engine:
  strict_chaining: false
  error_delimiter: " | "
logging:
  level: DEBUG
"""
