"""
Tipos canônicos do trace de execução do pipechain.

Cada pipe aplicado a uma cadeia deixa um registro imutável do que
aconteceu com ele. O conjunto desses registros é o trace da configuração,
exposto pelo `Pipeline` final.

Componentes principais:
    - StepStatus → enum de estados finais (SUCCESS, RECOVERED, FAILED, SKIPPED)
    - StepRecord → registro imutável de um pipe aplicado

Invariantes:
    - Enums possuem valores textuais canônicos
    - StepRecord é imutável
    - Tipos não dependem de engine nem de logger

Limites explícitos:
    - Não executa pipes
    - Não decide políticas de recuperação
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any, Dict, Optional


class StepStatus(str, Enum):
    """
    Estados finais possíveis de um pipe aplicado.

    Estados definidos:
        - SUCCESS: o pipe executou e produziu um novo valor
        - RECOVERED: o pipe falhou, mas por ser same-type a cadeia seguiu
          com o valor anterior (erro registrado no logger)
        - FAILED: o pipe falhou mudando de tipo; a cadeia passa a carregar Failure
        - SKIPPED: o pipe não foi executado porque a cadeia já estava em falha
    """
    SUCCESS = "success"
    RECOVERED = "recovered"
    FAILED = "failed"
    SKIPPED = "skipped"


@dataclass(frozen=True)
class StepRecord:
    """
    Registro imutável de um pipe aplicado à cadeia.

    Campos:
        - index: posição do pipe na cadeia (0 = fonte)
        - pipe: nome de exibição do pipe
        - input_type / output_type: nomes legíveis das tags declaradas
        - status: estado final
        - error: mensagem do erro quando FAILED ou RECOVERED
    """
    index: int
    pipe: str
    input_type: str
    output_type: str
    status: StepStatus
    error: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["status"] = self.status.value
        return data
