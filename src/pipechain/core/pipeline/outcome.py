"""
Outcome canônico do pipechain.

Este módulo define o `Outcome`, a união rotulada `Success | Failure` que
cada pipe produz, que cada elo da cadeia consome e que o chamador recebe
ao final da configuração de um pipeline.

Componentes:
    - Outcome  → base comum com construtores `ok` / `fail` e API de leitura
    - Success  → carrega exatamente um valor
    - Failure  → carrega uma sequência ordenada e não vazia de ErrorPayload

Invariantes:
    - Exatamente uma variante está ativa por instância
    - `errors` é não vazio se e somente se a variante é `Failure`
    - Instâncias são imutáveis (frozen)

Limites explícitos:
    - Não executa pipes
    - Não registra logs
    - Não decide recuperação de erros
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, Tuple, TypeVar, Union

from pipechain.core.errors import ErrorPayload, outcome_error
from pipechain.core.exceptions import OutcomeAccessError


T = TypeVar("T")

ErrorLike = Union[str, ErrorPayload]


def _as_payload(error: ErrorLike) -> ErrorPayload:
    if isinstance(error, ErrorPayload):
        return error
    if isinstance(error, str):
        return outcome_error(error)
    raise TypeError(f"Erro deve ser str ou ErrorPayload, recebido: {type(error).__name__}")


class Outcome(Generic[T]):
    """
    Resultado de sucesso ou falha de uma etapa do pipeline.

    Não é instanciado diretamente: use `Outcome.ok(value)` ou
    `Outcome.fail(*errors)`, ou as variantes `Success` / `Failure`.
    """

    __slots__ = ()

    @staticmethod
    def ok(value: T) -> "Success[T]":
        return Success(value)

    @staticmethod
    def fail(*errors: ErrorLike) -> "Failure":
        return Failure(tuple(_as_payload(e) for e in errors))

    @property
    def is_success(self) -> bool:
        raise NotImplementedError

    @property
    def is_failed(self) -> bool:
        return not self.is_success

    @property
    def value(self) -> T:
        raise NotImplementedError

    @property
    def errors(self) -> Tuple[ErrorPayload, ...]:
        raise NotImplementedError

    @property
    def messages(self) -> Tuple[str, ...]:
        return tuple(e.message for e in self.errors)

    def has_error(self, predicate: Callable[[ErrorPayload], bool]) -> bool:
        return any(predicate(e) for e in self.errors)

    def value_or(self, default: Any) -> Any:
        return self.value if self.is_success else default

    def joined_messages(self, delimiter: str = "/") -> str:
        return delimiter.join(self.messages)


@dataclass(frozen=True)
class Success(Outcome[T]):
    """Variante de sucesso: carrega o valor produzido pelo último pipe."""

    payload: T

    @property
    def is_success(self) -> bool:
        return True

    @property
    def value(self) -> T:
        return self.payload

    @property
    def errors(self) -> Tuple[ErrorPayload, ...]:
        return ()


@dataclass(frozen=True)
class Failure(Outcome[Any]):
    """
    Variante de falha: carrega os erros em ordem de ocorrência.

    Uma falha sem erros é rejeitada na construção.
    """

    failures: Tuple[ErrorPayload, ...]

    def __post_init__(self) -> None:
        failures = tuple(_as_payload(e) for e in self.failures)
        if not failures:
            raise ValueError("Failure requires at least one error")
        object.__setattr__(self, "failures", failures)

    @property
    def is_success(self) -> bool:
        return False

    @property
    def value(self) -> Any:
        raise OutcomeAccessError(
            "Cannot read the value of a failed outcome",
            details={"errors": list(self.messages)},
        )

    @property
    def errors(self) -> Tuple[ErrorPayload, ...]:
        return self.failures
