"""
Contrato canônico de Pipe do pipechain.

Um Pipe é a menor unidade de trabalho de um pipeline: um mapeamento puro
de um valor de entrada para um valor de saída, que sinaliza falha
levantando uma exceção.

O engine só enxerga três coisas de um pipe:
    - `input_type`  → tag do tipo de entrada declarado
    - `output_type` → tag do tipo de saída declarado
    - `execute(value)` → o resultado, ou uma exceção

Formas de fornecer um pipe:
    - qualquer objeto que satisfaça o protocolo `Pipe` (duck typing)
    - subclasse de `BasePipe[TIn, TOut]` (tipos lidos dos parâmetros genéricos)
    - função comum embrulhada por `pipe(...)` / `FunctionPipe`
      (tipos lidos das anotações)

Limites explícitos:
    - Não executa cadeias
    - Não trata exceções
    - Não registra logs
"""

from __future__ import annotations

from typing import (
    Any,
    Callable,
    Generic,
    Optional,
    Protocol,
    Tuple,
    TypeVar,
    get_args,
    get_origin,
    get_type_hints,
    runtime_checkable,
)


TIn = TypeVar("TIn")
TOut = TypeVar("TOut")
TIn_contra = TypeVar("TIn_contra", contravariant=True)
TOut_co = TypeVar("TOut_co", covariant=True)


@runtime_checkable
class Pipe(Protocol[TIn_contra, TOut_co]):
    """
    Protocolo mínimo de um pipe.

    A conformidade é estrutural (`@runtime_checkable`): não há herança
    obrigatória. `execute` pode levantar qualquer `Exception` para
    sinalizar falha; a descrição da exceção vira a mensagem de erro.
    """

    input_type: Any
    output_type: Any

    def execute(self, value: TIn_contra) -> TOut_co:
        ...


def pipe_name(p: Any) -> str:
    """Nome de exibição de um pipe (para o trace de execução)."""
    name = getattr(p, "name", None)
    if isinstance(name, str) and name:
        return name
    return type(p).__name__


def _hints_of(func: Callable[..., Any]) -> Tuple[Any, Any]:
    """(tipo do primeiro parâmetro, tipo de retorno) a partir das anotações."""
    try:
        hints = get_type_hints(func)
    except Exception:  # noqa: BLE001 - anotações não resolvíveis valem como Any
        return Any, Any

    code = getattr(func, "__code__", None)
    params = list(code.co_varnames[: code.co_argcount]) if code is not None else []
    if params and params[0] in ("self", "cls"):
        params = params[1:]

    input_type = hints.get(params[0], Any) if params else Any
    output_type = hints.get("return", Any)
    return input_type, output_type


def _generic_args(cls: type) -> Optional[Tuple[Any, Any]]:
    for base in cls.__dict__.get("__orig_bases__", ()):
        origin = get_origin(base)
        if isinstance(origin, type) and issubclass(origin, BasePipe):
            args = get_args(base)
            if len(args) == 2:
                return args
    return None


def _concrete(tp: Any) -> Any:
    return Any if isinstance(tp, TypeVar) else tp


class BasePipe(Generic[TIn, TOut]):
    """
    Base opcional para pipes implementados como classes.

    Os tipos são resolvidos uma vez, na definição da subclasse:
        1. parâmetros genéricos (`class Parse(BasePipe[str, int])`)
        2. anotações de `execute`
        3. `Any`

    Atributos de classe `input_type` / `output_type` declarados
    explicitamente têm precedência.
    """

    input_type: Any = Any
    output_type: Any = Any

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        declared_in = cls.__dict__.get("input_type")
        declared_out = cls.__dict__.get("output_type")

        args = _generic_args(cls)
        if args is not None:
            input_type, output_type = (_concrete(a) for a in args)
        else:
            # herda os tipos já resolvidos da classe mãe
            input_type, output_type = cls.input_type, cls.output_type

        if input_type is Any and output_type is Any and "execute" in cls.__dict__:
            input_type, output_type = _hints_of(cls.__dict__["execute"])

        cls.input_type = declared_in if declared_in is not None else input_type
        cls.output_type = declared_out if declared_out is not None else output_type

    @property
    def name(self) -> str:
        return type(self).__name__

    def execute(self, value: TIn) -> TOut:
        raise NotImplementedError


class FunctionPipe(Generic[TIn, TOut]):
    """Pipe que embrulha uma função comum de um argumento."""

    def __init__(
        self,
        func: Callable[[TIn], TOut],
        *,
        input_type: Any = None,
        output_type: Any = None,
        name: Optional[str] = None,
    ) -> None:
        if not callable(func):
            raise TypeError(f"FunctionPipe requer callable, recebido: {type(func).__name__}")
        hinted_in, hinted_out = _hints_of(func)
        self.func = func
        self.input_type = input_type if input_type is not None else hinted_in
        self.output_type = output_type if output_type is not None else hinted_out
        self.name = name or getattr(func, "__name__", type(func).__name__)

    def execute(self, value: TIn) -> TOut:
        return self.func(value)

    def __repr__(self) -> str:
        return f"FunctionPipe({self.name})"


def pipe(
    func: Optional[Callable[..., Any]] = None,
    *,
    input_type: Any = None,
    output_type: Any = None,
    name: Optional[str] = None,
):
    """
    Cria um `FunctionPipe`. Pode ser usado como chamada ou como decorator.

        to_int = pipe(int, input_type=str, output_type=int)

        @pipe
        def parse(text: str) -> int:
            ...
    """
    def wrap(f: Callable[..., Any]) -> FunctionPipe:
        return FunctionPipe(f, input_type=input_type, output_type=output_type, name=name)

    if func is None:
        return wrap
    return wrap(func)
