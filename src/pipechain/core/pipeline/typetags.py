"""
Type tags do pipechain.

Um *type tag* é o tipo declarado de entrada ou de saída de um pipe: uma
classe (`int`, `datetime`) ou uma construção de `typing` (`list[datetime]`,
`Iterable[datetime]`, `Optional[str]`, `Any`).

Este módulo concentra as três operações que o engine faz sobre tags:
    - same_type     → identidade estável (regra de recuperação same-type)
    - is_assignable → compatibilidade (checagem de encadeamento e gate final)
    - type_name     → nome legível, usado apenas em mensagens

Decisões arquiteturais:
    - Comparação é feita sobre uma chave normalizada, nunca sobre strings
    - `typing.List[int]` e `list[int]` são o mesmo tipo
    - Ordem dos membros de uma união é irrelevante
    - Argumentos genéricos ausentes se comportam como `Any`
    - `Any` é compatível nos dois sentidos (tipagem gradual)

Limites explícitos:
    - Não valida valores em runtime (apenas tags declaradas)
    - Não resolve TypeVars
    - Não implementa variância completa de PEP 484
"""

from __future__ import annotations

import types
from typing import Any, Hashable, Union, get_args, get_origin

_NoneType = type(None)


def _is_union(tp: Any) -> bool:
    origin = get_origin(tp)
    return origin is Union or origin is types.UnionType


def _key(tp: Any) -> Hashable:
    if tp is None:
        return _NoneType
    if _is_union(tp):
        return (Union, frozenset(_key(a) for a in get_args(tp)))
    origin = get_origin(tp)
    if origin is None:
        return tp
    return (origin, tuple(_key(a) for a in get_args(tp)))


def same_type(a: Any, b: Any) -> bool:
    """Verdadeiro quando as duas tags designam o mesmo tipo."""
    try:
        return _key(a) == _key(b)
    except TypeError:
        # argumento genérico não hashable (ex.: Literal com lista)
        return a == b


def _split(tp: Any):
    if tp is None:
        return _NoneType, ()
    origin = get_origin(tp)
    if origin is None:
        return tp, ()
    return origin, get_args(tp)


def is_assignable(actual: Any, declared: Any) -> bool:
    """
    Verifica se um valor do tipo `actual` pode ser usado onde `declared` é esperado.

    Regras (v1):
        - `declared` Any, ou `actual` Any → compatível
        - mesmo tipo (`same_type`) → compatível
        - `declared` união → compatível com algum membro
        - `actual` união → todos os membros compatíveis com `declared`
        - classes: `issubclass` entre as origens em runtime
          (`list` → `collections.abc.Iterable`)
        - argumentos genéricos comparados par a par (covariante);
          ausência de argumentos em qualquer lado equivale a `Any`
        - `tuple[X, ...]` declarado aceita tuplas de qualquer tamanho com
          elementos compatíveis com `X`
    """
    if declared is Any or actual is Any:
        return True
    if same_type(actual, declared):
        return True

    if _is_union(declared):
        return any(is_assignable(actual, member) for member in get_args(declared))
    if _is_union(actual):
        return all(is_assignable(member, declared) for member in get_args(actual))

    a_origin, a_args = _split(actual)
    d_origin, d_args = _split(declared)

    if not (isinstance(a_origin, type) and isinstance(d_origin, type)):
        return False
    try:
        if not issubclass(a_origin, d_origin):
            return False
    except TypeError:
        return False

    if not d_args or not a_args:
        return True
    if d_origin is tuple and len(d_args) == 2 and d_args[1] is Ellipsis:
        if a_args[-1] is Ellipsis:
            a_args = a_args[:-1]
        return all(is_assignable(a, d_args[0]) for a in a_args)
    if len(a_args) != len(d_args):
        return all(arg is Any for arg in d_args)
    return all(
        a is d or is_assignable(a, d)
        for a, d in zip(a_args, d_args)
    )


def type_name(tp: Any) -> str:
    """
    Nome legível de uma tag, no padrão de nomes do Python.

    - builtins: nome simples (`int`, `str`)
    - demais classes: `modulo.NomeQualificado` (`datetime.datetime`)
    - construções genéricas e de typing: `repr` (`list[datetime.datetime]`)
    """
    if tp is None or tp is _NoneType:
        return "None"
    if get_origin(tp) is None and isinstance(tp, type):
        if tp.__module__ == "builtins":
            return tp.__qualname__
        return f"{tp.__module__}.{tp.__qualname__}"
    return repr(tp)
