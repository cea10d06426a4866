# tests/core/config/test_merge.py
"""
Testes da política de deep-merge de configuração.

Os testes asseguram que:
- escalares são sobrescritos
- dicionários são mesclados recursivamente
- listas são substituídas por inteiro
- conflitos de tipo são rejeitados com o caminho completo da chave
- os inputs nunca são mutados
"""

import pytest

try:
    from pipechain.core.config.merge import deep_merge
    from pipechain.core.config.errors import ConfigTypeConflictError
except Exception as e:  # noqa: BLE001
    deep_merge = None
    ConfigTypeConflictError = None
    _IMPORT_ERR = e
else:
    _IMPORT_ERR = None


def _require_imports():
    if _IMPORT_ERR is not None:
        pytest.fail(
            "Missing merge module. Implement:\n"
            "- src/pipechain/core/config/merge.py (deep_merge)\n"
            f"Import error: {_IMPORT_ERR}"
        )


def test_merge_simple_override():
    _require_imports()
    out = deep_merge({"engine": {"error_delimiter": "/"}}, {"engine": {"error_delimiter": ";"}})
    assert out == {"engine": {"error_delimiter": ";"}}


def test_merge_nested_dict_keeps_untouched_keys():
    """
    Verifica que chaves irmãs não sobrescritas sobrevivem ao merge recursivo.
    """
    _require_imports()
    base = {"engine": {"strict_chaining": True, "error_delimiter": "/"}, "logging": {"level": "INFO"}}
    override = {"engine": {"strict_chaining": False}}

    out = deep_merge(base, override)

    assert out == {
        "engine": {"strict_chaining": False, "error_delimiter": "/"},
        "logging": {"level": "INFO"},
    }


def test_merge_list_override_total():
    _require_imports()
    out = deep_merge({"tags": ["a", "b"]}, {"tags": ["c"]})
    assert out["tags"] == ["c"]


def test_merge_none_is_a_plain_override():
    _require_imports()
    assert deep_merge({"a": 1}, {"a": None}) == {"a": None}
    assert deep_merge({"a": None}, {"a": 1}) == {"a": 1}


def test_merge_type_conflict_reports_key_path():
    _require_imports()
    with pytest.raises(ConfigTypeConflictError) as info:
        deep_merge({"engine": {"strict_chaining": True}}, {"engine": {"strict_chaining": "off"}})

    assert "engine.strict_chaining" in str(info.value)


def test_merge_dict_replaced_by_scalar_is_a_conflict():
    _require_imports()
    with pytest.raises(ConfigTypeConflictError):
        deep_merge({"engine": {"strict_chaining": True}}, {"engine": "off"})


def test_merge_does_not_mutate_inputs():
    _require_imports()
    base = {"engine": {"strict_chaining": True}, "tags": ["a"]}
    override = {"engine": {"error_delimiter": ";"}, "tags": ["b"]}

    out = deep_merge(base, override)
    out["engine"]["strict_chaining"] = False
    out["tags"].append("c")

    assert base == {"engine": {"strict_chaining": True}, "tags": ["a"]}
    assert override == {"engine": {"error_delimiter": ";"}, "tags": ["b"]}
