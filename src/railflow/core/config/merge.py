# src/railflow/core/config/merge.py
"""
Merge de overrides sobre a configuração do railflow.

A configuração do railflow é uma árvore rasa de seções (`engine`, ...)
cujas folhas são escalares (`trace`, `log_level`, `max_repr`). O merge
percorre apenas seções; folhas são substituídas pelo override.

Invariantes:
    - Nenhum input é mutado
    - Chaves não sobrescritas são preservadas
    - Uma folha só pode ser substituída por outra do mesmo tipo, e uma
      seção só por outra seção
"""

from typing import Any, Dict, Tuple

from .errors import ConfigTypeConflictError


def _conflict(path: Tuple[str, ...], base: Any, override: Any) -> ConfigTypeConflictError:
    return ConfigTypeConflictError(
        f"Conflito de tipo em '{'.'.join(path)}': "
        f"{type(base).__name__} vs {type(override).__name__}"
    )


def deep_merge(
    base: Dict[str, Any],
    override: Dict[str, Any],
    *,
    path: Tuple[str, ...] = (),
) -> Dict[str, Any]:
    """
    Aplica `override` sobre `base` e retorna um novo dicionário.

    Args:
        base: Configuração base (ex.: defaults empacotados).
        override: Overrides locais.
        path: Prefixo da seção corrente, usado nas mensagens de erro.

    Raises:
        ConfigTypeConflictError: Se uma chave mudar de tipo (ex.: a seção
            `engine` sobrescrita por um escalar), indicando a chave pontuada.
    """
    merged = dict(base)
    for key, value in override.items():
        where = path + (str(key),)
        if key not in merged:
            merged[key] = value
            continue

        current = merged[key]
        if isinstance(current, dict) and isinstance(value, dict):
            merged[key] = deep_merge(current, value, path=where)
        elif type(current) is type(value):
            merged[key] = value
        else:
            raise _conflict(where, current, value)
    return merged
