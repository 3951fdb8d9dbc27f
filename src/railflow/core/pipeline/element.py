# src/railflow/core/pipeline/element.py
"""
Modelo de estado (Element) do pipeline do railflow.

Um Element é o valor de dois estados que flui pelo pipeline em tempo de
avaliação:

    - Success(value)   → caminho de sucesso, com um valor opaco
    - Failure(context) → caminho de falha, com um contexto opaco

Contrato de classificação:
    Funções fornecidas pelo autor do pipeline retornam um valor cru
    (interpretado como sucesso) ou um Element explícito. O único marcador
    de falha é `Failure`, construído via `failure()` com ou sem payload.
    Nenhuma inspeção estrutural ad hoc é feita sobre valores crus.

Invariantes:
    - Um Element é sempre exatamente um dos dois estados
    - Elements são imutáveis
    - O engine nunca inspeciona `value` nem `context`

Limites explícitos:
    - Não executa Steps
    - Não interpreta o motivo de uma falha
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Union

from railflow.core.errors import invalid_element
from railflow.core.exceptions import InvalidElement


class _Sentinel(Enum):
    """
    Marcadores canônicos para posições sem valor.

    Não derivam de `str`: um payload legítimo como `"no_payload"` nunca
    é confundido com a ausência de payload.
    """

    NO_PAYLOAD = "no_payload"
    NO_INPUT = "no_input"

    def __repr__(self) -> str:
        return self.name


# Falha sinalizada sem payload.
NO_PAYLOAD = _Sentinel.NO_PAYLOAD

# Falha produzida por uma função sem argumento de entrada.
NO_INPUT = _Sentinel.NO_INPUT


@dataclass(frozen=True)
class Success:
    """Element no caminho de sucesso."""

    value: Any


@dataclass(frozen=True)
class Failure:
    """Element no caminho de falha.

    `context` é opaco para o engine. Na variante tagged ele é sempre um
    `TaggedFailure`.
    """

    context: Any = NO_PAYLOAD


Element = Union[Success, Failure]


def success(value: Any) -> Success:
    return Success(value)


def failure(context: Any = NO_PAYLOAD) -> Failure:
    return Failure(context)


def is_element(value: Any) -> bool:
    return isinstance(value, (Success, Failure))


def require_element(value: Any, *, where: str = "element") -> Element:
    """Retorna `value` se for um Element; caso contrário levanta InvalidElement."""
    if not is_element(value):
        raise InvalidElement.from_payload(invalid_element(value=value, where=where))
    return value


def classify(result: Any) -> Element:
    """
    Classifica o retorno de uma função do autor como Element.

    Regras:
        - Success ou Failure → retornado sem alteração
        - qualquer outro valor → Success(valor)
    """
    if is_element(result):
        return result
    return Success(result)
