# src/railflow/core/pipeline/types.py
"""
Tipos canônicos do pipeline do railflow.

Este módulo define as estruturas que padronizam a comunicação entre
Steps e o Evaluator.

Componentes principais:
    - Continue       → sinal para prosseguir com um novo Element
    - Stop           → sinal para encerrar a avaliação com um resultado final
    - StepKind       → enum de classificação semântica de Steps
    - StepDescriptor → Step nomeado e classificado, imutável

Invariantes:
    - Todo Step retorna exatamente um Signal (Continue ou Stop)
    - `Stop.result` não é um Element: é a saída final do pipeline
    - Tipos são imutáveis

Limites explícitos:
    - Não executa Steps
    - Não decide políticas de avaliação
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Union

from .element import Element


@dataclass(frozen=True)
class Continue:
    """Prossegue para o próximo Step com `element`."""

    element: Element


@dataclass(frozen=True)
class Stop:
    """Encerra a avaliação imediatamente retornando `result`."""

    result: Any


Signal = Union[Continue, Stop]


def is_signal(value: Any) -> bool:
    return isinstance(value, (Continue, Stop))


class StepKind(str, Enum):
    """
    Tipos semânticos de Steps no pipeline.

    O tipo é puramente informativo: o Evaluator não usa `StepKind` para
    decidir a execução, apenas para enriquecer eventos de rastreamento.

    Tipos definidos:
        - MAP_SUCCESS / MAP_FAILURE: transformações restritas a um canal
        - TERMINAL_SUCCESS / TERMINAL_FAILURE: podem emitir Stop no seu canal
        - LIFT_FALLIBLE / LIFT_INFALLIBLE / LIFT_FLAT: combinadores da variante tagged
        - REDUCE: terminal da variante tagged, sempre emite Stop
        - CUSTOM: Step arbitrário fornecido diretamente pelo autor
    """
    MAP_SUCCESS = "map_success"
    MAP_FAILURE = "map_failure"
    TERMINAL_SUCCESS = "terminal_success"
    TERMINAL_FAILURE = "terminal_failure"
    LIFT_FALLIBLE = "lift_fallible"
    LIFT_INFALLIBLE = "lift_infallible"
    LIFT_FLAT = "lift_flat"
    REDUCE = "reduce"
    CUSTOM = "custom"


_TERMINAL_KINDS = frozenset({
    StepKind.TERMINAL_SUCCESS,
    StepKind.TERMINAL_FAILURE,
    StepKind.REDUCE,
    StepKind.CUSTOM,
})


@dataclass(frozen=True)
class StepDescriptor:
    """
    Step nomeado, acumulado pelo builder e aplicado pelo Evaluator.

    Campos:
        - name: rótulo usado em eventos de rastreamento
        - kind: classificação semântica do Step
        - apply: função Element → Signal

    `terminal` indica se o Step pode emitir Stop. Steps CUSTOM são
    considerados potencialmente terminais, já que são opacos ao engine.
    """
    name: str
    kind: StepKind
    apply: Callable[[Element], Signal]

    @property
    def terminal(self) -> bool:
        return self.kind in _TERMINAL_KINDS

    def __call__(self, element: Element) -> Signal:
        return self.apply(element)
