# src/railflow/core/pipeline/step.py
"""
Contrato canônico de Step do railflow.

Um Step é a menor unidade avaliável do pipeline: uma função que recebe o
Element corrente e retorna um Signal (Continue ou Stop).

Princípios fundamentais:
    - Steps não conhecem o Evaluator
    - Steps não controlam a ordem de avaliação
    - Conformidade é garantida por duck typing (@runtime_checkable)

Limites explícitos:
    - Não define retry nem tratamento de exceções
    - Não registra eventos de rastreamento diretamente
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from .element import Element
from .types import Signal, StepDescriptor, StepKind


@runtime_checkable
class Step(Protocol):
    """Qualquer callable Element → Signal."""

    def __call__(self, element: Element) -> Signal:
        ...


def as_descriptor(step: Any) -> StepDescriptor:
    """
    Normaliza um Step em StepDescriptor.

    Descritores são retornados sem alteração; callables crus são
    envolvidos como `StepKind.CUSTOM`, nomeados pelo `__name__` quando
    disponível.

    Raises:
        TypeError: Se `step` não for callable.
    """
    if isinstance(step, StepDescriptor):
        return step
    if not isinstance(step, Step):
        raise TypeError(f"Step deve ser callable, recebido: {type(step).__name__}")
    name = getattr(step, "__name__", None) or type(step).__name__
    return StepDescriptor(name=name, kind=StepKind.CUSTOM, apply=step)
