# src/railflow/core/pipeline/combinators.py
"""
Combinadores de canal do railflow.

Cada combinador envolve uma função do autor em um Step que observa
apenas um canal (sucesso ou falha) e deixa o outro passar inalterado.

Semântica por canal:
    - map_success:        Success(v) → Continue(classify(f(v)))
    - map_failure:        Failure(e) → Continue(Failure(payload de classify(f(e))))
    - terminal_on_success: Success(v) → Stop(f(v))
    - terminal_on_failure: Failure(e) → Stop(f(e))

No canal oposto, todo combinador emite Continue(element) sem invocar `f`.
Um combinador terminal nunca emite Continue no seu próprio canal.
"""

from __future__ import annotations

from typing import Any, Callable, Optional

from .builder import Pipeline, append
from .element import Element, Failure, Success, classify
from .types import Continue, Signal, Stop, StepDescriptor, StepKind


def _label(f: Callable[..., Any], name: Optional[str], kind: StepKind) -> str:
    if name:
        return name
    return getattr(f, "__name__", None) or kind.value


def _to_failure(element: Element) -> Failure:
    if isinstance(element, Success):
        return Failure(element.value)
    return element


# ---------------------------------------------------------------------------
# Steps de canal (semântica de aplicação de um único Step)
# ---------------------------------------------------------------------------

def success_mapper(f: Callable[[Any], Any], *, name: Optional[str] = None) -> StepDescriptor:
    def step(element: Element) -> Signal:
        if isinstance(element, Success):
            return Continue(classify(f(element.value)))
        return Continue(element)

    return StepDescriptor(name=_label(f, name, StepKind.MAP_SUCCESS), kind=StepKind.MAP_SUCCESS, apply=step)


def failure_mapper(f: Callable[[Any], Any], *, name: Optional[str] = None) -> StepDescriptor:
    def step(element: Element) -> Signal:
        if isinstance(element, Failure):
            return Continue(_to_failure(classify(f(element.context))))
        return Continue(element)

    return StepDescriptor(name=_label(f, name, StepKind.MAP_FAILURE), kind=StepKind.MAP_FAILURE, apply=step)


def success_returner(f: Callable[[Any], Any], *, name: Optional[str] = None) -> StepDescriptor:
    def step(element: Element) -> Signal:
        if isinstance(element, Success):
            return Stop(f(element.value))
        return Continue(element)

    return StepDescriptor(name=_label(f, name, StepKind.TERMINAL_SUCCESS), kind=StepKind.TERMINAL_SUCCESS, apply=step)


def failure_returner(f: Callable[[Any], Any], *, name: Optional[str] = None) -> StepDescriptor:
    def step(element: Element) -> Signal:
        if isinstance(element, Failure):
            return Stop(f(element.context))
        return Continue(element)

    return StepDescriptor(name=_label(f, name, StepKind.TERMINAL_FAILURE), kind=StepKind.TERMINAL_FAILURE, apply=step)


# ---------------------------------------------------------------------------
# Combinadores de Pipeline
# ---------------------------------------------------------------------------

def map_success(pipeline: Pipeline, f: Callable[[Any], Any], *, name: Optional[str] = None) -> Pipeline:
    return append(pipeline, success_mapper(f, name=name))


def map_failure(pipeline: Pipeline, f: Callable[[Any], Any], *, name: Optional[str] = None) -> Pipeline:
    return append(pipeline, failure_mapper(f, name=name))


def terminal_on_success(pipeline: Pipeline, f: Callable[[Any], Any], *, name: Optional[str] = None) -> Pipeline:
    return append(pipeline, success_returner(f, name=name))


def terminal_on_failure(pipeline: Pipeline, f: Callable[[Any], Any], *, name: Optional[str] = None) -> Pipeline:
    return append(pipeline, failure_returner(f, name=name))
