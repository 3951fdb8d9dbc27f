# src/railflow/core/tagged/combinators.py
"""
Combinadores de Pipeline da variante tagged.

Envolvem as operações de `tagged.operations` em Steps, para que a
variante tagged use o mesmo Builder e o mesmo Evaluator do core.

    - of_producer(tag, g)       → Pipeline(initial=of(tag, g))
    - lift_fallible(p, tag, f)  → Continue(apply_fallible(element, tag, f))
    - lift_infallible(p, f)     → Continue(apply_infallible(element, f))
    - lift_flat(p, f)           → Continue(flat_map(element, f))
    - terminal_reduce(p, s, e)  → Stop(reduce(element, s, e))
"""

from __future__ import annotations

from typing import Any, Callable, Optional

from railflow.core.pipeline.builder import Pipeline, append
from railflow.core.pipeline.element import NO_PAYLOAD, Element
from railflow.core.pipeline.types import Continue, Signal, Stop, StepDescriptor, StepKind

from .failure import error
from .operations import apply_fallible, apply_infallible, flat_map, of, of_infallible, reduce


def _name(f: Callable[..., Any], fallback: str) -> str:
    return getattr(f, "__name__", None) or fallback


def of_error(tag: Any, input: Any, output: Any = NO_PAYLOAD) -> Pipeline:
    """Pipeline vazio cujo Element inicial é `error(tag, input, output)`."""
    return Pipeline(initial=error(tag, input, output))


def of_producer(tag: Any, producer: Callable[[], Any]) -> Pipeline:
    """
    Pipeline vazio cujo Element inicial é `of(tag, producer)`.

    `producer` é chamado uma única vez, aqui, e não a cada avaliação.
    """
    return Pipeline(initial=of(tag, producer))


def of_infallible_producer(producer: Callable[[], Any]) -> Pipeline:
    """
    Como `of_producer`, mas `producer` não pode falhar.

    Raises:
        InfallibleStepFailed: Se `producer` retornar uma falha.
    """
    return Pipeline(initial=of_infallible(producer))


def lift_fallible(pipeline: Pipeline, tag: Any, f: Callable[[Any], Any], *, name: Optional[str] = None) -> Pipeline:
    def step(element: Element) -> Signal:
        return Continue(apply_fallible(element, tag, f))

    label = name or f"{_name(f, 'lift_fallible')}[{tag!r}]"
    return append(pipeline, StepDescriptor(name=label, kind=StepKind.LIFT_FALLIBLE, apply=step))


def lift_infallible(pipeline: Pipeline, f: Callable[[Any], Any], *, name: Optional[str] = None) -> Pipeline:
    def step(element: Element) -> Signal:
        return Continue(apply_infallible(element, f))

    label = name or _name(f, "lift_infallible")
    return append(pipeline, StepDescriptor(name=label, kind=StepKind.LIFT_INFALLIBLE, apply=step))


def lift_flat(pipeline: Pipeline, f: Callable[[Any], Element], *, name: Optional[str] = None) -> Pipeline:
    def step(element: Element) -> Signal:
        return Continue(flat_map(element, f))

    label = name or _name(f, "lift_flat")
    return append(pipeline, StepDescriptor(name=label, kind=StepKind.LIFT_FLAT, apply=step))


def terminal_reduce(
    pipeline: Pipeline,
    on_success: Callable[[Any], Any],
    on_failure: Callable[[Any], Any],
    *,
    name: Optional[str] = None,
) -> Pipeline:
    def step(element: Element) -> Signal:
        return Stop(reduce(element, on_success, on_failure))

    return append(pipeline, StepDescriptor(name=name or "reduce", kind=StepKind.REDUCE, apply=step))
