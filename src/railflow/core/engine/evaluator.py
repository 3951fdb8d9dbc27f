# src/railflow/core/engine/evaluator.py
"""
Evaluator de pipelines do railflow.

O Evaluator percorre os Steps de um Pipeline da esquerda para a direita,
na ordem em que foram anexados, aplicando cada um ao Element corrente.

Algoritmo:
    1. Aplica o Step ao Element corrente, obtendo um Signal
    2. Continue(next) → o Element corrente passa a ser `next`
    3. Stop(result) → a avaliação termina e `result` é retornado;
       os Steps restantes não são avaliados

Contrato terminal:
    Esgotar os Steps após um Continue (inclusive num Pipeline sem Steps)
    é erro de construção e levanta `MissingTerminalStep`.

Política de faults:
    - Faults são registrados como evento ERROR no contexto e relançados
    - Exceções levantadas por funções do autor propagam sem alteração
    - Nenhum retry ou recuperação é aplicado

Rastreamento:
    Valores do autor (Elements) só são convertidos em texto quando eventos
    DEBUG estão habilitados; abaixo disso o Evaluator não os toca.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from railflow.core.errors import bounded_repr, invalid_element, invalid_signal, missing_terminal_step
from railflow.core.exceptions import (
    FlowException,
    InvalidElement,
    InvalidSignal,
    MissingTerminalStep,
)
from railflow.core.pipeline.builder import Pipeline
from railflow.core.pipeline.context import EvaluationContext, new_context
from railflow.core.pipeline.element import Element, is_element
from railflow.core.pipeline.types import Continue, Stop, StepDescriptor


class Evaluator:
    """Avalia um Pipeline uma única vez, registrando eventos em `ctx`."""

    def __init__(self, *, pipeline: Pipeline, ctx: Optional[EvaluationContext] = None):
        self.pipeline: Pipeline = pipeline
        self.ctx: EvaluationContext = ctx if ctx is not None else new_context()

    def _trace(
        self,
        *,
        step_index: Optional[int],
        level: str,
        message: str,
        shown: Optional[Dict[str, Any]] = None,
        **extra: Any,
    ) -> None:
        settings = self.ctx.settings
        if not settings.enabled_for(level):
            return
        # payloads do autor só são renderizados em DEBUG
        if shown and settings.enabled_for("DEBUG"):
            for key, value in shown.items():
                extra[key] = bounded_repr(value, settings.max_repr)
        self.ctx.log(step_index=step_index, level=level, message=message, **extra)

    def _fault(self, exc: FlowException, *, step_index: Optional[int]) -> FlowException:
        self.ctx.log(
            step_index=step_index,
            level="ERROR",
            message=exc.message,
            error=exc.to_payload().to_dict(),
        )
        return exc

    def _apply(self, index: int, step: StepDescriptor, element: Element) -> Any:
        try:
            signal = step(element)
        except FlowException as exc:
            # fault levantado dentro do Step (ex.: InfallibleStepFailed)
            self._fault(exc, step_index=index)
            raise

        if isinstance(signal, Stop):
            self._trace(
                step_index=index,
                level="DEBUG",
                message="stop",
                step_name=step.name,
                step_kind=step.kind.value,
                shown={"element": element},
            )
            return signal

        if not isinstance(signal, Continue):
            payload = invalid_signal(
                value=signal,
                step_index=index,
                step_name=step.name,
                max_repr=self.ctx.settings.max_repr,
            )
            raise self._fault(InvalidSignal.from_payload(payload), step_index=index)

        if not is_element(signal.element):
            payload = invalid_element(
                value=signal.element,
                where=f"Continue emitido pelo step '{step.name}'",
                step_index=index,
                max_repr=self.ctx.settings.max_repr,
            )
            raise self._fault(InvalidElement.from_payload(payload), step_index=index)

        self._trace(
            step_index=index,
            level="DEBUG",
            message="continue",
            step_name=step.name,
            step_kind=step.kind.value,
            shown={"element": signal.element},
        )
        return signal

    def run(self) -> Any:
        element = self.pipeline.initial
        if not is_element(element):
            payload = invalid_element(
                value=element,
                where="Pipeline.initial",
                max_repr=self.ctx.settings.max_repr,
            )
            raise self._fault(InvalidElement.from_payload(payload), step_index=None)

        self._trace(
            step_index=None,
            level="INFO",
            message="evaluation started",
            steps=len(self.pipeline.steps),
            shown={"initial": element},
        )

        for index, step in enumerate(self.pipeline.steps):
            signal = self._apply(index, step, element)
            if isinstance(signal, Stop):
                self._trace(
                    step_index=index,
                    level="INFO",
                    message="evaluation stopped",
                    step_name=step.name,
                    skipped=len(self.pipeline.steps) - index - 1,
                )
                return signal.result
            element = signal.element

        # Continue recebido do último Step (ou Pipeline sem Steps).
        payload = missing_terminal_step(
            steps_evaluated=len(self.pipeline.steps),
            last_element=element,
            max_repr=self.ctx.settings.max_repr,
        )
        raise self._fault(MissingTerminalStep.from_payload(payload), step_index=None)


def evaluate(pipeline: Pipeline, *, ctx: Optional[EvaluationContext] = None) -> Any:
    """Avalia `pipeline` e retorna o resultado do primeiro Stop."""
    return Evaluator(pipeline=pipeline, ctx=ctx).run()
