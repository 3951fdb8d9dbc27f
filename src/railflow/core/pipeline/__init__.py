# src/railflow/core/pipeline/__init__.py
"""
# Pipeline Core — railflow

Este pacote define os contratos canônicos e as estruturas fundamentais
que compõem um pipeline no railflow.

## Componentes

- **element**: `Success`, `Failure` e a convenção de classificação
- **types**: sinais `Continue` / `Stop`, `StepKind`, `StepDescriptor`
- **step**: `Step` (Protocol) — qualquer callable Element → Signal
- **builder**: `Pipeline` imutável, `of_success`, `of_failure`, `append`, `compose`
- **combinators**: combinadores de canal (map / terminal)
- **context**: `EvaluationContext` (eventos estruturados de uma avaliação)

## Invariantes

- A ordem de autoria é a ordem de avaliação
- Nenhuma composição executa Steps
"""

from .builder import Pipeline, append, compose, of_failure, of_success
from .combinators import (
    failure_mapper,
    failure_returner,
    map_failure,
    map_success,
    success_mapper,
    success_returner,
    terminal_on_failure,
    terminal_on_success,
)
from .context import EvaluationContext, new_context
from .element import (
    NO_INPUT,
    NO_PAYLOAD,
    Element,
    Failure,
    Success,
    classify,
    failure,
    is_element,
    require_element,
    success,
)
from .step import Step, as_descriptor
from .types import Continue, Signal, Stop, StepDescriptor, StepKind, is_signal

__all__ = [
    "Continue",
    "Element",
    "EvaluationContext",
    "Failure",
    "NO_INPUT",
    "NO_PAYLOAD",
    "Pipeline",
    "Signal",
    "Step",
    "StepDescriptor",
    "StepKind",
    "Stop",
    "Success",
    "append",
    "as_descriptor",
    "classify",
    "compose",
    "failure",
    "failure_mapper",
    "failure_returner",
    "is_element",
    "is_signal",
    "map_failure",
    "map_success",
    "new_context",
    "of_failure",
    "of_success",
    "require_element",
    "success",
    "success_mapper",
    "success_returner",
    "terminal_on_failure",
    "terminal_on_success",
]
