# src/railflow/__init__.py
"""
railflow — pipelines lineares de Steps que podem ter sucesso ou falhar.

Cada falha carrega contexto posicional suficiente para ser distinguida
das falhas produzidas por outros Steps do mesmo pipeline, algo que um
`match` genérico sobre valores de erro estruturalmente idênticos não
consegue fazer.

Arquitetura em alto nível:
    - core.pipeline   → Element, Signals, builder e combinadores de canal
    - core.engine     → Evaluator
    - core.tagged     → variante com falhas (tag, input, output)
    - core.config     → configuração do engine (YAML/JSON)
"""

from .core.engine import Evaluator, evaluate
from .core.exceptions import (
    FlowException,
    InfallibleStepFailed,
    InvalidElement,
    InvalidSignal,
    MissingTerminalStep,
)
from .core.pipeline import (
    NO_INPUT,
    NO_PAYLOAD,
    Continue,
    EvaluationContext,
    Failure,
    Pipeline,
    Stop,
    Success,
    append,
    compose,
    failure,
    map_failure,
    map_success,
    new_context,
    of_failure,
    of_success,
    success,
    terminal_on_failure,
    terminal_on_success,
)
from .core.tagged import (
    TaggedFailure,
    lift_fallible,
    lift_flat,
    lift_infallible,
    of_error,
    of_infallible_producer,
    of_producer,
    reduce,
    terminal_reduce,
)

__all__ = [
    "Continue",
    "EvaluationContext",
    "Evaluator",
    "Failure",
    "FlowException",
    "InfallibleStepFailed",
    "InvalidElement",
    "InvalidSignal",
    "MissingTerminalStep",
    "NO_INPUT",
    "NO_PAYLOAD",
    "Pipeline",
    "Stop",
    "Success",
    "TaggedFailure",
    "append",
    "compose",
    "evaluate",
    "failure",
    "lift_fallible",
    "lift_flat",
    "lift_infallible",
    "map_failure",
    "map_success",
    "new_context",
    "of_error",
    "of_failure",
    "of_infallible_producer",
    "of_producer",
    "of_success",
    "reduce",
    "success",
    "terminal_on_failure",
    "terminal_on_success",
    "terminal_reduce",
]
