"""
railflow — Canonical Exceptions (v1)

Este módulo define as exceções tipadas (faults) do railflow.

Objetivo:
- Permitir que o Evaluator e os combinadores levantem faults semânticos tipados
- Permitir que chamadores e testes distingam causas sem comparar strings
- Facilitar o mapeamento determinístico para FlowErrorPayload

Regras:
- Faults indicam pipeline mal construído, nunca uma falha de dados.
- Exceções carregam apenas dados estruturados (serializáveis) em `details`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, ClassVar, Dict, Optional

from .errors import (
    ELEMENT_INVALID,
    PIPELINE_MISSING_TERMINAL_STEP,
    SIGNAL_INVALID,
    STEP_INFALLIBLE_FAILED,
    FlowErrorPayload,
)


@dataclass(eq=False)
class FlowException(Exception):
    """Base class para faults do railflow.

    Importante:
    - Sempre carregar dados estruturados em `details`
    - Mensagem deve ser curta e humana
    - Não frozen: `__traceback__` é atribuído ao relançar
    """

    message: str
    details: Dict[str, Any] = field(default_factory=dict)
    hint: Optional[str] = None

    error_type: ClassVar[str] = "FLOW_ERROR"

    def __str__(self) -> str:
        return self.message

    @classmethod
    def from_payload(cls, payload: FlowErrorPayload) -> "FlowException":
        return cls(message=payload.message, details=dict(payload.details), hint=payload.hint)

    def to_payload(self) -> FlowErrorPayload:
        return FlowErrorPayload(
            type=self.error_type,
            message=self.message,
            details=dict(self.details),
            hint=self.hint,
        )


# ---------------------------------------------------------------------------
# Construção do pipeline
# ---------------------------------------------------------------------------

@dataclass(eq=False)
class MissingTerminalStep(FlowException):
    """Steps esgotados sem que nenhum emitisse Stop."""

    error_type: ClassVar[str] = PIPELINE_MISSING_TERMINAL_STEP


# ---------------------------------------------------------------------------
# Protocolo Element / Signal
# ---------------------------------------------------------------------------

@dataclass(eq=False)
class InvalidElement(FlowException):
    """Valor apresentado como Element não é Success nem Failure."""

    error_type: ClassVar[str] = ELEMENT_INVALID


@dataclass(eq=False)
class InvalidSignal(FlowException):
    """Step retornou algo que não é Continue nem Stop."""

    error_type: ClassVar[str] = SIGNAL_INVALID


# ---------------------------------------------------------------------------
# Variante tagged
# ---------------------------------------------------------------------------

@dataclass(eq=False)
class InfallibleStepFailed(FlowException):
    """Função registrada como infalível retornou uma falha."""

    error_type: ClassVar[str] = STEP_INFALLIBLE_FAILED
