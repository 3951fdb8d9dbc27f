"""
railflow — Canonical Error Structures (v1)

Este módulo define o padrão canônico de erros do railflow.
Falhas do engine (faults) são tratadas como artefatos de diagnóstico e
fazem parte do contrato operacional do sistema, devendo ser:

- explícitas
- serializáveis
- acionáveis

Falhas de dados (o estado `Failure` de um Element) NÃO são faults e não
passam por este módulo: elas fluem normalmente pelo pipeline.
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from typing import Any, Dict, Optional


# Limite padrão para a representação textual de valores em payloads.
DEFAULT_MAX_REPR = 200


# ---------------------------------------------------------------------------
# Payload canônico
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class FlowErrorPayload:
    """
    Payload canônico de erro do railflow.

    Campos:
    - type: código estável do erro (não é texto livre)
    - message: mensagem curta, humana e objetiva
    - details: dados estruturados relevantes para diagnóstico
    - hint: ação sugerida ao autor do pipeline (onde corrigir)
    """

    type: str
    message: str
    details: Dict[str, Any]
    hint: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Retorna representação serializável do erro."""
        return asdict(self)


# ---------------------------------------------------------------------------
# Catálogo canônico de tipos de erro (v1)
# ---------------------------------------------------------------------------

# Construção do pipeline
PIPELINE_MISSING_TERMINAL_STEP = "PIPELINE_MISSING_TERMINAL_STEP"

# Protocolo Element / Signal
ELEMENT_INVALID = "ELEMENT_INVALID"
SIGNAL_INVALID = "SIGNAL_INVALID"

# Variante tagged
STEP_INFALLIBLE_FAILED = "STEP_INFALLIBLE_FAILED"


def bounded_repr(value: Any, max_repr: int = DEFAULT_MAX_REPR) -> str:
    """
    Retorna `repr(value)` truncado em `max_repr` caracteres.

    Um `__repr__` do autor que levanta exceção vira `<unrepresentable T>`:
    renderizar um valor para diagnóstico nunca interrompe a avaliação.
    """
    try:
        text = repr(value)
    except Exception:  # noqa: BLE001
        text = f"<unrepresentable {type(value).__name__}>"
    if max_repr > 0 and len(text) > max_repr:
        return text[: max(max_repr - 3, 0)] + "..."
    return text


# ---------------------------------------------------------------------------
# Helpers de fábrica
# ---------------------------------------------------------------------------

def missing_terminal_step(
    *,
    steps_evaluated: int,
    last_element: Any,
    max_repr: int = DEFAULT_MAX_REPR,
    hint: str = "Termine o pipeline com um combinador terminal (terminal_on_success, terminal_on_failure ou terminal_reduce).",
) -> FlowErrorPayload:
    return FlowErrorPayload(
        type=PIPELINE_MISSING_TERMINAL_STEP,
        message="O último combinador do pipeline deve ser terminal",
        details={
            "steps_evaluated": steps_evaluated,
            "last_element": bounded_repr(last_element, max_repr),
        },
        hint=hint,
    )


def invalid_element(
    *,
    value: Any,
    where: str,
    step_index: Optional[int] = None,
    max_repr: int = DEFAULT_MAX_REPR,
    hint: str = "Construa elementos apenas via success()/failure() (ou ok()/error() na variante tagged).",
) -> FlowErrorPayload:
    return FlowErrorPayload(
        type=ELEMENT_INVALID,
        message="Valor não é um Element válido (Success ou Failure)",
        details={
            "value": bounded_repr(value, max_repr),
            "value_type": type(value).__name__,
            "where": where,
            "step_index": step_index,
        },
        hint=hint,
    )


def invalid_signal(
    *,
    value: Any,
    step_index: int,
    step_name: Optional[str] = None,
    max_repr: int = DEFAULT_MAX_REPR,
    hint: str = "Um Step deve retornar exatamente Continue(element) ou Stop(result).",
) -> FlowErrorPayload:
    return FlowErrorPayload(
        type=SIGNAL_INVALID,
        message="Step retornou um valor que não é Signal",
        details={
            "value": bounded_repr(value, max_repr),
            "value_type": type(value).__name__,
            "step_index": step_index,
            "step_name": step_name,
        },
        hint=hint,
    )


def infallible_step_failed(
    *,
    input: Any,
    output: Any,
    max_repr: int = DEFAULT_MAX_REPR,
    hint: str = "Use lift_fallible com uma tag se a função pode falhar, ou corrija a função.",
) -> FlowErrorPayload:
    return FlowErrorPayload(
        type=STEP_INFALLIBLE_FAILED,
        message=f"infallible step({bounded_repr(input, max_repr)}) evaluated to an illegal value: {bounded_repr(output, max_repr)}",
        details={
            "input": bounded_repr(input, max_repr),
            "output": bounded_repr(output, max_repr),
        },
        hint=hint,
    )
