# src/railflow/core/pipeline/builder.py
"""
Builder de pipelines do railflow.

Um Pipeline é uma sequência ordenada de Steps mais um Element inicial.
A composição é preguiçosa: nenhuma chamada deste módulo executa Steps;
a avaliação acontece apenas no Evaluator.

Princípios fundamentais:
    - Composição persistente: todo combinador retorna um NOVO Pipeline
    - A ordem de autoria é a ordem de avaliação (sem reversão interna)
    - Operações puramente de dados, sem falhas de domínio

Invariantes:
    - `Pipeline.steps` é uma tupla de StepDescriptor em ordem de autoria
    - Um Pipeline existente nunca é mutado
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Tuple

from .element import Element, Failure, Success
from .step import as_descriptor
from .types import StepDescriptor


@dataclass(frozen=True)
class Pipeline:
    """
    Pipeline imutável: Element inicial + Steps em ordem de autoria.

    Campos:
        - initial: Element de partida da avaliação
        - steps: tupla de StepDescriptor (o último é avaliado por último)
    """
    initial: Element
    steps: Tuple[StepDescriptor, ...] = field(default_factory=tuple)

    def __len__(self) -> int:
        return len(self.steps)

    def describe(self) -> List[Dict[str, Any]]:
        """Lista serializável dos Steps, útil para inspeção e rastreamento."""
        return [
            {"index": idx, "name": step.name, "kind": step.kind.value, "terminal": step.terminal}
            for idx, step in enumerate(self.steps)
        ]

    def then(self, step: Any) -> "Pipeline":
        return append(self, step)

    def pipe(self, transform: Callable[["Pipeline"], "Pipeline"]) -> "Pipeline":
        return compose(self, transform)


def of_success(value: Any) -> Pipeline:
    """Cria um Pipeline vazio cujo Element inicial é Success(value)."""
    return Pipeline(initial=Success(value))


def of_failure(context: Any) -> Pipeline:
    """Cria um Pipeline vazio cujo Element inicial é Failure(context)."""
    return Pipeline(initial=Failure(context))


def append(pipeline: Pipeline, step: Any) -> Pipeline:
    """Retorna um novo Pipeline com `step` ao final da sequência."""
    return Pipeline(initial=pipeline.initial, steps=pipeline.steps + (as_descriptor(step),))


def compose(pipeline: Pipeline, transform: Callable[[Pipeline], Pipeline]) -> Pipeline:
    """
    Aplica uma transformação Pipeline → Pipeline.

    Permite reutilizar sub-pipelines nomeados; não introduz semântica nova
    além de `append`.
    """
    return transform(pipeline)
