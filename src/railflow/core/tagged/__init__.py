# src/railflow/core/tagged/__init__.py
"""
Variante tagged do railflow.

Mesmo esqueleto de Pipeline/Evaluator do core, com o estado Failure
restrito ao registro (tag, input, output). Permite distinguir falhas de
mesma forma pelo ponto do pipeline em que ocorreram, e afirmar que um
passo não pode falhar (`lift_infallible`).

Exemplo:

    p = of_success(value)
    p = lift_infallible(p, f1)
    p = lift_fallible(p, "f2_error", f2)
    p = lift_fallible(p, "f3_error", f3)
    p = terminal_reduce(p, on_success, on_failure)
    evaluate(p)

`on_failure` recebe um TaggedFailure cuja `tag` indica qual de `f2` ou
`f3` falhou, mesmo que ambas retornem o mesmo payload.

Entradas não suportadas:
    Um Failure que não carrega TaggedFailure (ex.: semeado com
    `of_failure`) não é convertido nem rejeitado: atravessa os
    combinadores e chega a `on_failure` com o contexto original.
    Sementes da variante são `of_success`, `of_error` e `of_producer`.
"""

from .combinators import (
    lift_fallible,
    lift_flat,
    lift_infallible,
    of_error,
    of_infallible_producer,
    of_producer,
    terminal_reduce,
)
from .failure import TaggedFailure, default_error, error, ok
from .operations import apply_fallible, apply_infallible, flat_map, of, of_infallible, reduce

__all__ = [
    "TaggedFailure",
    "apply_fallible",
    "apply_infallible",
    "default_error",
    "error",
    "flat_map",
    "lift_fallible",
    "lift_flat",
    "lift_infallible",
    "of",
    "of_error",
    "of_infallible",
    "of_infallible_producer",
    "of_producer",
    "ok",
    "reduce",
    "terminal_reduce",
]
