# tests/core/tagged/test_tagged_pipeline.py
"""
Testes da variante tagged integrada ao Builder e ao Evaluator.

Os testes asseguram que:
- duas etapas que falham com o mesmo payload continuam distinguíveis pela tag
- a primeira falha encerra a aplicação das etapas seguintes
- uma violação de infalibilidade aborta a avaliação com InfallibleStepFailed
- terminal_reduce satisfaz o contrato terminal
- pipelines podem partir de uma função sem argumentos (of_producer)
- um Failure sem TaggedFailure chega intacto ao handler de falha
"""

import pytest

from railflow.core.engine.evaluator import evaluate
from railflow.core.exceptions import InfallibleStepFailed, InvalidElement, MissingTerminalStep
from railflow.core.pipeline.builder import of_failure, of_success
from railflow.core.pipeline.element import NO_INPUT, NO_PAYLOAD, failure
from railflow.core.tagged import (
    TaggedFailure,
    lift_fallible,
    lift_flat,
    lift_infallible,
    of_error,
    of_infallible_producer,
    of_producer,
    ok,
    terminal_reduce,
)


def _workflow(f1, f2, f3):
    p = of_success("some_input")
    p = lift_infallible(p, f1)
    p = lift_fallible(p, "f2_error", f2)
    p = lift_fallible(p, "f3_error", f3)
    return terminal_reduce(
        p,
        lambda result: f"it worked: {result}",
        lambda err: err,
    )


def test_success_path():
    result = evaluate(_workflow(lambda v: "v1", lambda v: "v2", lambda v: "v3"))
    assert result == "it worked: v3"


def test_identical_payloads_are_distinguished_by_tag(unreachable):
    enoent = failure("enoent")

    from_f2 = evaluate(_workflow(lambda v: "v1", lambda v: enoent, unreachable))
    from_f3 = evaluate(_workflow(lambda v: "v1", lambda v: "v2", lambda v: enoent))

    assert from_f2 == TaggedFailure("f2_error", "v1", "enoent")
    assert from_f3 == TaggedFailure("f3_error", "v2", "enoent")
    assert from_f2.output == from_f3.output
    assert from_f2.tag != from_f3.tag


def test_unstructured_failures_are_distinguished_by_tag():
    from_f2 = evaluate(_workflow(lambda v: "v1", lambda v: failure(), lambda v: "v3"))
    assert from_f2 == TaggedFailure("f2_error", "v1", NO_PAYLOAD)


def test_infallible_violation_aborts_evaluation(unreachable):
    p = _workflow(lambda v: failure(), unreachable, unreachable)
    with pytest.raises(InfallibleStepFailed) as excinfo:
        evaluate(p)
    assert excinfo.value.details["input"] == "'some_input'"


def test_infallible_step_never_checks_pass_through_failures(unreachable):
    p = of_error("earlier", "in", "context")
    p = lift_infallible(p, unreachable)
    p = terminal_reduce(p, unreachable, lambda e: e.tag)
    assert evaluate(p) == "earlier"


def test_lift_flat_in_pipeline(unreachable):
    p = lift_flat(of_success(1), lambda v: ok(v + 1))
    p = terminal_reduce(p, lambda v: v, unreachable)
    assert evaluate(p) == 2

    bad = terminal_reduce(lift_flat(of_success(1), lambda v: v + 1), unreachable, unreachable)
    with pytest.raises(InvalidElement):
        evaluate(bad)


def test_tagged_pipeline_still_requires_terminal_step():
    p = lift_fallible(of_success(1), "tag", lambda v: v)
    with pytest.raises(MissingTerminalStep):
        evaluate(p)


def test_step_names_include_tag():
    def parse(value):
        return value

    p = lift_fallible(of_success(1), "parse_error", parse)
    assert p.describe() == [
        {"index": 0, "name": "parse['parse_error']", "kind": "lift_fallible", "terminal": False},
    ]


def test_of_producer_seeds_a_pipeline(unreachable):
    p = lift_fallible(of_producer("load_error", lambda: "raw"), "parse_error", lambda v: v.upper())
    assert evaluate(terminal_reduce(p, lambda v: v, unreachable)) == "RAW"

    failed = of_producer("load_error", lambda: failure("enoent"))
    failed = lift_fallible(failed, "parse_error", unreachable)
    assert evaluate(terminal_reduce(failed, unreachable, lambda e: e)) == TaggedFailure(
        "load_error", NO_INPUT, "enoent"
    )


def test_of_producer_runs_producer_once(call_log):
    def producer():
        call_log.append("called")
        return 1

    p = terminal_reduce(of_producer("tag", producer), lambda v: v, lambda e: e)
    assert evaluate(p) == 1
    assert evaluate(p) == 1
    assert call_log == ["called"]


def test_of_infallible_producer(unreachable):
    p = terminal_reduce(of_infallible_producer(lambda: 5), lambda v: v * 2, unreachable)
    assert evaluate(p) == 10

    with pytest.raises(InfallibleStepFailed):
        of_infallible_producer(lambda: failure())


def test_untagged_failure_reaches_the_failure_handler_as_is(unreachable):
    # of_failure não produz TaggedFailure: a variante tagged não o converte
    p = lift_fallible(of_failure("raw context"), "tag", unreachable)
    p = terminal_reduce(p, unreachable, lambda e: e)
    result = evaluate(p)
    assert result == "raw context"
    assert not isinstance(result, TaggedFailure)
