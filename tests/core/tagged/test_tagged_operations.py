# tests/core/tagged/test_tagged_operations.py
"""
Testes das operações da variante tagged sobre um único Element.

Os testes asseguram que:
- apply_fallible marca falhas com (tag, input, output)
- falhas sem payload usam NO_PAYLOAD como output
- um Failure recebido é repassado sem invocar a função e sem trocar a tag
- apply_infallible levanta InfallibleStepFailed em vez de produzir Failure
- reduce invoca exatamente um handler
- qualquer operação sobre um não-Element levanta InvalidElement
"""

import pytest

from railflow.core.exceptions import InfallibleStepFailed, InvalidElement
from railflow.core.pipeline.element import NO_INPUT, NO_PAYLOAD, Failure, Success, failure, success
from railflow.core.tagged import (
    TaggedFailure,
    apply_fallible,
    apply_infallible,
    default_error,
    error,
    flat_map,
    of,
    of_infallible,
    ok,
    reduce,
)


def identity(x):
    return x


# ---------------------------------------------------------------------------
# constructors
# ---------------------------------------------------------------------------

def test_error_builds_tagged_failure():
    assert error("tag", "in", "out") == Failure(TaggedFailure("tag", "in", "out"))
    assert error("tag", "in") == Failure(TaggedFailure("tag", "in", NO_PAYLOAD))
    assert default_error() == Failure(TaggedFailure(None, None, None))
    assert ok(1) == Success(1)


def test_tagged_failure_unpacks_like_a_triple():
    tag, inp, out = TaggedFailure("t", "i", "o")
    assert (tag, inp, out) == ("t", "i", "o")
    assert TaggedFailure("t", "i", "o").as_tuple() == ("t", "i", "o")


# ---------------------------------------------------------------------------
# of / of_infallible
# ---------------------------------------------------------------------------

def test_of_creates_from_function_value(unreachable):
    assert reduce(of("tag", lambda: "value"), identity, unreachable) == "value"
    assert reduce(of("tag", lambda: success("value")), identity, unreachable) == "value"


def test_of_tags_function_errors(unreachable):
    assert reduce(of("tag", lambda: failure()), unreachable, identity) == TaggedFailure("tag", NO_INPUT, NO_PAYLOAD)
    assert reduce(of("tag", lambda: failure("context")), unreachable, identity) == TaggedFailure("tag", NO_INPUT, "context")


def test_of_infallible(unreachable):
    assert reduce(of_infallible(lambda: "value"), identity, unreachable) == "value"
    with pytest.raises(InfallibleStepFailed):
        of_infallible(lambda: failure())
    with pytest.raises(InfallibleStepFailed):
        of_infallible(lambda: failure("context"))


# ---------------------------------------------------------------------------
# apply_fallible
# ---------------------------------------------------------------------------

def test_apply_fallible_maps_success(unreachable):
    assert reduce(apply_fallible(ok("in"), "tag", lambda v: "out"), identity, unreachable) == "out"
    assert reduce(apply_fallible(ok("in"), "tag", lambda v: success("out")), identity, unreachable) == "out"


def test_apply_fallible_tags_errors():
    assert apply_fallible(ok("in"), "tag", lambda v: failure()) == error("tag", "in", NO_PAYLOAD)
    assert apply_fallible(ok("in"), "tag", lambda v: failure("context")) == error("tag", "in", "context")


def test_apply_fallible_preserves_existing_tag(unreachable):
    original = error("first", "in", "context")
    assert apply_fallible(original, "second", unreachable) is original


def test_apply_fallible_rejects_non_elements():
    with pytest.raises(InvalidElement):
        apply_fallible("not an element", "tag", identity)


# ---------------------------------------------------------------------------
# apply_infallible
# ---------------------------------------------------------------------------

def test_apply_infallible_maps_success(unreachable):
    assert reduce(apply_infallible(ok("in"), lambda v: "out"), identity, unreachable) == "out"


@pytest.mark.parametrize("returned", [failure(), failure(None), failure("context")])
def test_apply_infallible_raises_on_failure(returned):
    with pytest.raises(InfallibleStepFailed) as excinfo:
        apply_infallible(ok("in"), lambda v: returned)
    assert excinfo.value.details["input"] == "'in'"
    assert excinfo.value.details["output"] == repr(returned)


def test_apply_infallible_passes_failures_through(unreachable):
    original = error("tag", "in")
    assert apply_infallible(original, unreachable) is original


def test_apply_infallible_rejects_non_elements():
    with pytest.raises(InvalidElement):
        apply_infallible(None, identity)


# ---------------------------------------------------------------------------
# flat_map
# ---------------------------------------------------------------------------

def test_flat_map_returns_the_function_element(unreachable):
    assert flat_map(ok(1), lambda v: ok(v + 1)) == ok(2)
    assert flat_map(ok(1), lambda v: error("tag", v)) == error("tag", 1)
    original = error("tag", 0)
    assert flat_map(original, unreachable) is original


def test_flat_map_rejects_non_element_results():
    with pytest.raises(InvalidElement) as excinfo:
        flat_map(ok(1), lambda v: v + 1)
    assert excinfo.value.details["value"] == "2"


# ---------------------------------------------------------------------------
# reduce
# ---------------------------------------------------------------------------

def test_reduce_dispatches_to_one_handler(unreachable):
    assert reduce(ok("in"), lambda v: "out", unreachable) == "out"
    assert reduce(error("tag", "in", "context"), unreachable, lambda e: e.as_tuple()) == ("tag", "in", "context")


def test_reduce_rejects_non_elements(unreachable):
    with pytest.raises(InvalidElement) as excinfo:
        reduce(("ok", 1), unreachable, unreachable)
    assert excinfo.value.details["where"] == "reduce"


def test_string_payload_is_not_confused_with_missing_payload():
    out = reduce(apply_fallible(ok("in"), "t", lambda v: failure("no_payload")), None, identity)
    assert out == TaggedFailure("t", "in", "no_payload")
    assert out.output != NO_PAYLOAD

    produced = reduce(of("t", lambda: failure("no_input")), None, identity)
    assert produced.input is NO_INPUT
    assert produced.output != NO_INPUT
