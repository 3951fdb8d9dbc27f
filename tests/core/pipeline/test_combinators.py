# tests/core/pipeline/test_combinators.py
"""
Testes de isolamento de canal dos combinadores.

Cada combinador é testado no nível de um único Step (a função
Element → Signal), sem passar pelo Evaluator.

Os testes asseguram que:
- combinadores de sucesso nunca invocam a função em um Failure
  e repassam o payload idêntico
- combinadores de falha nunca invocam a função em um Success
- combinadores terminais emitem Stop apenas no seu próprio canal
"""

import pytest

from railflow.core.pipeline.combinators import (
    failure_mapper,
    failure_returner,
    success_mapper,
    success_returner,
)
from railflow.core.pipeline.element import NO_PAYLOAD, Failure, Success, failure, success
from railflow.core.pipeline.types import Continue, Stop, StepKind


PAYLOAD = object()


@pytest.mark.parametrize("factory", [success_mapper, success_returner])
def test_success_channel_ignores_failures(factory, unreachable):
    original = Failure(PAYLOAD)
    signal = factory(unreachable)(original)

    assert isinstance(signal, Continue)
    assert signal.element is original
    assert signal.element.context is PAYLOAD


@pytest.mark.parametrize("factory", [failure_mapper, failure_returner])
def test_failure_channel_ignores_successes(factory, unreachable):
    original = Success(PAYLOAD)
    signal = factory(unreachable)(original)

    assert isinstance(signal, Continue)
    assert signal.element is original


def test_success_mapper_classifies_results():
    assert success_mapper(lambda v: v + 1)(Success(1)) == Continue(Success(2))
    assert success_mapper(lambda v: success(v * 10))(Success(1)) == Continue(Success(10))
    assert success_mapper(lambda v: failure("e1"))(Success(1)) == Continue(Failure("e1"))
    assert success_mapper(lambda v: failure())(Success(1)) == Continue(Failure(NO_PAYLOAD))


def test_failure_mapper_stays_on_failure_channel():
    """
    Verifica que map_failure transforma o payload sem trocar de canal.

    Um retorno de sucesso (cru ou Success) vira o novo payload de falha.
    """
    assert failure_mapper(lambda e: success("e1"))(Failure("e0")) == Continue(Failure("e1"))
    assert failure_mapper(lambda e: e.upper())(Failure("e0")) == Continue(Failure("E0"))
    assert failure_mapper(lambda e: failure("e2"))(Failure("e0")) == Continue(Failure("e2"))


def test_terminal_combinators_stop_on_their_channel():
    assert success_returner(lambda v: f"done:{v}")(Success(1)) == Stop("done:1")
    assert failure_returner(lambda e: f"handled:{e}")(Failure("e1")) == Stop("handled:e1")


def test_stop_result_is_not_classified():
    returned = Failure("this is a result, not an element")
    assert success_returner(lambda v: returned)(Success(1)).result is returned


def test_descriptors_are_named_and_classified():
    def parse(value):
        return value

    assert success_mapper(parse).name == "parse"
    assert success_mapper(parse, name="custom").name == "custom"
    assert success_mapper(parse).kind == StepKind.MAP_SUCCESS
    assert success_mapper(parse).terminal is False
    assert failure_returner(parse).kind == StepKind.TERMINAL_FAILURE
    assert failure_returner(parse).terminal is True
