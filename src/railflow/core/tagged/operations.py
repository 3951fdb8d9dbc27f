# src/railflow/core/tagged/operations.py
"""
Operações da variante tagged sobre um único Element.

Estas funções definem a semântica de aplicação de um único passo da
variante tagged e são usadas tanto diretamente (de forma eager) quanto
pelos combinadores de Pipeline em `tagged.combinators`.

Convenção de retorno das funções do autor:
    - valor cru ou Success(v) → sucesso
    - Failure() / failure()   → falha sem payload (output = NO_PAYLOAD)
    - Failure(p) / failure(p) → falha com payload `p`

Todas as operações levantam `InvalidElement` quando recebem algo que não
é um Element.

Exemplo:

    >>> from railflow.core.tagged import ok, apply_fallible, reduce
    >>> from railflow.core.pipeline import failure
    >>> t = apply_fallible(ok("input"), "my_tag", lambda v: failure("oops!"))
    >>> reduce(t, lambda v: "Success!", lambda e: e.as_tuple())
    ('my_tag', 'input', 'oops!')
"""

from __future__ import annotations

from typing import Any, Callable

from railflow.core.errors import infallible_step_failed, invalid_element
from railflow.core.exceptions import InfallibleStepFailed, InvalidElement
from railflow.core.pipeline.element import NO_INPUT, Element, Failure, Success, classify, is_element

from .failure import error


def _bad_element(value: Any, where: str) -> InvalidElement:
    return InvalidElement.from_payload(invalid_element(value=value, where=where))


def _bad_infallible(input: Any, output: Any) -> InfallibleStepFailed:
    return InfallibleStepFailed.from_payload(infallible_step_failed(input=input, output=output))


def apply_fallible(element: Element, tag: Any, f: Callable[[Any], Any]) -> Element:
    """
    Aplica `f` ao conteúdo de um Success, marcando qualquer falha com `tag`.

    Um Failure recebido é retornado sem alteração: `f` não é invocada e a
    tag já registrada é preservada.
    """
    if isinstance(element, Failure):
        return element
    if not isinstance(element, Success):
        raise _bad_element(element, "apply_fallible")

    result = classify(f(element.value))
    if isinstance(result, Failure):
        return error(tag, element.value, result.context)
    return result


def apply_infallible(element: Element, f: Callable[[Any], Any]) -> Element:
    """
    Como `apply_fallible`, mas `f` não pode falhar.

    A infalibilidade é verificada apenas sobre o retorno da própria `f`;
    um Failure recebido é repassado sem invocar `f`.

    Raises:
        InfallibleStepFailed: Se `f` retornar uma falha.
    """
    if isinstance(element, Failure):
        return element
    if not isinstance(element, Success):
        raise _bad_element(element, "apply_infallible")

    raw = f(element.value)
    result = classify(raw)
    if isinstance(result, Failure):
        raise _bad_infallible(element.value, raw)
    return result


def flat_map(element: Element, f: Callable[[Any], Element]) -> Element:
    """
    Transforma um Success em outro Element; um Failure é retornado sem alteração.

    `f` deve retornar um Element.
    """
    if isinstance(element, Failure):
        return element
    if not isinstance(element, Success):
        raise _bad_element(element, "flat_map")

    result = f(element.value)
    if not is_element(result):
        raise _bad_element(result, "retorno da função de flat_map")
    return result


def reduce(element: Element, on_success: Callable[[Any], Any], on_failure: Callable[[Any], Any]) -> Any:
    """
    Reduz um Element a um valor arbitrário.

    Success(v) → on_success(v); Failure(e) → on_failure(e). Exatamente um
    dos handlers é invocado.
    """
    if isinstance(element, Success):
        return on_success(element.value)
    if isinstance(element, Failure):
        return on_failure(element.context)
    raise _bad_element(element, "reduce")


def of(tag: Any, producer: Callable[[], Any]) -> Element:
    """Cria um Element a partir de uma função sem argumentos; falhas recebem `tag` e input NO_INPUT."""
    result = classify(producer())
    if isinstance(result, Failure):
        return error(tag, NO_INPUT, result.context)
    return result


def of_infallible(producer: Callable[[], Any]) -> Element:
    raw = producer()
    result = classify(raw)
    if isinstance(result, Failure):
        raise _bad_infallible(NO_INPUT, raw)
    return result
