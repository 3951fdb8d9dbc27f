# src/railflow/core/tagged/failure.py
"""
Falha estruturada (tag, input, output) da variante tagged.

Na variante tagged o estado `Failure` de um Element carrega sempre um
`TaggedFailure`:

    - tag: identificador escolhido pelo autor, único no pipeline
    - input: valor recebido pela função que falhou
    - output: payload de erro produzido pela função, ou `NO_PAYLOAD`
      quando a falha foi sinalizada sem payload

Duas funções que falham com payloads idênticos continuam distinguíveis
pela `tag` registrada no ponto em que falharam.

Invariantes:
    - Um TaggedFailure é imutável
    - Steps de sucesso repassam um TaggedFailure sem alteração
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator, Tuple

from railflow.core.pipeline.element import NO_PAYLOAD, Failure, Success


@dataclass(frozen=True)
class TaggedFailure:
    tag: Any
    input: Any
    output: Any = NO_PAYLOAD

    def as_tuple(self) -> Tuple[Any, Any, Any]:
        return (self.tag, self.input, self.output)

    def __iter__(self) -> Iterator[Any]:
        return iter(self.as_tuple())


def ok(value: Any) -> Success:
    """Cria um Ok (Success) com o valor informado."""
    return Success(value)


def error(tag: Any, input: Any, output: Any = NO_PAYLOAD) -> Failure:
    """
    Cria um Error com tag, input e output.

    `output` é o payload de erro retornado pela função que falhou; para
    falhas sem payload é, por convenção, `NO_PAYLOAD`.
    """
    return Failure(TaggedFailure(tag, input, output))


def default_error() -> Failure:
    """
    Error com tag, input e output `None`, equivalente a `error(None, None, None)`.

    Destinado a testes: fora deles, descarta justamente a informação
    posicional que distingue uma falha da outra.
    """
    return error(None, None, None)
