# src/railflow/core/engine/__init__.py
"""
Engine do railflow.

Este pacote contém o Evaluator, responsável por avaliar um Pipeline
exatamente uma vez, respeitando a ordem de autoria, o curto-circuito de
`Stop` e o contrato de Step terminal.

Invariantes:
    - Steps são avaliados na ordem em que foram anexados
    - Nenhum Step após um Stop é avaliado
    - Um Pipeline nunca é mutado pela avaliação
"""

from .evaluator import Evaluator, evaluate

__all__ = ["Evaluator", "evaluate"]
