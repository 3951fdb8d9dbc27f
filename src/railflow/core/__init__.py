# src/railflow/core/__init__.py
"""
Core do railflow.

Este pacote contém a implementação canônica do engine de combinadores,
reunindo o modelo de estado, a composição preguiçosa de Steps, a
avaliação com curto-circuito e a variante tagged.

Componentes principais:
    - pipeline   → Element, Signals, Step, builder, combinadores e contexto
    - engine     → Evaluator (avaliação ordenada e contrato terminal)
    - tagged     → falhas estruturadas (tag, input, output)
    - config     → resolução de configuração do engine
    - errors / exceptions → payloads canônicos e faults tipados

Limites explícitos:
    - Não interpreta payloads de falha
    - Não executa I/O, retry, paralelismo ou cancelamento
"""
