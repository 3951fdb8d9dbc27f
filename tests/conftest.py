# tests/conftest.py
"""
Fixtures compartilhados para testes do railflow.

Este módulo define fixtures reutilizáveis que fornecem:
- configurações mínimas e determinísticas (dict e YAML)
- contexto de avaliação controlado (EvaluationContext)
- funções sentinela para verificar curto-circuito e isolamento de canal

Invariantes:
    - Nenhuma fixture avalia pipeline real
    - Nenhuma fixture realiza I/O
    - Imports do core são feitos de forma lazy para
      melhorar a clareza de erros durante falhas
"""

import pytest
from datetime import datetime, timezone


# =====================================================
# Config fixtures
# =====================================================

@pytest.fixture
def engine_defaults_yaml() -> str:
    """
    YAML de configuração padrão (defaults) semelhante ao `defaults.yaml` empacotado.

    Returns:
        str: Conteúdo YAML representando a configuração base.
    """
    return """\
engine:
  trace: true
  log_level: INFO
  max_repr: 200
"""


@pytest.fixture
def engine_local_yaml() -> str:
    """YAML de override local: apenas as chaves que mudam."""
    return """\
engine:
  log_level: DEBUG
  max_repr: 40
"""


@pytest.fixture
def debug_config() -> dict:
    """
    Configuração já resolvida com rastreamento completo (nível DEBUG).

    Usada pelos testes do Evaluator para observar eventos por Step.
    """
    return {"engine": {"trace": True, "log_level": "DEBUG", "max_repr": 200}}


# =====================================================
# Evaluation fixtures
# =====================================================

@pytest.fixture
def dummy_ctx(debug_config):
    """
    EvaluationContext determinístico para testes.

    `run_id` e `created_at` são fixos; o nível DEBUG garante que todos os
    eventos do Evaluator sejam registrados.
    """
    from railflow.core.pipeline.context import EvaluationContext

    return EvaluationContext(
        run_id="run-test-001",
        created_at=datetime(2026, 1, 16, 0, 0, 0, tzinfo=timezone.utc),
        config=debug_config,
        meta={"source": "pytest"},
    )


@pytest.fixture
def unreachable():
    """
    Função sentinela que falha o teste se for invocada.

    Usada para provar curto-circuito (Steps após um Stop) e isolamento de
    canal (funções de um canal nunca chamadas no outro).
    """

    def _unreachable(*args, **kwargs):
        pytest.fail(f"this function must not be called (args={args!r})")

    return _unreachable


@pytest.fixture
def call_log():
    """Lista compartilhada onde funções de teste registram suas chamadas."""
    return []
