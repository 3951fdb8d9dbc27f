# src/railflow/core/pipeline/context.py
"""
Contexto de avaliação do pipeline.

Este módulo define o `EvaluationContext`, a estrutura que acompanha uma
única avaliação de Pipeline e registra seus eventos estruturados.

Responsabilidades do módulo:
    - Manter identidade e metadados da avaliação
    - Armazenar a configuração resolvida e as EngineSettings derivadas
    - Registrar eventos de log estruturados, filtrados por nível

Invariantes:
    - Eventos sempre incluem `run_id` e `step_index`
    - Eventos abaixo de `engine.log_level` não são registrados
    - Com `engine.trace` desabilitado nenhum evento é registrado

Limites explícitos:
    - Não executa Steps
    - Não persiste eventos
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional
import uuid

from railflow.core.config.settings import EngineSettings


@dataclass
class EvaluationContext:
    """
    Contexto de uma avaliação de Pipeline.

    Campos:
        - run_id: identificador único da avaliação
        - created_at: timestamp UTC de criação do contexto
        - config: configuração efetiva (defaults + local deep-merge)
        - meta: metadados livres do chamador
        - events: log estruturado de eventos
    """
    run_id: str
    created_at: datetime
    config: Dict[str, Any]
    meta: Dict[str, Any] = field(default_factory=dict)

    events: List[Dict[str, Any]] = field(default_factory=list, init=False)
    settings: EngineSettings = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self.settings = EngineSettings.from_config(self.config)

    # -----------------------------
    # Logging
    # -----------------------------
    def log(self, *, step_index: Optional[int], level: str, message: str, **extra: Any) -> None:
        if not self.settings.enabled_for(level):
            return
        event = {
            "run_id": self.run_id,
            "step_index": step_index,
            "level": level.upper(),
            "message": message,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }
        event.update(extra)
        self.events.append(event)

    def events_at(self, level: str) -> List[Dict[str, Any]]:
        level = level.upper()
        return [ev for ev in self.events if ev["level"] == level]


def new_context(config: Optional[Dict[str, Any]] = None, **meta: Any) -> EvaluationContext:
    """
    Cria um EvaluationContext com `run_id` novo.

    Sem `config`, usa `EngineSettings()` em memória: avaliar um pipeline
    nunca lê arquivos. Para defaults e overrides em disco, passe o
    resultado de `load_config`.
    """
    return EvaluationContext(
        run_id=uuid.uuid4().hex,
        created_at=datetime.now(timezone.utc),
        config=config if config is not None else EngineSettings().as_config(),
        meta=dict(meta),
    )
