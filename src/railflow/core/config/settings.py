# src/railflow/core/config/settings.py
"""
Configurações efetivas do engine.

Converte a seção `engine` de uma configuração resolvida em um objeto
imutável e validado, consumido pelo EvaluationContext.

Chaves (v1):
    - trace: registra eventos de avaliação no contexto
    - log_level: nível mínimo dos eventos registrados (DEBUG, INFO, WARNING, ERROR)
    - max_repr: limite de caracteres para repr() de valores em eventos e faults
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

from railflow.core.errors import DEFAULT_MAX_REPR

from .errors import InvalidEngineSettingError


LOG_LEVELS: Dict[str, int] = {
    "DEBUG": 10,
    "INFO": 20,
    "WARNING": 30,
    "ERROR": 40,
}


@dataclass(frozen=True)
class EngineSettings:
    trace: bool = True
    log_level: str = "INFO"
    max_repr: int = DEFAULT_MAX_REPR

    @property
    def threshold(self) -> int:
        return LOG_LEVELS[self.log_level]

    def enabled_for(self, level: str) -> bool:
        return self.trace and LOG_LEVELS.get(level.upper(), 0) >= self.threshold

    def as_config(self) -> Dict[str, Any]:
        """Seção `engine` equivalente, no formato aceito por `from_config`."""
        return {"engine": {"trace": self.trace, "log_level": self.log_level, "max_repr": self.max_repr}}

    @classmethod
    def from_config(cls, config: Optional[Dict[str, Any]]) -> "EngineSettings":
        """
        Resolve as configurações do engine a partir de um dict de configuração.

        Chaves ausentes assumem os defaults da classe.

        Raises:
            InvalidEngineSettingError: Se algum valor for inválido.
        """
        engine_cfg = (config or {}).get("engine", {}) or {}
        if not isinstance(engine_cfg, dict):
            raise InvalidEngineSettingError(
                f"Seção 'engine' deve ser dict, recebido: {type(engine_cfg).__name__}"
            )

        trace = engine_cfg.get("trace", cls.trace)
        if not isinstance(trace, bool):
            raise InvalidEngineSettingError(f"engine.trace deve ser bool, recebido: {trace!r}")

        log_level = str(engine_cfg.get("log_level", cls.log_level)).upper()
        if log_level not in LOG_LEVELS:
            supported = ", ".join(LOG_LEVELS)
            raise InvalidEngineSettingError(
                f"engine.log_level '{log_level}' não suportado. Use um de: {supported}."
            )

        max_repr = engine_cfg.get("max_repr", cls.max_repr)
        if isinstance(max_repr, bool) or not isinstance(max_repr, int) or max_repr < 0:
            raise InvalidEngineSettingError(
                f"engine.max_repr deve ser inteiro >= 0, recebido: {max_repr!r}"
            )

        return cls(trace=trace, log_level=log_level, max_repr=max_repr)
