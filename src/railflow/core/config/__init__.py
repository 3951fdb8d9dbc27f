# src/railflow/core/config/__init__.py

"""
Camada de configuração do railflow.

Responsabilidades do pacote:
    - Carregamento de arquivos de configuração (defaults + overrides locais)
    - Resolução de configuração final via deep-merge determinístico
    - Validação das chaves do engine (`EngineSettings`)

Invariantes:
    - A configuração final é um dicionário puro (dict)
    - Conflitos estruturais são tratados como erro
"""

from .errors import (
    ConfigError,
    ConfigTypeConflictError,
    DefaultsNotFoundError,
    InvalidConfigRootTypeError,
    InvalidEngineSettingError,
    UnsupportedConfigFormatError,
)
from .loader import default_config, load_config, load_settings
from .merge import deep_merge
from .settings import LOG_LEVELS, EngineSettings

__all__ = [
    "ConfigError",
    "ConfigTypeConflictError",
    "DefaultsNotFoundError",
    "EngineSettings",
    "InvalidConfigRootTypeError",
    "InvalidEngineSettingError",
    "LOG_LEVELS",
    "UnsupportedConfigFormatError",
    "deep_merge",
    "default_config",
    "load_config",
    "load_settings",
]
