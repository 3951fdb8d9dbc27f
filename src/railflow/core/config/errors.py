# src/railflow/core/config/errors.py
"""
Exceções canônicas da camada de configuração do railflow.

As exceções aqui definidas representam violações estruturais explícitas
da configuração, e não faults de avaliação de pipeline.

Invariantes:
    - Todas as exceções de configuração herdam de `ConfigError`
    - Nenhuma exceção representa erro de avaliação de Step
"""


class ConfigError(Exception):
    """
    Exceção base para erros relacionados à configuração do railflow.

    Permite captura genérica de erros de configuração e distinção clara
    entre falhas estruturais e faults do Evaluator.
    """


class DefaultsNotFoundError(ConfigError):
    """
    Exceção levantada quando o arquivo de configuração base (defaults)
    informado explicitamente não é encontrado.
    """


class UnsupportedConfigFormatError(ConfigError):
    """
    Exceção levantada quando o formato do arquivo de configuração
    não é suportado pelo loader.

    Formatos suportados (v1):
        - YAML (.yaml, .yml)
        - JSON (.json)
    """


class InvalidConfigRootTypeError(ConfigError):
    """
    Exceção levantada quando o conteúdo raiz da configuração
    não é um dicionário (`dict`).
    """


class ConfigTypeConflictError(ConfigError):
    """
    Exceção levantada quando ocorre conflito de tipos durante o deep-merge.

    Exemplo de conflito:
        - base:     {"engine": {"trace": true}}
        - override: {"engine": "DEBUG"}
    """


class InvalidEngineSettingError(ConfigError):
    """
    Exceção levantada quando uma chave de `engine` possui valor inválido
    (ex.: `log_level` desconhecido ou `max_repr` negativo).
    """
