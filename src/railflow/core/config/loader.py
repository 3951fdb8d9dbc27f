# src/railflow/core/config/loader.py
"""
Loader de configuração do railflow.

A configuração do engine é resolvida a partir de:
    - um arquivo de defaults (o `defaults.yaml` empacotado quando nenhum
      caminho é informado)
    - um arquivo local de overrides (opcional)

`load_config` devolve o dicionário resolvido; `load_settings` vai um passo
além e devolve diretamente as `EngineSettings` validadas, que é o que o
EvaluationContext consome.

Limites explícitos:
    - O Evaluator nunca chama este módulo: sem config explícita, o
      contexto usa `EngineSettings()` em memória
"""

from pathlib import Path
from typing import Any, Callable, Dict, IO, Optional
import json

import yaml  # PyYAML

from .merge import deep_merge
from .settings import EngineSettings
from .errors import (
    DefaultsNotFoundError,
    InvalidConfigRootTypeError,
    UnsupportedConfigFormatError,
)


PACKAGED_DEFAULTS = Path(__file__).with_name("defaults.yaml")

_PARSERS: Dict[str, Callable[[IO[str]], Any]] = {
    ".yaml": yaml.safe_load,
    ".yml": yaml.safe_load,
    ".json": json.load,
}


def _read(path: Path) -> Dict[str, Any]:
    """
    Lê um arquivo de configuração; arquivos vazios valem `{}`.

    Raises:
        UnsupportedConfigFormatError: Extensão fora de .yaml/.yml/.json.
        InvalidConfigRootTypeError: Conteúdo raiz que não é um mapeamento.
    """
    parse = _PARSERS.get(path.suffix.lower())
    if parse is None:
        raise UnsupportedConfigFormatError(f"Formato não suportado: {path.suffix}")

    with path.open("r", encoding="utf-8") as f:
        data = parse(f)

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise InvalidConfigRootTypeError(
            f"Config root deve ser dict, recebido: {type(data).__name__} ({path})"
        )
    return data


def load_config(
    *,
    defaults_path: Optional[str] = None,
    local_path: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Carrega e resolve a configuração efetiva do engine.

    Política de resolução:
        - Sem `defaults_path`, usa o `defaults.yaml` empacotado
        - Um `defaults_path` informado e inexistente é erro fatal
        - O arquivo local é opcional; quando presente, tem prioridade

    Raises:
        DefaultsNotFoundError: Se o arquivo de defaults não existir.
        UnsupportedConfigFormatError: Se o formato do arquivo não for suportado.
        InvalidConfigRootTypeError: Se o conteúdo não for um dicionário.
        ConfigTypeConflictError: Se o local mudar o tipo de alguma chave.
    """
    defaults_file = Path(defaults_path) if defaults_path is not None else PACKAGED_DEFAULTS
    if not defaults_file.exists():
        raise DefaultsNotFoundError(f"Arquivo de defaults não encontrado: {defaults_file}")

    effective = _read(defaults_file)
    if local_path is not None and Path(local_path).exists():
        effective = deep_merge(effective, _read(Path(local_path)))
    return effective


def load_settings(
    *,
    defaults_path: Optional[str] = None,
    local_path: Optional[str] = None,
) -> EngineSettings:
    """
    Resolve a configuração como em `load_config` e a valida.

    Raises:
        InvalidEngineSettingError: Se a seção `engine` resolvida for inválida.
    """
    return EngineSettings.from_config(load_config(defaults_path=defaults_path, local_path=local_path))


def default_config() -> Dict[str, Any]:
    """Configuração empacotada, sem overrides."""
    return load_config()
