# src/configurator/core/schema/loader.py
"""
Loader canônico de declarações de opção (YAML/JSON).

Este módulo carrega, a partir de um arquivo, o mapa bruto de declarações
que alimenta a normalização do schema.

Formatos suportados (v1):
    - YAML (.yaml, .yml) — preferencial
    - JSON (.json)

Exemplo (YAML):

    port:
      type: any
      required: true
    mode:
      type: choice
      choices: [fast, safe]
      default: safe

Decisões arquiteturais:
    - O formato é inferido pela extensão do arquivo
    - Arquivos vazios são interpretados como mapa vazio
    - O conteúdo raiz deve ser um mapa nome → declaração
    - Predicados não são expressáveis em arquivo; apenas `choices` para choice

Limites explícitos:
    - Não normaliza declarações (responsabilidade do normalizer)
    - Não acessa o store
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Union

import yaml  # PyYAML

from ..errors import (
    DeclarationsNotFoundError,
    DeclarationsParseError,
    InvalidDeclarationsRootTypeError,
    UnsupportedDeclarationsFormatError,
)


def load_declarations(*, path: Union[str, Path]) -> Dict[str, Any]:
    """
    Carrega declarações de opção a partir de YAML/JSON.

    Args:
        path: caminho para o arquivo de declarações.

    Returns:
        Dict[str, Any]: mapa bruto nome → declaração.

    Raises:
        DeclarationsNotFoundError: se o arquivo não existir.
        UnsupportedDeclarationsFormatError: se a extensão não for suportada.
        DeclarationsParseError: se o parsing falhar.
        InvalidDeclarationsRootTypeError: se o conteúdo raiz não for um mapa.
    """
    p = Path(path)
    if not p.exists():
        raise DeclarationsNotFoundError(f"declarations file not found: {p}")

    suffix = p.suffix.lower()
    if suffix not in {".yaml", ".yml", ".json"}:
        raise UnsupportedDeclarationsFormatError(f"unsupported declarations format: {suffix}")

    raw = p.read_text(encoding="utf-8")

    try:
        if suffix == ".json":
            data = json.loads(raw) if raw.strip() else None
        else:
            data = yaml.safe_load(raw)
    except (yaml.YAMLError, json.JSONDecodeError) as e:
        raise DeclarationsParseError(str(e) or "failed to parse declarations") from e

    if data is None:
        data = {}

    if not isinstance(data, dict):
        raise InvalidDeclarationsRootTypeError(
            f"declarations root must be a mapping, got: {type(data).__name__}"
        )

    return data
