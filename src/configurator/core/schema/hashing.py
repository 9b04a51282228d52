# src/configurator/core/schema/hashing.py
"""
Hashing canônico do schema resolvido.

O hash do schema serve para:
    - detectar divergência de schema entre processos que compartilham um store
    - rastrear qual versão do schema validou os dados gravados

Decisão: o hash é calculado a partir de JSON canônico (sort_keys, separators).
Predicados de validação não são serializáveis e ficam fora do hash; para
`choice`, os valores permitidos participam.
"""

from __future__ import annotations

import hashlib
import json
from typing import Any, Dict

from .types import OptionType, Schema


def _canonical_descriptor(descriptor: Any) -> Dict[str, Any]:
    payload: Dict[str, Any] = {
        "type": descriptor.type.value,
        "required": descriptor.required,
        "env": descriptor.env,
        "default": descriptor.default,
    }
    if descriptor.type is OptionType.CHOICE:
        payload["choices"] = sorted(
            json.dumps(c, sort_keys=True, default=str) for c in descriptor.validation
        )
    return payload


def compute_schema_hash(schema: Schema) -> str:
    """Computa SHA-256 do schema em formato canônico."""
    canonical = json.dumps(
        {name: _canonical_descriptor(d) for name, d in schema.items()},
        sort_keys=True,
        separators=(",", ":"),
        ensure_ascii=False,
        default=str,
    )
    return hashlib.sha256(canonical.encode("utf-8")).hexdigest()
