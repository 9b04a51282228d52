# src/configurator/core/naming.py
"""Validação do nome de instâncias de configuração."""

from __future__ import annotations

import re
from typing import Any

from .errors import InvalidConfigNameError


_NAME_RE = re.compile(r"[A-Za-z_-]+")


def is_valid_config_name(name: Any) -> bool:
    return isinstance(name, str) and _NAME_RE.fullmatch(name) is not None


def validate_config_name(name: Any) -> None:
    """
    Garante que o nome contém apenas letras, `_` e `-`.

    O nome inteiro precisa casar com o padrão; ele compõe as chaves do store.

    Raises:
        InvalidConfigNameError: se o nome for inválido.
    """
    if not is_valid_config_name(name):
        raise InvalidConfigNameError(
            f"Invalid configuration name: {name}. "
            "The name must only contain letters, _ and -"
        )
