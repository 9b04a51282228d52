# src/configurator/core/schema/normalizer.py
"""
Normalização canônica de declarações de opção.

Este módulo transforma um mapa de declarações permissivas em um schema de
descritores resolvidos, rejeitando imediatamente declarações malformadas.

Política de normalização (v1), por declaração:
    1. `type` deve pertencer ao conjunto {any, string, choice, bool}
    2. Sem `validation` → predicado sempre verdadeiro
    3. `default` explícito deve ser aceito pela regra do tipo
    4. Sem `default` → default implícito do tipo (choice não possui)
    5. Produz o descritor imutável

Princípios fundamentais:
    - Todos os erros de autoria do schema surgem na construção
    - Cada declaração é normalizada de forma independente
    - A mesma entrada sempre produz descritores com os mesmos campos

Invariantes:
    - O schema retornado é somente-leitura
    - Nenhuma declaração de entrada é mutada

Limites explícitos:
    - Não acessa o store
    - Não aplica overlay de variáveis de ambiente (`env` é apenas transportado)
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from types import MappingProxyType
from typing import Any, Dict, Mapping, Union

from ..errors import SchemaError
from .types import (
    MISSING,
    OptionDeclaration,
    OptionDescriptor,
    OptionType,
    Schema,
    Validation,
)
from .validator import check_value


logger = logging.getLogger(__name__)


def always_true(value: Any) -> bool:
    return True


# Consultado apenas na normalização; choice não possui default implícito.
_IMPLICIT_DEFAULTS: Dict[OptionType, Any] = {
    OptionType.ANY: None,
    OptionType.STRING: "",
    OptionType.BOOL: False,
}


DeclarationLike = Union[OptionDeclaration, Mapping[str, Any]]


def _coerce_declaration(declaration: Any, name: str) -> OptionDeclaration:
    if isinstance(declaration, OptionDeclaration):
        return declaration
    if isinstance(declaration, Mapping):
        return OptionDeclaration.from_mapping(declaration)
    raise SchemaError(
        f"declaration for key {name} must be a mapping, got: {type(declaration).__name__}",
        key=name,
    )


def _resolve_type(raw: Any, name: str) -> OptionType:
    if isinstance(raw, OptionType):
        return raw
    try:
        return OptionType(raw)
    except ValueError:
        raise SchemaError(f"invalid type for key {name}", key=name) from None


def _resolve_validation(option_type: OptionType, raw: Any, name: str) -> Validation:
    if option_type is OptionType.CHOICE:
        if raw is MISSING or raw is None:
            # Sem valores permitidos nenhum default passa na etapa seguinte
            return ()
        if isinstance(raw, (str, bytes, Mapping)) or not isinstance(raw, Iterable):
            raise SchemaError(f"invalid choices for key {name}", key=name)
        return tuple(raw)

    if raw is MISSING or raw is None:
        return always_true
    if not callable(raw):
        raise SchemaError(f"invalid validation for key {name}", key=name)
    return raw


def normalize_option(declaration: DeclarationLike, name: str) -> OptionDescriptor:
    """
    Normaliza uma única declaração de opção.

    Args:
        declaration: declaração (mapa ou `OptionDeclaration`).
        name: nome da opção (usado nas mensagens de erro).

    Returns:
        OptionDescriptor: descritor imutável e totalmente resolvido.

    Raises:
        SchemaError: tipo inválido, default inválido ou default ausente para choice.
    """
    decl = _coerce_declaration(declaration, name)

    option_type = _resolve_type(decl.type, name)
    validation = _resolve_validation(option_type, decl.validation, name)

    if decl.has_default():
        try:
            accepted = check_value(option_type, decl.default, validation)
        except Exception as e:
            raise SchemaError(f"invalid default value for {name}", key=name) from e
        if not accepted:
            raise SchemaError(f"invalid default value for {name}", key=name)
        default = decl.default
    elif option_type in _IMPLICIT_DEFAULTS:
        default = _IMPLICIT_DEFAULTS[option_type]
    else:
        raise SchemaError(
            f"default value is mandatory for type {option_type.value} ({name})",
            key=name,
        )

    required = decl.required
    if required is MISSING or required is None:
        required = False
    elif not isinstance(required, bool):
        raise SchemaError(f"required must be boolean for key {name}", key=name)

    env = decl.env
    if env is MISSING:
        env = None
    elif env is not None and not isinstance(env, str):
        raise SchemaError(f"env must be a string for key {name}", key=name)

    return OptionDescriptor(
        type=option_type,
        required=required,
        env=env,
        default=default,
        validation=validation,
    )


def normalize_options(declarations: Mapping[str, DeclarationLike]) -> Schema:
    """
    Normaliza um mapa de declarações em um schema somente-leitura.

    Raises:
        SchemaError: se `declarations` não for um mapa, se algum nome não for
            string ou se qualquer declaração for inválida.
    """
    if not isinstance(declarations, Mapping):
        raise SchemaError(
            f"options must be a mapping, got: {type(declarations).__name__}"
        )

    resolved: Dict[str, OptionDescriptor] = {}
    for name, declaration in declarations.items():
        if not isinstance(name, str) or not name:
            raise SchemaError(f"option name must be a non-empty string, got: {name!r}")
        resolved[name] = normalize_option(declaration, name)

    logger.debug("normalized %d option declaration(s)", len(resolved))
    return MappingProxyType(resolved)
