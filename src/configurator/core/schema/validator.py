# src/configurator/core/schema/validator.py
"""
Validação de valores contra o schema resolvido.

Este módulo decide se um valor candidato pode ser gravado no store.

Regras de aceitação (v1), por tipo:
    - any    → validation(value)
    - string → isinstance(value, str) e validation(value)
    - choice → value pertence ao conjunto `validation`
    - bool   → value é exatamente True ou False e validation(value)

Decisões arquiteturais:
    - Despacho por tabela indexada por `OptionType`
    - O validator confia no descritor (tipo e default já validados na normalização)
    - Nenhum valor é coagido ou convertido
    - Defaults não são injetados em `validate_for_save`

Limites explícitos:
    - Não acessa o store
    - Não valida declarações de schema
"""

from __future__ import annotations

from typing import Any, Callable, Dict, List, Mapping

from ..errors import (
    ConfigError,
    InvalidValueError,
    MissingRequiredError,
    UnrecognizedKeyError,
)
from .types import OptionDescriptor, OptionType, Schema, Validation


def _accept_any(value: Any, validation: Validation) -> bool:
    return bool(validation(value))  # type: ignore[operator]


def _accept_string(value: Any, validation: Validation) -> bool:
    return isinstance(value, str) and bool(validation(value))  # type: ignore[operator]


def _accept_choice(value: Any, validation: Validation) -> bool:
    return value in validation  # type: ignore[operator]


def _accept_bool(value: Any, validation: Validation) -> bool:
    # 1 == True em Python; exige identidade
    return (value is True or value is False) and bool(validation(value))  # type: ignore[operator]


_ACCEPTORS: Dict[OptionType, Callable[[Any, Validation], bool]] = {
    OptionType.ANY: _accept_any,
    OptionType.STRING: _accept_string,
    OptionType.CHOICE: _accept_choice,
    OptionType.BOOL: _accept_bool,
}


def check_value(option_type: OptionType, value: Any, validation: Validation) -> bool:
    """Aplica a regra de aceitação de `option_type` a `value`."""
    return _ACCEPTORS[option_type](value, validation)


def accepts(descriptor: OptionDescriptor, value: Any) -> bool:
    """Retorna True se `value` é aceito pelo descritor."""
    return check_value(descriptor.type, value, descriptor.validation)


def required_keys(schema: Schema) -> List[str]:
    return [name for name, descriptor in schema.items() if descriptor.required]


def validate_for_set(schema: Schema, name: str, value: Any) -> None:
    """
    Valida a gravação de uma única chave.

    Raises:
        UnrecognizedKeyError: se `name` não estiver no schema.
        InvalidValueError: se o valor for rejeitado pelo descritor ou se o
            predicado de validação levantar exceção (encadeada em `__cause__`).
    """
    if name not in schema:
        raise UnrecognizedKeyError(f"unrecognized configuration key: {name}", key=name)

    try:
        accepted = accepts(schema[name], value)
    except Exception as e:
        # predicado do chamador falhou: o valor é tratado como rejeitado
        raise InvalidValueError(f"invalid value for key: {name}", key=name) from e

    if not accepted:
        raise InvalidValueError(f"invalid value for key: {name}", key=name)


def validate_for_save(schema: Schema, obj: Mapping[str, Any]) -> None:
    """
    Valida um objeto completo antes de `save_all`.

    Ordem de verificação:
        1. Todas as chaves obrigatórias estão presentes (apenas presença)
        2. Cada chave presente é validada por `validate_for_set`

    Chaves opcionais ausentes não são verificadas nem preenchidas com default.

    Raises:
        ConfigError: se `obj` não for um mapa.
        MissingRequiredError: se uma chave obrigatória estiver ausente.
        UnrecognizedKeyError: se `obj` contiver chave desconhecida.
        InvalidValueError: se algum valor for rejeitado.
    """
    if not isinstance(obj, Mapping):
        raise ConfigError(
            f"configuration object must be a mapping, got: {type(obj).__name__}"
        )

    for required in required_keys(schema):
        if required not in obj:
            raise MissingRequiredError(
                f'missing required configuration "{required}"', key=required
            )

    for name, value in obj.items():
        validate_for_set(schema, name, value)
