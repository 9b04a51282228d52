# src/configurator/core/schema/types.py
"""
Tipos canônicos do schema de configuração.

Este módulo define as estruturas que separam a **declaração** de uma opção
(entrada permissiva, escrita pelo chamador) do **descritor resolvido**
(representação interna estrita, produzida apenas pela normalização).

Componentes principais:
    - OptionType        → enum fechado de tipos de opção
    - OptionDeclaration → declaração permissiva de uma opção
    - OptionDescriptor  → descritor imutável e totalmente resolvido
    - Schema            → mapa somente-leitura nome → descritor

Invariantes:
    - OptionDescriptor é imutável (frozen)
    - O conjunto de tipos é fechado; tags desconhecidas nunca chegam a um descritor
    - Ausência de `default` é distinta de `default=None` (sentinela MISSING)

Limites explícitos:
    - Não valida declarações (responsabilidade do normalizer)
    - Não valida valores (responsabilidade do validator)
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Mapping, Optional, Tuple, Union


class _Missing:
    """Sentinela para campos não informados na declaração."""

    _instance: Optional["_Missing"] = None

    def __new__(cls) -> "_Missing":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:  # pragma: no cover
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING: Any = _Missing()


class OptionType(str, Enum):
    """
    Tipos de opção suportados.

    Os valores são strings para permitir declarações escritas diretamente
    em YAML/JSON (`type: bool`).

    Tipos definidos:
        - ANY: sem restrição de tipo; apenas o predicado de validação
        - STRING: instâncias de `str`
        - CHOICE: valor pertencente a um conjunto enumerado
        - BOOL: exatamente `True` ou `False`
    """
    ANY = "any"
    STRING = "string"
    CHOICE = "choice"
    BOOL = "bool"


Predicate = Callable[[Any], Any]
Validation = Union[Predicate, Tuple[Any, ...]]


@dataclass(frozen=True)
class OptionDeclaration:
    """
    Declaração permissiva de uma opção.

    Todos os campos são opcionais neste nível; a normalização decide o que
    é aceitável. Campos não informados permanecem com o sentinela `MISSING`.
    """

    type: Any = MISSING
    default: Any = MISSING
    required: Any = MISSING
    env: Any = MISSING
    validation: Any = MISSING

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "OptionDeclaration":
        # `choices` é aceito como sinônimo de `validation` para o tipo choice
        validation = data.get("validation", MISSING)
        if validation is MISSING:
            validation = data.get("choices", MISSING)
        return cls(
            type=data.get("type", MISSING),
            default=data.get("default", MISSING),
            required=data.get("required", MISSING),
            env=data.get("env", MISSING),
            validation=validation,
        )

    def has_default(self) -> bool:
        return self.default is not MISSING


@dataclass(frozen=True)
class OptionDescriptor:
    """
    Descritor resolvido de uma opção.

    Invariantes:
        - `default` sempre presente e aceito pela regra de `type`
        - `validation` é chamável para tipos não-choice
        - `validation` é uma tupla de valores permitidos para `choice`
    """

    type: OptionType
    required: bool
    env: Optional[str]
    default: Any
    validation: Validation

    @property
    def choices(self) -> Tuple[Any, ...]:
        if self.type is not OptionType.CHOICE:
            return ()
        return self.validation  # type: ignore[return-value]


Schema = Mapping[str, OptionDescriptor]
