"""Configurator — Schema (core).

Componentes canônicos do schema de configuração:
 - tipos (declaração permissiva, descritor resolvido)
 - normalização de declarações
 - validação de valores
 - carregamento de declarações (YAML/JSON)
 - hashing canônico (rastreabilidade)
"""

from .types import (  # noqa: F401
    MISSING,
    OptionDeclaration,
    OptionDescriptor,
    OptionType,
    Schema,
)
from .normalizer import always_true, normalize_option, normalize_options  # noqa: F401
from .validator import accepts, validate_for_save, validate_for_set  # noqa: F401
from .loader import load_declarations  # noqa: F401
from .hashing import compute_schema_hash  # noqa: F401
