# src/configurator/__init__.py
"""
Configurator — schema tipado de configuração persistido em store chave-valor.

Declarações de opção são validadas no registro, valores são validados na
escrita, e leituras/escritas são mediadas contra um store assíncrono
particionado por namespace.

Uso típico:

    from configurator import create_config, InMemoryKeyValueStore

    config = create_config(
        kvs=InMemoryKeyValueStore(),
        name="server",
        options={
            "port": {"type": "any", "required": True},
            "mode": {"type": "choice", "validation": ["fast", "safe"], "default": "safe"},
        },
    )
    await config.save_all({"port": 8080})
"""

from .core.errors import (
    ConfigError,
    ConfiguratorError,
    InvalidConfigNameError,
    InvalidValueError,
    MissingRequiredError,
    SchemaError,
    UnrecognizedKeyError,
    format_error,
)
from .core.facade import CONFIG_NAMESPACE, Config, create_config, create_config_from_file
from .core.schema import OptionDeclaration, OptionDescriptor, OptionType
from .core.store import InMemoryKeyValueStore, KeyValueStore, YamlFileKeyValueStore

__all__ = [
    "CONFIG_NAMESPACE",
    "Config",
    "ConfigError",
    "ConfiguratorError",
    "InMemoryKeyValueStore",
    "InvalidConfigNameError",
    "InvalidValueError",
    "KeyValueStore",
    "MissingRequiredError",
    "OptionDeclaration",
    "OptionDescriptor",
    "OptionType",
    "SchemaError",
    "UnrecognizedKeyError",
    "YamlFileKeyValueStore",
    "create_config",
    "create_config_from_file",
    "format_error",
]
