"""Configurator — Store (core).

Porta assíncrona de store chave-valor e duas implementações:
 - em memória (testes, processos efêmeros)
 - arquivos YAML (um documento por namespace)
"""

from .ports import KeyValueStore  # noqa: F401
from .memory import InMemoryKeyValueStore  # noqa: F401
from .yaml_file import YamlFileKeyValueStore  # noqa: F401
