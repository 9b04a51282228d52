# src/configurator/core/facade.py
"""
Fachada canônica de configuração.

Este módulo associa um schema resolvido a uma instância nomeada de
configuração e a um store chave-valor assíncrono, expondo as operações
`save_all`, `load_all`, `get` e `set`.

Layout no store:
    - namespace fixo `__config`, reservado para configuração
    - objeto completo → chave `<nome>`
    - valor individual → chave `<nome>.<opção>`

Decisões arquiteturais:
    - A validação roda na chamada, antes de o store ser acionado; erros de
      validação são levantados de forma síncrona e nenhuma escrita parcial ocorre
    - As operações retornam o awaitable do próprio store (sem retry, sem cache)
    - Leituras não são validadas (trust-on-read)
    - A instância não guarda estado mutável; todo estado vive no store

Limites explícitos:
    - Não aplica overlay de variáveis de ambiente
    - Não injeta defaults em `save_all`/`load_all`
    - Não resolve conflitos entre escritores concorrentes
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Awaitable, Dict, Mapping, Union

from .naming import validate_config_name
from .schema.hashing import compute_schema_hash
from .schema.loader import load_declarations
from .schema.normalizer import DeclarationLike, normalize_options
from .schema.types import Schema
from .schema.validator import validate_for_save, validate_for_set
from .store.ports import KeyValueStore


logger = logging.getLogger(__name__)

CONFIG_NAMESPACE = "__config"


@dataclass(frozen=True)
class Config:
    """
    Instância de configuração: nome + schema imutável + store.

    Todas as operações retornam awaitables produzidos pelo store:

        config = create_config(kvs=store, name="server", options={...})
        await config.set("mode", "fast")
        value = await config.get("mode")
    """

    name: str
    schema: Schema
    kvs: KeyValueStore

    def key_for(self, option: str) -> str:
        return f"{self.name}.{option}"

    # -----------------------------
    # Objeto completo
    # -----------------------------
    def save_all(self, obj: Mapping[str, Any]) -> Awaitable[Any]:
        """Valida o objeto completo e o grava sob a chave `<nome>`."""
        validate_for_save(self.schema, obj)
        # stores copiam/serializam o valor; MappingProxyType e afins não suportam isso
        payload = dict(obj)
        logger.debug("saving %d key(s) for config %s", len(payload), self.name)
        return self.kvs.set(CONFIG_NAMESPACE, payload, self.name)

    def load_all(self) -> Awaitable[Any]:
        """Lê o objeto completo gravado sob `<nome>`, sem validação."""
        return self.kvs.get(CONFIG_NAMESPACE, self.name)

    # -----------------------------
    # Chave individual
    # -----------------------------
    def get(self, key: str) -> Awaitable[Any]:
        return self.kvs.get(CONFIG_NAMESPACE, self.key_for(key))

    def set(self, key: str, value: Any) -> Awaitable[Any]:
        """Valida e grava um único valor sob `<nome>.<key>`."""
        validate_for_set(self.schema, key, value)
        logger.debug("setting %s for config %s", key, self.name)
        return self.kvs.set(CONFIG_NAMESPACE, value, self.key_for(key))

    # -----------------------------
    # Inspeção (sem acesso ao store)
    # -----------------------------
    def defaults(self) -> Dict[str, Any]:
        return {name: descriptor.default for name, descriptor in self.schema.items()}

    def fingerprint(self) -> str:
        return compute_schema_hash(self.schema)


def create_config(
    *,
    kvs: KeyValueStore,
    name: str,
    options: Mapping[str, DeclarationLike],
) -> Config:
    """
    Cria uma instância de configuração.

    Falha antes de qualquer interação com o store se o nome for inválido ou
    se alguma declaração de opção não puder ser normalizada.

    Args:
        kvs: store chave-valor assíncrono.
        name: nome da instância (letras, `_` e `-`).
        options: mapa nome → declaração de opção.

    Returns:
        Config: instância pronta para uso.

    Raises:
        InvalidConfigNameError: se o nome for inválido.
        SchemaError: se alguma declaração for inválida.
    """
    validate_config_name(name)
    schema = normalize_options(options)
    logger.debug("created config %s with %d option(s)", name, len(schema))
    return Config(name=name, schema=schema, kvs=kvs)


def create_config_from_file(
    *,
    kvs: KeyValueStore,
    name: str,
    path: Union[str, Path],
) -> Config:
    """Cria uma instância de configuração a partir de declarações em YAML/JSON."""
    # nome inválido falha antes de qualquer leitura de arquivo
    validate_config_name(name)
    return create_config(kvs=kvs, name=name, options=load_declarations(path=path))
