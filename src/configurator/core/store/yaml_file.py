# src/configurator/core/store/yaml_file.py
"""Store chave-valor persistido em arquivos YAML.

Cada namespace é um documento YAML em `<root_dir>/<namespace>.yaml`, com as
chaves do namespace no nível raiz.

Decisões (v1):
- Formato: YAML (`yaml.safe_dump` / `yaml.safe_load`); apenas tipos simples
- Arquivo inexistente equivale a namespace vazio
- Leitura e escrita bloqueantes rodam fora do event loop (`asyncio.to_thread`)
- Escritas são serializadas por um lock por instância (read-modify-write)

Limites explícitos:
- Não coordena escritores em processos diferentes
- Não faz retry; erros de I/O propagam como estão
"""

from __future__ import annotations

import asyncio
import logging
import threading
from pathlib import Path
from typing import Any, Dict, Union

import yaml  # PyYAML

from ..errors import StoreFormatError


logger = logging.getLogger(__name__)


class YamlFileKeyValueStore:
    """Implementação de `KeyValueStore` com um arquivo YAML por namespace."""

    def __init__(self, *, root_dir: Union[str, Path]):
        self.root_dir = Path(root_dir)
        self._lock = threading.Lock()

    # ------------------------------------------------------------------
    # Paths
    # ------------------------------------------------------------------
    def namespace_path(self, namespace: str) -> Path:
        if not namespace or "/" in namespace or "\\" in namespace or namespace.startswith("."):
            raise ValueError(f"invalid namespace: {namespace!r}")
        return self.root_dir / f"{namespace}.yaml"

    # ------------------------------------------------------------------
    # Sync I/O
    # ------------------------------------------------------------------
    def _read_namespace(self, namespace: str) -> Dict[str, Any]:
        path = self.namespace_path(namespace)
        if not path.exists():
            return {}

        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise StoreFormatError(
                f"namespace file must contain a mapping, got: {type(data).__name__} ({path})"
            )
        return data

    def _write_key(self, namespace: str, value: Any, key: str) -> bool:
        path = self.namespace_path(namespace)
        with self._lock:
            data = self._read_namespace(namespace)
            data[key] = value
            path.parent.mkdir(parents=True, exist_ok=True)
            tmp = path.with_name(path.name + ".tmp")
            tmp.write_text(
                yaml.safe_dump(data, sort_keys=True, allow_unicode=True),
                encoding="utf-8",
            )
            tmp.replace(path)
        return True

    def _read_key(self, namespace: str, key: str) -> Any:
        return self._read_namespace(namespace).get(key)

    # ------------------------------------------------------------------
    # KeyValueStore
    # ------------------------------------------------------------------
    async def get(self, namespace: str, key: str) -> Any:
        logger.debug("yaml store get %s/%s", namespace, key)
        return await asyncio.to_thread(self._read_key, namespace, key)

    async def set(self, namespace: str, value: Any, key: str) -> bool:
        logger.debug("yaml store set %s/%s", namespace, key)
        return await asyncio.to_thread(self._write_key, namespace, value, key)


__all__ = ["YamlFileKeyValueStore"]
