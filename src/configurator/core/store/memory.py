# src/configurator/core/store/memory.py
"""Store chave-valor em memória.

Útil para testes e para processos que não precisam persistir configuração.

Decisões:
- Valores são copiados (deepcopy) na escrita e na leitura; o chamador nunca
  compartilha referência com o estado armazenado
- Chave inexistente retorna None
"""

from __future__ import annotations

import logging
from copy import deepcopy
from dataclasses import dataclass, field
from typing import Any, Dict, List, Tuple


logger = logging.getLogger(__name__)


@dataclass
class InMemoryKeyValueStore:
    """Implementação de `KeyValueStore` baseada em dict."""

    _data: Dict[Tuple[str, str], Any] = field(default_factory=dict, repr=False)

    async def get(self, namespace: str, key: str) -> Any:
        logger.debug("memory store get %s/%s", namespace, key)
        return deepcopy(self._data.get((namespace, key)))

    async def set(self, namespace: str, value: Any, key: str) -> bool:
        logger.debug("memory store set %s/%s", namespace, key)
        self._data[(namespace, key)] = deepcopy(value)
        return True

    def has(self, namespace: str, key: str) -> bool:
        """Indica se (namespace, key) já foi gravado, mesmo que com valor None."""
        return (namespace, key) in self._data

    def keys(self, namespace: str) -> List[str]:
        """Chaves gravadas em `namespace`, em ordem alfabética."""
        return sorted(k for ns, k in self._data if ns == namespace)


__all__ = ["InMemoryKeyValueStore"]
