# src/configurator/core/store/ports.py
"""Porta do store chave-valor consumido pela fachada de configuração.

O protocolo é propositalmente pequeno: duas operações assíncronas sobre
(namespace, key). Qualquer objeto que as exponha pode ser usado como store.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class KeyValueStore(Protocol):
    """Store chave-valor assíncrono e particionado por namespace."""

    async def get(self, namespace: str, key: str) -> Any:
        """Retorna o valor gravado em (namespace, key) ou None."""

    async def set(self, namespace: str, value: Any, key: str) -> Any:
        """Grava `value` em (namespace, key) e retorna a confirmação do store."""
