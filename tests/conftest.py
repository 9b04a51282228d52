# tests/conftest.py
"""
Fixtures compartilhados para testes do Configurator.

Este módulo define fixtures reutilizáveis que fornecem:
- declarações de opção mínimas e determinísticas
- store em memória isolado por teste
- conteúdo YAML de declarações semelhante ao uso real

Decisões arquiteturais:
    - Fixtures são mantidas simples e explícitas
    - Dados retornados são novos a cada teste (nenhum estado compartilhado)
    - Operações assíncronas são executadas com `asyncio.run` nos próprios testes

Limites explícitos:
    - Nenhuma fixture realiza I/O de arquivo
    - Nenhuma fixture cria instâncias de Config (os testes o fazem explicitamente)
"""

import pytest


@pytest.fixture
def server_options() -> dict:
    """
    Declarações de um servidor fictício cobrindo os quatro tipos.

    - port: any, obrigatório
    - host: string com predicado (não vazio)
    - mode: choice entre "a" e "b"
    - flag: bool com default implícito
    """
    return {
        "port": {"type": "any", "required": True},
        "host": {"type": "string", "default": "localhost", "validation": lambda v: bool(v)},
        "mode": {"type": "choice", "validation": ["a", "b"], "default": "a"},
        "flag": {"type": "bool"},
    }


@pytest.fixture
def memory_store():
    from configurator.core.store.memory import InMemoryKeyValueStore

    return InMemoryKeyValueStore()


@pytest.fixture
def project_like_declarations_yaml() -> str:
    """
    YAML de declarações semelhante a um arquivo `config.schema.yaml` real.

    Returns:
        str: conteúdo YAML com quatro opções.
    """
    return """\
port:
  type: any
  required: true
host:
  type: string
  default: localhost
mode:
  type: choice
  choices: [fast, safe]
  default: safe
debug:
  type: bool
  env: APP_DEBUG
"""
