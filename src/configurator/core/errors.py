# src/configurator/core/errors.py
"""
Exceções canônicas do Configurator.

Este módulo define a hierarquia oficial de exceções utilizadas durante a
normalização do schema, a validação de valores, o carregamento de declarações
e o acesso ao store de configuração.

As exceções aqui definidas representam **violações explícitas de contrato**,
e não erros genéricos de execução.

Duas famílias principais:
    - SchemaError → declaração de opção inválida (momento de construção)
    - ConfigError → valor inválido, chave desconhecida ou obrigatória ausente
      (momento de escrita)

Invariantes:
    - Todas as exceções herdam de `ConfiguratorError`
    - Erros de validação são levantados antes de qualquer acesso ao store
    - Falhas de I/O do store não são encapsuladas (propagam como estão)

Limites explícitos:
    - Não realiza fallback ou recovery
    - Não registra logs
"""

from __future__ import annotations

from typing import Optional


__all__ = [
    "ConfiguratorError",
    "SchemaError",
    "ConfigError",
    "UnrecognizedKeyError",
    "InvalidValueError",
    "MissingRequiredError",
    "InvalidConfigNameError",
    "DeclarationsError",
    "DeclarationsNotFoundError",
    "UnsupportedDeclarationsFormatError",
    "DeclarationsParseError",
    "InvalidDeclarationsRootTypeError",
    "StoreFormatError",
    "format_error",
]


class ConfiguratorError(Exception):
    """
    Exceção base do Configurator.

    Carrega opcionalmente a chave (`key`) da opção envolvida, permitindo
    que chamadores reajam sem interpretar a mensagem textual.
    """

    def __init__(self, message: str, *, key: Optional[str] = None) -> None:
        super().__init__(message)
        self.key = key


class SchemaError(ConfiguratorError):
    """
    Exceção levantada quando uma declaração de opção é estruturalmente inválida.

    Exemplos:
        - `type` ausente ou fora do conjunto {any, string, choice, bool}
        - `default` explícito rejeitado pela regra do tipo
        - `choice` sem `default`

    Decisões arquiteturais:
        - Falha fatal para a construção: a instância de config nunca é criada
        - Todos os erros de autoria do schema são antecipados para a construção
    """


class ConfigError(ConfiguratorError):
    """
    Exceção base para erros de valor de configuração.

    Levantada durante `set`/`save_all` quando um valor falha na validação,
    uma chave obrigatória está ausente ou uma chave desconhecida é fornecida.

    Invariantes:
        - Nenhuma escrita parcial ocorre quando esta exceção é levantada
    """


class UnrecognizedKeyError(ConfigError):
    """Chave não declarada no schema."""


class InvalidValueError(ConfigError):
    """Valor rejeitado pela regra de aceitação do tipo da opção."""


class MissingRequiredError(ConfigError):
    """Opção marcada como `required` ausente do objeto salvo."""


class InvalidConfigNameError(ConfigError):
    """Nome da instância de configuração fora do conjunto de caracteres permitido."""


class DeclarationsError(ConfiguratorError):
    """Erro base do carregamento de declarações a partir de arquivo."""


class DeclarationsNotFoundError(DeclarationsError):
    """Arquivo de declarações não existe no caminho informado."""


class UnsupportedDeclarationsFormatError(DeclarationsError):
    """
    Formato do arquivo de declarações não suportado.

    Formatos suportados (v1):
        - YAML (.yaml, .yml)
        - JSON (.json)
    """


class DeclarationsParseError(DeclarationsError):
    """Falha ao parsear YAML/JSON."""


class InvalidDeclarationsRootTypeError(DeclarationsError):
    """O conteúdo raiz do arquivo de declarações não é um mapa."""


class StoreFormatError(ConfiguratorError):
    """Conteúdo persistido pelo store de arquivo não tem a estrutura esperada."""


def format_error(e: BaseException) -> str:
    """
    Retorna uma mensagem curta e uniforme para operadores.

    Formato: `<Classe>: <mensagem>`. Quando o erro foi encadeado a partir de
    outra exceção (ex.: predicado de validação que falhou), a causa é anexada:
    `InvalidValueError: invalid value for key: n (caused by TypeError: ...)`.
    """
    parts = [e.__class__.__name__]
    msg = str(e).strip()
    if msg:
        parts.append(f": {msg}")

    cause = e.__cause__
    if cause is not None:
        cause_msg = str(cause).strip()
        cause_text = f"{cause.__class__.__name__}: {cause_msg}" if cause_msg else cause.__class__.__name__
        parts.append(f" (caused by {cause_text})")

    return "".join(parts)
