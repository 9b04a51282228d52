# src/configurator/core/__init__.py
"""
Core do Configurator.

Componentes principais:
    - schema  → tipos, normalização de declarações, validação de valores,
                carregamento de declarações e hashing
    - store   → porta assíncrona de store chave-valor e implementações
    - naming  → validação do nome de instâncias
    - facade  → instância de configuração (save_all/load_all/get/set)
    - errors  → hierarquia de exceções tipadas

Princípios fundamentais:
    - Erros de autoria do schema surgem na construção, nunca na escrita
    - Nenhum valor inválido chega ao store
    - Todo estado persistido vive no store externo
"""
