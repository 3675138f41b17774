# src/flatconf/__init__.py
"""
flatconf — adapter de configuração hierárquica para mapas planos.

Este pacote raiz define o namespace público do flatconf, uma pequena
camada que converte uma árvore de configuração tipada e já resolvida
em um mapa imutável de chaves pontuadas (`a.b.c`) para strings.

Princípios centrais:
    - O parsing do formato de configuração é delegado a bibliotecas externas
    - A árvore de origem nunca é mutada
    - O mapa resultante é imutável e comparável por valor

Arquitetura em alto nível:
    - core.config.tree    → protocolo de árvore resolvida e implementação OmegaConf
    - core.config.loader  → carregamento de arquivos .properties, YAML e JSON
    - core.config.render  → renderização de valores (escalares e JSON compacto)
    - core.config.hashing → fingerprint determinístico do mapa plano
    - core.config.flat    → adapter `FlatConfiguration`

Limites explícitos:
    - Não valida schema de configuração
    - Não persiste nem mescla configurações
    - Não aplica overrides de variáveis de ambiente
"""
# src/flatconf/__init__.py
from .core.config import (
    ConfigError,
    ConfigKeyConflictError,
    ConfigNotFoundError,
    ConfigPathNotFoundError,
    FlatConfiguration,
    ImmutableFlatMap,
    InvalidArgumentError,
    InvalidConfigRootTypeError,
    OmegaConfTree,
    ResolvedConfigTree,
    UnsupportedConfigFormatError,
    UnsupportedOperationError,
    empty_tree,
    load_tree,
)

__all__ = [
    "ConfigError",
    "ConfigKeyConflictError",
    "ConfigNotFoundError",
    "ConfigPathNotFoundError",
    "FlatConfiguration",
    "ImmutableFlatMap",
    "InvalidArgumentError",
    "InvalidConfigRootTypeError",
    "OmegaConfTree",
    "ResolvedConfigTree",
    "UnsupportedConfigFormatError",
    "UnsupportedOperationError",
    "empty_tree",
    "load_tree",
]
