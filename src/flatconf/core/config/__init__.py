# src/flatconf/core/config/__init__.py

"""
Camada de configuração do flatconf.

Este pacote contém as estruturas e utilitários responsáveis por carregar
uma árvore de configuração tipada, percorrê-la e expor o resultado como
um mapa plano de chaves pontuadas para strings.

A configuração no flatconf é:
    - resolvida uma única vez (interpolações incluídas)
    - somente leitura após a construção
    - identificada apenas pelo conteúdo do mapa plano

Responsabilidades do pacote:
    - Protocolo `ResolvedConfigTree` e implementação baseada em OmegaConf
    - Carregamento de arquivos `.properties`, YAML e JSON
    - Renderização de folhas escalares e compostas (JSON compacto)
    - Adapter `FlatConfiguration` com igualdade e hash por valor

Invariantes:
    - Folhas nulas nunca aparecem no mapa plano
    - Valores compostos ocupam uma única chave
    - O mapa plano rejeita qualquer mutação

Limites explícitos:
    - Não valida semântica de domínio
    - Não mescla múltiplas fontes
    - Não observa mudanças em arquivos
"""

from .errors import (
    ConfigError,
    ConfigKeyConflictError,
    ConfigNotFoundError,
    ConfigPathNotFoundError,
    InvalidArgumentError,
    InvalidConfigRootTypeError,
    UnsupportedConfigFormatError,
    UnsupportedOperationError,
)
from .flat import FlatConfiguration, ImmutableFlatMap
from .loader import empty_tree, load_tree
from .tree import OmegaConfTree, ResolvedConfigTree

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
