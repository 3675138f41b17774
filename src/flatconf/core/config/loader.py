# src/flatconf/core/config/loader.py
"""
Loader canônico de árvores de configuração do flatconf.

Este módulo é responsável por ler um arquivo de configuração do disco
e produzir uma `OmegaConfTree` resolvida, pronta para ser consumida
pelo adapter `FlatConfiguration`.

Responsabilidades do módulo:
    - Carregar arquivos `.properties`, YAML ou JSON
    - Validar requisitos estruturais mínimos (tipo raiz)
    - Expandir chaves pontuadas de arquivos `.properties` em mapas aninhados

Princípios fundamentais:
    - O formato é determinado exclusivamente pela extensão do arquivo
    - Erros de sintaxe dos parsers externos são propagados sem alteração
    - A mesma entrada sempre produz a mesma árvore

Invariantes:
    - O resultado é sempre uma `OmegaConfTree`
    - Valores de arquivos `.properties` permanecem strings literais
    - Datas e timestamps YAML permanecem strings

Limites explícitos:
    - Não mescla múltiplos arquivos
    - Não aplica overrides de variáveis de ambiente
    - Não valida semântica de domínio
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, TextIO, Union

import javaproperties
import yaml  # PyYAML

from .errors import (
    ConfigKeyConflictError,
    ConfigNotFoundError,
    InvalidConfigRootTypeError,
    UnsupportedConfigFormatError,
)
from .tree import OmegaConfTree

logger = logging.getLogger(__name__)

_PROPERTIES_SUFFIXES = {".properties"}
_YAML_SUFFIXES = {".yaml", ".yml"}
_JSON_SUFFIXES = {".json"}


class _StringTimestampLoader(yaml.SafeLoader):
    """`SafeLoader` que mantém datas e timestamps como texto."""


_StringTimestampLoader.add_constructor(
    "tag:yaml.org,2002:timestamp",
    _StringTimestampLoader.construct_yaml_str,
)


def _set_nested(root: Dict[str, Any], key: str, value: str) -> None:
    segments = key.split(".")
    node = root
    for depth, segment in enumerate(segments[:-1]):
        child = node.setdefault(segment, {})
        if not isinstance(child, dict):
            prefix = ".".join(segments[: depth + 1])
            raise ConfigKeyConflictError(
                f"Conflito de chave '{key}': '{prefix}' já é uma folha"
            )
        node = child

    leaf = segments[-1]
    if isinstance(node.get(leaf), dict):
        raise ConfigKeyConflictError(f"Conflito de chave '{key}': já é um prefixo")
    node[leaf] = value


def _parse_properties(fp: TextIO) -> Dict[str, Any]:
    """
    Lê um arquivo `.properties` e expande as chaves pontuadas em mapas aninhados.

    A sintaxe (comentários, separadores, continuação de linha e escapes
    como `\\:` ou `\\uXXXX`) segue `java.util.Properties`, via `javaproperties`.
    """
    data: Dict[str, Any] = {}
    for key, value in javaproperties.load(fp).items():
        _set_nested(data, key, value)
    return data


def _load_file(path: Path) -> Dict[str, Any]:
    """
    Carrega um arquivo de configuração e valida sua estrutura básica.

    Formatos suportados (v1):
        - Properties (.properties)
        - YAML (.yaml, .yml)
        - JSON (.json)

    Decisões arquiteturais:
        - Arquivos vazios são interpretados como dicionários vazios
        - Formatos não suportados geram erro explícito

    Raises:
        ConfigNotFoundError: Se o arquivo não existir.
        UnsupportedConfigFormatError: Se o formato do arquivo não for suportado.
        InvalidConfigRootTypeError: Se o conteúdo raiz não for um dicionário.
        ConfigKeyConflictError: Se uma chave `.properties` for folha e prefixo.
    """
    if not path.exists():
        raise ConfigNotFoundError(f"Arquivo de configuração não encontrado: {path}")

    suffix = path.suffix.lower()

    if suffix in _PROPERTIES_SUFFIXES:
        with path.open("r", encoding="utf-8") as f:
            data = _parse_properties(f)

    elif suffix in _YAML_SUFFIXES:
        with path.open("r", encoding="utf-8") as f:
            data = yaml.load(f, Loader=_StringTimestampLoader)

    elif suffix in _JSON_SUFFIXES:
        with path.open("r", encoding="utf-8") as f:
            data = json.load(f)

    else:
        raise UnsupportedConfigFormatError(f"Formato não suportado: {path.suffix}")

    if data is None:
        data = {}

    if not isinstance(data, dict):
        raise InvalidConfigRootTypeError(
            f"Config root deve ser dict, recebido: {type(data).__name__}"
        )

    return data


def load_tree(path: Union[str, Path]) -> OmegaConfTree:
    """
    Carrega um arquivo de configuração como árvore resolvida.

    Args:
        path (Union[str, Path]): Caminho do arquivo de configuração.

    Returns:
        OmegaConfTree: Árvore resolvida e somente leitura.

    Raises:
        ConfigNotFoundError: Se o arquivo não existir.
        UnsupportedConfigFormatError: Se o formato do arquivo não for suportado.
        InvalidConfigRootTypeError: Se o conteúdo raiz não for um dicionário.
        ConfigKeyConflictError: Se uma chave `.properties` for folha e prefixo.
    """
    file = Path(path)
    data = _load_file(file)
    # .properties é texto literal: sem interpolação ${...}
    resolve = file.suffix.lower() not in _PROPERTIES_SUFFIXES
    tree = OmegaConfTree(data, resolve=resolve)

    logger.debug(
        "Configuração carregada: path=%s format=%s keys=%d",
        file,
        file.suffix.lower().lstrip("."),
        len(data),
    )
    return tree


def empty_tree() -> OmegaConfTree:
    """Retorna uma árvore resolvida sem nenhuma chave."""
    return OmegaConfTree({})
