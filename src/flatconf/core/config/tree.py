# src/flatconf/core/config/tree.py
"""
Árvore de configuração resolvida do flatconf.

Este módulo define o protocolo `ResolvedConfigTree`, a capacidade mínima
que o adapter plano consome, e `OmegaConfTree`, a implementação canônica
baseada em OmegaConf.

Uma árvore resolvida é:
    - já parseada (a sintaxe de arquivo é responsabilidade do loader)
    - já resolvida (interpolações `${...}` avaliadas uma única vez)
    - imutável (operações de alteração retornam uma nova árvore)

Política de enumeração (`entries`):
    - mapas são expandidos em caminhos pontuados por chave
    - listas são folhas (mesmo quando contêm mapas)
    - folhas nulas são omitidas
    - mapas vazios não produzem entradas

Limites explícitos:
    - Não valida schema
    - Não mescla fontes
    - Não renderiza valores como string
"""

from __future__ import annotations

import copy
from typing import Any, Dict, Iterator, List, Mapping, Protocol, Tuple, runtime_checkable

from omegaconf import DictConfig, OmegaConf

from .errors import ConfigPathNotFoundError, InvalidConfigRootTypeError
from .render import unwrap


@runtime_checkable
class ResolvedConfigTree(Protocol):
    """
    Contrato canônico de uma árvore de configuração resolvida.

    Qualquer biblioteca de configuração pode ser usada pelo adapter
    desde que exponha estas operações. A verificação ocorre em runtime
    (`@runtime_checkable`), por duck typing.
    """

    def entries(self) -> Iterator[Tuple[str, Any]]:
        """Enumera todas as folhas não nulas como pares (caminho, valor)."""
        ...

    def get_value(self, path: str) -> Any:
        """Retorna o valor tipado no caminho pontuado."""
        ...

    def is_null(self, path: str) -> bool:
        """Indica se o caminho existe e contém null."""
        ...

    def is_empty(self) -> bool:
        """Indica se a árvore não possui nenhuma chave."""
        ...


def _split_path(path: str) -> List[str]:
    if not isinstance(path, str) or not path:
        raise ConfigPathNotFoundError(f"Caminho inválido: {path!r}")
    return path.split(".")


def _walk(node: Dict[str, Any], prefix: str) -> Iterator[Tuple[str, Any]]:
    for key, value in node.items():
        path = f"{prefix}.{key}" if prefix else str(key)
        if value is None:
            continue
        if isinstance(value, dict):
            yield from _walk(value, path)
            continue
        yield path, value


def _escape_interpolations(value: Any) -> Any:
    # texto literal "${" não deve ser reinterpretado pelo OmegaConf
    if isinstance(value, str):
        return value.replace("${", "\\${")
    if isinstance(value, dict):
        return {k: _escape_interpolations(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_escape_interpolations(v) for v in value]
    return value


class OmegaConfTree:
    """
    Árvore de configuração resolvida baseada em OmegaConf.

    Por padrão a configuração de origem é resolvida uma única vez na
    construção (`OmegaConf.to_container(resolve=True)`). Com
    `resolve=False` o conteúdo é mantido como texto literal, sem
    avaliar `${...}`; é o caso de arquivos `.properties`.

    Decisões arquiteturais:
        - A entrada pode ser um `DictConfig` ou um mapeamento comum
        - O conteúdo resolvido é mantido como containers Python puros
        - O `DictConfig` exposto em `config` é somente leitura e reflete
          exatamente o conteúdo resolvido (sem nova interpolação)
        - `without_path` e `with_value` nunca mutam a árvore atual

    Raises:
        InvalidConfigRootTypeError: Se a raiz não for um mapeamento.
    """

    def __init__(self, config: Any = None, *, resolve: bool = True) -> None:
        if config is None:
            config = {}

        if isinstance(config, DictConfig):
            data = OmegaConf.to_container(config, resolve=resolve)
        elif isinstance(config, Mapping):
            if resolve:
                data = OmegaConf.to_container(OmegaConf.create(dict(config)), resolve=True)
            else:
                data = unwrap(config)
        else:
            raise InvalidConfigRootTypeError(
                f"Config root deve ser mapeamento, recebido: {type(config).__name__}"
            )

        self._data: Dict[str, Any] = data
        self._config: DictConfig = OmegaConf.create(_escape_interpolations(data))
        OmegaConf.set_readonly(self._config, True)

    @property
    def config(self) -> DictConfig:
        """`DictConfig` somente leitura com o conteúdo resolvido."""
        return self._config

    # -----------------------------
    # Leitura
    # -----------------------------
    def entries(self) -> Iterator[Tuple[str, Any]]:
        for path, value in _walk(self._data, ""):
            yield path, copy.deepcopy(value)

    def _lookup(self, path: str) -> Any:
        node: Any = self._data
        for segment in _split_path(path):
            if not isinstance(node, dict) or segment not in node:
                raise ConfigPathNotFoundError(f"Caminho não encontrado: {path}")
            node = node[segment]
        return node

    def get_value(self, path: str) -> Any:
        return copy.deepcopy(self._lookup(path))

    def is_null(self, path: str) -> bool:
        return self._lookup(path) is None

    def is_empty(self) -> bool:
        return not self._data

    def to_container(self) -> Dict[str, Any]:
        return copy.deepcopy(self._data)

    # -----------------------------
    # Derivação
    # -----------------------------
    def without_path(self, path: str) -> "OmegaConfTree":
        data = copy.deepcopy(self._data)
        segments = _split_path(path)
        node: Any = data
        for segment in segments[:-1]:
            if not isinstance(node, dict) or segment not in node:
                return OmegaConfTree(data, resolve=False)
            node = node[segment]
        if isinstance(node, dict):
            node.pop(segments[-1], None)
        return OmegaConfTree(data, resolve=False)

    def with_value(self, path: str, value: Any) -> "OmegaConfTree":
        _split_path(path)
        cfg = OmegaConf.create(_escape_interpolations(self._data))
        OmegaConf.update(cfg, path, copy.deepcopy(value), merge=False)
        return OmegaConfTree(cfg)

    def __repr__(self) -> str:
        return f"OmegaConfTree({self._data!r})"
