# src/flatconf/core/config/flat.py
"""
Adapter de configuração plana do flatconf.

Este módulo define o `FlatConfiguration`, o adapter que envolve uma
árvore de configuração resolvida e expõe seu conteúdo como um mapa
imutável de caminhos pontuados para strings.

Política de achatamento (v1):
    - cada folha não nula gera exatamente uma entrada
    - folhas nulas são omitidas (sem marcador, sem string vazia)
    - listas e mapas aninhados em listas viram um único texto JSON
    - chaves de objetos JSON aparecem em ordem alfabética

Decisões arquiteturais:
    - O mapa é calculado sob demanda e memoizado por instância
    - Igualdade e hash derivam apenas do conteúdo do mapa plano
    - A árvore de origem nunca é mutada

Invariantes:
    - O mapa retornado nunca muda durante a vida do adapter
    - Adapters com mapas iguais são iguais e têm o mesmo hash

Limites explícitos:
    - Não oferece operações de escrita
    - Não revalida a árvore de origem
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Dict, Iterator, Optional

from .errors import InvalidArgumentError, UnsupportedOperationError
from .hashing import compute_flat_hash, hash_to_int
from .render import render_value
from .tree import ResolvedConfigTree

logger = logging.getLogger(__name__)


class ImmutableFlatMap(Mapping):
    """
    Mapa somente leitura de caminho pontuado para string.

    Qualquer tentativa de mutação levanta `UnsupportedOperationError`.
    Compara igual a qualquer mapeamento com os mesmos itens.
    """

    __slots__ = ("_data",)

    def __init__(self, data: Optional[Mapping] = None) -> None:
        self._data: Dict[str, str] = dict(data or {})

    def __getitem__(self, key: str) -> str:
        return self._data[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __hash__(self) -> int:
        return hash(frozenset(self._data.items()))

    def __repr__(self) -> str:
        return f"ImmutableFlatMap({self._data!r})"

    def _reject(self, *args: Any, **kwargs: Any):
        raise UnsupportedOperationError("ImmutableFlatMap não suporta mutação")

    __setitem__ = _reject
    __delitem__ = _reject
    update = _reject
    pop = _reject
    popitem = _reject
    clear = _reject
    setdefault = _reject
    __ior__ = _reject


class FlatConfiguration:
    """
    Visão plana, imutável e comparável por valor de uma árvore resolvida.

    Args:
        tree (ResolvedConfigTree): Árvore de configuração já resolvida.

    Raises:
        InvalidArgumentError: Se `tree` for None ou não satisfizer o protocolo.
    """

    def __init__(self, tree: ResolvedConfigTree) -> None:
        if tree is None:
            raise InvalidArgumentError("FlatConfiguration requer uma árvore, recebido: None")
        if not isinstance(tree, ResolvedConfigTree):
            raise InvalidArgumentError(
                f"FlatConfiguration requer ResolvedConfigTree, recebido: {type(tree).__name__}"
            )

        self._tree = tree
        self._flat: Optional[ImmutableFlatMap] = None
        self._digest: Optional[str] = None

    def as_map(self) -> ImmutableFlatMap:
        """
        Retorna o mapa plano, calculando-o na primeira chamada.

        Chamadas seguintes retornam a mesma instância. Uma corrida na
        primeira chamada pode calcular o mapa mais de uma vez; todos os
        resultados são iguais e a última atribuição prevalece.
        """
        flat = self._flat
        if flat is None:
            flat = self._flatten()
            self._flat = flat
        return flat

    def _flatten(self) -> ImmutableFlatMap:
        result: Dict[str, str] = {}
        for path, value in self._tree.entries():
            result[path] = render_value(value)

        logger.debug("Configuração achatada: entries=%d", len(result))
        return ImmutableFlatMap(result)

    def _fingerprint(self) -> str:
        digest = self._digest
        if digest is None:
            digest = compute_flat_hash(self.as_map())
            self._digest = digest
        return digest

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, FlatConfiguration):
            return NotImplemented
        return self.as_map() == other.as_map()

    def __hash__(self) -> int:
        return hash_to_int(self._fingerprint())

    def __repr__(self) -> str:
        return f"FlatConfiguration({dict(self.as_map())!r})"
