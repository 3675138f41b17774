# src/flatconf/core/config/render.py
"""
Renderização canônica de valores de configuração.

Este módulo converte um valor tipado de uma árvore resolvida na string
que ocupa a chave correspondente do mapa plano.

Política de renderização:
    - str            → o próprio texto, sem alteração
    - bool           → "true" / "false"
    - int / float    → forma decimal canônica
    - lista / mapa   → JSON compacto, com chaves de objetos ordenadas

Os valores compostos passam primeiro por `unwrap`, que reduz qualquer
container (inclusive `ListConfig` / `DictConfig` do OmegaConf) a uma
estrutura Python pura de primitivos. A serialização trabalha apenas
sobre essa estrutura, desacoplada dos tipos nativos da árvore.

Limites explícitos:
    - Não trata folhas nulas (a árvore já as omite)
    - Não captura erros de serialização JSON
"""

import json
from collections.abc import Mapping
from typing import Any

from omegaconf import DictConfig, ListConfig, OmegaConf


def unwrap(value: Any) -> Any:
    """
    Reduz um valor a uma estrutura pura de str, números, bool, None, list e dict.

    Mapas têm suas chaves convertidas para str; sequências preservam a
    ordem original dos elementos.
    """
    if isinstance(value, (DictConfig, ListConfig)):
        value = OmegaConf.to_container(value, resolve=True)

    if value is None or isinstance(value, (str, bool, int, float)):
        return value

    if isinstance(value, Mapping):
        return {str(k): unwrap(v) for k, v in value.items()}

    if isinstance(value, (list, tuple)):
        return [unwrap(v) for v in value]

    raise TypeError(f"Valor de configuração não suportado: {type(value).__name__}")


def canonical_json(value: Any) -> str:
    """
    Serializa um valor em JSON canônico compacto.

    Política (v1):
        - Ordenação estável de chaves (`sort_keys=True`)
        - Separadores compactos (sem espaços)
        - Caracteres não-ASCII preservados
        - NaN e infinito são rejeitados (`ValueError`), pois não são JSON válido
    """
    return json.dumps(
        value,
        sort_keys=True,
        separators=(",", ":"),
        ensure_ascii=False,
        allow_nan=False,
    )


def render_value(value: Any) -> str:
    """Renderiza uma folha não nula como string do mapa plano."""
    # bool antes de int: bool é subclasse de int
    if isinstance(value, bool):
        return "true" if value else "false"

    if isinstance(value, str):
        return value

    if isinstance(value, (int, float)):
        return str(value)

    return canonical_json(unwrap(value))
