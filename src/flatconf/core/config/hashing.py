# src/flatconf/core/config/hashing.py
"""
Hashing canônico do mapa plano de configuração.

Este módulo gera o fingerprint determinístico de um mapa plano
(caminho pontuado → string), usado como identidade de valor do
adapter `FlatConfiguration`.

Princípios fundamentais:
    - Hashing determinístico e reprodutível entre processos
    - Independente da ordem de inserção das chaves
    - Baseado em serialização JSON canônica
    - Algoritmo criptográfico estável (SHA-256)

Invariantes:
    - Mapas com o mesmo conteúdo produzem o mesmo hash
    - O valor gerado é sempre uma string hexadecimal de 64 caracteres
"""

import hashlib
from collections.abc import Mapping

from .render import canonical_json


def compute_flat_hash(flat: Mapping) -> str:
    """
    Gera um hash SHA-256 determinístico de um mapa plano.

    Args:
        flat (Mapping): Mapa de caminho pontuado para string.

    Returns:
        str: Hash SHA-256 hexadecimal do JSON canônico do mapa.

    Raises:
        TypeError: Se o objeto fornecido não for um mapeamento.
    """
    if not isinstance(flat, Mapping):
        raise TypeError(
            f"Mapa para hashing deve ser Mapping, recebido: {type(flat).__name__}"
        )

    payload = canonical_json(dict(flat))
    return hashlib.sha256(payload.encode("utf-8")).hexdigest()


def hash_to_int(digest: str) -> int:
    """Reduz um digest hexadecimal aos 64 bits iniciais, para uso em `__hash__`."""
    return int(digest[:16], 16)
