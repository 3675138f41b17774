# tests/conftest.py
"""
Fixtures compartilhados para testes do flatconf.

Este módulo define fixtures reutilizáveis que fornecem:
- conteúdos de configuração determinísticos (como string)
- arquivos de configuração materializados em `tmp_path`
- árvores resolvidas prontas para o adapter

Decisões arquiteturais:
    - Conteúdos são fornecidos como string para manter os testes explícitos
    - Arquivos físicos são escritos apenas em `tmp_path`
    - Imports do core são realizados de forma lazy dentro das fixtures

Invariantes:
    - Nenhuma fixture depende de variáveis de ambiente
    - Todas as fixtures são seguras para execução em paralelo

Limites explícitos:
    - Não validar comportamento do adapter
    - Não conter lógica condicional complexa
"""

from pathlib import Path

import pytest


# =====================================================
# Conteúdos de configuração
# =====================================================

@pytest.fixture
def basic_properties() -> str:
    """
    Fixture que fornece um arquivo `.properties` com três valores básicos.

    Os valores cobrem os três tipos de folha mais comuns:
    número (`foo`), texto (`bar`) e booleano (`fizz`).

    Returns:
        str: Conteúdo `.properties` com três chaves.
    """
    return """\
# configuração básica
foo=1
bar=foo
fizz=true
"""


@pytest.fixture
def nested_yaml() -> str:
    """
    Fixture que fornece um YAML com mapas aninhados, lista, lista de mapas e null.

    Returns:
        str: Conteúdo YAML representando uma configuração típica de serviço.
    """
    return """\
server:
  host: localhost
  port: 8080
  debug: false
  ratio: 0.75
features:
  - search
  - export
backends:
  - name: primary
    weight: 2
  - name: secondary
    weight: 1
optional: null
"""


# =====================================================
# Arquivos e árvores
# =====================================================

@pytest.fixture
def basic_properties_file(tmp_path: Path, basic_properties: str) -> Path:
    """Materializa `basic_properties` como `configuration.properties`."""
    path = tmp_path / "configuration.properties"
    path.write_text(basic_properties, encoding="utf-8")
    return path


@pytest.fixture
def basic_tree(basic_properties_file: Path):
    """
    Fixture que fornece a árvore resolvida do `.properties` básico.

    Returns:
        OmegaConfTree: Árvore com as chaves `foo`, `bar` e `fizz`.
    """
    from flatconf.core.config.loader import load_tree

    return load_tree(basic_properties_file)
