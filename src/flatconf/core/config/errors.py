# src/flatconf/core/config/errors.py
"""
Exceções canônicas da camada de configuração do flatconf.

Este módulo define a hierarquia oficial de exceções utilizadas durante
o carregamento da árvore de configuração e o uso do adapter plano.

Princípios fundamentais:
    - Exceções são tipadas e semânticas
    - Cada exceção também herda da exceção built-in equivalente,
      permitindo captura idiomática (`ValueError`, `TypeError`, `KeyError`)
    - Erros de sintaxe dos parsers externos não são encapsulados

Invariantes:
    - Todas as exceções de configuração herdam de `ConfigError`

Limites explícitos:
    - Não realiza fallback ou recovery
    - Não encapsula erros do PyYAML ou do módulo `json`
"""


class ConfigError(Exception):
    """
    Exceção base para erros relacionados à configuração do flatconf.

    Esta hierarquia permite:
        - captura genérica de erros de configuração
        - distinção entre falhas do adapter e falhas dos parsers externos
    """


class InvalidArgumentError(ConfigError, ValueError):
    """
    Exceção levantada quando o adapter recebe uma árvore ausente (`None`)
    ou um objeto que não satisfaz o protocolo `ResolvedConfigTree`.
    """


class UnsupportedOperationError(ConfigError, TypeError):
    """
    Exceção levantada em qualquer tentativa de mutação do mapa plano.

    Decisões arquiteturais:
        - O mapa plano é somente leitura durante toda a vida do adapter
        - Inserção, atualização e remoção falham explicitamente
    """


class ConfigNotFoundError(ConfigError, FileNotFoundError):
    """Exceção levantada quando o arquivo de configuração não existe."""


class UnsupportedConfigFormatError(ConfigError):
    """
    Exceção levantada quando o formato do arquivo de configuração
    não é suportado pelo loader.

    Formatos suportados:
        - Properties (.properties)
        - YAML (.yaml, .yml)
        - JSON (.json)

    Limites explícitos:
        - Não tenta inferir formato por conteúdo
    """


class InvalidConfigRootTypeError(ConfigError):
    """
    Exceção levantada quando o conteúdo raiz da configuração
    não é um dicionário (`dict`).

    Invariantes:
        - A árvore resolvida só opera sobre mapas chave-valor no root
    """


class ConfigKeyConflictError(ConfigError):
    """
    Exceção levantada quando uma mesma chave de um arquivo `.properties`
    é usada tanto como folha quanto como prefixo de outras chaves.

    Exemplo de conflito:
        - a=1
        - a.b=2
    """


class ConfigPathNotFoundError(ConfigError, KeyError):
    """Exceção levantada ao consultar um caminho inexistente na árvore."""
