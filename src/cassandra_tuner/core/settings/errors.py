# src/cassandra_tuner/core/settings/errors.py
"""
Exceções canônicas da camada de settings do tuner.

Este módulo define a hierarquia de exceções utilizadas durante o
carregamento, merge e materialização dos settings que alimentam a
fonte de configuração (`TunerSettings`).

Princípios fundamentais:
    - Exceções são tipadas e semânticas
    - Erros estruturais são tratados como falhas fatais
    - Mensagens identificam arquivo ou chave envolvida

Invariantes:
    - Todas as exceções de settings herdam de `SettingsError`
    - Nenhuma exceção representa erro do documento cassandra.yaml

Limites explícitos:
    - Não realiza fallback ou recovery
    - Não depende do engine de tuning
"""


class SettingsError(Exception):
    """
    Exceção base para erros da camada de settings.

    Separa falhas na *fonte* de configuração (settings do operador) de
    falhas no *documento* sendo tunado (`core.errors.TunerError`).
    """


class DefaultsNotFoundError(SettingsError):
    """
    Arquivo de settings base (defaults) não encontrado.

    Decisões arquiteturais:
        - O arquivo de defaults é obrigatório
        - O tuner não inventa settings para um nó sem defaults
    """


class UnsupportedSettingsFormatError(SettingsError):
    """
    Formato de arquivo de settings não suportado.

    Formatos suportados:
        - YAML (.yaml, .yml)
        - JSON (.json)

    Extensões desconhecidas são rejeitadas sem inspecionar o conteúdo.
    """


class InvalidSettingsRootTypeError(SettingsError):
    """
    Conteúdo raiz dos settings não é um mapeamento.

    Listas ou escalares na raiz são inválidos; nenhuma normalização
    é tentada.
    """


class SettingsTypeConflictError(SettingsError):
    """
    Conflito de tipos durante o deep-merge de settings.

    Exemplo:
        - defaults: {"backup": {"hour": 4}}
        - local:    {"backup": 4}

    Nenhum merge parcial é produzido em caso de conflito.
    """


class InvalidSettingValueError(SettingsError):
    """
    Valor de settings que não pode ser convertido para o tipo do tunable.

    Exemplo: `storage_port: "sete mil"`. Não confundir com os tamanhos
    de cache, que são strings opcionais validadas pela política de cache.
    """


class UnknownSettingError(SettingsError):
    """
    Chave de settings que nenhum tunable declara.

    Existe para que um typo em `local.yaml` (ex.: `key_cache_size_mb`)
    não seja ignorado silenciosamente.
    """
