# src/cassandra_tuner/core/settings/__init__.py
"""
Camada de settings do tuner.

Este pacote contém a fonte de configuração consumida pelas regras de
tuning e os utilitários que a produzem a partir de arquivos
declarativos do operador.

Responsabilidades do pacote:
    - Carregamento de arquivos de settings (defaults + overrides locais)
    - Resolução via deep-merge determinístico (null = ausência explícita)
    - Materialização tipada em `TunerSettings`

Princípios fundamentais:
    - Settings não contêm lógica de merge do cassandra.yaml
    - A mesma entrada sempre produz os mesmos settings
    - Ausência de um tunable opcional é explícita (`None`)

Limites explícitos:
    - Não lê nem escreve o documento do nó
    - Não descobre hostname, rack ou seeds
"""

from .loader import load_settings, load_settings_dict
from .source import ConfigurationSource, TunerSettings

__all__ = ["ConfigurationSource", "TunerSettings", "load_settings", "load_settings_dict"]
