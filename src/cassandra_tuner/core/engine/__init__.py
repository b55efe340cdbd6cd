# src/cassandra_tuner/core/engine/__init__.py
"""
Engine de tuning.

Este pacote aplica a política de merge do cassandra.yaml como uma
sequência ordenada de regras sobre o documento carregado.

Componentes principais:
    - rule     → protocolo `TuningRule`
    - types    → `RuleResult` e o acumulador `ChangeSet`
    - registry → ordem e unicidade de regras
    - engine   → execução fail-fast com log estruturado

Princípios fundamentais:
    - A ordem de aplicação é fixa e declarada
    - Nenhuma falha é engolida: o chamador decide o destino do bootstrap
    - O engine não lê nem escreve arquivos

Limites explícitos:
    - Não define regras de domínio (ver `cassandra_tuner.rules`)
"""

from .engine import TuningEngine, TuningRun, run_tuning, tune
from .registry import DuplicateRuleIdError, RuleRegistry
from .rule import TuningRule
from .types import ChangeSet, RuleResult

__all__ = [
    "ChangeSet",
    "DuplicateRuleIdError",
    "RuleRegistry",
    "RuleResult",
    "TuningEngine",
    "TuningRule",
    "TuningRun",
    "run_tuning",
    "tune",
]
