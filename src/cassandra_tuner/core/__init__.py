# src/cassandra_tuner/core/__init__.py
"""
Core do cassandra-tuner.

Este pacote reúne as responsabilidades essenciais do tuner, sem
depender das regras de domínio concretas:

    - core.settings  → fonte de configuração (defaults + local, deep-merge)
    - core.document  → load/write determinísticos do cassandra.yaml
    - core.engine    → aplicação ordenada e auditável de regras
    - core.archive   → propriedades de arquivamento de commit log
    - core.bootstrap → updater independente de auto_bootstrap
    - core.context   → sink de log por invocação
    - core.errors    → taxonomia de falhas fatais

Princípios fundamentais:
    - Nenhum estado global entre invocações
    - Falhas são propagadas, nunca engolidas nem reprocessadas
    - O documento em disco só muda depois que todas as regras passaram
"""
