# src/cassandra_tuner/core/context.py
"""
Contexto de execução de uma invocação do tuner.

Este módulo define o `TuningContext`, a estrutura canônica passada a
todas as regras de tuning, ao writer de propriedades de arquivamento e
ao updater de auto_bootstrap.

O TuningContext atua como o único meio permitido de:
    - registro de logs estruturados (sink injetado, sem logger global)
    - coleta de warnings não fatais associados a regras
    - acesso à fonte de configuração e à identidade do nó

Princípios fundamentais:
    - Isolamento por invocação (cada ciclo load → write tem seu contexto)
    - Ausência de estado global compartilhado
    - Estrutura simples e testável

Invariantes:
    - Logs sempre incluem `run_id` e `rule_id`
    - Warnings são agrupados por `rule_id`
    - Eventos são apenas anexados, nunca reescritos

Limites explícitos:
    - Não executa regras
    - Não persiste eventos
    - Não decide políticas de merge

Este módulo existe para tornar o tuner auditável sem efeitos
colaterais fora da invocação.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional
from uuid import uuid4

from .identity import NodeIdentity


@dataclass
class TuningContext:
    """
    Contexto de execução de uma invocação do tuner.

    Campos:
        - run_id: identificador único da invocação
        - created_at: timestamp UTC de criação
        - source: fonte de configuração (ConfigurationSource); opcional para
          o updater de auto_bootstrap, que não a consulta
        - identity: identidade do nó (apenas durante `tune`)
        - meta: metadados livres (ex.: document_path)
        - events: log estruturado de eventos
        - warnings: warnings por rule_id
    """

    run_id: str
    created_at: datetime
    source: Any = None
    identity: Optional[NodeIdentity] = None
    meta: Dict[str, Any] = field(default_factory=dict)

    events: List[Dict[str, Any]] = field(default_factory=list, init=False)
    warnings: Dict[str, List[str]] = field(default_factory=dict, init=False)

    @classmethod
    def create(cls, *, source: Any = None, identity: Optional[NodeIdentity] = None, **meta: Any) -> "TuningContext":
        return cls(
            run_id=str(uuid4()),
            created_at=datetime.now(timezone.utc),
            source=source,
            identity=identity,
            meta=dict(meta),
        )

    # -----------------------------
    # Logging & warnings
    # -----------------------------
    def log(self, *, rule_id: str, level: str, message: str, **extra: Any) -> None:
        event = {
            "run_id": self.run_id,
            "rule_id": rule_id,
            "level": level,
            "message": message,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }
        event.update(extra)
        self.events.append(event)

    def add_warning(self, *, rule_id: str, message: str) -> None:
        if rule_id not in self.warnings:
            self.warnings[rule_id] = []
        self.warnings[rule_id].append(message)
        self.log(rule_id=rule_id, level="WARNING", message=message)

    def events_for(self, rule_id: str) -> List[Dict[str, Any]]:
        return [e for e in self.events if e.get("rule_id") == rule_id]
