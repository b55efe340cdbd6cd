# src/cassandra_tuner/api.py
"""
Pontos de entrada do tuner, invocados pelo orquestrador de bootstrap.

    tune_configuration(document_path, host_address, seed_provider_class_name, source=...)
        load → tune → write → propriedades de arquivamento

    set_auto_bootstrap(document_path, enabled)
        ciclo independente sobre o mesmo documento

Ambos executam um único ciclo exclusivo de load-mutate-write e assumem
ser o único escritor do arquivo durante a chamada: o orquestrador
garante que o processo do banco ainda não foi iniciado.

Falhas:
    - qualquer `TunerError` aborta o passo de bootstrap
    - uma falha estrutural acontece antes de qualquer escrita, deixando
      o documento em disco intacto
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Optional, Tuple, Union

from .core.archive.commitlog import write_commitlog_archive_properties
from .core.bootstrap import set_auto_bootstrap
from .core.context import TuningContext
from .core.document.io import load_document, write_document
from .core.engine.engine import run_tuning
from .core.identity import NodeIdentity

API_RULE_ID = "api"


@dataclass(frozen=True)
class TuningReport:
    """Resumo auditável de uma invocação de `tune_configuration`."""

    document_path: str
    hash_before: str
    hash_after: str
    rule_ids: Tuple[str, ...]
    archive_path: Optional[str] = None

    @property
    def changed(self) -> bool:
        return self.hash_before != self.hash_after


def tune_configuration(
    document_path: Union[str, Path],
    host_address: str,
    seed_provider_class_name: str,
    *,
    source: Any,
    resolve_snitch: Optional[Callable[[str], str]] = None,
    ctx: Optional[TuningContext] = None,
) -> TuningReport:
    """
    Produz o cassandra.yaml final do nó e as propriedades de arquivamento.

    Args:
        document_path: caminho do cassandra.yaml existente.
        host_address: endereço do nó (listen/rpc).
        seed_provider_class_name: classe de descoberta de seeds.
        source: fonte de configuração (ex.: `TunerSettings`).
        resolve_snitch: especialização opcional do snitch.
        ctx: contexto de log; criado quando omitido.

    Raises:
        InvalidIdentityError: host ou seed provider vazio.
        DocumentParseError: documento ausente ou malformado.
        DocumentStructureError: sub-estrutura obrigatória ausente.
        TunerIOError: falha de escrita do documento ou das propriedades.
    """
    identity = NodeIdentity(
        host_address=host_address,
        seed_provider_class_name=seed_provider_class_name,
    )
    if ctx is None:
        ctx = TuningContext.create(source=source, identity=identity)
    ctx.meta.setdefault("document_path", str(document_path))

    doc = load_document(document_path)
    doc, run = run_tuning(
        doc,
        source=source,
        identity=identity,
        ctx=ctx,
        resolve_snitch=resolve_snitch,
    )

    write_document(document_path, doc)
    ctx.log(
        rule_id=API_RULE_ID,
        level="INFO",
        message=f"document written to {document_path}",
        document_path=str(document_path),
        document_hash=run.hash_after,
    )

    archive_path = write_commitlog_archive_properties(source, ctx)

    return TuningReport(
        document_path=str(document_path),
        hash_before=run.hash_before,
        hash_after=run.hash_after,
        rule_ids=tuple(run.rule_ids),
        archive_path=str(archive_path) if archive_path is not None else None,
    )


__all__ = ["TuningReport", "set_auto_bootstrap", "tune_configuration"]
