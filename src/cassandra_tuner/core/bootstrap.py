# src/cassandra_tuner/core/bootstrap.py
"""
Updater de auto_bootstrap.

Ciclo independente de load → mutate → write sobre o mesmo documento do
tuner, usado fora do fluxo principal: por exemplo, depois que um
restore termina, para reabilitar o bootstrap dos próximos nós.

Invariantes:
    - Apenas `auto_bootstrap` é alterado; todas as outras chaves
      mantêm valor e posição
    - Mesmos contratos de load/write de `core.document.io`
    - O novo valor é registrado no log antes da escrita; uma escrita que
      falha ainda deixa registro do valor tentado
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Union

from .context import TuningContext
from .document.io import load_document, write_document

UPDATER_RULE_ID = "bootstrap.update"


def set_auto_bootstrap(
    document_path: Union[str, Path],
    enabled: bool,
    *,
    ctx: Optional[TuningContext] = None,
) -> None:
    """
    Define `auto_bootstrap` no documento e o reescreve.

    Raises:
        DocumentParseError: documento ausente ou malformado.
        TunerIOError: falha de escrita.
    """
    if ctx is None:
        ctx = TuningContext.create(document_path=str(document_path))

    doc = load_document(document_path)
    doc["auto_bootstrap"] = bool(enabled)
    ctx.log(
        rule_id=UPDATER_RULE_ID,
        level="INFO",
        message=f"auto_bootstrap set to {bool(enabled)}",
        event="auto_bootstrap_set",
        document_path=str(document_path),
        auto_bootstrap=bool(enabled),
    )

    text = write_document(document_path, doc)
    ctx.log(
        rule_id=UPDATER_RULE_ID,
        level="INFO",
        message=f"document written to {document_path}",
        event="document_written",
        document_path=str(document_path),
        document=text,
    )
