# src/cassandra_tuner/core/archive/commitlog.py
"""
Writer do arquivo de propriedades de arquivamento de commit log.

Quando a fonte reporta backup de commit log habilitado, este módulo
escreve `<cassandra_home>/conf/commitlog_archiving.properties` com
exatamente quatro chaves, na ordem:

    archive_command
    restore_command
    restore_directories
    restore_point_in_time

Formato:
    - arquivo `.properties` no formato lido pela JVM
    - linha de cabeçalho descritiva + linha com o timestamp da invocação
    - escape de `\\`, `=`, `:`, `#`, `!`, espaço inicial, caracteres de
      controle e não-ASCII (`\\uXXXX`)

Decisões arquiteturais:
    - Conteúdo anterior é sempre sobrescrito (nunca mesclado)
    - Escrita atômica (temporário + rename), como o documento principal
    - Com backup desabilitado, nada é criado nem modificado

Limites explícitos:
    - Não executa os comandos de arquivamento/restore
    - Não valida a existência dos diretórios de restore
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, List, Optional, Tuple

from ..context import TuningContext
from ..document.io import atomic_write_text

ARCHIVE_RULE_ID = "archive.commitlog"
COMMITLOG_PROPERTIES_PATH = Path("conf") / "commitlog_archiving.properties"
PROPERTIES_HEADER = "cassandra commit log archive props, as written by cassandra-tuner"


@dataclass(frozen=True)
class ArchiveProperties:
    """Propriedades de arquivamento/restore de commit log."""

    archive_command: str
    restore_command: str
    restore_directories: str
    restore_point_in_time: str

    @classmethod
    def from_source(cls, source: Any) -> "ArchiveProperties":
        return cls(
            archive_command=source.commitlog_archive_command or "",
            restore_command=source.commitlog_restore_command or "",
            restore_directories=source.commitlog_restore_directories or "",
            restore_point_in_time=source.commitlog_restore_point_in_time or "",
        )

    def items(self) -> List[Tuple[str, str]]:
        return [
            ("archive_command", self.archive_command),
            ("restore_command", self.restore_command),
            ("restore_directories", self.restore_directories),
            ("restore_point_in_time", self.restore_point_in_time),
        ]


def _escape(text: str, *, is_key: bool) -> str:
    out: List[str] = []
    for i, ch in enumerate(text):
        if ch == " ":
            out.append("\\ " if (is_key or i == 0) else " ")
        elif ch == "\\":
            out.append("\\\\")
        elif ch == "\t":
            out.append("\\t")
        elif ch == "\n":
            out.append("\\n")
        elif ch == "\r":
            out.append("\\r")
        elif ch == "\f":
            out.append("\\f")
        elif ch in "=:#!":
            out.append("\\" + ch)
        elif ord(ch) < 0x20 or ord(ch) > 0x7E:
            out.extend(f"\\u{unit:04X}" for unit in _utf16_units(ch))
        else:
            out.append(ch)
    return "".join(out)


def _utf16_units(ch: str) -> List[int]:
    data = ch.encode("utf-16-be")
    return [int.from_bytes(data[i:i + 2], "big") for i in range(0, len(data), 2)]


def render_properties(props: ArchiveProperties, *, comment: str, timestamp: str) -> str:
    """Renderiza as propriedades no formato `.properties`."""
    lines = [f"#{comment}", f"#{timestamp}"]
    for key, value in props.items():
        lines.append(f"{_escape(key, is_key=True)}={_escape(value, is_key=False)}")
    return "\n".join(lines) + "\n"


def commitlog_properties_path(cassandra_home: str) -> Path:
    return Path(cassandra_home) / COMMITLOG_PROPERTIES_PATH


def write_commitlog_archive_properties(source: Any, ctx: TuningContext) -> Optional[Path]:
    """
    Escreve o arquivo de propriedades quando o backup de commit log está habilitado.

    Returns:
        Optional[Path]: caminho escrito, ou `None` quando desabilitado.

    Raises:
        TunerIOError: falha ao abrir/escrever o arquivo alvo.
    """
    if not source.commitlog_backup_enabled:
        ctx.log(rule_id=ARCHIVE_RULE_ID, level="DEBUG", message="commit log backup disabled")
        return None

    props = ArchiveProperties.from_source(source)
    path = commitlog_properties_path(source.cassandra_home)
    text = render_properties(
        props,
        comment=PROPERTIES_HEADER,
        timestamp=ctx.created_at.strftime("%a %b %d %H:%M:%S UTC %Y"),
    )
    atomic_write_text(path, text)

    ctx.log(
        rule_id=ARCHIVE_RULE_ID,
        level="INFO",
        message=f"commit log archive properties written to {path}",
        path=str(path),
        properties=dict(props.items()),
    )
    return path
