# src/cassandra_tuner/core/archive/__init__.py
"""Persistência das propriedades de arquivamento de commit log."""

from .commitlog import (
    ArchiveProperties,
    commitlog_properties_path,
    render_properties,
    write_commitlog_archive_properties,
)

__all__ = [
    "ArchiveProperties",
    "commitlog_properties_path",
    "render_properties",
    "write_commitlog_archive_properties",
]
