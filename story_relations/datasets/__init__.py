"""Modalità, tabelle di relazioni e registro dei dataset."""

from .modes import DatasetMode
from .relation_table import RelationTable
from .sources import DataSource, InMemorySource, JsonFileSource, PackageResourceSource
from .registry import (
    DatasetRegistry,
    build_registry,
    default_sources,
    get_datasets,
    reset_datasets,
)

__all__ = [
    "DatasetMode",
    "RelationTable",
    "DataSource",
    "JsonFileSource",
    "PackageResourceSource",
    "InMemorySource",
    "DatasetRegistry",
    "build_registry",
    "default_sources",
    "get_datasets",
    "reset_datasets",
]
