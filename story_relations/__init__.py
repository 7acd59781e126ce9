"""Registro dei dataset di relazioni tra personaggi e luoghi."""

from .datasets import (
    DatasetMode,
    DatasetRegistry,
    RelationTable,
    build_registry,
    get_datasets,
)

__version__ = "0.1.0"

__all__ = [
    "DatasetMode",
    "DatasetRegistry",
    "RelationTable",
    "build_registry",
    "get_datasets",
]
