"""Registro dei dataset: modalità -> tabella di relazioni."""

from collections.abc import Mapping
from types import MappingProxyType
from typing import Dict, Iterator, List, Optional, Union
import logging

from ..config.settings import Config, DataConfig
from ..exceptions import RegistryError
from .modes import DatasetMode
from .relation_table import RelationTable
from .sources import DataSource, JsonFileSource, PackageResourceSource

logger = logging.getLogger(__name__)


class DatasetRegistry(Mapping):
    """
    Mapping immutabile da DatasetMode a RelationTable.

    Ogni modalità ha esattamente una tabella, fissata alla costruzione.
    Le chiavi possono essere passate anche come stringa ('personaggi').
    """

    def __init__(self, tables: Dict[DatasetMode, RelationTable],
                 sources: Optional[Dict[DatasetMode, str]] = None):
        missing = [m.value for m in DatasetMode if m not in tables]
        extra = [str(m) for m in tables if not isinstance(m, DatasetMode)]
        if missing or extra:
            raise RegistryError(
                f"Il registro richiede esattamente {DatasetMode.values()}; "
                f"mancanti: {missing}, non valide: {extra}"
            )

        ordered = {mode: tables[mode] for mode in DatasetMode}
        self._tables = MappingProxyType(ordered)
        self._sources = MappingProxyType(dict(sources or {}))

    @classmethod
    def from_sources(cls, sources: Dict[Union[str, DatasetMode], DataSource]) -> "DatasetRegistry":
        """
        Carica una tabella per ogni modalità.

        Args:
            sources: Mapping modalità -> sorgente dati; deve coprire tutte le modalità

        Raises:
            InvalidDatasetModeError: chiave non appartenente all'enumerazione
            RegistryError: modalità mancanti
            DataSourceError / RelationTableError: sorgente non valida
        """
        by_mode = {}
        for key, source in sources.items():
            by_mode[DatasetMode.parse(key)] = source

        missing = [m.value for m in DatasetMode if m not in by_mode]
        if missing:
            raise RegistryError(f"Sorgenti mancanti per: {', '.join(missing)}")

        tables = {}
        for mode in DatasetMode:
            source = by_mode[mode]
            tables[mode] = RelationTable.from_dict(source.load(), name=source.description)
            logger.info(f"Dataset {mode.value}: {len(tables[mode])} entità da {source.description}")

        return cls(tables, sources={m: s.description for m, s in by_mode.items()})

    def __getitem__(self, mode: Union[str, DatasetMode]) -> RelationTable:
        return self._tables[DatasetMode.parse(mode)]

    def get(self, mode: Union[str, DatasetMode]) -> RelationTable:
        """
        Ritorna la tabella della modalità.

        Non accetta un default: una modalità sconosciuta solleva sempre
        InvalidDatasetModeError.
        """
        return self[mode]

    def __iter__(self) -> Iterator[DatasetMode]:
        return iter(self._tables)

    def __len__(self) -> int:
        return len(self._tables)

    def __contains__(self, mode) -> bool:
        try:
            return DatasetMode.parse(mode) in self._tables
        except ValueError:
            return False

    def __repr__(self) -> str:
        sizes = ", ".join(f"{m.value}={len(t)}" for m, t in self._tables.items())
        return f"<DatasetRegistry {sizes}>"

    @property
    def modes(self) -> List[DatasetMode]:
        """Modalità in ordine di enumerazione."""
        return list(self._tables)

    def source_of(self, mode: Union[str, DatasetMode]) -> Optional[str]:
        """Descrizione della sorgente da cui è stata caricata la modalità."""
        return self._sources.get(DatasetMode.parse(mode))


def default_sources(data_config: Optional[DataConfig] = None) -> Dict[DatasetMode, DataSource]:
    """Sorgenti per ogni modalità secondo la configurazione."""
    data_config = data_config or DataConfig()
    sources = {}
    for mode in DatasetMode:
        path = data_config.path_for(mode)
        if path is None:
            sources[mode] = PackageResourceSource(data_config.filename_for(mode))
        else:
            sources[mode] = JsonFileSource(path)
    return sources


def build_registry(config: Optional[Config] = None) -> DatasetRegistry:
    """Costruisce il registro dalla configurazione (default: dati del pacchetto)."""
    config = config or Config()
    return DatasetRegistry.from_sources(default_sources(config.data))


_DATASETS: Optional[DatasetRegistry] = None


def get_datasets() -> DatasetRegistry:
    """Registro condiviso costruito dai dati del pacchetto al primo utilizzo."""
    global _DATASETS
    if _DATASETS is None:
        _DATASETS = build_registry()
    return _DATASETS


def reset_datasets():
    """Scarta il registro condiviso; il prossimo get_datasets lo ricarica."""
    global _DATASETS
    _DATASETS = None
