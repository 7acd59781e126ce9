"""Sorgenti dati da cui caricare le tabelle di relazioni."""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, List, Tuple, Union
import copy
import json
import logging

from ..exceptions import DataSourceError

logger = logging.getLogger(__name__)

# Directory con i JSON distribuiti insieme al pacchetto
BUNDLED_DATA_DIR = Path(__file__).resolve().parent.parent / "data"


def _reject_duplicate_keys(pairs: List[Tuple[str, Any]]) -> Dict[str, Any]:
    """object_pairs_hook che rifiuta chiavi ripetute nello stesso oggetto."""
    result = {}
    for key, value in pairs:
        if key in result:
            raise ValueError(f"chiave duplicata {key!r}")
        result[key] = value
    return result


class DataSource(ABC):
    """Classe base per tutte le sorgenti dati."""

    @property
    @abstractmethod
    def description(self) -> str:
        """Descrizione leggibile della sorgente."""

    @abstractmethod
    def load(self) -> Dict[str, Any]:
        """Carica il documento grezzo."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.description})"


class JsonFileSource(DataSource):
    """Documento JSON su file system."""

    def __init__(self, path: Union[str, Path], encoding: str = "utf-8"):
        self.path = Path(path)
        self.encoding = encoding

    @property
    def description(self) -> str:
        return str(self.path)

    def load(self) -> Dict[str, Any]:
        """
        Legge e decodifica il file.

        Raises:
            DataSourceError: file mancante, non leggibile, JSON non valido o chiavi duplicate
        """
        try:
            with open(self.path, encoding=self.encoding) as f:
                data = json.load(f, object_pairs_hook=_reject_duplicate_keys)
        except FileNotFoundError:
            raise DataSourceError(self.description, "file non trovato") from None
        except OSError as e:
            raise DataSourceError(self.description, str(e)) from e
        except ValueError as e:
            # json.JSONDecodeError è una sottoclasse di ValueError
            raise DataSourceError(self.description, f"JSON non valido: {e}") from e

        logger.debug(f"Caricato {self.description}: {len(data) if isinstance(data, dict) else '?'} chiavi")
        return data


class PackageResourceSource(JsonFileSource):
    """Uno dei documenti JSON distribuiti con il pacchetto."""

    def __init__(self, filename: str):
        super().__init__(BUNDLED_DATA_DIR / filename)
        self.filename = filename

    @property
    def description(self) -> str:
        return f"package:{self.filename}"


class InMemorySource(DataSource):
    """Dati già in memoria (utile per sostituire le sorgenti nei test)."""

    def __init__(self, data: Dict[str, Any], name: str = "memoria"):
        self._data = data
        self.name = name

    @property
    def description(self) -> str:
        return self.name

    def load(self) -> Dict[str, Any]:
        # copia profonda, le liste restano del chiamante
        return copy.deepcopy(self._data)
