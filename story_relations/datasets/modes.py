"""Modalità dei dataset."""

from enum import Enum
from typing import List, Union

from ..exceptions import InvalidDatasetModeError


class DatasetMode(str, Enum):
    """Vista relazionale da esporre."""

    ALL = "all"
    PERSONAGGI = "personaggi"
    LUOGHI = "luoghi"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, value: Union[str, "DatasetMode"]) -> "DatasetMode":
        """
        Converte un valore libero in DatasetMode.

        Args:
            value: Istanza di DatasetMode o la sua stringa ('all', 'personaggi', 'luoghi')

        Raises:
            InvalidDatasetModeError: se il valore non appartiene all'enumerazione
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value)
            except ValueError:
                pass
        raise InvalidDatasetModeError(value)

    @classmethod
    def values(cls) -> List[str]:
        """Ritorna i valori stringa in ordine di dichiarazione."""
        return [mode.value for mode in cls]
