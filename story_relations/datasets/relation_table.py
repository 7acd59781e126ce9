"""Tabella di relazioni: entità -> entità collegate."""

from collections.abc import Mapping
from typing import Dict, Iterator, List, Optional, Sequence, Tuple

from ..exceptions import RelationTableError, UnknownEntityError


class RelationTable(Mapping):
    """
    Mapping in sola lettura da nome entità a sequenza ordinata di nomi.

    L'ordine delle liste è quello del documento sorgente. Il significato
    delle relazioni dipende dalla sorgente dati e non viene interpretato qui.
    """

    __slots__ = ("_relations", "name")

    def __init__(self, relations: Dict[str, Tuple[str, ...]], name: Optional[str] = None):
        self._relations = relations
        self.name = name

    @classmethod
    def from_dict(cls, data, name: Optional[str] = None) -> "RelationTable":
        """
        Costruisce la tabella validando la struttura.

        Args:
            data: Mapping di stringhe verso liste di stringhe
            name: Nome descrittivo (es. la sorgente)

        Raises:
            RelationTableError: se chiavi o valori non sono stringhe / liste di stringhe
        """
        label = name or "tabella"
        if not isinstance(data, Mapping):
            raise RelationTableError(
                f"{label}: atteso un oggetto, trovato {type(data).__name__}"
            )

        relations = {}
        for key, values in data.items():
            if not isinstance(key, str):
                raise RelationTableError(f"{label}: chiave non stringa {key!r}")
            # una stringa è una sequenza, ma non una lista di entità
            if isinstance(values, (str, bytes)) or not isinstance(values, Sequence):
                raise RelationTableError(
                    f"{label}: valore di {key!r} deve essere una lista, "
                    f"trovato {type(values).__name__}"
                )
            for item in values:
                if not isinstance(item, str):
                    raise RelationTableError(
                        f"{label}: elemento non stringa {item!r} in {key!r}"
                    )
            relations[key] = tuple(values)

        return cls(relations, name=name)

    def __getitem__(self, entity: str) -> Tuple[str, ...]:
        try:
            return self._relations[entity]
        except KeyError:
            raise UnknownEntityError(entity) from None

    def __iter__(self) -> Iterator[str]:
        return iter(self._relations)

    def __len__(self) -> int:
        return len(self._relations)

    def __contains__(self, entity) -> bool:
        return entity in self._relations

    def __eq__(self, other) -> bool:
        if isinstance(other, RelationTable):
            return self._relations == other._relations
        if isinstance(other, Mapping):
            if self._relations.keys() != other.keys():
                return False
            return all(
                not isinstance(other[k], (str, bytes))
                and isinstance(other[k], Sequence)
                and tuple(other[k]) == v
                for k, v in self._relations.items()
            )
        return NotImplemented

    __hash__ = None

    def __repr__(self) -> str:
        label = f" {self.name!r}" if self.name else ""
        return f"<RelationTable{label}: {len(self)} entità>"

    @property
    def entities(self) -> List[str]:
        """Nomi delle entità (chiavi) in ordine di caricamento."""
        return list(self._relations)

    def related(self, entity: str) -> List[str]:
        """Entità collegate a `entity`, nell'ordine della sorgente."""
        return list(self[entity])

    def relation_count(self) -> int:
        """Numero totale di coppie entità -> collegata."""
        return sum(len(v) for v in self._relations.values())

    def to_dict(self) -> Dict[str, List[str]]:
        """Copia modificabile come dict di liste."""
        return {k: list(v) for k, v in self._relations.items()}
