"""Statistiche e report sulle tabelle di relazioni."""

from dataclasses import dataclass, field
from typing import Dict, List, Tuple

import pandas as pd

from .datasets.registry import DatasetRegistry
from .datasets.relation_table import RelationTable


@dataclass
class TableStatistics:
    """Metriche descrittive di una tabella."""
    entities: int
    relations: int
    avg_degree: float
    max_degree: int
    empty_entities: List[str] = field(default_factory=list)
    dangling_targets: List[str] = field(default_factory=list)
    top_entities: List[Tuple[str, int]] = field(default_factory=list)

    def to_dict(self) -> Dict:
        return {
            'entities': self.entities,
            'relations': self.relations,
            'avg_degree': self.avg_degree,
            'max_degree': self.max_degree,
            'empty_entities': list(self.empty_entities),
            'dangling_targets': list(self.dangling_targets),
            'top_entities': [list(t) for t in self.top_entities],
        }


def to_edge_list(table: RelationTable) -> pd.DataFrame:
    """
    Converte la tabella in lista di archi.

    Colonne: source, target, position (indice nella lista della sorgente).
    Le entità con lista vuota non producono righe.
    """
    rows = [
        {'source': entity, 'target': target, 'position': i}
        for entity, targets in table.items()
        for i, target in enumerate(targets)
    ]
    return pd.DataFrame(rows, columns=['source', 'target', 'position'])


def degree_series(table: RelationTable) -> pd.Series:
    """Numero di entità collegate per ogni chiave, in ordine di caricamento."""
    return pd.Series(
        {entity: len(targets) for entity, targets in table.items()},
        dtype='int64',
        name='degree',
    )


def compute_statistics(table: RelationTable, top_n: int = 5) -> TableStatistics:
    """Calcola le metriche di una tabella."""
    degrees = degree_series(table)

    if degrees.empty:
        return TableStatistics(entities=0, relations=0, avg_degree=0.0, max_degree=0)

    edges = to_edge_list(table)
    keys = set(table.entities)
    # target citati ma assenti come chiavi, in ordine di prima comparsa
    dangling = [t for t in edges['target'].drop_duplicates() if t not in keys]

    top = degrees.sort_values(ascending=False, kind='stable').head(top_n)

    return TableStatistics(
        entities=len(degrees),
        relations=int(degrees.sum()),
        avg_degree=float(degrees.mean()),
        max_degree=int(degrees.max()),
        empty_entities=list(degrees[degrees == 0].index),
        dangling_targets=dangling,
        top_entities=[(str(name), int(value)) for name, value in top.items()],
    )


def compare_tables(a: RelationTable, b: RelationTable) -> Dict[str, List[str]]:
    """Differenze di chiavi e liste tra due tabelle."""
    keys_a, keys_b = a.entities, b.entities
    set_a, set_b = set(keys_a), set(keys_b)
    return {
        'only_in_first': [k for k in keys_a if k not in set_b],
        'only_in_second': [k for k in keys_b if k not in set_a],
        'changed': [k for k in keys_a if k in set_b and a[k] != b[k]],
    }


def statistics_frame(registry: DatasetRegistry) -> pd.DataFrame:
    """Una riga di statistiche per ogni modalità del registro."""
    rows = []
    for mode in registry.modes:
        stats = compute_statistics(registry[mode])
        rows.append({
            'mode': mode.value,
            'entities': stats.entities,
            'relations': stats.relations,
            'avg_degree': stats.avg_degree,
            'max_degree': stats.max_degree,
            'empty': len(stats.empty_entities),
            'dangling': len(stats.dangling_targets),
        })
    return pd.DataFrame(rows).set_index('mode')


def generate_summary(registry: DatasetRegistry) -> str:
    """Genera un riepilogo testuale di tutte le modalità."""
    lines = [
        "╔══════════════════════════════════════════════════════════════╗",
        "║                    RIEPILOGO DATASET                         ║",
        "╠══════════════════════════════════════════════════════════════╣",
    ]
    for mode in registry.modes:
        s = compute_statistics(registry[mode])
        lines.append(f"║  {mode.value.upper()}")
        lines.append("║  ───────────────────────────────────────────────────────────")
        lines.append(f"║  Sorgente:             {registry.source_of(mode) or 'N/A'}")
        lines.append(f"║  Entità:               {s.entities}")
        lines.append(f"║  Relazioni:            {s.relations}")
        lines.append(f"║  Grado medio:          {s.avg_degree:.2f}")
        lines.append(f"║  Grado massimo:        {s.max_degree}")
        lines.append(f"║  Liste vuote:          {len(s.empty_entities)}")
        lines.append(f"║  Target non censiti:   {len(s.dangling_targets)}")
        lines.append("║  ")
    lines.append("╚══════════════════════════════════════════════════════════════╝")
    return "\n".join(lines) + "\n"
