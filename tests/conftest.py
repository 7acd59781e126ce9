"""Fixture condivise per i test."""

import json

import pytest

from story_relations.datasets import reset_datasets

PROTAGONISTI = {
    "Renzo": ["Lucia", "Agnese", "Don Abbondio"],
    "Lucia": ["Renzo", "Agnese"],
    "Don Abbondio": ["Perpetua", "Don Rodrigo"],
    "Perpetua": [],
}

LUOGHI = {
    "Renzo": ["Lecco", "Milano"],
    "Lucia": ["Lecco", "Monza"],
}

TUTTO = {
    "Renzo": ["Lucia", "Agnese", "Don Abbondio", "Lecco", "Milano"],
    "Lucia": ["Renzo", "Agnese", "Lecco", "Monza"],
    "Lecco": ["Renzo", "Lucia"],
}


@pytest.fixture
def fixture_data():
    """Contenuto noto dei tre documenti, per modalità."""
    return {"all": TUTTO, "personaggi": PROTAGONISTI, "luoghi": LUOGHI}


@pytest.fixture
def data_dir(tmp_path, fixture_data):
    """Directory con i tre JSON scritti con i nomi file di default."""
    files = {
        "all": "relazioni.json",
        "personaggi": "protagonisti_relazioni.json",
        "luoghi": "protagonisti_luoghi_relazioni.json",
    }
    for mode, filename in files.items():
        with open(tmp_path / filename, "w", encoding="utf-8") as f:
            json.dump(fixture_data[mode], f, ensure_ascii=False)
    return tmp_path


@pytest.fixture(autouse=True)
def _reset_shared_registry():
    """Ogni test parte senza registro condiviso."""
    reset_datasets()
    yield
    reset_datasets()
