"""Eccezioni del pacchetto."""


class StoryRelationsError(Exception):
    """Errore base."""


class InvalidDatasetModeError(StoryRelationsError, ValueError):
    """Modalità dataset non riconosciuta."""

    def __init__(self, value):
        self.value = value
        super().__init__(f"Modalità dataset non valida: {value!r}")


class DataSourceError(StoryRelationsError):
    """Una sorgente dati non può essere letta."""

    def __init__(self, source: str, reason: str):
        self.source = source
        self.reason = reason
        super().__init__(f"Errore caricamento {source}: {reason}")


class RelationTableError(StoryRelationsError):
    """Documento con struttura diversa da entità -> lista di entità."""


class RegistryError(StoryRelationsError):
    """Le sorgenti non coprono esattamente le modalità previste."""


class UnknownEntityError(StoryRelationsError, KeyError):
    """Entità non presente nella tabella."""

    def __init__(self, entity: str):
        self.entity = entity
        super().__init__(entity)

    def __str__(self):
        return f"Entità non trovata: {self.entity!r}"


class ConfigError(StoryRelationsError):
    """File di configurazione con struttura o valori non validi."""
