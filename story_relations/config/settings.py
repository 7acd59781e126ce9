"""Configurazioni globali del sistema."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Optional, Union

import yaml

from ..datasets.modes import DatasetMode
from ..exceptions import ConfigError

DEFAULT_FILES = {
    DatasetMode.ALL.value: "relazioni.json",
    DatasetMode.PERSONAGGI.value: "protagonisti_relazioni.json",
    DatasetMode.LUOGHI.value: "protagonisti_luoghi_relazioni.json",
}


@dataclass
class DataConfig:
    """Configurazione sorgenti dati."""

    data_dir: Optional[Path] = None  # None = JSON distribuiti col pacchetto
    files: Dict[str, str] = field(default_factory=lambda: dict(DEFAULT_FILES))

    def __post_init__(self):
        if self.data_dir is not None:
            if not isinstance(self.data_dir, (str, Path)):
                raise ConfigError(
                    f"data.data_dir deve essere un percorso, trovato {type(self.data_dir).__name__}"
                )
            self.data_dir = Path(self.data_dir)

        if not isinstance(self.files, Mapping):
            raise ConfigError(
                f"data.files deve essere un oggetto modalità -> file, trovato {type(self.files).__name__}"
            )
        # valida le chiavi e completa le modalità mancanti con i default
        files = dict(DEFAULT_FILES)
        for mode, filename in self.files.items():
            if not isinstance(filename, str) or not filename:
                raise ConfigError(f"data.files.{mode}: atteso un nome file, trovato {filename!r}")
            files[DatasetMode.parse(mode).value] = filename
        self.files = files

    def filename_for(self, mode: Union[str, DatasetMode]) -> str:
        """Nome file della modalità."""
        return self.files[DatasetMode.parse(mode).value]

    def path_for(self, mode: Union[str, DatasetMode]) -> Optional[Path]:
        """Percorso del file della modalità, None se si usano i dati del pacchetto."""
        if self.data_dir is None:
            return None
        return self.data_dir / self.filename_for(mode)


@dataclass
class DisplayConfig:
    """Configurazione output CLI."""

    max_rows: int = 50
    max_related: int = 10

    def __post_init__(self):
        for name in ("max_rows", "max_related"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or value < 1:
                raise ConfigError(f"display.{name} deve essere un intero >= 1, trovato {value!r}")


@dataclass
class LoggingConfig:
    """Configurazione logging."""

    level: str = "INFO"

    def __post_init__(self):
        if not isinstance(self.level, str):
            raise ConfigError(f"logging.level deve essere una stringa, trovato {self.level!r}")


@dataclass
class Config:
    """Configurazione principale."""

    data: DataConfig = field(default_factory=DataConfig)
    display: DisplayConfig = field(default_factory=DisplayConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def load(cls, path: str = "config/config.yaml") -> "Config":
        """
        Carica configurazione da file YAML.

        Raises:
            ConfigError: YAML non valido, sezioni non oggetto o chiavi sconosciute
            InvalidDatasetModeError: modalità sconosciuta in data.files
        """
        config_path = Path(path)

        if config_path.exists():
            try:
                with open(config_path) as f:
                    data = yaml.safe_load(f) or {}
            except yaml.YAMLError as e:
                raise ConfigError(f"{config_path}: YAML non valido: {e}") from e

            if not isinstance(data, dict):
                raise ConfigError(f"{config_path}: atteso un oggetto YAML")

            sections = {}
            for name in ("data", "display", "logging"):
                section = data.get(name) or {}
                if not isinstance(section, dict):
                    raise ConfigError(f"{config_path}: la sezione '{name}' deve essere un oggetto")
                sections[name] = section

            try:
                return cls(
                    data=DataConfig(**sections["data"]),
                    display=DisplayConfig(**sections["display"]),
                    logging=LoggingConfig(**sections["logging"]),
                )
            except TypeError as e:
                # chiavi non previste dai dataclass
                raise ConfigError(f"{config_path}: {e}") from e

        return cls()

    def save(self, path: str = "config/config.yaml"):
        """Salva configurazione su file YAML."""
        config_path = Path(path)
        config_path.parent.mkdir(parents=True, exist_ok=True)

        data = {
            "data": {
                "data_dir": str(self.data.data_dir) if self.data.data_dir else None,
                "files": dict(self.data.files),
            },
            "display": {
                "max_rows": self.display.max_rows,
                "max_related": self.display.max_related,
            },
            "logging": {
                "level": self.logging.level,
            },
        }

        with open(config_path, "w") as f:
            yaml.dump(data, f, default_flow_style=False, sort_keys=False, allow_unicode=True)
