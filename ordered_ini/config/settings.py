"""Réglages de ordered_ini, validés par Pydantic.

Les réglages peuvent provenir d'un fichier TOML ou JSON :

    encoding = "utf-8"
    log_level = "DEBUG"
    log_file = "/var/log/ordered_ini.log"
"""

import codecs
from pathlib import Path
from typing import Optional, Union

from pydantic import BaseModel, field_validator

from ordered_ini.config.loader import ConfigLoader, FileConfigLoader

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class IniSettings(BaseModel):
    """Réglages de lecture/écriture et de journalisation.

    Attributes:
        encoding: Encodage des fichiers INI lus et écrits.
        log_level: Niveau de log (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        log_format: Format des lignes de log.
        log_file: Fichier de log optionnel.
        console_output: Dupliquer les logs sur la console.
    """

    encoding: str = "utf-8"
    log_level: str = "INFO"
    log_format: str = "%(asctime)s - %(levelname)s - %(message)s"
    log_file: Optional[str] = None
    console_output: bool = False

    model_config = {"extra": "forbid"}

    @field_validator("log_level")
    @classmethod
    def known_level(cls, v: str) -> str:
        level = v.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(
                f"Niveau de log inconnu: {v!r}. "
                f"Valeurs autorisées : {list(_LOG_LEVELS)}"
            )
        return level

    @field_validator("encoding")
    @classmethod
    def known_encoding(cls, v: str) -> str:
        try:
            codecs.lookup(v)
        except LookupError:
            raise ValueError(f"Encodage inconnu: {v!r}")
        return v


def load_settings(
    config_path: Union[str, Path, None] = None,
    config_loader: ConfigLoader | None = None,
) -> IniSettings:
    """Charge les réglages depuis un fichier, ou retourne les défauts.

    Args:
        config_path: Chemin du fichier TOML/JSON. Si None, réglages
            par défaut.
        config_loader: Chargeur injectable. Si None, FileConfigLoader.

    Returns:
        Instance de IniSettings.

    Raises:
        FileConfigurationError: Si le fichier est absent ou invalide.
    """
    if config_path is None:
        return IniSettings()
    loader = config_loader or FileConfigLoader()
    return loader.load(config_path, schema=IniSettings)
