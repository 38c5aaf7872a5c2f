"""
ordered_ini - Fichiers INI à sections homonymes, ordre d'origine préservé.

Modules disponibles:
- dotconf: Chargement, accès typé et réécriture de fichiers INI (IniFile)
- config: Réglages TOML/JSON validés par Pydantic (IniSettings)
- logging: Gestion des logs (Logger, FileLogger)
- errors: Exceptions et handlers d'erreurs
- cli: Commande `ordered-ini`
"""

__version__ = "1.0.0"

from ordered_ini.logging import Logger, FileLogger
from ordered_ini.config import (
    ConfigLoader,
    FileConfigLoader,
    IniSettings,
    load_settings,
)
from ordered_ini.errors import (
    ApplicationError,
    IniError,
    SourceUnavailableError,
    DestinationUnavailableError,
    InvalidEntryError,
    IniParseError,
    EmptyFieldError,
    OrphanKeyError,
    DuplicateKeyError,
)
from ordered_ini.dotconf import (
    IniFile,
    SectionHandle,
    SectionStore,
    tokenize_line,
    load_lines,
    loads,
    serialize,
    dumps,
)

__all__ = [
    # Logging
    "Logger",
    "FileLogger",
    # Config
    "ConfigLoader",
    "FileConfigLoader",
    "IniSettings",
    "load_settings",
    # Errors
    "ApplicationError",
    "IniError",
    "SourceUnavailableError",
    "DestinationUnavailableError",
    "InvalidEntryError",
    "IniParseError",
    "EmptyFieldError",
    "OrphanKeyError",
    "DuplicateKeyError",
    # DotConf
    "IniFile",
    "SectionHandle",
    "SectionStore",
    "tokenize_line",
    "load_lines",
    "loads",
    "serialize",
    "dumps",
]
