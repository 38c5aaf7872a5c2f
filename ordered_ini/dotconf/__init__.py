"""Module DotConf : fichiers INI à sections homonymes.

Ce module fournit de quoi charger, interroger, modifier et réécrire
des fichiers INI dont une même section peut apparaître plusieurs fois.
L'ordre d'origine des sections et des clés est conservé à l'écriture.

Classes principales:
    - IniFile: Accès typé et persistance d'un fichier INI
    - SectionHandle: Adresse d'une occurrence de section (nom, rang)
    - SectionStore: Stockage ordonné des sections
    - LineSource / LineSink: Interfaces d'entrée/sortie des lignes

Fonctions utilitaires:
    - tokenize_line: Classe une ligne (en-tête, affectation, rien)
    - load_lines / loads: Construisent un SectionStore
    - serialize / dumps: Reconstruisent les lignes du fichier

Example:
    >>> from ordered_ini.dotconf import IniFile, SectionHandle
    >>> ini = IniFile("/etc/app/servers.ini")
    >>> ini.load()
    >>> ini.section_count("server")
    2
    >>> ini.read(SectionHandle("server", 1), "enabled", False)
    True
"""

from ordered_ini.dotconf.base import LineSink, LineSource
from ordered_ini.dotconf.conversion import (
    FALSE_PRINT,
    TRUE_ALIASES,
    TRUE_PRINT,
    ConversionError,
    parse_value,
    render_value,
)
from ordered_ini.dotconf.handle import SectionHandle, as_handle
from ordered_ini.dotconf.ini_file import IniFile
from ordered_ini.dotconf.loader import load_lines, loads
from ordered_ini.dotconf.records import KeyRecord, SectionRecord
from ordered_ini.dotconf.serializer import dumps, serialize
from ordered_ini.dotconf.source import (
    FileLineSink,
    FileLineSource,
    MemoryLineSink,
    MemoryLineSource,
)
from ordered_ini.dotconf.store import SectionStore
from ordered_ini.dotconf.tokenizer import (
    KeyValue,
    SectionHeader,
    split_lines,
    tokenize_line,
)

__all__ = [
    # Modèle
    "SectionHandle",
    "SectionRecord",
    "KeyRecord",
    "SectionStore",
    # Accès
    "IniFile",
    # Entrées/sorties
    "LineSource",
    "LineSink",
    "FileLineSource",
    "FileLineSink",
    "MemoryLineSource",
    "MemoryLineSink",
    # Analyse et sérialisation
    "SectionHeader",
    "KeyValue",
    "tokenize_line",
    "split_lines",
    "load_lines",
    "loads",
    "serialize",
    "dumps",
    # Conversion
    "TRUE_ALIASES",
    "TRUE_PRINT",
    "FALSE_PRINT",
    "ConversionError",
    "parse_value",
    "render_value",
    "as_handle",
]
