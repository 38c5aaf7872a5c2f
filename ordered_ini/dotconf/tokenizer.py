"""Classification d'une ligne de fichier INI."""

import dataclasses
import io
from typing import List, Optional, Union


@dataclasses.dataclass(frozen=True, slots=True)
class SectionHeader:
    """Un en-tête de section, i.e. [name]."""

    name: str


@dataclasses.dataclass(frozen=True, slots=True)
class KeyValue:
    """Une affectation, i.e. key = value."""

    key: str
    value: str


Token = Union[SectionHeader, KeyValue]


def strip_spaces(text: str) -> str:
    """Retire les espaces (' ' uniquement) en début et fin de texte."""
    return text.strip(" ")


def tokenize_line(line: str) -> Optional[Token]:
    """Analyse une ligne INI.

    Une ligne contenant '[' et ']' est un en-tête : le nom est le texte
    entre le premier '[' et le dernier ']', sans suppression d'espaces.
    Sinon une ligne contenant '=' est une affectation, coupée au premier
    '=' ; clé et valeur sont débarrassées des espaces qui les entourent.

    Args:
        line: La ligne, sans terminaison.

    Returns:
        SectionHeader, KeyValue, ou None si la ligne ne porte rien.
    """
    start = line.find("[")
    end = line.rfind("]")
    if start != -1 and end != -1:
        # ']' avant le premier '[' : le nom court jusqu'à la fin de ligne
        return SectionHeader(line[start + 1:end] if end > start else line[start + 1:])

    if "=" in line:
        key, value = line.split("=", 1)
        return KeyValue(key=strip_spaces(key), value=strip_spaces(value))

    return None


def split_lines(text: str) -> List[str]:
    """Découpe un texte en lignes comme la lecture d'un fichier texte.

    Seuls '\\n', '\\r\\n' et '\\r' séparent les lignes. Contrairement à
    str.splitlines(), '\\x0c', '\\x85', '\\u2028' et les autres séparateurs
    Unicode restent dans la ligne.
    """
    return [line.rstrip("\n") for line in io.StringIO(text, newline=None)]
