"""Enregistrements stockés par SectionStore.

L'égalité et le hachage ne portent que sur le nom ; la position
d'origine (ligne source ou rang de création) ne sert qu'à l'ordre
d'écriture.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

SortKey = Tuple[int, int]


def position_key(line_number: int, sequence: int) -> SortKey:
    """Clé de tri d'un élément.

    Les éléments lus dans le fichier (line_number > 0) passent avant
    ceux créés par programme, eux-mêmes rangés par ordre de création.
    """
    if line_number > 0:
        return (0, line_number)
    return (1, sequence)


@dataclass(eq=False)
class KeyRecord:
    """Une paire clé=valeur d'une section.

    Attributes:
        name: Nom de la clé.
        value: Texte brut de la valeur.
        line_number: Ligne d'origine (base 1), 0 si écrite par programme.
        sequence: Rang de création attribué par le store.
    """

    name: str
    value: str
    line_number: int = 0
    sequence: int = 0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, KeyRecord):
            return NotImplemented
        return self.name == other.name

    def __hash__(self) -> int:
        return hash(self.name)

    @property
    def sort_key(self) -> SortKey:
        return position_key(self.line_number, self.sequence)


@dataclass(eq=False)
class SectionRecord:
    """Une occurrence de section et ses clés.

    Attributes:
        name: Nom de la section.
        line_number: Ligne de l'en-tête (base 1), 0 si créée par programme.
        sequence: Rang de création attribué par le store.
        entries: Clés de la section, indexées par nom.
    """

    name: str
    line_number: int = 0
    sequence: int = 0
    entries: Dict[str, KeyRecord] = field(default_factory=dict)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SectionRecord):
            return NotImplemented
        return self.name == other.name

    def __hash__(self) -> int:
        return hash(self.name)

    @property
    def sort_key(self) -> SortKey:
        return position_key(self.line_number, self.sequence)

    def get(self, key: str) -> Optional[KeyRecord]:
        return self.entries.get(key)

    def ordered_entries(self) -> List[KeyRecord]:
        """Clés triées par position d'origine (tri stable)."""
        return sorted(self.entries.values(), key=lambda k: k.sort_key)
