"""Référence vers une occurrence de section INI.

Un fichier peut déclarer plusieurs fois la même section ; un
SectionHandle désigne l'une d'elles par son nom et son rang
d'occurrence parmi les sections homonymes.
"""

from dataclasses import dataclass, field
from typing import Union


@dataclass(frozen=True)
class SectionHandle:
    """Adresse d'une occurrence de section.

    Attributes:
        name: Nom de la section, tel qu'écrit entre crochets.
        index: Rang (base 0) parmi les sections portant ce nom,
            dans l'ordre d'insertion.
        line_number: Ligne d'origine de l'en-tête (base 1), 0 pour
            une section créée par programme. Purement informatif :
            ignoré par l'égalité et le hachage.
    """

    name: str
    index: int = 0
    line_number: int = field(default=0, compare=False)

    def __post_init__(self) -> None:
        if self.index < 0:
            raise ValueError(f"index={self.index!r} invalide (doit être >= 0)")

    def __str__(self) -> str:
        return f"[{self.name}]#{self.index}"


SectionRef = Union[SectionHandle, str]


def as_handle(section: SectionRef) -> SectionHandle:
    """Normalise un nom de section en handle (occurrence 0)."""
    if isinstance(section, SectionHandle):
        return section
    return SectionHandle(section)
