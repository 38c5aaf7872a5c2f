"""Stockage ordonné de sections INI homonymes.

Un dictionnaire ne peut pas représenter « la même section déclarée N
fois ». SectionStore conserve donc une liste explicite de
SectionRecord, dans l'ordre d'insertion, et un index nom -> positions
maintenu à chaque insertion. Le rang d'une occurrence est sa place
dans la liste de positions de son nom.

Example:
    >>> store = SectionStore()
    >>> store.insert_section("A", 1)
    SectionHandle(name='A', index=0, line_number=1)
    >>> store.insert_section("A", 4).index
    1
    >>> store.occurrences_of("A")
    2
"""

from typing import Dict, Iterator, List, Optional

from ordered_ini.dotconf.handle import SectionHandle
from ordered_ini.dotconf.records import KeyRecord, SectionRecord


class SectionStore:
    """Collection de sections à noms non uniques.

    Attributes:
        _records: Sections dans l'ordre d'insertion.
        _positions: Pour chaque nom, positions de ses sections dans
            _records.
        _sequence: Compteur de création, partagé par sections et clés.
    """

    def __init__(self) -> None:
        self._records: List[SectionRecord] = []
        self._positions: Dict[str, List[int]] = {}
        self._sequence = 0

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[SectionRecord]:
        return iter(self._records)

    def _next_sequence(self) -> int:
        self._sequence += 1
        return self._sequence

    def insert_section(self, name: str, line_number: int = 0) -> SectionHandle:
        """Ajoute une nouvelle occurrence de section.

        Ne fusionne jamais avec une section homonyme existante.

        Args:
            name: Nom de la section.
            line_number: Ligne de l'en-tête, 0 si créée par programme.

        Returns:
            Handle de la nouvelle occurrence.
        """
        record = SectionRecord(
            name=name,
            line_number=line_number,
            sequence=self._next_sequence(),
        )
        positions = self._positions.setdefault(name, [])
        positions.append(len(self._records))
        self._records.append(record)
        return SectionHandle(name, len(positions) - 1, line_number)

    def resolve(self, handle: SectionHandle) -> Optional[SectionRecord]:
        """Retrouve l'occurrence désignée par un handle.

        Returns:
            La section, ou None si 0 <= index < nombre d'occurrences
            n'est pas vérifié.
        """
        positions = self._positions.get(handle.name, [])
        if not 0 <= handle.index < len(positions):
            return None
        return self._records[positions[handle.index]]

    def occurrences_of(self, name: str) -> int:
        return len(self._positions.get(name, []))

    def all_sections(self) -> List[SectionHandle]:
        """Handles de toutes les sections, dans l'ordre d'insertion."""
        seen: Dict[str, int] = {}
        handles = []
        for record in self._records:
            index = seen.get(record.name, 0)
            seen[record.name] = index + 1
            handles.append(
                SectionHandle(record.name, index, record.line_number)
            )
        return handles

    def occurrence_range(self, name: str) -> List[SectionHandle]:
        """Handles des sections nommées `name`, rangs 0..n-1."""
        return [
            SectionHandle(name, index, self._records[position].line_number)
            for index, position in enumerate(self._positions.get(name, []))
        ]

    @staticmethod
    def keys_of(record: SectionRecord) -> List[str]:
        return list(record.entries)

    @staticmethod
    def line_of(record: SectionRecord, key: str) -> Optional[int]:
        entry = record.get(key)
        if entry is None:
            return None
        return entry.line_number

    def add_key(
        self,
        record: SectionRecord,
        key: str,
        value: str,
        line_number: int = 0,
    ) -> KeyRecord:
        """Ajoute une clé absente de la section.

        Raises:
            KeyError: Si la clé existe déjà dans cette occurrence.
        """
        if key in record.entries:
            raise KeyError(key)
        entry = KeyRecord(
            name=key,
            value=value,
            line_number=line_number,
            sequence=self._next_sequence(),
        )
        record.entries[key] = entry
        return entry

    def set_value(self, record: SectionRecord, key: str, value: str) -> bool:
        """Écrit une valeur, en créant la clé si nécessaire.

        Une clé existante garde sa position ; une nouvelle clé se range
        après les clés du fichier, dans l'ordre d'écriture.

        Returns:
            True si la clé a été créée, False si elle a été modifiée.
        """
        entry = record.get(key)
        if entry is not None:
            entry.value = value
            return False
        self.add_key(record, key, value)
        return True

    def ordered_sections(self) -> List[SectionRecord]:
        """Sections triées par position d'origine (tri stable)."""
        return sorted(self._records, key=lambda r: r.sort_key)
