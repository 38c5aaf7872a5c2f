"""Fichier INI à sections homonymes, en lecture et écriture.

IniFile charge un fichier dans un SectionStore, expose des lectures
typées avec valeur par défaut et des écritures, puis réécrit le
fichier dans son ordre d'origine.

Example:
    >>> ini = IniFile("/etc/app/servers.ini")
    >>> ini.load()
    >>> for handle in ini["server"]:
    ...     port = ini.read(handle, "port", 8080)
    >>> new = ini.create_section("server")
    >>> ini.write(new, "port", 9090)
    >>> ini.save()
"""

from pathlib import Path
from typing import Any, List, Optional

from ordered_ini.config.settings import IniSettings
from ordered_ini.dotconf.base import LineSink, LineSource
from ordered_ini.dotconf.conversion import read_or_default, render_value
from ordered_ini.dotconf.handle import SectionHandle, SectionRef, as_handle
from ordered_ini.dotconf.loader import load_lines
from ordered_ini.dotconf.records import SectionRecord
from ordered_ini.dotconf.serializer import (
    entry_problem,
    header_problem,
    render_header,
    render_key_value,
    serialize,
)
from ordered_ini.dotconf.source import FileLineSink, FileLineSource
from ordered_ini.dotconf.store import SectionStore
from ordered_ini.errors.exceptions import InvalidEntryError
from ordered_ini.logging.base import Logger


class IniFile:
    """Accès typé à un fichier INI qui peut répéter ses sections.

    Les lectures ne lèvent jamais d'exception pour une section ou une
    clé introuvable : elles retournent la valeur par défaut, False ou
    None. Une écriture vers une section introuvable est ignorée.

    Attributes:
        path: Chemin du fichier, None pour un fichier purement en mémoire.
        settings: Réglages (encodage, logs).
    """

    def __init__(
        self,
        path: Optional[str | Path] = None,
        logger: Optional[Logger] = None,
        settings: Optional[IniSettings] = None,
        source: Optional[LineSource] = None,
        sink: Optional[LineSink] = None,
    ) -> None:
        """Initialise le fichier sans le lire.

        Args:
            path: Chemin du fichier INI.
            logger: Logger optionnel.
            settings: Réglages ; IniSettings() par défaut.
            source: Source de lignes injectable. Si None, lit `path`.
            sink: Destination injectable. Si None, écrit `path`.

        Raises:
            ValueError: Si ni path ni source/sink ne sont fournis.
        """
        self.path = Path(path) if path is not None else None
        self.settings = settings or IniSettings()
        self._logger = logger

        if self.path is None and (source is None or sink is None):
            raise ValueError("IniFile requiert un chemin ou une source et une destination")

        self._source = source or FileLineSource(
            self.path, self.settings.encoding, logger
        )
        self._sink = sink or FileLineSink(
            self.path, self.settings.encoding, logger
        )
        self._store = SectionStore()

    def __repr__(self) -> str:
        return f"IniFile({str(self.path)!r}, sections={len(self._store)})"

    def __getitem__(self, name: str) -> List[SectionHandle]:
        return self.section_range(name)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.section_count(name) > 0

    def __len__(self) -> int:
        return len(self._store)

    @property
    def store(self) -> SectionStore:
        return self._store

    # Persistance

    def load(self) -> None:
        """Lit la source et remplace le contenu courant.

        Raises:
            SourceUnavailableError: Si la source ne peut être lue.
            IniParseError: Sur la première erreur de structure ; le
                contenu courant est alors conservé.
        """
        lines = self._source.read_lines()
        self._store = load_lines(lines, self._logger)
        if self._logger:
            self._logger.log_info(
                f"Fichier {self._describe()} lu avec succès "
                f"({len(self._store)} section(s))."
            )

    def save(self) -> None:
        """Écrit le contenu courant, dans l'ordre d'origine.

        Raises:
            DestinationUnavailableError: Si la destination ne peut être
                écrite ; rien n'est alors persisté.
        """
        lines = self.to_lines()
        self._sink.write_lines(lines)
        if self._logger:
            self._logger.log_info(f"Fichier {self._describe()} écrit avec succès.")

    def to_lines(self) -> List[str]:
        return serialize(self._store)

    def _describe(self) -> str:
        return str(self.path) if self.path is not None else "<mémoire>"

    def _resolve(self, section: SectionRef) -> Optional[SectionRecord]:
        return self._store.resolve(as_handle(section))

    # Lecture

    def read(
        self,
        section: SectionRef,
        key: str,
        default: Any = None,
        type_: Optional[type] = None,
    ) -> Any:
        """Lit une valeur typée.

        Le type cible est `type_`, sinon le type de `default`, sinon
        str. Pour bool, seuls les alias de vrai ("true", "on", "yes",
        "1", casse ignorée) valent True ; tout autre texte vaut False.

        Args:
            section: Handle ou nom de section (occurrence 0).
            key: Nom de la clé.
            default: Valeur retournée si la section ou la clé est
                introuvable, ou si la conversion échoue.
            type_: Type cible explicite.

        Returns:
            La valeur convertie ou `default`.
        """
        record = self._resolve(section)
        entry = record.get(key) if record is not None else None
        value, error = read_or_default(
            entry.value if entry is not None else None, default, type_
        )
        if error is not None and self._logger:
            self._logger.log_warning(
                f"{as_handle(section)} {key}: {error} ; "
                f"valeur par défaut {default!r} utilisée."
            )
        return value

    def section_exists(self, section: SectionRef) -> bool:
        return self._resolve(section) is not None

    def key_exists(self, section: SectionRef, key: str) -> bool:
        record = self._resolve(section)
        return record is not None and record.get(key) is not None

    def sections(self) -> List[SectionHandle]:
        """Toutes les sections, dans l'ordre d'insertion."""
        return self._store.all_sections()

    def section_range(self, name: str) -> List[SectionHandle]:
        """Les occurrences de la section `name`, rangs 0..n-1."""
        return self._store.occurrence_range(name)

    def section_count(self, name: str) -> int:
        return self._store.occurrences_of(name)

    def keys(self, section: SectionRef) -> List[str]:
        """Noms des clés d'une section ; liste vide si introuvable."""
        record = self._resolve(section)
        if record is None:
            return []
        return self._store.keys_of(record)

    def key_line(self, section: SectionRef, key: str) -> Optional[int]:
        """Ligne d'origine d'une clé.

        Returns:
            Numéro de ligne (base 1), 0 pour une clé écrite par
            programme, None si la section ou la clé est introuvable.
        """
        record = self._resolve(section)
        if record is None:
            return None
        return self._store.line_of(record, key)

    # Écriture

    def create_section(self, name: str) -> SectionHandle:
        """Ajoute une nouvelle occurrence de section, même si le nom existe.

        La section sera écrite après celles du fichier.

        Raises:
            InvalidEntryError: Si le nom contient un saut de ligne.
        """
        problem = header_problem(name)
        if problem is not None:
            raise InvalidEntryError(render_header(name), problem)
        handle = self._store.insert_section(name)
        if self._logger:
            self._logger.log_debug(f"Section {handle} créée.")
        return handle

    def write(self, section: SectionRef, key: str, value: Any) -> None:
        """Écrit une valeur dans une section existante.

        bool s'écrit "true" ou "false", str tel quel, le reste via
        str(). Une nouvelle clé est écrite après les clés existantes de
        la section. Une section introuvable rend l'appel sans effet.

        Raises:
            InvalidEntryError: Si la ligne `key = value` ne serait pas
                relue à l'identique par load() : clé ou valeur vide,
                saut de ligne, '=' dans la clé, '[' et ']' sur la ligne,
                espaces en bordure.
        """
        text = render_value(value)
        problem = entry_problem(key, text)
        if problem is not None:
            raise InvalidEntryError(render_key_value(key, text), problem)

        record = self._resolve(section)
        if record is None:
            if self._logger:
                self._logger.log_debug(
                    f"Écriture ignorée : section {as_handle(section)} introuvable."
                )
            return
        self._store.set_value(record, key, text)
