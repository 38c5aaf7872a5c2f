"""Chargement d'un fichier INI dans un SectionStore."""

from typing import Iterable, Optional

from ordered_ini.dotconf.records import SectionRecord
from ordered_ini.dotconf.store import SectionStore
from ordered_ini.dotconf.tokenizer import (
    KeyValue,
    SectionHeader,
    split_lines,
    tokenize_line,
)
from ordered_ini.errors.exceptions import (
    DuplicateKeyError,
    EmptyFieldError,
    OrphanKeyError,
)
from ordered_ini.logging.base import Logger


def load_lines(
    lines: Iterable[str],
    logger: Optional[Logger] = None,
) -> SectionStore:
    """Construit un SectionStore à partir des lignes d'un fichier INI.

    Les lignes sont numérotées à partir de 1, en-têtes et lignes vides
    compris. Le chargement s'arrête à la première erreur de structure,
    sans reprise.

    Args:
        lines: Lignes du fichier, terminaisons comprises ou non.
        logger: Logger optionnel.

    Returns:
        Le store rempli.

    Raises:
        EmptyFieldError: Clé ou valeur vide.
        OrphanKeyError: Affectation avant tout en-tête de section.
        DuplicateKeyError: Clé répétée dans la même occurrence.
    """
    store = SectionStore()
    current: Optional[SectionRecord] = None

    for line_number, raw in enumerate(lines, start=1):
        line = raw.rstrip("\r\n")
        token = tokenize_line(line)

        if isinstance(token, SectionHeader):
            handle = store.insert_section(token.name, line_number)
            current = store.resolve(handle)
        elif isinstance(token, KeyValue):
            if not token.key or not token.value:
                raise EmptyFieldError(line_number, line)
            if current is None:
                raise OrphanKeyError(line_number, line)
            if current.get(token.key) is not None:
                raise DuplicateKeyError(line_number, line)
            store.add_key(current, token.key, token.value, line_number)

    if logger:
        logger.log_debug(f"{len(store)} section(s) chargée(s).")
    return store


def loads(text: str, logger: Optional[Logger] = None) -> SectionStore:
    """Charge un texte INI complet. Voir load_lines()."""
    return load_lines(split_lines(text), logger)
