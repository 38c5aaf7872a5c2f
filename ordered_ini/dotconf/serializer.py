"""Sérialisation d'un SectionStore en lignes INI."""

from typing import List, Optional

from ordered_ini.dotconf.store import SectionStore
from ordered_ini.dotconf.tokenizer import (
    KeyValue,
    SectionHeader,
    strip_spaces,
    tokenize_line,
)

LINE_BREAKS = ("\n", "\r")


def render_key_value(key: str, value: str) -> str:
    return f"{key} = {value}"


def render_header(name: str) -> str:
    return f"[{name}]"


def entry_problem(key: str, value: str) -> Optional[str]:
    """Vérifie qu'une paire se relira telle quelle après sauvegarde.

    Returns:
        Le motif du refus, ou None si la paire est enregistrable.
    """
    if any(c in key or c in value for c in LINE_BREAKS):
        return "saut de ligne"
    if not strip_spaces(key) or not strip_spaces(value):
        return "clé ou valeur vide"
    if tokenize_line(render_key_value(key, value)) != KeyValue(key, value):
        # ex. '=' dans la clé, ou crochets pris pour un en-tête
        return "la ligne serait relue différemment"
    return None


def header_problem(name: str) -> Optional[str]:
    """Comme entry_problem(), pour un nom de section."""
    if any(c in name for c in LINE_BREAKS):
        return "saut de ligne"
    if tokenize_line(render_header(name)) != SectionHeader(name):
        return "l'en-tête serait relu différemment"
    return None


def serialize(store: SectionStore) -> List[str]:
    """Reconstruit les lignes du fichier dans l'ordre d'origine.

    Sections puis clés sont triées par position d'origine ; les
    éléments créés par programme suivent ceux lus dans le fichier.
    Chaque section est suivie d'une ligne vide.

    Args:
        store: Le store à sérialiser.

    Returns:
        Les lignes, sans terminaison.
    """
    lines: List[str] = []
    for record in store.ordered_sections():
        lines.append(render_header(record.name))
        for entry in record.ordered_entries():
            lines.append(render_key_value(entry.name, entry.value))
        lines.append("")
    return lines


def dumps(store: SectionStore) -> str:
    """Contenu complet du fichier, une ligne par '\\n'."""
    return "".join(f"{line}\n" for line in serialize(store))
