"""Interfaces abstraites d'entrée/sortie des lignes INI.

Ce module définit les contrats (ABC) pour :
- LineSource : fournit les lignes brutes d'un fichier INI
- LineSink : persiste les lignes produites par la sérialisation
"""

from abc import ABC, abstractmethod
from typing import List, Sequence


class LineSource(ABC):
    """Interface d'une source de lignes INI."""

    @abstractmethod
    def read_lines(self) -> List[str]:
        """Lit toutes les lignes de la source.

        Returns:
            Lignes sans terminaison.

        Raises:
            SourceUnavailableError: Si la source ne peut être lue.
        """
        pass


class LineSink(ABC):
    """Interface d'une destination de lignes INI."""

    @abstractmethod
    def write_lines(self, lines: Sequence[str]) -> None:
        """Remplace le contenu de la destination par `lines`.

        L'écriture est complète ou n'a pas lieu.

        Args:
            lines: Lignes sans terminaison.

        Raises:
            DestinationUnavailableError: Si la destination ne peut
                être écrite.
        """
        pass
