"""Sources et destinations de lignes INI.

FileLineSource et FileLineSink lisent et écrivent un fichier sur
disque ; MemoryLineSource et MemoryLineSink travaillent en mémoire.
"""

import os
import shutil
import tempfile
from pathlib import Path
from typing import Iterable, List, Optional, Sequence

from ordered_ini.dotconf.base import LineSink, LineSource
from ordered_ini.dotconf.tokenizer import split_lines
from ordered_ini.errors.exceptions import (
    DestinationUnavailableError,
    SourceUnavailableError,
)
from ordered_ini.logging.base import Logger


class FileLineSource(LineSource):
    """Lecture d'un fichier INI sur disque.

    Attributes:
        path: Chemin du fichier.
        encoding: Encodage du fichier.
    """

    def __init__(
        self,
        path: str | Path,
        encoding: str = "utf-8",
        logger: Optional[Logger] = None,
    ) -> None:
        self.path = Path(path)
        self.encoding = encoding
        self._logger = logger

    def read_lines(self) -> List[str]:
        """Lit le fichier et retourne ses lignes sans terminaison.

        Raises:
            SourceUnavailableError: Fichier absent, illisible ou mal
                encodé.
        """
        try:
            with open(self.path, "r", encoding=self.encoding) as f:
                lines = [line.rstrip("\n") for line in f]
        except (OSError, UnicodeDecodeError) as e:
            if self._logger:
                self._logger.log_error(
                    f"Erreur lors de la lecture de {self.path}: {e}"
                )
            raise SourceUnavailableError(str(self.path), str(e)) from e

        if self._logger:
            self._logger.log_debug(f"{len(lines)} ligne(s) lue(s) depuis {self.path}")
        return lines


class FileLineSink(LineSink):
    """Écriture atomique d'un fichier INI sur disque.

    Le contenu est écrit dans un fichier temporaire du même répertoire
    puis substitué à la cible par os.replace() : en cas d'échec, le
    fichier d'origine reste intact.
    """

    def __init__(
        self,
        path: str | Path,
        encoding: str = "utf-8",
        logger: Optional[Logger] = None,
    ) -> None:
        self.path = Path(path)
        self.encoding = encoding
        self._logger = logger

    def write_lines(self, lines: Sequence[str]) -> None:
        """Remplace le fichier par `lines`, une ligne par '\\n'.

        Raises:
            DestinationUnavailableError: Si le fichier temporaire ne
                peut être créé ou substitué à la cible.
        """
        content = "".join(f"{line}\n" for line in lines)
        directory = self.path.parent
        tmp_name = None
        try:
            with tempfile.NamedTemporaryFile(
                "w",
                encoding=self.encoding,
                dir=directory,
                prefix=f".{self.path.name}.",
                suffix=".tmp",
                delete=False,
            ) as tmp:
                tmp_name = tmp.name
                tmp.write(content)
            if self.path.exists():
                shutil.copymode(self.path, tmp_name)
            os.replace(tmp_name, self.path)
        except (OSError, UnicodeEncodeError) as e:
            if tmp_name is not None:
                Path(tmp_name).unlink(missing_ok=True)
            if self._logger:
                self._logger.log_error(
                    f"Erreur lors de l'écriture de {self.path}: {e}"
                )
            raise DestinationUnavailableError(str(self.path), str(e)) from e

        if self._logger:
            self._logger.log_debug(f"{len(lines)} ligne(s) écrite(s) dans {self.path}")


class MemoryLineSource(LineSource):
    """Source de lignes en mémoire."""

    def __init__(self, lines: Iterable[str] = ()) -> None:
        self.lines = [line.rstrip("\r\n") for line in lines]

    @classmethod
    def from_text(cls, text: str) -> "MemoryLineSource":
        return cls(split_lines(text))

    def read_lines(self) -> List[str]:
        return list(self.lines)


class MemoryLineSink(LineSink):
    """Destination en mémoire ; conserve la dernière écriture."""

    def __init__(self) -> None:
        self.lines: List[str] = []
        self.writes = 0

    def write_lines(self, lines: Sequence[str]) -> None:
        self.lines = list(lines)
        self.writes += 1

    @property
    def text(self) -> str:
        return "".join(f"{line}\n" for line in self.lines)
