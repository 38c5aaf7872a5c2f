"""Interface abstraite pour le logging."""

import logging
from abc import ABC, abstractmethod


class Logger(ABC):
    """Journal des opérations de lecture et d'écriture INI.

    Une implémentation ne fournit que log() ; les raccourcis par niveau
    (log_debug, log_info, log_warning, log_error) s'appuient dessus.
    """

    @abstractmethod
    def log(self, level: int, message: str) -> None:
        """Enregistre un message.

        Args:
            level: Niveau, au sens du module logging (logging.INFO...).
            message: Texte à enregistrer.
        """

    def log_debug(self, message: str) -> None:
        self.log(logging.DEBUG, message)

    def log_info(self, message: str) -> None:
        self.log(logging.INFO, message)

    def log_warning(self, message: str) -> None:
        self.log(logging.WARNING, message)

    def log_error(self, message: str) -> None:
        self.log(logging.ERROR, message)
