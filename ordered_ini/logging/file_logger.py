"""Implémentation concrète du logger avec fichier."""

import logging
import os
from typing import Any, Dict, Optional, Tuple, Union

from ordered_ini.logging.base import Logger

DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"


def _resolve_options(
    config: Optional[Union[Dict[str, Any], Any]]
) -> Tuple[str, str]:
    """Extrait le niveau et le format de log depuis la configuration.

    Accepte un IniSettings (attributs log_level / log_format) ou un
    dictionnaire {"logging": {"level": ..., "format": ...}}.
    """
    if config is None:
        return DEFAULT_LOG_LEVEL, DEFAULT_LOG_FORMAT

    if hasattr(config, "log_level"):
        return (
            getattr(config, "log_level", DEFAULT_LOG_LEVEL),
            getattr(config, "log_format", DEFAULT_LOG_FORMAT),
        )

    if isinstance(config, dict):
        logging_cfg = config.get("logging", {})
        return (
            logging_cfg.get("level", DEFAULT_LOG_LEVEL),
            logging_cfg.get("format", DEFAULT_LOG_FORMAT),
        )

    return DEFAULT_LOG_LEVEL, DEFAULT_LOG_FORMAT


class FileLogger(Logger):
    """
    Logger qui écrit dans un fichier avec option console.

    Caractéristiques:
    - Logger unique par fichier (évite les conflits)
    - Encodage UTF-8 explicite
    - Flush immédiat après chaque log
    - Pas de propagation (évite les logs en double)
    - Support optionnel de la sortie console
    """

    def __init__(
        self,
        log_file: str,
        config: Optional[Union[Dict[str, Any], Any]] = None,
        console_output: bool = False
    ) -> None:
        """
        Initialise le logger.

        Args:
            log_file: Chemin du fichier de log
            config: Configuration optionnelle (IniSettings ou dict)
                    Clés supportées: logging.level, logging.format
            console_output: Activer la sortie console en plus du fichier
        """
        self.log_file = log_file

        log_dir = os.path.dirname(log_file)
        if log_dir and not os.path.exists(log_dir):
            os.makedirs(log_dir, exist_ok=True)

        log_level_str, log_format = _resolve_options(config)
        log_level = getattr(logging, log_level_str.upper(), logging.INFO)

        self.logger = logging.getLogger(f"ordered_ini.{log_file}")
        self.logger.setLevel(log_level)

        # Éviter les handlers dupliqués
        if not self.logger.handlers:
            file_handler = logging.FileHandler(log_file, encoding='utf-8')
            file_handler.setLevel(log_level)
            formatter = logging.Formatter(log_format)
            file_handler.setFormatter(formatter)
            self.logger.addHandler(file_handler)
            self.handler = file_handler

            if console_output:
                console_handler = logging.StreamHandler()
                console_handler.setLevel(log_level)
                console_handler.setFormatter(formatter)
                self.logger.addHandler(console_handler)
        else:
            self.handler = self.logger.handlers[0]

        self.logger.propagate = False

    def _flush(self) -> None:
        """Force l'écriture immédiate sur le disque."""
        if hasattr(self, 'handler') and self.handler:
            self.handler.flush()

    def log(self, level: int, message: str) -> None:
        """Écrit le message puis force l'écriture sur disque."""
        self.logger.log(level, message)
        self._flush()
