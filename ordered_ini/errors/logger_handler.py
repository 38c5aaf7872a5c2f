"""Consignation des erreurs dans le journal."""

from ordered_ini.errors.base import ErrorHandler
from ordered_ini.errors.exceptions import ApplicationError, IniParseError
from ordered_ini.logging.base import Logger


def describe_error(error: Exception) -> str:
    """Résumé d'une ligne : type, message, ligne fautive et cause."""
    text = f"{type(error).__name__}: {error}"
    if isinstance(error, IniParseError) and error.line is not None:
        text += f" ({error.line!r})"
    if error.__cause__ is not None:
        text += f" [cause: {type(error.__cause__).__name__}]"
    return text


class LoggerErrorHandler(ErrorHandler):
    """Écrit chaque erreur au niveau ERROR du Logger fourni.

    Les erreurs hors ApplicationError sont préfixées par
    "Erreur inattendue".
    """

    def __init__(self, logger: Logger) -> None:
        self.logger = logger

    def handle(self, error: Exception) -> None:
        if isinstance(error, ApplicationError):
            self.logger.log_error(describe_error(error))
        else:
            self.logger.log_error(f"Erreur inattendue: {describe_error(error)}")
