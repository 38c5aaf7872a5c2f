"""
    ConsoleErrorHandler
"""
import sys
from typing import TextIO

from ordered_ini.errors.base import ErrorHandler
from ordered_ini.errors.exceptions import (ApplicationError,
                                           ConfigurationError,
                                           DestinationUnavailableError,
                                           IniParseError,
                                           InvalidEntryError,
                                           SourceUnavailableError)


class ConsoleErrorHandler(ErrorHandler):
    """Handler pour afficher les erreurs dans la console.

    Distingue les erreurs connues (ApplicationError) des erreurs
    inattendues, et affiche un message de solution adapté au type
    d'erreur.
    """

    def __init__(self, stream: TextIO | None = None) -> None:
        """Initialise le handler console.

        Args:
            stream: Flux de sortie (défaut: sys.stderr au moment de
                l'affichage).
        """
        self.stream = stream

    def _print(self, message: str) -> None:
        print(message, file=self.stream or sys.stderr)

    def handle(self, error: Exception) -> None:
        """Affiche l'erreur dans la console avec des messages utilisateur.

        Args:
            error: L'exception à afficher.
        """
        if isinstance(error, ApplicationError):
            self._handle_known_error(error)
        else:
            self._handle_unknown_error(error)

    def _handle_known_error(self, error: ApplicationError) -> None:
        """Affiche l'erreur suivie d'une suggestion adaptée.

        Args:
            error: L'exception métier à traiter.
        """
        self._print(f"{type(error).__name__}: {error}")

        if isinstance(error, IniParseError):
            self._print(
                f"Solution : corrigez la ligne {error.line_number} "
                "du fichier INI."
            )
        elif isinstance(error, InvalidEntryError):
            self._print(
                "Solution : évitez les valeurs vides, les sauts de ligne, "
                "'=' dans la clé et les crochets dans la valeur."
            )
        elif isinstance(error, SourceUnavailableError):
            self._print("Solution : vérifiez le chemin et les droits de lecture.")
        elif isinstance(error, DestinationUnavailableError):
            self._print(
                "Solution : vérifiez les droits d'écriture du répertoire."
            )
        elif isinstance(error, ConfigurationError):
            self._print("Solution : vérifiez votre fichier de configuration.")

    def _handle_unknown_error(self, error: Exception) -> None:
        """Gère les erreurs inattendues.

        Args:
            error: L'exception non prévue à afficher.
        """
        self._print(f"Erreur inattendue: {error}")
        self._print(f"Type: {type(error).__name__}")
