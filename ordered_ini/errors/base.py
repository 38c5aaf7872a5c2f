"""Interfaces de traitement des erreurs de la commande ordered-ini."""

import sys
from abc import ABC, abstractmethod
from typing import List, NoReturn


class ErrorHandler(ABC):
    """Rapporte une erreur quelque part (console, journal)."""

    @abstractmethod
    def handle(self, error: Exception) -> None:
        """Rapporte `error` ; ne doit pas la relever."""


class ErrorHandlerChain(ErrorHandler):
    """Transmet chaque erreur à ses handlers, dans l'ordre d'ajout.

    La chaîne est elle-même un ErrorHandler : elle peut être ajoutée à
    une autre chaîne.

    Example:
        >>> chain = ErrorHandlerChain(ConsoleErrorHandler())
        >>> chain.add_handler(LoggerErrorHandler(logger))
        >>> chain.handle_and_exit(error)
    """

    def __init__(self, *handlers: ErrorHandler) -> None:
        self.handlers: List[ErrorHandler] = list(handlers)

    def __len__(self) -> int:
        return len(self.handlers)

    def add_handler(self, handler: ErrorHandler) -> "ErrorHandlerChain":
        self.handlers.append(handler)
        return self

    def handle(self, error: Exception) -> None:
        for handler in self.handlers:
            handler.handle(error)

    def handle_and_exit(self, error: Exception, exit_code: int = 1) -> NoReturn:
        """Rapporte l'erreur à tous les handlers puis quitte.

        Args:
            error: L'erreur à rapporter.
            exit_code: Code de sortie (défaut: 1).
        """
        self.handle(error)
        sys.exit(exit_code)
