"""Module de gestion des erreurs."""

from ordered_ini.errors.base import ErrorHandler, ErrorHandlerChain
from ordered_ini.errors.exceptions import (ApplicationError,
                                           ConfigurationError,
                                           FileConfigurationError,
                                           IniError,
                                           SourceUnavailableError,
                                           DestinationUnavailableError,
                                           InvalidEntryError,
                                           IniParseError,
                                           EmptyFieldError,
                                           OrphanKeyError,
                                           DuplicateKeyError)
from ordered_ini.errors.console_handler import ConsoleErrorHandler
from ordered_ini.errors.logger_handler import LoggerErrorHandler


__all__ = [
    "ApplicationError",
    "ConfigurationError",
    "FileConfigurationError",
    "IniError",
    "SourceUnavailableError",
    "DestinationUnavailableError",
    "InvalidEntryError",
    "IniParseError",
    "EmptyFieldError",
    "OrphanKeyError",
    "DuplicateKeyError",
    "ErrorHandler",
    "ErrorHandlerChain",
    "ConsoleErrorHandler",
    "LoggerErrorHandler",
]
