#!/usr/bin/env python3
"""Tests unitaires pour le module errors."""

import io
import unittest
from unittest.mock import MagicMock

from ordered_ini.errors.base import ErrorHandler, ErrorHandlerChain
from ordered_ini.errors.exceptions import (ApplicationError,
                                           ConfigurationError,
                                           FileConfigurationError,
                                           IniError,
                                           SourceUnavailableError,
                                           DestinationUnavailableError,
                                           IniParseError,
                                           EmptyFieldError,
                                           OrphanKeyError,
                                           DuplicateKeyError,
                                           InvalidEntryError)
from ordered_ini.errors.console_handler import ConsoleErrorHandler
from ordered_ini.errors.logger_handler import LoggerErrorHandler


class TestExceptions(unittest.TestCase):
    """Tests de la hiérarchie des exceptions."""

    def test_parse_errors_hierarchy(self):
        for cls in (EmptyFieldError, OrphanKeyError, DuplicateKeyError):
            self.assertTrue(issubclass(cls, IniParseError))
            self.assertTrue(issubclass(cls, IniError))
            self.assertTrue(issubclass(cls, ApplicationError))

    def test_io_errors_hierarchy(self):
        self.assertTrue(issubclass(SourceUnavailableError, IniError))
        self.assertTrue(issubclass(DestinationUnavailableError, IniError))
        self.assertTrue(issubclass(FileConfigurationError, ConfigurationError))

    def test_parse_error_carries_line(self):
        """Le numéro de ligne est exposé et cité dans le message."""
        error = DuplicateKeyError(3, "k=2")
        self.assertEqual(error.line_number, 3)
        self.assertEqual(error.line, "k=2")
        self.assertEqual(str(error), "clé dupliquée à la ligne 3")

    def test_specific_messages(self):
        self.assertIn("vide", str(EmptyFieldError(2)))
        self.assertIn("sans section", str(OrphanKeyError(1)))

    def test_unavailable_messages(self):
        error = SourceUnavailableError("/tmp/a.ini", "absent")
        self.assertEqual(error.path, "/tmp/a.ini")
        self.assertIn("/tmp/a.ini", str(error))
        self.assertIn("absent", str(error))
        self.assertIn("écrire", str(DestinationUnavailableError("/tmp/a.ini")))


class TestConsoleErrorHandler(unittest.TestCase):
    """Tests pour ConsoleErrorHandler."""

    def setUp(self):
        self.stream = io.StringIO()
        self.handler = ConsoleErrorHandler(stream=self.stream)

    def test_parse_error_suggests_line(self):
        self.handler.handle(OrphanKeyError(4))
        output = self.stream.getvalue()
        self.assertIn("OrphanKeyError: clé sans section à la ligne 4", output)
        self.assertIn("corrigez la ligne 4", output)

    def test_source_error(self):
        self.handler.handle(SourceUnavailableError("/x.ini"))
        self.assertIn("droits de lecture", self.stream.getvalue())

    def test_destination_error(self):
        self.handler.handle(DestinationUnavailableError("/x.ini"))
        self.assertIn("droits d'écriture", self.stream.getvalue())

    def test_configuration_error(self):
        self.handler.handle(FileConfigurationError("réglages invalides"))
        self.assertIn("fichier de configuration", self.stream.getvalue())

    def test_unknown_error(self):
        self.handler.handle(RuntimeError("boom"))
        output = self.stream.getvalue()
        self.assertIn("Erreur inattendue: boom", output)
        self.assertIn("Type: RuntimeError", output)


class TestLoggerErrorHandler(unittest.TestCase):
    """Tests pour LoggerErrorHandler."""

    def setUp(self):
        self.logger = MagicMock()
        self.handler = LoggerErrorHandler(self.logger)

    def test_known_error(self):
        self.handler.handle(DuplicateKeyError(3))
        self.logger.log_error.assert_called_once_with(
            "DuplicateKeyError: clé dupliquée à la ligne 3"
        )

    def test_unknown_error(self):
        self.handler.handle(ValueError("oups"))
        self.logger.log_error.assert_called_once_with(
            "Erreur inattendue: ValueError: oups"
        )


class TestErrorHandlerChain(unittest.TestCase):
    """Tests pour ErrorHandlerChain."""

    def test_all_handlers_called_in_order(self):
        calls = []
        first = MagicMock(spec=ErrorHandler)
        first.handle.side_effect = lambda e: calls.append("first")
        second = MagicMock(spec=ErrorHandler)
        second.handle.side_effect = lambda e: calls.append("second")
        chain = ErrorHandlerChain()
        chain.add_handler(first)
        chain.add_handler(second)

        chain.handle(IniError("x"))

        self.assertEqual(calls, ["first", "second"])

    def test_handle_and_exit(self):
        handler = MagicMock(spec=ErrorHandler)
        chain = ErrorHandlerChain()
        chain.add_handler(handler)
        with self.assertRaises(SystemExit) as ctx:
            chain.handle_and_exit(IniError("x"), exit_code=3)
        self.assertEqual(ctx.exception.code, 3)
        handler.handle.assert_called_once()

    def test_handlers_given_to_constructor(self):
        first = MagicMock(spec=ErrorHandler)
        chain = ErrorHandlerChain(first)
        self.assertEqual(len(chain), 1)
        self.assertIs(chain.add_handler(MagicMock(spec=ErrorHandler)), chain)
        self.assertEqual(len(chain), 2)

    def test_chain_nested_in_chain(self):
        """Une chaîne est un ErrorHandler et peut être imbriquée."""
        inner_handler = MagicMock(spec=ErrorHandler)
        outer = ErrorHandlerChain(ErrorHandlerChain(inner_handler))
        error = IniError("x")
        outer.handle(error)
        inner_handler.handle.assert_called_once_with(error)


class TestInvalidEntry(unittest.TestCase):
    """Tests pour InvalidEntryError."""

    def test_message_and_attributes(self):
        error = InvalidEntryError("k = ", "clé ou valeur vide")
        self.assertIsInstance(error, IniError)
        self.assertEqual(error.text, "k = ")
        self.assertIn("clé ou valeur vide", str(error))

    def test_console_suggestion(self):
        stream = io.StringIO()
        ConsoleErrorHandler(stream=stream).handle(
            InvalidEntryError("k = ", "clé ou valeur vide")
        )
        self.assertIn("sauts de ligne", stream.getvalue())


class TestLoggerErrorContext(unittest.TestCase):
    """Le journal reçoit la ligne fautive et la cause."""

    def test_parse_error_with_line(self):
        logger = MagicMock()
        LoggerErrorHandler(logger).handle(OrphanKeyError(1, "k = 1"))
        logger.log_error.assert_called_once_with(
            "OrphanKeyError: clé sans section à la ligne 1 ('k = 1')"
        )

    def test_cause_is_named(self):
        logger = MagicMock()
        try:
            try:
                raise PermissionError("refusé")
            except PermissionError as e:
                raise SourceUnavailableError("/x.ini") from e
        except SourceUnavailableError as error:
            LoggerErrorHandler(logger).handle(error)
        message = logger.log_error.call_args[0][0]
        self.assertTrue(message.endswith("[cause: PermissionError]"))


if __name__ == "__main__":
    unittest.main()
