"""Commande `ordered-ini` : inspection et modification de fichiers INI.

Usage:
    ordered-ini check servers.ini
    ordered-ini sections servers.ini
    ordered-ini get servers.ini server port --index 1 --default 80
    ordered-ini set servers.ini server port 9090 --index 1
    ordered-ini format servers.ini
"""

import argparse
import sys
from typing import List, Optional

from pydantic import ValidationError

from ordered_ini import __version__
from ordered_ini.config.settings import IniSettings, load_settings
from ordered_ini.dotconf.handle import SectionHandle
from ordered_ini.dotconf.ini_file import IniFile
from ordered_ini.errors.base import ErrorHandlerChain
from ordered_ini.errors.console_handler import ConsoleErrorHandler
from ordered_ini.errors.exceptions import (
    ApplicationError,
    FileConfigurationError,
)
from ordered_ini.errors.logger_handler import LoggerErrorHandler
from ordered_ini.logging.base import Logger
from ordered_ini.logging.file_logger import FileLogger


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ordered-ini",
        description="Lecture et écriture de fichiers INI à sections homonymes.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--config", default=None, help="Fichier de réglages (.toml ou .json)")
    parser.add_argument("--log-file", default=None, help="Fichier de log")
    parser.add_argument("--encoding", default=None, help="Encodage du fichier INI")

    sub = parser.add_subparsers(dest="command", required=True)

    check = sub.add_parser("check", help="Vérifie la structure du fichier")
    check.add_argument("file")

    sections = sub.add_parser("sections", help="Liste les sections")
    sections.add_argument("file")

    get = sub.add_parser("get", help="Affiche une valeur")
    get.add_argument("file")
    get.add_argument("section")
    get.add_argument("key")
    get.add_argument("--index", type=int, default=0, help="Rang de l'occurrence (défaut: 0)")
    get.add_argument("--default", default=None, help="Valeur si la clé est absente")

    set_ = sub.add_parser("set", help="Écrit une valeur et sauvegarde")
    set_.add_argument("file")
    set_.add_argument("section")
    set_.add_argument("key")
    set_.add_argument("value")
    set_.add_argument("--index", type=int, default=0, help="Rang de l'occurrence (défaut: 0)")
    set_.add_argument(
        "--create", action="store_true",
        help="Crée la section si l'occurrence n'existe pas",
    )

    fmt = sub.add_parser("format", help="Réécrit le fichier au format normalisé")
    fmt.add_argument("file")

    return parser


def _settings(args: argparse.Namespace) -> IniSettings:
    settings = load_settings(args.config)
    overrides = {}
    if args.encoding:
        overrides["encoding"] = args.encoding
    if args.log_file:
        overrides["log_file"] = args.log_file
    if not overrides:
        return settings
    try:
        return IniSettings.model_validate({**settings.model_dump(), **overrides})
    except ValidationError as e:
        raise FileConfigurationError(
            f"Option de ligne de commande invalide: {e}"
        ) from e


def _logger(settings: IniSettings) -> Optional[Logger]:
    if settings.log_file is None:
        return None
    return FileLogger(
        settings.log_file, config=settings, console_output=settings.console_output
    )


def _cmd_check(ini: IniFile, args: argparse.Namespace) -> int:
    print(f"{args.file}: {len(ini)} section(s)")
    return 0


def _cmd_sections(ini: IniFile, args: argparse.Namespace) -> int:
    for handle in ini.sections():
        print(f"{handle.name}[{handle.index}] (ligne {handle.line_number})")
    return 0


def _cmd_get(ini: IniFile, args: argparse.Namespace) -> int:
    handle = SectionHandle(args.section, args.index)
    if not ini.key_exists(handle, args.key) and args.default is None:
        print(f"Clé introuvable : {handle} {args.key}", file=sys.stderr)
        return 1
    print(ini.read(handle, args.key, args.default))
    return 0


def _cmd_set(ini: IniFile, args: argparse.Namespace) -> int:
    handle = SectionHandle(args.section, args.index)
    if not ini.section_exists(handle):
        if not args.create:
            print(f"Section introuvable : {handle}", file=sys.stderr)
            return 1
        handle = ini.create_section(args.section)
        if handle.index != args.index:
            print(
                f"Section créée : {handle} (rang {args.index} demandé, "
                f"{handle.index} attribué)",
                file=sys.stderr,
            )
        else:
            print(f"Section créée : {handle}", file=sys.stderr)
    ini.write(handle, args.key, args.value)
    ini.save()
    return 0


def _cmd_format(ini: IniFile, args: argparse.Namespace) -> int:
    ini.save()
    return 0


COMMANDS = {
    "check": _cmd_check,
    "sections": _cmd_sections,
    "get": _cmd_get,
    "set": _cmd_set,
    "format": _cmd_format,
}


def main(argv: Optional[List[str]] = None) -> int:
    """Point d'entrée de la commande.

    Les erreurs connues (ApplicationError) sont affichées et loggées,
    puis le programme se termine avec le code 1.

    Returns:
        Code de sortie.
    """
    args = build_parser().parse_args(argv)

    chain = ErrorHandlerChain(ConsoleErrorHandler())

    try:
        settings = _settings(args)
        logger = _logger(settings)
        if logger is not None:
            chain.add_handler(LoggerErrorHandler(logger))

        ini = IniFile(args.file, logger=logger, settings=settings)
        ini.load()
        return COMMANDS[args.command](ini, args)
    except ApplicationError as e:
        chain.handle_and_exit(e)
