"""
Module contenant les exceptions personnalisées de ordered_ini.

Les erreurs de structure (IniParseError et ses sous-classes) portent
le numéro de ligne (base 1) fautif du fichier source.
"""
from typing import Optional


class ApplicationError(Exception):
    """Exception de base pour toute l'application."""
    pass


class ConfigurationError(ApplicationError):
    """Exception de base pour toutes les configurations."""
    pass


class FileConfigurationError(ConfigurationError):
    """Fichier de configuration introuvable, illisible ou invalide."""
    pass


class IniError(ApplicationError):
    """Exception de base pour les fichiers INI."""
    pass


class SourceUnavailableError(IniError):
    """Le fichier INI ne peut pas être ouvert ou lu."""

    def __init__(self, path: str, reason: str = "") -> None:
        self.path = path
        message = f"Impossible de lire le fichier INI : {path}"
        if reason:
            message += f" ({reason})"
        super().__init__(message)


class DestinationUnavailableError(IniError):
    """Le fichier INI ne peut pas être écrit lors de la sauvegarde."""

    def __init__(self, path: str, reason: str = "") -> None:
        self.path = path
        message = f"Impossible d'écrire le fichier INI : {path}"
        if reason:
            message += f" ({reason})"
        super().__init__(message)


class InvalidEntryError(IniError):
    """Écriture refusée : la ligne produite ne se relirait pas à l'identique.

    Attributes:
        text: La ligne qui aurait été écrite.
        reason: Motif du refus.
    """

    def __init__(self, text: str, reason: str) -> None:
        self.text = text
        self.reason = reason
        super().__init__(f"Entrée non enregistrable {text!r} : {reason}")


class IniParseError(IniError):
    """Erreur de structure détectée pendant le chargement.

    Attributes:
        line_number: Numéro de la ligne fautive (base 1).
        line: Contenu brut de la ligne, si connu.
    """

    reason = "ligne invalide"

    def __init__(self, line_number: int, line: Optional[str] = None) -> None:
        self.line_number = line_number
        self.line = line
        super().__init__(f"{self.reason} à la ligne {line_number}")


class EmptyFieldError(IniParseError):
    """Clé ou valeur vide après suppression des espaces."""

    reason = "clé ou valeur vide"


class OrphanKeyError(IniParseError):
    """Paire clé=valeur rencontrée avant toute section."""

    reason = "clé sans section"


class DuplicateKeyError(IniParseError):
    """Clé déjà présente dans la même occurrence de section."""

    reason = "clé dupliquée"
