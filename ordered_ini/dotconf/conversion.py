"""Conversion entre texte INI et valeurs Python.

Les valeurs sont stockées sous forme de texte brut ; la conversion
se fait à la lecture (parse_value) et à l'écriture (render_value).
"""

from typing import Any, Callable, Optional, Tuple

TRUE_ALIASES: frozenset[str] = frozenset({"true", "on", "yes", "1"})
TRUE_PRINT = "true"
FALSE_PRINT = "false"


class ConversionError(ValueError):
    """Le texte ne peut pas être converti vers le type demandé."""

    def __init__(self, text: str, target: type, cause: Exception) -> None:
        self.text = text
        self.target = target
        super().__init__(
            f"{text!r} n'est pas convertible en {target.__name__}: {cause}"
        )


def parse_bool(text: str) -> bool:
    """Vrai si le texte est un alias de vrai (casse ignorée).

    Tout autre texte vaut False ; ce n'est jamais une erreur.
    """
    return text.lower() in TRUE_ALIASES


def target_type(default: Any, type_: Optional[type] = None) -> type:
    """Type cible d'une lecture : explicite, sinon celui du défaut, sinon str."""
    if type_ is not None:
        return type_
    if default is None:
        return str
    return type(default)


def parse_value(text: str, type_: type) -> Any:
    """Convertit un texte INI vers `type_`.

    Args:
        text: Valeur brute stockée.
        type_: bool, str, ou tout type constructible depuis un str
            (int, float, Decimal, Path...).

    Returns:
        La valeur convertie.

    Raises:
        ConversionError: Si le constructeur du type rejette le texte.
    """
    if type_ is bool:
        return parse_bool(text)
    if type_ is str:
        return text
    converter: Callable[[str], Any] = type_
    try:
        return converter(text)
    except (ValueError, TypeError, ArithmeticError) as e:
        raise ConversionError(text, type_, e) from e


def render_value(value: Any) -> str:
    """Représentation textuelle d'une valeur à écrire."""
    if isinstance(value, bool):
        return TRUE_PRINT if value else FALSE_PRINT
    if isinstance(value, str):
        return value
    return str(value)


def read_or_default(
    text: Optional[str], default: Any, type_: Optional[type] = None
) -> Tuple[Any, Optional[ConversionError]]:
    """Convertit un texte en retombant sur le défaut.

    Le résultat est initialisé au défaut : une clé absente ou une
    conversion en échec le retourne tel quel.

    Returns:
        (valeur, erreur de conversion éventuelle)
    """
    result = default
    if text is None:
        return result, None
    try:
        result = parse_value(text, target_type(default, type_))
    except ConversionError as e:
        return result, e
    return result, None
