"""Fonctions de chargement de configuration."""

import json
import tomllib
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, Union

from pydantic import BaseModel, ValidationError

from ordered_ini.errors.exceptions import FileConfigurationError


class ConfigLoader(ABC):
    """
    Interface abstraite pour le chargement de configuration.

    Permet l'injection de dépendance et facilite les tests
    en permettant de substituer l'implémentation réelle par un mock.
    """

    @abstractmethod
    def load(
        self,
        config_path: Union[str, Path],
        schema: type | None = None
    ) -> Union[Dict[str, Any], Any]:
        """
        Charge un fichier de configuration.

        Args:
            config_path: Chemin vers le fichier de configuration
            schema: Classe Pydantic BaseModel optionnelle pour
                validation. Si fourni, retourne une instance
                du modèle. Si None, retourne un dict brut.

        Returns:
            Dictionnaire de configuration ou instance du schema
        """
        pass


class FileConfigLoader(ConfigLoader):
    """
    Chargeur de configuration depuis fichiers TOML ou JSON.

    Le format est détecté par l'extension du fichier. Un modèle
    Pydantic optionnel valide le contenu.
    """

    def load(
        self,
        config_path: Union[str, Path],
        schema: type | None = None
    ) -> Union[Dict[str, Any], Any]:
        """
        Charge un fichier de configuration TOML ou JSON.

        Args:
            config_path: Chemin vers le fichier de configuration
            schema: Classe Pydantic BaseModel optionnelle

        Returns:
            Dictionnaire de configuration ou instance du schema

        Raises:
            FileConfigurationError: Si le fichier n'existe pas, si
                l'extension n'est pas supportée ou si le contenu est
                invalide.
            TypeError: Si schema n'est pas un BaseModel
        """
        path = Path(config_path)

        if not path.exists():
            raise FileConfigurationError(
                f"Fichier de configuration non trouvé: {path}"
            )

        suffix = path.suffix.lower()

        try:
            if suffix == ".toml":
                with open(path, "rb") as f:
                    raw_config = tomllib.load(f)
            elif suffix == ".json":
                with open(path, "r", encoding="utf-8") as f:
                    raw_config = json.load(f)
            else:
                raise FileConfigurationError(
                    f"Extension non supportée: {suffix}. "
                    "Utilisez .toml ou .json"
                )
        except (tomllib.TOMLDecodeError, json.JSONDecodeError) as e:
            raise FileConfigurationError(
                f"Fichier de configuration invalide {path}: {e}"
            ) from e

        if schema is None:
            return raw_config

        return self._validate_with_schema(raw_config, schema, path)

    @staticmethod
    def _validate_with_schema(
        data: Dict[str, Any], schema: type, path: Path
    ) -> Any:
        """Valide un dict via un modèle Pydantic.

        Args:
            data: Dictionnaire brut à valider.
            schema: Classe Pydantic BaseModel.
            path: Chemin du fichier, pour les messages d'erreur.

        Returns:
            Instance du modèle validé.

        Raises:
            TypeError: Si schema n'est pas un BaseModel.
            FileConfigurationError: Si la validation échoue.
        """
        if not (
            isinstance(schema, type)
            and issubclass(schema, BaseModel)
        ):
            raise TypeError(
                f"Le schema doit être une sous-classe de "
                f"pydantic.BaseModel, reçu: {schema}"
            )

        try:
            return schema.model_validate(data)
        except ValidationError as e:
            raise FileConfigurationError(
                f"Configuration invalide dans {path}: {e}"
            ) from e
