"""
Configuration de l'application via pydantic-settings.

La configuration est chargée depuis les variables d'environnement avec le préfixe CINEMETA_,
et peut optionnellement être fournie via un fichier .env.

La clé API TMDB est optionnelle - les commandes réseau sont refusées si elle n'est pas fournie.
"""

from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from cinemeta.utils.constants import TMDB_BASE_URL

# Trouver le fichier .env à la racine du projet (parent de cinemeta/)
_PROJECT_ROOT = Path(__file__).parent.parent
_ENV_FILE = _PROJECT_ROOT / ".env"


class Settings(BaseSettings):
    """Paramètres de l'application avec support des variables d'environnement.

    Tous les paramètres peuvent être surchargés via des variables d'environnement
    avec le préfixe CINEMETA_.
    Exemple : CINEMETA_LOG_LEVEL=DEBUG
    """

    model_config = SettingsConfigDict(
        env_prefix="CINEMETA_",
        env_file=_ENV_FILE if _ENV_FILE.exists() else ".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # API TMDB
    tmdb_api_key: Optional[str] = Field(default=None)
    tmdb_base_url: str = Field(default=TMDB_BASE_URL)
    request_timeout: float = Field(default=30.0, gt=0)
    default_language: Optional[str] = Field(default=None)

    # Cache mémoire (None = non borné)
    cache_max_entries: Optional[int] = Field(default=None, ge=1)

    # Bascules de l'hôte
    include_adult: bool = Field(default=False)
    exclude_tags_movies: bool = Field(default=False)
    exclude_tags_series: bool = Field(default=False)

    # Logging (stderr, et fichier JSON avec rotation si log_file est defini)
    log_level: str = Field(default="INFO")
    log_file: Optional[Path] = Field(default=None)
    log_rotation_size: str = Field(default="10 MB")
    log_retention_count: int = Field(default=5)

    @field_validator("log_file", mode="before")
    @classmethod
    def expand_path(cls, v: Optional[str | Path]) -> Optional[Path]:
        """Étend ~ vers le répertoire home ; une valeur vide désactive le fichier."""
        if not v:
            return None
        return Path(v).expanduser()

    @field_validator("log_level")
    @classmethod
    def upper_level(cls, v: str) -> str:
        """Normalise le niveau de log en majuscules (debug -> DEBUG)."""
        return v.upper()

    @property
    def tmdb_enabled(self) -> bool:
        """Vérifie si l'API TMDB est configurée."""
        return bool(self.tmdb_api_key)
