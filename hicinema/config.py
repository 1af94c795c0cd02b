"""
Configuration de l'application via pydantic-settings.

La configuration est chargée depuis les variables d'environnement avec le préfixe HICINEMA_,
et peut optionnellement être fournie via un fichier .env.

La clé API TMDB est optionnelle - le chargement de pages est désactivé si non fournie,
la lecture du cache local reste possible.
"""

from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Trouver le fichier .env à la racine du projet (parent de hicinema/)
_PROJECT_ROOT = Path(__file__).parent.parent
_ENV_FILE = _PROJECT_ROOT / ".env"


class Settings(BaseSettings):
    """Paramètres de l'application avec support des variables d'environnement.

    Tous les paramètres peuvent être surchargés via des variables d'environnement
    avec le préfixe HICINEMA_.
    Exemple : HICINEMA_LOG_LEVEL=DEBUG

    Les chemins sont automatiquement étendus (~ -> répertoire home).
    """

    model_config = SettingsConfigDict(
        env_prefix="HICINEMA_",
        env_file=_ENV_FILE if _ENV_FILE.exists() else ".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Base de données (cache local des films)
    database_url: str = Field(default="sqlite:///data/hicinema.db")

    # API TMDB (clé OPTIONNELLE - chargement désactivé si non définie)
    tmdb_api_key: Optional[str] = Field(default=None)
    tmdb_base_url: str = Field(default="https://api.themoviedb.org/3")
    tmdb_language: str = Field(default="en-US")

    # Transport HTTP (1 tentative = pas de retry sur 429)
    http_timeout: float = Field(default=30.0, gt=0)
    http_max_attempts: int = Field(default=1, ge=1)

    # Préférences utilisateur (diskcache)
    preferences_dir: Path = Field(default=Path("data/preferences"))

    # Logging (fichier + stderr, rotation 10MB, 5 fichiers de rétention)
    log_level: str = Field(default="INFO")
    log_file: Path = Field(default=Path("logs/hicinema.log"))
    log_rotation_size: str = Field(default="10 MB")
    log_retention_count: int = Field(default=5)

    @field_validator("preferences_dir", "log_file", mode="before")
    @classmethod
    def expand_path(cls, v: str | Path) -> Path:
        """Étend ~ vers le répertoire home dans les chemins."""
        return Path(v).expanduser()

    @property
    def tmdb_enabled(self) -> bool:
        """Vérifie si l'API TMDB est configurée."""
        return bool(self.tmdb_api_key)
