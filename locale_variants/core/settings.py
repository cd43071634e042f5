"""Définition et chargement des paramètres de configuration applicative.

Objectif du module
------------------
- Centraliser les paramètres (env/.env) via Pydantic Settings
- Résoudre le fichier `.env` à utiliser selon la stratégie: ENV_FILE > .env.{APP_ENV} > .env
- Construire la configuration une seule fois par processus (partagée par le conteneur)
"""

import os
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

# Détermination du fichier .env à utiliser avec priorité:
# 1) ENV_FILE (chemin explicite)
# 2) .env.{APP_ENV} si présent
# 3) .env (défaut)
_cwd = Path.cwd()
_env_file_from_env = os.getenv("ENV_FILE")
if _env_file_from_env:
    _ENV_FILE_PATH = _env_file_from_env
else:
    _app_env = os.getenv("APP_ENV", "dev")
    _candidate_specific = _cwd / f".env.{_app_env}"
    _candidate_default = _cwd / ".env"
    if _candidate_specific.exists():
        _ENV_FILE_PATH = _candidate_specific
    else:
        _ENV_FILE_PATH = _candidate_default


class Settings(BaseSettings):
    """Modèle de configuration chargé depuis l'environnement et .env."""

    model_config = SettingsConfigDict(
        env_file=_ENV_FILE_PATH,
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        case_sensitive=False,
        extra="ignore",
    )
    APP_NAME: str = "locale-variants-backend"
    APP_ENV: str = "dev"
    APP_DEBUG: bool = True

    # Stockage des groupes et configurations de variantes
    REDIS_URL: str | None = None
    REQUIRE_REDIS: bool = False

    # Fournisseurs de traduction (clé absente => traduction factice déterministe)
    OPENAI_API_KEY: str | None = None
    OPENAI_MODEL: str = "gpt-3.5-turbo"
    GROQ_API_KEY: str | None = None
    GROQ_MODEL: str = "llama3-8b-8192"
    GROQ_BASE_URL: str = "https://api.groq.com/openai/v1"
    GOOGLE_TRANSLATE_API_KEY: str | None = None
    DEEPL_API_KEY: str | None = None
    DEEPL_API_URL: str = "https://api-free.deepl.com/v2/translate"

    TRANSLATION_DEFAULT_PROVIDER: str = "openai"  # openai | groq | google | deepl
    TRANSLATION_TEMPERATURE: float = 0.3
    TRANSLATION_MAX_TOKENS: int = 2000
    TRANSLATION_BATCH_WORKERS: int = 4
    HTTP_TIMEOUT_SECONDS: float = 10.0


def get_settings() -> Settings:
    """Construit et retourne la configuration de l'application."""
    return Settings()
