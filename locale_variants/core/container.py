"""
Conteneur d'injection de dépendances.

Instancie une seule fois par processus les composants centraux (settings, dépôts, services de
variantes, fournisseurs et passerelle de traduction) et les partage entre toutes les routes.
"""

from __future__ import annotations

from functools import lru_cache

from locale_variants.core.logging import get_logger
from locale_variants.core.settings import Settings, get_settings
from locale_variants.infra.repositories import (
    InMemoryVariantConfigRepo,
    InMemoryVariantGroupRepo,
    RedisVariantConfigRepo,
    RedisVariantGroupRepo,
)
from locale_variants.infra.translation.registry import build_providers
from locale_variants.services.fallback_resolver import FallbackResolver
from locale_variants.services.translation_gateway import TranslationGateway
from locale_variants.services.variant_configs import VariantConfigService
from locale_variants.services.variant_groups import VariantGroupService

log = get_logger(__name__, "container")


class Container:
    def __init__(self, settings: Settings | None = None):
        self.settings = settings or get_settings()
        self.group_repo, self.config_repo = self._build_repos()

        self.groups = VariantGroupService(self.group_repo)
        self.configs = VariantConfigService(self.config_repo, self.groups)
        self.resolver = FallbackResolver(self.groups, self.configs)

        self.providers = build_providers(self.settings)
        openai = self.providers["openai"]
        self.translator = TranslationGateway(
            self.providers,
            default_provider=self.settings.TRANSLATION_DEFAULT_PROVIDER,
            detector=openai if openai.configured else None,
            max_workers=self.settings.TRANSLATION_BATCH_WORKERS,
        )

    def _build_repos(self):
        """Redis si `REDIS_URL` est défini et joignable, sinon mémoire.

        `REQUIRE_REDIS` transforme l'absence ou l'indisponibilité de Redis en erreur.
        """
        if self.settings.REDIS_URL:
            try:
                group_repo = RedisVariantGroupRepo(self.settings.REDIS_URL)
                group_repo.client.ping()
                config_repo = RedisVariantConfigRepo(self.settings.REDIS_URL)
                self.storage_backend = "redis"
                return group_repo, config_repo
            except Exception as err:
                if self.settings.REQUIRE_REDIS:
                    raise RuntimeError("Redis required but unavailable") from err
                log.warning("redis_unavailable", error=str(err))
                self.storage_backend = "memory-fallback"
        else:
            if self.settings.REQUIRE_REDIS:
                raise RuntimeError("Redis required but REDIS_URL not set")
            self.storage_backend = "memory"
        return InMemoryVariantGroupRepo(), InMemoryVariantConfigRepo()


@lru_cache(maxsize=1)
def get_container() -> Container:
    """Conteneur partagé du processus (construit au premier appel)."""
    return Container()
