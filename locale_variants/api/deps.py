"""Dépendances partagées pour les routes de l'API.

But du module
-------------
- Exposer aux endpoints les services construits par le conteneur attaché à l'application
  (`app.state.container`), sans instanciation par requête.
- Permettre aux tests de monter une application sur un conteneur dédié.
"""

from fastapi import Depends, Request

from locale_variants.core.container import Container
from locale_variants.services.fallback_resolver import FallbackResolver
from locale_variants.services.translation_gateway import TranslationGateway
from locale_variants.services.variant_configs import VariantConfigService
from locale_variants.services.variant_groups import VariantGroupService


def get_app_container(request: Request) -> Container:
    return request.app.state.container


def get_groups(request: Request) -> VariantGroupService:
    return get_app_container(request).groups


def get_configs(request: Request) -> VariantConfigService:
    return get_app_container(request).configs


def get_resolver(request: Request) -> FallbackResolver:
    return get_app_container(request).resolver


def get_translator(request: Request) -> TranslationGateway:
    return get_app_container(request).translator


container_dep = Depends(get_app_container)
groups_dep = Depends(get_groups)
configs_dep = Depends(get_configs)
resolver_dep = Depends(get_resolver)
translator_dep = Depends(get_translator)
