"""
Routes des variantes de locales: groupes, configurations, création en masse et fallback.

Ce module regroupe les endpoints `/variants`. Les erreurs métier (`NotFound`, `Conflict`,
`ValidationError`) sont converties en enveloppes HTTP par `locale_variants.apigw.errors`.
"""

from fastapi import APIRouter, Response

from locale_variants.api.deps import configs_dep, groups_dep, resolver_dep
from locale_variants.api.schemas import (
    BulkVariantIn,
    VariantConfigIn,
    VariantConfigUpdate,
    VariantGroupIn,
    VariantGroupUpdate,
    VariantParamIn,
    VariantParamOut,
)
from locale_variants.apigw.errors import not_found
from locale_variants.core.http_constants import HTTP_CREATED, HTTP_NO_CONTENT
from locale_variants.domain.entities import (
    BulkCreateResult,
    FallbackResult,
    VariantConfig,
    VariantGroup,
)
from locale_variants.domain.variant_param import generate_variant_param
from locale_variants.services.fallback_resolver import FallbackResolver
from locale_variants.services.variant_configs import VariantConfigService
from locale_variants.services.variant_groups import VariantGroupService

router = APIRouter(prefix="/variants", tags=["variants"])


@router.get("/groups", response_model=list[VariantGroup])
def list_groups(groups: VariantGroupService = groups_dep):
    """Tous les groupes, dans l'ordre de création."""
    return groups.list()


@router.post("/groups", response_model=VariantGroup, status_code=HTTP_CREATED)
def create_group(payload: VariantGroupIn, groups: VariantGroupService = groups_dep):
    """Crée un groupe; 400 si les codes de locale sont dupliqués."""
    return groups.create(payload.model_dump())


@router.get("/groups/{group_id}", response_model=VariantGroup)
def get_group(group_id: str, groups: VariantGroupService = groups_dep):
    return groups.get(group_id)


@router.put("/groups/{group_id}", response_model=VariantGroup)
def update_group(
    group_id: str, payload: VariantGroupUpdate, groups: VariantGroupService = groups_dep
):
    """Fusionne les champs fournis dans le groupe (les autres sont conservés)."""
    return groups.update(group_id, payload.model_dump(exclude_unset=True))


@router.delete("/groups/{group_id}", status_code=HTTP_NO_CONTENT)
def delete_group(group_id: str, groups: VariantGroupService = groups_dep):
    """Supprime le groupe; les configurations qui le référencent sont conservées."""
    groups.delete(group_id)
    return Response(status_code=HTTP_NO_CONTENT)


@router.post("/configs", response_model=VariantConfig, status_code=HTTP_CREATED)
def create_config(
    payload: VariantConfigIn,
    overwrite: bool = False,
    configs: VariantConfigService = configs_dep,
):
    """Crée la configuration d'un triplet; 409 s'il existe déjà, sauf `?overwrite=true`."""
    return configs.create(payload.model_dump(), overwrite=overwrite)


@router.get("/configs/{entry_uid}/{content_type_uid}", response_model=list[VariantConfig])
def list_configs(
    entry_uid: str, content_type_uid: str, configs: VariantConfigService = configs_dep
):
    return configs.find_by_entry(entry_uid, content_type_uid)


@router.get("/configs/{entry_uid}/{content_type_uid}/{locale}", response_model=VariantConfig)
def get_config(
    entry_uid: str,
    content_type_uid: str,
    locale: str,
    configs: VariantConfigService = configs_dep,
):
    config = configs.find_by_entry_locale(entry_uid, content_type_uid, locale)
    if config is None:
        raise not_found(f"Variant config not found for locale {locale}")
    return config


@router.put("/configs/{entry_uid}/{content_type_uid}/{locale}", response_model=VariantConfig)
def update_config(
    entry_uid: str,
    content_type_uid: str,
    locale: str,
    payload: VariantConfigUpdate,
    configs: VariantConfigService = configs_dep,
):
    """Met à jour le contenu/statut d'une configuration existante."""
    return configs.update(
        entry_uid, content_type_uid, locale, payload.model_dump(exclude_unset=True)
    )


@router.delete("/configs/{entry_uid}/{content_type_uid}/{locale}", status_code=HTTP_NO_CONTENT)
def delete_config(
    entry_uid: str,
    content_type_uid: str,
    locale: str,
    configs: VariantConfigService = configs_dep,
):
    configs.delete(entry_uid, content_type_uid, locale)
    return Response(status_code=HTTP_NO_CONTENT)


@router.post("/bulk", response_model=BulkCreateResult, status_code=HTTP_CREATED)
def bulk_create(payload: BulkVariantIn, configs: VariantConfigService = configs_dep):
    """
    Crée une configuration vide par couple (entrée × locale du groupe).

    Retour: `BulkCreateResult` avec les configurations créées et les couples refusés
    (configuration déjà existante). Les locales absentes du groupe sont ignorées.
    """
    return configs.bulk_create(
        payload.entry_uids,
        payload.content_type_uid,
        payload.variant_group_id,
        payload.locales,
    )


@router.get(
    "/fallback/{entry_uid}/{content_type_uid}/{locale}/{variant_group_id}",
    response_model=FallbackResult,
)
def resolve_fallback(
    entry_uid: str,
    content_type_uid: str,
    locale: str,
    variant_group_id: str,
    resolver: FallbackResolver = resolver_dep,
):
    """Contenu effectif de `locale`, avec la chaîne parcourue, les champs manquants et la
    confiance. 404 si le groupe est inconnu ou si la locale n'en fait pas partie."""
    return resolver.resolve(entry_uid, content_type_uid, locale, variant_group_id)


@router.post("/param", response_model=VariantParamOut)
def variant_param(payload: VariantParamIn):
    return VariantParamOut(
        variant_param=generate_variant_param(payload.locale, payload.fallback_chain)
    )
