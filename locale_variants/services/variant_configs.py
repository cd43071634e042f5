"""Stockage des configurations de variantes par (entrée, type de contenu, locale).

Au plus une configuration par triplet: une création sur un triplet existant est refusée
(`Conflict`) sauf écrasement explicite.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from locale_variants.app.metrics import VARIANT_CONFIGS_CREATED
from locale_variants.core.logging import get_logger
from locale_variants.domain.entities import (
    BulkCreateResult,
    BulkFailure,
    VariantConfig,
    utc_now,
)
from locale_variants.domain.errors import Conflict, NotFound, ValidationError
from locale_variants.domain.variant_param import generate_variant_param

KEY_FIELDS = frozenset({"id", "entry_uid", "content_type_uid", "locale", "last_modified"})


def _not_found(entry_uid: str, content_type_uid: str, locale: str) -> NotFound:
    return NotFound(
        f"Variant config not found for locale {locale}",
        details={"entry_uid": entry_uid, "content_type_uid": content_type_uid, "locale": locale},
    )


class VariantConfigService:
    """Service métier des configurations de variantes.

    Responsabilités:
    - Créer une configuration (refus des doublons de triplet) et en créer en masse.
    - Retrouver les configurations d'une entrée, toutes locales ou une locale précise.
    - Mettre à jour / supprimer une configuration existante.
    """

    def __init__(self, repo, groups, clock: Callable[[], str] = utc_now):
        """Initialise le service.

        Paramètres:
        - repo: dépôt de configurations (InMemory ou Redis).
        - groups: `VariantGroupService` pour résoudre les groupes en création de masse.
        - clock: source d'horodatage ISO.
        """
        self.repo = repo
        self.groups = groups
        self.clock = clock
        self._log = get_logger(__name__, "variant_configs")

    def create(
        self, config: VariantConfig | dict[str, Any], *, overwrite: bool = False
    ) -> VariantConfig:
        """Enregistre une configuration et fixe `last_modified`.

        Le `variant_param` est dérivé de la locale et de la chaîne de fallback s'il est vide.
        Lève `Conflict` si le triplet existe déjà et que `overwrite` est faux.
        """
        created = self._store(config, overwrite=overwrite)
        VARIANT_CONFIGS_CREATED.labels("single").inc()
        return created

    def _store(self, config: VariantConfig | dict[str, Any], *, overwrite: bool) -> VariantConfig:
        try:
            created = VariantConfig.model_validate(config).model_copy(deep=True)
        except PydanticValidationError as exc:
            raise ValidationError(
                "Invalid variant config",
                details={"errors": exc.errors(include_url=False, include_context=False)},
            ) from exc
        if not overwrite and self.repo.get(*created.key) is not None:
            raise Conflict(
                f"Variant config already exists for locale {created.locale}",
                details={
                    "entry_uid": created.entry_uid,
                    "content_type_uid": created.content_type_uid,
                    "locale": created.locale,
                },
            )
        if not created.variant_param:
            created.variant_param = generate_variant_param(created.locale, created.fallback_chain)
        created.last_modified = self.clock()
        self.repo.save(created.model_dump())
        return created

    def bulk_create(
        self,
        entry_uids: Iterable[str],
        content_type_uid: str,
        variant_group_id: str,
        locales: Iterable[str],
    ) -> BulkCreateResult:
        """Crée une configuration vide pour chaque couple (entrée × locale du groupe).

        Les locales absentes du groupe sont ignorées sans erreur. Un triplet déjà présent
        est rapporté comme échec de l'élément, sans interrompre le lot.
        """
        group = self.groups.get(variant_group_id)
        locales = list(locales)
        result = BulkCreateResult()
        for entry_uid in entry_uids:
            for code in locales:
                locale = group.find_locale(code)
                if locale is None:
                    continue
                draft = VariantConfig(
                    group_id=group.id,
                    entry_uid=entry_uid,
                    content_type_uid=content_type_uid,
                    locale=code,
                    variant_param=generate_variant_param(code, locale.fallback),
                    content={},
                    fallback_chain=list(locale.fallback),
                    is_translated=False,
                )
                try:
                    result.created.append(self._store(draft, overwrite=False))
                except Conflict as exc:
                    result.failures.append(
                        BulkFailure(entry_uid=entry_uid, locale=code, error=exc.message)
                    )
        VARIANT_CONFIGS_CREATED.labels("bulk").inc(len(result.created))
        self._log.info(
            "variant_configs_bulk_created",
            group_id=group.id,
            content_type_uid=content_type_uid,
            created=len(result.created),
            failed=len(result.failures),
        )
        return result

    def find_by_entry(self, entry_uid: str, content_type_uid: str) -> list[VariantConfig]:
        """Toutes les configurations de l'entrée/type de contenu, toutes locales."""
        return [
            VariantConfig.model_validate(record)
            for record in self.repo.list_for_entry(entry_uid, content_type_uid)
        ]

    def find_by_entry_locale(
        self, entry_uid: str, content_type_uid: str, locale: str
    ) -> VariantConfig | None:
        """La configuration exacte du triplet, ou None."""
        record = self.repo.get(entry_uid, content_type_uid, locale)
        return VariantConfig.model_validate(record) if record else None

    def update(
        self, entry_uid: str, content_type_uid: str, locale: str, partial: dict[str, Any]
    ) -> VariantConfig:
        """Fusionne les champs fournis (contenu, statut de traduction...) et rafraîchit
        `last_modified`. Les champs de clé ne sont pas modifiables."""
        current = self.find_by_entry_locale(entry_uid, content_type_uid, locale)
        if current is None:
            raise _not_found(entry_uid, content_type_uid, locale)
        changes = VariantConfig.field_changes(partial, KEY_FIELDS)
        try:
            updated = VariantConfig.model_validate(
                {**current.model_dump(), **changes, "last_modified": self.clock()}
            )
        except PydanticValidationError as exc:
            raise ValidationError(
                "Invalid variant config",
                details={"errors": exc.errors(include_url=False, include_context=False)},
            ) from exc
        self.repo.save(updated.model_dump())
        self._log.info(
            "variant_config_updated",
            entry_uid=entry_uid,
            content_type_uid=content_type_uid,
            locale=locale,
            fields=sorted(changes),
        )
        return updated

    def delete(self, entry_uid: str, content_type_uid: str, locale: str) -> None:
        """Supprime la configuration du triplet; `NotFound` si absente."""
        if not self.repo.delete(entry_uid, content_type_uid, locale):
            raise _not_found(entry_uid, content_type_uid, locale)
