"""Registre des groupes de variantes (locales et chaînes de fallback).

Le registre attribue les identifiants et horodatages, valide les locales (non vides, codes
uniques) et délègue le stockage à un dépôt mémoire ou Redis.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Callable, Iterable
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from locale_variants.core.logging import get_logger
from locale_variants.domain.entities import (
    Locale,
    VariantGroup,
    VariantGroupCreate,
    new_id,
    utc_now,
)
from locale_variants.domain.errors import NotFound, ValidationError

IMMUTABLE_FIELDS = frozenset({"id", "created_at", "updated_at"})


def validate_locales(locales: Iterable[Locale]) -> None:
    """Lève `ValidationError` si la liste est vide ou contient des codes dupliqués."""
    codes = [loc.code for loc in locales]
    if not codes:
        raise ValidationError("A variant group needs at least one locale")
    duplicates = sorted(code for code, count in Counter(codes).items() if count > 1)
    if duplicates:
        raise ValidationError(
            f"Duplicate locale codes: {', '.join(duplicates)}",
            details={"duplicates": duplicates},
        )


class VariantGroupService:
    """Service métier du registre de locales.

    Responsabilités:
    - Créer, lire, mettre à jour (fusion partielle) et supprimer des groupes.
    - Garantir l'unicité des codes de locale au sein d'un groupe.
    - Rafraîchir `updated_at` à chaque mutation.
    """

    def __init__(self, repo, clock: Callable[[], str] = utc_now):
        """Initialise le service.

        Paramètres:
        - repo: dépôt de groupes (InMemory ou Redis).
        - clock: source d'horodatage ISO (injectable pour les tests).
        """
        self.repo = repo
        self.clock = clock
        self._log = get_logger(__name__, "variant_groups")

    def create(self, group: VariantGroupCreate | dict[str, Any]) -> VariantGroup:
        """Crée un groupe avec un nouvel id et `created_at == updated_at == maintenant`."""
        try:
            draft = VariantGroupCreate.model_validate(group)
        except PydanticValidationError as exc:
            raise ValidationError(
                "Invalid variant group",
                details={"errors": exc.errors(include_url=False, include_context=False)},
            ) from exc
        validate_locales(draft.locales)
        now = self.clock()
        created = VariantGroup(
            id=new_id(),
            name=draft.name,
            description=draft.description,
            locales=draft.locales,
            created_at=now,
            updated_at=now,
        )
        self.repo.save(created.model_dump())
        self._log.info(
            "variant_group_created", group_id=created.id, locales=len(created.locales)
        )
        return created

    def get(self, group_id: str) -> VariantGroup:
        """Retourne le groupe `group_id`; lève `NotFound` s'il est inconnu."""
        record = self.repo.get(group_id)
        if record is None:
            raise NotFound(f"Variant group {group_id} not found", details={"group_id": group_id})
        return VariantGroup.model_validate(record)

    def update(self, group_id: str, partial: dict[str, Any]) -> VariantGroup:
        """Fusionne les champs fournis dans le groupe et rafraîchit `updated_at`.

        `id`, `created_at` et `updated_at` sont gérés par le registre: ignorés s'ils sont fournis.
        """
        current = self.get(group_id)
        changes = VariantGroup.field_changes(partial, IMMUTABLE_FIELDS)
        try:
            updated = VariantGroup.model_validate(
                {**current.model_dump(), **changes, "updated_at": self.clock()}
            )
        except PydanticValidationError as exc:
            raise ValidationError(
                "Invalid variant group",
                details={"errors": exc.errors(include_url=False, include_context=False)},
            ) from exc
        if "locales" in changes:
            validate_locales(updated.locales)
        self.repo.save(updated.model_dump())
        self._log.info("variant_group_updated", group_id=group_id, fields=sorted(changes))
        return updated

    def delete(self, group_id: str) -> None:
        """Supprime le groupe (sans cascade sur les configurations); `NotFound` si inconnu."""
        if not self.repo.delete(group_id):
            raise NotFound(f"Variant group {group_id} not found", details={"group_id": group_id})
        self._log.info("variant_group_deleted", group_id=group_id)

    def list(self) -> list[VariantGroup]:
        """Tous les groupes, dans l'ordre d'insertion."""
        return [VariantGroup.model_validate(record) for record in self.repo.list_all()]
