"""
Entités du domaine des variantes de locales.

Ce module définit les modèles de données principaux: locales, groupes de variantes,
configurations par locale, résultat de résolution de fallback et échanges de traduction.
Les attributs sont en snake_case côté Python et sérialisés en camelCase côté API.
"""

from __future__ import annotations

import time
import uuid
from datetime import UTC, datetime
from typing import Any, Literal

from pydantic import AliasChoices, BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

TranslationMethod = Literal["manual", "ai", "fallback"]
ProviderName = Literal["openai", "groq", "google", "deepl"]


def utc_now() -> str:
    """Horodatage ISO 8601 en UTC."""
    return datetime.now(UTC).isoformat()


def new_id() -> str:
    """Identifiant unique au processus, de la forme `variant_<ms>_<aléa>`."""
    return f"variant_{int(time.time() * 1000)}_{uuid.uuid4().hex[:9]}"


class CamelModel(BaseModel):
    """Base commune: alias camelCase, peuplement par nom autorisé."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    @classmethod
    def field_changes(
        cls, partial: dict[str, Any], immutable: frozenset[str] = frozenset()
    ) -> dict[str, Any]:
        """Normalise une mise à jour partielle (clés snake_case ou camelCase) en noms de champs.

        Les clés inconnues et les champs immuables sont ignorés.
        """
        names = {}
        for name, field in cls.model_fields.items():
            names[name] = name
            if field.alias:
                names[field.alias] = name
        return {
            names[key]: value
            for key, value in partial.items()
            if key in names and names[key] not in immutable
        }


class Locale(CamelModel):
    """Locale d'un groupe, avec sa chaîne de fallback ordonnée."""

    code: str
    name: str
    fallback: list[str] = Field(default_factory=list)
    is_default: bool = False


class VariantGroupCreate(CamelModel):
    """Données fournies à la création d'un groupe (id et dates attribués par le registre)."""

    name: str
    description: str | None = None
    locales: list[Locale] = Field(default_factory=list)


class VariantGroup(CamelModel):
    """Ensemble nommé de locales partageant une topologie de fallback."""

    id: str
    name: str
    description: str | None = None
    locales: list[Locale]
    created_at: str
    updated_at: str

    def find_locale(self, code: str) -> Locale | None:
        """Retourne la locale `code` du groupe, ou None."""
        return next((loc for loc in self.locales if loc.code == code), None)


class VariantConfig(CamelModel):
    """Contenu stocké pour une entrée, un type de contenu et une locale."""

    id: str = Field(default_factory=new_id)
    group_id: str
    entry_uid: str
    content_type_uid: str
    locale: str
    variant_param: str = ""
    content: dict[str, Any] = Field(default_factory=dict)
    fallback_chain: list[str] = Field(default_factory=list)
    is_translated: bool = False
    last_modified: str = ""

    @property
    def key(self) -> tuple[str, str, str]:
        return (self.entry_uid, self.content_type_uid, self.locale)


class BulkFailure(CamelModel):
    """Élément d'une création en masse qui n'a pas pu être créé."""

    entry_uid: str
    locale: str
    error: str


class BulkCreateResult(CamelModel):
    """Résultat explicite d'une création en masse: créés + échecs par élément."""

    created: list[VariantConfig] = Field(default_factory=list)
    failures: list[BulkFailure] = Field(default_factory=list)


class FallbackResult(CamelModel):
    """Résultat calculé (non persisté) d'une résolution de fallback."""

    content: dict[str, Any] = Field(default_factory=dict)
    used_fallback: list[str] = Field(default_factory=list)
    missing_fields: list[str] = Field(default_factory=list)
    confidence: float = 0.0


class TranslationRequest(CamelModel):
    """Demande de traduction d'un arbre de contenu."""

    source_locale: str
    target_locale: str
    content: dict[str, Any]
    content_type_uid: str | None = None
    use_ai: bool = Field(default=False, alias="useAI")
    provider: ProviderName | None = Field(
        default=None,
        validation_alias=AliasChoices("provider", "aiProvider"),
        serialization_alias="provider",
    )


class TranslationResponse(CamelModel):
    """Réponse de traduction (contenu traduit, méthode, confiance)."""

    translated_content: dict[str, Any]
    confidence: float
    method: TranslationMethod
    timestamp: str = Field(default_factory=utc_now)
    provider: str | None = None


class BatchTranslationItem(CamelModel):
    """Résultat d'un élément de lot: succès avec réponse, ou échec avec message."""

    index: int
    ok: bool
    result: TranslationResponse | None = None
    error: str | None = None
