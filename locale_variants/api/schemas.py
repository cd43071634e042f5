# Schémas Pydantic exposés par l'API (requêtes et réponses).

from __future__ import annotations

from typing import Annotated, Any

from pydantic import Field

from locale_variants.domain.entities import CamelModel, ProviderName, TranslationRequest

LocaleCode = Annotated[str, Field(min_length=2, max_length=10)]


class LocaleIn(CamelModel):
    """Locale d'un groupe.

    Champs:
    - code: str (2 à 10 caractères, ex. "mr", "en-US")
    - name: str (1 à 50 caractères)
    - fallback: list[str] (codes de repli, du plus proche au plus lointain)
    - isDefault: bool
    """

    code: str = Field(min_length=2, max_length=10)
    name: str = Field(min_length=1, max_length=50)
    fallback: list[str] = Field(default_factory=list)
    is_default: bool = False


class VariantGroupIn(CamelModel):
    """Création d'un groupe de variantes (au moins une locale)."""

    name: str = Field(min_length=1, max_length=100)
    description: str | None = Field(default=None, max_length=500)
    locales: list[LocaleIn] = Field(min_length=1)


class VariantGroupUpdate(CamelModel):
    """Mise à jour partielle d'un groupe: seuls les champs fournis sont fusionnés."""

    name: str | None = Field(default=None, min_length=1, max_length=100)
    description: str | None = Field(default=None, max_length=500)
    locales: list[LocaleIn] | None = Field(default=None, min_length=1)


class VariantConfigIn(CamelModel):
    """Création d'une configuration pour un triplet (entrée, type de contenu, locale)."""

    group_id: str = Field(min_length=1)
    entry_uid: str = Field(min_length=1)
    content_type_uid: str = Field(min_length=1)
    locale: LocaleCode
    content: dict[str, Any] = Field(default_factory=dict)
    fallback_chain: list[str] = Field(default_factory=list)
    variant_param: str = ""
    is_translated: bool = False


class VariantConfigUpdate(CamelModel):
    """Mise à jour partielle d'une configuration existante."""

    content: dict[str, Any] | None = None
    fallback_chain: list[str] | None = None
    variant_param: str | None = None
    is_translated: bool | None = None


class BulkVariantIn(CamelModel):
    """Création en masse: une configuration vide par couple (entrée × locale du groupe)."""

    content_type_uid: str = Field(min_length=1)
    entry_uids: list[str] = Field(min_length=1)
    variant_group_id: str = Field(min_length=1)
    locales: list[str] = Field(min_length=1)


class VariantParamIn(CamelModel):
    locale: LocaleCode
    fallback_chain: list[str] = Field(default_factory=list)


class VariantParamOut(CamelModel):
    variant_param: str


class TranslateIn(TranslationRequest):
    """Demande de traduction validée (`aiProvider` accepté comme alias de `provider`)."""

    source_locale: LocaleCode
    target_locale: LocaleCode
    content_type_uid: str = Field(min_length=1)


class BatchAIConfig(CamelModel):
    """Fournisseur imposé à toutes les demandes d'un lot."""

    provider: ProviderName


class BatchTranslateIn(CamelModel):
    requests: list[TranslateIn] = Field(min_length=1, max_length=10)
    ai_config: BatchAIConfig | None = None


class DetectLanguageIn(CamelModel):
    text: str = Field(min_length=1, max_length=10000)


class DetectLanguageOut(CamelModel):
    language: str
