"""Résolution de fallback entre locales d'un groupe de variantes.

Objectif du module
------------------
- Choisir, parmi les configurations stockées d'une entrée, celle à servir pour une locale cible.
- Calculer la portion de chaîne effectivement parcourue, les champs manquants et la confiance.

Fonctions pures, sans I/O: le chargement des groupes et configurations est fait par
`locale_variants.services.fallback_resolver.FallbackResolver`.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from locale_variants.domain.entities import FallbackResult, VariantConfig, VariantGroup
from locale_variants.domain.errors import NotFound

EXACT_CONFIDENCE = 1.0
CONFIDENCE_STEP = 0.2
MIN_FALLBACK_CONFIDENCE = 0.1


def select_best_config(
    candidates: Sequence[VariantConfig], target_locale: str, fallback_chain: Sequence[str]
) -> VariantConfig:
    """Sélectionne la configuration à servir.

    Priorité:
    1. correspondance exacte sur la locale cible;
    2. la locale la plus tôt dans la chaîne de fallback (premier rencontré en cas d'égalité);
    3. le premier candidat restant.
    """
    exact = next((c for c in candidates if c.locale == target_locale), None)
    if exact is not None:
        return exact
    in_chain = [c for c in candidates if c.locale in fallback_chain]
    if in_chain:
        return min(in_chain, key=lambda c: fallback_chain.index(c.locale))
    return candidates[0]


def fallback_confidence(selected_locale: str, target_locale: str, used_fallback: Sequence[str]) -> float:
    """1.0 en correspondance exacte, sinon -0.2 par saut, plancher à 0.1."""
    if selected_locale == target_locale:
        return EXACT_CONFIDENCE
    hops = len(used_fallback) - 1
    return max(MIN_FALLBACK_CONFIDENCE, EXACT_CONFIDENCE - hops * CONFIDENCE_STEP)


def most_complete_config(candidates: Sequence[VariantConfig]) -> VariantConfig:
    """Configuration ayant le plus de champs de premier niveau (première en cas d'égalité)."""
    return max(candidates, key=lambda c: len(c.content))


def resolve_fallback(
    group: VariantGroup, target_locale: str, configs: Iterable[VariantConfig]
) -> FallbackResult:
    """Calcule le contenu effectif de `target_locale` à partir des configurations stockées.

    Lève `NotFound` si la locale n'appartient pas au groupe. L'absence de données n'est pas
    une erreur: un résultat vide de confiance 0 est renvoyé.
    """
    locale = group.find_locale(target_locale)
    if locale is None:
        raise NotFound(
            f"Locale {target_locale} not found in variant group",
            details={"group_id": group.id, "locale": target_locale},
        )

    fallback_chain = list(locale.fallback)
    all_locales = [target_locale, *fallback_chain]
    candidates = [c for c in configs if c.locale in all_locales]
    if not candidates:
        return FallbackResult(content={}, used_fallback=[], missing_fields=[], confidence=0.0)

    best = select_best_config(candidates, target_locale, fallback_chain)
    if best.locale == target_locale:
        used_fallback = [target_locale]
    else:
        used_fallback = all_locales[: all_locales.index(best.locale) + 1]

    reference = most_complete_config(candidates)
    missing_fields = [field for field in reference.content if field not in best.content]

    return FallbackResult(
        content=best.content,
        used_fallback=used_fallback,
        missing_fields=missing_fields,
        confidence=fallback_confidence(best.locale, target_locale, used_fallback),
    )
