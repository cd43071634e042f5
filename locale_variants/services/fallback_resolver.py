"""Service de résolution de fallback: charge groupe et configurations puis délègue au domaine."""

from __future__ import annotations

from locale_variants.app.metrics import FALLBACK_CONFIDENCE, FALLBACK_RESOLUTIONS
from locale_variants.core.logging import get_logger
from locale_variants.domain.entities import FallbackResult
from locale_variants.domain.fallback import resolve_fallback


class FallbackResolver:
    """Résout le contenu effectif d'une entrée pour une locale cible d'un groupe.

    Les erreurs structurelles (groupe inconnu, locale absente du groupe) remontent en
    `NotFound`; l'absence de contenu donne un résultat vide de confiance 0.
    """

    def __init__(self, groups, configs):
        """Initialise le service.

        Paramètres:
        - groups: `VariantGroupService` (registre de locales).
        - configs: `VariantConfigService` (configurations stockées).
        """
        self.groups = groups
        self.configs = configs
        self._log = get_logger(__name__, "fallback_resolver")

    def resolve(
        self,
        entry_uid: str,
        content_type_uid: str,
        target_locale: str,
        variant_group_id: str,
    ) -> FallbackResult:
        """Calcule le `FallbackResult` de `target_locale` pour l'entrée donnée."""
        group = self.groups.get(variant_group_id)
        configs = self.configs.find_by_entry(entry_uid, content_type_uid)
        result = resolve_fallback(group, target_locale, configs)

        if not result.used_fallback:
            outcome = "empty"
        elif result.used_fallback == [target_locale]:
            outcome = "exact"
        else:
            outcome = "fallback"
        FALLBACK_RESOLUTIONS.labels(outcome).inc()
        FALLBACK_CONFIDENCE.observe(result.confidence)
        self._log.debug(
            "fallback_resolved",
            entry_uid=entry_uid,
            content_type_uid=content_type_uid,
            locale=target_locale,
            group_id=variant_group_id,
            outcome=outcome,
            used_fallback=result.used_fallback,
            confidence=result.confidence,
        )
        return result
