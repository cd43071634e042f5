"""Génération du paramètre de variante (clé d'adressage d'une variante livrée)."""

from __future__ import annotations

from collections.abc import Sequence

VARIANT_PARAM_SEPARATOR = "_"


def generate_variant_param(locale: str, fallback_chain: Sequence[str]) -> str:
    """Concatène la locale et sa chaîne de fallback: `("mr", ["hi", "en"])` -> `"mr_hi_en"`."""
    return VARIANT_PARAM_SEPARATOR.join([locale, *fallback_chain])
