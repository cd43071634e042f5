"""Interface de base pour les fournisseurs de traduction."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class TranslationProvider(ABC):
    """Interface abstraite: `translate(text, source, target) -> text`.

    Un fournisseur sans identifiants renvoie une traduction factice déterministe, utile en
    développement et en tests.
    """

    name: str = ""
    display_name: str = ""
    mock_label: str = ""
    models: tuple[str, ...] = ()
    features: tuple[str, ...] = ()

    @property
    @abstractmethod
    def configured(self) -> bool:
        """Vrai si le fournisseur dispose d'identifiants pour appeler l'API réelle."""
        ...

    @abstractmethod
    def translate(self, text: str, source_locale: str, target_locale: str) -> str:
        """Traduit `text` de `source_locale` vers `target_locale`."""
        ...

    def mock_translation(self, text: str, source_locale: str, target_locale: str) -> str:
        """Traduction factice: `[Mock <Nom> Translation] <texte> (<src> → <cible>)`."""
        label = self.mock_label or self.display_name
        return f"[Mock {label} Translation] {text} ({source_locale} → {target_locale})"

    def describe(self) -> dict[str, Any]:
        """Fiche du fournisseur pour le catalogue exposé par l'API."""
        return {
            "id": self.name,
            "name": self.display_name,
            "models": list(self.models),
            "features": list(self.features),
        }
