"""
Fournisseur de traduction basé sur l'API chat.completions (SDK OpenAI).

Sert aussi pour Groq, dont l'API est compatible OpenAI (base_url dédiée). Sans clé API, renvoie
une traduction factice déterministe.
"""

from __future__ import annotations

from openai import OpenAI

from locale_variants.infra.translation.base import TranslationProvider

TRANSLATION_PROMPT = (
    "You are a professional translator. Translate the following text from {source} to {target}. "
    "Maintain the original structure, formatting, and meaning. "
    "Return only the translated text without any explanations."
)
DETECTION_PROMPT = (
    "You are a language detection expert. Identify the language of the given text and return "
    'only the ISO 639-1 language code (e.g., "en", "es", "fr").'
)
DETECTION_MAX_TOKENS = 10
DETECTION_TEMPERATURE = 0.1


class OpenAIChatProvider(TranslationProvider):
    """
    Traduction via chat.completions.

    Le prompt système impose de conserver la structure du texte, ce qui préserve les
    séparateurs de segments utilisés par la passerelle de traduction.
    """

    def __init__(
        self,
        *,
        name: str = "openai",
        display_name: str = "OpenAI GPT",
        mock_label: str = "OpenAI",
        api_key: str | None = None,
        model: str = "gpt-3.5-turbo",
        base_url: str | None = None,
        temperature: float = 0.3,
        max_tokens: int = 2000,
        models: tuple[str, ...] = ("gpt-3.5-turbo", "gpt-4", "gpt-4-turbo"),
        features: tuple[str, ...] = ("high-quality", "context-aware", "multiple-languages"),
    ) -> None:
        """Initialise le client (aucun client si la clé est absente)."""
        self.name = name
        self.display_name = display_name
        self.mock_label = mock_label
        self.model = model
        self.temperature = temperature
        self.max_tokens = max_tokens
        self.models = models
        self.features = features
        self.client = OpenAI(api_key=api_key, base_url=base_url) if api_key else None

    @property
    def configured(self) -> bool:
        return self.client is not None

    def translate(self, text: str, source_locale: str, target_locale: str) -> str:
        """Traduit `text`; les erreurs du SDK remontent à l'appelant."""
        if self.client is None:
            return self.mock_translation(text, source_locale, target_locale)
        prompt = TRANSLATION_PROMPT.format(source=source_locale, target=target_locale)
        return self._complete(
            [
                {"role": "system", "content": prompt},
                {"role": "user", "content": text},
            ],
            temperature=self.temperature,
            max_tokens=self.max_tokens,
        )

    def detect_language(self, text: str) -> str:
        """Retourne le code ISO 639-1 proposé par le modèle (chaîne vide si aucun)."""
        if self.client is None:
            raise RuntimeError(f"{self.name} provider is not configured")
        answer = self._complete(
            [
                {"role": "system", "content": DETECTION_PROMPT},
                {"role": "user", "content": text},
            ],
            temperature=DETECTION_TEMPERATURE,
            max_tokens=DETECTION_MAX_TOKENS,
        )
        return answer.strip()

    def _complete(
        self, messages: list[dict[str, str]], *, temperature: float, max_tokens: int
    ) -> str:
        resp = self.client.chat.completions.create(  # type: ignore[union-attr]
            model=self.model,
            messages=messages,
            temperature=temperature,
            max_tokens=max_tokens,
        )
        choice = resp.choices[0] if resp.choices else None
        content = getattr(getattr(choice, "message", None), "content", None)
        return str(content) if content else ""
