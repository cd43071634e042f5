"""Catalogue des langues prises en charge et détection heuristique de langue.

La détection heuristique teste le texte contre des jeux de caractères, dans un ordre fixe:
latin simple d'abord (tout texte contenant une lettre ASCII est donc "en"), puis latin
accentué, puis écritures non latines. Aucun motif reconnu -> "en".
"""

from __future__ import annotations

import re

DEFAULT_LANGUAGE = "en"

SUPPORTED_LANGUAGES: list[dict[str, str]] = [
    {"code": "en", "name": "English", "nativeName": "English"},
    {"code": "es", "name": "Spanish", "nativeName": "Español"},
    {"code": "fr", "name": "French", "nativeName": "Français"},
    {"code": "de", "name": "German", "nativeName": "Deutsch"},
    {"code": "it", "name": "Italian", "nativeName": "Italiano"},
    {"code": "pt", "name": "Portuguese", "nativeName": "Português"},
    {"code": "ru", "name": "Russian", "nativeName": "Русский"},
    {"code": "zh", "name": "Chinese", "nativeName": "中文"},
    {"code": "ja", "name": "Japanese", "nativeName": "日本語"},
    {"code": "ko", "name": "Korean", "nativeName": "한국어"},
    {"code": "ar", "name": "Arabic", "nativeName": "العربية"},
    {"code": "hi", "name": "Hindi", "nativeName": "हिन्दी"},
    {"code": "mr", "name": "Marathi", "nativeName": "मराठी"},
    {"code": "bn", "name": "Bengali", "nativeName": "বাংলা"},
    {"code": "ta", "name": "Tamil", "nativeName": "தமிழ்"},
    {"code": "te", "name": "Telugu", "nativeName": "తెలుగు"},
    {"code": "ml", "name": "Malayalam", "nativeName": "മലയാളം"},
    {"code": "kn", "name": "Kannada", "nativeName": "ಕನ್ನಡ"},
    {"code": "gu", "name": "Gujarati", "nativeName": "ગુજરાતી"},
    {"code": "pa", "name": "Punjabi", "nativeName": "ਪੰਜਾਬੀ"},
]

# Ordre significatif: le premier motif trouvé l'emporte.
LANGUAGE_PATTERNS: tuple[tuple[str, re.Pattern[str]], ...] = (
    ("en", re.compile(r"[a-zA-Z]")),
    ("es", re.compile(r"[ñáéíóúü]")),
    ("fr", re.compile(r"[àâäéèêëïîôöùûüÿç]")),
    ("de", re.compile(r"[äöüß]")),
    ("it", re.compile(r"[àèéìíîòóù]")),
    ("pt", re.compile(r"[ãõáéíóú]")),
    ("ru", re.compile(r"[а-яё]")),
    ("zh", re.compile(r"[\u4e00-\u9fff]")),
    ("ja", re.compile(r"[\u3040-\u309f\u30a0-\u30ff]")),
    ("ko", re.compile(r"[\uac00-\ud7af]")),
    ("ar", re.compile(r"[\u0600-\u06ff]")),
    ("hi", re.compile(r"[\u0900-\u097f]")),
)


def detect_language_heuristic(text: str) -> str:
    """Retourne le premier code dont le motif apparaît dans `text`, sinon "en"."""
    for code, pattern in LANGUAGE_PATTERNS:
        if pattern.search(text or ""):
            return code
    return DEFAULT_LANGUAGE
