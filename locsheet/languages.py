from typing import Dict, Tuple

# Supported languages of the game string resource (code -> display name)
SUPPORTED_LANGUAGES: Dict[str, str] = {
    "en": "English",
    "de": "German",
    "es": "Spanish",
    "fr": "French",
    "it": "Italian",
    "br": "Portuguese (Brazil)",
    "ru": "Russian",
}

# Canonical order, used for every export and listing
CSV_LANGUAGE_ORDER: Tuple[str, ...] = ("en", "de", "es", "fr", "it", "br", "ru")

# CSV header label -> language code (exact, after trim)
CSV_COLUMN_MAP: Dict[str, str] = {
    "EN": "en",
    "DE": "de",
    "ES": "es",
    "FR": "fr",
    "IT": "it",
    "BR PT": "br",
    "RU": "ru",
}

CSV_CONTEXT_MARKER = "CONTEXT"
CSV_CONTEXT_HEADER = "CONTEXT – PLEASE, LOOK HERE FOR SPECIFICATIONS"


def csv_label(lang: str) -> str:
    for label, code in CSV_COLUMN_MAP.items():
        if code == lang:
            return label
    raise KeyError(lang)


def language_label(lang: str) -> str:
    """
    一覧表示用のラベル（例: "EN - English"）
    """
    return f"{lang.upper()} - {SUPPORTED_LANGUAGES[lang]}"
