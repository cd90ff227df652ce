"""Simple two-language (ko/en) translation helper for UI labels."""

_STRINGS: dict[str, dict[str, str]] = {
    "page_title": {
        "ko": "스카이톤",
        "en": "SkyTone",
    },
    "card_location": {
        "ko": "현재 위치",
        "en": "Your Location",
    },
    "card_sunset": {
        "ko": "일몰 & 박명",
        "en": "Sunset & Twilight",
    },
    "btn_refresh": {
        "ko": "새로고침",
        "en": "Refresh Data",
    },
}


def t(key: str, lang: str) -> str:
    """Return the translated string for key in lang.

    Falls back to 'en', then to the key itself if not found.
    """
    entry = _STRINGS.get(key)
    if entry is None:
        return key
    return entry.get(lang) or entry.get("en") or key
