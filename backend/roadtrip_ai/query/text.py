import unicodedata


def strip_diacritics(value: str) -> str:
    decomposed = unicodedata.normalize("NFD", value)
    return "".join(ch for ch in decomposed if not unicodedata.combining(ch))


def normalize(value: str) -> str:
    """Accent-free, lowercase form used by every keyword and regex check."""
    return strip_diacritics(value).lower()
