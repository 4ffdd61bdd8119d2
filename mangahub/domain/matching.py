from typing import Iterable, Optional


def match_text(value: Optional[str], keyword: str) -> bool:
    """
    Case-insensitive substring match of a keyword against a single value.

    A missing value never matches. An empty keyword matches every present value.
    """
    if value is None:
        return False
    return keyword.lower() in value.lower()


def match_any(values: Iterable[Optional[str]], keyword: str) -> bool:
    for value in values:
        if match_text(value, keyword):
            return True
    return False


def match_keywords(keywords: Optional[Iterable[str]], keyword: str) -> bool:
    if keywords is None:
        return False
    return match_any(keywords, keyword)
