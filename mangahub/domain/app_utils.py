import logging
import re
from typing import Dict, Optional, Tuple
from urllib.parse import urlparse

from mangahub.domain.models import AppData

logger = logging.getLogger(__name__)

STATUS_LABELS: Dict[str, str] = {
    "active": "Active",
    "discontinued": "Discontinued",
    "abandoned": "Abandoned",
    "suspended": "Suspended",
    "dmca": "DMCA",
    "dead": "Dead",
}


def status_label(status: str) -> str:
    """
    Human-readable label for an app status.

    Known statuses use a fixed label; anything else has '_' and '-' turned
    into spaces and each word capitalised ("on_hold" -> "On Hold").
    """
    normalized = status.strip().lower()
    if normalized in STATUS_LABELS:
        return STATUS_LABELS[normalized]

    text = re.sub(r"\s+", " ", re.sub(r"[_-]", " ", status)).strip()
    return re.sub(r"\b\w", lambda m: m.group(0).upper(), text, flags=re.ASCII)


def github_owner(github_url: Optional[str]) -> Optional[str]:
    """
    Extract the owner from a GitHub URL or a bare "owner/repo" value.
    """
    if github_url is None or not github_url.strip():
        return None

    if not github_url.startswith("http"):
        owner = github_url.split("/")[0]
        return owner or None

    try:
        path = urlparse(github_url).path
    except ValueError as e:
        logger.warning(f"Failed to parse GitHub URL '{github_url}': {e}")
        return None
    parts = [p for p in path.split("/") if p]
    return parts[0] if parts else None


def author_info(app: AppData) -> Optional[Tuple[str, Optional[str]]]:
    """
    (name, url) credited on an app's page, or None when nothing is known.

    An explicit author is linked to the GitHub owner's profile, falling back
    to the official site. Without an author, the GitHub owner is credited.
    """
    owner = github_owner(app.github_url)
    owner_url = f"https://github.com/{owner}" if owner is not None else None

    if app.author is not None:
        return app.author, owner_url or app.official_site
    if owner is not None:
        return owner, owner_url
    return None


def format_count(value: int) -> str:
    """
    Compact count for the home page stats: 42 -> "42+", 1200 -> "1.2k+", 2000 -> "2k+".
    """
    if value >= 1000:
        if value % 1000 == 0:
            formatted = str(value // 1000)
        else:
            formatted = f"{value / 1000:.1f}"
            if formatted.endswith(".0"):
                formatted = formatted[:-2]
        return f"{formatted}k+"
    return f"{value}+"
