"""
Read-only content index for the manga/anime app directory.

This package is responsible for:
* Loading the bundled apps, extensions, FAQs and guides.
* Looking records up by id and following their cross-references.
* Filtering and free-text search over the loaded collections.
* Display helpers for app pages and the home page stats.
"""

from mangahub.core.dependencies import build_content_index
from mangahub.domain.app_utils import author_info, format_count, github_owner, status_label
from mangahub.domain.entities import ContentIndex

__all__ = [
    "ContentIndex",
    "author_info",
    "build_content_index",
    "format_count",
    "github_owner",
    "status_label",
]
