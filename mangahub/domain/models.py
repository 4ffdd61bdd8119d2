"""
Pydantic models for the content index.

This module defines all data models used throughout the package, including:
- Enumerated tag values (content types, platforms, FAQ categories)
- App, extension, FAQ and guide records as loaded from the bundled content
- Index configuration
- Query result and reference-validation models

Records are frozen and list-valued fields are tuples, so a loaded
collection cannot be modified in place.
"""

from __future__ import annotations

from typing import List, Literal, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------

ContentType = Literal["Manga", "Anime", "Light Novel"]
Platform = Literal["Android", "iOS", "Windows", "Mac", "Linux", "Web"]
FAQCategory = Literal["installation", "configuration", "extensions", "troubleshooting", "general"]
GuideIcon = Literal["download", "settings", "book", "help"]
TutorialType = Literal["video", "guide"]

CollectionName = Literal["apps", "extensions", "faqs", "guides", "guide_categories"]

COLLECTION_NAMES: Tuple[str, ...] = ("apps", "extensions", "faqs", "guides", "guide_categories")


class CamelModel(BaseModel):
    """
    Base for everything read from the bundled content.

    The JSON files use camelCase keys; attributes are snake_case. Both
    spellings are accepted on input, and unknown keys are ignored so the
    site can carry presentation-only fields.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="ignore",
    )


class ContentRecord(CamelModel):
    id: str = Field(min_length=1)


# ---------------------------------------------------------------------------
# Apps
# ---------------------------------------------------------------------------


class AppTutorial(CamelModel):
    """
    A tutorial link shown on an app's detail page.
    """

    title: str
    type: TutorialType
    url: str
    description: Optional[str] = None


class AppData(ContentRecord):
    """
    A client application entry in the directory.
    """

    name: str
    description: str
    content_types: Tuple[ContentType, ...] = Field(
        default=(),
        description="Kinds of content the app can read or stream.",
    )
    platforms: Tuple[Platform, ...] = Field(
        default=(),
        description="Operating systems the app is published for.",
    )
    supported_extensions: Tuple[str, ...] = Field(
        default=(),
        description="Extension ids this app works with.",
    )
    icon_color: str = "#6b7280"
    status: Optional[str] = None
    logo_url: Optional[str] = None
    author: Optional[str] = None
    keywords: Optional[Tuple[str, ...]] = None
    last_updated: Optional[str] = Field(
        default=None,
        description="Date shown on the detail page, kept as written.",
    )
    github_url: Optional[str] = Field(
        default=None,
        description="Repository URL, or a bare 'owner/repo' pair.",
    )
    official_site: Optional[str] = None
    discord_url: Optional[str] = None
    tutorials: Optional[Tuple[AppTutorial, ...]] = None


# ---------------------------------------------------------------------------
# Extensions
# ---------------------------------------------------------------------------


class ExtensionData(ContentRecord):
    """
    A content-source plugin repository compatible with one or more apps.
    """

    name: str
    types: Tuple[ContentType, ...] = ()
    region: str = Field(
        description="Region code of the sources, e.g. 'ALL' or 'EN'.",
    )
    supported_apps: Tuple[str, ...] = Field(
        default=(),
        description="App ids this extension repository can be installed into.",
    )
    info: Optional[str] = None
    logo_url: Optional[str] = None
    accent_color: str = "#6b7280"
    auto_url: Optional[str] = None
    manual_url: Optional[str] = None
    last_updated: Optional[str] = Field(
        default=None,
        description="Date shown on the detail page, kept as written.",
    )
    overview: Optional[str] = None
    github: Optional[str] = None
    website: Optional[str] = None
    keywords: Optional[Tuple[str, ...]] = None


# ---------------------------------------------------------------------------
# FAQs and guides
# ---------------------------------------------------------------------------


class FAQData(ContentRecord):
    question: str
    answer: str
    category: FAQCategory
    keywords: Optional[Tuple[str, ...]] = None
    related_app_ids: Optional[Tuple[str, ...]] = None


class GuideTopicData(ContentRecord):
    title: str
    slug: str
    summary: Optional[str] = None
    keywords: Optional[Tuple[str, ...]] = None
    related_app_ids: Optional[Tuple[str, ...]] = None
    related_extension_ids: Optional[Tuple[str, ...]] = None


class GuideCategoryData(ContentRecord):
    """
    A named group of guides. Guide order within the category is the
    display order.
    """

    title: str
    description: str = ""
    color: str = "#6b7280"
    icon: GuideIcon = "book"
    guides: Tuple[GuideTopicData, ...] = ()


# ---------------------------------------------------------------------------
# Loaded content
# ---------------------------------------------------------------------------


class ContentCollections(BaseModel):
    """
    The four collections as loaded from the content files, in source order.
    """

    model_config = ConfigDict(frozen=True)

    apps: Tuple[AppData, ...] = ()
    extensions: Tuple[ExtensionData, ...] = ()
    faqs: Tuple[FAQData, ...] = ()
    guide_categories: Tuple[GuideCategoryData, ...] = ()


class ContentIndexConfig(BaseModel):
    """
    Settings for loading the content index.

    Read from: <DATA_DIR>/index.json (optional)
    """

    apps_file: str = Field(
        default="apps",
        description="Base name of the apps file (.json, .yaml or .yml).",
    )
    extensions_file: str = Field(
        default="extensions",
        description="Base name of the extensions file.",
    )
    faqs_file: str = Field(
        default="faqs",
        description="Base name of the FAQs file.",
    )
    guides_file: str = Field(
        default="guides",
        description="Base name of the guide categories file.",
    )
    validate_references_on_load: bool = Field(
        default=True,
        description="Log stale and one-sided cross-references after loading.",
    )


# ---------------------------------------------------------------------------
# Query results
# ---------------------------------------------------------------------------


class SearchResults(BaseModel):
    """
    Result of a free-text search, one independently filtered list per collection.
    """

    apps: List[AppData] = Field(default_factory=list)
    extensions: List[ExtensionData] = Field(default_factory=list)
    faqs: List[FAQData] = Field(default_factory=list)
    guides: List[GuideTopicData] = Field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.apps) + len(self.extensions) + len(self.faqs) + len(self.guides)


class ContentStats(BaseModel):
    """
    Record counts shown on the home page. Guides are counted across all categories.
    """

    apps: int = 0
    extensions: int = 0
    faqs: int = 0
    guides: int = 0
    guide_categories: int = 0


class StaleReference(BaseModel):
    """
    An id in a relationship list that matches no record in the target collection.
    """

    source_collection: str
    source_id: str
    field: str
    missing_id: str


class AsymmetricReference(BaseModel):
    """
    An app/extension link recorded on only one side.

    ``declared_by`` names the collection whose record holds the reference.
    """

    app_id: str
    extension_id: str
    declared_by: Literal["apps", "extensions"]


class ReferenceReport(BaseModel):
    stale: List[StaleReference] = Field(default_factory=list)
    asymmetric: List[AsymmetricReference] = Field(default_factory=list)

    @property
    def is_clean(self) -> bool:
        return not self.stale and not self.asymmetric
