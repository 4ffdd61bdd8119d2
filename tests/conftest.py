from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List

import pytest  # type: ignore[import-not-found]

from mangahub.domain.entities import ContentIndex
from mangahub.domain.models import (
    AppData,
    ContentCollections,
    ExtensionData,
    FAQData,
    GuideCategoryData,
)


APPS: List[Dict[str, Any]] = [
    {
        "id": "a1",
        "name": "Alpha Reader",
        "description": "Reads MANGA offline",
        "contentTypes": ["Manga"],
        "platforms": ["Android", "Windows"],
        "supportedExtensions": ["e1", "gone"],
        "keywords": ["discord", "offline"],
    },
    {
        "id": "a2",
        "name": "Beta Player",
        "description": "Streams anime",
        "contentTypes": ["Anime", "Manga"],
        "platforms": ["Android"],
        "supportedExtensions": ["e2"],
    },
    {
        "id": "a3",
        "name": "Gamma",
        "description": "Novel reader for iOS",
        "contentTypes": ["Light Novel"],
        "platforms": ["iOS"],
        "supportedExtensions": [],
    },
]

EXTENSIONS: List[Dict[str, Any]] = [
    {
        "id": "e1",
        "name": "Source Pack",
        "info": "Manga sources in every language",
        "types": ["Manga"],
        "region": "ALL",
        "supportedApps": ["a1", "a3"],
    },
    {
        "id": "e2",
        "name": "Anime Pack",
        "types": ["Anime"],
        "region": "EN",
        "supportedApps": ["a2"],
        "keywords": ["stream"],
    },
]

FAQS: List[Dict[str, Any]] = [
    {
        "id": "f1",
        "question": "How do I install?",
        "answer": "Download the APK.",
        "category": "installation",
        "relatedAppIds": ["a1", "a2"],
    },
    {
        "id": "f2",
        "question": "Where is the Discord?",
        "answer": "Linked on each app page.",
        "category": "general",
    },
]

GUIDE_CATEGORIES: List[Dict[str, Any]] = [
    {
        "id": "start",
        "title": "Getting started",
        "icon": "download",
        "guides": [
            {
                "id": "g1",
                "title": "Install Alpha",
                "slug": "install-alpha",
                "relatedAppIds": ["a1"],
                "relatedExtensionIds": ["e1", "missing-ext"],
            },
        ],
    },
    {
        "id": "config",
        "title": "Configuration",
        "icon": "settings",
        "guides": [
            {
                "id": "g2",
                "title": "Backups",
                "slug": "backups",
                "summary": "Keep a copy of your library",
                "keywords": ["restore"],
                "relatedAppIds": ["a1", "a2"],
            },
            {"id": "g3", "title": "Themes", "slug": "themes"},
        ],
    },
]


def make_collections(
    apps: List[Dict[str, Any]] = APPS,
    extensions: List[Dict[str, Any]] = EXTENSIONS,
    faqs: List[Dict[str, Any]] = FAQS,
    guide_categories: List[Dict[str, Any]] = GUIDE_CATEGORIES,
) -> ContentCollections:
    return ContentCollections(
        apps=tuple(AppData.model_validate(a) for a in apps),
        extensions=tuple(ExtensionData.model_validate(e) for e in extensions),
        faqs=tuple(FAQData.model_validate(f) for f in faqs),
        guide_categories=tuple(GuideCategoryData.model_validate(c) for c in guide_categories),
    )


@pytest.fixture
def collections() -> ContentCollections:
    return make_collections()


@pytest.fixture
def index(collections: ContentCollections) -> ContentIndex:
    return ContentIndex(collections)


@pytest.fixture
def content_dir(tmp_path: Path) -> Path:
    """A data directory holding the sample collections as JSON files."""
    (tmp_path / "apps.json").write_text(json.dumps(APPS), encoding="utf-8")
    (tmp_path / "extensions.json").write_text(json.dumps(EXTENSIONS), encoding="utf-8")
    (tmp_path / "faqs.json").write_text(json.dumps(FAQS), encoding="utf-8")
    (tmp_path / "guides.json").write_text(json.dumps(GUIDE_CATEGORIES), encoding="utf-8")
    return tmp_path
