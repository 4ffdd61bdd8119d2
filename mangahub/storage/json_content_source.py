import json
import logging
from pathlib import Path
from typing import Any, List, Optional, Set, Type, TypeVar

import yaml
from pydantic import ValidationError

from mangahub.domain.models import (
    AppData,
    ContentIndexConfig,
    ContentRecord,
    ExtensionData,
    FAQData,
    GuideCategoryData,
)
from mangahub.storage.content_source import ContentLoadError, ContentSource

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT", bound=ContentRecord)

# Checked in this order; the first existing file wins.
CONTENT_SUFFIXES = (".json", ".yaml", ".yml")


class JsonContentSource(ContentSource):
    """
    Loads each collection from a file in the data directory.

    Files are JSON arrays of records (YAML lists are accepted too). A missing
    file gives an empty collection. Records that fail validation, and records
    repeating an earlier id, are skipped with a warning.
    """

    def __init__(self, data_dir: Path, config: Optional[ContentIndexConfig] = None):
        self._data_dir = data_dir
        self._config = config or ContentIndexConfig()

    def load_apps(self) -> List[AppData]:
        return self._load_collection(self._config.apps_file, AppData)

    def load_extensions(self) -> List[ExtensionData]:
        return self._load_collection(self._config.extensions_file, ExtensionData)

    def load_faqs(self) -> List[FAQData]:
        return self._load_collection(self._config.faqs_file, FAQData)

    def load_guide_categories(self) -> List[GuideCategoryData]:
        categories = self._load_collection(self._config.guides_file, GuideCategoryData)

        # Guide ids must be unique across all categories, not just within one.
        seen: Set[str] = set()
        result: List[GuideCategoryData] = []
        for category in categories:
            guides = []
            for guide in category.guides:
                if guide.id in seen:
                    logger.warning(
                        f"Skipping duplicate guide id '{guide.id}' in category '{category.id}'"
                    )
                    continue
                seen.add(guide.id)
                guides.append(guide)
            if len(guides) != len(category.guides):
                category = category.model_copy(update={"guides": tuple(guides)})
            result.append(category)
        return result

    def _find_file(self, base_name: str) -> Optional[Path]:
        for suffix in CONTENT_SUFFIXES:
            path = self._data_dir / f"{base_name}{suffix}"
            if path.is_file():
                return path
        return None

    def _read_raw(self, path: Path) -> Any:
        text = path.read_text(encoding="utf-8")
        try:
            if path.suffix == ".json":
                return json.loads(text)
            return yaml.safe_load(text)
        except (json.JSONDecodeError, yaml.YAMLError) as e:
            raise ContentLoadError(f"Cannot parse {path}: {e}") from e

    def _load_collection(self, base_name: str, model: Type[RecordT]) -> List[RecordT]:
        path = self._find_file(base_name)
        if path is None:
            logger.warning(f"No content file for '{base_name}' in {self._data_dir}; using an empty collection")
            return []

        raw = self._read_raw(path)
        if raw is None:
            # An empty YAML document.
            raw = []
        if not isinstance(raw, list):
            raise ContentLoadError(f"{path} must contain a list of records, got {type(raw).__name__}")

        records: List[RecordT] = []
        seen: Set[str] = set()
        for position, item in enumerate(raw):
            try:
                record = model.model_validate(item)
            except ValidationError as e:
                logger.warning(f"Skipping invalid record #{position} in {path.name}: {e}")
                continue
            if record.id in seen:
                logger.warning(f"Skipping duplicate id '{record.id}' in {path.name}")
                continue
            seen.add(record.id)
            records.append(record)

        logger.info(f"Loaded {len(records)} record(s) from {path.name}")
        return records
