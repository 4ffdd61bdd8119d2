import json
import logging
import os
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from mangahub.domain.entities import ContentIndex
from mangahub.domain.models import ContentIndexConfig
from mangahub.storage.json_content_source import JsonContentSource

logger = logging.getLogger(__name__)

DATA_ROOT_ENV_VAR = "MANGAHUB_DATA_DIR"
CONFIG_FILE_NAME = "index.json"

# Content bundled with the package
_DEFAULT_DATA_DIR = Path(__file__).resolve().parents[1] / "content"


def get_data_dir() -> Path:
    """
    Determine the content directory.

    Priority:
    1. Environment variable MANGAHUB_DATA_DIR
    2. The content bundled with the package
    """
    env_path = os.environ.get(DATA_ROOT_ENV_VAR)
    if env_path:
        return Path(env_path).expanduser()
    return _DEFAULT_DATA_DIR


def load_config(data_dir: Path) -> ContentIndexConfig:
    """
    Read index.json from the data directory, falling back to defaults when it
    is missing or unusable. The file is never written.
    """
    path = data_dir / CONFIG_FILE_NAME
    if not path.is_file():
        return ContentIndexConfig()
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
        return ContentIndexConfig.model_validate(raw)
    except (json.JSONDecodeError, ValidationError) as e:
        logger.warning(f"Ignoring invalid {path}: {e}")
        return ContentIndexConfig()


def build_content_index(
    data_dir: Optional[Path] = None,
    config: Optional[ContentIndexConfig] = None,
) -> ContentIndex:
    """
    Load the content collections and wrap them in a new ContentIndex.

    Each call builds an independent index; the caller owns it.
    """
    if data_dir is None:
        data_dir = get_data_dir()
    if config is None:
        config = load_config(data_dir)

    collections = JsonContentSource(data_dir, config).load()
    index = ContentIndex(collections)
    logger.info(
        f"Content index built from {data_dir}: {len(collections.apps)} apps, "
        f"{len(collections.extensions)} extensions, {len(collections.faqs)} FAQs, "
        f"{len(index.all_guides())} guides"
    )

    if config.validate_references_on_load:
        report = index.validate_references()
        for ref in report.stale:
            logger.warning(
                f"Stale reference: {ref.source_collection}/{ref.source_id}.{ref.field} -> '{ref.missing_id}'"
            )
        for ref in report.asymmetric:
            logger.warning(
                f"One-sided link between app '{ref.app_id}' and extension '{ref.extension_id}' "
                f"(declared only by {ref.declared_by})"
            )

    return index
