from abc import ABC, abstractmethod
from typing import List

from mangahub.domain.models import (
    AppData,
    ContentCollections,
    ExtensionData,
    FAQData,
    GuideCategoryData,
)


class ContentLoadError(Exception):
    """
    A content file exists but cannot be used (unparsable, or not a list of records).
    """


class ContentSource(ABC):
    """
    Abstract base class for where the content collections come from.
    """

    @abstractmethod
    def load_apps(self) -> List[AppData]:
        """Load the apps collection in source order."""
        pass

    @abstractmethod
    def load_extensions(self) -> List[ExtensionData]:
        """Load the extensions collection in source order."""
        pass

    @abstractmethod
    def load_faqs(self) -> List[FAQData]:
        """Load the FAQ collection in source order."""
        pass

    @abstractmethod
    def load_guide_categories(self) -> List[GuideCategoryData]:
        """Load guide categories, each with its ordered guides."""
        pass

    def load(self) -> ContentCollections:
        return ContentCollections(
            apps=tuple(self.load_apps()),
            extensions=tuple(self.load_extensions()),
            faqs=tuple(self.load_faqs()),
            guide_categories=tuple(self.load_guide_categories()),
        )
