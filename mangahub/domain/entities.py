from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple

from mangahub.domain.models import (
    COLLECTION_NAMES,
    AppData,
    AsymmetricReference,
    ContentCollections,
    ContentStats,
    ExtensionData,
    FAQData,
    GuideCategoryData,
    GuideTopicData,
    ReferenceReport,
    SearchResults,
    StaleReference,
)
from mangahub.domain.matching import match_any, match_keywords

# (source collection, id-list field, target collection), in resolution order.
RELATIONS: Tuple[Tuple[str, str, str], ...] = (
    ("apps", "supported_extensions", "extensions"),
    ("extensions", "supported_apps", "apps"),
    ("faqs", "related_app_ids", "apps"),
    ("guides", "related_app_ids", "apps"),
    ("guides", "related_extension_ids", "extensions"),
)


class ContentIndex:
    """
    Read-only query layer over the loaded content collections.

    Built once from a ContentCollections and owned by the caller. Every
    query is a pure function of the collections; nothing is cached or
    modified after construction.
    """

    def __init__(self, collections: ContentCollections):
        self.collections = collections

        guides: List[GuideTopicData] = []
        guide_category: Dict[str, GuideCategoryData] = {}
        for category in collections.guide_categories:
            for guide in category.guides:
                guides.append(guide)
                guide_category.setdefault(guide.id, category)

        self._records: Dict[str, Tuple[Any, ...]] = {
            "apps": collections.apps,
            "extensions": collections.extensions,
            "faqs": collections.faqs,
            "guides": tuple(guides),
            "guide_categories": collections.guide_categories,
        }
        # First record wins when an id repeats, matching a front-to-back scan.
        self._by_id: Dict[str, Dict[str, Any]] = {}
        for name, records in self._records.items():
            lookup: Dict[str, Any] = {}
            for record in records:
                lookup.setdefault(record.id, record)
            self._by_id[name] = lookup
        self._guide_category = guide_category

    # ------------------------------------------------------------------
    # Generic access
    # ------------------------------------------------------------------

    def stats(self) -> ContentStats:
        return ContentStats(
            apps=len(self.collections.apps),
            extensions=len(self.collections.extensions),
            faqs=len(self.collections.faqs),
            guides=len(self._records["guides"]),
            guide_categories=len(self.collections.guide_categories),
        )

    def records(self, collection: str) -> Tuple[Any, ...]:
        if collection not in self._records:
            raise ValueError(
                f"Unknown collection '{collection}'; expected one of {', '.join(COLLECTION_NAMES)}"
            )
        return self._records[collection]

    def get_by_id(self, collection: str, record_id: str) -> Optional[Any]:
        """
        Return the record with the given id, or None when the collection has none.
        """
        self.records(collection)
        return self._by_id[collection].get(record_id)

    def get_by_attribute(self, collection: str, predicate: Callable[[Any], bool]) -> List[Any]:
        """
        Return every record of a collection satisfying predicate, in source order.
        """
        return [record for record in self.records(collection) if predicate(record)]

    def get_related(
        self,
        source_id: str,
        collection: str,
        relation_field: Optional[str] = None,
        source: Optional[str] = None,
    ) -> List[Any]:
        """
        Resolve the id list stored on a record into records of ``collection``.

        The relation is picked from RELATIONS: those targeting ``collection``,
        narrowed by ``relation_field`` and ``source`` when given. The first
        candidate whose source collection holds ``source_id`` is used.

        Results follow the stored id order. Ids that no longer resolve are
        skipped; an unknown source id gives an empty list.
        """
        self.records(collection)
        candidates = [
            (src, field)
            for src, field, target in RELATIONS
            if target == collection
            and (relation_field is None or field == relation_field)
            and (source is None or src == source)
        ]
        if not candidates:
            raise ValueError(
                f"No relation into '{collection}'"
                + (f" via '{relation_field}'" if relation_field else "")
                + (f" from '{source}'" if source else "")
            )

        for src, field in candidates:
            record = self._by_id[src].get(source_id)
            if record is None:
                continue
            return self._resolve(getattr(record, field), collection)
        return []

    def _resolve(self, ids: Optional[Sequence[str]], collection: str) -> List[Any]:
        if ids is None:
            return []
        lookup = self._by_id[collection]
        resolved = []
        for record_id in ids:
            record = lookup.get(record_id)
            if record is not None:
                resolved.append(record)
        return resolved

    # ------------------------------------------------------------------
    # Apps
    # ------------------------------------------------------------------

    def get_app(self, app_id: str) -> Optional[AppData]:
        return self._by_id["apps"].get(app_id)

    def apps_by_platform(self, platform: str) -> List[AppData]:
        return [app for app in self.collections.apps if platform in app.platforms]

    def apps_by_content_type(self, content_type: str) -> List[AppData]:
        return [app for app in self.collections.apps if content_type in app.content_types]

    def app_extensions(self, app_id: str) -> List[ExtensionData]:
        """
        Extensions that list the app in their supported_apps.
        """
        return [ext for ext in self.collections.extensions if app_id in ext.supported_apps]

    def recommended_extensions(self, app_id: str, limit: Optional[int] = None) -> List[ExtensionData]:
        """
        Extensions to show on an app's page.

        The app's own supported_extensions list takes precedence; when none of
        it resolves, fall back to extensions that name the app.
        """
        if limit is not None and limit < 0:
            raise ValueError(f"limit must be zero or positive, got {limit}")
        extensions = self.get_related(app_id, "extensions", "supported_extensions", source="apps")
        if not extensions:
            extensions = self.app_extensions(app_id)
        if limit is not None:
            extensions = extensions[:limit]
        return extensions

    # ------------------------------------------------------------------
    # Extensions
    # ------------------------------------------------------------------

    def get_extension(self, extension_id: str) -> Optional[ExtensionData]:
        return self._by_id["extensions"].get(extension_id)

    def extensions_by_content_type(self, content_type: str) -> List[ExtensionData]:
        return [ext for ext in self.collections.extensions if content_type in ext.types]

    def extensions_by_region(self, region: str) -> List[ExtensionData]:
        wanted = region.lower()
        return [ext for ext in self.collections.extensions if ext.region.lower() == wanted]

    def extension_apps(self, extension_id: str) -> List[AppData]:
        """
        Apps named by the extension's supported_apps, in app collection order.
        """
        extension = self.get_extension(extension_id)
        if extension is None:
            return []
        return [app for app in self.collections.apps if app.id in extension.supported_apps]

    # ------------------------------------------------------------------
    # FAQs
    # ------------------------------------------------------------------

    def get_faq(self, faq_id: str) -> Optional[FAQData]:
        return self._by_id["faqs"].get(faq_id)

    def faqs_by_category(self, category: str) -> List[FAQData]:
        return [faq for faq in self.collections.faqs if faq.category == category]

    def faqs_by_app(self, app_id: str) -> List[FAQData]:
        return [
            faq
            for faq in self.collections.faqs
            if faq.related_app_ids is not None and app_id in faq.related_app_ids
        ]

    # ------------------------------------------------------------------
    # Guides
    # ------------------------------------------------------------------

    def all_guides(self) -> List[GuideTopicData]:
        return list(self._records["guides"])

    def get_guide(self, guide_id: str) -> Optional[GuideTopicData]:
        return self._by_id["guides"].get(guide_id)

    def get_guide_category(self, category_id: str) -> Optional[GuideCategoryData]:
        return self._by_id["guide_categories"].get(category_id)

    def category_of_guide(self, guide_id: str) -> Optional[GuideCategoryData]:
        return self._guide_category.get(guide_id)

    def guides_by_app(self, app_id: str) -> List[GuideTopicData]:
        return [
            guide
            for guide in self._records["guides"]
            if guide.related_app_ids is not None and app_id in guide.related_app_ids
        ]

    def guides_by_extension(self, extension_id: str) -> List[GuideTopicData]:
        return [
            guide
            for guide in self._records["guides"]
            if guide.related_extension_ids is not None and extension_id in guide.related_extension_ids
        ]

    # ------------------------------------------------------------------
    # Search
    # ------------------------------------------------------------------

    def search(self, query: str) -> SearchResults:
        """
        Case-insensitive substring search over every collection.

        Each collection is filtered independently and keeps its source order:
        apps on name/description/keywords, extensions on name/info/keywords,
        FAQs on question/answer/keywords, guides on title/summary/keywords.
        """
        return SearchResults(
            apps=[
                app
                for app in self.collections.apps
                if match_any((app.name, app.description), query)
                or match_keywords(app.keywords, query)
            ],
            extensions=[
                ext
                for ext in self.collections.extensions
                if match_any((ext.name, ext.info), query)
                or match_keywords(ext.keywords, query)
            ],
            faqs=[
                faq
                for faq in self.collections.faqs
                if match_any((faq.question, faq.answer), query)
                or match_keywords(faq.keywords, query)
            ],
            guides=[
                guide
                for guide in self._records["guides"]
                if match_any((guide.title, guide.summary), query)
                or match_keywords(guide.keywords, query)
            ],
        )

    # ------------------------------------------------------------------
    # Reference validation
    # ------------------------------------------------------------------

    def validate_references(self) -> ReferenceReport:
        """
        Report stale ids in every relationship list, and app/extension links
        that only one side records. Nothing is changed.
        """
        report = ReferenceReport()

        for src, field, target in RELATIONS:
            known = self._by_id[target]
            for record in self._records[src]:
                ids = getattr(record, field)
                if ids is None:
                    continue
                for ref_id in ids:
                    if ref_id not in known:
                        report.stale.append(
                            StaleReference(
                                source_collection=src,
                                source_id=record.id,
                                field=field,
                                missing_id=ref_id,
                            )
                        )

        apps = self._by_id["apps"]
        extensions = self._by_id["extensions"]
        for app in apps.values():
            for ext_id in app.supported_extensions:
                ext = extensions.get(ext_id)
                if ext is not None and app.id not in ext.supported_apps:
                    report.asymmetric.append(
                        AsymmetricReference(app_id=app.id, extension_id=ext_id, declared_by="apps")
                    )
        for ext in extensions.values():
            for app_id in ext.supported_apps:
                app = apps.get(app_id)
                if app is not None and ext.id not in app.supported_extensions:
                    report.asymmetric.append(
                        AsymmetricReference(app_id=app_id, extension_id=ext.id, declared_by="extensions")
                    )

        return report
