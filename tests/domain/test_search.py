from __future__ import annotations

from mangahub.domain.matching import match_any, match_keywords, match_text


def ids(records):
    return [r.id for r in records]


def test_match_text():
    assert match_text("Reads MANGA offline", "manga")
    assert match_text("manga", "MaNgA")
    assert not match_text(None, "manga")
    assert not match_text("anime", "manga")
    assert match_text("anything", "")


def test_match_keywords_handles_absent_list():
    assert not match_keywords(None, "x")
    assert not match_keywords((), "x")
    assert match_keywords(("Discord", "offline"), "disc")
    assert match_any((None, "Backups"), "back")


def test_search_by_keyword(index):
    results = index.search("discord")

    assert ids(results.apps) == ["a1"]
    assert results.extensions == []
    assert ids(results.faqs) == ["f2"]
    assert results.guides == []


def test_search_is_case_insensitive_substring(index):
    results = index.search("manga")

    assert ids(results.apps) == ["a1"]
    assert ids(results.extensions) == ["e1"]
    assert index.search("MANGA") == results


def test_search_guides_on_title_summary_and_keywords(index):
    assert ids(index.search("RESTORE").guides) == ["g2"]
    assert ids(index.search("library").guides) == ["g2"]
    assert ids(index.search("install").guides) == ["g1"]


def test_search_faq_answer(index):
    assert ids(index.search("apk").faqs) == ["f1"]


def test_empty_query_matches_everything(index):
    results = index.search("")
    assert ids(results.apps) == ["a1", "a2", "a3"]
    assert ids(results.extensions) == ["e1", "e2"]
    assert ids(results.faqs) == ["f1", "f2"]
    assert ids(results.guides) == ["g1", "g2", "g3"]
    assert results.total == 10


def test_no_match(index):
    results = index.search("zzz-not-there")
    assert results.total == 0


def test_queries_are_repeatable(index, collections):
    before = collections.model_dump()

    assert index.search("a") == index.search("a")
    assert index.get_related("a1", "extensions") == index.get_related("a1", "extensions")
    assert index.apps_by_platform("Android") == index.apps_by_platform("Android")

    assert collections.model_dump() == before
