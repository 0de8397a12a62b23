"""
Tests for the learning bounded context.

Covers:
- Table of contents extraction and heading anchors
- ContentCatalog English fallback and ordering
- ChatResponder scoring, blocking and localization
- Content, chat and sitemap endpoints
"""

from datetime import datetime, timezone
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from app.application.learning.build_sitemap import BuildSitemapUseCase
from app.application.learning.dtos import ChatCommand
from app.application.learning.respond_to_chat import RespondToChatUseCase
from app.domain.learning.chat_responder import (
    ChatResponder,
    is_investment_advice_request,
    score_entry,
    search_content,
)
from app.domain.learning.content_catalog import (
    ContentCatalog,
    extract_toc,
    heading_anchor,
    is_valid_slug,
)
from app.domain.learning.entities import ContentType, ReplyType, SearchEntry
from app.domain.learning.errors import InvalidMessageError
from app.domain.learning.sitemap import build_sitemap_entries
from app.infrastructure.learning.filesystem_content_repository import (
    FilesystemContentRepository,
)
from app.interfaces.learning.sitemap_router import render_sitemap
from app.main import app

client = TestClient(app)

FIXED_NOW = datetime(2025, 3, 1, 12, 0, tzinfo=timezone.utc)


def _write(root: Path, relative: str, text: str) -> None:
    path = root / relative
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")


@pytest.fixture
def content_root(tmp_path: Path) -> Path:
    _write(
        tmp_path,
        "course/en/basics.mdx",
        "---\ntitle: Basics\norder: 2\n---\n\n## Start here\n",
    )
    _write(
        tmp_path,
        "course/en/intro.mdx",
        "---\ntitle: Intro\norder: 1\nrelated: solana, wallet\n---\n\nHello.\n",
    )
    _write(tmp_path, "course/en/extra.mdx", "---\ntitle: Extra\n---\n\nNo order.\n")
    _write(
        tmp_path,
        "course/zh-CN/intro.mdx",
        "---\ntitle: 入门\norder: 1\n---\n\n你好。\n",
    )
    _write(tmp_path, "glossary/en/wallet.mdx", "---\ntitle: wallet\n---\n\nKeys.\n")
    _write(tmp_path, "glossary/en/airdrop.mdx", "---\ntitle: Airdrop\n---\n\nFree.\n")
    _write(tmp_path, "glossary/en/untitled.mdx", "Body without front matter.\n")
    _write(tmp_path, "glossary/en/notes.txt", "not a document")
    return tmp_path


@pytest.fixture
def catalog(content_root: Path) -> ContentCatalog:
    return ContentCatalog(FilesystemContentRepository(content_root))


def _entry(slug: str, title: str, keywords: str = "") -> SearchEntry:
    return SearchEntry(
        type=ContentType.GLOSSARY,
        slug=slug,
        title_en=title,
        title_zh=title,
        desc_en="",
        desc_zh="",
        keywords=keywords,
    )


# =====================================================================
# Table of contents
# =====================================================================


class TestTableOfContents:
    """Tests for heading extraction."""

    def test_levels_two_and_three_only(self) -> None:
        body = "# Title\n\n## First part\n\ntext\n\n### Detail\n\n#### Too deep\n"

        toc = extract_toc(body)

        assert [(item.id, item.level) for item in toc] == [
            ("first-part", 2),
            ("detail", 3),
        ]

    def test_anchor_collapses_punctuation(self) -> None:
        assert heading_anchor("What's new in v1.18?") == "what-s-new-in-v1-18"

    def test_anchor_keeps_cjk(self) -> None:
        assert heading_anchor("为什么 Solana 很快") == "为什么-solana-很快"

    def test_slug_validation(self) -> None:
        assert is_valid_slug("lesson-1")
        assert not is_valid_slug("../secrets")
        assert not is_valid_slug("Lesson-1")
        assert not is_valid_slug("")


# =====================================================================
# ContentCatalog
# =====================================================================


class TestContentCatalog:
    """Tests for document lookup and listing."""

    def test_localized_document_preferred(self, catalog: ContentCatalog) -> None:
        item = catalog.get_item(ContentType.COURSE, "zh-CN", "intro")

        assert item is not None
        assert item.locale == "zh-CN"
        assert item.meta.title == "入门"

    def test_falls_back_to_english(self, catalog: ContentCatalog) -> None:
        item = catalog.get_item(ContentType.COURSE, "zh-CN", "basics")

        assert item is not None
        assert item.locale == "en"
        assert item.meta.title == "Basics"

    def test_missing_everywhere(self, catalog: ContentCatalog) -> None:
        assert catalog.get_item(ContentType.COURSE, "zh-CN", "nope") is None

    def test_invalid_slug_never_reaches_disk(self, catalog: ContentCatalog) -> None:
        assert catalog.get_item(ContentType.COURSE, "en", "../course/en/intro") is None

    def test_front_matter_defaults(self, catalog: ContentCatalog) -> None:
        item = catalog.get_item(ContentType.GLOSSARY, "en", "untitled")

        assert item is not None
        assert item.meta.title == "untitled"
        assert item.meta.description == ""
        assert item.body.strip() == "Body without front matter."

    def test_related_accepts_comma_string(self, catalog: ContentCatalog) -> None:
        item = catalog.get_item(ContentType.COURSE, "en", "intro")

        assert item.meta.related == ("solana", "wallet")

    def test_courses_sorted_by_order_missing_last(
        self, catalog: ContentCatalog
    ) -> None:
        metas = catalog.list_meta(ContentType.COURSE, "en")

        assert [meta.slug for meta in metas] == ["intro", "basics", "extra"]

    def test_glossary_sorted_by_title(self, catalog: ContentCatalog) -> None:
        metas = catalog.list_meta(ContentType.GLOSSARY, "en")

        assert [meta.title for meta in metas] == ["Airdrop", "untitled", "wallet"]

    def test_listing_missing_locale_directory(self, catalog: ContentCatalog) -> None:
        assert catalog.list_slugs(ContentType.GLOSSARY, "zh-CN") == []


# =====================================================================
# ChatResponder
# =====================================================================


class TestChatSearch:
    """Tests for chat scoring and ranking."""

    def test_score_weights(self) -> None:
        entry = _entry("staking", "Staking", keywords="staking validator")

        assert score_entry(entry, ["staking"], "en") == 17
        assert score_entry(entry, ["validator"], "en") == 7
        assert score_entry(entry, ["nothing"], "en") == 0

    def test_ties_keep_index_order(self) -> None:
        index = (_entry("first", "Token"), _entry("second", "Token"))

        results = search_content("token", "en", index)

        assert [entry.slug for entry in results] == ["first", "second"]

    def test_at_most_three_results(self) -> None:
        index = tuple(_entry(f"t{i}", f"Token {i}") for i in range(5))

        assert len(search_content("token", "en", index)) == 3

    def test_best_score_first(self) -> None:
        results = search_content("what is solana", "en")

        assert [entry.slug for entry in results] == ["lesson-1", "solana"]

    def test_blank_query(self) -> None:
        assert search_content("   ", "en") == []


class TestChatResponder:
    """Tests for reply classification."""

    @pytest.mark.parametrize(
        "message",
        [
            "Should I buy SOL?",
            "solana price prediction for 2025",
            "现在可以抄底吗",
            "is 10x leverage safe",
        ],
    )
    def test_advice_requests_blocked(self, message: str) -> None:
        assert is_investment_advice_request(message)

        reply = ChatResponder().respond(message, "en")

        assert reply.type is ReplyType.BLOCKED
        assert [link.slug for link in reply.links] == ["lesson-1"]

    def test_blocked_wins_over_matching_content(self) -> None:
        """A message that would match content is still blocked."""
        reply = ChatResponder().respond("solana buy now", "en")

        assert reply.type is ReplyType.BLOCKED

    def test_fallback_suggests_first_lesson(self) -> None:
        reply = ChatResponder().respond("hello", "en")

        assert reply.type is ReplyType.FALLBACK
        assert [link.slug for link in reply.links] == ["lesson-1"]

    def test_chinese_reply(self) -> None:
        reply = ChatResponder().respond("区块链", "zh-CN")

        assert reply.type is ReplyType.RESULTS
        assert reply.message.startswith("我找到了")
        assert reply.links[0].title == "什么是 Solana？"

    def test_use_case_rejects_long_message(self) -> None:
        use_case = RespondToChatUseCase(ChatResponder(), max_length=10)

        with pytest.raises(InvalidMessageError):
            use_case.execute(ChatCommand(message="x" * 11))

    def test_use_case_trims_message(self) -> None:
        use_case = RespondToChatUseCase(ChatResponder(), max_length=10)

        result = use_case.execute(ChatCommand(message="  solana  "))

        assert result.type == "results"


# =====================================================================
# Sitemap
# =====================================================================


class TestSitemap:
    """Tests for sitemap composition and rendering."""

    def test_every_page_once_per_locale(self) -> None:
        entries = build_sitemap_entries(
            "https://example.com/", ["en", "zh-CN"], ["lesson-1"], ["solana"], FIXED_NOW
        )

        urls = [entry.url for entry in entries]
        assert len(urls) == 16
        assert urls[0] == "https://example.com/en"
        assert "https://example.com/zh-CN/course/lesson-1" in urls
        assert "https://example.com/en/glossary/solana" in urls

    def test_frequencies_and_priorities(self) -> None:
        entries = {
            entry.url: entry
            for entry in build_sitemap_entries(
                "https://example.com", ["en"], ["lesson-1"], ["solana"], FIXED_NOW
            )
        }

        assert entries["https://example.com/en"].priority == 1.0
        assert entries["https://example.com/en/prices"].change_frequency == "hourly"
        assert entries["https://example.com/en/ask"].change_frequency == "weekly"
        assert entries["https://example.com/en/course/lesson-1"].priority == 0.7
        assert entries["https://example.com/en/glossary/solana"].priority == 0.6

    def test_use_case_lists_english_slugs(self, catalog: ContentCatalog) -> None:
        use_case = BuildSitemapUseCase(
            catalog, "https://example.com", ["en", "zh-CN"], clock=lambda: FIXED_NOW
        )

        urls = [entry.url for entry in use_case.execute()]

        assert "https://example.com/zh-CN/course/basics" in urls
        assert "https://example.com/en/glossary/untitled" in urls

    def test_render_alternates(self) -> None:
        entries = build_sitemap_entries(
            "https://example.com", ["en", "zh-CN"], [], [], FIXED_NOW
        )

        xml = render_sitemap(entries[:1])

        assert "<loc>https://example.com/en</loc>" in xml
        assert "<lastmod>2025-03-01T12:00:00Z</lastmod>" in xml
        assert 'hreflang="zh-CN" href="https://example.com/zh-CN"' in xml


# =====================================================================
# HTTP endpoints
# =====================================================================


class TestContentEndpoints:
    """Tests for /api/content against the shipped documents."""

    def test_get_lesson_with_toc(self) -> None:
        response = client.get("/api/content/course/lesson-1")

        assert response.status_code == 200
        body = response.json()
        assert body["locale"] == "en"
        assert body["meta"]["next"] == "lesson-2"
        assert [entry["id"] for entry in body["toc"]] == [
            "why-solana-is-fast",
            "fees",
            "what-you-can-do-on-solana",
        ]

    def test_missing_translation_served_in_english(self) -> None:
        body = client.get("/api/content/course/lesson-2?locale=zh-CN").json()

        assert body["locale"] == "en"
        assert body["meta"]["title"] == "Setting Up Your First Wallet"

    def test_keywords_exposed_in_meta(self) -> None:
        solana = client.get("/api/content/glossary/solana").json()
        wallet = client.get("/api/content/glossary/wallet").json()

        assert "proof of history" in solana["meta"]["keywords"]
        assert wallet["meta"]["keywords"] is None

    def test_translation_served(self) -> None:
        body = client.get("/api/content/glossary/solana?locale=zh-CN").json()

        assert body["locale"] == "zh-CN"

    def test_unknown_slug(self) -> None:
        response = client.get("/api/content/glossary/moon")

        assert response.status_code == 404
        assert response.json() == {"error": "content_not_found"}

    def test_unsupported_locale(self) -> None:
        response = client.get("/api/content/course/lesson-1?locale=fr")

        assert response.status_code == 404
        assert response.json() == {"error": "unsupported_locale"}

    def test_unknown_content_type(self) -> None:
        response = client.get("/api/content/blog/lesson-1")

        assert response.status_code == 422
        assert response.json() == {"error": "invalid_request"}

    def test_course_listing_in_order(self) -> None:
        body = client.get("/api/content/course").json()

        assert [item["slug"] for item in body["items"]] == ["lesson-1", "lesson-2"]

    def test_glossary_listing(self) -> None:
        body = client.get("/api/content/glossary").json()

        assert [item["slug"] for item in body["items"]] == ["solana", "wallet"]


class TestChatEndpoint:
    """Tests for POST /api/chat."""

    def test_results(self) -> None:
        response = client.post("/api/chat", json={"message": "what is solana"})

        assert response.status_code == 200
        body = response.json()
        assert body["type"] == "results"
        assert body["links"][0] == {
            "type": "course",
            "slug": "lesson-1",
            "title": "What Is Solana?",
        }

    def test_blocked(self) -> None:
        body = client.post(
            "/api/chat", json={"message": "should I buy solana", "locale": "zh-CN"}
        ).json()

        assert body["type"] == "blocked"
        assert body["message"] == "我无法提供投资建议。请查阅 /security 了解风险。"

    def test_fallback(self) -> None:
        body = client.post("/api/chat", json={"message": "hello"}).json()

        assert body["type"] == "fallback"

    def test_invalid_json(self) -> None:
        response = client.post(
            "/api/chat",
            content=b"{not json",
            headers={"content-type": "application/json"},
        )

        assert response.status_code == 400
        assert response.json() == {"error": "invalid_json"}

    def test_non_object_body(self) -> None:
        response = client.post("/api/chat", json=["solana"])

        assert response.status_code == 400
        assert response.json() == {"error": "invalid_json"}

    @pytest.mark.parametrize("message", ["", "   ", "x" * 501, 42])
    def test_invalid_message(self, message) -> None:
        response = client.post("/api/chat", json={"message": message})

        assert response.status_code == 400
        assert response.json() == {"error": "invalid_message"}

    def test_max_length_accepted(self) -> None:
        response = client.post("/api/chat", json={"message": "x" * 500})

        assert response.status_code == 200


class TestSitemapEndpoint:
    """Tests for GET /sitemap.xml."""

    def test_sitemap_xml(self) -> None:
        response = client.get("/sitemap.xml")

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("application/xml")
        assert response.text.count("<url>") == 20
        assert "<loc>https://buysolanas.com/zh-CN/course/lesson-2</loc>" in response.text
        assert 'xmlns:xhtml="http://www.w3.org/1999/xhtml"' in response.text
