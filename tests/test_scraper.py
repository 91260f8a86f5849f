"""Tests for the scraper core — fetch, navigate, extract.

Mocking strategy:
- ``respx`` patches ``httpx`` at the transport layer so no real network calls
  are made during ``fetch_url`` tests.
- Everything else runs on inline HTML documents.
"""

from __future__ import annotations

import httpx
import pytest
import respx
from bs4 import BeautifulSoup

from fanpage.scraper.errors import FetchError, NotFoundError
from fanpage.scraper.extractor import (
    FieldSelector,
    extract_all,
    extract_paragraphs,
    parse_document,
    read_field,
)
from fanpage.scraper.fetcher import fetch_url
from fanpage.scraper.models import RawPage
from fanpage.scraper.navigator import find_first, find_first_tag, render_children, tag_named

from html_fixtures import SCHEDULE_HTML, SUMMARY_HTML


# ---------------------------------------------------------------------------
# fetch_url tests
# ---------------------------------------------------------------------------

class TestFetchUrl:
    def test_successful_fetch_returns_raw_page(self) -> None:
        with respx.mock:
            respx.get("https://example.com/schedule").mock(
                return_value=httpx.Response(200, text=SCHEDULE_HTML)
            )
            raw = fetch_url("https://example.com/schedule")

        assert isinstance(raw, RawPage)
        assert raw.url == "https://example.com/schedule"
        assert raw.status_code == 200
        assert "<tbody>" in raw.html

    def test_http_error_raises_fetch_error(self) -> None:
        with respx.mock:
            respx.get("https://example.com/missing").mock(
                return_value=httpx.Response(404, text="Not Found")
            )
            with pytest.raises(FetchError) as info:
                fetch_url("https://example.com/missing")

        assert info.value.url == "https://example.com/missing"
        assert isinstance(info.value.cause, httpx.HTTPStatusError)

    def test_transport_error_raises_fetch_error(self) -> None:
        with respx.mock:
            route = respx.get("https://example.com/down").mock(
                side_effect=httpx.ConnectError("connection refused")
            )
            with pytest.raises(FetchError) as info:
                fetch_url("https://example.com/down")

        assert route.call_count == 1  # no retry
        assert isinstance(info.value.__cause__, httpx.ConnectError)
        assert "https://example.com/down" in str(info.value)

    def test_invalid_url_raises_fetch_error(self) -> None:
        with pytest.raises(FetchError) as info:
            fetch_url("http://[::1/")

        assert isinstance(info.value.cause, httpx.InvalidURL)

    def test_sends_configured_user_agent(self, monkeypatch) -> None:
        monkeypatch.setattr("fanpage.scraper.fetcher.settings.user_agent", "fanpage-test/1.0")
        with respx.mock:
            route = respx.get("https://example.com/").mock(
                return_value=httpx.Response(200, text="<html></html>")
            )
            fetch_url("https://example.com/")

        assert route.calls.last.request.headers["User-Agent"] == "fanpage-test/1.0"


# ---------------------------------------------------------------------------
# Navigator tests
# ---------------------------------------------------------------------------

class TestFindFirst:
    def test_returns_first_in_pre_order(self) -> None:
        doc = BeautifulSoup(
            '<div><a><span id="deep"></span></a><span id="shallow"></span></div>',
            "html.parser",
        )
        node = find_first_tag(doc, "span")
        assert node["id"] == "deep"

    def test_visits_every_node_once(self) -> None:
        doc = BeautifulSoup("<div><p>a<b>b</b></p><p>c</p></div>", "html.parser")
        seen = []

        def never(node) -> bool:
            seen.append(node)
            return False

        with pytest.raises(NotFoundError):
            find_first(doc, never, "nothing")

        descendants = list(doc.descendants)
        assert len(seen) == len(descendants) + 1
        assert all(sum(n is s for s in seen) == 1 for n in descendants)

    def test_missing_tbody_raises_not_found(self) -> None:
        doc = parse_document("<html><body><table><tr><td>x</td></tr></table></body></html>")
        with pytest.raises(NotFoundError) as info:
            find_first_tag(doc, "tbody")
        assert info.value.element == "tbody"
        assert "<tbody>" in str(info.value)

    def test_tag_named_ignores_text_nodes(self) -> None:
        doc = BeautifulSoup("<p>tbody</p>", "html.parser")
        with pytest.raises(NotFoundError):
            find_first(doc, tag_named("tbody"), "tbody")

    def test_first_of_several_tables(self) -> None:
        doc = parse_document(SCHEDULE_HTML)
        body = find_first_tag(doc, "tbody")
        assert "Parma" in body.get_text()
        assert "second table" not in body.get_text()


class TestRenderChildren:
    def test_excludes_own_tags(self) -> None:
        doc = parse_document("<table><tbody><tr><td>1</td></tr></tbody></table>")
        body = find_first_tag(doc, "tbody")
        assert render_children(body) == "<tr><td>1</td></tr>"

    def test_attributes_on_node_do_not_leak(self) -> None:
        doc = parse_document('<table><tbody class="rows" data-x="1"><tr></tr></tbody></table>')
        assert render_children(find_first_tag(doc, "tbody")) == "<tr></tr>"

    def test_empty_node(self) -> None:
        doc = parse_document("<table><tbody></tbody></table>")
        assert render_children(find_first_tag(doc, "tbody")) == ""


# ---------------------------------------------------------------------------
# Extractor tests
# ---------------------------------------------------------------------------

_GROUPS_HTML = """\
<ul>
  <li class="item"><a href="/one">  One  </a><span class="tag">x</span></li>
  <li class="item"><a href="/two">Two</a></li>
  <li class="item"><span class="tag">only tag</span></li>
</ul>
"""

_FIELDS = {
    "href": FieldSelector("a", attr="href"),
    "text": FieldSelector("a"),
    "tag": FieldSelector("span.tag"),
}


class TestExtractAll:
    def test_one_mapping_per_group_in_order(self) -> None:
        rows = extract_all(parse_document(_GROUPS_HTML), "li.item", _FIELDS)
        assert [r["href"] for r in rows] == ["/one", "/two", ""]
        assert [r["text"] for r in rows] == ["One", "Two", ""]

    def test_missing_fields_are_empty_strings(self) -> None:
        rows = extract_all(parse_document(_GROUPS_HTML), "li.item", _FIELDS)
        assert rows[1]["tag"] == ""
        assert rows[2] == {"href": "", "text": "", "tag": "only tag"}

    def test_no_groups_yields_empty_list(self) -> None:
        assert extract_all(parse_document(_GROUPS_HTML), "div.post", _FIELDS) == []

    def test_text_concatenates_every_match(self) -> None:
        group = parse_document("<div><b>a</b><b>b</b></div>").div
        assert read_field(group, FieldSelector("b")) == "ab"

    def test_attribute_reads_first_match(self) -> None:
        group = parse_document('<div><a href="/1">1</a><a href="/2">2</a></div>').div
        assert read_field(group, FieldSelector("a", attr="href")) == "/1"

    def test_multi_valued_attribute_is_joined(self) -> None:
        group = parse_document('<div><a class="x y">1</a></div>').div
        assert read_field(group, FieldSelector("a", attr="class")) == "x y"


class TestExtractParagraphs:
    def test_returns_container_paragraphs(self) -> None:
        paragraphs = extract_paragraphs(
            parse_document(SUMMARY_HTML), 'div[data-template="Partials/Teams/Summary"]'
        )
        assert len(paragraphs) == 4
        assert paragraphs[0].get_text() == "Governing Country: Italy"

    def test_missing_container_is_empty(self) -> None:
        assert extract_paragraphs(parse_document("<p>x</p>"), "div.summary") == []
