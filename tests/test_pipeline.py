import json
from urllib.parse import urlsplit

import pytest

from conftest import FakeResponse
from linkscout.config import ScraperConfig
from linkscout.errors import InputError, ParseError, SerializationError, UpstreamError
from linkscout.models import ImageRef, LinkRecord
from linkscout.pipeline import clean_records, parse_input_url, render_json, scrape_page

PAGE = b'<html><body><a href="/x"><img src="y.png" alt="Y"/>hello bob@test.com</a></body></html>'


def test_end_to_end(fake_web):
    fake_web.pages["http://site.test/"] = FakeResponse(PAGE)
    items = scrape_page("  http://site.test/\n", ScraperConfig())
    assert render_json(items) == (
        '[{"Href":"http://site.test/x","Content":"hello bob@test.com",'
        '"Images":[{"Src":"y.png","Alt":"Y"}],"Emails":["bob@test.com"]}]'
    )


def test_fetch_uses_config(fake_web):
    fake_web.pages["http://site.test/"] = FakeResponse(b"<p>nothing</p>")
    scrape_page("http://site.test/", ScraperConfig(timeout=2.5, user_agent="agent/1"))
    assert fake_web.calls == [
        {"url": "http://site.test/", "timeout": 2.5, "headers": {"User-Agent": "agent/1"}}
    ]


def test_empty_records_are_filtered_not_extracted():
    base = urlsplit("http://example.com/page")
    records = [
        LinkRecord(target="", text=""),
        LinkRecord(target="about", text=""),
        LinkRecord(target="", text="", emails=("a@b.co",)),
    ]
    assert clean_records(records, base) == [
        {"Href": "http://example.com/about"},
        {"Emails": ["a@b.co"]},
    ]


def test_images_keep_empty_alt():
    base = urlsplit("https://example.com/")
    records = [LinkRecord(target="", text="", images=(ImageRef(src="a.png", alt=""),))]
    assert clean_records(records, base) == [{"Images": [{"Src": "a.png", "Alt": ""}]}]


def test_absolute_href_is_not_rewritten(fake_web):
    fake_web.pages["https://site.test/dir/page"] = FakeResponse(
        b"<a href='https://other.test/y'>Other</a><a href='rel'>Rel</a><a></a>"
    )
    assert scrape_page("https://site.test/dir/page", ScraperConfig()) == [
        {"Href": "https://other.test/y", "Content": "Other"},
        {"Href": "https://site.test/rel", "Content": "Rel"},
    ]


@pytest.mark.parametrize("raw", ["", "   \n"])
def test_empty_input(raw):
    with pytest.raises(InputError, match="Empty link provided"):
        parse_input_url(raw)


@pytest.mark.parametrize("raw", ["not a url", "/relative/path", "http://[::1"])
def test_invalid_input(raw):
    with pytest.raises(InputError, match="Invalid URL provided"):
        parse_input_url(raw)


def test_non_200_status(fake_web):
    fake_web.pages["http://site.test/missing"] = FakeResponse(b"gone", status_code=404)
    with pytest.raises(UpstreamError, match="Received non-200 status code: 404"):
        scrape_page("http://site.test/missing", ScraperConfig())


def test_transport_error(fake_web):
    with pytest.raises(UpstreamError, match="Error fetching URL: no route to"):
        scrape_page("http://unreachable.test/", ScraperConfig())


def test_parse_error(fake_web, monkeypatch):
    from bs4.builder import ParserRejectedMarkup

    def reject(*args, **kwargs):
        raise ParserRejectedMarkup("broken")

    fake_web.pages["http://site.test/"] = FakeResponse(PAGE)
    monkeypatch.setattr("linkscout.tree.BeautifulSoup", reject)
    with pytest.raises(ParseError, match="Error parsing HTML"):
        scrape_page("http://site.test/", ScraperConfig())


def test_serialization_error():
    with pytest.raises(SerializationError):
        render_json([{"Href": object()}])


def test_render_json_keeps_unicode():
    assert json.loads(render_json([{"Content": "café"}])) == [{"Content": "café"}]
    assert "café" in render_json([{"Content": "café"}])
