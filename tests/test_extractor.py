import pytest
from bs4 import BeautifulSoup

from unixkit.extractor import (
    correct_and_extract_html_links,
    extract_link_from_attr_url,
    extract_links_from_css,
)

HTML_DOC = """
<html>
    <head>
        <link rel="stylesheet" href="/styles/main.css">
    </head>
    <body>
        <img src="/images/logo.png">
        <a href="/page">Go to page</a>
        <div style="background-image: url('/images/bg.jpg')"></div>
    </body>
</html>
"""


def _soup(text: str) -> BeautifulSoup:
    return BeautifulSoup(text, "html.parser")


def test_extract_html_links():
    links = correct_and_extract_html_links("www.example.com/gojo/jojo", _soup(HTML_DOC))
    assert links == {
        "/styles/main.css",
        "/images/logo.png",
        "/page",
        "/images/bg.jpg",
    }


def test_correct_html_links_nested_page():
    doc = _soup(HTML_DOC)
    correct_and_extract_html_links("www.example.com/gojo/jojo", doc)
    rendered = str(doc)
    assert '"../styles/main.css"' in rendered
    assert '"../images/logo.png"' in rendered
    assert '"../page.html"' in rendered
    assert "(../images/bg.jpg)" in rendered


def test_correct_html_links_root_page():
    doc = _soup(HTML_DOC)
    correct_and_extract_html_links("www.example.com/", doc)
    rendered = str(doc)
    assert '"styles/main.css"' in rendered
    assert '"images/logo.png"' in rendered
    assert '"page.html"' in rendered
    assert "(images/bg.jpg)" in rendered


def test_links_accumulate_in_given_set():
    links = {"/already"}
    result = correct_and_extract_html_links("www.example.com/", _soup(HTML_DOC), links)
    assert result is links
    assert "/already" in links
    assert "/page" in links


def test_anchor_links_are_ignored():
    doc = _soup('<a href="#top">top</a>')
    links = correct_and_extract_html_links("www.example.com/a/b", doc)
    assert links == set()
    assert doc.a["href"] == "#top"


def test_html_link_is_not_prefixed():
    doc = _soup('<a href="/page.html">page</a>')
    links = correct_and_extract_html_links("www.example.com/a/b", doc)
    assert links == {"/page.html"}
    assert doc.a["href"] == "page.html"


def test_extract_links_from_css():
    css = (
        "url('aboba/jojo.css') url(\"foo.css#bar\") lol kek url(\"data:\"randomdata)"
        "url(souja/boy/gege.css)"
    )
    assert extract_links_from_css(css) == {
        "'aboba/jojo.css'",
        '"foo.css',
        "souja/boy/gege.css",
    }


@pytest.mark.parametrize(
    "text, expected",
    [
        ("url(a.png)", "a.png"),
        ("background: url(icons.svg#home) no-repeat", "icons.svg"),
        ("no link here", ""),
        ("url(unterminated", ""),
    ],
)
def test_extract_link_from_attr_url(text, expected):
    assert extract_link_from_attr_url(text) == expected