"""Find links in HTML and CSS and rewrite them for a local mirror."""

from __future__ import annotations

from bs4 import Tag

from .webpaths import get_path_to_root, normalize_url

_LINK_ATTRIBUTES = ("href", "src", "style")


def _ext(path: str) -> str:
    name = path.rpartition("/")[2]
    dot = name.rfind(".")
    return name[dot:] if dot >= 0 else ""


def extract_link_from_attr_url(text: str) -> str:
    """Return the address inside the first ``url(...)`` of ``text``.

    A ``#`` fragment before the closing parenthesis is cut off. Returns an
    empty string when there is no ``url(`` or no closing parenthesis.
    """
    start = text.find("url(")
    end = text.find(")")
    sharp = text.find("#")
    if start == -1 or end == -1:
        return ""
    if sharp != -1 and sharp < end:
        return text[start + 4:sharp]
    return text[start + 4:end]


def _correct_tag(tag: Tag, prev_dir: str, links: set[str]) -> None:
    for key, value in list(tag.attrs.items()):
        if key not in _LINK_ATTRIBUTES or not isinstance(value, str):
            continue
        if value.startswith("#"):
            continue
        if key == "style" and "background-image:" in value:
            corrected = value.replace("'", "", 2)
            links.add(extract_link_from_attr_url(corrected))
            corrected = corrected.replace("/", prev_dir, 1)
        else:
            links.add(value)
            corrected = normalize_url(value)
        if _ext(value) != ".html" and key != "style":
            corrected = prev_dir + corrected
        tag[key] = corrected


def correct_and_extract_html_links(
    url: str, node: Tag, links: set[str] | None = None
) -> set[str]:
    """Collect the links of ``node`` and its descendants into ``links``.

    Every ``href``, ``src`` and ``style`` attribute that is not an anchor is
    rewritten in place into a path relative to the page at ``url``. The
    set of links is returned.
    """
    if links is None:
        links = set()
    try:
        prev_dir = get_path_to_root(url)
    except ValueError as exc:
        print(f"failed to get path to root {url}: {exc}")
        return links
    for tag in (node, *node.find_all(True)):
        _correct_tag(tag, prev_dir, links)
    return links


def extract_links_from_css(css: str, links: set[str] | None = None) -> set[str]:
    """Add the address of every ``url(...)`` in ``css`` to ``links``; data URIs are skipped."""
    if links is None:
        links = set()
    position = css.find("url")
    while position != -1:
        link = extract_link_from_attr_url(css[position:])
        if "data:" not in link:
            links.add(link)
        position = css.find("url", position + 1)
    return links