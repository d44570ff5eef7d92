"""Mirror a web site to local files by following its links."""

from __future__ import annotations

import argparse
import http.client
import os
import sys
import urllib.error
import urllib.request
import warnings
from collections.abc import Iterator
from typing import BinaryIO
from urllib.parse import urlsplit

from bs4 import BeautifulSoup

from .extractor import correct_and_extract_html_links, extract_links_from_css
from .webpaths import convert_relative_url_to_absolute, get_file_name, get_full_path

_TIMEOUT = 30.0


def _ext(path: str) -> str:
    name = path.rpartition("/")[2]
    dot = name.rfind(".")
    return name[dot:] if dot >= 0 else ""


def _base(path: str) -> str:
    if not path:
        return "."
    stripped = path.rstrip("/")
    if not stripped:
        return "/"
    return stripped.rpartition("/")[2]


def create_file(url: str) -> BinaryIO:
    """Create the local file for ``url``, with its directories, and open it for writing."""
    full_path = get_full_path(url)
    directory = full_path.removesuffix("/" + _base(full_path))
    try:
        os.makedirs(directory, exist_ok=True)
    except OSError as exc:
        raise OSError(f"failed creating directory: {exc}") from exc
    try:
        return open(get_file_name(full_path), "wb")
    except OSError as exc:
        raise OSError(f"failed creating file: {exc}") from exc


def _download(url: str) -> bytes:
    try:
        with urllib.request.urlopen(url, timeout=_TIMEOUT) as response:
            if response.status != 200:
                raise OSError(f"bad request: {response.status} {response.reason}")
            return response.read()
    except urllib.error.HTTPError as exc:
        raise OSError(f"bad request: {exc.code} {exc.reason}") from exc
    except urllib.error.URLError as exc:
        raise OSError(f"http get: {exc.reason}") from exc
    except (ValueError, http.client.HTTPException) as exc:
        raise OSError(f"http get: {exc}") from exc


def download_and_extract_links(url: str) -> set[str]:
    """Download ``url``, save it locally with corrected links and return the links found."""
    body = _download(url)
    with create_file(url) as handle:
        with warnings.catch_warnings():
            warnings.simplefilter("ignore", UserWarning)
            soup = BeautifulSoup(body, "html.parser")
        links = correct_and_extract_html_links(url, soup)
        if _ext(handle.name) == ".html":
            handle.write(soup.encode("utf-8"))
        else:
            handle.write(body)
    if _ext(url) == ".css":
        extract_links_from_css(body.decode("utf-8", "replace"), links)
    return links


def _absolute_links(page: str, links: set[str]) -> Iterator[str]:
    for link in links:
        if link == "/":
            continue
        try:
            yield convert_relative_url_to_absolute(page, link)
        except ValueError as exc:
            print("Failed to convert link to absolute: ", exc)


def crawl(url: str, root_domain: str, visited: set[str] | None = None) -> set[str]:
    """Download ``url`` and, depth first, every page it links to within ``root_domain``.

    Each address is visited once; the set of visited addresses is returned.
    """
    if visited is None:
        visited = set()
    stack: list[Iterator[str]] = [iter([url])]
    while stack:
        page = next(stack[-1], None)
        if page is None:
            stack.pop()
            continue
        if page in visited:
            continue
        visited.add(page)
        if root_domain not in page or _ext(page) == ".dmg":
            continue
        print("Downloading: ", page)
        try:
            links = download_and_extract_links(page)
        except (OSError, ValueError) as exc:
            print("Failed to download page: ", exc)
            continue
        stack.append(_absolute_links(page, links))
    return visited


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="wget", description="Mirror a whole web site.")
    parser.add_argument("url")
    args = parser.parse_args(argv)
    try:
        parts = urlsplit(args.url)
    except ValueError as exc:
        print(exc, file=sys.stderr)
        return 1
    root_domain = parts.netloc
    root_link = f"{parts.scheme}://{root_domain}/"
    crawl(root_link, root_domain, set())
    return 0


if __name__ == "__main__":
    sys.exit(main())