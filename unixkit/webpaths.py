"""Helpers mapping web addresses to local file paths for site mirroring."""

from __future__ import annotations

import posixpath
from urllib.parse import unquote, urljoin, urlsplit


def _host_and_path(url: str) -> tuple[str, str]:
    parts = urlsplit(url)
    host = parts.netloc.rpartition("@")[2]
    return host, unquote(parts.path)


def _dir(path: str) -> str:
    return posixpath.normpath(posixpath.dirname(path))


def _base(path: str) -> str:
    if not path:
        return "."
    stripped = path.rstrip("/")
    if not stripped:
        return "/"
    return stripped.rpartition("/")[2]


def _ext(path: str) -> str:
    name = path.rpartition("/")[2]
    dot = name.rfind(".")
    return name[dot:] if dot >= 0 else ""


def get_full_path(url: str) -> str:
    """Return the host followed by the path of ``url``."""
    try:
        host, path = _host_and_path(url)
    except ValueError as exc:
        raise ValueError(f"failed to parse URL to get full path: {exc}") from exc
    return host + path


def get_path_to_root(url: str) -> str:
    """Return the ``../`` prefix leading from the page of ``url`` back to the site root."""
    try:
        host, _ = _host_and_path(url)
    except ValueError as exc:
        raise ValueError(f"failed to parse URL to get root path: {exc}") from exc
    trimmed = get_full_path(url).strip(host)
    depth = len(trimmed.split("/")) - 2
    return "../" * max(depth, 0)


def get_file_name(dir_path: str) -> str:
    """Return the file name to save a page under; a directory gets ``index.html``."""
    if dir_path.strip(_dir(dir_path)) == "/":
        return dir_path + "index.html"
    return set_ext_html(dir_path)


def set_ext_html(url: str) -> str:
    """Append ``.html`` when the last path element has no extension."""
    if _ext(_base(url)) == "":
        return url + ".html"
    return url


def convert_relative_url_to_absolute(page_url: str, href: str) -> str:
    """Resolve ``href`` against the address of the page it was found on."""
    try:
        urlsplit(page_url)
    except ValueError as exc:
        raise ValueError(f"failed to parse base url: {exc}") from exc
    try:
        urlsplit(href)
    except ValueError as exc:
        raise ValueError(f"failed to parse href: {exc}") from exc
    return urljoin(page_url, href)


def normalize_url(href: str) -> str:
    """Turn a site-relative link into a local relative file name."""
    if href == "/":
        return "index.html"
    return set_ext_html(href.removeprefix("/"))