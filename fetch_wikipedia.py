# fetch_wikipedia.py - search Wikipedia and fetch an article summary over the public APIs
from typing import List, Tuple
from urllib.parse import quote

import requests

from wikr_config import USER_AGENT, debug

SEARCH_API_URL = "https://{lang}.wikipedia.org/w/api.php"
SUMMARY_API_URL = "https://{lang}.wikipedia.org/api/rest_v1/page/summary/"

MAX_SUMMARY_CHARS = 1000
ELLIPSIS = "..."


class WikiError(Exception):
    """Base class for lookups that cannot produce a summary."""


class NetworkError(WikiError):
    """The Wikipedia API could not be reached or answered with an error status."""


class MalformedResponseError(WikiError):
    """The API answered, but not with the JSON shape we expect."""


class NoResultsError(WikiError):
    """The search returned no titles."""


_session = None


def _get_session() -> requests.Session:
    global _session
    if _session is None:
        _session = requests.Session()
        _session.headers.update({"User-Agent": USER_AGENT, "Accept": "application/json"})
    return _session


def _get_json(url: str, params=None):
    debug(f"🔍 GET {url} {params or ''}")
    try:
        res = _get_session().get(url, params=params)
        res.raise_for_status()
    except requests.RequestException as e:
        raise NetworkError(str(e)) from e
    try:
        return res.json()
    except ValueError as e:
        raise MalformedResponseError(f"response from {url} is not JSON") from e


def _field(obj, name: str, kind):
    if not isinstance(obj, dict) or not isinstance(obj.get(name), kind):
        raise MalformedResponseError(f"missing or invalid field {name!r}")
    return obj[name]


def truncate_summary(text: str) -> str:
    if len(text) > MAX_SUMMARY_CHARS:
        return text[:MAX_SUMMARY_CHARS - len(ELLIPSIS)] + ELLIPSIS
    return text


def search_wikipedia(lang: str, term: str) -> List[str]:
    """Titles matching `term`, in the relevance order Wikipedia returns them."""
    params = {
        "action": "query",
        "list": "search",
        "srsearch": term,
        "format": "json",
    }
    data = _get_json(SEARCH_API_URL.format(lang=lang), params=params)
    hits = _field(_field(data, "query", dict), "search", list)
    return [_field(hit, "title", str) for hit in hits]


def fetch_summary(lang: str, title: str) -> Tuple[str, str]:
    """Return (summary, page_url) for an exact article title."""
    url = SUMMARY_API_URL.format(lang=lang) + quote(title, safe="")
    data = _get_json(url)
    extract = _field(data, "extract", str)
    desktop = _field(_field(data, "content_urls", dict), "desktop", dict)
    page_url = _field(desktop, "page", str)
    return truncate_summary(extract), page_url
