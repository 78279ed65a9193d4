# wiki_cache.py - tiny JSON cache for article summaries, keyed by "lang:title" with a 24h TTL
import contextlib
import json
import os
import re
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Dict, Optional, Union

from wikr_config import CACHE_TTL, cache_path, debug


class CacheIOError(Exception):
    """Reading, writing or decoding the cache file failed. Never leaves this module."""


@dataclass(frozen=True)
class CacheEntry:
    summary: str
    url: str
    timestamp: datetime


PathLike = Union[str, Path, None]

_FRACTION = re.compile(r"(\.\d{6})\d+")


def key_for(lang: str, title: str) -> str:
    # the language never contains ":", so the first ":" is always the boundary
    if not lang or ":" in lang:
        raise ValueError(f"invalid language code: {lang!r}")
    return f"{lang}:{title}"


def _now() -> datetime:
    return datetime.now(timezone.utc)


def _parse_timestamp(raw) -> Optional[datetime]:
    if isinstance(raw, bool):
        return None
    if isinstance(raw, (int, float)):
        try:
            return datetime.fromtimestamp(raw, tz=timezone.utc)
        except (ValueError, OverflowError, OSError):
            # NaN, inf or outside the platform time_t range
            return None
    if not isinstance(raw, str):
        return None
    # older files carry RFC 3339 with nanoseconds and a trailing Z
    s = raw.strip()
    if s.endswith("Z"):
        s = s[:-1] + "+00:00"
    s = _FRACTION.sub(r"\1", s)
    try:
        ts = datetime.fromisoformat(s)
    except ValueError:
        return None
    if ts.tzinfo is None:
        ts = ts.replace(tzinfo=timezone.utc)
    return ts


def _entry_from_json(item) -> Optional[CacheEntry]:
    if not isinstance(item, dict):
        return None
    summary, url = item.get("summary"), item.get("url")
    if not isinstance(summary, str) or not isinstance(url, str):
        return None
    ts = _parse_timestamp(item.get("timestamp"))
    if ts is None:
        return None
    return CacheEntry(summary=summary, url=url, timestamp=ts)


def _entry_to_json(entry: CacheEntry) -> dict:
    return {
        "summary": entry.summary,
        "url": entry.url,
        "timestamp": entry.timestamp.isoformat(),
    }


def _read(path: Path) -> dict:
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        raise CacheIOError(f"cannot read {path}: {e}") from e
    if not isinstance(data, dict):
        raise CacheIOError(f"{path} does not hold a JSON object")
    return data


def _write(path: Path, data: dict) -> None:
    tmp = str(path) + ".tmp"
    try:
        with open(tmp, "w", encoding="utf-8") as f:
            json.dump(data, f, ensure_ascii=False)
        os.replace(tmp, path)
    except (OSError, TypeError, ValueError) as e:
        with contextlib.suppress(OSError):
            os.remove(tmp)
        raise CacheIOError(f"cannot write {path}: {e}") from e


def load_cache(path: PathLike = None) -> Dict[str, CacheEntry]:
    path = Path(path) if path else cache_path()
    if not os.path.exists(path):
        return {}
    try:
        raw = _read(path)
    except CacheIOError as e:
        # corrupted or unreadable? start fresh
        debug(f"⚠️ {e}")
        return {}

    cache = {}
    for key, item in raw.items():
        entry = _entry_from_json(item)
        if entry is None:
            debug(f"⚠️ skipping malformed cache entry {key!r}")
            continue
        cache[key] = entry
    return cache


def save_cache(cache: Dict[str, CacheEntry], path: PathLike = None) -> bool:
    path = Path(path) if path else cache_path()
    try:
        _write(path, {k: _entry_to_json(v) for k, v in cache.items()})
    except CacheIOError as e:
        debug(f"⚠️ {e}")
        return False
    return True


def get_cached_entry(lang: str, title: str, now: Optional[datetime] = None,
                     path: PathLike = None) -> Optional[CacheEntry]:
    """Fresh entry for (lang, title), or None. Stale entries stay on disk until overwritten."""
    key = key_for(lang, title)
    entry = load_cache(path).get(key)
    if entry is None:
        return None
    age = (now or _now()) - entry.timestamp
    debug(f"💾 cache entry {key!r} found, age {age}")
    if age >= CACHE_TTL:
        return None
    return entry


def put_cached_entry(lang: str, title: str, summary: str, url: str,
                     now: Optional[datetime] = None, path: PathLike = None) -> CacheEntry:
    key = key_for(lang, title)
    cache = load_cache(path)
    entry = CacheEntry(summary=summary, url=url, timestamp=now or _now())
    cache[key] = entry
    if save_cache(cache, path):
        debug(f"💾 saved cache entry {key!r}")
    return entry


def clear_cache(path: PathLike = None) -> None:
    path = Path(path) if path else cache_path()
    try:
        os.remove(path)
    except FileNotFoundError:
        pass
