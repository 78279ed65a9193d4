# wikr_config.py - settings for wikr, read from the environment (and .env if present)
import os
import sys
from datetime import timedelta
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

VERSION = "0.1.0"

CACHE_FILE_NAME = ".wikr_cache.json"
CACHE_TTL = timedelta(hours=24)

# languages accepted as a bare leading word, e.g. `wikr en Berlin`
KNOWN_LANGS = ("de", "en")

DEFAULT_LANG = os.getenv("WIKR_LANG", "de")


def int_env(name: str, default: int) -> int:
    try:
        return int(os.getenv(name, ""))
    except ValueError:
        return default


DEFAULT_MAX_RESULTS = int_env("WIKR_MAX_RESULTS", 5)
USER_AGENT = os.getenv("WIKR_USER_AGENT", f"wikr/{VERSION} (command-line Wikipedia lookup)")


def cache_path() -> Path:
    """Where the cache file lives. Resolved per call so WIKR_CACHE_PATH can change at runtime."""
    override = os.getenv("WIKR_CACHE_PATH")
    if override:
        return Path(override).expanduser()
    try:
        return Path.home() / CACHE_FILE_NAME
    except RuntimeError:
        # no resolvable home directory
        return Path(CACHE_FILE_NAME)


def debug(msg: str) -> None:
    if os.getenv("WIKR_DEBUG", "0") == "1":
        print(msg, file=sys.stderr, flush=True)
