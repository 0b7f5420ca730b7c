"""Configuration loading for the awscron command line."""

import os
import sys
from pathlib import Path
from typing import Dict, Optional

from . import paths


_TRUTHY = {"1", "true", "yes", "on", "y", "t"}

DEFAULTS = {
    "AWSCRON_YEAR": "*",
    "AWSCRON_QUIET": "false",
    "AWSCRON_DEBUG": "false",
}


def _log(message: str):
    """Emit a debug line to stderr when AWSCRON_DEBUG is set."""
    if os.environ.get("AWSCRON_DEBUG", "").lower() in _TRUTHY:
        sys.stderr.write(f"[CONFIG] {message}\n")
        sys.stderr.flush()


def _strip_inline_comment(value: str) -> str:
    in_quote = False
    quote_char = ""
    out = []
    for ch in value:
        if ch in ("'", '"'):
            if not in_quote:
                in_quote = True
                quote_char = ch
            elif ch == quote_char:
                in_quote = False
        if ch == "#" and not in_quote:
            break
        out.append(ch)
    return "".join(out).strip()


def parse_dotenv(filepath: Path) -> Dict[str, str]:
    """Parse `.env` style file with inline-comment stripping."""
    parsed: Dict[str, str] = {}

    if not filepath.exists():
        _log(f"Config file not found at: {filepath}")
        return parsed

    with open(filepath, "r", encoding="utf-8") as handle:
        for raw_line in handle:
            stripped = raw_line.strip()

            if not stripped or stripped.startswith("#"):
                continue

            if "=" not in stripped:
                continue

            key, _, value = stripped.partition("=")
            key = key.strip()
            value = _strip_inline_comment(value.strip())

            if len(value) >= 2:
                if value[0] in ('"', "'") and value[-1] == value[0]:
                    value = value[1:-1]

            if key:
                parsed[key] = value
                _log(f"  Loaded: {key} = {value}")

    _log(f"Parsed {len(parsed)} key-value pairs from {filepath}")
    return parsed


def load_config(filepath: Optional[Path] = None) -> Dict[str, str]:
    """Load config from file and environment, with env taking precedence."""
    file_settings = parse_dotenv(filepath or paths.config_file())

    cfg = {}
    for key, fallback in DEFAULTS.items():
        cfg[key] = os.environ.get(key) or file_settings.get(key) or fallback
        _log(f"Resolved {key}: {cfg[key]}")
    return cfg


def is_truthy(value: Optional[str]) -> bool:
    return (value or "").strip().lower() in _TRUTHY
