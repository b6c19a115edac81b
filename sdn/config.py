from __future__ import annotations
import codecs
import json
from typing import Any, Dict, Optional

from sdn.errors import SdnConfigError


# Defaults
DEFAULT_OPTIONS: Dict[str, Any] = {
    "sort_keys": True,  # kwargs order in canonical output
    "encoding": "utf-8",  # used by sdn.files and the command line
}


def merge_options(overrides: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    merged = dict(DEFAULT_OPTIONS)
    for key, value in (overrides or {}).items():
        if key not in DEFAULT_OPTIONS:
            raise SdnConfigError(f"unknown option {key!r}")
        expected = type(DEFAULT_OPTIONS[key])
        if type(value) is not expected:
            raise SdnConfigError(
                f"option {key!r} must be {expected.__name__}, got {type(value).__name__}"
            )
        merged[key] = value
    try:
        codecs.lookup(merged["encoding"])
    except LookupError as e:
        raise SdnConfigError(f"unknown encoding {merged['encoding']!r}") from e
    return merged


def load_options_from_json(json_str: str) -> Dict[str, Any]:
    try:
        user_opts = json.loads(json_str)
    except json.JSONDecodeError as e:
        raise SdnConfigError(f"options are not valid JSON: {e}") from e
    if not isinstance(user_opts, dict):
        raise SdnConfigError("options must be a JSON object")
    return merge_options(user_opts)
