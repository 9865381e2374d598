# infrastructure/config/env_settings.py
from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

from dotenv import dotenv_values

ENV_KEYS = {
    "RESPONSE_DISCARD_CHUNKS": "discard_response_chunks",
    "RESPONSE_INFER_HTML_RESOURCES": "infer_html_resources",
    "RESPONSE_CHECKSUM_ALGORITHMS": "checksum_algorithms",
    "RESPONSE_DEFAULT_CHARSET": "default_charset",
    "LOG_LEVEL": "log_level",
}

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


def _parse_bool(key: str, value: str) -> bool:
    v = value.strip().lower()
    if v in _TRUE:
        return True
    if v in _FALSE:
        return False
    raise ValueError(f"{key}: not a boolean: {value!r}")


class EnvSettingsProvider:
    """
    ProtocolConfig overrides from a .env file and the process environment.
    Process environment wins over the .env file.
    """

    def __init__(self, env_file: Optional[Path] = None, environ: Optional[Mapping[str, str]] = None):
        values: Dict[str, Optional[str]] = {}
        if env_file is not None and env_file.exists():
            values.update(dotenv_values(env_file))
        values.update(os.environ if environ is None else environ)
        self._values = values

    def overrides(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {}
        for env_key, field_name in ENV_KEYS.items():
            raw = self._values.get(env_key)
            if raw is None or raw == "":
                continue
            if field_name in ("discard_response_chunks", "infer_html_resources"):
                out[field_name] = _parse_bool(env_key, raw)
            elif field_name == "checksum_algorithms":
                out[field_name] = [a.strip() for a in raw.split(",") if a.strip()]
            else:
                out[field_name] = raw.strip()
        return out
