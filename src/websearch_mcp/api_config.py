from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

import os
import yaml


@dataclass
class GoogleApiConfig:
    api_key: Optional[str] = None
    engine_id: Optional[str] = None


@dataclass
class ApiConfig:
    google: GoogleApiConfig = field(default_factory=GoogleApiConfig)


def load_api_config(path: Optional[str | Path]) -> ApiConfig:
    """Load API config from YAML, merging with environment fallbacks.

    Precedence for keys:
      1) YAML file values (if provided)
      2) Environment variables (SEARCH_API_KEY, SEARCH_ENGINE_ID)

    Settings passed explicitly to the search client factory win over both.
    """

    cfg = ApiConfig()
    data = {}
    if path:
        p = Path(path)
        if p.is_file():
            with p.open("r", encoding="utf-8") as fh:
                data = yaml.safe_load(fh) or {}
    else:
        # Try common defaults
        for candidate in ("apis.yaml", "apis.yml", "config/apis.yaml"):
            pc = Path(candidate)
            if pc.is_file():
                with pc.open("r", encoding="utf-8") as fh:
                    data = yaml.safe_load(fh) or {}
                break

    google = (data or {}).get("google") or {}

    # YAML values first
    cfg.google.api_key = google.get("api_key") or cfg.google.api_key
    cfg.google.engine_id = google.get("engine_id") or cfg.google.engine_id

    # Env fallbacks
    cfg.google.api_key = cfg.google.api_key or os.environ.get("SEARCH_API_KEY")
    cfg.google.engine_id = cfg.google.engine_id or os.environ.get("SEARCH_ENGINE_ID")

    return cfg
