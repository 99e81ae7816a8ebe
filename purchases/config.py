"""TOML configuration loader for the purchase tracker."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass, field
from pathlib import Path

if sys.version_info >= (3, 11):
    import tomllib
else:
    try:
        import tomli as tomllib
    except ImportError:
        tomllib = None  # type: ignore[assignment]

from .store import DEFAULT_STORE_PATH


@dataclass
class StoreConfig:
    path: str = DEFAULT_STORE_PATH
    strict: bool = False


@dataclass
class PromptConfig:
    affirmative: str = "y"


@dataclass
class LoggingConfig:
    level: str = "WARNING"


@dataclass
class TrackerConfig:
    store: StoreConfig = field(default_factory=StoreConfig)
    prompt: PromptConfig = field(default_factory=PromptConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def load_config(path: str | Path | None = None) -> TrackerConfig:
    """Load configuration from a TOML file.

    Falls back to defaults if no path is given or the file doesn't exist.
    The store path can be set via the PURCHASES_FILE environment variable
    when the config file leaves it empty.
    """
    raw: dict = {}

    if path is not None:
        p = Path(path)
        if p.exists():
            if tomllib is None:
                raise ImportError(
                    "tomli is required on Python < 3.11: pip install tomli"
                )
            with open(p, "rb") as f:
                raw = tomllib.load(f)

    sto = raw.get("store", {})
    prm = raw.get("prompt", {})
    log = raw.get("logging", {})

    # Resolve store path: config file → environment variable → default
    store_path = (
        sto.get("path", "")
        or os.environ.get("PURCHASES_FILE", "")
        or DEFAULT_STORE_PATH
    )

    return TrackerConfig(
        store=StoreConfig(
            path=store_path,
            strict=sto.get("strict", False),
        ),
        prompt=PromptConfig(
            affirmative=prm.get("affirmative", "y"),
        ),
        logging=LoggingConfig(
            level=str(log.get("level", "WARNING")).upper(),
        ),
    )
