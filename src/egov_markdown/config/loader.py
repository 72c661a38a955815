"""Config loader utilities."""
from __future__ import annotations

import yaml
from pathlib import Path
from typing import Any, Optional
import re

from egov_markdown.config.schema import AppConfig

PLACEHOLDER_PATTERN = re.compile(r"\$\{([^}]+)\}")


def load_config(path: Optional[Path] = None) -> AppConfig:
    """Load application config from YAML.

    Args:
        path: Path to the YAML configuration file. Defaults apply when None.

    Returns:
        Parsed `AppConfig` object.

    Raises:
        ValueError: When the YAML top level is not a mapping.
    """
    if path is None:
        return AppConfig()
    with path.open("r", encoding="utf-8") as fp:
        data: Any = yaml.safe_load(fp)
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ValueError(f"Config {path} must contain a mapping at the top level.")
    resolved = _resolve_placeholders(data)
    return AppConfig(**resolved)


def _resolve_placeholders(data: dict[str, Any]) -> dict[str, Any]:
    """Resolve ${...} placeholders using loaded config values."""

    def get_by_path(root: dict[str, Any], dotted: str) -> Any:
        cur: Any = root
        for part in dotted.split("."):
            if isinstance(cur, dict) and part in cur:
                cur = cur[part]
            else:
                return None
        return cur

    def resolve(obj: Any) -> Any:
        if isinstance(obj, dict):
            return {k: resolve(v) for k, v in obj.items()}
        if isinstance(obj, list):
            return [resolve(v) for v in obj]
        if isinstance(obj, str):
            def repl(match: re.Match[str]) -> str:
                val = get_by_path(data, match.group(1))
                return str(val) if val is not None else match.group(0)

            return PLACEHOLDER_PATTERN.sub(repl, obj)
        return obj

    return resolve(data)


__all__ = ["load_config"]
