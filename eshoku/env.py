from __future__ import annotations

import os
from pathlib import Path


def _unquote(value: str) -> str:
    if len(value) >= 2 and value[0] == value[-1] and value[0] in ("'", '"'):
        return value[1:-1]
    return value


def load_env_file(path: str | os.PathLike[str] = ".env") -> list[str]:
    """Load KEY=VALUE pairs into os.environ, keeping variables that are already set.

    Accepts an optional ``export`` prefix. Returns the keys that were applied.
    """
    env_path = Path(path)
    if not env_path.exists():
        return []

    applied: list[str] = []
    for raw_line in env_path.read_text().splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#") or "=" not in line:
            continue
        if line.startswith("export "):
            line = line[len("export ") :].lstrip()
        key, value = (part.strip() for part in line.split("=", 1))
        if not key or key in os.environ:
            continue
        os.environ[key] = _unquote(value)
        applied.append(key)
    return applied
