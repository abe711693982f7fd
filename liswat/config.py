from __future__ import annotations
import os
from pathlib import Path
from typing import Iterable, List


# Resolve installation dir (liswat package directory)
_LISWAT_DIR = Path(__file__).resolve().parent

# Defaults
_DEFAULT_PRELUDE_FILES = [_LISWAT_DIR / 'prelude' / 'prelude.scm']
_DEFAULT_RECURSION_LIMIT = 10000


def paths_from_env(var: str, defaults: Iterable[Path]) -> List[Path]:
    raw = os.environ.get(var)
    if not raw:
        return [Path(p) for p in defaults]
    return [Path(p.strip()) for p in raw.split(os.pathsep) if p.strip()]


def get_prelude_files() -> List[Path]:
    return paths_from_env('LISWAT_PRELUDE_PATH', _DEFAULT_PRELUDE_FILES)


def get_recursion_limit() -> int:
    raw = os.environ.get('LISWAT_RECURSION_LIMIT')
    if not raw:
        return _DEFAULT_RECURSION_LIMIT
    try:
        limit = int(raw)
    except ValueError:
        raise ValueError(f"LISWAT_RECURSION_LIMIT must be an integer, got {raw!r}")
    return max(limit, 1000)
