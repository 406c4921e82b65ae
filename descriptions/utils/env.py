"""Load environment defaults for the description library from a local ``.env`` file."""
from __future__ import annotations

from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

__all__ = ["load_env"]


_env_loaded = False


def load_env(*, dotenv_path: Optional[str | Path] = None, force: bool = False) -> bool:
    """Read ``.env`` into the process environment at most once.

    Values already present in the environment win over the file. Returns ``True``
    when this call performed the load and ``False`` when it was skipped.
    """

    global _env_loaded
    if _env_loaded and not force:
        return False

    load_dotenv(dotenv_path=dotenv_path, override=False)
    _env_loaded = True
    return True
