from __future__ import annotations

from pathlib import Path

from dotenv import load_dotenv


def _env_candidates() -> list[Path]:
    repo_root = Path(__file__).resolve().parents[2]
    return [repo_root / ".env", Path.cwd() / ".env"]


def load_env(path: Path | str | None = None, *, override: bool = False) -> Path | None:
    """
    Load the first `.env` file found into `os.environ`.

    An explicit `path` wins; otherwise the repo root is tried before the current
    working directory. Returns the file that was loaded, or None.
    """

    candidates = [Path(path)] if path is not None else _env_candidates()
    for candidate in candidates:
        if candidate.is_file():
            load_dotenv(dotenv_path=candidate, override=override)
            return candidate
    return None
