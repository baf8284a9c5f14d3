"""Configuration for colour-mix: .env loading and the generator config.

Lookup order (first wins):
  1. Existing OS environment variables — never overwritten.
  2. The .env file given with --env-file.
  3. The nearest .env walking up from cwd, stopping at a .git boundary.

COLOUR_MIX_SEPARATORS holds the accepted class-token separators,
comma-separated (default ":,-").
"""

import os
from pathlib import Path

from colour_mix.core.types import DEFAULT_SEPARATORS, GeneratorConfig

SEPARATORS_VAR = 'COLOUR_MIX_SEPARATORS'


def _find_dotenv(start: Path) -> Path | None:
    """Return the closest .env at or above start, without leaving the repo."""
    for directory in (start.resolve(), *start.resolve().parents):
        candidate = directory / '.env'
        if candidate.is_file():
            return candidate
        # .git is a dir in a clone, a file in a worktree
        if (directory / '.git').exists():
            return None
    return None


def _parse_dotenv(path: Path) -> dict[str, str]:
    """Read KEY=value lines. Quotes around values are dropped, # lines skipped."""
    values: dict[str, str] = {}
    for raw in path.read_text(encoding='utf-8').splitlines():
        line = raw.strip()
        if not line or line.startswith('#') or '=' not in line:
            continue
        key, _, value = line.partition('=')
        key = key.strip()
        if key:
            values[key] = value.strip().strip('"').strip("'")
    return values


def load_env(env_file: str | None = None) -> Path | None:
    """Copy .env values into os.environ where unset. Returns the file used, if any."""
    if env_file:
        path: Path | None = Path(env_file)
        if not path.is_file():
            return None
    else:
        path = _find_dotenv(Path.cwd())
        if path is None:
            return None

    for key, value in _parse_dotenv(path).items():
        os.environ.setdefault(key, value)
    return path


def parse_separators(text: str) -> tuple[str, ...]:
    """':,-' -> (':', '-'). Raises ValueError when nothing is left."""
    separators = tuple(s for s in (part.strip() for part in text.split(',')) if s)
    if not separators:
        raise ValueError(f'No separators in {text!r}')
    return separators


def config_from_env(separators: str | None = None) -> GeneratorConfig:
    """Build the generator config. An explicit separators string beats the environment."""
    text = separators if separators is not None else os.environ.get(SEPARATORS_VAR)
    if text is None:
        return GeneratorConfig(separators=DEFAULT_SEPARATORS)
    return GeneratorConfig(separators=parse_separators(text))
