"""Environment configuration for the hexcolour CLI.

Load order (first wins):
  1. Existing OS environment variables — never overwrite.
  2. .env file at --env-file path (if explicitly provided).
  3. .env file walking up from cwd, stopping at .git (file or dir).

Recognised keys:
  HEXCOLOUR_STYLE        default style token for `hex` and `ramp` (default AUTO)
  HEXCOLOUR_RAMP_LENGTH  default number of colours for `ramp`/`swatch` (default 10)

The library API never reads these; only the CLI does.
"""

import os
from pathlib import Path

STYLE_VAR = 'HEXCOLOUR_STYLE'
RAMP_LENGTH_VAR = 'HEXCOLOUR_RAMP_LENGTH'
DEFAULT_RAMP_LENGTH = 10


def _find_dotenv(start: Path) -> Path | None:
    """Walk up from start, return first .env found, stop at .git boundary."""
    current = start.resolve()
    while True:
        candidate = current / '.env'
        if candidate.is_file():
            return candidate
        if (current / '.git').exists():
            return None
        parent = current.parent
        if parent == current:
            return None
        current = parent


def _parse_dotenv(path: Path) -> dict[str, str]:
    """Parse a .env file into a dict. Handles KEY=value and KEY="value"."""
    result: dict[str, str] = {}
    for line in path.read_text(encoding='utf-8').splitlines():
        line = line.strip()
        if not line or line.startswith('#'):
            continue
        if '=' not in line:
            continue
        key, _, raw_value = line.partition('=')
        key = key.strip()
        value = raw_value.strip().strip('"').strip("'")
        if key:
            result[key] = value
    return result


def load_env(env_file: str | None = None) -> Path | None:
    """Load .env into os.environ for keys not already set.

    Returns the path that was loaded, or None if no .env was found/used.
    """
    if env_file:
        path = Path(env_file)
        if not path.is_file():
            return None
    else:
        path = _find_dotenv(Path.cwd())
        if path is None:
            return None

    parsed = _parse_dotenv(path)
    for key, value in parsed.items():
        if key not in os.environ:
            os.environ[key] = value

    return path


def default_style() -> str | None:
    """Style token from HEXCOLOUR_STYLE, or None for auto."""
    return os.environ.get(STYLE_VAR) or None


def default_ramp_length() -> int:
    """Ramp length from HEXCOLOUR_RAMP_LENGTH; falls back on unset or bad values."""
    raw = os.environ.get(RAMP_LENGTH_VAR, '').strip()
    if not raw:
        return DEFAULT_RAMP_LENGTH
    try:
        return int(raw)
    except ValueError:
        return DEFAULT_RAMP_LENGTH
