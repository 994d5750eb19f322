import os
from typing import Optional, Tuple, overload

from dotenv import load_dotenv

_loaded = False


def _ensure_dotenv() -> None:
    global _loaded
    if not _loaded:
        # Real environment variables win over the .env file.
        load_dotenv(override=False)
        _loaded = True


@overload
def read_env(key: str) -> Optional[str]: ...
@overload
def read_env(*keys: str) -> Tuple[Optional[str], ...]: ...


def read_env(*keys: str) -> Optional[str] | Tuple[Optional[str], ...]:  # type: ignore
    _ensure_dotenv()

    values: list[Optional[str]] = []
    for key in keys:
        val = os.getenv(key)
        values.append(val.strip() if val is not None else None)

    return tuple(values) if len(values) > 1 else values[0]


def read_int_env(key: str, default: Optional[int]) -> Optional[int]:
    """Read an integer variable; ``none`` or an empty value yields ``None``."""
    raw = read_env(key)
    if raw is None:
        return default
    if raw == "" or raw.lower() == "none":
        return None
    try:
        return int(raw)
    except ValueError as exc:
        raise ValueError(f"Environment variable {key} must be an integer or 'none', got {raw!r}") from exc
