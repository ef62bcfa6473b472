from __future__ import annotations

import os
from dataclasses import MISSING, dataclass, field, fields
from pathlib import Path

from dotenv import load_dotenv

from pgnfacts.EncodingLayout import BYTE_ORDERS, EncodingLayout
from pgnfacts.errors import ConfigError

_MISSING = object()

DEFAULT_INPUT_PATH = Path("lichess_db_standard_rated_2016-05.pgn")
DEFAULT_OUTPUT_PATH = Path("lichess_db_standard_rated_2016-05.sqlite")
DEFAULT_ENCODING_WIDTH = 800
DEFAULT_BYTE_ORDER = "little"
DEFAULT_EXCLUDED_HEADERS = ("WhiteTitle", "BlackTitle")
DEFAULT_RATING_MODE = "average"
DEFAULT_PROGRESS_INTERVAL = 100_000

BACKENDS = ("sqlite", "duckdb")
RATING_MODES = ("average", "legacy_white")
_DUCKDB_SUFFIXES = (".duckdb", ".ddb")

_ENV_FIELDS = {
    "input_path": "PGNFACTS_INPUT_PATH",
    "output_path": "PGNFACTS_OUTPUT_PATH",
    "encoding_width": "PGNFACTS_ENCODING_WIDTH",
    "byte_order": "PGNFACTS_BYTE_ORDER",
    "castling_padding": "PGNFACTS_CASTLING_PADDING",
    "backend": "PGNFACTS_BACKEND",
    "excluded_headers": "PGNFACTS_EXCLUDED_HEADERS",
    "rating_mode": "PGNFACTS_RATING_MODE",
    "progress_interval": "PGNFACTS_PROGRESS_INTERVAL",
    "relaxed_durability": "PGNFACTS_RELAXED_DURABILITY",
    "max_games": "PGNFACTS_MAX_GAMES",
}


def _field_value(name: str, field_info: object, kwargs: dict[str, object]) -> object:
    value = kwargs.pop(name, _MISSING)
    if value is not _MISSING:
        return value
    default_factory = getattr(field_info, "default_factory", MISSING)
    if default_factory is not MISSING:
        return default_factory()
    default = getattr(field_info, "default", MISSING)
    if default is not MISSING:
        return default
    raise TypeError(f"Missing required argument: {name}")


def _raise_on_unexpected_kwargs(kwargs: dict[str, object]) -> None:
    if kwargs:
        unexpected = next(iter(kwargs))
        raise TypeError(f"Settings.__init__() got an unexpected keyword argument '{unexpected}'")


def _parse_int(name: str, raw: object) -> int:
    try:
        return int(str(raw).strip())
    except ValueError as exc:
        raise ConfigError(f"{name} must be an integer, got {raw!r}") from exc


def _parse_bool(raw: object) -> bool:
    if isinstance(raw, bool):
        return raw
    return str(raw).strip().lower() in ("1", "true", "yes", "on")


def _parse_header_list(raw: object) -> tuple[str, ...]:
    if isinstance(raw, str):
        return tuple(part.strip() for part in raw.split(",") if part.strip())
    return tuple(str(part) for part in raw)  # type: ignore[union-attr]


@dataclass(slots=True, init=False)
class Settings:
    """Configuration for a single PGN import run."""

    input_path: Path = DEFAULT_INPUT_PATH
    output_path: Path = DEFAULT_OUTPUT_PATH
    encoding_width: int = DEFAULT_ENCODING_WIDTH
    byte_order: str = DEFAULT_BYTE_ORDER
    castling_padding: int | None = None
    backend: str | None = None
    excluded_headers: tuple[str, ...] = field(default_factory=lambda: DEFAULT_EXCLUDED_HEADERS)
    rating_mode: str = DEFAULT_RATING_MODE
    progress_interval: int = DEFAULT_PROGRESS_INTERVAL
    relaxed_durability: bool = True
    max_games: int | None = None

    def __init__(self, **kwargs: object) -> None:
        for name, field_info in self.__dataclass_fields__.items():
            setattr(self, name, _field_value(name, field_info, kwargs))
        _raise_on_unexpected_kwargs(kwargs)
        self._normalize()

    def _normalize(self) -> None:
        self.input_path = Path(self.input_path)
        self.output_path = Path(self.output_path)
        self.encoding_width = _parse_int("encoding_width", self.encoding_width)
        self.progress_interval = _parse_int("progress_interval", self.progress_interval)
        self.relaxed_durability = _parse_bool(self.relaxed_durability)
        self.excluded_headers = _parse_header_list(self.excluded_headers)
        if self.max_games is not None:
            self.max_games = _parse_int("max_games", self.max_games)
        if self.castling_padding is not None:
            self.castling_padding = _parse_int("castling_padding", self.castling_padding)
        if self.backend:
            self.backend = str(self.backend).lower()
        self.byte_order = str(self.byte_order).lower()

    @property
    def resolved_backend(self) -> str:
        """Return the configured backend, inferring it from the output suffix when unset."""
        if self.backend:
            return self.backend
        if self.output_path.suffix.lower() in _DUCKDB_SUFFIXES:
            return "duckdb"
        return "sqlite"

    def encoding_layout(self) -> EncodingLayout:
        """Build the position encoding layout for this deployment."""
        try:
            return EncodingLayout(
                width=self.encoding_width,
                byte_order=self.byte_order,
                padding_before_castling=self.castling_padding,
            )
        except ValueError as exc:
            raise ConfigError(str(exc)) from exc

    def validate(self) -> None:
        """Raise ConfigError when any option is out of range."""
        if self.resolved_backend not in BACKENDS:
            raise ConfigError(f"backend must be one of {BACKENDS}, got {self.backend!r}")
        if self.rating_mode not in RATING_MODES:
            raise ConfigError(f"rating_mode must be one of {RATING_MODES}, got {self.rating_mode!r}")
        if self.byte_order not in BYTE_ORDERS:
            raise ConfigError(f"byte_order must be one of {BYTE_ORDERS}, got {self.byte_order!r}")
        if self.progress_interval <= 0:
            raise ConfigError("progress_interval must be positive")
        if self.max_games is not None and self.max_games <= 0:
            raise ConfigError("max_games must be positive")
        self.encoding_layout()


def _env_overrides() -> dict[str, object]:
    overrides: dict[str, object] = {}
    for name, env_name in _ENV_FIELDS.items():
        value = os.getenv(env_name)
        if value is not None and value.strip() != "":
            overrides[name] = value
    return overrides


def get_settings(**overrides: object) -> Settings:
    """Build validated settings from the environment plus explicit overrides.

    Explicit overrides whose value is ``None`` are ignored so that unset CLI
    flags fall back to the environment and then to the defaults.
    """
    load_dotenv()
    known = {item.name for item in fields(Settings)}
    values = _env_overrides()
    for name, value in overrides.items():
        if name not in known:
            raise TypeError(f"get_settings() got an unexpected keyword argument '{name}'")
        if value is not None:
            values[name] = value
    settings = Settings(**values)
    settings.validate()
    return settings
