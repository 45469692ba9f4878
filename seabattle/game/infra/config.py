"""Application configuration and env loading."""

from __future__ import annotations

import os
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, fields, replace
from pathlib import Path

from seabattle.game.app.commands import Alphabet, resolve_alphabet
from seabattle.game.core.fleet import fleet_cell_count, fleet_fits
from seabattle.game.core.models import BOARD_HEIGHT, BOARD_WIDTH, DEFAULT_FLEET, ShipSpec

DEFAULT_PLAYERS: tuple[str, str] = ("Brad", "Kate")
MAX_BOARD_HEIGHT = 99


class ConfigError(ValueError):
    """Raised when the resolved configuration cannot run a game."""


@dataclass(frozen=True, slots=True)
class GameConfig:
    """Immutable session configuration passed into the game loop."""

    width: int = BOARD_WIDTH
    height: int = BOARD_HEIGHT
    alphabet_name: str = "latin"
    dev_mode: bool = False
    players: tuple[str, str] = DEFAULT_PLAYERS
    seed: int | None = None
    clear_screen: bool = True
    message_delay: float = 1.0
    max_read_failures: int = 5
    fleet: tuple[ShipSpec, ...] = DEFAULT_FLEET

    @property
    def alphabet(self) -> Alphabet:
        return resolve_alphabet(self.alphabet_name)


def load_env_file(path: str = ".env", *, override_existing: bool = True) -> None:
    """Load KEY=VALUE pairs from an env file into process environment.

    By default, values from the env file overwrite existing environment variables.
    """
    env_path = _resolve_env_path(path)
    if not env_path.exists():
        return

    for raw_line in env_path.read_text(encoding="utf-8").splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        if "=" not in line:
            continue

        key, value = line.split("=", 1)
        key = key.strip()
        value = value.strip()
        if not key:
            continue

        if len(value) >= 2 and value[0] == value[-1] and value[0] in {"'", '"'}:
            value = value[1:-1]

        if override_existing or key not in os.environ:
            os.environ[key] = value


def load_default_env_files(
    *, override_existing: bool = True, paths: Sequence[str] | None = None
) -> None:
    """Load env files with optional local overrides.

    Later files overwrite earlier ones. Default order:
    1) appdata/config/.env.app
    2) appdata/config/.env.app.local
    3) .env
    4) .env.local
    """
    to_load = (
        tuple(paths)
        if paths is not None
        else (
            "appdata/config/.env.app",
            "appdata/config/.env.app.local",
            ".env",
            ".env.local",
        )
    )
    for path in to_load:
        load_env_file(path, override_existing=override_existing)


def load_game_config(
    env: Mapping[str, str] | None = None, **overrides: object
) -> GameConfig:
    """Resolve config from ``SEABATTLE_*`` env vars, then explicit overrides.

    Overrides set to ``None`` are ignored, so argparse defaults can be passed
    straight through.
    """
    source = os.environ if env is None else env
    config = GameConfig(
        width=_int(source, "SEABATTLE_BOARD_WIDTH", BOARD_WIDTH),
        height=_int(source, "SEABATTLE_BOARD_HEIGHT", BOARD_HEIGHT),
        alphabet_name=source.get("SEABATTLE_ALPHABET", "latin").strip().lower() or "latin",
        dev_mode=_flag(source, "SEABATTLE_DEV", False),
        players=_players(source.get("SEABATTLE_PLAYERS")),
        seed=_optional_int(source, "SEABATTLE_SEED"),
        clear_screen=_flag(source, "SEABATTLE_CLEAR_SCREEN", True),
        message_delay=_float(source, "SEABATTLE_MESSAGE_DELAY", 1.0),
        max_read_failures=_int(source, "SEABATTLE_MAX_READ_FAILURES", 5),
    )
    known = {f.name for f in fields(GameConfig)}
    unknown = set(overrides) - known
    if unknown:
        raise TypeError(f"Unknown config overrides: {', '.join(sorted(unknown))}.")
    applied = {key: value for key, value in overrides.items() if value is not None}
    if "players" in applied:
        applied["players"] = tuple(applied["players"])  # type: ignore[arg-type]
    config = replace(config, **applied)  # type: ignore[arg-type]
    validate_config(config)
    return config


def validate_config(config: GameConfig) -> None:
    """Raise ``ConfigError`` if the config cannot host a game."""
    try:
        alphabet = config.alphabet
    except ValueError as exc:
        raise ConfigError(str(exc)) from exc
    if not 1 <= config.width <= len(alphabet.columns):
        raise ConfigError(
            f"Board width must be between 1 and {len(alphabet.columns)} for the "
            f"{alphabet.name} alphabet, got {config.width}."
        )
    if not 1 <= config.height <= MAX_BOARD_HEIGHT:
        raise ConfigError(f"Board height must be between 1 and {MAX_BOARD_HEIGHT}, got {config.height}.")
    if len(config.players) != 2 or not all(name.strip() for name in config.players):
        raise ConfigError("Exactly two non-empty player names are required.")
    if config.max_read_failures < 1:
        raise ConfigError("max_read_failures must be at least 1.")
    if config.message_delay < 0:
        raise ConfigError("message_delay must not be negative.")
    if not fleet_fits(config.fleet, width=config.width, height=config.height):
        raise ConfigError(
            f"Fleet of {fleet_cell_count(config.fleet)} cells cannot be placed without touching "
            f"on a {config.width}x{config.height} board."
        )


def _flag(source: Mapping[str, str], name: str, default: bool) -> bool:
    raw = source.get(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def _int(source: Mapping[str, str], name: str, default: int) -> int:
    raw = source.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise ConfigError(f"{name} must be an integer, got {raw!r}.") from exc


def _optional_int(source: Mapping[str, str], name: str) -> int | None:
    raw = source.get(name)
    if raw is None or not raw.strip():
        return None
    return _int(source, name, 0)


def _float(source: Mapping[str, str], name: str, default: float) -> float:
    raw = source.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw)
    except ValueError as exc:
        raise ConfigError(f"{name} must be a number, got {raw!r}.") from exc


def _players(raw: str | None) -> tuple[str, str]:
    if raw is None or not raw.strip():
        return DEFAULT_PLAYERS
    names = tuple(part.strip() for part in raw.split(","))
    if len(names) != 2:
        raise ConfigError(f"SEABATTLE_PLAYERS must hold two comma-separated names, got {raw!r}.")
    return names[0], names[1]


def _resolve_env_path(path: str) -> Path:
    """Resolve env path from cwd, then the project checkout root."""
    candidate = Path(path)
    if candidate.exists() or candidate.is_absolute():
        return candidate
    return Path(__file__).resolve().parents[3] / path
