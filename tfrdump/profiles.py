"""Pilot profiles: short names for the *.TFR files in a TIE Fighter install.

Profiles live in a TOML file under click's app dir::

    default_profile = "vader"

    [profiles.vader]
    pilot = 'C:\\TIE\\VADER.TFR'
"""
from __future__ import annotations

import re
import sys
from dataclasses import dataclass, field
from pathlib import Path

import click

from tfrdump.config import find_pilot_files, pilot_file_problem

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

_UNSAFE_NAME_CHARS = re.compile(r"[^a-z0-9_-]+")


@dataclass
class Profile:
    name: str
    pilot: Path


@dataclass
class Config:
    default_profile: str | None = None
    profiles: dict[str, Profile] = field(default_factory=dict)


def get_config_path() -> Path:
    return Path(click.get_app_dir("tfrdump")) / "config.toml"


def load_config() -> Config:
    """Read the profile file; an absent file means no profiles."""
    path = get_config_path()
    if not path.exists():
        return Config()

    with open(path, "rb") as f:
        data = tomllib.load(f)

    config = Config(default_profile=data.get("default_profile"))
    for name, info in data.get("profiles", {}).items():
        config.profiles[name] = Profile(name=name, pilot=Path(info["pilot"]))
    return config


def save_config(config: Config) -> Path:
    path = get_config_path()
    path.parent.mkdir(parents=True, exist_ok=True)

    lines: list[str] = []
    if config.default_profile:
        lines.append(f"default_profile = \"{config.default_profile}\"")
    lines.append("")
    for name, profile in config.profiles.items():
        # Literal strings keep DOS-style backslashes intact
        lines.extend([f"[profiles.{name}]", f"pilot = '{profile.pilot}'", ""])

    path.write_text("\n".join(lines), encoding="utf-8")
    return path


def profile_name_for(pilot: Path) -> str:
    """Profile name derived from the pilot's file name (``VADER.TFR`` -> ``vader``)."""
    return _UNSAFE_NAME_CHARS.sub("_", pilot.stem.lower()).strip("_") or "pilot"


def profiles_from_directory(directory: Path) -> tuple[list[Profile], list[tuple[Path, str]]]:
    """One profile per valid pilot file in a game directory.

    Returns (profiles, skipped) where skipped pairs each rejected *.TFR
    file with the reason it was rejected.
    """
    profiles: list[Profile] = []
    skipped: list[tuple[Path, str]] = []
    for path in find_pilot_files(directory):
        problem = pilot_file_problem(path)
        if problem:
            skipped.append((path, problem))
        else:
            profiles.append(Profile(name=profile_name_for(path), pilot=path))
    return profiles, skipped


def resolve_pilot(pilot: Path | None, profile_name: str | None) -> Path:
    """Pick the pilot file: --file, then --profile, then the default profile.

    An explicit --file is taken as is, since the decoder pads or truncates
    odd-sized input. Profile paths must still look like a pilot file.
    """
    if pilot is not None:
        if not pilot.exists():
            raise click.UsageError(f"Pilot file not found: {pilot}")
        return pilot

    config = load_config()
    name = profile_name or config.default_profile
    if name is None:
        raise click.UsageError(
            "No pilot file provided. Either:\n"
            "  1. Run 'tfrdump init <TIE Fighter directory>' to create profiles\n"
            "  2. Pass --file <path> explicitly\n"
            "  3. Pass --profile <name> to use a named profile"
        )
    return resolve_profile_pilot(name, config)


def resolve_profile_pilot(profile_name: str, config: Config | None = None) -> Path:
    """Resolve one profile name to its pilot file (also used by --vs)."""
    if config is None:
        config = load_config()
    profile = config.profiles.get(profile_name)
    if profile is None:
        available = ", ".join(config.profiles) or "(none)"
        raise click.UsageError(f"Profile '{profile_name}' not found. Available profiles: {available}")

    if not profile.pilot.exists():
        raise click.UsageError(
            f"Pilot file not found for profile '{profile_name}': {profile.pilot}\n"
            "Run 'tfrdump init' again if the game moved."
        )
    problem = pilot_file_problem(profile.pilot)
    if problem:
        raise click.UsageError(f"Profile '{profile_name}' points at {profile.pilot}: {problem}")
    return profile.pilot
