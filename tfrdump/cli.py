"""Click CLI for the TIE Fighter pilot file dumper."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import click

from tfrdump.profiles import (
    load_config,
    profiles_from_directory,
    resolve_pilot,
    resolve_profile_pilot,
    save_config,
)
from tfrdump.tfr.errors import TFRError
from tfrdump.tfr.records import PilotRecord, decode_pilot

logger = logging.getLogger(__name__)


class Context:
    """Resolves the selected pilot (--file / --profile / default) and decodes it once."""

    def __init__(self, pilot: Path | None = None, profile: str | None = None):
        self._explicit_pilot = pilot
        self._profile_name = profile
        self._resolved_pilot: Path | None = None
        self._record: PilotRecord | None = None

    @property
    def pilot(self) -> Path:
        if self._resolved_pilot is None:
            self._resolved_pilot = resolve_pilot(self._explicit_pilot, self._profile_name)
        return self._resolved_pilot

    @property
    def record(self) -> PilotRecord:
        if self._record is None:
            self._record = load_pilot(self.pilot)
        return self._record


pass_ctx = click.make_pass_decorator(Context)


def read_pilot_bytes(path: Path) -> bytes:
    try:
        data = path.read_bytes()
    except OSError as e:
        raise click.ClickException(f"Cannot read pilot file {path}: {e.strerror or e}") from e
    logger.debug("Read %d bytes from %s", len(data), path)
    return data


def load_pilot(path: Path) -> PilotRecord:
    """Read and decode a pilot file, turning read and decode failures into click errors."""
    data = read_pilot_bytes(path)
    try:
        return decode_pilot(data)
    except TFRError as e:
        raise click.ClickException(f"{path}: {e}") from e


def _write_or_echo(data: str, output: Optional[str]):
    if output:
        Path(output).write_text(data, encoding="utf-8")
        click.echo(f"Written to {output}")
    else:
        click.echo(data)


@click.group()
@click.option(
    "--file", "-f", "pilot", required=False, default=None,
    type=click.Path(exists=False, dir_okay=False, path_type=Path),
    help="Path to a pilot file (*.TFR), optional if profiles configured",
)
@click.option(
    "--profile", "-p", default=None, type=str,
    help="Named profile to use (from tfrdump init)",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.version_option(package_name="tfrdump")
@click.pass_context
def cli(ctx, pilot: Optional[Path], profile: Optional[str], verbose: bool):
    """tfrdump - TIE Fighter pilot file dumper.

    Decode *.TFR savegames and show rank, medals, battle progress
    and combat statistics.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    ctx.ensure_object(dict)
    ctx.obj = Context(pilot=pilot, profile=profile)


@cli.command()
@click.argument("game_dir", required=False,
                type=click.Path(exists=True, file_okay=False, path_type=Path))
def init(game_dir: Optional[Path]):
    """Create a profile for every pilot file in a TIE Fighter directory.

    Profiles are named after the pilot (VADER.TFR becomes 'vader'). Running
    init again adds new pilots and refreshes the paths of known ones.
    """
    if game_dir is None:
        game_dir = click.prompt(
            "TIE Fighter directory",
            type=click.Path(exists=True, file_okay=False, path_type=Path),
        )

    found, skipped = profiles_from_directory(game_dir)
    for path, problem in skipped:
        click.echo(f"Skipping {path.name}: {problem}")
    if not found:
        raise click.ClickException(f"No usable pilot files in {game_dir}.")

    config = load_config()
    click.echo(f"Pilots found in {game_dir}:")
    for profile in found:
        marker = " (updated)" if profile.name in config.profiles else ""
        click.echo(f"  {profile.name}: {profile.pilot.name}{marker}")
        config.profiles[profile.name] = profile

    names = list(config.profiles)
    default = config.default_profile if config.default_profile in config.profiles else found[0].name
    if len(names) > 1:
        default = click.prompt("Default pilot", type=click.Choice(names), default=default)
    config.default_profile = default

    saved_path = save_config(config)
    click.echo(f"\nConfig saved to {saved_path}")


@cli.command()
@click.option("--hide-zero-kills", is_flag=True, help="Omit craft with no kills from the kill details")
@pass_ctx
def show(ctx: Context, hide_zero_kills: bool):
    """Show everything known about a pilot."""
    from tfrdump.export.text_report import format_pilot

    record = ctx.record
    try:
        text = format_pilot(record, show_zero_kills=not hide_zero_kills)
    except TFRError as e:
        raise click.ClickException(f"{ctx.pilot}: {e}") from e
    click.echo(text)


@cli.command()
@click.option("--format", "fmt", type=click.Choice(["csv", "json"]), required=True)
@click.option("--output", "-o", type=click.Path(), help="Output file path")
@pass_ctx
def export(ctx: Context, fmt: str, output: Optional[str]):
    """Export a pilot as CSV or JSON."""
    record = ctx.record

    if fmt == "csv":
        from tfrdump.export.csv_export import export_csv
        data = export_csv(record)
    else:
        from tfrdump.export.json_export import export_json
        try:
            data = export_json(record)
        except TFRError as e:
            raise click.ClickException(f"{ctx.pilot}: {e}") from e

    _write_or_echo(data, output)


@cli.command()
@click.argument("other", required=False,
                type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--vs", "vs_profile", default=None, type=str,
              help="Profile name of the pilot to compare against (alternative to OTHER)")
@click.option("--output", "-o", "output_path", type=click.Path(), default=None,
              help="Write diff output to a file instead of stdout")
@pass_ctx
def compare(ctx: Context, other: Optional[Path], vs_profile: Optional[str],
            output_path: Optional[str]):
    """Compare the selected pilot with another pilot file."""
    from tfrdump.diff.engine import compare_pilots, format_diff

    if vs_profile is not None and other is not None:
        raise click.UsageError("Cannot use both --vs and OTHER. Choose one.")
    if vs_profile is not None:
        other = resolve_profile_pilot(vs_profile)
    if other is None:
        raise click.UsageError("Specify a pilot file to compare against, or --vs <profile>.")

    old = ctx.record
    new = load_pilot(other)
    click.echo(f"Comparing {ctx.pilot} vs {other}...")
    _write_or_echo(format_diff(compare_pilots(old, new)), output_path)


@cli.command()
def layout():
    """List every known field offset in the pilot file."""
    from tfrdump.config import RECORD_SIZE
    from tfrdump.tfr.layout import fields_in_offset_order

    click.echo(f"{'Offset':>6}  {'End':>5}  {'Width':>5}  {'Count':>5}  {'Field':<30}  {'Notes'}")
    click.echo("-" * 90)
    for f in fields_in_offset_order():
        count = f.count if f.is_array else ""
        click.echo(f"{f.offset:>6}  {f.end - 1:>5}  {f.width:>5}  {count:>5}  {f.name:<30}  {f.description}")
    click.echo(f"\nRecord size: {RECORD_SIZE} bytes. Unlisted offsets are unknown.")


@cli.command()
@click.argument("directory", type=click.Path(exists=True, file_okay=False, path_type=Path))
def scan(directory: Path):
    """Summarize every pilot file in a game directory."""
    from tfrdump.config import find_pilot_files
    from tfrdump.export.text_report import format_summary

    paths = find_pilot_files(directory)
    if not paths:
        click.echo(f"No pilot files found in {directory}.")
        return

    for path in paths:
        try:
            record = decode_pilot(path.read_bytes())
        except (OSError, TFRError) as e:
            click.echo(f"{path.name:<14} unreadable: {e}")
            continue
        click.echo(f"{path.name:<14} {format_summary(record)}")
