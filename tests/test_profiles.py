from pathlib import Path

import click
import pytest
from click.testing import CliRunner

from tfrdump import profiles
from tfrdump.cli import cli
from tfrdump.profiles import (
    Config,
    Profile,
    load_config,
    resolve_pilot,
    resolve_profile_pilot,
    profile_name_for,
    profiles_from_directory,
    save_config,
)


@pytest.fixture(autouse=True)
def config_path(tmp_path, monkeypatch):
    path = tmp_path / "cfg" / "config.toml"
    monkeypatch.setattr(profiles, "get_config_path", lambda: path)
    return path


def test_missing_config_is_empty():
    config = load_config()
    assert config.default_profile is None
    assert config.profiles == {}


def test_save_and_load(tmp_path):
    config = Config(default_profile="main")
    config.profiles["main"] = Profile("main", tmp_path / "VADER.TFR")
    config.profiles["alt"] = Profile("alt", Path(r"C:\TIE\PILOT.TFR"))
    save_config(config)

    loaded = load_config()
    assert loaded.default_profile == "main"
    assert loaded.profiles["main"].pilot == tmp_path / "VADER.TFR"
    assert str(loaded.profiles["alt"].pilot) == str(Path(r"C:\TIE\PILOT.TFR"))


def test_profile_name_for():
    assert profile_name_for(Path("VADER.TFR")) == "vader"
    assert profile_name_for(Path("Mara Jade.tfr")) == "mara_jade"


def test_resolution_order(pilot_file, tmp_path):
    other = tmp_path / "OTHER.TFR"
    other.write_bytes(pilot_file.read_bytes())
    config = Config(default_profile="main")
    config.profiles["main"] = Profile("main", pilot_file)
    config.profiles["other"] = Profile("other", other)
    save_config(config)

    assert resolve_pilot(None, None) == pilot_file
    assert resolve_pilot(None, "other") == other
    assert resolve_pilot(other, "main") == other


def test_unresolvable():
    with pytest.raises(click.UsageError, match="No pilot file provided"):
        resolve_pilot(None, None)
    with pytest.raises(click.UsageError, match="not found"):
        resolve_profile_pilot("ghost")


def test_profile_with_missing_file(tmp_path):
    config = Config(default_profile="gone")
    config.profiles["gone"] = Profile("gone", tmp_path / "GONE.TFR")
    save_config(config)
    with pytest.raises(click.UsageError, match="Pilot file not found for profile 'gone'"):
        resolve_pilot(None, None)


@pytest.fixture
def game_dir(tmp_path, veteran, blank):
    game = tmp_path / "TIE"
    game.mkdir()
    (game / "VADER.TFR").write_bytes(bytes(veteran))
    (game / "ROOKIE.TFR").write_bytes(bytes(blank))
    (game / "BROKEN.TFR").write_bytes(b"\x00" * 10)
    (game / "README.TXT").write_text("May the Force be with you")
    return game


def test_profiles_from_directory(game_dir):
    found, skipped = profiles_from_directory(game_dir)
    assert [p.name for p in found] == ["rookie", "vader"]
    assert found[1].pilot == game_dir / "VADER.TFR"
    assert [(p.name, problem) for p, problem in skipped] == [("BROKEN.TFR", "10 bytes, pilot files are 3855")]


def test_init_then_show_default_profile(game_dir):
    runner = CliRunner()
    result = runner.invoke(cli, ["init", str(game_dir)], input="vader\n")
    assert result.exit_code == 0, result.output
    assert "Skipping BROKEN.TFR" in result.output
    assert "  vader: VADER.TFR" in result.output
    assert "Config saved to" in result.output

    config = load_config()
    assert config.default_profile == "vader"
    assert set(config.profiles) == {"rookie", "vader"}

    result = runner.invoke(cli, ["show"])
    assert result.exit_code == 0, result.output
    assert "Navy rank:\tCaptain" in result.output

    result = runner.invoke(cli, ["-p", "rookie", "show"])
    assert result.exit_code == 0, result.output
    assert "Navy rank:\tCadet" in result.output


def test_init_prompts_for_directory_and_keeps_profiles(tmp_path, pilot_file):
    config = Config(default_profile="old")
    config.profiles["old"] = Profile("old", pilot_file)
    save_config(config)
    game = tmp_path / "TIE"
    game.mkdir()
    (game / "ROOKIE.TFR").write_bytes(bytes(3855))

    result = CliRunner().invoke(cli, ["init"], input=f"{game}\n\n")
    assert result.exit_code == 0, result.output

    config = load_config()
    assert config.default_profile == "old"
    assert config.profiles["rookie"].pilot == game / "ROOKIE.TFR"
    assert config.profiles["old"].pilot == pilot_file


def test_init_without_pilots(tmp_path):
    (tmp_path / "NOTES.TXT").write_text("no pilots here")
    result = CliRunner().invoke(cli, ["init", str(tmp_path)])
    assert result.exit_code == 1
    assert "No usable pilot files" in result.output
    assert load_config().profiles == {}


@pytest.mark.parametrize("name, make, problem", [
    ("VADER.SAV", lambda p: p.write_bytes(bytes(3855)), "not a .TFR file"),
    ("SHORT.TFR", lambda p: p.write_bytes(bytes(100)), "100 bytes, pilot files are 3855"),
    ("FOLDER.TFR", lambda p: p.mkdir(), "not a file"),
])
def test_profile_must_point_at_pilot_file(tmp_path, name, make, problem):
    target = tmp_path / name
    make(target)
    config = Config(default_profile="bad")
    config.profiles["bad"] = Profile("bad", target)
    save_config(config)

    with pytest.raises(click.UsageError, match=problem):
        resolve_profile_pilot("bad")

    result = CliRunner().invoke(cli, ["show"])
    assert result.exit_code == 2
    assert f"Profile 'bad' points at {target}" in result.output



def test_compare_vs_profile(pilot_file, tmp_path, veteran, put):
    put(veteran, "level", 6)
    other = tmp_path / "OTHER.TFR"
    other.write_bytes(bytes(veteran))
    config = Config(default_profile="main")
    config.profiles["main"] = Profile("main", pilot_file)
    config.profiles["other"] = Profile("other", other)
    save_config(config)

    result = CliRunner().invoke(cli, ["compare", "--vs", "other"])
    assert result.exit_code == 0, result.output
    assert "5 -> 6" in result.output
