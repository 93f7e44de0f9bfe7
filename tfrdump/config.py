"""Record constants and pilot file discovery."""
from pathlib import Path


# TFR format constants
RECORD_SIZE = 3855          # Every pilot file is exactly this long; new pilots are all zero
CERTIFIED_VALUE = 4         # Certificate byte once all three training missions are flown

PILOT_SUFFIX = ".tfr"


def find_pilot_files(directory: Path) -> list[Path]:
    """Return all pilot files in a game directory, sorted by name.

    The game writes upper-case names (``PILOT.TFR``), so the suffix match
    ignores case.
    """
    return sorted(
        p for p in directory.iterdir()
        if p.is_file() and p.suffix.lower() == PILOT_SUFFIX
    )



def pilot_file_problem(path: Path) -> str | None:
    """Describe why a path cannot be a pilot file, or None if it looks like one."""
    if not path.is_file():
        return "not a file"
    if path.suffix.lower() != PILOT_SUFFIX:
        return f"not a {PILOT_SUFFIX.upper()} file"
    size = path.stat().st_size
    if size != RECORD_SIZE:
        return f"{size} bytes, pilot files are {RECORD_SIZE}"
    return None
