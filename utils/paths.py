from pathlib import Path
from typing import Optional


def resolve_start_directory(arg: Optional[str]) -> Optional[Path]:
    """
    Turns a launch argument into the directory to scan.
    A file path yields its containing folder; an empty argument yields None.
    The directory is not checked for existence here, the scan reports that.
    """
    if not arg:
        return None
    path = Path(arg).expanduser().absolute()
    if path.is_file():
        return path.parent
    return path


def directory_of_selection(selected_file: str) -> Optional[Path]:
    """Gets the containing directory of a file chosen in the open dialog."""
    if not selected_file:
        return None
    return Path(selected_file).expanduser().absolute().parent
