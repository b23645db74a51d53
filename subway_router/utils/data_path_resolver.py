"""
Data path resolver for finding data files in both development and packaged environments.
"""
import sys
from pathlib import Path

DEFAULT_DATA_FILE = "subway-data.json"


def get_data_directory() -> Path:
    """
    Get the data directory path that works in both development and packaged environments.

    Returns:
        Path to the data directory

    Raises:
        FileNotFoundError: If no data directory can be found
    """
    # Packaged executable: data sits next to the executable
    if getattr(sys, 'frozen', False):
        exe_data_dir = Path(sys.executable).parent / "data"
        if exe_data_dir.exists():
            return exe_data_dir

    # Installed or development package: data ships inside the package
    package_data_dir = Path(__file__).parent.parent / "data"
    if package_data_dir.exists():
        return package_data_dir

    cwd_data_dir = Path.cwd() / "data"
    if cwd_data_dir.exists():
        return cwd_data_dir

    raise FileNotFoundError(
        "Could not find data directory. Searched in:\n"
        f"  {package_data_dir}\n"
        f"  {cwd_data_dir}"
    )


def get_data_file_path(filename: str) -> Path:
    """Get the path to a file inside the data directory."""
    return get_data_directory() / filename


def get_default_data_file() -> Path:
    """Get the path to the bundled subway data document."""
    return get_data_file_path(DEFAULT_DATA_FILE)
