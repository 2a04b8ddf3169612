"""Shared pytest fixtures for Browser Selector tests."""

import json
import os
import shutil
import tempfile
from pathlib import Path

import pytest

# Run Qt headless when no display is available.
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    path = Path(tempfile.mkdtemp())
    yield path
    shutil.rmtree(path, ignore_errors=True)


@pytest.fixture
def temp_config_file(temp_dir):
    """Create a temporary config file path."""
    return temp_dir / "browser-selector" / "config.json"


@pytest.fixture
def valid_config_data():
    """Return valid configuration data."""
    return {
        "last_browser": "firefox",
        "blacklist": {
            "tracking_params": ["utm_", "fbclid", "gclid"],
        },
        "display": {
            "max_domain_length": 40,
            "max_url_length": 60,
            "max_param_value_length": 20,
            "max_normal_params": 3,
            "max_blacklisted_params": 2,
        },
    }


@pytest.fixture
def temp_config_with_data(temp_config_file, valid_config_data):
    """Create a temporary config file with valid data."""
    temp_config_file.parent.mkdir(parents=True, exist_ok=True)
    with open(temp_config_file, "w", encoding="utf-8") as f:
        json.dump(valid_config_data, f)
    return temp_config_file


@pytest.fixture
def write_desktop_file():
    """Return a helper that writes a minimal .desktop file."""

    def _write(directory: Path, desktop_id: str, exec_line: str | None = "browser %u", name: str = "") -> Path:
        directory.mkdir(parents=True, exist_ok=True)
        lines = ["[Desktop Entry]", "Type=Application"]
        if name:
            lines.append(f"Name={name}")
        if exec_line is not None:
            lines.append(f"Exec={exec_line}")
        path = directory / f"{desktop_id}.desktop"
        path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        return path

    return _write
