from pathlib import Path

import pytest

SHADERS = Path(__file__).parent / "shaders"


@pytest.fixture
def shaders():
    """Directory with the WGSL fixture modules."""
    return SHADERS


@pytest.fixture
def write_shader(tmp_path):
    """Write a module into tmp_path and return its path as str."""

    def write(name: str, text: str) -> str:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8", newline="")
        return str(path)

    return write
