"""Global configuration for pytest"""

import pytest


SCENARIO_FNT = """\
info face="x"
common lineHeight=16
chars count=2
char id=65 x=0 y=0 width=8 height=8 xoffset=0 yoffset=0 page=0 chnl=15
char id=66 x=8 y=0 width=8 height=8 xoffset=0 yoffset=0 page=0 chnl=15
"""


@pytest.fixture
def fnt_file(tmp_path):
    """Factory that writes the given text to a .fnt file and returns its path."""
    count = 0

    def write(text, name=None):
        nonlocal count
        count += 1
        path = tmp_path / (name or f"font{count}.fnt")
        path.write_text(text, encoding="utf-8")
        return str(path)

    return write


@pytest.fixture
def scenario_fnt():
    return SCENARIO_FNT


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Make sure settings from the environment don't leak into the tests."""
    monkeypatch.delenv("BMGLYPH_MAX_LINE_LENGTH", raising=False)
