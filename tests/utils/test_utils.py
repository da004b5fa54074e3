import os
import logging

import pytest

from bmglyph import utils
from bmglyph.utils import ReadOnlyDict, get_env_int, get_resources_dir


def test_readonlydict_immutable():
    d = ReadOnlyDict(foo=3, bar=4, spam=5)

    with pytest.raises(TypeError):
        d["foo"] = 1
    with pytest.raises(TypeError):
        d["xxxxxxx"] = 1
    with pytest.raises(TypeError):
        del d["foo"]
    with pytest.raises(TypeError):
        d.update({})
    with pytest.raises(TypeError):
        d.clear()
    with pytest.raises(TypeError):
        d.pop("foo", None)
    with pytest.raises(TypeError):
        d.popitem()
    with pytest.raises(TypeError):
        d.setdefault("foo", 42)
    with pytest.raises(TypeError):
        d |= {"foo": 1}

    # Also immutable (using __slots__)
    with pytest.raises(AttributeError):
        d.foo = 3

    assert d == {"foo": 3, "bar": 4, "spam": 5}


def test_readonlydict_is_a_dict():
    d1 = ReadOnlyDict({65: "a", 66: "b"})
    d2 = ReadOnlyDict({66: "b", 65: "a"})
    assert d1 == d2
    assert list(d1.keys()) == [65, 66]
    assert d1.get(67) is None

    # Values need not be hashable
    d3 = ReadOnlyDict(foo=[])
    assert d3["foo"] == []


def test_get_env_int(monkeypatch, caplog):
    monkeypatch.delenv("BMGLYPH_TEST_INT", raising=False)
    assert get_env_int("BMGLYPH_TEST_INT") == 0
    assert get_env_int("BMGLYPH_TEST_INT", 7) == 7

    monkeypatch.setenv("BMGLYPH_TEST_INT", " 120 ")
    assert get_env_int("BMGLYPH_TEST_INT") == 120

    monkeypatch.setenv("BMGLYPH_TEST_INT", "lots")
    with caplog.at_level(logging.WARNING, logger="bmglyph"):
        assert get_env_int("BMGLYPH_TEST_INT", 3) == 3
    assert "BMGLYPH_TEST_INT" in caplog.text


def test_log_level(monkeypatch):
    logger = utils.logger
    assert logger.name == "bmglyph"
    try:
        monkeypatch.setenv("BMGLYPH_LOG_LEVEL", "debug")
        utils._set_log_level()
        assert logger.level == logging.DEBUG

        monkeypatch.setenv("BMGLYPH_LOG_LEVEL", "40")
        utils._set_log_level()
        assert logger.level == logging.ERROR

        monkeypatch.setenv("BMGLYPH_LOG_LEVEL", "nonsense")
        utils._set_log_level()
        assert logger.level == logging.WARNING
    finally:
        monkeypatch.delenv("BMGLYPH_LOG_LEVEL")
        utils._set_log_level()
    assert logger.level == logging.WARNING


def test_resources_dir():
    dir = get_resources_dir()
    assert os.path.isdir(dir)
    assert os.path.isfile(os.path.join(dir, "sample.fnt"))
