from pytest import raises

from bmglyph import FontFormatError
from bmglyph.fnt import find_first_record, is_record_line


def test_is_record_line():
    assert is_record_line("char id=65 x=0")
    assert is_record_line("char\tid=65")
    assert is_record_line("  char id=65")
    assert is_record_line("char")

    assert not is_record_line("chars count=95")
    assert not is_record_line("charset=0")
    assert not is_record_line("info face=\"char\"")
    assert not is_record_line("")
    assert not is_record_line("   ")
    assert not is_record_line("kerning first=65 second=66 amount=-1")


def test_find_first_record():
    lines = [
        'info face="x"',
        "common lineHeight=16",
        "chars count=2",
        "char id=65",
        "char id=66",
    ]
    assert find_first_record(lines) == 3
    assert find_first_record(lines[3:]) == 0


def test_find_first_record_skips_count_line():
    # The count line comes right before the records, and must not be
    # mistaken for the first record.
    lines = ["chars count=1", "char id=65"]
    assert find_first_record(lines) == 1


def test_find_first_record_fails():
    for lines in [
        [],
        [""],
        ['info face="x"', "common lineHeight=16", "chars count=0"],
        ["chars count=2"] * 1000,
    ]:
        with raises(FontFormatError) as err:
            find_first_record(lines)
        assert err.value.lineno is None
        assert "no glyph-record section" in str(err.value)
