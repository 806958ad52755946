import pytest

from ddotelmap.licenses.findheader import (
    find_copyright_notices,
    get_authors,
    get_copyright_notice,
    map_lines,
)
from ddotelmap.licenses.override import CopyrightOverride


def test_copyright_notice_trims_final_period():
    line = "Copyright 2020 Foo Inc."
    assert get_copyright_notice(line) == line[:-1]


def test_copyright_notice_starts_at_keyword():
    notice = get_copyright_notice("see: Copyright 2015 Example Corp")
    assert notice == "Copyright 2015 Example Corp"


@pytest.mark.parametrize(
    "line",
    [
        "Copyright",
        "Copyright and license",
        "Copyright notice",
        "the copyright holder may",
        "Copyright & License - see below",
        "no mention here",
    ],
)
def test_copyright_notice_ignored(line):
    assert get_copyright_notice(line) is None


def test_get_authors():
    assert get_authors("  Example Author  ") == "Example Author"
    assert get_authors("# comment") is None
    assert get_authors("   ") is None


def test_map_lines_missing_file(tmp_path):
    assert map_lines(str(tmp_path / "missing"), get_authors) == []


def test_map_lines_directory_raises(tmp_path):
    with pytest.raises(OSError):
        map_lines(str(tmp_path), get_authors)


def test_map_lines_filters(tmp_path):
    path = tmp_path / "AUTHORS"
    path.write_text("# header\r\nOne\r\n\r\nTwo\n", encoding="utf-8")
    assert map_lines(str(path), get_authors) == ["One", "Two"]


def test_find_copyright_notices_parent_first(tmp_path):
    vendor = tmp_path / "vendor"
    pkg = vendor / "github.com" / "foo" / "bar"
    pkg.mkdir(parents=True)
    (pkg / "LICENSE").write_text("Copyright 2020 Foo Inc.\nSome text\n", encoding="utf-8")
    (vendor / "github.com" / "foo" / "AUTHORS").write_text(
        "# Authors\nExample Author\n", encoding="utf-8"
    )
    notices = find_copyright_notices("github.com/foo/bar", None, str(vendor))
    assert notices == ["Example Author", "Copyright 2020 Foo Inc"]


def test_find_copyright_notices_override(tmp_path):
    overrides = CopyrightOverride({"github.com/foo/*": "Foo notice"})
    assert find_copyright_notices("github.com/foo/bar", overrides, str(tmp_path)) == [
        "Foo notice"
    ]


def test_find_copyright_notices_nothing(tmp_path):
    assert find_copyright_notices("github.com/none/here", None, str(tmp_path)) == []