from mcdatapack.loc import NOFILE, UNKNOWN, Loc


def test_unknown_location():
    assert UNKNOWN.filename == NOFILE
    assert UNKNOWN.describe() == "??:??"


def test_full_location():
    assert Loc("main.mcl", 3, 4).describe() == "main.mcl:3:4"


def test_line_without_column():
    assert Loc("main.mcl", 7, 0).describe() == "main.mcl:7"


def test_column_ignored_without_line():
    assert Loc("main.mcl", 0, 5).describe() == "main.mcl:??"


def test_default_filename_with_line():
    loc = Loc(line=2, col=1)
    assert loc.describe().startswith(NOFILE + ":")
    assert loc == Loc(NOFILE, 2, 1)