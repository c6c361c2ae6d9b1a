from raycube.errors import Cub3DError, format_error


def test_format_with_detail_and_message():
    assert format_error("map.cub", "bad") == "cub3D: Error: map.cub: bad"


def test_format_message_only():
    assert format_error(None, "bad") == "cub3D: Error: bad"


def test_format_nothing():
    assert format_error(None, None) == "cub3D: Error"


def test_format_numeric_detail():
    assert format_error(42, "bad") == "cub3D: Error: 42: bad"


def test_exception_string_matches_format():
    err = Cub3DError("bad", "map.cub")
    assert str(err) == format_error("map.cub", "bad")
    assert err.message == "bad"
    assert err.detail == "map.cub"


def test_exception_without_detail_formats_message_only():
    err = Cub3DError("bad")
    assert err.message == "bad"
    assert err.detail is None
    assert str(err) == "cub3D: Error: bad"