from infixcalc.utils import render_pointer


def test_render_pointer_short_line() -> None:
    assert render_pointer("1 + $", 4) == ["1 + $", "    ^"]


def test_render_pointer_clips_both_sides() -> None:
    code = "0123456789" * 5
    assert render_pointer(code, 25) == ["...56789012345678901234...", " " * 13 + "^"]
