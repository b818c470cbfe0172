from ironbrew.tools import LAST_MSG_SIZE, color_char, truncate_message


def test_player_glyph_is_cyan():
    assert color_char("@") == "\033[1;36m@\033[0m"


def test_wall_glyph_is_light_gray():
    assert color_char("#") == "\033[0;37m#\033[0m"


def test_coloured_glyphs_wrap_the_character():
    for glyph in "@ZUo>#":
        out = color_char(glyph)
        assert out.startswith("\033[")
        assert out.endswith("\033[0m")
        assert glyph in out


def test_plain_characters_pass_through():
    assert color_char(" ") == " "
    assert color_char(".") == "."
    assert color_char("x") == "x"


def test_short_message_unchanged():
    msg = "\n\nYou drink down an ale and back to max hit points!\n\n"
    assert truncate_message(msg) == msg


def test_long_message_clipped_to_buffer():
    msg = "a" * 1000
    out = truncate_message(msg)
    assert len(out) == LAST_MSG_SIZE - 1
    assert msg.startswith(out)