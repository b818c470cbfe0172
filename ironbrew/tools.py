"""Terminal helpers: coloured map glyphs and bounded status messages."""

LAST_MSG_SIZE = 255

_RESET = "\033[0m"

_GLYPH_STYLES = {
    "@": "\033[1;36m",  # cyan - player
    "Z": "\033[1;31m",  # red - zombie
    "U": "\033[1;33m",  # yellow - ale mug
    "o": "\033[1;35m",  # magenta - ammo
    ">": "\033[1;32m",  # green - exit
    "#": "\033[0;37m",  # light gray - wall
}


def color_char(c: str) -> str:
    """Return the map glyph ``c`` wrapped in its ANSI colour, if it has one."""
    style = _GLYPH_STYLES.get(c)
    if style is None:
        return c
    return f"{style}{c}{_RESET}"


def truncate_message(message: str) -> str:
    """Clip a status message to the size the message buffer holds."""
    return message[: LAST_MSG_SIZE - 1]