"""Sound effects, announced as text lines until real audio exists."""

import sys
from typing import Optional, TextIO


def play_sound(sound_name: str, stream: Optional[TextIO] = None) -> None:
    """Announce a sound effect on ``stream`` (standard output by default)."""
    out = sys.stdout if stream is None else stream
    out.write(f"[SOUND] {sound_name}\n")