"""
Per-name terminal styling for the styled console sink.

Each logger name gets a deterministic 24-bit colour derived from its
first and last characters. Styles are memoized process-wide and never
evicted; the cache only grows.
"""

import colorsys
import re
import threading
from typing import Callable, Dict, Optional, Pattern, Tuple

from colorama import Fore, Style

RGB = Tuple[int, int, int]

RESET = Style.RESET_ALL
BOLD = Style.BRIGHT
# colorama has no italic or truecolor constants
ITALIC = '\x1b[3m'
# background #e0005a, bright white text
KAPOW = '\x1b[48;2;224;0;90m' + Fore.LIGHTWHITE_EX

COLLAPSE_ON = re.compile(r'[a-z\- ]+')


def hue_of(name: str) -> int:
    """Hue in degrees from the first and last character codes."""
    return (ord(name[0]) + ord(name[-1])) % 360


def hsl_to_rgb(hue: float, saturation: float, lightness: float) -> RGB:
    r, g, b = colorsys.hls_to_rgb(hue / 360.0, lightness, saturation)
    return round(r * 255), round(g * 255), round(b * 255)


def fg(rgb: RGB) -> str:
    return '\x1b[38;2;{};{};{}m'.format(*rgb)


class StyleCache:
    """Memoized name -> ANSI style mapping.

    Args:
        bold: Names matching this pattern are rendered bold
        italic: Names matching this pattern are rendered italic
        color: Override returning an RGB triple for a name
    """

    def __init__(self, bold: Optional[Pattern] = None,
                 italic: Optional[Pattern] = None,
                 color: Optional[Callable[[str], RGB]] = None):
        self.bold = bold
        self.italic = italic
        self.color = color
        # the empty name never gets a colour
        self._memo: Dict[str, str] = {'': ''}
        self._lock = threading.Lock()

    def style(self, name: str) -> str:
        """Return the (memoized) style sequence for ``name``."""
        found = self._memo.get(name)
        if found is not None:
            return found
        with self._lock:
            found = self._memo.get(name)
            if found is None:
                found = self._compute(name)
                self._memo[name] = found
        return found

    def _compute(self, name: str) -> str:
        rgb = self.color(name) if self.color else None
        if rgb is None:
            rgb = hsl_to_rgb(hue_of(name), 1.0, 0.6)
        style = fg(rgb)
        if self.bold is not None and self.bold.search(name):
            style += BOLD
        if self.italic is not None and self.italic.search(name):
            style += ITALIC
        return style

    def collapsed(self, name: str) -> str:
        """Short label for ``name``, styled like the full name.

        ``"RenderingService"`` collapses to ``"RS"``. Names shorter than
        five characters are returned as they are.
        """
        if len(name) < 5:
            return name
        short = COLLAPSE_ON.sub('', name)
        with self._lock:
            known = short in self._memo
        if not known:
            full = self.style(name)
            with self._lock:
                self._memo.setdefault(short, full)
        return short

    def __contains__(self, name: str) -> bool:
        return name in self._memo

    def __len__(self) -> int:
        return len(self._memo)


def kapow(style: str) -> str:
    """Add the emphasized background used by ``_kapow`` markers."""
    return style + KAPOW


DEFAULT_STYLES = StyleCache()
