from __future__ import annotations
import sys
from typing import List, Optional, Sequence, TextIO

from qrterm import matrix
from qrterm.models import Color, RenderOptions

LOWER_HALF = "▄"
BLANK = " "
RESET = "\x1b[0m"


class Renderer:
    """Render QR codes as half-block characters, two module rows per line.

    Only "▄" and " " are used. "█" and "▀" are drawn with a gap above them
    by some terminal fonts, so the other two cases are obtained by swapping
    foreground and background colors.
    """

    def __init__(self, options: Optional[RenderOptions] = None, out: Optional[TextIO] = None) -> None:
        self.options = options or RenderOptions()
        self.out = out

    def render(self, text: str) -> List[str]:
        pixels = matrix.encode(text, self.options.error_correction)
        pixels = matrix.surround_quiet(pixels, self.options.quiet_zone, False)
        return self.render_matrix(pixels)

    def render_matrix(self, pixels: Sequence[Sequence[bool]]) -> List[str]:
        width = matrix.square_width(pixels)
        lines = []
        for y in range(0, width, 2):
            upper_row = pixels[y]
            # Odd number of rows, the last line gets an empty lower half
            lower_row = pixels[y + 1] if y + 1 < width else [False] * width
            cells = [self.cell(upper, lower) for upper, lower in zip(upper_row, lower_row)]
            lines.append("".join(cells) + RESET)
        return lines

    def cell(self, upper: bool, lower: bool) -> str:
        dark, light = self.options.dark, self.options.light
        if upper and lower:
            return self._paint(BLANK, light, dark)
        if upper:
            return self._paint(LOWER_HALF, light, dark)
        if lower:
            return self._paint(LOWER_HALF, dark, light)
        return self._paint(BLANK, dark, light)

    @staticmethod
    def _paint(glyph: str, fg: Color, bg: Color) -> str:
        return f"\x1b[{fg.fg};{bg.bg}m{glyph}"

    def print_qr(self, text: str) -> None:
        self._write(self.render(text))

    def print_matrix(self, pixels: Sequence[Sequence[bool]]) -> None:
        self._write(self.render_matrix(pixels))

    def _write(self, lines: List[str]) -> None:
        out = self.out or sys.stdout
        for line in lines:
            out.write(line + "\n")
        out.flush()
