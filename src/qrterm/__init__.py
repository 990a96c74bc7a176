"""
Print QR codes in the terminal
"""
from typing import Optional, TextIO

from qrterm.exceptions import EncodeError, QRTermError
from qrterm.models import Color, RenderOptions
from qrterm.renderer import Renderer

__all__ = ["Color", "EncodeError", "QRTermError", "RenderOptions", "Renderer", "print_qr", "render_qr"]


def print_qr(text: str, options: Optional[RenderOptions] = None, out: Optional[TextIO] = None) -> None:
    """Print the given text as QR code, raises EncodeError if it cannot be encoded"""
    Renderer(options, out).print_qr(text)


def render_qr(text: str, options: Optional[RenderOptions] = None) -> str:
    """Return the given text as QR code lines joined by newlines, raises EncodeError if it cannot be encoded"""
    return "\n".join(Renderer(options).render(text))
