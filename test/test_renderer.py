import io
import math
from unittest import TestCase

from qrterm import EncodeError, print_qr, render_qr
from qrterm.models import Color, RenderOptions
from qrterm.renderer import RESET, Renderer

DARK_DARK = "\x1b[37;40m "
DARK_LIGHT = "\x1b[37;40m▄"
LIGHT_DARK = "\x1b[30;47m▄"
LIGHT_LIGHT = "\x1b[30;47m "


class TestCell(TestCase):
    def setUp(self):
        self.renderer = Renderer()

    def test_pairs(self):
        self.assertEqual(self.renderer.cell(True, True), DARK_DARK)
        self.assertEqual(self.renderer.cell(True, False), DARK_LIGHT)
        self.assertEqual(self.renderer.cell(False, True), LIGHT_DARK)
        self.assertEqual(self.renderer.cell(False, False), LIGHT_LIGHT)

    def test_custom_colors(self):
        renderer = Renderer(RenderOptions(dark=Color.BLUE, light=Color.YELLOW))
        self.assertEqual(renderer.cell(True, False), "\x1b[33;44m▄")
        self.assertEqual(renderer.cell(False, False), "\x1b[34;43m ")


class TestRenderMatrix(TestCase):
    def test_even(self):
        lines = Renderer().render_matrix([[True, False], [False, True]])
        self.assertEqual(lines, [DARK_LIGHT + LIGHT_DARK + RESET])

    def test_odd(self):
        pixels = [
            [True, True, False],
            [True, False, False],
            [True, False, True],
        ]
        lines = Renderer().render_matrix(pixels)
        self.assertEqual(
            lines,
            [
                DARK_DARK + DARK_LIGHT + LIGHT_LIGHT + RESET,
                DARK_LIGHT + LIGHT_LIGHT + DARK_LIGHT + RESET,
            ],
        )

    def test_empty(self):
        self.assertEqual(Renderer().render_matrix([]), [])

    def test_not_square(self):
        with self.assertRaises(ValueError):
            Renderer().render_matrix([[True, False], [True]])


class TestPrintQr(TestCase):
    def test_line_count(self):
        out = io.StringIO()
        print_qr("hello", out=out)
        lines = out.getvalue().splitlines()
        # version 1 is 21 modules, plus a quiet zone of 2 on each side
        self.assertEqual(len(lines), math.ceil(25 / 2))
        self.assertTrue(all(line.endswith(RESET) for line in lines))
        self.assertEqual(lines[0].count("\x1b[") - 1, 25)

    def test_quiet_zone(self):
        lines = Renderer(RenderOptions(quiet_zone=0)).render("hello")
        self.assertEqual(len(lines), math.ceil(21 / 2))
        # top-left finder pattern starts immediately
        self.assertTrue(lines[0].startswith(DARK_DARK))

    def test_quiet_zone_is_light(self):
        lines = Renderer().render("hello")
        self.assertEqual(lines[0], LIGHT_LIGHT * 25 + RESET)

    def test_deterministic(self):
        self.assertEqual(render_qr("same input"), render_qr("same input"))

    def test_render_qr_matches_print(self):
        out = io.StringIO()
        print_qr("https://example.com", out=out)
        self.assertEqual(out.getvalue(), render_qr("https://example.com") + "\n")

    def test_empty(self):
        out = io.StringIO()
        with self.assertRaises(EncodeError):
            print_qr("", out=out)
        self.assertEqual(out.getvalue(), "")

    def test_too_long(self):
        out = io.StringIO()
        with self.assertRaises(EncodeError):
            print_qr("a" * 8000, out=out)
        self.assertEqual(out.getvalue(), "")


class TestPrintMatrix(TestCase):
    def test_single_module(self):
        out = io.StringIO()
        Renderer(out=out).print_matrix([[True]])
        self.assertEqual(out.getvalue(), DARK_LIGHT + RESET + "\n")

    def test_lines(self):
        out = io.StringIO()
        Renderer(out=out).print_matrix([[True, False], [False, True]])
        self.assertEqual(out.getvalue(), DARK_LIGHT + LIGHT_DARK + RESET + "\n")
