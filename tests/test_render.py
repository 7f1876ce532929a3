"""Tests for text and PNG rendering."""

import os

from PIL import Image

from multiqr.core.encoding_qr import make_qr
from multiqr.core.render import qr_caption, qr_to_text, render_image, render_text, save_images


def test_caption():
    assert qr_caption(0, 3, 16, "backup") == "backup (1/3) v16"
    assert qr_caption(2, 3, 4) == " (3/3) v4"


def test_text_art_size():
    qr = make_qr(b"hello")  # version 1, 21 modules
    lines = qr_to_text(qr, border=4).splitlines()
    assert len(lines) == 15  # 29 rows, two per line
    assert all(len(line) == 29 for line in lines)


def test_text_art_border_is_light():
    lines = qr_to_text(make_qr(b"hello"), border=2).splitlines()
    assert set(lines[0]) == {"█"}
    assert lines[-1].strip("▀") == ""


def test_text_art_without_border():
    lines = qr_to_text(make_qr(b"hello"), border=0).splitlines()
    assert len(lines) == 11
    # top left finder pattern starts with dark modules
    assert lines[0][0] == " "


def test_render_text_layout():
    qrs = [make_qr(b"one"), make_qr(b"two")]
    out = render_text(qrs, border=4, empty_lines=3, label="L")
    lines = out.split("\n")
    assert lines[0] == " " * 9 + "L (1/2) v1"
    # caption, 15 art lines, 3 empty lines
    assert lines[16:19] == ["", "", ""]
    assert lines[19] == " " * 9 + "L (2/2) v1"
    assert out.endswith("\n")
    assert not out.endswith("\n\n")


def test_render_text_single_code_has_no_separator():
    out = render_text([make_qr(b"hello")], empty_lines=6)
    assert out.count("\n") == 16


def test_render_image_adds_caption_strip():
    qr = make_qr(b"hello")
    img = render_image(qr, "label (1/1) v1", scale=4, border=4)
    assert img.mode == "RGB"
    assert img.width == 29 * 4
    assert img.height > 29 * 4
    assert img.getpixel((0, 0)) == (255, 255, 255)


def test_render_image_widens_for_long_caption():
    img = render_image(make_qr(b"hi"), "a very long caption " * 5, scale=1, border=0)
    assert img.width > 21


def test_save_images(tmp_path):
    qrs = [make_qr(b"x" * 20), make_qr(b"x" * 20), make_qr(b"x" * 3)]
    paths = save_images(qrs, str(tmp_path), scale=2, label="t")
    assert [os.path.basename(p) for p in paths] == ["qr_000.png", "qr_001.png", "qr_002.png"]
    for p in paths:
        with Image.open(p) as img:
            assert img.format == "PNG"
