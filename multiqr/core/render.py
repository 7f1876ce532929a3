import io
import os
from typing import List, Sequence

import segno
from PIL import Image, ImageDraw, ImageFont

# (top module light, bottom module light) -> character
HALF_BLOCKS = {
    (True, True): '█',
    (True, False): '▀',
    (False, True): '▄',
    (False, False): ' ',
}
CAPTION_PADDING = 4


def qr_caption(index: int, total: int, version, label: str = '') -> str:
    return f'{label} ({index + 1}/{total}) v{version}'


def qr_to_text(qr: segno.QRCode, border: int = 4) -> str:
    """Draw qr with Unicode half blocks, two module rows per line.

    Light modules are drawn and dark ones left blank, which reads correctly on
    a terminal with a dark background.
    """
    rows = [[not dark for dark in row] for row in qr.matrix_iter(scale=1, border=border)]
    lines = []
    for y in range(0, len(rows), 2):
        top = rows[y]
        bottom = rows[y + 1] if y + 1 < len(rows) else [False] * len(top)
        lines.append(''.join(HALF_BLOCKS[(t, b)] for t, b in zip(top, bottom)))
    return '\n'.join(lines) + '\n'


def render_text(qrs: Sequence[segno.QRCode], border: int = 4, empty_lines: int = 6, label: str = '') -> str:
    """Render every code under a centered "label (i/n) vX" caption."""
    out = []
    separator = '\n' * empty_lines
    total = len(qrs)
    for idx, qr in enumerate(qrs):
        caption = qr_caption(idx, total, qr.version, label)
        width, _height = qr.symbol_size(scale=1, border=border)
        # the caption is counted with its trailing newline when centering
        spaces = ' ' * (max(width - len(caption) - 1, 0) // 2)
        out.append(f'{spaces}{caption}\n')
        out.append(qr_to_text(qr, border))
        if idx < total - 1:
            out.append(separator)
    return ''.join(out)


def render_image(qr: segno.QRCode, caption: str, scale: int = 6, border: int = 4) -> Image.Image:
    """Return the code as a PIL image with the caption on a strip above it."""
    buff = io.BytesIO()
    qr.save(buff, kind='png', scale=scale, border=border)
    buff.seek(0)
    code = Image.open(buff).convert('RGB')

    font = ImageFont.load_default()
    left, top, right, bottom = ImageDraw.Draw(code).textbbox((0, 0), caption, font=font)
    text_w = right - left
    strip_h = bottom - top + 2 * CAPTION_PADDING

    img_w = max(code.width, text_w + 2 * CAPTION_PADDING)
    img = Image.new('RGB', (img_w, code.height + strip_h), (255, 255, 255))
    img.paste(code, ((img_w - code.width) // 2, strip_h))
    draw = ImageDraw.Draw(img)
    draw.text(((img_w - text_w) // 2 - left, CAPTION_PADDING - top), caption, fill=(0, 0, 0), font=font)
    return img


def save_images(qrs: Sequence[segno.QRCode], out_dir: str, scale: int = 6, border: int = 4, label: str = '') -> List[str]:
    """Write one qr_NNN.png per code into out_dir and return the paths."""
    paths = []
    total = len(qrs)
    for idx, qr in enumerate(qrs):
        img = render_image(qr, qr_caption(idx, total, qr.version, label), scale=scale, border=border)
        fname = os.path.join(out_dir, f'qr_{idx:03d}.png')
        img.save(fname)
        paths.append(fname)
    return paths
