import argparse, logging, os
from multiqr.core.errors import MultiQrError
from multiqr.core.stdin import read_stdin
from multiqr.core.estimate import estimate_chunk
from multiqr.core.chunking import split_chunks
from multiqr.core.encoding_qr import encode_chunks
from multiqr.core.render import render_text, save_images

logger = logging.getLogger('multiqr')

DESCRIPTION = """\
Read an ascii string (newlines are dropped) from standard input and convert it to one or more QR codes.

QR codes are most efficient with the following characters:
0-9, A-Z (upper-case only), space, $, %, *, +, -, ., /, :

To encode binary data efficiently, one option is to pipe it through the `base32` utility.
Its `=` padding is not in the QR alphanumeric set, but the encoder only falls back
to byte mode for the final padding.
"""


def non_negative_int(value):
    n = int(value)
    if n < 0:
        raise argparse.ArgumentTypeError(f'{value} must not be negative')
    return n


def positive_int(value):
    n = int(value)
    if n < 1:
        raise argparse.ArgumentTypeError(f'{value} must be at least 1')
    return n


def build_parser():
    ap = argparse.ArgumentParser(prog='multiqr', description=DESCRIPTION,
                                 formatter_class=argparse.RawDescriptionHelpFormatter)
    ap.add_argument('--qr-version', type=int, default=16, help='Max QR code version to use (default: 16)')
    ap.add_argument('--border', type=non_negative_int, default=4, help='Modules at the border of the QR code (default: 4)')
    ap.add_argument('--empty-lines', type=non_negative_int, default=6,
                    help='Number of empty lines between one QR and the following (default: 6)')
    ap.add_argument('--label', default='', help='Text printed before the "(i/n)" of each QR code')
    ap.add_argument('--out', help='Write one PNG per QR code to this directory instead of printing')
    ap.add_argument('--scale', type=positive_int, default=6, help='Pixels per module for PNG output (default: 6)')
    ap.add_argument('-v', '--verbose', action='store_true', help='Enable debug logging')
    return ap


def make_qrs(content: bytes, qr_version: int):
    chunk_size = estimate_chunk(content, qr_version)
    chunks = split_chunks(content, chunk_size)
    logger.info('%d bytes split into %d chunk(s) of up to %d bytes', len(content), len(chunks), chunk_size)
    return encode_chunks(chunks)


def main(argv=None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(asctime)s %(name)s %(levelname)s %(message)s',
    )
    try:
        content = read_stdin()
        qrs = make_qrs(content, args.qr_version)
    except MultiQrError as e:
        raise SystemExit(str(e))

    if args.out:
        os.makedirs(args.out, exist_ok=True)
        paths = save_images(qrs, args.out, scale=args.scale, border=args.border, label=args.label)
        print(f"Generated {len(paths)} QR code(s).")
        print("QR codes written to", args.out)
    else:
        print(render_text(qrs, border=args.border, empty_lines=args.empty_lines, label=args.label))


if __name__ == '__main__':
    main()
