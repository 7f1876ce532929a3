import logging
from typing import Iterable, List, Optional

import segno

from .errors import CapacityExceeded, EncodeProbeFailed

logger = logging.getLogger(__name__)

ERROR_LEVEL = 'm'


def make_qr(data: bytes, version: Optional[int] = None) -> segno.QRCode:
    """Encode data as a regular (non micro) QR code at error level M."""
    return segno.make(data, error=ERROR_LEVEL, version=version, micro=False, boost_error=False)


def probe_version(data: bytes) -> int:
    """Return the QR version data encodes to.

    Raises CapacityExceeded when data does not fit version 40 and
    EncodeProbeFailed for anything else the encoder reports.
    """
    try:
        qr = make_qr(data)
    except segno.DataOverflowError as e:
        raise CapacityExceeded(str(e)) from e
    except ValueError as e:
        raise EncodeProbeFailed(f'QR encoder failed on {len(data)} bytes: {e}') from e
    if not isinstance(qr.version, int):
        raise EncodeProbeFailed(f'unexpected QR version {qr.version!r}')
    return qr.version


def encode_chunks(chunks: Iterable[bytes]) -> List[segno.QRCode]:
    """Encode each chunk into its own QR code, preserving order."""
    qrs = []
    for idx, chunk in enumerate(chunks):
        try:
            qr = make_qr(chunk)
        except segno.DataOverflowError as e:
            raise CapacityExceeded(f'chunk {idx} ({len(chunk)} bytes) does not fit in a QR code: {e}') from e
        except ValueError as e:
            raise EncodeProbeFailed(f'chunk {idx} ({len(chunk)} bytes) could not be encoded: {e}') from e
        logger.debug('chunk %d: %d bytes -> %s', idx, len(chunk), qr.designator)
        qrs.append(qr)
    return qrs
