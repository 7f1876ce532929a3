import logging
from typing import Callable, Set

from .encoding_qr import probe_version
from .errors import CapacityExceeded, EmptyContent, InvalidVersion

logger = logging.getLogger(__name__)

MIN_VERSION = 1
MAX_VERSION = 40

Probe = Callable[[bytes], int]


def estimate_chunk(content: bytes, desired_version: int, probe: Probe = probe_version) -> int:
    """Find the length of the chunks to split content into for the desired QR version.

    Prefixes of content are probed, halving the length when the code is too
    big (or does not fit at all) and growing it by half when it is too small,
    until a prefix encodes exactly at desired_version. The chunk size is then
    evened out so the last chunk is not much shorter than the others.

    The content is assumed homogeneous: if the first part encodes more
    efficiently than the rest, not every chunk will produce the same version.

    If the whole content fits a code of at most desired_version, its full
    length is returned.
    """
    if desired_version < MIN_VERSION or desired_version > MAX_VERSION:
        raise InvalidVersion(f'Invalid version {desired_version}, must be between {MIN_VERSION} and {MAX_VERSION}')
    if not content:
        raise EmptyContent('Invalid empty content')

    size = len(content)
    total = size
    # lengths known to encode below the desired version / above it or not at all
    below = 0
    above = size + 1
    seen: Set[int] = set()
    while True:
        if total in seen:
            logger.debug('length %d probed twice, bisecting between %d and %d', total, below, above)
            total = _bisect(content, desired_version, below, above, probe)
            break
        seen.add(total)

        try:
            width = probe(content[:total])
        except CapacityExceeded:
            logger.debug('total:%d does not fit any version', total)
            above = min(above, total)
            total = max(total // 2, 1)
            continue

        logger.debug('version:%d desired:%d total:%d', width, desired_version, total)
        if width < desired_version and total >= size:
            return size
        if width == desired_version:
            break

        if width > desired_version:
            above = min(above, total)
            total = max(total // 2, 1)
        else:
            below = max(below, total)
            total = total * 3 // 2

        if total >= size:
            if above > size:
                return size
            # the whole content was already seen too big for the desired version
            logger.debug('length %d reaches the content, bisecting between %d and %d', total, below, above)
            total = _bisect(content, desired_version, below, above, probe)
            break

    if total >= size:
        return size

    # spread the remainder over all the pieces instead of a short last one
    pieces = size // total + 1
    return size // pieces + 1


def _bisect(content: bytes, desired_version: int, below: int, above: int, probe: Probe) -> int:
    """Bisect between a length encoding below desired_version and one above it.

    Returns a length encoding exactly at desired_version, or the largest length
    found below it when no length hits the version exactly.
    """
    while above - below > 1:
        mid = (below + above) // 2
        try:
            width = probe(content[:mid])
        except CapacityExceeded:
            above = mid
            continue
        if width == desired_version:
            return mid
        if width < desired_version:
            below = mid
        else:
            above = mid
    return max(below, 1)
