from typing import Iterator, List, Tuple


def iter_chunks(content: bytes, chunk_size: int) -> Iterator[Tuple[int, bytes]]:
    """Yield (index, data) for consecutive chunk_size slices of content.
    index starts at 0, the last slice may be shorter.
    """
    if chunk_size <= 0:
        raise ValueError(f'chunk_size must be positive, got {chunk_size}')
    for idx, offset in enumerate(range(0, len(content), chunk_size)):
        yield idx, content[offset: offset + chunk_size]


def split_chunks(content: bytes, chunk_size: int) -> List[bytes]:
    return [data for _idx, data in iter_chunks(content, chunk_size)]
