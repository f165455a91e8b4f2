"""A first-fit heap allocator over a fixed block of memory.

Addresses are byte offsets into :attr:`ChunkHeap.memory`. Every chunk carries
a header of :data:`HEADER_SIZE` bytes in front of the address handed out.
"""

import bisect
import dataclasses
import threading
from dataclasses import dataclass
from typing import List, Optional

HEADER_SIZE = 16


@dataclass
class Chunk:
    """A block of the heap: header offset, total size with header, state."""

    offset: int
    size: int
    used: bool = False

    @property
    def data(self) -> int:
        """Address of the usable bytes after the header."""
        return self.offset + HEADER_SIZE


class ChunkHeap:
    """A thread-safe first-fit allocator that merges free neighbours."""

    def __init__(self, size: int) -> None:
        if size < HEADER_SIZE:
            raise ValueError(f"heap of {size} bytes cannot hold a chunk header")
        self.size = size
        self.memory = bytearray(size)
        self._chunks: List[Chunk] = [Chunk(0, size)]
        self._lock = threading.Lock()

    def _find(self, address: int) -> Optional[Chunk]:
        offset = address - HEADER_SIZE
        index = bisect.bisect_left(self._chunks, offset, key=lambda c: c.offset)
        if index < len(self._chunks) and self._chunks[index].offset == offset:
            return self._chunks[index]
        return None

    def malloc(self, size: int) -> Optional[int]:
        """Allocate ``size`` bytes; return the address, or None if none fit.

        A request of zero bytes returns None.
        """
        if size < 0:
            raise ValueError(f"negative allocation size {size}")
        if size == 0:
            return None
        with self._lock:
            for index, chunk in enumerate(self._chunks):
                if chunk.used:
                    continue
                if chunk.size >= size + 2 * HEADER_SIZE:
                    rest = Chunk(chunk.offset + HEADER_SIZE + size,
                                 chunk.size - size - HEADER_SIZE)
                    chunk.size = size + HEADER_SIZE
                    chunk.used = True
                    self._chunks.insert(index + 1, rest)
                    return chunk.data
                if chunk.size == size + HEADER_SIZE:
                    chunk.used = True
                    return chunk.data
        return None

    def free(self, address: Optional[int]) -> None:
        """Release a chunk; addresses not handed out by the heap are ignored."""
        if address is None:
            return
        with self._lock:
            chunk = self._find(address)
            if chunk is None:
                return
            chunk.used = False
            merged: List[Chunk] = []
            for current in self._chunks:
                if merged and not merged[-1].used and not current.used:
                    merged[-1].size += current.size
                else:
                    merged.append(current)
            self._chunks = merged

    def calloc(self, num: int, size: int) -> Optional[int]:
        """Allocate ``num * size`` zeroed bytes."""
        space = num * size
        address = self.malloc(space)
        if address is not None:
            self.memory[address:address + space] = bytes(space)
        return address

    def realloc(self, address: Optional[int], size: int) -> Optional[int]:
        """Move an allocation to a new block of ``size`` bytes, keeping its data.

        A size of zero frees the block and returns None; a None address
        allocates. If no block fits, None is returned and the old block stays.
        """
        if size == 0:
            self.free(address)
            return None
        if address is None:
            return self.malloc(size)

        old = self._find(address)
        if old is None or not old.used:
            raise ValueError(f"address {address} is not an allocated block")
        new_address = self.malloc(size)
        if new_address is None:
            return None
        new = self._find(new_address)
        count = min(old.size, new.size) - HEADER_SIZE
        self.memory[new_address:new_address + count] = \
            self.memory[address:address + count]
        self.free(address)
        return new_address

    def chunks(self) -> List[Chunk]:
        """Return a snapshot of the chunks in address order."""
        with self._lock:
            return [dataclasses.replace(chunk) for chunk in self._chunks]