'''Raw byte sources for physical memory ranges.

The decoder never maps memory itself. A source answers a single bounded
request: the bytes at a physical base address for a given length, or a
SourceUnavailable error.
'''

import os

from .errors import SourceUnavailable


MAX_ADDRESS = 0xFFFFFFFF


def _check_range(base, length):
    if not 0 <= base <= MAX_ADDRESS:
        raise SourceUnavailable(base & MAX_ADDRESS, length,
                                "base is not a 32-bit address")
    if not 0 <= length <= MAX_ADDRESS:
        raise SourceUnavailable(base, length & MAX_ADDRESS,
                                "length is not a 32-bit value")


class ByteSource(object):
    '''A provider of physical memory ranges.'''

    def read(self, base, length):
        '''Return length bytes found at physical address base.

        Raise:
            SourceUnavailable: the range cannot be provided in full.
        '''
        raise NotImplementedError


class BufferSource(ByteSource):
    '''Memory previously captured into a byte string.

    Args:
        data (binary): The captured bytes.
        base (Optional[int]): Physical address of the first byte of data.
    '''

    def __init__(self, data, base=0):
        self.data = bytes(data)
        self.base = base

    def read(self, base, length):
        _check_range(base, length)
        start = base - self.base
        if start < 0 or start + length > len(self.data):
            raise SourceUnavailable(
                base, length, "outside of captured range 0x%08X-0x%08X" % (
                    self.base, self.base + len(self.data)))
        return self.data[start:start + length]


class FileSource(ByteSource):
    '''Memory read from a file, such as a raw dump of the BIOS window.

    Args:
        path (string): File to read.
        base (Optional[int]): Physical address stored at file offset 0.
    '''

    def __init__(self, path, base=0):
        self.path = path
        self.base = base

    def read(self, base, length):
        _check_range(base, length)
        offset = base - self.base
        if offset < 0:
            raise SourceUnavailable(
                base, length, "address precedes %s" % self.path)
        try:
            with open(self.path, 'rb') as fh:
                fh.seek(offset, os.SEEK_SET)
                data = fh.read(length)
        except (IOError, OSError) as e:
            raise SourceUnavailable(base, length, str(e))
        if len(data) != length:
            raise SourceUnavailable(
                base, length, "short read (%d bytes) from %s" % (
                    len(data), self.path))
        return data
