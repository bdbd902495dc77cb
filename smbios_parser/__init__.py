'''SMBIOS/DMI structure table parser.
'''
import threading

from .entry import EntryPoint, find_entry_point
from .errors import (
    SMBIOSError, SourceUnavailable, AnchorNotFound, MalformedEntryPoint,
    DecodeError, MalformedRecord, StringIndexOutOfRange, TableTruncated)
from .source import ByteSource, BufferSource, FileSource
from .table import DecodedTable, StructureTable
from .types import STRUCTURES, decode_record

# The legacy BIOS window scanned for the entry point.
DEFAULT_BASE = 0xF0000
DEFAULT_LENGTH = 0x10000

DEV_MEM = "/dev/mem"


def decode(source, base=DEFAULT_BASE, length=DEFAULT_LENGTH, quiet=False):
    '''Locate the entry point within a memory range and decode the table.

    Args:
        source (ByteSource): Provider of physical memory.
        base (Optional[int]): Physical address where the scan starts.
        length (Optional[int]): Number of bytes scanned.
        quiet (Optional[bool]): Do not report warnings and per-record errors.

    Return:
        DecodedTable: The decoded structures and any per-record errors.

    Raise:
        SourceUnavailable: the scanned range or the table cannot be read.
        AnchorNotFound: the range holds no entry point.
        MalformedEntryPoint: the entry point is incomplete.
    '''
    window = source.read(base, length)
    entry_point = find_entry_point(window, base, quiet=quiet)
    data = source.read(entry_point.table_address, entry_point.table_length)
    table = StructureTable(data, entry_point.version, quiet=quiet)
    return DecodedTable.build(table, entry_point)


def decode_table(data, version, quiet=False):
    '''Decode a bare structure table, such as /sys/firmware/dmi/tables/DMI.

    Args:
        data (binary): The structure table.
        version (tuple): The (major, minor) SMBIOS version.
        quiet (Optional[bool]): Do not report per-record errors.
    '''
    table = StructureTable(data, version, quiet=quiet)
    return DecodedTable.build(table)


class SMBIOSParser(object):
    '''Decode the SMBIOS table found in a memory source.

    The parser wraps a single decode: the first call to 'parse' walks the
    table and later calls return the same DecodedTable.
    '''

    def __init__(self, source, base=DEFAULT_BASE, length=DEFAULT_LENGTH,
                 quiet=False):
        '''Create an SMBIOSParser instance.

        Args:
            source (ByteSource|binary): Memory provider, or captured bytes
                that start at physical address base.
            base (Optional[int]): Physical address where the scan starts.
            length (Optional[int]): Number of bytes scanned.
            quiet (Optional[bool]): Do not report warnings and errors.
        '''
        if isinstance(source, (bytes, bytearray)):
            source = BufferSource(source, base)
        self.source = source
        self.base = base
        self.length = length
        self.quiet = quiet
        self.table = None

    @property
    def entry_point(self):
        if self.table is None:
            return None
        return self.table.entry_point

    def parse(self):
        '''Decode the table once, fatal errors propagate to the caller.

        Return:
            DecodedTable: The decoded structure table.
        '''
        if self.table is not None:
            return self.table
        self.table = decode(self.source, self.base, self.length, self.quiet)
        return self.table

    def showinfo(self, ts=''):
        self.parse().showinfo(ts)


class SystemTable(object):
    '''A once-initialized handle on this machine's decoded table.

    The table is decoded by the first call to 'get'; concurrent first calls
    wait for that decode instead of starting their own. A failed decode
    leaves the handle empty.
    '''

    def __init__(self, source=None, base=DEFAULT_BASE, length=DEFAULT_LENGTH,
                 quiet=True):
        self._source = source
        self._base = base
        self._length = length
        self._quiet = quiet
        self._lock = threading.Lock()
        self._table = None

    @property
    def initialized(self):
        return self._table is not None

    def get(self):
        if self._table is not None:
            return self._table
        with self._lock:
            if self._table is None:
                source = self._source
                if source is None:
                    source = FileSource(DEV_MEM)
                self._table = decode(
                    source, self._base, self._length, self._quiet)
        return self._table


__title__ = "smbios_parser"
__version__ = "1.0"
__author__ = "smbios_parser contributors"
__license__ = "BSD"
