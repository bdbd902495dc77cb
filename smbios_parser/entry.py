# -*- coding: utf-8 -*-
'''The SMBIOS 2.x entry point.

The entry point is a 0x1F byte structure, found on a paragraph boundary in
the legacy BIOS window, that locates the structure table in physical memory.
'''

from .base import SMBIOSObject, StructuredObject
from .errors import AnchorNotFound, MalformedEntryPoint
from .structs.smbios_structs import (
    SMBIOS_ANCHOR, DMI_ANCHOR, SMBIOS_ENTRY_POINT_SIZE, SMBIOSEntryPointType)
from .utils import blue, green, red, print_error

INTERMEDIATE_OFFSET = 0x10


def checksum(data):
    '''Return the 8-bit sum of data, zero for a valid checksummed region.'''
    return sum(data) & 0xFF


class EntryPoint(SMBIOSObject, StructuredObject):
    '''A parsed entry point, data must begin with the "_SM_" anchor.

    Args:
        data (binary): Bytes starting at the anchor.
        address (Optional[int]): Physical address of the anchor.
        quiet (Optional[bool]): Do not report checksum warnings.
    '''

    def __init__(self, data, address=None, quiet=False):
        if data[:len(SMBIOS_ANCHOR)] != SMBIOS_ANCHOR:
            raise MalformedEntryPoint("entry point does not start with %r" % (
                SMBIOS_ANCHOR))
        if len(data) < SMBIOS_ENTRY_POINT_SIZE:
            raise MalformedEntryPoint(
                "entry point needs 0x%X bytes, only 0x%X available" % (
                    SMBIOS_ENTRY_POINT_SIZE, len(data)))

        self.parse_structure(data, SMBIOSEntryPointType)
        self.data = data[:SMBIOS_ENTRY_POINT_SIZE]
        self.address = address
        self.quiet = quiet

        s = self.structure
        self.anchor = bytes(s.Anchor)
        self.checksum = s.Checksum
        self.length = s.Length
        self.major_version = s.MajorVersion
        self.minor_version = s.MinorVersion
        self.max_structure_size = s.MaxStructureSize
        self.revision = s.EntryPointRevision
        self.formatted_area = bytes(bytearray(s.FormattedArea))
        self.intermediate_anchor = self.data[0x10:0x15]
        self.intermediate_checksum = s.IntermediateChecksum
        self.table_length = s.TableLength
        self.table_address = s.TableAddress
        self.structure_count = s.NumberOfStructures
        self.bcd_revision = s.BCDRevision
        self.name = "SMBIOS %s" % self.version_string

        # The checksum covers the length the entry point declares.
        self._checked = data[:max(self.length, SMBIOS_ENTRY_POINT_SIZE)]

        self.attrs = {
            "version": self.version_string,
            "revision": self.revision,
            "max_structure_size": self.max_structure_size,
            "table_address": self.table_address,
            "table_length": self.table_length,
            "structure_count": self.structure_count,
            "bcd_revision": self.bcd_revision_string,
        }

    @property
    def version(self):
        '''The (major, minor) SMBIOS version.'''
        return (self.major_version, self.minor_version)

    @property
    def version_string(self):
        return "%d.%d" % self.version

    @property
    def bcd_revision_string(self):
        return "%d.%d" % (self.bcd_revision >> 4, self.bcd_revision & 0xF)

    @property
    def checksum_valid(self):
        if len(self._checked) < self.length:
            return False
        return checksum(self._checked[:self.length]) == 0

    @property
    def intermediate_checksum_valid(self):
        return checksum(self.data[INTERMEDIATE_OFFSET:]) == 0

    @property
    def warnings(self):
        '''Inconsistencies that do not prevent locating the table.'''
        warnings = []
        if not self.checksum_valid:
            warnings.append("entry point checksum is invalid")
        if self.intermediate_anchor != DMI_ANCHOR:
            warnings.append("intermediate anchor is %r, expected %r" % (
                self.intermediate_anchor, DMI_ANCHOR))
        elif not self.intermediate_checksum_valid:
            warnings.append("intermediate checksum is invalid")
        if self.length < SMBIOS_ENTRY_POINT_SIZE:
            warnings.append("entry point length 0x%02X is shorter than 0x%02X"
                            % (self.length, SMBIOS_ENTRY_POINT_SIZE))
        return warnings

    def process(self):
        if not self.quiet:
            for warning in self.warnings:
                print_error("Warning: %s" % warning)
        return True

    def showinfo(self, ts='', index=None):
        print("%s%s present." % (ts, blue("SMBIOS %s" % self.version_string)))
        print("%s%d structures occupying %d bytes." % (
            ts, self.structure_count, self.table_length))
        print("%sTable at %s." % (ts, green("0x%08X" % self.table_address)))
        for warning in self.warnings:
            print("%s%s" % (ts, red(warning)))


def find_entry_point(data, base=0, quiet=False):
    '''Scan a memory range for the SMBIOS entry point.

    Anchors on a 16-byte boundary that declare a full length and carry a
    valid checksum are preferred, the first anchor found is used otherwise.

    Args:
        data (binary): The scanned range, conventionally 0xF0000-0xFFFFF.
        base (Optional[int]): Physical address of the first byte of data.
        quiet (Optional[bool]): Do not report checksum warnings.

    Return:
        EntryPoint: The processed entry point.

    Raise:
        AnchorNotFound: data does not contain the anchor.
        MalformedEntryPoint: the anchor is too close to the end of data.
    '''
    first = data.find(SMBIOS_ANCHOR)
    if first < 0:
        raise AnchorNotFound("no %r anchor in 0x%X bytes at 0x%08X" % (
            SMBIOS_ANCHOR, len(data), base))

    found = first
    offset = first
    while offset >= 0:
        candidate = data[offset:offset + SMBIOS_ENTRY_POINT_SIZE]
        if (offset % 16 == 0 and
                len(candidate) == SMBIOS_ENTRY_POINT_SIZE and
                candidate[5] >= SMBIOS_ENTRY_POINT_SIZE and
                checksum(data[offset:offset + candidate[5]]) == 0):
            found = offset
            break
        offset = data.find(SMBIOS_ANCHOR, offset + 1)

    entry_point = EntryPoint(data[found:], base + found, quiet=quiet)
    entry_point.process()
    return entry_point
