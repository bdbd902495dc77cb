# -*- coding: utf-8 -*-
'''Sentinel and fallback structures, and value helpers shared by decoders.
'''

from ..base import SMBIOSStructure
from ..structs.smbios_structs import (
    SMBIOS_HEADER_SIZE, SMBIOS_STRUCTURE_TYPES, TYPE_INACTIVE,
    TYPE_END_OF_TABLE)
from ..utils import hex_dump, blue, purple

NO_HANDLE = 0xFFFF
UNKNOWN_WORD = 0x8000


def handle_or_none(value):
    '''Handles of 0xFFFF reference nothing.'''
    if value == NO_HANDLE:
        return None
    return value


def word_or_none(value, unknown=UNKNOWN_WORD):
    '''Measurements use 0x8000 when the value is unknown.'''
    if value == unknown:
        return None
    return value


def bus_address(segment, bus, devfn):
    '''Format a PCI segment/bus/device/function as "ssss:bb:dd.f".'''
    return "%04x:%02x:%02x.%x" % (segment, bus, devfn >> 3, devfn & 0x7)


def type_name(type_code):
    if type_code in SMBIOS_STRUCTURE_TYPES:
        return SMBIOS_STRUCTURE_TYPES[type_code][0]
    if type_code >= 128:
        return "OEM-specific Type %d" % type_code
    return "Unknown Type %d" % type_code


def size_label(size):
    '''Render a size in bytes the way dmidecode does, "64 kB" or "16 GB".'''
    if size is None:
        return "Unknown"
    units = ["bytes", "kB", "MB", "GB", "TB", "PB", "EB"]
    unit = 0
    while size >= 1024 and size % 1024 == 0 and unit < len(units) - 1:
        size //= 1024
        unit += 1
    return "%d %s" % (size, units[unit])


class Inactive(SMBIOSStructure):
    '''A structure the firmware marked inactive, kept for its handle.'''
    TYPE = TYPE_INACTIVE


class EndOfTable(SMBIOSStructure):
    TYPE = TYPE_END_OF_TABLE


class Unknown(SMBIOSStructure):
    '''Any structure without a decoder: OEM types and reserved types.

    The formatted area after the header and the strings are preserved.
    '''

    fields = ("raw", "strings")

    def decode(self, r):
        self.raw = r.formatted[SMBIOS_HEADER_SIZE:]
        self.strings = list(r.strings.strings)

    @property
    def name(self):
        return type_name(self.type)

    def showinfo(self, ts='', index=None):
        print("%s%s 0x%04X, DMI type %d, %d bytes" % (
            ts, blue("Handle"), self.handle, self.type, self.length))
        print("%s%s" % (ts, purple(self.name)))
        if self.raw:
            print("%s\tHeader and Data:" % ts)
            hex_dump(self.record.formatted, ts="%s\t\t" % ts)
        if self.strings:
            print("%s\tStrings:" % ts)
            for value in self.strings:
                print("%s\t\t%s" % (ts, value))
