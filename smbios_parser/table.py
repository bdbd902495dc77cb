# -*- coding: utf-8 -*-
'''The SMBIOS structure table: records, string pools and the decoded store.

A record is a 4-byte header (type, length, handle), a formatted area that
runs to header.length, and a pool of NUL-terminated strings that ends with
an extra NUL. Records are packed back to back with no other delimiter.
'''

import struct

from .base import SMBIOSObject, StructuredObject
from .errors import (
    DecodeError, MalformedRecord, StringIndexOutOfRange, TableTruncated)
from .structs.smbios_structs import *
from .utils import print_error

RECORD_TERMINATOR = b"\x00\x00"


class StructureHeader(StructuredObject):
    size = SMBIOS_HEADER_SIZE

    def __init__(self, data):
        self.parse_structure(data, SMBIOSHeaderType)
        self.type = self.structure.Type
        self.length = self.structure.Length
        self.handle = self.structure.Handle

    @property
    def valid(self):
        return self.length >= self.size

    def __repr__(self):
        return "StructureHeader(type=%d, length=0x%02X, handle=0x%04X)" % (
            self.type, self.length, self.handle)


class StringPool(object):
    '''The strings that follow a record's formatted area.

    Args:
        data (binary): Pool bytes, including the terminating NULs when present.
    '''

    def __init__(self, data):
        self.data = data
        self.strings = []
        for value in data.split(b"\x00"):
            if not value:
                break
            self.strings.append(value.decode("utf-8", "replace"))

    def __len__(self):
        return len(self.strings)

    def get(self, index, type_code=None, handle=None, field=None):
        '''Resolve a 1-based string reference, index 0 is "Not Specified".'''
        if index == 0:
            return NOT_SPECIFIED
        if index > len(self.strings):
            raise StringIndexOutOfRange(
                "string %d requested, %d present" % (index, len(self.strings)),
                type_code, handle, field)
        return self.strings[index - 1]


class StructureRecord(object):
    '''One raw structure with bounds-checked field access.

    Every read is limited to the formatted area; reading past header.length
    raises MalformedRecord naming the type and field.

    Args:
        header (StructureHeader): The parsed header.
        data (binary): The record bytes, header through string pool.
        version (tuple): The (major, minor) SMBIOS version.
        offset (Optional[int]): Offset of the record within the table.
    '''

    def __init__(self, header, data, version, offset=0):
        self.header = header
        self.data = data
        self.version = tuple(version)
        self.offset = offset
        self.strings = StringPool(data[header.length:])

    @property
    def type(self):
        return self.header.type

    @property
    def length(self):
        return self.header.length

    @property
    def handle(self):
        return self.header.handle

    @property
    def formatted(self):
        '''The formatted area, header included.'''
        return self.data[:self.header.length]

    def has(self, offset, size=1):
        '''Check the formatted area holds size bytes at offset.'''
        return offset + size <= min(self.header.length, len(self.data))

    def _check(self, offset, size, field):
        if not self.has(offset, size):
            raise MalformedRecord(
                "type %d handle 0x%04X: %s at 0x%02X+%d is beyond length 0x%02X"
                % (self.type, self.handle, field or "field", offset, size,
                   self.header.length),
                self.type, self.handle, field)

    def _unpack(self, fmt, offset, field):
        self._check(offset, struct.calcsize(fmt), field)
        return struct.unpack_from(fmt, self.data, offset)[0]

    def u8(self, offset, field=None):
        return self._unpack("<B", offset, field)

    def u16(self, offset, field=None):
        return self._unpack("<H", offset, field)

    def u32(self, offset, field=None):
        return self._unpack("<I", offset, field)

    def u64(self, offset, field=None):
        return self._unpack("<Q", offset, field)

    def raw(self, offset, size, field=None):
        self._check(offset, size, field)
        return self.data[offset:offset + size]

    def string(self, offset, field=None):
        '''Resolve the string referenced by the byte at offset.'''
        index = self.u8(offset, field)
        return self.strings.get(index, self.type, self.handle, field)

    def __repr__(self):
        return "<StructureRecord type=%d handle=0x%04X length=0x%02X>" % (
            self.type, self.handle, self.length)


class StructureTable(object):
    '''Walks the structure table bytes record by record.

    Args:
        data (binary): The structure table, at most the declared table length.
        version (tuple): The (major, minor) SMBIOS version.
        quiet (Optional[bool]): Do not report errors to stderr.
    '''

    def __init__(self, data, version, quiet=False):
        self.data = data
        self.version = tuple(version)
        self.quiet = quiet
        self.errors = []
        self.ended_early = False

    def report(self, error):
        '''Collect a per-record error and report it.'''
        self.errors.append(error)
        if not self.quiet:
            print_error("Error: %s" % error)

    def records(self):
        '''Generate each StructureRecord, ending after End-of-Table.

        A record with a broken length is reported and skipped: the walk
        resumes after the first double NUL following its header.
        '''
        data = self.data
        offset = 0
        while True:
            if len(data) - offset < SMBIOS_HEADER_SIZE:
                self._truncated(offset, "0x%X bytes remain" % (
                    len(data) - offset))
                return

            header = StructureHeader(data[offset:offset + SMBIOS_HEADER_SIZE])
            if not header.valid:
                self.report(MalformedRecord(
                    "type %d handle 0x%04X at 0x%04X: length 0x%02X is "
                    "shorter than its header" % (
                        header.type, header.handle, offset, header.length),
                    header.type, header.handle, "length"))
                self._truncated(offset, "record boundaries are lost")
                return

            malformed = offset + header.length > len(data)
            if malformed:
                self.report(MalformedRecord(
                    "type %d handle 0x%04X at 0x%04X: length 0x%02X exceeds "
                    "the 0x%X bytes remaining" % (
                        header.type, header.handle, offset, header.length,
                        len(data) - offset),
                    header.type, header.handle, "length"))
                end = data.find(RECORD_TERMINATOR, offset + SMBIOS_HEADER_SIZE)
            else:
                end = data.find(RECORD_TERMINATOR, offset + header.length)

            if end < 0:
                if not malformed:
                    yield StructureRecord(
                        header, data[offset:], self.version, offset)
                    if header.type == TYPE_END_OF_TABLE:
                        return
                self._truncated(offset, "string pool is not terminated")
                return

            next_offset = end + len(RECORD_TERMINATOR)
            if not malformed:
                yield StructureRecord(
                    header, data[offset:next_offset], self.version, offset)
                if header.type == TYPE_END_OF_TABLE:
                    return
            offset = next_offset

    def _truncated(self, offset, reason):
        self.ended_early = True
        self.report(TableTruncated(
            "table ended at 0x%04X without an End-of-Table structure, %s" % (
                offset, reason)))


def _typed_accessor(type_code):
    def accessor(self, which="last"):
        return self.select(type_code, which)
    accessor.__doc__ = "The %s structure(s), see select()." % (
        SMBIOS_STRUCTURE_TYPES[type_code][0])
    return accessor


class DecodedTable(SMBIOSObject):
    '''Every structure decoded from one walk of the table, by type code.

    Records are kept in table order for each type. get() answers with the
    last record of a type, first() with the first and get_all() with all of
    them. End-of-Table is held apart as 'end_of_table'.

    Args:
        entry_point (EntryPoint): The entry point that located the table, or
            None when a bare table was decoded.
        version (tuple): The (major, minor) SMBIOS version.
        structures (list): Decoded structures in table order.
        errors (list): DecodeErrors collected during the walk.
        end_of_table (Optional[EndOfTable]): The terminating structure.
    '''

    def __init__(self, entry_point, version, structures, errors,
                 end_of_table=None, ended_early=False):
        self.entry_point = entry_point
        self.version = tuple(version)
        self.data = None
        self.name = "SMBIOS %d.%d" % self.version
        self.end_of_table = end_of_table
        self.ended_early = ended_early
        self._structures = tuple(structures)
        self._errors = tuple(errors)

        by_type = {}
        for structure in self._structures:
            by_type.setdefault(structure.type, []).append(structure)
        self._types = dict([(code, tuple(items))
                            for code, items in by_type.items()])
        self.attrs = {
            "version": "%d.%d" % self.version,
            "structures": len(self._structures),
            "errors": len(self._errors),
        }

    @classmethod
    def build(cls, table, entry_point=None):
        '''Walk a StructureTable and decode each record.

        A DecodeError fails only the record it was raised for.
        '''
        from .types import decode_record, EndOfTable

        structures = []
        end_of_table = None
        for record in table.records():
            try:
                structure = decode_record(record)
            except DecodeError as e:
                table.report(e)
                continue
            if isinstance(structure, EndOfTable):
                end_of_table = structure
                continue
            structures.append(structure)
        return cls(entry_point, table.version, structures, table.errors,
                   end_of_table, table.ended_early)

    @property
    def errors(self):
        return list(self._errors)

    @property
    def objects(self):
        return list(self._structures)

    @property
    def structures(self):
        '''All decoded structures in table order.'''
        return list(self._structures)

    @property
    def types(self):
        '''Type codes present, in ascending order.'''
        return sorted(self._types.keys())

    def __contains__(self, type_code):
        return type_code in self._types

    def __len__(self):
        return len(self._structures)

    def __iter__(self):
        return iter(self._structures)

    def get(self, type_code, default=None):
        '''The last structure of type_code, or default when absent.'''
        if type_code not in self._types:
            return default
        return self._types[type_code][-1]

    def first(self, type_code, default=None):
        if type_code not in self._types:
            return default
        return self._types[type_code][0]

    def get_all(self, type_code):
        return list(self._types.get(type_code, ()))

    def select(self, type_code, which="last"):
        '''Pick structures of a type with "first", "last" or "all".'''
        if which == "first":
            return self.first(type_code)
        if which == "last":
            return self.get(type_code)
        if which == "all":
            return self.get_all(type_code)
        raise ValueError("which must be 'first', 'last' or 'all', not %r" % (
            which))

    def mapping(self):
        '''The legacy view: each type code to its last structure.'''
        return dict([(code, items[-1]) for code, items in self._types.items()])

    def by_handle(self, handle):
        for structure in self._structures:
            if structure.handle == handle:
                return structure
        return None

    def __eq__(self, other):
        return (isinstance(other, DecodedTable) and
                self.version == other.version and
                self._structures == other._structures and
                self._errors == other._errors)

    def __hash__(self):
        return hash((self.version, len(self._structures)))

    def showinfo(self, ts='', index=None):
        if self.entry_point is not None:
            self.entry_point.showinfo(ts)
            print("")
        for structure in self._structures:
            structure.showinfo(ts)
            print("")
        if self.end_of_table is not None:
            self.end_of_table.showinfo(ts)

    bios = _typed_accessor(TYPE_BIOS)
    system = _typed_accessor(TYPE_SYSTEM)
    baseboard = _typed_accessor(TYPE_BASEBOARD)
    chassis = _typed_accessor(TYPE_CHASSIS)
    processor = _typed_accessor(TYPE_PROCESSOR)
    cache = _typed_accessor(TYPE_CACHE)
    port_connector = _typed_accessor(TYPE_PORT_CONNECTOR)
    system_slot = _typed_accessor(TYPE_SYSTEM_SLOT)
    onboard_devices = _typed_accessor(TYPE_ONBOARD_DEVICES)
    oem_strings = _typed_accessor(TYPE_OEM_STRINGS)
    system_configuration = _typed_accessor(TYPE_SYSTEM_CONFIGURATION)
    bios_language = _typed_accessor(TYPE_BIOS_LANGUAGE)
    group_associations = _typed_accessor(TYPE_GROUP_ASSOCIATIONS)
    system_event_log = _typed_accessor(TYPE_SYSTEM_EVENT_LOG)
    physical_memory_array = _typed_accessor(TYPE_PHYSICAL_MEMORY_ARRAY)
    memory_device = _typed_accessor(TYPE_MEMORY_DEVICE)
    memory_error_32 = _typed_accessor(TYPE_MEMORY_ERROR_32)
    memory_array_mapped_address = _typed_accessor(
        TYPE_MEMORY_ARRAY_MAPPED_ADDRESS)
    memory_device_mapped_address = _typed_accessor(
        TYPE_MEMORY_DEVICE_MAPPED_ADDRESS)
    pointing_device = _typed_accessor(TYPE_POINTING_DEVICE)
    portable_battery = _typed_accessor(TYPE_PORTABLE_BATTERY)
    system_reset = _typed_accessor(TYPE_SYSTEM_RESET)
    hardware_security = _typed_accessor(TYPE_HARDWARE_SECURITY)
    system_power_controls = _typed_accessor(TYPE_SYSTEM_POWER_CONTROLS)
    voltage_probe = _typed_accessor(TYPE_VOLTAGE_PROBE)
    cooling_device = _typed_accessor(TYPE_COOLING_DEVICE)
    temperature_probe = _typed_accessor(TYPE_TEMPERATURE_PROBE)
    current_probe = _typed_accessor(TYPE_CURRENT_PROBE)
    out_of_band_remote_access = _typed_accessor(
        TYPE_OUT_OF_BAND_REMOTE_ACCESS)
    system_boot = _typed_accessor(TYPE_SYSTEM_BOOT)
    memory_error_64 = _typed_accessor(TYPE_MEMORY_ERROR_64)
    management_device = _typed_accessor(TYPE_MANAGEMENT_DEVICE)
    management_device_component = _typed_accessor(
        TYPE_MANAGEMENT_DEVICE_COMPONENT)
    management_device_threshold = _typed_accessor(
        TYPE_MANAGEMENT_DEVICE_THRESHOLD)
    memory_channel = _typed_accessor(TYPE_MEMORY_CHANNEL)
    ipmi_device = _typed_accessor(TYPE_IPMI_DEVICE)
    power_supply = _typed_accessor(TYPE_POWER_SUPPLY)
    additional_information = _typed_accessor(TYPE_ADDITIONAL_INFORMATION)
    onboard_devices_extended = _typed_accessor(TYPE_ONBOARD_DEVICES_EXTENDED)
    management_controller_host_interface = _typed_accessor(
        TYPE_MANAGEMENT_CONTROLLER_HOST_INTERFACE)
    tpm_device = _typed_accessor(TYPE_TPM_DEVICE)
    inactive = _typed_accessor(TYPE_INACTIVE)
