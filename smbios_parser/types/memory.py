# -*- coding: utf-8 -*-
'''Memory arrays, devices, their address mappings, errors and channels.

Sizes and addresses are reported in bytes.
'''

from ..base import SMBIOSStructure
from ..structs.field_tables import *
from ..structs.smbios_structs import *
from ..utils import bit_set, bits, flag_names, lookup
from .common import handle_or_none, size_label, word_or_none

NO_ERROR_INFORMATION = 0xFFFF
ERROR_INFORMATION_NOT_PROVIDED = 0xFFFE


def error_handle(value):
    '''Error information handles, None when no error has been detected.'''
    if value == ERROR_INFORMATION_NOT_PROVIDED:
        return "Not Provided"
    return handle_or_none(value)


class PhysicalMemoryArray(SMBIOSStructure):
    TYPE = TYPE_PHYSICAL_MEMORY_ARRAY
    fields = (
        "location", "use", "error_correction_type", "maximum_capacity",
        "error_information_handle", "number_of_devices",
    )

    def decode(self, r):
        self.location = lookup(
            MEMORY_ARRAY_LOCATIONS, r.u8(0x04, "location"))
        self.use = lookup(MEMORY_ARRAY_USES, r.u8(0x05, "use"))
        self.error_correction_type = lookup(
            MEMORY_ERROR_CORRECTION_TYPES,
            r.u8(0x06, "error_correction_type"))
        capacity = r.u32(0x07, "maximum_capacity")
        if capacity == 0x80000000 and r.has(0x0F, 8):
            self.maximum_capacity = r.u64(0x0F, "extended_maximum_capacity")
        elif capacity != 0x80000000:
            self.maximum_capacity = capacity << 10
        self.error_information_handle = error_handle(
            r.u16(0x0B, "error_information_handle"))
        self.number_of_devices = r.u16(0x0D, "number_of_devices")

    @property
    def maximum_capacity_label(self):
        return size_label(self.maximum_capacity)


def memory_device_size(value, extended=None):
    '''Size of a memory device in bytes.

    0 means no module is installed and 0xFFFF an unknown size, returned as
    None. 0x7FFF defers to the 32-bit extended size in MB.
    '''
    if value == 0xFFFF:
        return None
    if value == 0x7FFF and extended is not None:
        return (extended & 0x7FFFFFFF) << 20
    if bit_set(value, 0x8000):
        return (value & 0x7FFF) << 10
    return value << 20


def memory_speed(value, extended=None):
    '''Speed in MT/s, 0xFFFF defers to the 32-bit extended speed.'''
    if value == 0xFFFF and extended is not None:
        return extended & 0x7FFFFFFF
    return value or None


class MemoryDevice(SMBIOSStructure):
    TYPE = TYPE_MEMORY_DEVICE
    fields = (
        "array_handle", "error_information_handle", "total_width",
        "data_width", "size", "form_factor", "set", "locator",
        "bank_locator", "memory_type", "type_detail", "speed",
        "manufacturer", "serial_number", "asset_tag", "part_number", "rank",
        "configured_memory_speed", "minimum_voltage", "maximum_voltage",
        "configured_voltage", "memory_technology",
        "operating_mode_capability", "firmware_version",
        "module_manufacturer_id", "module_product_id",
        "subsystem_controller_manufacturer_id",
        "subsystem_controller_product_id", "non_volatile_size",
        "volatile_size", "cache_size", "logical_size",
    )

    def decode(self, r):
        self.array_handle = r.u16(0x04, "array_handle")
        self.error_information_handle = error_handle(
            r.u16(0x06, "error_information_handle"))
        self.total_width = word_or_none(
            r.u16(0x08, "total_width"), 0xFFFF)
        self.data_width = word_or_none(
            r.u16(0x0A, "data_width"), 0xFFFF)
        size = r.u16(0x0C, "size")
        self.form_factor = lookup(MEMORY_FORM_FACTORS, r.u8(0x0E, "form_factor"))
        device_set = r.u8(0x0F, "set")
        if device_set == 0xFF:
            self.set = "Unknown"
        elif device_set:
            self.set = device_set
        self.locator = r.string(0x10, "locator")
        self.bank_locator = r.string(0x11, "bank_locator")
        self.memory_type = lookup(MEMORY_TYPES, r.u8(0x12, "memory_type"))
        self.type_detail = flag_names(
            MEMORY_TYPE_DETAILS, r.u16(0x13, "type_detail"))

        extended_size = None
        if r.has(0x1C, 4):
            extended_size = r.u32(0x1C, "extended_size")
        self.size = memory_device_size(size, extended_size)

        speed_2 = configured_speed_2 = None
        if r.has(0x54, 8):
            speed_2 = r.u32(0x54, "extended_speed")
            configured_speed_2 = r.u32(0x58, "extended_configured_speed")
        if r.has(0x15, 2):
            self.speed = memory_speed(r.u16(0x15, "speed"), speed_2)
        if r.has(0x17, 4):
            self.manufacturer = r.string(0x17, "manufacturer")
            self.serial_number = r.string(0x18, "serial_number")
            self.asset_tag = r.string(0x19, "asset_tag")
            self.part_number = r.string(0x1A, "part_number")
        if r.has(0x1B):
            self.rank = bits(r.u8(0x1B, "attributes"), 0, 4) or None
        if r.has(0x20, 2):
            self.configured_memory_speed = memory_speed(
                r.u16(0x20, "configured_memory_speed"), configured_speed_2)
        if r.has(0x22, 6):
            # Voltages in millivolts, 0 when unknown.
            self.minimum_voltage = r.u16(0x22, "minimum_voltage") or None
            self.maximum_voltage = r.u16(0x24, "maximum_voltage") or None
            self.configured_voltage = r.u16(0x26, "configured_voltage") or None
        if r.has(0x28, 0x2C):
            self.memory_technology = lookup(
                MEMORY_TECHNOLOGIES, r.u8(0x28, "memory_technology"))
            self.operating_mode_capability = flag_names(
                MEMORY_OPERATING_MODES,
                r.u16(0x29, "operating_mode_capability"))
            self.firmware_version = r.string(0x2B, "firmware_version")
            self.module_manufacturer_id = r.u16(
                0x2C, "module_manufacturer_id")
            self.module_product_id = r.u16(0x2E, "module_product_id")
            self.subsystem_controller_manufacturer_id = r.u16(
                0x30, "subsystem_controller_manufacturer_id")
            self.subsystem_controller_product_id = r.u16(
                0x32, "subsystem_controller_product_id")
            self.non_volatile_size = self._region_size(r, 0x34)
            self.volatile_size = self._region_size(r, 0x3C)
            self.cache_size = self._region_size(r, 0x44)
            self.logical_size = self._region_size(r, 0x4C)

    @staticmethod
    def _region_size(r, offset):
        # All ones is unknown, 0 is not present.
        value = r.u64(offset, "region_size")
        if value == 0xFFFFFFFFFFFFFFFF:
            return None
        return value

    @property
    def size_label(self):
        if self.size == 0:
            return "No Module Installed"
        return size_label(self.size)


def error_address(value, unknown):
    if value == unknown:
        return None
    return value


class MemoryError32(SMBIOSStructure):
    TYPE = TYPE_MEMORY_ERROR_32
    fields = (
        "error_type", "granularity", "operation", "vendor_syndrome",
        "memory_array_address", "device_address", "resolution",
    )
    unknown_address = 0x80000000

    def decode(self, r):
        self.error_type = lookup(MEMORY_ERROR_TYPES, r.u8(0x04, "error_type"))
        self.granularity = lookup(
            MEMORY_ERROR_GRANULARITIES, r.u8(0x05, "granularity"))
        self.operation = lookup(MEMORY_ERROR_OPERATIONS, r.u8(0x06, "operation"))
        self.vendor_syndrome = error_address(
            r.u32(0x07, "vendor_syndrome"), 0)
        self.memory_array_address = error_address(
            r.u32(0x0B, "memory_array_address"), self.unknown_address)
        self.device_address = error_address(
            r.u32(0x0F, "device_address"), self.unknown_address)
        self.resolution = error_address(
            r.u32(0x13, "resolution"), 0x80000000)


class MemoryError64(MemoryError32):
    TYPE = TYPE_MEMORY_ERROR_64
    unknown_address = 0x8000000000000000

    def decode(self, r):
        self.error_type = lookup(MEMORY_ERROR_TYPES, r.u8(0x04, "error_type"))
        self.granularity = lookup(
            MEMORY_ERROR_GRANULARITIES, r.u8(0x05, "granularity"))
        self.operation = lookup(MEMORY_ERROR_OPERATIONS, r.u8(0x06, "operation"))
        self.vendor_syndrome = error_address(
            r.u32(0x07, "vendor_syndrome"), 0)
        self.memory_array_address = error_address(
            r.u64(0x0B, "memory_array_address"), self.unknown_address)
        self.device_address = error_address(
            r.u64(0x13, "device_address"), self.unknown_address)
        self.resolution = error_address(
            r.u32(0x1B, "resolution"), 0x80000000)


def mapped_range(r, start, end, extended_offset):
    '''Return the (start, end) byte addresses of a mapped range.

    The 32-bit fields count kilobytes; 0xFFFFFFFF in the start field selects
    the 64-bit byte addresses that follow.
    '''
    if start == 0xFFFFFFFF and r.has(extended_offset, 16):
        return (r.u64(extended_offset, "extended_starting_address"),
                r.u64(extended_offset + 8, "extended_ending_address"))
    return (start << 10, ((end + 1) << 10) - 1)


class MemoryArrayMappedAddress(SMBIOSStructure):
    TYPE = TYPE_MEMORY_ARRAY_MAPPED_ADDRESS
    fields = (
        "starting_address", "ending_address", "range_size",
        "physical_array_handle", "partition_width",
    )

    def decode(self, r):
        start = r.u32(0x04, "starting_address")
        end = r.u32(0x08, "ending_address")
        self.physical_array_handle = r.u16(0x0C, "physical_array_handle")
        self.partition_width = r.u8(0x0E, "partition_width")
        self.starting_address, self.ending_address = mapped_range(
            r, start, end, 0x0F)
        if self.ending_address >= self.starting_address:
            self.range_size = self.ending_address - self.starting_address + 1


class MemoryDeviceMappedAddress(SMBIOSStructure):
    TYPE = TYPE_MEMORY_DEVICE_MAPPED_ADDRESS
    fields = (
        "starting_address", "ending_address", "range_size",
        "physical_device_handle", "memory_array_mapped_address_handle",
        "partition_row_position", "interleave_position",
        "interleaved_data_depth",
    )

    def decode(self, r):
        start = r.u32(0x04, "starting_address")
        end = r.u32(0x08, "ending_address")
        self.physical_device_handle = r.u16(0x0C, "physical_device_handle")
        self.memory_array_mapped_address_handle = r.u16(
            0x0E, "memory_array_mapped_address_handle")
        # Each position is 0xFF when unknown and 0 when not interleaved.
        position = r.u8(0x10, "partition_row_position")
        self.partition_row_position = None if position == 0xFF else position
        position = r.u8(0x11, "interleave_position")
        self.interleave_position = None if position == 0xFF else position
        depth = r.u8(0x12, "interleaved_data_depth")
        self.interleaved_data_depth = None if depth == 0xFF else depth
        self.starting_address, self.ending_address = mapped_range(
            r, start, end, 0x13)
        if self.ending_address >= self.starting_address:
            self.range_size = self.ending_address - self.starting_address + 1


class MemoryChannel(SMBIOSStructure):
    TYPE = TYPE_MEMORY_CHANNEL
    fields = ("channel_type", "maximum_load", "devices")

    def decode(self, r):
        self.channel_type = lookup(
            MEMORY_CHANNEL_TYPES, r.u8(0x04, "channel_type"))
        self.maximum_load = r.u8(0x05, "maximum_load")
        count = r.u8(0x06, "device_count")
        self.devices = []
        for i in range(count):
            offset = 0x07 + 3 * i
            self.devices.append({
                "load": r.u8(offset, "devices"),
                "handle": r.u16(offset + 1, "devices"),
            })
