# -*- coding: utf-8 -*-

from ..base import SMBIOSStructure
from ..structs.field_tables import *
from ..structs.smbios_structs import *
from ..utils import bit_set, bits, flag_names, lookup
from .common import handle_or_none, size_label


def processor_voltage(value):
    '''Bit 7 selects the current voltage in tenths of volts, otherwise the
    low bits flag the supported legacy voltages.'''
    if bit_set(value, 0x80):
        return "%.1f V" % ((value & 0x7F) / 10.0)
    supported = flag_names(PROCESSOR_VOLTAGES, value)
    if not supported:
        return "Unknown"
    return ", ".join(supported)


def processor_status(value):
    socket = "Populated" if bit_set(value, 0x40) else "Unpopulated"
    if not bit_set(value, 0x40):
        return socket
    return "%s, %s" % (socket, lookup(PROCESSOR_STATUS, bits(value, 0, 3)))


class ProcessorInformation(SMBIOSStructure):
    TYPE = TYPE_PROCESSOR
    fields = (
        "socket_designation", "processor_type", "family", "manufacturer",
        "id", "version", "voltage", "external_clock", "max_speed",
        "current_speed", "status", "upgrade", "l1_cache_handle",
        "l2_cache_handle", "l3_cache_handle", "serial_number", "asset_tag",
        "part_number", "core_count", "core_enabled", "thread_count",
        "characteristics", "thread_enabled",
    )

    def decode(self, r):
        self.socket_designation = r.string(0x04, "socket_designation")
        self.processor_type = lookup(
            PROCESSOR_TYPES, r.u8(0x05, "processor_type"))
        family = r.u8(0x06, "family")
        if family == 0xFE and r.has(0x28, 2):
            family = r.u16(0x28, "family_2")
        self.family = lookup(PROCESSOR_FAMILIES, family)
        self.manufacturer = r.string(0x07, "manufacturer")
        self.id = " ".join(["%02X" % c for c in r.raw(0x08, 8, "id")])
        self.version = r.string(0x10, "version")
        self.voltage = processor_voltage(r.u8(0x11, "voltage"))
        # Clock and speeds are in MHz, 0 when unknown.
        self.external_clock = r.u16(0x12, "external_clock") or None
        self.max_speed = r.u16(0x14, "max_speed") or None
        self.current_speed = r.u16(0x16, "current_speed") or None
        self.status = processor_status(r.u8(0x18, "status"))
        self.upgrade = lookup(PROCESSOR_UPGRADES, r.u8(0x19, "upgrade"))

        if r.has(0x1A, 6):
            self.l1_cache_handle = handle_or_none(r.u16(0x1A, "l1_cache"))
            self.l2_cache_handle = handle_or_none(r.u16(0x1C, "l2_cache"))
            self.l3_cache_handle = handle_or_none(r.u16(0x1E, "l3_cache"))
        if r.has(0x20, 3):
            self.serial_number = r.string(0x20, "serial_number")
            self.asset_tag = r.string(0x21, "asset_tag")
            self.part_number = r.string(0x22, "part_number")
        if r.has(0x23, 5):
            self.core_count = r.u8(0x23, "core_count")
            self.core_enabled = r.u8(0x24, "core_enabled")
            self.thread_count = r.u8(0x25, "thread_count")
            self.characteristics = flag_names(
                PROCESSOR_CHARACTERISTICS, r.u16(0x26, "characteristics"))
        if r.has(0x2A, 6):
            # Counts above 255 are held in the 16-bit fields.
            if self.core_count == 0xFF:
                self.core_count = r.u16(0x2A, "core_count_2")
            if self.core_enabled == 0xFF:
                self.core_enabled = r.u16(0x2C, "core_enabled_2")
            if self.thread_count == 0xFF:
                self.thread_count = r.u16(0x2E, "thread_count_2")
        if r.has(0x30, 2):
            self.thread_enabled = r.u16(0x30, "thread_enabled")


def cache_configuration(value):
    '''Split the cache configuration word into its sub-fields.

    Bits 2:0 hold the level less one, bit 3 the socketed flag, bits 6:5 the
    location, bit 7 the enabled flag and bits 9:8 the operational mode.
    '''
    return {
        "level": bits(value, 0, 3) + 1,
        "socketed": bit_set(value, 1 << 3),
        "location": CACHE_LOCATIONS[bits(value, 5, 2)],
        "enabled": bit_set(value, 1 << 7),
        "operational_mode": CACHE_OPERATIONAL_MODES[bits(value, 8, 2)],
    }


def cache_size(value):
    '''A 16-bit cache size: bit 15 selects 64K granularity over 1K.'''
    if bit_set(value, 0x8000):
        return (value & 0x7FFF) << 16
    return value << 10


def cache_size_2(value):
    '''A 32-bit cache size: bit 31 selects 64K granularity over 1K.'''
    if bit_set(value, 0x80000000):
        return (value & 0x7FFFFFFF) << 16
    return value << 10


class CacheInformation(SMBIOSStructure):
    TYPE = TYPE_CACHE
    fields = (
        "socket_designation", "level", "socketed", "location", "enabled",
        "operational_mode", "maximum_size", "installed_size",
        "supported_sram_types", "current_sram_type", "speed",
        "error_correction_type", "system_type", "associativity",
    )

    def decode(self, r):
        self.socket_designation = r.string(0x04, "socket_designation")
        configuration = cache_configuration(r.u16(0x05, "configuration"))
        for key, value in configuration.items():
            setattr(self, key, value)

        maximum = r.u16(0x07, "maximum_size")
        installed = r.u16(0x09, "installed_size")
        if r.has(0x13, 8):
            # The 32-bit sizes are authoritative once present.
            self.maximum_size = cache_size_2(r.u32(0x13, "maximum_size_2"))
            self.installed_size = cache_size_2(r.u32(0x17, "installed_size_2"))
        else:
            self.maximum_size = cache_size(maximum)
            self.installed_size = cache_size(installed)

        self.supported_sram_types = flag_names(
            CACHE_SRAM_TYPES, r.u16(0x0B, "supported_sram_type"))
        current = flag_names(CACHE_SRAM_TYPES, r.u16(0x0D, "current_sram_type"))
        self.current_sram_type = current[0] if current else "Unknown"

        if r.has(0x0F, 4):
            # Speed in nanoseconds, 0 when unknown.
            self.speed = r.u8(0x0F, "speed") or None
            self.error_correction_type = lookup(
                CACHE_ERROR_CORRECTION_TYPES,
                r.u8(0x10, "error_correction_type"))
            self.system_type = lookup(CACHE_TYPES, r.u8(0x11, "system_type"))
            self.associativity = lookup(
                CACHE_ASSOCIATIVITY, r.u8(0x12, "associativity"))

    @property
    def installed_size_label(self):
        return size_label(self.installed_size)
