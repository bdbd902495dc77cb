# -*- coding: utf-8 -*-
'''Platform identity structures: BIOS, system, baseboard and chassis, and
the configuration, language, grouping, event log, reset, security, power
control and boot structures that describe the platform as a whole.
'''

from ..base import SMBIOSStructure
from ..errors import MalformedRecord
from ..structs.field_tables import *
from ..structs.smbios_structs import *
from ..utils import bcd, bit_set, bits, flag_names, lookup, smbios_uuid
from .common import size_label, type_name, word_or_none


class BIOSInformation(SMBIOSStructure):
    TYPE = TYPE_BIOS
    fields = (
        "vendor", "bios_version", "release_date", "address", "runtime_size",
        "rom_size", "characteristics", "bios_revision", "firmware_revision",
    )

    def decode(self, r):
        self.vendor = r.string(0x04, "vendor")
        self.bios_version = r.string(0x05, "bios_version")
        segment = r.u16(0x06, "starting_address_segment")
        self.release_date = r.string(0x08, "release_date")
        rom_size = r.u8(0x09, "rom_size")
        characteristics = r.u64(0x0A, "characteristics")

        # A segment of 0 is used by UEFI firmware that has no legacy image.
        if segment:
            self.address = "0x%04X0" % segment
            self.runtime_size = (0x10000 - segment) << 4

        if rom_size == 0xFF and r.has(0x18, 2):
            extended = r.u16(0x18, "extended_rom_size")
            unit = bits(extended, 14, 2)
            if unit == 0:
                self.rom_size = bits(extended, 0, 14) << 20
            elif unit == 1:
                self.rom_size = bits(extended, 0, 14) << 30
        else:
            self.rom_size = (rom_size + 1) << 16

        if bit_set(characteristics, 1 << 3):
            self.characteristics = [BIOS_CHARACTERISTICS[3]]
        else:
            self.characteristics = flag_names(
                BIOS_CHARACTERISTICS, characteristics)
        if r.has(0x12):
            self.characteristics += flag_names(
                BIOS_CHARACTERISTICS_EXT1, r.u8(0x12, "characteristics_ext1"))
        if r.has(0x13):
            self.characteristics += flag_names(
                BIOS_CHARACTERISTICS_EXT2, r.u8(0x13, "characteristics_ext2"))

        if r.has(0x14, 4):
            major, minor = r.u8(0x14), r.u8(0x15)
            if (major, minor) != (0xFF, 0xFF):
                self.bios_revision = "%d.%d" % (major, minor)
            major, minor = r.u8(0x16), r.u8(0x17)
            if (major, minor) != (0xFF, 0xFF):
                self.firmware_revision = "%d.%d" % (major, minor)

    @property
    def rom_size_label(self):
        return size_label(self.rom_size)


class SystemInformation(SMBIOSStructure):
    TYPE = TYPE_SYSTEM
    fields = (
        "manufacturer", "product_name", "version", "serial_number", "uuid",
        "wake_up_type", "sku_number", "family",
    )

    def decode(self, r):
        self.manufacturer = r.string(0x04, "manufacturer")
        self.product_name = r.string(0x05, "product_name")
        self.version = r.string(0x06, "version")
        self.serial_number = r.string(0x07, "serial_number")
        if r.has(0x08, 17):
            self.uuid = smbios_uuid(r.raw(0x08, 16, "uuid"), r.version)
            self.wake_up_type = lookup(
                WAKE_UP_TYPES, r.u8(0x18, "wake_up_type"))
        if r.has(0x19, 2):
            self.sku_number = r.string(0x19, "sku_number")
            self.family = r.string(0x1A, "family")


class BaseboardInformation(SMBIOSStructure):
    TYPE = TYPE_BASEBOARD
    fields = (
        "manufacturer", "product_name", "version", "serial_number",
        "asset_tag", "features", "location_in_chassis", "chassis_handle",
        "board_type", "contained_object_handles",
    )

    def decode(self, r):
        self.manufacturer = r.string(0x04, "manufacturer")
        self.product_name = r.string(0x05, "product_name")
        self.version = r.string(0x06, "version")
        self.serial_number = r.string(0x07, "serial_number")
        if r.has(0x08):
            self.asset_tag = r.string(0x08, "asset_tag")
        if r.has(0x09):
            self.features = flag_names(
                BASEBOARD_FEATURES, r.u8(0x09, "features"))
        if r.has(0x0A):
            self.location_in_chassis = r.string(0x0A, "location_in_chassis")
        if r.has(0x0B, 2):
            self.chassis_handle = r.u16(0x0B, "chassis_handle")
        if r.has(0x0D):
            self.board_type = lookup(BOARD_TYPES, r.u8(0x0D, "board_type"))
        if r.has(0x0E):
            count = r.u8(0x0E, "contained_object_count")
            self.contained_object_handles = [
                r.u16(0x0F + 2 * i, "contained_object_handles")
                for i in range(count)]


def contained_element(data):
    '''Decode a chassis contained element record (type, minimum, maximum).'''
    element_type = data[0]
    if bit_set(element_type, 0x80):
        name = type_name(element_type & 0x7F)
    else:
        name = lookup(BOARD_TYPES, element_type & 0x7F)
    return {
        "type": name,
        "minimum": data[1],
        "maximum": data[2],
    }


class ChassisInformation(SMBIOSStructure):
    TYPE = TYPE_CHASSIS
    fields = (
        "manufacturer", "chassis_type", "lock", "version", "serial_number",
        "asset_tag", "boot_up_state", "power_supply_state", "thermal_state",
        "security_status", "oem_information", "height", "power_cords",
        "contained_elements", "sku_number",
    )

    def decode(self, r):
        self.manufacturer = r.string(0x04, "manufacturer")
        chassis_type = r.u8(0x05, "chassis_type")
        self.chassis_type = lookup(CHASSIS_TYPES, chassis_type & 0x7F)
        self.lock = CHASSIS_LOCK[chassis_type >> 7]
        self.version = r.string(0x06, "version")
        self.serial_number = r.string(0x07, "serial_number")
        self.asset_tag = r.string(0x08, "asset_tag")
        if r.has(0x09, 4):
            self.boot_up_state = lookup(
                CHASSIS_STATES, r.u8(0x09, "boot_up_state"))
            self.power_supply_state = lookup(
                CHASSIS_STATES, r.u8(0x0A, "power_supply_state"))
            self.thermal_state = lookup(
                CHASSIS_STATES, r.u8(0x0B, "thermal_state"))
            self.security_status = lookup(
                CHASSIS_SECURITY_STATUS, r.u8(0x0C, "security_status"))
        if r.has(0x0D, 4):
            self.oem_information = r.u32(0x0D, "oem_information")
        if r.has(0x11, 2):
            # Height in rack units, 0 when unspecified.
            self.height = r.u8(0x11, "height") or None
            self.power_cords = r.u8(0x12, "power_cords") or None
        if r.has(0x13, 2):
            count = r.u8(0x13, "contained_element_count")
            size = r.u8(0x14, "contained_element_length")
            self.contained_elements = []
            if count and size < 3:
                raise MalformedRecord(
                    "chassis contained element length %d is below 3" % size,
                    self.type, self.handle, "contained_elements")
            for i in range(count):
                element = r.raw(0x15 + i * size, size, "contained_elements")
                self.contained_elements.append(contained_element(element))
            sku = 0x15 + count * size
            if r.has(sku):
                self.sku_number = r.string(sku, "sku_number")


class OEMStrings(SMBIOSStructure):
    TYPE = TYPE_OEM_STRINGS
    fields = ("strings",)

    def decode(self, r):
        count = r.u8(0x04, "count")
        self.strings = [r.strings.get(i, self.type, self.handle, "strings")
                        for i in range(1, count + 1)]


class SystemConfigurationOptions(SMBIOSStructure):
    TYPE = TYPE_SYSTEM_CONFIGURATION
    fields = ("options",)

    def decode(self, r):
        count = r.u8(0x04, "count")
        self.options = [r.strings.get(i, self.type, self.handle, "options")
                        for i in range(1, count + 1)]


class BIOSLanguage(SMBIOSStructure):
    TYPE = TYPE_BIOS_LANGUAGE
    fields = ("language_format", "installable_languages", "currently_installed")

    def decode(self, r):
        count = r.u8(0x04, "installable_languages")
        if r.has(0x05):
            if bit_set(r.u8(0x05, "flags"), 0x01):
                self.language_format = "Abbreviated"
            else:
                self.language_format = "Long"
        self.installable_languages = [
            r.strings.get(i, self.type, self.handle, "installable_languages")
            for i in range(1, count + 1)]
        self.currently_installed = r.string(0x15, "currently_installed")


class GroupAssociations(SMBIOSStructure):
    '''A named group of structures, each item a (type, handle) pair.'''

    TYPE = TYPE_GROUP_ASSOCIATIONS
    fields = ("group_name", "items")

    def decode(self, r):
        self.group_name = r.string(0x04, "group_name")
        self.items = []
        for i in range((r.length - 0x05) // 3):
            offset = 0x05 + 3 * i
            self.items.append({
                "type": type_name(r.u8(offset, "items")),
                "handle": r.u16(offset + 1, "items"),
            })


class SystemEventLog(SMBIOSStructure):
    TYPE = TYPE_SYSTEM_EVENT_LOG
    fields = (
        "area_length", "header_start_offset", "data_start_offset",
        "access_method", "access_address", "status", "change_token",
        "header_format", "supported_log_types",
    )

    def decode(self, r):
        self.area_length = r.u16(0x04, "area_length")
        self.header_start_offset = r.u16(0x06, "header_start_offset")
        self.data_start_offset = r.u16(0x08, "data_start_offset")
        method = r.u8(0x0A, "access_method")
        self.access_method = lookup(EVENT_LOG_ACCESS_METHODS, method)
        status = r.u8(0x0B, "status")
        self.status = "%s, %s" % (
            "Valid" if bit_set(status, 0x01) else "Invalid",
            "Full" if bit_set(status, 0x02) else "Not Full")
        self.change_token = r.u32(0x0C, "change_token")

        if method <= 0x02:
            self.access_address = "Index 0x%04X, Data 0x%04X" % (
                r.u16(0x10, "access_address"), r.u16(0x12, "access_address"))
        elif method == 0x03:
            self.access_address = "0x%08X" % r.u32(0x10, "access_address")
        elif method == 0x04:
            self.access_address = "0x%04X" % r.u16(0x10, "access_address")
        else:
            self.access_address = "Unknown"

        if r.has(0x14, 3):
            self.header_format = lookup(
                EVENT_LOG_HEADER_FORMATS, r.u8(0x14, "header_format"))
            count = r.u8(0x15, "supported_log_type_count")
            size = r.u8(0x16, "log_type_descriptor_length")
            self.supported_log_types = []
            if count and size < 2:
                raise MalformedRecord(
                    "log type descriptor length %d is below 2" % size,
                    self.type, self.handle, "supported_log_types")
            for i in range(count):
                offset = 0x17 + i * size
                self.supported_log_types.append({
                    "descriptor": lookup(
                        EVENT_LOG_TYPES, r.u8(offset, "supported_log_types")),
                    "data_format": lookup(
                        EVENT_LOG_DATA_FORMATS,
                        r.u8(offset + 1, "supported_log_types")),
                })


class SystemReset(SMBIOSStructure):
    TYPE = TYPE_SYSTEM_RESET
    fields = (
        "status", "watchdog_timer", "boot_option", "boot_option_on_limit",
        "reset_count", "reset_limit", "timer_interval", "timeout",
    )

    def decode(self, r):
        capabilities = r.u8(0x04, "capabilities")
        self.status = "Enabled" if bit_set(capabilities, 0x01) else "Disabled"
        self.watchdog_timer = bit_set(capabilities, 0x20)
        if self.watchdog_timer:
            self.boot_option = RESET_BOOT_OPTIONS[bits(capabilities, 1, 2)]
            self.boot_option_on_limit = RESET_BOOT_OPTIONS[
                bits(capabilities, 3, 2)]
        # 0xFFFF is unknown for each counter.
        self.reset_count = word_or_none(r.u16(0x05, "reset_count"), 0xFFFF)
        self.reset_limit = word_or_none(r.u16(0x07, "reset_limit"), 0xFFFF)
        self.timer_interval = word_or_none(
            r.u16(0x09, "timer_interval"), 0xFFFF)
        self.timeout = word_or_none(r.u16(0x0B, "timeout"), 0xFFFF)


class HardwareSecurity(SMBIOSStructure):
    TYPE = TYPE_HARDWARE_SECURITY
    fields = (
        "power_on_password_status", "keyboard_password_status",
        "administrator_password_status", "front_panel_reset_status",
    )

    def decode(self, r):
        settings = r.u8(0x04, "settings")
        self.power_on_password_status = HARDWARE_SECURITY_STATUS[
            bits(settings, 6, 2)]
        self.keyboard_password_status = HARDWARE_SECURITY_STATUS[
            bits(settings, 4, 2)]
        self.administrator_password_status = HARDWARE_SECURITY_STATUS[
            bits(settings, 2, 2)]
        self.front_panel_reset_status = HARDWARE_SECURITY_STATUS[
            bits(settings, 0, 2)]


def _bcd_field(value, low, high):
    '''A BCD date/time field, None when unspecified or out of range.'''
    decoded = bcd(value)
    if decoded is None or decoded < low or decoded > high:
        return None
    return decoded


class SystemPowerControls(SMBIOSStructure):
    '''The next scheduled power-on, each BCD field "*" when unspecified.'''

    TYPE = TYPE_SYSTEM_POWER_CONTROLS
    fields = ("next_power_on", "month", "day", "hour", "minute", "second")

    def decode(self, r):
        self.month = _bcd_field(r.u8(0x04, "month"), 1, 12)
        self.day = _bcd_field(r.u8(0x05, "day"), 1, 31)
        self.hour = _bcd_field(r.u8(0x06, "hour"), 0, 23)
        self.minute = _bcd_field(r.u8(0x07, "minute"), 0, 59)
        self.second = _bcd_field(r.u8(0x08, "second"), 0, 59)

        def fmt(value):
            if value is None:
                return "*"
            return "%02d" % value
        self.next_power_on = "%s-%s %s:%s:%s" % (
            fmt(self.month), fmt(self.day), fmt(self.hour), fmt(self.minute),
            fmt(self.second))


class SystemBoot(SMBIOSStructure):
    TYPE = TYPE_SYSTEM_BOOT
    fields = ("status", "status_data")

    def decode(self, r):
        if not r.has(0x0A):
            self.status = lookup(SYSTEM_BOOT_STATUS, 0)
            return
        status = r.u8(0x0A, "status")
        if status >= 192:
            self.status = "Product-specific (%d)" % status
        elif status >= 128:
            self.status = "OEM-specific (%d)" % status
        else:
            self.status = lookup(SYSTEM_BOOT_STATUS, status)
        self.status_data = r.raw(0x0B, r.length - 0x0B, "status_data")
