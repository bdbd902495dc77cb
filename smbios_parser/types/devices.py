# -*- coding: utf-8 -*-

from ..base import SMBIOSStructure
from ..structs.field_tables import *
from ..structs.smbios_structs import *
from ..utils import bit_set, bits, flag_names, lookup
from .common import bus_address


class PortConnector(SMBIOSStructure):
    TYPE = TYPE_PORT_CONNECTOR
    fields = (
        "internal_reference_designator", "internal_connector_type",
        "external_reference_designator", "external_connector_type",
        "port_type",
    )

    def decode(self, r):
        self.internal_reference_designator = r.string(
            0x04, "internal_reference_designator")
        self.internal_connector_type = lookup(
            CONNECTOR_TYPES, r.u8(0x05, "internal_connector_type"))
        self.external_reference_designator = r.string(
            0x06, "external_reference_designator")
        self.external_connector_type = lookup(
            CONNECTOR_TYPES, r.u8(0x07, "external_connector_type"))
        self.port_type = lookup(PORT_TYPES, r.u8(0x08, "port_type"))


class SystemSlot(SMBIOSStructure):
    TYPE = TYPE_SYSTEM_SLOT
    fields = (
        "designation", "slot_type", "data_bus_width", "current_usage",
        "slot_length", "slot_id", "characteristics", "bus_address",
        "data_bus_width_base", "peer_devices",
    )

    def decode(self, r):
        self.designation = r.string(0x04, "designation")
        self.slot_type = lookup(SLOT_TYPES, r.u8(0x05, "slot_type"))
        self.data_bus_width = lookup(
            SLOT_BUS_WIDTHS, r.u8(0x06, "data_bus_width"))
        self.current_usage = lookup(SLOT_USAGES, r.u8(0x07, "current_usage"))
        self.slot_length = lookup(SLOT_LENGTHS, r.u8(0x08, "slot_length"))
        self.slot_id = r.u16(0x09, "slot_id")

        characteristics = r.u8(0x0B, "characteristics_1")
        if bit_set(characteristics, 0x01):
            self.characteristics = [SLOT_CHARACTERISTICS1[0]]
        else:
            self.characteristics = flag_names(
                SLOT_CHARACTERISTICS1, characteristics)
            if r.has(0x0C):
                self.characteristics += flag_names(
                    SLOT_CHARACTERISTICS2, r.u8(0x0C, "characteristics_2"))

        if r.has(0x0D, 4):
            segment = r.u16(0x0D, "segment_group")
            bus = r.u8(0x0F, "bus_number")
            devfn = r.u8(0x10, "device_function")
            # All ones when the slot is not on a PCI bus.
            if (segment, bus, devfn) != (0xFFFF, 0xFF, 0xFF):
                self.bus_address = bus_address(segment, bus, devfn)

        if r.has(0x11, 2):
            self.data_bus_width_base = r.u8(0x11, "data_bus_width_base")
            count = r.u8(0x12, "peer_grouping_count")
            self.peer_devices = []
            for i in range(count):
                offset = 0x13 + 5 * i
                self.peer_devices.append({
                    "address": bus_address(
                        r.u16(offset, "peer_devices"),
                        r.u8(offset + 2, "peer_devices"),
                        r.u8(offset + 3, "peer_devices")),
                    "width": r.u8(offset + 4, "peer_devices"),
                })


def onboard_device_type(value):
    '''Bit 7 is the enabled flag, bits 6:0 the device type.'''
    return (lookup(ONBOARD_DEVICE_TYPES, value & 0x7F),
            bit_set(value, 0x80))


class OnboardDevices(SMBIOSStructure):
    '''On board devices, two bytes per device following the header.'''

    TYPE = TYPE_ONBOARD_DEVICES
    fields = ("devices",)

    def decode(self, r):
        self.devices = []
        for i in range((r.length - 0x04) // 2):
            offset = 0x04 + 2 * i
            device_type, enabled = onboard_device_type(
                r.u8(offset, "devices"))
            self.devices.append({
                "type": device_type,
                "enabled": enabled,
                "description": r.string(offset + 1, "devices"),
            })


class PointingDevice(SMBIOSStructure):
    TYPE = TYPE_POINTING_DEVICE
    fields = ("device_type", "interface", "buttons")

    def decode(self, r):
        self.device_type = lookup(
            POINTING_DEVICE_TYPES, r.u8(0x04, "device_type"))
        self.interface = lookup(
            POINTING_DEVICE_INTERFACES, r.u8(0x05, "interface"))
        self.buttons = r.u8(0x06, "buttons")


def sbds_date(value):
    '''Smart Battery Data Specification packed date as "YYYY-MM-DD".'''
    return "%04d-%02d-%02d" % (
        1980 + bits(value, 9, 7), bits(value, 5, 4), bits(value, 0, 5))


class PortableBattery(SMBIOSStructure):
    '''Portable battery, capacities are in mWh and voltages in mV.'''

    TYPE = TYPE_PORTABLE_BATTERY
    fields = (
        "location", "manufacturer", "manufacture_date", "serial_number",
        "device_name", "chemistry", "design_capacity", "design_voltage",
        "sbds_version", "maximum_error", "sbds_serial_number",
        "sbds_manufacture_date", "sbds_chemistry", "oem_information",
    )

    def decode(self, r):
        self.location = r.string(0x04, "location")
        self.manufacturer = r.string(0x05, "manufacturer")
        if r.has(0x06):
            self.manufacture_date = r.string(0x06, "manufacture_date")
        if r.has(0x07):
            self.serial_number = r.string(0x07, "serial_number")
        self.device_name = r.string(0x08, "device_name")
        if r.has(0x09):
            chemistry = r.u8(0x09, "chemistry")
            # 0x02 defers to the SBDS chemistry string.
            if chemistry != 0x02:
                self.chemistry = lookup(BATTERY_CHEMISTRIES, chemistry)
        if r.has(0x0A, 2):
            capacity = r.u16(0x0A, "design_capacity")
            multiplier = 1
            if r.has(0x15):
                multiplier = r.u8(0x15, "design_capacity_multiplier") or 1
            self.design_capacity = capacity * multiplier or None
        if r.has(0x0C, 2):
            self.design_voltage = r.u16(0x0C, "design_voltage") or None
        if r.has(0x0E):
            self.sbds_version = r.string(0x0E, "sbds_version")
        if r.has(0x0F):
            error = r.u8(0x0F, "maximum_error")
            self.maximum_error = None if error == 0xFF else error
        if r.has(0x10, 6):
            # The SBDS fields replace the string fields left unspecified.
            if self.serial_number in (None, NOT_SPECIFIED):
                self.sbds_serial_number = "%04X" % r.u16(
                    0x10, "sbds_serial_number")
            if self.manufacture_date in (None, NOT_SPECIFIED):
                self.sbds_manufacture_date = sbds_date(
                    r.u16(0x12, "sbds_manufacture_date"))
            if self.chemistry is None:
                self.sbds_chemistry = r.string(0x14, "sbds_chemistry")
        if r.has(0x16, 4):
            self.oem_information = r.u32(0x16, "oem_information")


class OnboardDevicesExtended(SMBIOSStructure):
    TYPE = TYPE_ONBOARD_DEVICES_EXTENDED
    fields = (
        "reference_designation", "device_type", "enabled", "instance",
        "bus_address",
    )

    def decode(self, r):
        self.reference_designation = r.string(0x04, "reference_designation")
        self.device_type, self.enabled = onboard_device_type(
            r.u8(0x05, "device_type"))
        self.instance = r.u8(0x06, "instance")
        segment = r.u16(0x07, "segment_group")
        bus = r.u8(0x09, "bus_number")
        devfn = r.u8(0x0A, "device_function")
        if (segment, bus, devfn) != (0xFFFF, 0xFF, 0xFF):
            self.bus_address = bus_address(segment, bus, devfn)


class TPMDevice(SMBIOSStructure):
    TYPE = TYPE_TPM_DEVICE
    fields = (
        "vendor_id", "specification_version", "firmware_revision",
        "description", "characteristics", "oem_information",
    )

    def decode(self, r):
        vendor = r.raw(0x04, 4, "vendor_id")
        self.vendor_id = "".join(
            [chr(c) for c in vendor if 32 <= c <= 126])
        major = r.u8(0x08, "major_spec_version")
        minor = r.u8(0x09, "minor_spec_version")
        self.specification_version = "%d.%d" % (major, minor)
        firmware_1 = r.u32(0x0A, "firmware_version_1")
        if major == 0x01:
            # TPM 1.2 stores a TPM_VERSION structure.
            self.firmware_revision = "%d.%d" % (
                r.u8(0x0C, "firmware_version_1"),
                r.u8(0x0D, "firmware_version_1"))
        elif major == 0x02:
            self.firmware_revision = "%d.%d" % (
                firmware_1 >> 16, firmware_1 & 0xFFFF)
        self.description = r.string(0x12, "description")
        self.characteristics = flag_names(
            TPM_CHARACTERISTICS, r.u64(0x13, "characteristics"))
        self.oem_information = r.u32(0x1B, "oem_information")
