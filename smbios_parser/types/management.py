# -*- coding: utf-8 -*-
'''Sensors, cooling, management controllers and power supplies.
'''

from ..base import SMBIOSStructure
from ..errors import MalformedRecord
from ..structs.field_tables import *
from ..structs.smbios_structs import *
from ..utils import bit_set, bits, lookup
from .common import handle_or_none, word_or_none


class Probe(SMBIOSStructure):
    '''The layout shared by voltage, temperature and current probes.

    Values are in the probe's units: millivolts, 1/10 degrees C or
    milliamps. Resolution is in tenths of those units (thousandths of a
    degree for temperature) and accuracy in 1/100 percent. Unknown values
    are None.
    '''

    locations = PROBE_LOCATIONS
    units = ""
    fields = (
        "description", "location", "status", "maximum_value",
        "minimum_value", "resolution", "tolerance", "accuracy",
        "oem_information", "nominal_value",
    )

    def decode(self, r):
        self.description = r.string(0x04, "description")
        location_status = r.u8(0x05, "location_and_status")
        self.location = lookup(self.locations, bits(location_status, 0, 5))
        self.status = lookup(PROBE_STATUS, bits(location_status, 5, 3))
        self.maximum_value = word_or_none(r.u16(0x06, "maximum_value"))
        self.minimum_value = word_or_none(r.u16(0x08, "minimum_value"))
        self.resolution = word_or_none(r.u16(0x0A, "resolution"))
        self.tolerance = word_or_none(r.u16(0x0C, "tolerance"))
        self.accuracy = word_or_none(r.u16(0x0E, "accuracy"))
        self.oem_information = r.u32(0x10, "oem_information")
        if r.has(0x14, 2):
            self.nominal_value = word_or_none(r.u16(0x14, "nominal_value"))

    def _show_value(self, ts, field, value):
        if field in ("maximum_value", "minimum_value", "nominal_value"):
            value = "%s %s" % (value, self.units)
        super(Probe, self)._show_value(ts, field, value)


class VoltageProbe(Probe):
    TYPE = TYPE_VOLTAGE_PROBE
    units = "mV"


class TemperatureProbe(Probe):
    TYPE = TYPE_TEMPERATURE_PROBE
    locations = TEMPERATURE_PROBE_LOCATIONS
    units = "1/10 C"


class CurrentProbe(Probe):
    TYPE = TYPE_CURRENT_PROBE
    units = "mA"


class CoolingDevice(SMBIOSStructure):
    TYPE = TYPE_COOLING_DEVICE
    fields = (
        "temperature_probe_handle", "device_type", "status",
        "cooling_unit_group", "oem_information", "nominal_speed",
        "description",
    )

    def decode(self, r):
        self.temperature_probe_handle = handle_or_none(
            r.u16(0x04, "temperature_probe_handle"))
        type_status = r.u8(0x06, "device_type_and_status")
        self.device_type = lookup(
            COOLING_DEVICE_TYPES, bits(type_status, 0, 5))
        self.status = lookup(PROBE_STATUS, bits(type_status, 5, 3))
        # Group 0 means the device is not part of a redundant unit.
        self.cooling_unit_group = r.u8(0x07, "cooling_unit_group") or None
        self.oem_information = r.u32(0x08, "oem_information")
        if r.has(0x0C, 2):
            # Speed in rpm.
            self.nominal_speed = word_or_none(r.u16(0x0C, "nominal_speed"))
        if r.has(0x0E):
            self.description = r.string(0x0E, "description")


class OutOfBandRemoteAccess(SMBIOSStructure):
    TYPE = TYPE_OUT_OF_BAND_REMOTE_ACCESS
    fields = ("manufacturer", "inbound_connection", "outbound_connection")

    def decode(self, r):
        self.manufacturer = r.string(0x04, "manufacturer")
        connections = r.u8(0x05, "connections")
        self.inbound_connection = bit_set(connections, 0x01)
        self.outbound_connection = bit_set(connections, 0x02)


class ManagementDevice(SMBIOSStructure):
    TYPE = TYPE_MANAGEMENT_DEVICE
    fields = ("description", "device_type", "address", "address_type")

    def decode(self, r):
        self.description = r.string(0x04, "description")
        self.device_type = lookup(
            MANAGEMENT_DEVICE_TYPES, r.u8(0x05, "device_type"))
        self.address = r.u32(0x06, "address")
        self.address_type = lookup(
            MANAGEMENT_ADDRESS_TYPES, r.u8(0x0A, "address_type"))


class ManagementDeviceComponent(SMBIOSStructure):
    TYPE = TYPE_MANAGEMENT_DEVICE_COMPONENT
    fields = (
        "description", "management_device_handle", "component_handle",
        "threshold_handle",
    )

    def decode(self, r):
        self.description = r.string(0x04, "description")
        self.management_device_handle = r.u16(
            0x05, "management_device_handle")
        self.component_handle = r.u16(0x07, "component_handle")
        if r.has(0x09, 2):
            self.threshold_handle = handle_or_none(
                r.u16(0x09, "threshold_handle"))


class ManagementDeviceThreshold(SMBIOSStructure):
    TYPE = TYPE_MANAGEMENT_DEVICE_THRESHOLD
    fields = (
        "lower_non_critical", "upper_non_critical", "lower_critical",
        "upper_critical", "lower_non_recoverable", "upper_non_recoverable",
    )

    def decode(self, r):
        for i, field in enumerate(self.fields):
            offset = 0x04 + 2 * i
            if r.has(offset, 2):
                setattr(self, field, word_or_none(r.u16(offset, field)))


class IPMIDevice(SMBIOSStructure):
    TYPE = TYPE_IPMI_DEVICE
    fields = (
        "interface_type", "specification_version", "i2c_target_address",
        "nv_storage_device_address", "base_address", "address_space",
        "register_spacing", "interrupt_polarity", "interrupt_trigger_mode",
        "interrupt_number",
    )

    def decode(self, r):
        interface = r.u8(0x04, "interface_type")
        self.interface_type = lookup(IPMI_INTERFACE_TYPES, interface)
        revision = r.u8(0x05, "specification_revision")
        self.specification_version = "%d.%d" % (
            bits(revision, 4, 4), bits(revision, 0, 4))
        self.i2c_target_address = r.u8(0x06, "i2c_target_address") >> 1
        nv_address = r.u8(0x07, "nv_storage_device_address")
        if nv_address != 0xFF:
            self.nv_storage_device_address = nv_address
        address = r.u64(0x08, "base_address")

        modifier = None
        if r.has(0x10):
            modifier = r.u8(0x10, "base_address_modifier")

        if interface == 0x04:
            # SSIF: the base address is the SMBus target address.
            self.base_address = (address >> 1) & 0x7F
            self.address_space = "SMBus"
        else:
            self.address_space = "I/O" if bit_set(address, 0x01) else "Memory"
            address &= ~0x01
            if modifier is not None:
                address |= bits(modifier, 4, 1)
            self.base_address = address

        if modifier is not None:
            if interface != 0x04:
                self.register_spacing = lookup(
                    IPMI_REGISTER_SPACINGS, bits(modifier, 6, 2))
            if bit_set(modifier, 0x08):
                self.interrupt_polarity = (
                    "Active High" if bit_set(modifier, 0x02) else "Active Low")
                self.interrupt_trigger_mode = (
                    "Level" if bit_set(modifier, 0x01) else "Edge")
        if r.has(0x11):
            interrupt = r.u8(0x11, "interrupt_number")
            if interrupt:
                self.interrupt_number = interrupt


def power_supply_characteristics(value):
    '''Split the power supply characteristics word into its sub-fields.

    Bits 13:10 hold the supply type, bits 9:7 the status, bits 6:3 the input
    voltage range switching, then bit 2 unplugged, bit 1 present and bit 0
    hot replaceable.
    '''
    return {
        "supply_type": lookup(POWER_SUPPLY_TYPES, bits(value, 10, 4)),
        "supply_status": lookup(POWER_SUPPLY_STATUS, bits(value, 7, 3)),
        "input_voltage_range_switching": lookup(
            POWER_SUPPLY_RANGE_SWITCHING, bits(value, 3, 4)),
        "plugged": not bit_set(value, 1 << 2),
        "present": bit_set(value, 1 << 1),
        "hot_replaceable": bit_set(value, 1 << 0),
    }


class SystemPowerSupply(SMBIOSStructure):
    TYPE = TYPE_POWER_SUPPLY
    fields = (
        "power_unit_group", "location", "device_name", "manufacturer",
        "serial_number", "asset_tag", "model_part_number", "revision",
        "max_power_capacity", "supply_type", "supply_status",
        "input_voltage_range_switching", "plugged", "present",
        "hot_replaceable", "input_voltage_probe_handle",
        "cooling_device_handle", "input_current_probe_handle",
    )

    def decode(self, r):
        self.power_unit_group = r.u8(0x04, "power_unit_group") or None
        self.location = r.string(0x05, "location")
        self.device_name = r.string(0x06, "device_name")
        self.manufacturer = r.string(0x07, "manufacturer")
        self.serial_number = r.string(0x08, "serial_number")
        self.asset_tag = r.string(0x09, "asset_tag")
        self.model_part_number = r.string(0x0A, "model_part_number")
        self.revision = r.string(0x0B, "revision")
        # Capacity in watts.
        self.max_power_capacity = word_or_none(
            r.u16(0x0C, "max_power_capacity"))
        characteristics = power_supply_characteristics(
            r.u16(0x0E, "characteristics"))
        for key, value in characteristics.items():
            setattr(self, key, value)
        if r.has(0x10, 6):
            self.input_voltage_probe_handle = handle_or_none(
                r.u16(0x10, "input_voltage_probe_handle"))
            self.cooling_device_handle = handle_or_none(
                r.u16(0x12, "cooling_device_handle"))
            self.input_current_probe_handle = handle_or_none(
                r.u16(0x14, "input_current_probe_handle"))


class AdditionalInformation(SMBIOSStructure):
    '''Entries of (length, handle, offset, string, value), each entry length
    counting its own 5-byte header.'''

    TYPE = TYPE_ADDITIONAL_INFORMATION
    fields = ("entries",)

    def decode(self, r):
        count = r.u8(0x04, "entry_count")
        self.entries = []
        offset = 0x05
        for i in range(count):
            size = r.u8(offset, "entries")
            if size < 5:
                raise MalformedRecord(
                    "additional information entry %d length %d is below 5" % (
                        i, size),
                    self.type, self.handle, "entries")
            self.entries.append({
                "referenced_handle": r.u16(offset + 1, "entries"),
                "referenced_offset": r.u8(offset + 3, "entries"),
                "string": r.string(offset + 4, "entries"),
                "value": r.raw(offset + 5, size - 5, "entries"),
            })
            offset += size


class ManagementControllerHostInterface(SMBIOSStructure):
    TYPE = TYPE_MANAGEMENT_CONTROLLER_HOST_INTERFACE
    fields = ("interface_type", "interface_data", "protocols")

    def decode(self, r):
        self.interface_type = lookup(
            MC_INTERFACE_TYPES, r.u8(0x04, "interface_type"))
        if not r.has(0x05):
            return
        size = r.u8(0x05, "interface_data_length")
        self.interface_data = r.raw(0x06, size, "interface_data")
        offset = 0x06 + size
        if not r.has(offset):
            return
        count = r.u8(offset, "protocol_count")
        offset += 1
        self.protocols = []
        for i in range(count):
            protocol = r.u8(offset, "protocols")
            size = r.u8(offset + 1, "protocols")
            self.protocols.append({
                "protocol_type": lookup(MC_PROTOCOL_TYPES, protocol),
                "data": r.raw(offset + 2, size, "protocols"),
            })
            offset += 2 + size
