# -*- coding: utf-8 -*-
import ctypes

uint8_t = ctypes.c_ubyte
char = ctypes.c_char
uint32_t = ctypes.c_uint
uint64_t = ctypes.c_uint64
uint16_t = ctypes.c_ushort

SMBIOS_ANCHOR = b"_SM_"
DMI_ANCHOR = b"_DMI_"

NOT_SPECIFIED = "Not Specified"

TYPE_BIOS = 0
TYPE_SYSTEM = 1
TYPE_BASEBOARD = 2
TYPE_CHASSIS = 3
TYPE_PROCESSOR = 4
TYPE_CACHE = 7
TYPE_PORT_CONNECTOR = 8
TYPE_SYSTEM_SLOT = 9
TYPE_ONBOARD_DEVICES = 10
TYPE_OEM_STRINGS = 11
TYPE_SYSTEM_CONFIGURATION = 12
TYPE_BIOS_LANGUAGE = 13
TYPE_GROUP_ASSOCIATIONS = 14
TYPE_SYSTEM_EVENT_LOG = 15
TYPE_PHYSICAL_MEMORY_ARRAY = 16
TYPE_MEMORY_DEVICE = 17
TYPE_MEMORY_ERROR_32 = 18
TYPE_MEMORY_ARRAY_MAPPED_ADDRESS = 19
TYPE_MEMORY_DEVICE_MAPPED_ADDRESS = 20
TYPE_POINTING_DEVICE = 21
TYPE_PORTABLE_BATTERY = 22
TYPE_SYSTEM_RESET = 23
TYPE_HARDWARE_SECURITY = 24
TYPE_SYSTEM_POWER_CONTROLS = 25
TYPE_VOLTAGE_PROBE = 26
TYPE_COOLING_DEVICE = 27
TYPE_TEMPERATURE_PROBE = 28
TYPE_CURRENT_PROBE = 29
TYPE_OUT_OF_BAND_REMOTE_ACCESS = 30
TYPE_SYSTEM_BOOT = 32
TYPE_MEMORY_ERROR_64 = 33
TYPE_MANAGEMENT_DEVICE = 34
TYPE_MANAGEMENT_DEVICE_COMPONENT = 35
TYPE_MANAGEMENT_DEVICE_THRESHOLD = 36
TYPE_MEMORY_CHANNEL = 37
TYPE_IPMI_DEVICE = 38
TYPE_POWER_SUPPLY = 39
TYPE_ADDITIONAL_INFORMATION = 40
TYPE_ONBOARD_DEVICES_EXTENDED = 41
TYPE_MANAGEMENT_CONTROLLER_HOST_INTERFACE = 42
TYPE_TPM_DEVICE = 43
TYPE_INACTIVE = 126
TYPE_END_OF_TABLE = 127

SMBIOS_STRUCTURE_TYPES = {
    # DSP0134 7.0 - 7.45
    0:   ("BIOS Information",                        "bios"),
    1:   ("System Information",                      "system"),
    2:   ("Base Board Information",                  "baseboard"),
    3:   ("Chassis Information",                     "chassis"),
    4:   ("Processor Information",                   "processor"),
    5:   ("Memory Controller Information",           "memory.controller"),
    6:   ("Memory Module Information",               "memory.module"),
    7:   ("Cache Information",                       "cache"),
    8:   ("Port Connector Information",              "connector"),
    9:   ("System Slot Information",                 "slot"),
    10:  ("On Board Device Information",             "onboard"),
    11:  ("OEM Strings",                             "oem"),
    12:  ("System Configuration Options",            "config"),
    13:  ("BIOS Language Information",               "bios.language"),
    14:  ("Group Associations",                      "group"),
    15:  ("System Event Log",                        "eventlog"),
    16:  ("Physical Memory Array",                   "memory.array"),
    17:  ("Memory Device",                           "memory.device"),
    18:  ("32-bit Memory Error Information",         "memory.error32"),
    19:  ("Memory Array Mapped Address",             "memory.array.map"),
    20:  ("Memory Device Mapped Address",            "memory.device.map"),
    21:  ("Built-in Pointing Device",                "pointing"),
    22:  ("Portable Battery",                        "battery"),
    23:  ("System Reset",                            "reset"),
    24:  ("Hardware Security",                       "security"),
    25:  ("System Power Controls",                   "power.controls"),
    26:  ("Voltage Probe",                           "probe.voltage"),
    27:  ("Cooling Device",                          "cooling"),
    28:  ("Temperature Probe",                       "probe.temperature"),
    29:  ("Electrical Current Probe",                "probe.current"),
    30:  ("Out-of-band Remote Access",               "remote"),
    31:  ("Boot Integrity Services Entry Point",     "bis"),
    32:  ("System Boot Information",                 "boot"),
    33:  ("64-bit Memory Error Information",         "memory.error64"),
    34:  ("Management Device",                       "management"),
    35:  ("Management Device Component",             "management.component"),
    36:  ("Management Device Threshold Data",        "management.threshold"),
    37:  ("Memory Channel",                          "memory.channel"),
    38:  ("IPMI Device Information",                 "ipmi"),
    39:  ("System Power Supply",                     "power.supply"),
    40:  ("Additional Information",                  "additional"),
    41:  ("Onboard Devices Extended Information",    "onboard.extended"),
    42:  ("Management Controller Host Interface",    "mc.interface"),
    43:  ("TPM Device",                              "tpm"),
    44:  ("Processor Additional Information",        "processor.additional"),
    45:  ("Firmware Inventory Information",          "firmware"),
    46:  ("String Property",                         "string.property"),
    126: ("Inactive",                                "inactive"),
    127: ("End Of Table",                            "end"),
}


class SMBIOSEntryPointType(ctypes.LittleEndianStructure):
    _pack_ = 1
    _fields_ = [
        ("Anchor",               char * 4),     # _SM_
        ("Checksum",             uint8_t),
        ("Length",               uint8_t),      # 0x1F since 2.1
        ("MajorVersion",         uint8_t),
        ("MinorVersion",         uint8_t),
        ("MaxStructureSize",     uint16_t),
        ("EntryPointRevision",   uint8_t),
        ("FormattedArea",        uint8_t * 5),
        ("IntermediateAnchor",   char * 5),     # _DMI_
        ("IntermediateChecksum", uint8_t),
        ("TableLength",          uint16_t),
        ("TableAddress",         uint32_t),
        ("NumberOfStructures",   uint16_t),
        ("BCDRevision",          uint8_t),
    ]


class SMBIOSHeaderType(ctypes.LittleEndianStructure):
    _pack_ = 1
    _fields_ = [
        ("Type",   uint8_t),
        ("Length", uint8_t),
        ("Handle", uint16_t),
    ]

SMBIOS_ENTRY_POINT_SIZE = ctypes.sizeof(SMBIOSEntryPointType)
SMBIOS_HEADER_SIZE = ctypes.sizeof(SMBIOSHeaderType)
