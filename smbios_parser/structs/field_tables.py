# -*- coding: utf-8 -*-
'''Enumerated field values from DSP0134, keyed by their raw value.

Bit-flag tables are keyed by bit position instead.
'''

# 7.1.1 BIOS Characteristics (bit position)
BIOS_CHARACTERISTICS = {
    3:  "BIOS characteristics not supported",
    4:  "ISA is supported",
    5:  "MCA is supported",
    6:  "EISA is supported",
    7:  "PCI is supported",
    8:  "PC Card (PCMCIA) is supported",
    9:  "PNP is supported",
    10: "APM is supported",
    11: "BIOS is upgradeable",
    12: "BIOS shadowing is allowed",
    13: "VLB is supported",
    14: "ESCD support is available",
    15: "Boot from CD is supported",
    16: "Selectable boot is supported",
    17: "BIOS ROM is socketed",
    18: "Boot from PC Card (PCMCIA) is supported",
    19: "EDD is supported",
    20: "Japanese floppy for NEC 9800 1.2 MB is supported (int 13h)",
    21: "Japanese floppy for Toshiba 1.2 MB is supported (int 13h)",
    22: "5.25\"/360 kB floppy services are supported (int 13h)",
    23: "5.25\"/1.2 MB floppy services are supported (int 13h)",
    24: "3.5\"/720 kB floppy services are supported (int 13h)",
    25: "3.5\"/2.88 MB floppy services are supported (int 13h)",
    26: "Print screen service is supported (int 5h)",
    27: "8042 keyboard services are supported (int 9h)",
    28: "Serial services are supported (int 14h)",
    29: "Printer services are supported (int 17h)",
    30: "CGA/mono video services are supported (int 10h)",
    31: "NEC PC-98",
}

# 7.1.2.1 BIOS Characteristics Extension Byte 1
BIOS_CHARACTERISTICS_EXT1 = {
    0: "ACPI is supported",
    1: "USB legacy is supported",
    2: "AGP is supported",
    3: "I2O boot is supported",
    4: "LS-120 boot is supported",
    5: "ATAPI Zip drive boot is supported",
    6: "IEEE 1394 boot is supported",
    7: "Smart battery is supported",
}

# 7.1.2.2 BIOS Characteristics Extension Byte 2
BIOS_CHARACTERISTICS_EXT2 = {
    0: "BIOS boot specification is supported",
    1: "Function key-initiated network boot is supported",
    2: "Targeted content distribution is supported",
    3: "UEFI is supported",
    4: "System is a virtual machine",
    5: "Manufacturing mode is supported",
    6: "Manufacturing mode is enabled",
}

# 7.2.2 System wake-up type
WAKE_UP_TYPES = {
    0x00: "Reserved",
    0x01: "Other",
    0x02: "Unknown",
    0x03: "APM Timer",
    0x04: "Modem Ring",
    0x05: "LAN Remote",
    0x06: "Power Switch",
    0x07: "PCI PME#",
    0x08: "AC Power Restored",
}

# 7.3.1 Baseboard feature flags (bit position)
BASEBOARD_FEATURES = {
    0: "Board is a hosting board",
    1: "Board requires at least one daughter board",
    2: "Board is removable",
    3: "Board is replaceable",
    4: "Board is hot swappable",
}

# 7.3.2 Baseboard board type
BOARD_TYPES = {
    0x01: "Unknown",
    0x02: "Other",
    0x03: "Server Blade",
    0x04: "Connectivity Switch",
    0x05: "System Management Module",
    0x06: "Processor Module",
    0x07: "I/O Module",
    0x08: "Memory Module",
    0x09: "Daughter Board",
    0x0A: "Motherboard",
    0x0B: "Processor+Memory Module",
    0x0C: "Processor+I/O Module",
    0x0D: "Interconnect Board",
}

# 7.4.1 System enclosure or chassis types
CHASSIS_TYPES = {
    0x01: "Other",
    0x02: "Unknown",
    0x03: "Desktop",
    0x04: "Low Profile Desktop",
    0x05: "Pizza Box",
    0x06: "Mini Tower",
    0x07: "Tower",
    0x08: "Portable",
    0x09: "Laptop",
    0x0A: "Notebook",
    0x0B: "Hand Held",
    0x0C: "Docking Station",
    0x0D: "All In One",
    0x0E: "Sub Notebook",
    0x0F: "Space-saving",
    0x10: "Lunch Box",
    0x11: "Main Server Chassis",
    0x12: "Expansion Chassis",
    0x13: "Sub Chassis",
    0x14: "Bus Expansion Chassis",
    0x15: "Peripheral Chassis",
    0x16: "RAID Chassis",
    0x17: "Rack Mount Chassis",
    0x18: "Sealed-case PC",
    0x19: "Multi-system",
    0x1A: "CompactPCI",
    0x1B: "AdvancedTCA",
    0x1C: "Blade",
    0x1D: "Blade Enclosing",
    0x1E: "Tablet",
    0x1F: "Convertible",
    0x20: "Detachable",
    0x21: "IoT Gateway",
    0x22: "Embedded PC",
    0x23: "Mini PC",
    0x24: "Stick PC",
}

CHASSIS_LOCK = {
    0: "Not Present",
    1: "Present",
}

# 7.4.2 System enclosure or chassis states
CHASSIS_STATES = {
    0x01: "Other",
    0x02: "Unknown",
    0x03: "Safe",
    0x04: "Warning",
    0x05: "Critical",
    0x06: "Non-recoverable",
}

# 7.4.3 System enclosure or chassis security status
CHASSIS_SECURITY_STATUS = {
    0x01: "Other",
    0x02: "Unknown",
    0x03: "None",
    0x04: "External Interface Locked Out",
    0x05: "External Interface Enabled",
}

# 7.5.1 Processor type
PROCESSOR_TYPES = {
    0x01: "Other",
    0x02: "Unknown",
    0x03: "Central Processor",
    0x04: "Math Processor",
    0x05: "DSP Processor",
    0x06: "Video Processor",
}

# 7.5.2 Processor family; 0xFE defers to the Processor Family 2 field
PROCESSOR_FAMILIES = {
    0x01: "Other",
    0x02: "Unknown",
    0x03: "8086",
    0x04: "80286",
    0x05: "80386",
    0x06: "80486",
    0x07: "8087",
    0x08: "80287",
    0x09: "80387",
    0x0A: "80487",
    0x0B: "Pentium",
    0x0C: "Pentium Pro",
    0x0D: "Pentium II",
    0x0E: "Pentium MMX",
    0x0F: "Celeron",
    0x10: "Pentium II Xeon",
    0x11: "Pentium III",
    0x12: "M1",
    0x13: "M2",
    0x14: "Celeron M",
    0x15: "Pentium 4 HT",
    0x16: "Intel",
    0x18: "Duron",
    0x19: "K5",
    0x1A: "K6",
    0x1B: "K6-2",
    0x1C: "K6-3",
    0x1D: "Athlon",
    0x1E: "AMD29000",
    0x1F: "K6-2+",
    0x20: "Power PC",
    0x21: "Power PC 601",
    0x22: "Power PC 603",
    0x23: "Power PC 603+",
    0x24: "Power PC 604",
    0x25: "Power PC 620",
    0x26: "Power PC x704",
    0x27: "Power PC 750",
    0x28: "Core Duo",
    0x29: "Core Duo Mobile",
    0x2A: "Core Solo Mobile",
    0x2B: "Atom",
    0x2C: "Core M",
    0x2D: "Core m3",
    0x2E: "Core m5",
    0x2F: "Core m7",
    0x30: "Alpha",
    0x31: "Alpha 21064",
    0x32: "Alpha 21066",
    0x33: "Alpha 21164",
    0x34: "Alpha 21164PC",
    0x35: "Alpha 21164a",
    0x36: "Alpha 21264",
    0x37: "Alpha 21364",
    0x38: "Turion II Ultra Dual-Core Mobile M",
    0x39: "Turion II Dual-Core Mobile M",
    0x3A: "Athlon II Dual-Core M",
    0x3B: "Opteron 6100",
    0x3C: "Opteron 4100",
    0x3D: "Opteron 6200",
    0x3E: "Opteron 4200",
    0x3F: "FX",
    0x40: "MIPS",
    0x41: "MIPS R4000",
    0x42: "MIPS R4200",
    0x43: "MIPS R4400",
    0x44: "MIPS R4600",
    0x45: "MIPS R10000",
    0x46: "C-Series",
    0x47: "E-Series",
    0x48: "A-Series",
    0x49: "G-Series",
    0x4A: "Z-Series",
    0x4B: "R-Series",
    0x4C: "Opteron 4300",
    0x4D: "Opteron 6300",
    0x4E: "Opteron 3300",
    0x4F: "FirePro",
    0x50: "SPARC",
    0x51: "SuperSPARC",
    0x52: "MicroSPARC II",
    0x53: "MicroSPARC IIep",
    0x54: "UltraSPARC",
    0x55: "UltraSPARC II",
    0x56: "UltraSPARC IIi",
    0x57: "UltraSPARC III",
    0x58: "UltraSPARC IIIi",
    0x60: "68040",
    0x61: "68xxx",
    0x62: "68000",
    0x63: "68010",
    0x64: "68020",
    0x65: "68030",
    0x66: "Athlon X4",
    0x67: "Opteron X1000",
    0x68: "Opteron X2000",
    0x69: "Opteron A-Series",
    0x6A: "Opteron X3000",
    0x6B: "Zen",
    0x70: "Hobbit",
    0x78: "Crusoe TM5000",
    0x79: "Crusoe TM3000",
    0x7A: "Efficeon TM8000",
    0x80: "Weitek",
    0x82: "Itanium",
    0x83: "Athlon 64",
    0x84: "Opteron",
    0x85: "Sempron",
    0x86: "Turion 64",
    0x87: "Dual-Core Opteron",
    0x88: "Athlon 64 X2",
    0x89: "Turion 64 X2",
    0x8A: "Quad-Core Opteron",
    0x8B: "Third-Generation Opteron",
    0x8C: "Phenom FX",
    0x8D: "Phenom X4",
    0x8E: "Phenom X2",
    0x8F: "Athlon X2",
    0x90: "PA-RISC",
    0x91: "PA-RISC 8500",
    0x92: "PA-RISC 8000",
    0x93: "PA-RISC 7300LC",
    0x94: "PA-RISC 7200",
    0x95: "PA-RISC 7100LC",
    0x96: "PA-RISC 7100",
    0xA0: "V30",
    0xA1: "Quad-Core Xeon 3200",
    0xA2: "Dual-Core Xeon 3000",
    0xA3: "Quad-Core Xeon 5300",
    0xA4: "Dual-Core Xeon 5100",
    0xA5: "Dual-Core Xeon 5000",
    0xA6: "Dual-Core Xeon LV",
    0xA7: "Dual-Core Xeon ULV",
    0xA8: "Dual-Core Xeon 7100",
    0xA9: "Quad-Core Xeon 5400",
    0xAA: "Quad-Core Xeon",
    0xAB: "Dual-Core Xeon 5200",
    0xAC: "Dual-Core Xeon 7200",
    0xAD: "Quad-Core Xeon 7300",
    0xAE: "Quad-Core Xeon 7400",
    0xAF: "Multi-Core Xeon 7400",
    0xB0: "Pentium III Xeon",
    0xB1: "Pentium III Speedstep",
    0xB2: "Pentium 4",
    0xB3: "Xeon",
    0xB4: "AS400",
    0xB5: "Xeon MP",
    0xB6: "Athlon XP",
    0xB7: "Athlon MP",
    0xB8: "Itanium 2",
    0xB9: "Pentium M",
    0xBA: "Celeron D",
    0xBB: "Pentium D",
    0xBC: "Pentium EE",
    0xBD: "Core Solo",
    0xBF: "Core 2 Duo",
    0xC0: "Core 2 Solo",
    0xC1: "Core 2 Extreme",
    0xC2: "Core 2 Quad",
    0xC3: "Core 2 Extreme Mobile",
    0xC4: "Core 2 Duo Mobile",
    0xC5: "Core 2 Solo Mobile",
    0xC6: "Core i7",
    0xC7: "Dual-Core Celeron",
    0xC8: "IBM390",
    0xC9: "G4",
    0xCA: "G5",
    0xCB: "ESA/390 G6",
    0xCC: "z/Architecture",
    0xCD: "Core i5",
    0xCE: "Core i3",
    0xCF: "Core i9",
    0xD2: "C7-M",
    0xD3: "C7-D",
    0xD4: "C7",
    0xD5: "Eden",
    0xD6: "Multi-Core Xeon",
    0xD7: "Dual-Core Xeon 3xxx",
    0xD8: "Quad-Core Xeon 3xxx",
    0xD9: "Nano",
    0xDA: "Dual-Core Xeon 5xxx",
    0xDB: "Quad-Core Xeon 5xxx",
    0xDD: "Dual-Core Xeon 7xxx",
    0xDE: "Quad-Core Xeon 7xxx",
    0xDF: "Multi-Core Xeon 7xxx",
    0xE0: "Multi-Core Xeon 3400",
    0xE4: "Opteron 3000",
    0xE5: "Sempron II",
    0xE6: "Embedded Opteron Quad-Core",
    0xE7: "Phenom Triple-Core",
    0xE8: "Turion Ultra Dual-Core Mobile",
    0xE9: "Turion Dual-Core Mobile",
    0xEA: "Athlon Dual-Core",
    0xEB: "Sempron SI",
    0xEC: "Phenom II",
    0xED: "Athlon II",
    0xEE: "Six-Core Opteron",
    0xEF: "Sempron M",
    0xFA: "i860",
    0xFB: "i960",
    0x100: "ARMv7",
    0x101: "ARMv8",
    0x102: "ARMv9",
    0x104: "SH-3",
    0x105: "SH-4",
    0x118: "ARM",
    0x119: "StrongARM",
    0x12C: "6x86",
    0x12D: "MediaGX",
    0x12E: "MII",
    0x140: "WinChip",
    0x15E: "DSP",
    0x1F4: "Video Processor",
    0x200: "RV32",
    0x201: "RV64",
    0x202: "RV128",
    0x258: "LoongArch",
    0x259: "Loongson 1",
    0x25A: "Loongson 2",
    0x25B: "Loongson 3",
}

# 7.5.4 Processor voltage, legacy mode (bit position)
PROCESSOR_VOLTAGES = {
    0: "5.0 V",
    1: "3.3 V",
    2: "2.9 V",
}

# 7.5 Processor status, bits 2:0
PROCESSOR_STATUS = {
    0x00: "Unknown",
    0x01: "Enabled",
    0x02: "Disabled By User",
    0x03: "Disabled By BIOS",
    0x04: "Idle",
    0x07: "Other",
}

# 7.5.5 Processor upgrade
PROCESSOR_UPGRADES = {
    0x01: "Other",
    0x02: "Unknown",
    0x03: "Daughter Board",
    0x04: "ZIF Socket",
    0x05: "Replaceable Piggy Back",
    0x06: "None",
    0x07: "LIF Socket",
    0x08: "Slot 1",
    0x09: "Slot 2",
    0x0A: "370-pin Socket",
    0x0B: "Slot A",
    0x0C: "Slot M",
    0x0D: "Socket 423",
    0x0E: "Socket A (Socket 462)",
    0x0F: "Socket 478",
    0x10: "Socket 754",
    0x11: "Socket 940",
    0x12: "Socket 939",
    0x13: "Socket mPGA604",
    0x14: "Socket LGA771",
    0x15: "Socket LGA775",
    0x16: "Socket S1",
    0x17: "Socket AM2",
    0x18: "Socket F (1207)",
    0x19: "Socket LGA1366",
    0x1A: "Socket G34",
    0x1B: "Socket AM3",
    0x1C: "Socket C32",
    0x1D: "Socket LGA1156",
    0x1E: "Socket LGA1567",
    0x1F: "Socket PGA988A",
    0x20: "Socket BGA1288",
    0x21: "Socket rPGA988B",
    0x22: "Socket BGA1023",
    0x23: "Socket BGA1224",
    0x24: "Socket LGA1155",
    0x25: "Socket LGA1356",
    0x26: "Socket LGA2011",
    0x27: "Socket FS1",
    0x28: "Socket FS2",
    0x29: "Socket FM1",
    0x2A: "Socket FM2",
    0x2B: "Socket LGA2011-3",
    0x2C: "Socket LGA1356-3",
    0x2D: "Socket LGA1150",
    0x2E: "Socket BGA1168",
    0x2F: "Socket BGA1234",
    0x30: "Socket BGA1364",
    0x31: "Socket AM4",
    0x32: "Socket LGA1151",
    0x33: "Socket BGA1356",
    0x34: "Socket BGA1440",
    0x35: "Socket BGA1515",
    0x36: "Socket LGA3647-1",
    0x37: "Socket SP3",
    0x38: "Socket SP3r2",
    0x39: "Socket LGA2066",
    0x3A: "Socket BGA1392",
    0x3B: "Socket BGA1510",
    0x3C: "Socket BGA1528",
    0x3D: "Socket LGA4189",
    0x3E: "Socket LGA1200",
    0x3F: "Socket LGA4677",
    0x40: "Socket LGA1700",
    0x41: "Socket BGA1744",
    0x42: "Socket BGA1781",
    0x43: "Socket BGA1211",
    0x44: "Socket BGA2422",
    0x45: "Socket LGA1211",
    0x46: "Socket LGA2422",
    0x47: "Socket LGA5773",
    0x48: "Socket BGA5773",
    0x49: "Socket AM5",
    0x4A: "Socket SP5",
    0x4B: "Socket SP6",
}

# 7.5.9 Processor characteristics (bit position)
PROCESSOR_CHARACTERISTICS = {
    2: "64-bit capable",
    3: "Multi-Core",
    4: "Hardware Thread",
    5: "Execute Protection",
    6: "Enhanced Virtualization",
    7: "Power/Performance Control",
    8: "128-bit Capable",
    9: "Arm64 SoC ID",
}

# 7.8 Cache configuration, bits 6:5
CACHE_LOCATIONS = {
    0x00: "Internal",
    0x01: "External",
    0x02: "Reserved",
    0x03: "Unknown",
}

# 7.8 Cache configuration, bits 9:8
CACHE_OPERATIONAL_MODES = {
    0x00: "Write Through",
    0x01: "Write Back",
    0x02: "Varies With Memory Address",
    0x03: "Unknown",
}

# 7.8.2 Cache SRAM type (bit position)
CACHE_SRAM_TYPES = {
    0: "Other",
    1: "Unknown",
    2: "Non-Burst",
    3: "Burst",
    4: "Pipeline Burst",
    5: "Synchronous",
    6: "Asynchronous",
}

# 7.8.3 Cache error correction type
CACHE_ERROR_CORRECTION_TYPES = {
    0x01: "Other",
    0x02: "Unknown",
    0x03: "None",
    0x04: "Parity",
    0x05: "Single-bit ECC",
    0x06: "Multi-bit ECC",
}

# 7.8.4 System cache type
CACHE_TYPES = {
    0x01: "Other",
    0x02: "Unknown",
    0x03: "Instruction",
    0x04: "Data",
    0x05: "Unified",
}

# 7.8.5 Cache associativity
CACHE_ASSOCIATIVITY = {
    0x01: "Other",
    0x02: "Unknown",
    0x03: "Direct Mapped",
    0x04: "2-way Set-associative",
    0x05: "4-way Set-associative",
    0x06: "Fully Associative",
    0x07: "8-way Set-associative",
    0x08: "16-way Set-associative",
    0x09: "12-way Set-associative",
    0x0A: "24-way Set-associative",
    0x0B: "32-way Set-associative",
    0x0C: "48-way Set-associative",
    0x0D: "64-way Set-associative",
    0x0E: "20-way Set-associative",
}

# 7.9.2 Port connector types
CONNECTOR_TYPES = {
    0x00: "None",
    0x01: "Centronics",
    0x02: "Mini Centronics",
    0x03: "Proprietary",
    0x04: "DB-25 male",
    0x05: "DB-25 female",
    0x06: "DB-15 male",
    0x07: "DB-15 female",
    0x08: "DB-9 male",
    0x09: "DB-9 female",
    0x0A: "RJ-11",
    0x0B: "RJ-45",
    0x0C: "50 Pin MiniSCSI",
    0x0D: "Mini DIN",
    0x0E: "Micro DIN",
    0x0F: "PS/2",
    0x10: "Infrared",
    0x11: "HP-HIL",
    0x12: "Access Bus (USB)",
    0x13: "SSA SCSI",
    0x14: "Circular DIN-8 male",
    0x15: "Circular DIN-8 female",
    0x16: "On Board IDE",
    0x17: "On Board Floppy",
    0x18: "9 Pin Dual Inline (pin 10 cut)",
    0x19: "25 Pin Dual Inline (pin 26 cut)",
    0x1A: "50 Pin Dual Inline",
    0x1B: "68 Pin Dual Inline",
    0x1C: "On Board Sound Input From CD-ROM",
    0x1D: "Mini Centronics Type-14",
    0x1E: "Mini Centronics Type-26",
    0x1F: "Mini Jack (headphones)",
    0x20: "BNC",
    0x21: "IEEE 1394",
    0x22: "SAS/SATA Plug Receptacle",
    0x23: "USB Type-C Receptacle",
    0xA0: "PC-98",
    0xA1: "PC-98 Hireso",
    0xA2: "PC-H98",
    0xA3: "PC-98 Note",
    0xA4: "PC-98 Full",
    0xFF: "Other",
}

# 7.9.3 Port types
PORT_TYPES = {
    0x00: "None",
    0x01: "Parallel Port XT/AT Compatible",
    0x02: "Parallel Port PS/2",
    0x03: "Parallel Port ECP",
    0x04: "Parallel Port EPP",
    0x05: "Parallel Port ECP/EPP",
    0x06: "Serial Port XT/AT Compatible",
    0x07: "Serial Port 16450 Compatible",
    0x08: "Serial Port 16550 Compatible",
    0x09: "Serial Port 16550A Compatible",
    0x0A: "SCSI Port",
    0x0B: "MIDI Port",
    0x0C: "Joystick Port",
    0x0D: "Keyboard Port",
    0x0E: "Mouse Port",
    0x0F: "SSA SCSI",
    0x10: "USB",
    0x11: "Firewire (IEEE P1394)",
    0x12: "PCMCIA Type I",
    0x13: "PCMCIA Type II",
    0x14: "PCMCIA Type III",
    0x15: "Cardbus",
    0x16: "Access Bus Port",
    0x17: "SCSI II",
    0x18: "SCSI Wide",
    0x19: "PC-98",
    0x1A: "PC-98 Hireso",
    0x1B: "PC-H98",
    0x1C: "Video Port",
    0x1D: "Audio Port",
    0x1E: "Modem Port",
    0x1F: "Network Port",
    0x20: "SATA",
    0x21: "SAS",
    0x22: "MFDP (Multi-Function Display Port)",
    0x23: "Thunderbolt",
    0xA0: "8251 Compatible",
    0xA1: "8251 FIFO Compatible",
    0xFF: "Other",
}

# 7.10.1 System slot type
SLOT_TYPES = {
    0x01: "Other",
    0x02: "Unknown",
    0x03: "ISA",
    0x04: "MCA",
    0x05: "EISA",
    0x06: "PCI",
    0x07: "PC Card (PCMCIA)",
    0x08: "VLB",
    0x09: "Proprietary",
    0x0A: "Processor Card",
    0x0B: "Proprietary Memory Card",
    0x0C: "I/O Riser Card",
    0x0D: "NuBus",
    0x0E: "PCI-66",
    0x0F: "AGP",
    0x10: "AGP 2x",
    0x11: "AGP 4x",
    0x12: "PCI-X",
    0x13: "AGP 8x",
    0x14: "M.2 Socket 1-DP",
    0x15: "M.2 Socket 1-SD",
    0x16: "M.2 Socket 2",
    0x17: "M.2 Socket 3",
    0x18: "MXM Type I",
    0x19: "MXM Type II",
    0x1A: "MXM Type III",
    0x1B: "MXM Type III-HE",
    0x1C: "MXM Type IV",
    0x1D: "MXM 3.0 Type A",
    0x1E: "MXM 3.0 Type B",
    0x1F: "PCI Express 2 SFF-8639 (U.2)",
    0x20: "PCI Express 3 SFF-8639 (U.2)",
    0x21: "PCI Express Mini 52-pin with bottom-side keep-outs",
    0x22: "PCI Express Mini 52-pin without bottom-side keep-outs",
    0x23: "PCI Express Mini 76-pin",
    0x24: "PCI Express 4 SFF-8639 (U.2)",
    0x25: "PCI Express 5 SFF-8639 (U.2)",
    0x26: "OCP NIC 3.0 Small Form Factor (SFF)",
    0x27: "OCP NIC 3.0 Large Form Factor (LFF)",
    0x28: "OCP NIC Prior to 3.0",
    0x30: "CXL FLexbus 1.0",
    0xA0: "PC-98/C20",
    0xA1: "PC-98/C24",
    0xA2: "PC-98/E",
    0xA3: "PC-98/Local Bus",
    0xA4: "PC-98/Card",
    0xA5: "PCI Express",
    0xA6: "PCI Express x1",
    0xA7: "PCI Express x2",
    0xA8: "PCI Express x4",
    0xA9: "PCI Express x8",
    0xAA: "PCI Express x16",
    0xAB: "PCI Express 2",
    0xAC: "PCI Express 2 x1",
    0xAD: "PCI Express 2 x2",
    0xAE: "PCI Express 2 x4",
    0xAF: "PCI Express 2 x8",
    0xB0: "PCI Express 2 x16",
    0xB1: "PCI Express 3",
    0xB2: "PCI Express 3 x1",
    0xB3: "PCI Express 3 x2",
    0xB4: "PCI Express 3 x4",
    0xB5: "PCI Express 3 x8",
    0xB6: "PCI Express 3 x16",
    0xB8: "PCI Express 4",
    0xB9: "PCI Express 4 x1",
    0xBA: "PCI Express 4 x2",
    0xBB: "PCI Express 4 x4",
    0xBC: "PCI Express 4 x8",
    0xBD: "PCI Express 4 x16",
    0xBE: "PCI Express 5",
    0xBF: "PCI Express 5 x1",
    0xC0: "PCI Express 5 x2",
    0xC1: "PCI Express 5 x4",
    0xC2: "PCI Express 5 x8",
    0xC3: "PCI Express 5 x16",
    0xC4: "PCI Express 6+",
    0xC5: "EDSFF E1",
    0xC6: "EDSFF E3",
}

# 7.10.2 Slot data bus width
SLOT_BUS_WIDTHS = {
    0x01: "Other",
    0x02: "Unknown",
    0x03: "8-bit",
    0x04: "16-bit",
    0x05: "32-bit",
    0x06: "64-bit",
    0x07: "128-bit",
    0x08: "x1",
    0x09: "x2",
    0x0A: "x4",
    0x0B: "x8",
    0x0C: "x12",
    0x0D: "x16",
    0x0E: "x32",
}

# 7.10.3 Current usage
SLOT_USAGES = {
    0x01: "Other",
    0x02: "Unknown",
    0x03: "Available",
    0x04: "In Use",
    0x05: "Unavailable",
}

# 7.10.4 Slot length
SLOT_LENGTHS = {
    0x01: "Other",
    0x02: "Unknown",
    0x03: "Short",
    0x04: "Long",
    0x05: "2.5\" drive form factor",
    0x06: "3.5\" drive form factor",
}

# 7.10.6 Slot characteristics 1 (bit position)
SLOT_CHARACTERISTICS1 = {
    0: "Unknown",
    1: "5.0 V is provided",
    2: "3.3 V is provided",
    3: "Opening is shared",
    4: "PC Card-16 is supported",
    5: "Cardbus is supported",
    6: "Zoom Video is supported",
    7: "Modem ring resume is supported",
}

# 7.10.7 Slot characteristics 2 (bit position)
SLOT_CHARACTERISTICS2 = {
    0: "PME signal is supported",
    1: "Hot-plug devices are supported",
    2: "SMBus signal is supported",
    3: "PCIe slot bifurcation is supported",
    4: "Async/surprise removal is supported",
    5: "Flexbus slot, CXL 1.0 capable",
    6: "Flexbus slot, CXL 2.0 capable",
    7: "Flexbus slot, CXL 3.0 capable",
}

# 7.11.1 and 7.42.2 Onboard device types
ONBOARD_DEVICE_TYPES = {
    0x01: "Other",
    0x02: "Unknown",
    0x03: "Video",
    0x04: "SCSI Controller",
    0x05: "Ethernet",
    0x06: "Token Ring",
    0x07: "Sound",
    0x08: "PATA Controller",
    0x09: "SATA Controller",
    0x0A: "SAS Controller",
    0x0B: "Wireless LAN",
    0x0C: "Bluetooth",
    0x0D: "WWAN",
    0x0E: "eMMC (embedded Multi-Media Controller)",
    0x0F: "NVMe Controller",
    0x10: "UFS Controller",
}

# 7.16.1 Event log access method
EVENT_LOG_ACCESS_METHODS = {
    0x00: "Indexed I/O, one 8-bit index port, one 8-bit data port",
    0x01: "Indexed I/O, two 8-bit index ports, one 8-bit data port",
    0x02: "Indexed I/O, one 16-bit index port, one 8-bit data port",
    0x03: "Memory-mapped physical 32-bit address",
    0x04: "General-purpose non-volatile data functions",
}

# 7.16.2 Event log header format
EVENT_LOG_HEADER_FORMATS = {
    0x00: "No Header",
    0x01: "Type 1",
}

# 7.16.6.1 Event log types
EVENT_LOG_TYPES = {
    0x01: "Single-bit ECC memory error",
    0x02: "Multi-bit ECC memory error",
    0x03: "Parity memory error",
    0x04: "Bus timeout",
    0x05: "I/O channel block",
    0x06: "Software NMI",
    0x07: "POST memory resize",
    0x08: "POST error",
    0x09: "PCI parity error",
    0x0A: "PCI system error",
    0x0B: "CPU failure",
    0x0C: "EISA failsafe timer timeout",
    0x0D: "Correctable memory log disabled",
    0x0E: "Logging disabled",
    0x10: "System limit exceeded",
    0x11: "Asynchronous hardware timer expired",
    0x12: "System configuration information",
    0x13: "Hard disk information",
    0x14: "System reconfigured",
    0x15: "Uncorrectable CPU-complex error",
    0x16: "Log area reset/cleared",
    0x17: "System boot",
}

# 7.16.6.2 Event log variable data format types
EVENT_LOG_DATA_FORMATS = {
    0x00: "None",
    0x01: "Handle",
    0x02: "Multiple-event",
    0x03: "Multiple-event handle",
    0x04: "POST results bitmap",
    0x05: "System management",
    0x06: "Multiple-event system management",
}

# 7.17.1 Memory array location
MEMORY_ARRAY_LOCATIONS = {
    0x01: "Other",
    0x02: "Unknown",
    0x03: "System Board Or Motherboard",
    0x04: "ISA Add-on Card",
    0x05: "EISA Add-on Card",
    0x06: "PCI Add-on Card",
    0x07: "MCA Add-on Card",
    0x08: "PCMCIA Add-on Card",
    0x09: "Proprietary Add-on Card",
    0x0A: "NuBus",
    0xA0: "PC-98/C20 Add-on Card",
    0xA1: "PC-98/C24 Add-on Card",
    0xA2: "PC-98/E Add-on Card",
    0xA3: "PC-98/Local Bus Add-on Card",
    0xA4: "CXL Add-on Card",
}

# 7.17.2 Memory array use
MEMORY_ARRAY_USES = {
    0x01: "Other",
    0x02: "Unknown",
    0x03: "System Memory",
    0x04: "Video Memory",
    0x05: "Flash Memory",
    0x06: "Non-volatile RAM",
    0x07: "Cache Memory",
}

# 7.17.3 Memory array error correction types
MEMORY_ERROR_CORRECTION_TYPES = {
    0x01: "Other",
    0x02: "Unknown",
    0x03: "None",
    0x04: "Parity",
    0x05: "Single-bit ECC",
    0x06: "Multi-bit ECC",
    0x07: "CRC",
}

# 7.18.1 Memory device form factor
MEMORY_FORM_FACTORS = {
    0x01: "Other",
    0x02: "Unknown",
    0x03: "SIMM",
    0x04: "SIP",
    0x05: "Chip",
    0x06: "DIP",
    0x07: "ZIP",
    0x08: "Proprietary Card",
    0x09: "DIMM",
    0x0A: "TSOP",
    0x0B: "Row Of Chips",
    0x0C: "RIMM",
    0x0D: "SODIMM",
    0x0E: "SRIMM",
    0x0F: "FB-DIMM",
    0x10: "Die",
}

# 7.18.2 Memory device type
MEMORY_TYPES = {
    0x01: "Other",
    0x02: "Unknown",
    0x03: "DRAM",
    0x04: "EDRAM",
    0x05: "VRAM",
    0x06: "SRAM",
    0x07: "RAM",
    0x08: "ROM",
    0x09: "Flash",
    0x0A: "EEPROM",
    0x0B: "FEPROM",
    0x0C: "EPROM",
    0x0D: "CDRAM",
    0x0E: "3DRAM",
    0x0F: "SDRAM",
    0x10: "SGRAM",
    0x11: "RDRAM",
    0x12: "DDR",
    0x13: "DDR2",
    0x14: "DDR2 FB-DIMM",
    0x18: "DDR3",
    0x19: "FBD2",
    0x1A: "DDR4",
    0x1B: "LPDDR",
    0x1C: "LPDDR2",
    0x1D: "LPDDR3",
    0x1E: "LPDDR4",
    0x1F: "Logical non-volatile device",
    0x20: "HBM",
    0x21: "HBM2",
    0x22: "DDR5",
    0x23: "LPDDR5",
    0x24: "HBM3",
}

# 7.18.3 Memory device type detail (bit position)
MEMORY_TYPE_DETAILS = {
    1:  "Other",
    2:  "Unknown",
    3:  "Fast-paged",
    4:  "Static Column",
    5:  "Pseudo-static",
    6:  "RAMBus",
    7:  "Synchronous",
    8:  "CMOS",
    9:  "EDO",
    10: "Window DRAM",
    11: "Cache DRAM",
    12: "Non-Volatile",
    13: "Registered (Buffered)",
    14: "Unbuffered (Unregistered)",
    15: "LRDIMM",
}

# 7.18.6 Memory device technology
MEMORY_TECHNOLOGIES = {
    0x01: "Other",
    0x02: "Unknown",
    0x03: "DRAM",
    0x04: "NVDIMM-N",
    0x05: "NVDIMM-F",
    0x06: "NVDIMM-P",
    0x07: "Intel Optane persistent memory",
}

# 7.18.7 Memory device operating mode capability (bit position)
MEMORY_OPERATING_MODES = {
    1: "Other",
    2: "Unknown",
    3: "Volatile memory",
    4: "Byte-accessible persistent memory",
    5: "Block-accessible persistent memory",
}

# 7.19.1 Memory error type
MEMORY_ERROR_TYPES = {
    0x01: "Other",
    0x02: "Unknown",
    0x03: "OK",
    0x04: "Bad Read",
    0x05: "Parity Error",
    0x06: "Single-bit Error",
    0x07: "Double-bit Error",
    0x08: "Multi-bit Error",
    0x09: "Nibble Error",
    0x0A: "Checksum Error",
    0x0B: "CRC Error",
    0x0C: "Corrected Single-bit Error",
    0x0D: "Corrected Error",
    0x0E: "Uncorrectable Error",
}

# 7.19.2 Memory error granularity
MEMORY_ERROR_GRANULARITIES = {
    0x01: "Other",
    0x02: "Unknown",
    0x03: "Device Level",
    0x04: "Memory Partition Level",
}

# 7.19.3 Memory error operation
MEMORY_ERROR_OPERATIONS = {
    0x01: "Other",
    0x02: "Unknown",
    0x03: "Read",
    0x04: "Write",
    0x05: "Partial Write",
}

# 7.22.1 Pointing device type
POINTING_DEVICE_TYPES = {
    0x01: "Other",
    0x02: "Unknown",
    0x03: "Mouse",
    0x04: "Track Ball",
    0x05: "Track Point",
    0x06: "Glide Point",
    0x07: "Touch Pad",
    0x08: "Touch Screen",
    0x09: "Optical Sensor",
}

# 7.22.2 Pointing device interface
POINTING_DEVICE_INTERFACES = {
    0x01: "Other",
    0x02: "Unknown",
    0x03: "Serial",
    0x04: "PS/2",
    0x05: "Infrared",
    0x06: "HIP-HIL",
    0x07: "Bus Mouse",
    0x08: "ADB (Apple Desktop Bus)",
    0xA0: "Bus Mouse DB-9",
    0xA1: "Bus Mouse Micro DIN",
    0xA2: "USB",
    0xA3: "I2C",
    0xA4: "SPI",
}

# 7.23.1 Portable battery device chemistry
BATTERY_CHEMISTRIES = {
    0x01: "Other",
    0x02: "Unknown",
    0x03: "Lead Acid",
    0x04: "Nickel Cadmium",
    0x05: "Nickel Metal Hydride",
    0x06: "Lithium Ion",
    0x07: "Zinc Air",
    0x08: "Lithium Polymer",
}

# 7.24 System reset boot option
RESET_BOOT_OPTIONS = {
    0x00: "Reserved",
    0x01: "Operating System",
    0x02: "System Utilities",
    0x03: "Do Not Reboot",
}

# 7.25 Hardware security status
HARDWARE_SECURITY_STATUS = {
    0x00: "Disabled",
    0x01: "Enabled",
    0x02: "Not Implemented",
    0x03: "Unknown",
}

# 7.27.1 Voltage and 7.30.1 current probe location
PROBE_LOCATIONS = {
    0x01: "Other",
    0x02: "Unknown",
    0x03: "Processor",
    0x04: "Disk",
    0x05: "Peripheral Bay",
    0x06: "System Management Module",
    0x07: "Motherboard",
    0x08: "Memory Module",
    0x09: "Processor Module",
    0x0A: "Power Unit",
    0x0B: "Add-in Card",
}

# 7.29.1 Temperature probe location
TEMPERATURE_PROBE_LOCATIONS = dict(PROBE_LOCATIONS)
TEMPERATURE_PROBE_LOCATIONS.update({
    0x0C: "Front Panel Board",
    0x0D: "Back Panel Board",
    0x0E: "Power System Board",
    0x0F: "Drive Back Plane",
})

# 7.27.1 Probe status
PROBE_STATUS = {
    0x01: "Other",
    0x02: "Unknown",
    0x03: "OK",
    0x04: "Non-critical",
    0x05: "Critical",
    0x06: "Non-recoverable",
}

# 7.28.1 Cooling device type
COOLING_DEVICE_TYPES = {
    0x01: "Other",
    0x02: "Unknown",
    0x03: "Fan",
    0x04: "Centrifugal Blower",
    0x05: "Chip Fan",
    0x06: "Cabinet Fan",
    0x07: "Power Supply Fan",
    0x08: "Heat Pipe",
    0x09: "Integrated Refrigeration",
    0x10: "Active Cooling",
    0x11: "Passive Cooling",
}

# 7.33.2 System boot status
SYSTEM_BOOT_STATUS = {
    0x00: "No errors detected",
    0x01: "No bootable media",
    0x02: "Operating system failed to load",
    0x03: "Firmware-detected hardware failure",
    0x04: "Operating system-detected hardware failure",
    0x05: "User-requested boot",
    0x06: "System security violation",
    0x07: "Previously-requested image",
    0x08: "System watchdog timer expired",
}

# 7.35.1 Management device type
MANAGEMENT_DEVICE_TYPES = {
    0x01: "Other",
    0x02: "Unknown",
    0x03: "LM75",
    0x04: "LM78",
    0x05: "LM79",
    0x06: "LM80",
    0x07: "LM81",
    0x08: "ADM9240",
    0x09: "DS1780",
    0x0A: "MAX1617",
    0x0B: "GL518SM",
    0x0C: "W83781D",
    0x0D: "HT82H791",
}

# 7.35.2 Management device address type
MANAGEMENT_ADDRESS_TYPES = {
    0x01: "Other",
    0x02: "Unknown",
    0x03: "I/O Port",
    0x04: "Memory",
    0x05: "SMBus",
}

# 7.38.1 Memory channel type
MEMORY_CHANNEL_TYPES = {
    0x01: "Other",
    0x02: "Unknown",
    0x03: "RamBus",
    0x04: "SyncLink",
}

# 7.39.1 IPMI interface type
IPMI_INTERFACE_TYPES = {
    0x00: "Unknown",
    0x01: "KCS (Keyboard Control Style)",
    0x02: "SMIC (Server Management Interface Chip)",
    0x03: "BT (Block Transfer)",
    0x04: "SSIF (SMBus System Interface)",
}

# 7.39 IPMI base address modifier, bits 7:6
IPMI_REGISTER_SPACINGS = {
    0x00: "Successive Byte Boundaries",
    0x01: "32-bit Boundaries",
    0x02: "16-byte Boundaries",
}

# 7.40.1 Power supply type
POWER_SUPPLY_TYPES = {
    0x01: "Other",
    0x02: "Unknown",
    0x03: "Linear",
    0x04: "Switching",
    0x05: "Battery",
    0x06: "UPS",
    0x07: "Converter",
    0x08: "Regulator",
}

# 7.40.1 Power supply status
POWER_SUPPLY_STATUS = {
    0x01: "Other",
    0x02: "Unknown",
    0x03: "OK",
    0x04: "Non-critical",
    0x05: "Critical",
}

# 7.40.1 Input voltage range switching
POWER_SUPPLY_RANGE_SWITCHING = {
    0x01: "Other",
    0x02: "Unknown",
    0x03: "Manual",
    0x04: "Auto-switch",
    0x05: "Wide Range",
    0x06: "N/A",
}

# 7.43.2 Management controller host interface types (DSP0239)
MC_INTERFACE_TYPES = {
    0x02: "KCS: Keyboard Controller Style",
    0x03: "8250 UART Register Compatible",
    0x04: "16450 UART Register Compatible",
    0x05: "16550/16550A UART Register Compatible",
    0x06: "16650/16650A UART Register Compatible",
    0x07: "16750/16750A UART Register Compatible",
    0x08: "16850/16850A UART Register Compatible",
    0x40: "Network",
    0xF0: "OEM",
}

# 7.43.3 Management controller host interface protocol types
MC_PROTOCOL_TYPES = {
    0x02: "IPMI",
    0x03: "MCTP",
    0x04: "Redfish over IP",
    0xF0: "OEM",
}

# 7.44.1 TPM device characteristics (bit position)
TPM_CHARACTERISTICS = {
    2: "TPM Device characteristics not supported",
    3: "Family configurable via firmware update",
    4: "Family configurable via platform software support",
    5: "Family configurable via OEM proprietary mechanism",
}
