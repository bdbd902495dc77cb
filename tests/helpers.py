'''Builders for synthetic SMBIOS tables and memory images.
'''

import struct

from smbios_parser.source import BufferSource

# The synthetic image covers 0xE0000-0xFFFFF: the table is placed at the
# start and the entry point within the 0xF0000 window.
IMAGE_BASE = 0xE0000
IMAGE_SIZE = 0x20000
WINDOW_OFFSET = 0x10000


def structure(type_code, handle, formatted=b"", strings=()):
    '''Pack one structure: header, formatted area and string pool.'''
    header = struct.pack("<BBH", type_code, 4 + len(formatted), handle)
    if strings:
        pool = b"".join([s.encode("utf-8") + b"\x00" for s in strings])
        pool += b"\x00"
    else:
        pool = b"\x00\x00"
    return header + formatted + pool


def end_of_table(handle=0xFEFF):
    return structure(127, handle)


def system_information(uuid=b"\x00" * 16, strings=("Acme", "Widget", "1.0"),
                       handle=0x0001):
    formatted = bytes(bytearray([1, 2, 3, 0])) + uuid
    formatted += bytes(bytearray([0x06, 0, 0]))
    return structure(1, handle, formatted, strings)


def checksum_byte(data):
    return (0x100 - (sum(bytearray(data)) & 0xFF)) & 0xFF


def entry_point(table_address, table_length, count=0, version=(2, 8),
                length=0x1F, intermediate=b"_DMI_", valid=True):
    '''Pack a 2.x entry point with both checksums computed.'''
    data = bytearray(0x1F)
    data[0:4] = b"_SM_"
    data[5] = length
    data[6] = version[0]
    data[7] = version[1]
    struct.pack_into("<H", data, 0x08, 0x100)
    data[0x10:0x15] = intermediate
    struct.pack_into("<HIHB", data, 0x16, table_length, table_address,
                     count, (version[0] << 4) | version[1])
    data[0x15] = checksum_byte(data[0x10:0x1F])
    data[4] = checksum_byte(data[:length])
    if not valid:
        data[4] = (data[4] + 1) & 0xFF
    return bytes(data)


def memory_image(table, version=(2, 8), count=0, offset=0x10, **kwargs):
    '''A BufferSource holding the table and an entry point that locates it.

    Args:
        table (binary): The structure table, stored at IMAGE_BASE.
        offset (int): Offset of the entry point from 0xF0000.
    '''
    data = bytearray(IMAGE_SIZE)
    data[0:len(table)] = table
    ep = entry_point(IMAGE_BASE, len(table), count, version, **kwargs)
    start = WINDOW_OFFSET + offset
    data[start:start + len(ep)] = ep
    return BufferSource(bytes(data), IMAGE_BASE)
