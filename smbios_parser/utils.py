# -*- coding: utf-8 -*-

import sys
import struct


OUT_OF_SPEC = "<OUT OF SPEC>"


def blue(msg):
    '''Return the input string as console-escaped blue.'''
    return "\033[1;36m%s\033[1;m" % msg


def red(msg):
    '''Return the input string as console-escaped red.'''
    return "\033[31m%s\033[1;m" % msg


def green(msg):
    '''Return the input string as console-escaped green.'''
    return "\033[32m%s\033[1;m" % msg


def purple(msg):
    '''Return the input string as console-escaped purple.'''
    return "\033[1;35m%s\033[1;m" % msg


def print_error(msg):
    '''Write the input string to stderr.'''
    print(msg, file=sys.stderr)


def ascii_char(c):
    '''Return the ASCII or (.) representation of the input byte.'''
    if c >= 32 and c <= 126:
        return chr(c)
    return '.'


def hex_dump(data, size=16, ts=''):
    '''Print a debug view of binary data similar to a hex editor

    Args:
        data (binary): Data to be printed.
        size (Optional[int]): Length of each line.
        ts (Optional[string]): Indentation prefix for each line.
    '''
    for i in range(0, len(data), size):
        line = data[i:i + size]
        print("%s%s | %s" % (
            ts, line.hex().upper(), "".join([ascii_char(c) for c in line])))


def smbios_uuid(b, version):
    '''SMBIOS 16-byte UUID field as string.

    Since SMBIOS 2.6 the first three fields are stored little-endian and are
    byte-swapped for display; older tables are rendered in stored order.

    Args:
        b (binary): The 16 byte field.
        version (tuple): The (major, minor) SMBIOS version.

    Return:
        string: The formatted UUID, "Not present" or "Not settable".
    '''
    if b is None or len(b) != 16:
        return ""
    if b == b"\x00" * 16:
        return "Not present"
    if b == b"\xFF" * 16:
        return "Not settable"
    if tuple(version) >= (2, 6):
        a, b_, c, d = struct.unpack("<IHH8s", b)
    else:
        a, b_, c, d = struct.unpack(">IHH8s", b)
    d = d.hex().upper()
    return "%08X-%04X-%04X-%s-%s" % (a, b_, c, d[:4], d[4:])


def bit_set(field, bit):
    '''Check if bit is set (1) in field.'''
    return (field & bit == bit)


def bits(field, shift, width):
    '''Extract a width-bit wide sub-field starting at bit shift.'''
    return (field >> shift) & ((1 << width) - 1)


def bcd(value, digits=2):
    '''Decode a packed BCD value, one decimal digit per nibble.

    Return:
        int: The decimal value, or None if a nibble is not a decimal digit.
    '''
    result = 0
    for i in range(digits):
        digit = (value >> (4 * i)) & 0xF
        if digit > 9:
            return None
        result += digit * (10 ** i)
    return result


def lookup(table, value):
    '''Return the name for an enumerated value or OUT_OF_SPEC.'''
    if value in table:
        return table[value]
    return OUT_OF_SPEC


def flag_names(table, field):
    '''Return the names of each bit position set in field, in bit order.'''
    return [name for bit, name in sorted(table.items())
            if bit_set(field, 1 << bit)]
