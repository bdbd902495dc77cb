'''Exceptions raised while reading and decoding SMBIOS data.

Failures while reading the source or locating the entry point are fatal and
propagate to the caller. DecodeError and its subclasses are local to a single
structure: the table walk records them and continues with the next record.
'''


class SMBIOSError(Exception):
    '''Base class for every SMBIOS decoding failure.'''


class SourceUnavailable(SMBIOSError):
    '''The raw byte source could not provide the requested range.'''

    def __init__(self, base, length, reason=""):
        self.base = base
        self.length = length
        self.reason = reason
        msg = "source unavailable: 0x%08X (+0x%X bytes)" % (base, length)
        if reason:
            msg = "%s, %s" % (msg, reason)
        super(SourceUnavailable, self).__init__(msg)


class AnchorNotFound(SMBIOSError):
    '''No "_SM_" anchor was found within the scanned range.'''


class MalformedEntryPoint(SMBIOSError):
    '''The anchor was found but the entry point fields are incomplete.'''


class DecodeError(SMBIOSError):
    '''A single structure could not be decoded.

    Attributes:
        type_code (int): The structure type, if known.
        handle (int): The structure handle, if known.
        field (string): The field being read when decoding failed.
    '''

    def __init__(self, msg, type_code=None, handle=None, field=None):
        self.type_code = type_code
        self.handle = handle
        self.field = field
        super(DecodeError, self).__init__(msg)

    def __eq__(self, other):
        return (type(self) is type(other) and
                self.args == other.args and
                self.type_code == other.type_code and
                self.handle == other.handle and
                self.field == other.field)

    def __hash__(self):
        return hash((type(self), self.args, self.type_code, self.handle))


class MalformedRecord(DecodeError):
    '''A structure's length is invalid or a field lies beyond it.'''


class StringIndexOutOfRange(DecodeError):
    '''A string reference points past the structure's string pool.'''


class TableTruncated(DecodeError):
    '''The structure table ended before an End-of-Table structure.'''
