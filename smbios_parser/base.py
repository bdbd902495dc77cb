'''Base provides basic SMBIOS object structures.
'''

import ctypes

from .structs.smbios_structs import SMBIOS_STRUCTURE_TYPES
from .utils import blue, green


class SMBIOSObject(object):
    '''A pseudo-abstract type providing common SMBIOS member facilities.'''
    def __init__(self):
        self.data = None
        self.name = None
        self.attrs = None

    @property
    def content(self):
        '''The object content is the 'data' stream.'''
        if hasattr(self, "data") and self.data is not None:
            return self.data
        return b""

    @property
    def objects(self):
        '''Objects are the child SMBIOS objects found via 'processing'.'''
        return []

    @property
    def label(self):
        '''An overload for an object 'name'.'''
        if hasattr(self, "name") and self.name is not None:
            return self.name
        return ""

    @property
    def type_label(self):
        '''The string representation of the object's class name.'''
        return self.__class__.__name__

    @property
    def attrs_label(self):
        '''An overload for the 'attrs' field.'''
        if hasattr(self, "attrs") and self.attrs is not None:
            return self.attrs
        return {}

    def info(self, include_content=False):
        '''SMBIOS objects define a common interface for information.

        This defines: label, type, content, attrs-- as common between
        most SMBIOS objects.

        Args:
            include_content (Optional[bool]): Include a pointer to the 'data'
            or content stream.

        Return:
            dict: Return a pointer to this object "_self" and the defines listed
                above with an optional pointer to the data stream.
        '''
        return {
            "_self": self,
            "label": self.label,
            "type": self.type_label,
            "content": self.content if include_content else b"",
            "attrs": self.attrs_label
        }

    def iterate_objects(self, include_content=False):
        '''Flatten this object's children into a list.

        Each child is represented via the 'info' method and sets a "parent"
        key pointing at the info of this object.

        Return:
            list: flattened list of SMBIOS objects.
        '''
        objects = []
        for _object in self.objects:
            if _object is None:
                continue
            _info = _object.info(include_content)
            _info["objects"] = _object.iterate_objects(include_content)
            for _child in _info["objects"]:
                _child["parent"] = _info
            objects.append(_info)
        return objects


class StructuredObject(object):
    '''Parses a fixed-size ctypes structure from the head of a buffer.'''

    def parse_structure(self, data, structure):
        '''Construct an instance object of the provided structure.'''
        struct_instance = structure()
        struct_size = ctypes.sizeof(struct_instance)

        struct_data = data[:struct_size]
        struct_length = min(len(struct_data), struct_size)
        ctypes.memmove(
            ctypes.addressof(struct_instance), struct_data, struct_length)
        self.structure = struct_instance
        self.structure_data = struct_data
        self.structure_fields = [field[0] for field in structure._fields_]
        self.structure_size = struct_size


def field_label(name):
    '''Human readable label for an attribute name, "asset_tag" -> "Asset Tag".
    '''
    words = []
    for word in name.split("_"):
        if word.isupper() or word in ("id", "uuid", "sku", "ec"):
            words.append(word.upper())
        else:
            words.append(word.capitalize())
    return " ".join(words)


class SMBIOSStructure(SMBIOSObject):
    '''A decoded structure from the SMBIOS structure table.

    Subclasses set TYPE and list the attributes they decode in 'fields', in
    table order. Fields the record is too short to hold stay None.
    '''

    TYPE = None
    fields = ()

    def __init__(self, record):
        self.record = record
        self.data = record.data
        self.smbios_version = record.version
        self.type = record.header.type
        self.length = record.header.length
        self.handle = record.header.handle
        self.attrs = None
        for field in self.fields:
            setattr(self, field, None)

    @property
    def name(self):
        if self.type in SMBIOS_STRUCTURE_TYPES:
            return SMBIOS_STRUCTURE_TYPES[self.type][0]
        if self.type >= 128:
            return "OEM-specific Type"
        return "Unknown Type"

    def decode(self, r):
        '''Read this structure's fields from the StructureRecord r.'''
        pass

    def process(self):
        '''Decode the record, raising a DecodeError on malformed input.'''
        self.decode(self.record)
        self.attrs = dict([(field, getattr(self, field))
                           for field in self.fields])
        return True

    def info(self, include_content=False):
        info = super(SMBIOSStructure, self).info(include_content)
        info["handle"] = self.handle
        return info

    def _show_value(self, ts, field, value):
        label = field_label(field)
        if isinstance(value, (list, tuple)):
            print("%s\t%s:" % (ts, label))
            for item in value:
                if isinstance(item, dict):
                    item = ", ".join(["%s: %s" % (field_label(k), v)
                                      for k, v in item.items()])
                print("%s\t\t%s" % (ts, item))
            return
        print("%s\t%s: %s" % (ts, label, value))

    def showinfo(self, ts='', index=None):
        print("%s%s 0x%04X, DMI type %d, %d bytes" % (
            ts, blue("Handle"), self.handle, self.type, self.length))
        print("%s%s" % (ts, green(self.name)))
        for field in self.fields:
            value = getattr(self, field)
            if value is None:
                continue
            self._show_value(ts, field, value)

    def __eq__(self, other):
        return (type(self) is type(other) and
                self.handle == other.handle and
                self.attrs_label == other.attrs_label)

    def __hash__(self):
        return hash((type(self), self.handle))

    def __repr__(self):
        return "<%s handle=0x%04X>" % (self.__class__.__name__, self.handle)
