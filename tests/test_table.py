import struct
import unittest

from smbios_parser import decode_table
from smbios_parser.errors import (
    MalformedRecord, StringIndexOutOfRange, TableTruncated)
from smbios_parser.structs.smbios_structs import NOT_SPECIFIED
from smbios_parser.table import (
    StringPool, StructureHeader, StructureRecord, StructureTable)

from helpers import end_of_table, structure, system_information


class StringPoolTest(unittest.TestCase):

    def test_get(self):
        pool = StringPool(b"Acme\x00Widget\x00\x00")
        self.assertEqual(len(pool), 2)
        self.assertEqual(pool.get(1), "Acme")
        self.assertEqual(pool.get(2), "Widget")

    def test_index_zero(self):
        pool = StringPool(b"\x00\x00")
        self.assertEqual(len(pool), 0)
        self.assertEqual(pool.get(0), NOT_SPECIFIED)

    def test_index_out_of_range(self):
        pool = StringPool(b"Acme\x00\x00")
        with self.assertRaises(StringIndexOutOfRange) as context:
            pool.get(3, 1, 0x0100, "version")
        self.assertEqual(context.exception.type_code, 1)
        self.assertEqual(context.exception.handle, 0x0100)
        self.assertEqual(context.exception.field, "version")

    def test_stops_at_double_nul(self):
        pool = StringPool(b"A\x00\x00B\x00\x00")
        self.assertEqual(pool.strings, ["A"])


class StructureRecordTest(unittest.TestCase):

    def _record(self, data):
        header = StructureHeader(data[:4])
        return StructureRecord(header, data, (2, 8))

    def test_header(self):
        header = StructureHeader(struct.pack("<BBH", 17, 0x28, 0x1100))
        self.assertEqual(header.type, 17)
        self.assertEqual(header.length, 0x28)
        self.assertEqual(header.handle, 0x1100)
        self.assertTrue(header.valid)

    def test_readers(self):
        record = self._record(structure(
            0x80, 0x0042, struct.pack("<BHIQ", 0x11, 0x2233, 0x44556677,
                                      0x8899AABBCCDDEEFF) + b"\x01",
            ("OEM",)))
        self.assertEqual(record.u8(0x04), 0x11)
        self.assertEqual(record.u16(0x05), 0x2233)
        self.assertEqual(record.u32(0x07), 0x44556677)
        self.assertEqual(record.u64(0x0B), 0x8899AABBCCDDEEFF)
        self.assertEqual(record.string(0x13), "OEM")
        self.assertEqual(record.raw(0x04, 1), b"\x11")

    def test_read_past_length(self):
        record = self._record(structure(0x80, 0x0042, b"\x01\x02", ("A",)))
        self.assertTrue(record.has(0x05))
        self.assertFalse(record.has(0x06))
        with self.assertRaises(MalformedRecord) as context:
            record.u16(0x05, "width")
        self.assertEqual(context.exception.field, "width")
        self.assertEqual(context.exception.type_code, 0x80)


class StructureTableTest(unittest.TestCase):

    def test_records(self):
        data = (structure(0x80, 0x0001, b"\xAA", ("one", "two")) +
                structure(0x81, 0x0002) + end_of_table())
        table = StructureTable(data, (2, 8), quiet=True)
        records = list(table.records())
        self.assertEqual([r.type for r in records], [0x80, 0x81, 127])
        self.assertEqual(records[0].strings.strings, ["one", "two"])
        self.assertEqual(records[1].offset, len(structure(0x80, 1, b"\xAA",
                                                          ("one", "two"))))
        self.assertEqual(table.errors, [])
        self.assertFalse(table.ended_early)

    def test_end_of_table_without_terminator(self):
        data = structure(0x80, 0x0001) + b"\x7F\x04\xFF\xFE"
        table = StructureTable(data, (2, 8), quiet=True)
        self.assertEqual([r.type for r in table.records()], [0x80, 127])
        self.assertEqual(table.errors, [])
        self.assertFalse(table.ended_early)

    def test_stops_at_end_of_table(self):
        data = (structure(0x80, 0x0001) + end_of_table() +
                structure(0x81, 0x0002))
        table = StructureTable(data, (2, 8), quiet=True)
        self.assertEqual([r.type for r in table.records()], [0x80, 127])

    def test_missing_end_of_table(self):
        data = structure(0x80, 0x0001) + structure(0x81, 0x0002)
        table = StructureTable(data, (2, 8), quiet=True)
        self.assertEqual([r.type for r in table.records()], [0x80, 0x81])
        self.assertTrue(table.ended_early)
        self.assertEqual(len(table.errors), 1)
        self.assertIsInstance(table.errors[0], TableTruncated)

    def test_partial_header(self):
        data = structure(0x80, 0x0001) + b"\x01\x02"
        table = StructureTable(data, (2, 8), quiet=True)
        self.assertEqual([r.type for r in table.records()], [0x80])
        self.assertTrue(table.ended_early)

    def test_unterminated_string_pool(self):
        data = structure(0x80, 0x0001) + b"\x81\x05\x02\x00\xAAstr"
        table = StructureTable(data, (2, 8), quiet=True)
        records = list(table.records())
        self.assertEqual([r.type for r in records], [0x80, 0x81])
        self.assertTrue(table.ended_early)

    def test_length_below_header(self):
        data = (structure(0x80, 0x0001) + b"\x81\x02\x02\x00\x00\x00" +
                end_of_table())
        table = StructureTable(data, (2, 8), quiet=True)
        self.assertEqual([r.type for r in table.records()], [0x80])
        self.assertIsInstance(table.errors[0], MalformedRecord)
        self.assertIsInstance(table.errors[1], TableTruncated)
        self.assertTrue(table.ended_early)

    def test_length_beyond_table_resyncs(self):
        broken = struct.pack("<BBH", 0x80, 0xF0, 0x0001) + b"\x11\x22\x00\x00"
        data = broken + structure(0x81, 0x0002) + end_of_table()
        table = StructureTable(data, (2, 8), quiet=True)
        self.assertEqual([r.type for r in table.records()], [0x81, 127])
        self.assertEqual(len(table.errors), 1)
        self.assertIsInstance(table.errors[0], MalformedRecord)
        self.assertEqual(table.errors[0].handle, 0x0001)
        self.assertFalse(table.ended_early)


class DecodedTableTest(unittest.TestCase):

    def _array(self, handle, devices):
        formatted = struct.pack("<BBBIHH", 0x03, 0x03, 0x03, 0x01000000,
                                0xFFFE, devices)
        return structure(16, handle, formatted)

    def test_all_records_kept(self):
        data = (self._array(0x1000, 2) + self._array(0x1001, 4) +
                end_of_table())
        table = decode_table(data, (2, 8), quiet=True)
        self.assertEqual(len(table), 2)
        self.assertEqual(table.types, [16])
        self.assertEqual(table.get(16).handle, 0x1001)
        self.assertEqual(table.first(16).handle, 0x1000)
        self.assertEqual([s.handle for s in table.get_all(16)],
                         [0x1000, 0x1001])
        self.assertEqual(table.physical_memory_array().number_of_devices, 4)
        self.assertEqual(
            table.physical_memory_array("first").number_of_devices, 2)
        self.assertEqual(len(table.select(16, "all")), 2)
        self.assertEqual(table.mapping()[16].handle, 0x1001)
        self.assertEqual(table.by_handle(0x1000).number_of_devices, 2)

    def test_select(self):
        table = decode_table(self._array(0x1000, 1) + end_of_table(), (2, 8))
        self.assertIsNone(table.get(17))
        self.assertEqual(table.get_all(17), [])
        self.assertIsNone(table.memory_device())
        with self.assertRaises(ValueError):
            table.select(16, "middle")

    def test_end_of_table(self):
        table = decode_table(self._array(0x1000, 1) + end_of_table(0xFEFF),
                             (2, 8))
        self.assertNotIn(127, table)
        self.assertEqual(table.end_of_table.handle, 0xFEFF)
        self.assertFalse(table.ended_early)

    def test_unterminated_end_of_table(self):
        table = decode_table(self._array(0x1000, 1) + b"\x7F\x04\xFF\xFE",
                             (2, 8), quiet=True)
        self.assertIn(16, table)
        self.assertEqual(table.end_of_table.handle, 0xFEFF)
        self.assertEqual(table.errors, [])
        self.assertFalse(table.ended_early)

    def test_inactive(self):
        data = (structure(126, 0x0005, b"\x00\x00\x00\x00") +
                self._array(0x1000, 1) + end_of_table())
        table = decode_table(data, (2, 8))
        self.assertIn(126, table)
        self.assertEqual(table.inactive().handle, 0x0005)

    def test_string_error_fails_only_its_record(self):
        bad = structure(1, 0x0001, b"\x05\x00\x00\x00")
        data = bad + self._array(0x1000, 1) + end_of_table()
        table = decode_table(data, (2, 8), quiet=True)
        self.assertNotIn(1, table)
        self.assertIn(16, table)
        self.assertEqual(len(table.errors), 1)
        error = table.errors[0]
        self.assertIsInstance(error, StringIndexOutOfRange)
        self.assertEqual(error.type_code, 1)
        self.assertEqual(error.handle, 0x0001)
        self.assertEqual(error.field, "manufacturer")

    def test_short_record_fails_only_its_record(self):
        # A processor record cut off before its voltage field.
        processor = structure(4, 0x0400, b"\x01\x03\xC6\x00" + b"\x00" * 8,
                              ("CPU0",))
        data = processor + self._array(0x1000, 1) + end_of_table()
        table = decode_table(data, (2, 8), quiet=True)
        self.assertNotIn(4, table)
        self.assertIsInstance(table.errors[0], MalformedRecord)
        self.assertEqual(table.errors[0].type_code, 4)

    def test_unknown_types(self):
        data = (structure(0x85, 0x0010, b"\xDE\xAD", ("vendor data",)) +
                structure(5, 0x0011, b"\x01") + end_of_table())
        table = decode_table(data, (2, 8))
        oem = table.get(0x85)
        self.assertEqual(oem.raw, b"\xDE\xAD")
        self.assertEqual(oem.strings, ["vendor data"])
        self.assertEqual(oem.name, "OEM-specific Type 133")
        self.assertEqual(table.get(5).raw, b"\x01")

    def test_iterate_objects(self):
        table = decode_table(self._array(0x1000, 2) + end_of_table(), (2, 8))
        self.assertEqual(table.label, "SMBIOS 2.8")
        self.assertEqual(table.info()["attrs"]["structures"], 1)
        objects = table.iterate_objects()
        self.assertEqual(len(objects), 1)
        self.assertEqual(objects[0]["type"], "PhysicalMemoryArray")
        self.assertEqual(objects[0]["label"], "Physical Memory Array")
        self.assertEqual(objects[0]["handle"], 0x1000)
        self.assertEqual(objects[0]["attrs"]["number_of_devices"], 2)
        self.assertEqual(objects[0]["objects"], [])

    def test_deterministic(self):
        data = (system_information(b"\x11" * 16) + self._array(0x1000, 2) +
                end_of_table())
        first = decode_table(data, (2, 8))
        second = decode_table(data, (2, 8))
        self.assertEqual(first, second)
        self.assertEqual(first.system().attrs, second.system().attrs)


if __name__ == '__main__':
    unittest.main()
