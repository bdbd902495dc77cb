import contextlib
import io
import os
import tempfile
import threading
import unittest

from smbios_parser import (
    SMBIOSParser, SystemTable, decode, DEFAULT_BASE, DEFAULT_LENGTH)
from smbios_parser.errors import (
    AnchorNotFound, SourceUnavailable, StringIndexOutOfRange, TableTruncated)
from smbios_parser.source import BufferSource, FileSource

from helpers import (
    IMAGE_BASE, end_of_table, memory_image, structure, system_information)

UUID = bytes(bytearray.fromhex("00112233445566778899AABBCCDDEEFF"))


class CountingSource(BufferSource):
    '''A BufferSource that counts reads.'''

    def __init__(self, source):
        super(CountingSource, self).__init__(source.data, source.base)
        self.reads = 0
        self.lock = threading.Lock()

    def read(self, base, length):
        with self.lock:
            self.reads += 1
        return super(CountingSource, self).read(base, length)


class DecodeTest(unittest.TestCase):

    def test_system_information(self):
        source = memory_image(system_information(UUID) + end_of_table(),
                              (2, 8), count=2)
        table = decode(source)
        self.assertEqual(table.types, [1])
        self.assertEqual(table.errors, [])
        self.assertFalse(table.ended_early)
        self.assertEqual(table.version, (2, 8))
        self.assertEqual(table.entry_point.structure_count, 2)
        self.assertEqual(table.entry_point.address, DEFAULT_BASE + 0x10)

        system = table.system()
        self.assertEqual(system.manufacturer, "Acme")
        self.assertEqual(system.product_name, "Widget")
        self.assertEqual(system.version, "1.0")
        self.assertEqual(system.uuid, "33221100-5544-7766-8899-AABBCCDDEEFF")
        self.assertEqual(system.smbios_version, (2, 8))

    def test_version_controls_uuid(self):
        source = memory_image(system_information(UUID) + end_of_table(),
                              (2, 4))
        self.assertEqual(decode(source).system().uuid,
                         "00112233-4455-6677-8899-AABBCCDDEEFF")

    def test_per_record_errors(self):
        bad = structure(1, 0x0001, b"\x07\x00\x00\x00")
        memory = structure(16, 0x1000, b"\x03\x03\x03\x00\x00\x01\x00"
                                       b"\xFE\xFF\x01\x00")
        source = memory_image(bad + memory)
        table = decode(source, quiet=True)
        self.assertEqual(table.types, [16])
        self.assertIsInstance(table.errors[0], StringIndexOutOfRange)
        self.assertIsInstance(table.errors[1], TableTruncated)
        self.assertTrue(table.ended_early)

    def test_invalid_checksum(self):
        source = memory_image(system_information(UUID) + end_of_table(),
                              valid=False)
        table = decode(source, quiet=True)
        self.assertFalse(table.entry_point.checksum_valid)
        self.assertEqual(table.system().manufacturer, "Acme")

    def test_deterministic(self):
        source = memory_image(system_information(UUID) + end_of_table())
        self.assertEqual(decode(source), decode(source))

    def test_showinfo(self):
        oem = structure(0x85, 0x0010, b"\xDE\xAD", ("vendor data",))
        probe = structure(26, 0x1A00, b"\x01\x63\xB0\x36\x00\x80" +
                          b"\x00\x80" * 4 + b"\x00" * 4, ("VCORE",))
        source = memory_image(system_information(UUID) + probe + oem +
                              end_of_table())
        output = io.StringIO()
        with contextlib.redirect_stdout(output):
            decode(source).showinfo()
        text = output.getvalue()
        self.assertIn("present.", text)
        self.assertIn("0x0001, DMI type 1, 27 bytes", text)
        self.assertIn("Manufacturer: Acme", text)
        self.assertIn("UUID: 33221100-5544-7766-8899-AABBCCDDEEFF", text)
        self.assertIn("Maximum Value: 14000 mV", text)
        self.assertIn("85061000DEAD", text)
        self.assertIn("vendor data", text)

    def test_anchor_not_found(self):
        source = BufferSource(b"\x00" * DEFAULT_LENGTH, DEFAULT_BASE)
        with self.assertRaises(AnchorNotFound):
            decode(source)

    def test_window_unavailable(self):
        source = BufferSource(b"\x00" * 0x100, DEFAULT_BASE)
        with self.assertRaises(SourceUnavailable) as context:
            decode(source)
        self.assertEqual(context.exception.base, DEFAULT_BASE)
        self.assertEqual(context.exception.length, DEFAULT_LENGTH)

    def test_table_unavailable(self):
        source = memory_image(system_information(UUID) + end_of_table())
        # Only the entry point window was captured.
        window = BufferSource(
            source.read(DEFAULT_BASE, DEFAULT_LENGTH), DEFAULT_BASE)
        with self.assertRaises(SourceUnavailable) as context:
            decode(window)
        self.assertEqual(context.exception.base, IMAGE_BASE)

    def test_file_source(self):
        source = memory_image(system_information(UUID) + end_of_table())
        fd, path = tempfile.mkstemp()
        try:
            with os.fdopen(fd, 'wb') as fh:
                fh.write(source.data)
            table = decode(FileSource(path, IMAGE_BASE))
            self.assertEqual(table.system().product_name, "Widget")
        finally:
            os.remove(path)

    def test_missing_file(self):
        source = FileSource("/nonexistent/smbios.bin", DEFAULT_BASE)
        with self.assertRaises(SourceUnavailable):
            decode(source)


class SMBIOSParserTest(unittest.TestCase):

    def test_parse_once(self):
        source = CountingSource(
            memory_image(system_information(UUID) + end_of_table()))
        parser = SMBIOSParser(source)
        self.assertIsNone(parser.entry_point)
        table = parser.parse()
        self.assertIs(parser.parse(), table)
        self.assertEqual(source.reads, 2)
        self.assertEqual(parser.entry_point.version, (2, 8))

    def test_bytes(self):
        image = memory_image(system_information(UUID) + end_of_table())
        # Scan every captured byte, the table precedes the entry point.
        parser = SMBIOSParser(image.data, IMAGE_BASE, len(image.data))
        self.assertEqual(parser.base, IMAGE_BASE)
        self.assertEqual(parser.parse().system().version, "1.0")


class SystemTableTest(unittest.TestCase):

    def test_initialized_once(self):
        source = CountingSource(
            memory_image(system_information(UUID) + end_of_table()))
        handle = SystemTable(source)
        self.assertFalse(handle.initialized)

        results = []

        def worker():
            results.append(handle.get())

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        self.assertTrue(handle.initialized)
        self.assertEqual(source.reads, 2)
        self.assertEqual(len(results), 8)
        for table in results:
            self.assertIs(table, results[0])

    def test_failure_leaves_handle_empty(self):
        handle = SystemTable(BufferSource(b"\x00" * DEFAULT_LENGTH,
                                          DEFAULT_BASE))
        with self.assertRaises(AnchorNotFound):
            handle.get()
        self.assertFalse(handle.initialized)


if __name__ == '__main__':
    unittest.main()
