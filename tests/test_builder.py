"""
sfntname test suite
name table builder tests
"""

import unittest

from sfntname import make_name_table, parse_name_table, NameTable, NAME_IDS
from .base import BaseTester


class TestMakeNameTable(BaseTester):
    """Test creating binary name tables."""

    def test_family_and_version(self):
        table = make_name_table({'fontFamily': 'Test', 'version': '1.0'})
        self.assertEqual(table.format, 0)
        self.assertEqual(table.count, 4)
        self.assertEqual(table.stringOffset, 54)
        self.assertEqual(
            [(_r.platformID, _r.encodingID, _r.languageID, _r.nameID) for _r in table.records],
            [(1, 0, 0, 1), (1, 0, 0, 5), (3, 1, 0x409, 1), (3, 1, 0x409, 5)]
        )
        self.assertEqual([_r.length for _r in table.records], [4, 3, 8, 6])
        self.assertEqual([_r.offset for _r in table.records], [0, 4, 7, 15])
        self.assertEqual(
            table.strings,
            [b'Test', b'1.0', b'\0T\0e\0s\0t', b'\x001\0.\x000']
        )
        data = bytes(table)
        self.assertEqual(len(data), 54 + 7 + 14)
        self.assertEqual(data[:6], b'\0\0\0\4\0\x36')
        names = parse_name_table(data)
        self.assertEqual(names.fields(), {'fontFamily': 'Test', 'version': '1.0'})

    def test_catalog_order(self):
        """Records follow name ID order, not input order."""
        table = make_name_table({
            'wwsFamily': 'W', 'copyright': 'C', 'designer': 'D',
        })
        self.assertEqual(
            [(_r.platformID, _r.nameID) for _r in table.records],
            [(1, 0), (1, 9), (1, 21), (3, 0), (3, 9), (3, 21)]
        )

    def test_offsets_and_header(self):
        names = {_label: _label * 3 for _label in NAME_IDS}
        table = make_name_table(names)
        self.assertEqual(table.count, 2 * len(NAME_IDS))
        self.assertEqual(table.stringOffset, 6 + 12 * table.count)
        offset = 0
        for record, string in zip(table.records, table.strings):
            self.assertEqual(record.offset, offset)
            self.assertEqual(record.length, len(string))
            offset += len(string)
        self.assertEqual(len(table), len(bytes(table)))

    def test_platform_order(self):
        table = make_name_table({'fullName': 'Full', 'sampleText': 'Sample'})
        platforms = [_r.platformID for _r in table.records]
        self.assertEqual(platforms, sorted(platforms))

    def test_unencodable_mac_string_omitted(self):
        table = make_name_table({'fontFamily': 'Test', 'description': '中文'})
        self.assertEqual(
            [(_r.platformID, _r.nameID) for _r in table.records],
            [(1, 1), (3, 1), (3, 10)]
        )
        self.assertEqual(table.strings[1:], [b'\0T\0e\0s\0t', b'\x4e\x2d\x65\x87'])
        self.assertEqual([_r.offset for _r in table.records], [0, 4, 12])
        names = parse_name_table(bytes(table))
        self.assertEqual(names.description, '中文')

    def test_mac_roman_accents(self):
        table = make_name_table({'designer': 'Frédéric'})
        self.assertEqual(table.strings[0], 'Frédéric'.encode('mac_roman'))
        self.assertEqual(table.records[0].length, 8)
        self.assertEqual(table.records[1].length, 16)

    def test_absent_values(self):
        table = make_name_table({'fontFamily': None, 'noSuchName': 'x'})
        self.assertEqual(table.count, 0)
        self.assertEqual(table.stringOffset, 6)
        self.assertEqual(bytes(table), b'\0\0\0\0\0\6')

    def test_from_name_table(self):
        names = NameTable(format=1, langTagCount=0, fullName='Full Name', unknown1='?')
        table = make_name_table(names)
        self.assertEqual(table.count, 2)
        self.assertEqual(parse_name_table(bytes(table)).fields(), {'fullName': 'Full Name'})

    def test_round_trip(self):
        names = {
            'copyright': '(c) 2024 Somebody',
            'fontFamily': 'Some Font',
            'fontSubfamily': 'Bold Italic',
            'uniqueID': 'SomeFont-BoldItalic-1.000',
            'licence': 'Licensed under the SIL Open Font Licence, version 1.1',
            'licenceURL': 'https://openfontlicense.org',
            'sampleText': 'Ça déménage, ŒUVRE',
        }
        parsed = parse_name_table(bytes(make_name_table(names)))
        self.assertEqual(parsed.fields(), names)

    def test_string_too_long(self):
        """Lengths must fit in the uint16 length field."""
        with self.assertRaises(ValueError):
            make_name_table({'description': 'x' * 40000})

    def test_offset_too_large(self):
        """Offsets must fit in the uint16 offset field."""
        names = {'description': 'x' * 30000, 'sampleText': 'y' * 30000}
        with self.assertRaises(ValueError):
            make_name_table(names)

    def test_largest_fitting_string(self):
        table = make_name_table({'description': 'x' * 0x7fff})
        self.assertEqual(
            [_r.length for _r in table.records], [0x7fff, 0xfffe]
        )
        self.assertEqual(
            [_r.length for _r in table.records],
            [len(_s) for _s in table.strings]
        )


if __name__ == '__main__':
    unittest.main()
