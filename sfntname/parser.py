"""
sfntname.parser - read the `name` table

(c) 2022--2024 Rob Hagemans
licence: https://opensource.org/licenses/MIT
"""

import logging

from .names import NameTable, name_label, UNKNOWN_PREFIX
from .records import (
    NAME_HEADER, NAME_RECORD, LANG_TAG_COUNT,
    read_name_records, decode_utf16,
    PLATFORM_WINDOWS, WINDOWS_ENCODING_UNICODE_BMP, WINDOWS_LANGUAGE_EN_US,
)


# the only platform, encoding, language triple we decode
_ACCEPTED = (
    PLATFORM_WINDOWS, WINDOWS_ENCODING_UNICODE_BMP, WINDOWS_LANGUAGE_EN_US
)


def parse_name_table(data, start=0, ltag=None):
    """
    Parse a binary `name` table.

    Only Windows, Unicode BMP, US English names are decoded; other records
    are ignored. Format 1 language-tag records are not resolved, only their
    count is read.

    data: buffer holding the table
    start: offset of the table in the buffer (default 0)
    ltag: language tags from the `ltag` table; currently not used
    """
    header = NAME_HEADER.from_bytes(data, start)
    names = NameTable(format=header.format)
    storage = start + header.stringOffset
    records_offset = start + NAME_HEADER.size
    logging.debug(
        'name table format %d with %d records, storage at %d',
        header.format, header.count, storage
    )
    unknown_count = 0
    for record in read_name_records(data, records_offset, header.count):
        triple = (record.platformID, record.encodingID, record.languageID)
        if triple != _ACCEPTED:
            logging.debug(
                'Skipping name record %d for platform %d, encoding %d, language %#x',
                record.nameID, *triple
            )
            continue
        if record.length % 2:
            logging.debug(
                'Odd length %d for UTF-16 name record %d, last byte dropped',
                record.length, record.nameID
            )
        string = decode_utf16(data, storage + record.offset, record.length)
        label = name_label(record.nameID)
        if label is None:
            unknown_count += 1
            label = f'{UNKNOWN_PREFIX}{unknown_count}'
        setattr(names, label, string)
    if header.format == 1:
        lang_tag_offset = records_offset + header.count * NAME_RECORD.size
        names.langTagCount = int(LANG_TAG_COUNT.from_bytes(data, lang_tag_offset))
    return names
