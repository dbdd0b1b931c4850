"""
sfntname.builder - create the `name` table

(c) 2023--2024 Rob Hagemans
licence: https://opensource.org/licenses/MIT
"""

import logging
from types import SimpleNamespace

from .names import NAME_IDS
from .charsets import get_mac_charset, encode_mac_string
from .records import (
    NAME_HEADER, NAME_RECORD, make_name_record, encode_utf16,
    PLATFORM_MAC, MAC_ENCODING_ROMAN, MAC_LANGUAGE_ENGLISH,
    PLATFORM_WINDOWS, WINDOWS_ENCODING_UNICODE_BMP, WINDOWS_LANGUAGE_EN_US,
)

# length and offset fields are uint16
_MAX_USHORT = 0xffff


class NameTableFragment:
    """
    Binary `name` table: header fields, name records and string storage.

    Offsets are computed by the builder; records[i] points at strings[i].
    """

    def __init__(self, records=(), strings=()):
        self.format = 0
        self.records = list(records)
        self.strings = list(strings)
        self.count = len(self.records)
        self.stringOffset = NAME_HEADER.size + NAME_RECORD.size * self.count

    @property
    def header(self):
        return NAME_HEADER(
            format=self.format, count=self.count, stringOffset=self.stringOffset
        )

    def __bytes__(self):
        return b''.join((
            bytes(self.header),
            *(bytes(_rec) for _rec in self.records),
            *self.strings,
        ))

    def __len__(self):
        return self.stringOffset + sum(len(_s) for _s in self.strings)

    def __repr__(self):
        return (
            f'{type(self).__name__}(format={self.format}, count={self.count}, '
            f'stringOffset={self.stringOffset}, records={self.records!r}, '
            f'strings={self.strings!r})'
        )


def _mac_roman(name_id, string):
    """Macintosh, Roman, English; None if not encodable."""
    charset = get_mac_charset(MAC_ENCODING_ROMAN, MAC_LANGUAGE_ENGLISH)
    string_bytes = encode_mac_string(string, charset)
    if string_bytes is None:
        logging.debug(
            'Name %d not representable in %s, omitting Macintosh record.',
            name_id, charset.value
        )
        return None
    return (PLATFORM_MAC, MAC_ENCODING_ROMAN, MAC_LANGUAGE_ENGLISH), string_bytes


def _windows_unicode(name_id, string):
    """Windows, Unicode BMP, US English."""
    return (
        (PLATFORM_WINDOWS, WINDOWS_ENCODING_UNICODE_BMP, WINDOWS_LANGUAGE_EN_US),
        encode_utf16(string)
    )


def make_name_table(names):
    """
    Create a binary `name` table from name strings.

    names: mapping or namespace of name labels to strings. Labels are those
        in NAME_IDS; None values and other labels are ignored.

    Macintosh Roman records come first, followed by Windows Unicode records.
    Strings that can't be encoded in Mac Roman only get a Windows record.
    """
    if isinstance(names, SimpleNamespace):
        names = vars(names)
    strings = tuple(
        (_id, names[_label])
        for _id, _label in enumerate(NAME_IDS)
        if names.get(_label, None) is not None
    )
    records, storage = [], []
    offset = 0
    for encoder in (_mac_roman, _windows_unicode):
        for name_id, string in strings:
            encoded = encoder(name_id, str(string))
            if encoded is None:
                continue
            (platform_id, encoding_id, language_id), string_bytes = encoded
            if len(string_bytes) > _MAX_USHORT or offset > _MAX_USHORT:
                raise ValueError(
                    f'Name {name_id} does not fit in `name` table: '
                    f'length {len(string_bytes)} at offset {offset}, '
                    f'maximum is {_MAX_USHORT}.'
                )
            records.append(make_name_record(
                platform_id, encoding_id, language_id,
                name_id, len(string_bytes), offset
            ))
            storage.append(string_bytes)
            offset += len(string_bytes)
    return NameTableFragment(records, storage)
