"""
sfntname.records - `name` table header and name records

(c) 2023--2024 Rob Hagemans
licence: https://opensource.org/licenses/MIT
"""

from .struct import big_endian as be


# platform, encoding and language IDs
PLATFORM_MAC = 1
MAC_ENCODING_ROMAN = 0
MAC_LANGUAGE_ENGLISH = 0

PLATFORM_WINDOWS = 3
WINDOWS_ENCODING_UNICODE_BMP = 1
WINDOWS_LANGUAGE_EN_US = 0x0409


# https://learn.microsoft.com/en-us/typography/opentype/spec/name
NAME_HEADER = be.Struct(
    # 0 or 1
    format='uint16',
    # number of name records
    count='uint16',
    # offset to string storage, from start of table
    stringOffset='uint16',
    # followed by:
    # name records
    # [format 1] langTagCount, lang tag records
    # string storage
)

NAME_RECORD = be.Struct(
    platformID='uint16',
    encodingID='uint16',
    languageID='uint16',
    nameID='uint16',
    # string length in bytes
    length='uint16',
    # string offset from start of storage area
    offset='uint16',
)

# format 1 only
LANG_TAG_COUNT = be.uint16


def make_name_record(platformID, encodingID, languageID, nameID, length, offset):
    """Create a name record."""
    return NAME_RECORD(
        platformID=platformID,
        encodingID=encodingID,
        languageID=languageID,
        nameID=nameID,
        length=length,
        offset=offset,
    )


def read_name_records(data, offset, count):
    """Read `count` consecutive name records, in file order."""
    return tuple((NAME_RECORD * count).from_bytes(data, offset))


def encode_utf16(text):
    """Encode string as big-endian 16-bit code units."""
    # astral characters come out as surrogate pairs
    return text.encode('utf-16-be', 'surrogatepass')


def decode_utf16(data, offset, byte_length):
    """
    Decode big-endian 16-bit code units, one character per unit.
    Surrogate pairs are not recombined; a trailing odd byte is ignored.
    """
    if byte_length < 2:
        return ''
    units = (be.uint16 * (byte_length // 2)).from_bytes(data, offset)
    return ''.join(chr(_unit) for _unit in units)
