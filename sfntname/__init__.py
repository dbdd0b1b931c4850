"""
sfntname - read and write the TrueType/OpenType `name` table

(c) 2019--2024 Rob Hagemans
licence: https://opensource.org/licenses/MIT
"""

from .names import NAME_IDS, NameTable, name_label, name_id
from .charsets import MacCharset, get_mac_charset, encode_mac_string
from .records import NAME_HEADER, NAME_RECORD, make_name_record
from .parser import parse_name_table
from .builder import make_name_table, NameTableFragment
from .sfnt import load_name_table, extract_table
from .magic import FileFormatError
from .struct import StructError
from .fonttools import to_fonttools, from_fonttools


__version__ = '0.1.0'
