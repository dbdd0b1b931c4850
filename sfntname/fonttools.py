"""
sfntname.fonttools - interface with fontTools `name` tables

(c) 2022--2024 Rob Hagemans
licence: https://opensource.org/licenses/MIT
"""

try:
    from fontTools import ttLib
    loaded = True
except ImportError:
    ttLib = None
    loaded = False

from .magic import FileFormatError
from .parser import parse_name_table


if not loaded:
    def check_fonttools(*args, **kwargs):
        raise FileFormatError(
            'Reading sfnt files and converting `name` tables requires '
            'package `fontTools`, which is not available.'
        )
else:
    def check_fonttools(*args, **kwargs):
        pass

    from fontTools.ttLib import TTLibError, newTable
    from fontTools.ttLib.ttFont import TTFont


def to_fonttools(fragment):
    """Convert a built name table to a fontTools `name` table object."""
    check_fonttools()
    table = newTable('name')
    # fontTools doesn't need the font object to decompile `name`
    table.decompile(bytes(fragment), None)
    return table


def from_fonttools(ttfont):
    """Parse the `name` table of a fontTools TTFont."""
    check_fonttools()
    if 'name' not in ttfont:
        raise FileFormatError('No `name` table in font.')
    return parse_name_table(ttfont.getTableData('name'))
