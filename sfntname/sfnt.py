"""
sfntname.sfnt - find the `name` table in TrueType/OpenType files

(c) 2022--2024 Rob Hagemans
licence: https://opensource.org/licenses/MIT
"""

from . import fonttools
from .fonttools import check_fonttools, from_fonttools
from .magic import FileFormatError


def _read_sfnt(infile):
    """Open an sfnt resource; infile is a path or binary stream."""
    # let fonttools parse the SFNT
    check_fonttools()
    try:
        return fonttools.TTFont(infile)
    except (fonttools.TTLibError, AssertionError) as e:
        raise FileFormatError(f'Could not read sfnt file: {e}') from e


def extract_table(infile, tag):
    """Get the raw data for a table in an sfnt file; None if not present."""
    ttfont = _read_sfnt(infile)
    if tag not in ttfont:
        return None
    try:
        return ttfont.getTableData(tag)
    except (fonttools.TTLibError, AssertionError) as e:
        raise FileFormatError(f'Could not read `{tag}` table: {e}') from e


def load_name_table(infile):
    """
    Read the `name` table from an sfnt file.

    infile: path or binary stream
    """
    ttfont = _read_sfnt(infile)
    try:
        return from_fonttools(ttfont)
    except (fonttools.TTLibError, AssertionError) as e:
        raise FileFormatError(f'Could not read `name` table: {e}') from e
