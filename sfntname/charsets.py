"""
sfntname.charsets - legacy Macintosh character sets for the `name` table

(c) 2023--2024 Rob Hagemans
licence: https://opensource.org/licenses/MIT
"""

from enum import Enum


class MacCharset(Enum):
    """Single-byte Macintosh character sets, by IANA-style charset name."""

    ROMAN = 'macintosh'
    ICELANDIC = 'x-mac-icelandic'
    TURKISH = 'x-mac-turkish'
    CROATIAN = 'x-mac-croatian'
    CENTRAL_EUROPE = 'x-mac-ce'
    ROMANIAN = 'x-mac-romanian'
    GREEK = 'x-mac-greek'
    CYRILLIC = 'x-mac-cyrillic'

    @property
    def codec(self):
        """Name of the Python codec implementing this charset."""
        return _CODECS[self]


# Python codec names
_CODECS = {
    MacCharset.ROMAN: 'mac_roman',
    MacCharset.ICELANDIC: 'mac_iceland',
    MacCharset.TURKISH: 'mac_turkish',
    MacCharset.CROATIAN: 'mac_croatian',
    MacCharset.CENTRAL_EUROPE: 'mac_latin2',
    MacCharset.ROMANIAN: 'mac_romanian',
    MacCharset.GREEK: 'mac_greek',
    MacCharset.CYRILLIC: 'mac_cyrillic',
}


# wildcard for the language ID
ANY = None

# (mac encoding ID, mac language ID) -> charset
# the encoding ID is the Macintosh script code; for smRoman the charset also
# depends on the language
# https://developer.apple.com/fonts/TrueType-Reference-Manual/RM06/Chap6name.html
# https://github.com/fonttools/fonttools/issues/236
MAC_CHARSETS = {
    # smRoman
    (0, 0): MacCharset.ROMAN,
    (0, 15): MacCharset.ICELANDIC,
    (0, 17): MacCharset.TURKISH,
    (0, 18): MacCharset.CROATIAN,
    (0, 24): MacCharset.CENTRAL_EUROPE,
    (0, 25): MacCharset.CENTRAL_EUROPE,
    (0, 26): MacCharset.CENTRAL_EUROPE,
    (0, 27): MacCharset.CENTRAL_EUROPE,
    (0, 28): MacCharset.CENTRAL_EUROPE,
    (0, 36): MacCharset.CENTRAL_EUROPE,
    (0, 37): MacCharset.ROMANIAN,
    (0, 38): MacCharset.CENTRAL_EUROPE,
    (0, 39): MacCharset.CENTRAL_EUROPE,
    (0, 40): MacCharset.CENTRAL_EUROPE,
    # other scripts, any language
    (6, ANY): MacCharset.GREEK,
    (7, ANY): MacCharset.CYRILLIC,
    (29, ANY): MacCharset.CENTRAL_EUROPE,
    (35, ANY): MacCharset.TURKISH,
    (37, ANY): MacCharset.ICELANDIC,
}


def get_mac_charset(encoding_id, language_id=ANY):
    """
    Find the single-byte charset for a Macintosh encoding and language.

    Entries for the exact pair take precedence over language wildcards.
    Returns None if the combination is not supported.
    """
    try:
        return MAC_CHARSETS[encoding_id, language_id]
    except KeyError:
        return MAC_CHARSETS.get((encoding_id, ANY), None)


def encode_mac_string(text, charset):
    """
    Encode a string to a Macintosh single-byte charset.

    Returns None if any character can't be represented in the charset.
    """
    charset = MacCharset(charset)
    try:
        return text.encode(charset.codec)
    except UnicodeEncodeError:
        return None
