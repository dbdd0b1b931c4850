"""
sfntname.names - name IDs and the decoded `name` table

(c) 2019--2024 Rob Hagemans
licence: https://opensource.org/licenses/MIT
"""

from types import SimpleNamespace
from textwrap import indent


# labels for name IDs 0--22, in name ID order
NAME_IDS = (
    'copyright',
    'fontFamily',
    'fontSubfamily',
    'uniqueID',
    'fullName',
    'version',
    'postScriptName',
    'trademark',
    'manufacturer',
    'designer',
    'description',
    'manufacturerURL',
    'designerURL',
    'licence',
    'licenceURL',
    # name ID 15 is reserved
    'reserved',
    'preferredFamily',
    'preferredSubfamily',
    'compatibleFullName',
    'sampleText',
    'postScriptFindFontName',
    'wwsFamily',
    'wwsSubfamily',
)

# prefix for labels of name IDs not in the table above
UNKNOWN_PREFIX = 'unknown'

# table fields that are not name strings
_TABLE_FIELDS = ('format', 'langTagCount')


def name_label(name_id):
    """Get label for a name ID, or None if it has no known meaning."""
    if 0 <= name_id < len(NAME_IDS):
        return NAME_IDS[name_id]
    return None


def name_id(label):
    """Get name ID for a label; raise KeyError if not known."""
    try:
        return NAME_IDS.index(label)
    except ValueError as e:
        raise KeyError(label) from e


class NameTable(SimpleNamespace):
    """Decoded `name` table: format and one attribute per name string."""

    def __init__(self, format=0, **kwargs):
        super().__init__(format=format, **kwargs)

    def fields(self):
        """Name strings by label, in the order they were first decoded."""
        return {
            _k: _v for _k, _v in vars(self).items()
            if _k not in _TABLE_FIELDS
        }

    def __str__(self):
        return '\n'.join(
            f'{_k}: ' + (indent('\n' + _v, '    ') if '\n' in _v else _v)
            for _k, _v in ((str(_k), str(_v)) for _k, _v in vars(self).items())
        )

    def __repr__(self):
        return (
            type(self).__name__
            + '(\n' +
            indent(
                '\n'.join(f'{_k}={_v!r},' for _k, _v in vars(self).items()),
                '    '
            )
            + '\n)'
        )
