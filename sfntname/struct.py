"""
sfntname.struct - binary structures

(c) 2019--2024 Rob Hagemans
licence: https://opensource.org/licenses/MIT
"""

import ctypes
from types import SimpleNamespace


class StructError(ValueError):
    """Binary data could not be read into a structure."""


##############################################################################
# binary structs


# type strings
TYPES = {
    'uint16': ctypes.c_uint16,
}


def _parse_type(atype):
    """Convert struct member type specification to ctypes type."""
    try:
        return TYPES[atype]
    except KeyError:
        pass
    raise ValueError('Field type `{}` not understood'.format(atype))


class _WrappedCValue:
    """Wrapper for ctypes value."""

    @classmethod
    def from_cvalue(cls, cvalue, type):
        obj = cls()
        obj._cvalue = cvalue
        obj._type = type
        return obj

    def __bytes__(self):
        return bytes(self._cvalue)


class _WrappedCType:
    """Wrapper for ctypes type, factory for _WrappedCValue objects."""

    def __mul__(self, count):
        """Create an array."""
        return self.array(count)

    def from_cvalue(self, cvalue):
        """Instantiate a variable from a cvalue."""
        # pylint: disable=no-member
        return self._value_cls.from_cvalue(cvalue, self)

    def from_bytes(self, data, offset=0):
        """Read from a buffer at the given offset."""
        if offset < 0:
            raise StructError(f'Negative offset {offset} into buffer.')
        # pylint: disable=no-member
        try:
            cvalue = self._ctype.from_buffer_copy(data, offset)
        except ValueError as e:
            raise StructError(
                f'Could not read {self.size} bytes at offset {offset} '
                f'from buffer of length {len(data)}: {e}'
            ) from e
        return self.from_cvalue(cvalue)

    def read_from(self, stream, offset=None):
        """Read from file."""
        if offset is not None:
            stream.seek(offset, 0)
        return self.from_bytes(stream.read(self.size))

    def array(self, count):
        return ArrayType(self, count)

    @property
    def size(self):
        # pylint: disable=no-member
        return ctypes.sizeof(self._ctype)


class IntValue(_WrappedCValue):
    """Wrapper for integer scalars."""

    def __int__(self):
        return self._cvalue.value

    def __index__(self):
        return int(self)

    def __eq__(self, other):
        return int(self) == other

    def __hash__(self):
        return hash(int(self))

    def __repr__(self):
        return type(self).__name__ + '({})'.format(self._cvalue.value)


class ScalarType(_WrappedCType):
    """Wrapper for big-endian scalar types. Mostly used to define arrays."""

    _value_cls = IntValue

    def __init__(self, ctype):
        self._ctype = ctype.__ctype_be__


class StructValue(_WrappedCValue):
    """Wrapper for ctypes Structure."""

    def __getattr__(self, attr):
        if not attr.startswith('_'):
            return getattr(self._cvalue, attr)
        raise AttributeError(attr)

    def __setattr__(self, attr, value):
        if not attr.startswith('_'):
            return setattr(self._cvalue, attr, value)
        return super().__setattr__(attr, value)

    @property
    def __dict__(self):
        return dict(
            (field, getattr(self, field))
            for field, *_ in self._cvalue._fields_
        )

    def __eq__(self, other):
        if not isinstance(other, StructValue):
            return NotImplemented
        return vars(self) == vars(other)

    def __repr__(self):
        props = vars(self)
        return type(self).__name__ + '({})'.format(
            ', '.join(
                '{}={}'.format(_fld, _val)
                for _fld, _val in props.items()
            )
        )


class StructType(_WrappedCType):
    """
    Represent a big-endian structured type.

    mystruct = StructType(first='uint16', second='uint16')
    s = mystruct(first=1, second=2)

    assert bytes(s) == b'\0\1\0\2'
    assert mystruct.from_bytes(b'\0\1\0\2') == s
    """

    _value_cls = StructValue

    def __init__(self, **description):
        """Create a structured type."""

        class _CStruct(ctypes.BigEndianStructure):
            _fields_ = tuple(
                (_field, _parse_type(_type))
                for _field, _type in description.items()
            )
            _pack_ = True

        self._ctype = _CStruct
        self.element_types = description

    def __call__(self, **kwargs):
        """Instantiate a struct variable."""
        return self.from_cvalue(self._ctype(**kwargs))


class ArrayValue(_WrappedCValue):
    """Wrapper for ctypes arrays."""

    def __getitem__(self, item):
        value = self._cvalue[item]
        if isinstance(value, ctypes.Structure):
            return self._type.element_type.from_cvalue(value)
        return value

    def __iter__(self):
        return (self[_i] for _i in range(len(self)))

    def __len__(self):
        return len(self._cvalue)

    def __repr__(self):
        return type(self).__name__ + '({})'.format(
            ', '.join(str(_s) for _s in iter(self))
        )


class ArrayType(_WrappedCType):
    """Wrapper for ctypes array type."""

    _value_cls = ArrayValue

    def __init__(self, element_type, count):
        self._count = count
        self.element_type = element_type
        self._ctype = element_type._ctype * count


big_endian = SimpleNamespace(
    Struct=StructType,
    uint16=ScalarType(ctypes.c_uint16),
)
