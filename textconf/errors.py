"""Exception types raised while mapping values to and from config documents."""


class MappingError(Exception):
    """A value could not be mapped to or from a configuration node."""


class CodecError(MappingError):
    """A text tree could not be encoded or decoded."""


class TypeCoercionError(MappingError):
    """A stored field does not have the expected shape."""

    def __init__(self, path: tuple[str, ...], expected: str, value: object):
        self.path = path
        self.expected = expected
        self.value = value
        super().__init__(
            f"Expected {expected} at '{'.'.join(path)}', got {type(value).__name__}: {value!r}"
        )


class SerializerNotFoundError(MappingError):
    """No serializer is registered for the requested type."""
