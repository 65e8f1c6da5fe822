"""Error taxonomy for decoding, encoding and projecting transit entities."""


class TransitTrailError(Exception):
    """Base class for all errors raised by transit_trail.

    ``path`` is the dotted location of the offending field inside the payload,
    e.g. ``segments[2].from.origin``. It is empty when the error concerns the
    top-level value.
    """

    def __init__(self, message: str, path: str = "") -> None:
        super().__init__(message)
        self.message = message
        self.path = path

    def __str__(self) -> str:
        return f"{self.path}: {self.message}" if self.path else self.message

    def at(self, prefix: str) -> "TransitTrailError":
        """Prepend ``prefix`` to the error path and return the error for re-raising."""
        if not self.path:
            self.path = prefix
        elif self.path.startswith("["):
            self.path = f"{prefix}{self.path}"
        else:
            self.path = f"{prefix}.{self.path}"
        return self


class DecodeError(TransitTrailError, ValueError):
    """A wire payload could not be turned into a domain value."""


class MalformedPayload(DecodeError):
    """A primitive is missing, has the wrong type, or is out of range."""


class UnknownVariant(DecodeError):
    """A discriminant names none of the known variants."""


class NoVariantMatched(DecodeError):
    """An untagged object carries none of the variant keys."""


class AmbiguousVariant(DecodeError):
    """An untagged object carries more than one variant key."""


class FieldMismatch(DecodeError):
    """A tagged payload does not carry exactly the fields of its declared kind."""


class SegmentShapeMismatch(DecodeError):
    """A trip segment's populated fields break its kind's field contract."""


class MissingCentre(TransitTrailError, ValueError):
    """A location has no geographic centre to project onto a point."""
