"""The bucket descriptor: a validated name plus a creation timestamp."""
from datetime import datetime
from typing import Optional, Union

from .dates import format_timestamp, parse_timestamp
from .naming import validate_name

class Bucket:
    """An S3 bucket as listed by the storage provider.

    ``Bucket()`` is an empty descriptor. Use :meth:`create` to build one from a
    name supplied by a caller (validated) and :meth:`from_trusted` when the
    name comes from a provider response (not re-validated).

    The creation date is kept as the exact text it was set with; the
    :attr:`creation_date` property re-parses that text on every read.
    """

    __slots__ = ("_name", "_creation_date")

    xml_tag = "Bucket"

    def __init__(self):
        self._name: Optional[str] = None
        self._creation_date: Optional[str] = None

    @classmethod
    def create(cls, name: Optional[str], creation_date: Union[str, datetime, None] = None) -> "Bucket":
        bucket = cls()
        bucket._name = validate_name(name)
        if creation_date is not None:
            bucket.creation_date = creation_date
        return bucket

    @classmethod
    def from_trusted(cls, name: Optional[str], creation_date: Optional[str] = None) -> "Bucket":
        # name is taken as-is; the date text is still checked against the layout
        bucket = cls()
        bucket._name = name
        if creation_date is not None:
            bucket.set_creation_date_text(creation_date)
        return bucket

    @property
    def name(self) -> Optional[str]:
        return self._name

    @property
    def creation_date_text(self) -> Optional[str]:
        return self._creation_date

    @property
    def creation_date(self) -> Optional[datetime]:
        if self._creation_date is None:
            return None
        return parse_timestamp(self._creation_date)

    @creation_date.setter
    def creation_date(self, value: Union[str, datetime]) -> None:
        if isinstance(value, datetime):
            self._creation_date = format_timestamp(value)
        else:
            self.set_creation_date_text(value)

    def set_creation_date_text(self, text: str) -> None:
        """Store `text` verbatim after checking it parses; on failure nothing changes."""
        parse_timestamp(text)
        self._creation_date = text

    def __eq__(self, other):
        if not isinstance(other, Bucket):
            return NotImplemented
        return (self._name, self._creation_date) == (other._name, other._creation_date)

    __hash__ = None

    def __repr__(self):
        return f"Bucket(name={self._name!r}, creation_date={self._creation_date!r})"
