from sqlalchemy import String
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

from .bucket import Bucket
from .naming import MAX_NAME_LENGTH

class Base(DeclarativeBase):
    pass

class BucketRecord(Base):
    __tablename__ = "buckets"

    id: Mapped[int] = mapped_column(primary_key=True)
    name: Mapped[str] = mapped_column(String(MAX_NAME_LENGTH), nullable=False, unique=True)
    # fixed layout text, kept byte-for-byte as it was accepted
    creation_date: Mapped[str] = mapped_column(String(23), nullable=False)

    @classmethod
    def from_bucket(cls, bucket: Bucket) -> "BucketRecord":
        return cls(name=bucket.name, creation_date=bucket.creation_date_text)

    def to_bucket(self) -> Bucket:
        return Bucket.from_trusted(self.name, self.creation_date)
