"""Unit tests for the bucket descriptor."""
from datetime import datetime, timedelta, timezone

import pytest

from bucketdesc.bucket import Bucket
from bucketdesc.errors import BucketNameError, DateFormatError, NameErrorKind


class TestConstruction:

    def test_empty_bucket(self):
        bucket = Bucket()
        assert bucket.name is None
        assert bucket.creation_date is None
        assert bucket.creation_date_text is None

    def test_create_validates_name(self):
        assert Bucket.create("my-bucket-1").name == "my-bucket-1"

    @pytest.mark.parametrize(
        "name,kind",
        [
            (None, NameErrorKind.NULL),
            ("ab", NameErrorKind.LENGTH_OUT_OF_RANGE),
            ("my.bucket", NameErrorKind.CONTAINS_DOT),
            ("-abc-", NameErrorKind.PATTERN_MISMATCH),
        ],
    )
    def test_create_rejects_invalid_names(self, name, kind):
        with pytest.raises(BucketNameError) as excinfo:
            Bucket.create(name)
        assert excinfo.value.kind is kind

    def test_create_with_creation_date(self):
        bucket = Bucket.create("my-bucket", "2021-07-04T12:30:00.000")
        assert bucket.creation_date_text == "2021-07-04T12:30:00.000"

    def test_from_trusted_skips_name_validation(self):
        bucket = Bucket.from_trusted("Legacy.Bucket", "2021-07-04T12:30:00.000")
        assert bucket.name == "Legacy.Bucket"

    def test_from_trusted_still_checks_date(self):
        with pytest.raises(DateFormatError):
            Bucket.from_trusted("legacy", "yesterday")

    def test_name_is_read_only(self):
        bucket = Bucket.create("my-bucket")
        with pytest.raises(AttributeError):
            bucket.name = "other"


class TestCreationDate:

    def test_set_text_then_read_datetime(self):
        bucket = Bucket.create("my-bucket")
        bucket.creation_date = "2021-07-04T12:30:00.000"
        assert bucket.creation_date == datetime(2021, 7, 4, 12, 30, tzinfo=timezone.utc)

    def test_text_is_kept_verbatim(self):
        bucket = Bucket()
        bucket.set_creation_date_text("2020-01-01T00:00:00.000")
        assert bucket.creation_date_text == "2020-01-01T00:00:00.000"

    def test_malformed_text_leaves_value_unchanged(self):
        bucket = Bucket()
        bucket.creation_date = "2020-01-01T00:00:00.000"
        with pytest.raises(DateFormatError):
            bucket.creation_date = "not-a-date"
        assert bucket.creation_date_text == "2020-01-01T00:00:00.000"

    def test_malformed_text_on_empty_bucket(self):
        bucket = Bucket()
        with pytest.raises(DateFormatError):
            bucket.set_creation_date_text("not-a-date")
        assert bucket.creation_date_text is None

    def test_out_of_range_datetime_leaves_value_unchanged(self):
        bucket = Bucket()
        bucket.creation_date = "2020-01-01T00:00:00.000"
        with pytest.raises(DateFormatError):
            bucket.creation_date = datetime(1, 1, 1, tzinfo=timezone(timedelta(hours=1)))
        assert bucket.creation_date_text == "2020-01-01T00:00:00.000"

    def test_set_datetime_stores_formatted_text(self):
        bucket = Bucket()
        bucket.creation_date = datetime(2021, 7, 4, 12, 30, 0, 500999, tzinfo=timezone.utc)
        assert bucket.creation_date_text == "2021-07-04T12:30:00.500"

    def test_read_reparses_stored_text(self):
        bucket = Bucket()
        bucket.creation_date = "2021-07-04T12:30:00.000"
        first = bucket.creation_date
        second = bucket.creation_date
        assert first == second
        assert first is not second

    def test_read_guards_against_corrupt_text(self):
        bucket = Bucket()
        bucket._creation_date = "garbage"
        with pytest.raises(DateFormatError):
            bucket.creation_date


class TestEquality:

    def test_equal_fields(self):
        a = Bucket.create("my-bucket", "2021-07-04T12:30:00.000")
        b = Bucket.from_trusted("my-bucket", "2021-07-04T12:30:00.000")
        assert a == b

    def test_different_date_text(self):
        a = Bucket.create("my-bucket", "2021-07-04T12:30:00.000")
        b = Bucket.create("my-bucket")
        assert a != b

    def test_not_hashable(self):
        with pytest.raises(TypeError):
            hash(Bucket())

    def test_repr(self):
        assert repr(Bucket.create("my-bucket")) == "Bucket(name='my-bucket', creation_date=None)"
