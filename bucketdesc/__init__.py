from .bucket import Bucket
from .dates import format_timestamp, is_valid_timestamp, parse_timestamp
from .errors import (
    BucketError,
    BucketNameError,
    BucketXMLError,
    DateErrorKind,
    DateFormatError,
    NameErrorKind,
)
from .naming import check_name, is_valid_name, validate_name
from .wire import (
    ListBucketsResult,
    bucket_from_xml,
    bucket_to_xml,
    buckets_from_xml,
    buckets_to_xml,
)
