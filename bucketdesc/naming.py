"""Bucket name rules for S3-compatible endpoints."""
import logging
import re
from typing import Optional

from .errors import BucketNameError, NameErrorKind

logger = logging.getLogger(__name__)

MIN_NAME_LENGTH = 3
MAX_NAME_LENGTH = 63
NAME_PATTERN = re.compile(r"^[a-z0-9][a-z0-9\-]+[a-z0-9]$")

RESTRICTIONS_URL = "http://docs.aws.amazon.com/AmazonS3/latest/dev/BucketRestrictions.html"

def check_name(candidate: Optional[str]) -> Optional[BucketNameError]:
    """Return the first rule `candidate` violates, or None if it is a valid bucket name.

    Rules are checked in a fixed order (null, length, dot, pattern) so the
    reported error is deterministic.
    """
    if candidate is None:
        return BucketNameError(NameErrorKind.NULL, "(null)", "null bucket name")

    if len(candidate) < MIN_NAME_LENGTH or len(candidate) > MAX_NAME_LENGTH:
        return BucketNameError(
            NameErrorKind.LENGTH_OUT_OF_RANGE,
            candidate,
            f"bucket name must be at least {MIN_NAME_LENGTH} and no more than {MAX_NAME_LENGTH} characters long",
        )

    if "." in candidate:
        return BucketNameError(
            NameErrorKind.CONTAINS_DOT,
            candidate,
            "bucket name with '.' is not allowed due to SSL certificate verification error.  "
            f"For more information refer {RESTRICTIONS_URL}",
        )

    # fullmatch: "$" alone would accept a trailing newline
    if not NAME_PATTERN.fullmatch(candidate):
        return BucketNameError(
            NameErrorKind.PATTERN_MISMATCH,
            candidate,
            f"bucket name does not follow Amazon S3 standards.  For more information refer {RESTRICTIONS_URL}",
        )

    return None

def validate_name(candidate: Optional[str]) -> str:
    err = check_name(candidate)
    if err is not None:
        logger.debug("rejected bucket name %r: %s", candidate, err.kind.value)
        raise err
    return candidate

def is_valid_name(candidate: Optional[str]) -> bool:
    return check_name(candidate) is None
