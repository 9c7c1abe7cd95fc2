"""XML wire format for buckets, as returned by S3-compatible ListBuckets calls.

CreationDate text must be in the fixed layout with no zone suffix, so provider
listings that write dates like ``2021-07-04T12:30:00.000Z`` will not parse.
"""
import logging
import xml.etree.ElementTree as ET
from dataclasses import dataclass, field
from typing import Iterable, List, Optional

from .bucket import Bucket
from .errors import BucketXMLError

logger = logging.getLogger(__name__)

S3_NAMESPACE = "http://s3.amazonaws.com/doc/2006-03-01/"

NAME_TAG = "Name"
CREATION_DATE_TAG = "CreationDate"

@dataclass
class ListBucketsResult:
    owner_id: Optional[str] = None
    owner_name: Optional[str] = None
    buckets: List[Bucket] = field(default_factory=list)

def _local(tag: str) -> str:
    # "{namespace}Tag" -> "Tag"
    return tag.rsplit("}", 1)[-1]

def _child(element: ET.Element, tag: str) -> Optional[ET.Element]:
    for child in element:
        if _local(child.tag) == tag:
            return child
    return None

def _child_text(element: ET.Element, tag: str) -> Optional[str]:
    child = _child(element, tag)
    if child is None:
        return None
    return child.text or ""

def _parse(text) -> ET.Element:
    try:
        return ET.fromstring(text)
    except ET.ParseError as e:
        raise BucketXMLError(f"malformed XML: {e}") from e

def bucket_to_element(bucket: Bucket, namespace: Optional[str] = None) -> ET.Element:
    prefix = f"{{{namespace}}}" if namespace else ""
    element = ET.Element(prefix + Bucket.xml_tag)
    if bucket.name is not None:
        ET.SubElement(element, prefix + NAME_TAG).text = bucket.name
    if bucket.creation_date_text is not None:
        ET.SubElement(element, prefix + CREATION_DATE_TAG).text = bucket.creation_date_text
    return element

def bucket_to_xml(bucket: Bucket) -> str:
    return ET.tostring(bucket_to_element(bucket), encoding="unicode")

def bucket_from_element(element: ET.Element) -> Bucket:
    if _local(element.tag) != Bucket.xml_tag:
        raise BucketXMLError(f"expected <{Bucket.xml_tag}> element, got <{_local(element.tag)}>")
    return Bucket.from_trusted(_child_text(element, NAME_TAG), _child_text(element, CREATION_DATE_TAG))

def bucket_from_xml(text) -> Bucket:
    return bucket_from_element(_parse(text))

def buckets_to_xml(
    buckets: Iterable[Bucket],
    owner_id: Optional[str] = None,
    owner_name: Optional[str] = None,
) -> str:
    ns = f"{{{S3_NAMESPACE}}}"
    root = ET.Element(ns + "ListAllMyBucketsResult")

    if owner_id is not None or owner_name is not None:
        owner = ET.SubElement(root, ns + "Owner")
        if owner_id is not None:
            ET.SubElement(owner, ns + "ID").text = owner_id
        if owner_name is not None:
            ET.SubElement(owner, ns + "DisplayName").text = owner_name

    container = ET.SubElement(root, ns + "Buckets")
    for bucket in buckets:
        container.append(bucket_to_element(bucket, namespace=S3_NAMESPACE))

    return ET.tostring(root, encoding="unicode", default_namespace=S3_NAMESPACE)

def buckets_from_xml(text) -> ListBucketsResult:
    root = _parse(text)
    if _local(root.tag) != "ListAllMyBucketsResult":
        raise BucketXMLError(f"expected <ListAllMyBucketsResult> document, got <{_local(root.tag)}>")

    result = ListBucketsResult()
    owner = _child(root, "Owner")
    if owner is not None:
        result.owner_id = _child_text(owner, "ID")
        result.owner_name = _child_text(owner, "DisplayName")

    container = _child(root, "Buckets")
    if container is not None:
        for element in container:
            if _local(element.tag) == Bucket.xml_tag:
                result.buckets.append(bucket_from_element(element))

    logger.debug("parsed %d buckets from listing", len(result.buckets))
    return result
