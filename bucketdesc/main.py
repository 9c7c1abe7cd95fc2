import logging
import os
from datetime import datetime, timezone

from fastapi import Depends, FastAPI, HTTPException, Request, status
from fastapi.responses import JSONResponse, Response
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from .bucket import Bucket
from .dates import format_timestamp
from .db import engine, get_db, wait_for_db
from .errors import BucketError, BucketNameError, DateFormatError
from .models import Base, BucketRecord
from .schemas import BucketCreate, BucketErrorOut, BucketOut
from .wire import bucket_to_xml, buckets_to_xml

LOG_LEVEL = os.environ.get("BUCKETDESC_LOG_LEVEL", "INFO").upper()
PUBLIC_NAME = os.environ.get("BUCKETDESC_PUBLIC_NAME", "bucketdesc")

logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
logger = logging.getLogger(__name__)

XML_MEDIA_TYPE = "application/xml"

app = FastAPI(title=PUBLIC_NAME)

@app.on_event("startup")
def startup():
    wait_for_db()
    Base.metadata.create_all(bind=engine)

@app.exception_handler(BucketError)
async def bucket_error_handler(request: Request, exc: BucketError):
    if isinstance(exc, BucketNameError):
        body = BucketErrorOut(kind=exc.kind.value, detail=exc.message, value=exc.name)
    elif isinstance(exc, DateFormatError):
        value = exc.text if isinstance(exc.text, str) else None
        body = BucketErrorOut(kind=exc.kind.value, detail=exc.message, value=value)
    else:
        body = BucketErrorOut(kind="invalid", detail=str(exc))
    logger.debug("%s %s rejected: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=422, content=body.model_dump())

def _get_record(db: Session, bucket_name: str) -> BucketRecord:
    record = db.query(BucketRecord).filter(BucketRecord.name == bucket_name).one_or_none()
    if not record:
        raise HTTPException(status_code=404, detail="Bucket not found")
    return record

@app.get("/health")
def health():
    return {"status": "ok"}

@app.post("/buckets", response_model=BucketOut, status_code=status.HTTP_201_CREATED)
def create_bucket(payload: BucketCreate, db: Session = Depends(get_db)):
    creation_date = payload.creation_date
    if creation_date is None:
        creation_date = format_timestamp(datetime.now(timezone.utc))
    bucket = Bucket.create(payload.name, creation_date)

    record = BucketRecord.from_bucket(bucket)
    db.add(record)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise HTTPException(status_code=409, detail="Bucket already exists")
    db.refresh(record)
    logger.info("Created bucket %s (%s)", record.name, record.creation_date)
    return record

@app.get("/buckets")
def list_buckets(db: Session = Depends(get_db)):
    records = db.query(BucketRecord).order_by(BucketRecord.id.desc()).all()
    body = buckets_to_xml(record.to_bucket() for record in records)
    return Response(content=body, media_type=XML_MEDIA_TYPE)

@app.get("/buckets/{bucket_name}")
def get_bucket(bucket_name: str, db: Session = Depends(get_db)):
    record = _get_record(db, bucket_name)
    return Response(content=bucket_to_xml(record.to_bucket()), media_type=XML_MEDIA_TYPE)

@app.delete("/buckets/{bucket_name}", status_code=204)
def delete_bucket(bucket_name: str, db: Session = Depends(get_db)):
    record = _get_record(db, bucket_name)
    db.delete(record)
    db.commit()
    logger.info("Deleted bucket %s", bucket_name)
    return None
