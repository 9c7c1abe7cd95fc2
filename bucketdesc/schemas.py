from typing import Optional

from pydantic import BaseModel

class BucketCreate(BaseModel):
    name: Optional[str] = None
    creation_date: Optional[str] = None

class BucketOut(BaseModel):
    id: int
    name: str
    creation_date: str

    class Config:
        from_attributes = True

class BucketErrorOut(BaseModel):
    kind: str
    detail: str
    value: Optional[str] = None
