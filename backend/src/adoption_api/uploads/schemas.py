"""Pydantic schemas for upload endpoints"""

from pydantic import BaseModel


class UploadData(BaseModel):
    url: str
    public_id: str
