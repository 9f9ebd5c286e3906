from pydantic import BaseModel, Field
from typing import Optional

class OwnerOut(BaseModel):
    username: str
    name: Optional[str] = None
    id: int

    class Config:
        from_attributes = True

class BlogIn(BaseModel):
    title: str = Field(min_length=1)
    author: Optional[str] = None
    url: str = Field(min_length=1)
    likes: int = Field(default=0, ge=0)

class BlogUpdate(BaseModel):
    # omitted fields keep their stored value; extra fields are ignored
    title: Optional[str] = Field(default=None, min_length=1)
    author: Optional[str] = None
    url: Optional[str] = Field(default=None, min_length=1)
    likes: Optional[int] = Field(default=None, ge=0)

class BlogOut(BaseModel):
    id: int
    title: str
    author: Optional[str] = None
    url: str
    likes: int = 0
    user: Optional[OwnerOut] = None

    class Config:
        from_attributes = True

class BlogSummaryOut(BaseModel):
    id: int
    title: str
    author: Optional[str] = None
    url: str

    class Config:
        from_attributes = True
