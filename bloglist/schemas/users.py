from pydantic import BaseModel, Field
from typing import Optional, List
from .blogs import BlogSummaryOut

class RegisterIn(BaseModel):
    username: str = Field(min_length=3)
    name: Optional[str] = None
    password: str = Field(min_length=3)

class UserOut(BaseModel):
    id: int
    username: str
    name: Optional[str] = None
    blogs: List[BlogSummaryOut] = []

    class Config:
        from_attributes = True

class LoginIn(BaseModel):
    username: str
    password: str

class TokenOut(BaseModel):
    token: str
    username: str
    name: Optional[str] = None
