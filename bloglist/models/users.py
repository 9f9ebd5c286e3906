from sqlalchemy import Column, Integer, String, DateTime, func
from sqlalchemy.orm import relationship
from . import Base

class User(Base):
    __tablename__ = 'users'
    id = Column(Integer, primary_key=True, index=True)
    username = Column(String(150), unique=True, index=True, nullable=False)
    name = Column(String(150), nullable=True)
    password_hash = Column(String, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    # derived from blogs.user_id, never written directly
    blogs = relationship('Blog', back_populates='user', order_by='Blog.id')
