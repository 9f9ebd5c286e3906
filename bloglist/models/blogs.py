from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, CheckConstraint, func
from sqlalchemy.orm import relationship
from . import Base

class Blog(Base):
    __tablename__ = 'blogs'
    __table_args__ = (CheckConstraint('likes >= 0', name='ck_blogs_likes_non_negative'),)
    id = Column(Integer, primary_key=True, index=True)
    title = Column(String, nullable=False)
    author = Column(String, nullable=True)
    url = Column(String, nullable=False)
    likes = Column(Integer, nullable=False, default=0)
    user_id = Column(Integer, ForeignKey('users.id', ondelete='CASCADE'), index=True, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    user = relationship('User', back_populates='blogs')
