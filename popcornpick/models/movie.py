from sqlalchemy import Column, Integer, String, Float, Text, DateTime
from sqlalchemy.sql import func
from popcornpick.db import Base

class Movie(Base):
    __tablename__ = "movies"
    id = Column(Integer, primary_key=True, index=True)
    tmdb_id = Column(Integer, unique=True, index=True, nullable=False)
    title = Column(String, index=True, nullable=True)
    poster = Column(String, nullable=True)
    rating = Column(Float, nullable=True)
    overview = Column(Text, nullable=True)
    language = Column(String, index=True, nullable=True)
    release_date = Column(String, nullable=True)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())
