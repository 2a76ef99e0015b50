# cat_api/models/cat.py

from sqlalchemy import Column, Integer, String, Text, DateTime, ForeignKey, func
from . import Base


class Cat(Base):
    __tablename__ = "cat"

    # Chosen by the caller, never generated here.
    id = Column(String(255), primary_key=True)
    tag = Column(String(255))
    img = Column(Text)
    description = Column(Text)


class Adoption(Base):
    __tablename__ = "adopted"

    id = Column(Integer, primary_key=True, index=True)
    # Not a foreign key: adoptions outlive deleted cats.
    cat_id = Column(String(255), nullable=False, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    adoption_date = Column(DateTime, server_default=func.now(), nullable=False)
