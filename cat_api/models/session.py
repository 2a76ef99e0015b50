# cat_api/models/session.py

from sqlalchemy import Column, String, Text, DateTime
from . import Base


class UserSession(Base):
    """
    Server-side login session. The browser only holds `sid` in a cookie;
    `data` is a JSON document with the user id and username.
    """
    __tablename__ = "sessions"

    sid = Column(String(128), primary_key=True)
    data = Column(Text, nullable=False)
    expires = Column(DateTime, nullable=False, index=True)
