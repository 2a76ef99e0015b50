# cat_api/models/__init__.py

from sqlalchemy.orm import declarative_base


Base = declarative_base()

from .user import User  # noqa: E402,F401
from .session import UserSession  # noqa: E402,F401
from .cat import Cat, Adoption  # noqa: E402,F401
