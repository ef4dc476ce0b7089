"""User ORM — account rows written by the register action.

Invariants:
    - password holds a bcrypt hash, never plaintext
    - email is unique: duplicate registration surfaces as a DatabaseError
"""

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from dashboard.db.base import Base


class User(Base):
    __tablename__ = "users"

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(Text, nullable=False, unique=True)
    password: Mapped[str] = mapped_column(Text, nullable=False)
