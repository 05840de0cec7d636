"""Advocate model."""

from sqlalchemy import BigInteger, Column, DateTime, Integer, String, func

from advocates.db.base import Base
from advocates.db.types import JSONType


class Advocate(Base):
    """One advocate listed in the directory."""

    __tablename__ = "advocates"

    id = Column(Integer, primary_key=True, autoincrement=True)
    first_name = Column(String, nullable=False)
    last_name = Column(String, nullable=False)
    city = Column(String, nullable=False)
    degree = Column(String, nullable=False)
    specialties = Column(JSONType, nullable=False, default=list)  # list[str]
    years_of_experience = Column(Integer, nullable=False)
    phone_number = Column(BigInteger)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
