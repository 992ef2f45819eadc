# models/apartment.py
import enum
from datetime import datetime, timezone

from sqlalchemy import (
     JSON,
     Boolean,
     Column,
     Date,
     DateTime,
     Enum,
     Index,
     Integer,
     Numeric,
     String,
     Text,
     and_,
     func,
     text,
     true,
)
from .base import Base


def utc_now() -> datetime:
     """Current UTC time as a naive datetime; all timestamp columns hold UTC."""
     return datetime.now(timezone.utc).replace(tzinfo=None)


class ApartmentLifecycle(str, enum.Enum):
     """Lifecycle state of a listing; DELETED rows are kept but never shown."""
     ACTIVE = "ACTIVE"
     DELETED = "DELETED"


class Apartment(Base):
     """
     Apartment model - a single rental unit listing.

     Soft delete is modelled by the lifecycle column; deleted_at only records
     when it happened. Use Apartment.visible() / Apartment.active() instead of
     spelling out the availability rules in queries.
     """

     id = Column(Integer, primary_key=True, autoincrement=True)

     # Identity
     unit_name = Column(String(255), nullable=False, index=True)
     unit_number = Column(String(100), nullable=False)
     project = Column(String(255), nullable=False)
     slug = Column(String(300), nullable=True, index=True)
     description = Column(Text, nullable=True)

     # Pricing and size
     price = Column(Numeric(10, 2), nullable=False)
     bedrooms = Column(Integer, nullable=False)
     bathrooms = Column(Integer, nullable=False)
     area = Column(Numeric(8, 2), nullable=False)  # square meters
     security_deposit = Column(Numeric(10, 2), nullable=True)

     location = Column(String(255), nullable=True)
     images = Column(JSON, nullable=True)  # list of URLs
     amenities = Column(JSON, nullable=True)  # list of strings

     # Listing attributes
     apartment_type = Column(String(50), nullable=True)  # Studio, Apartment, Penthouse, Duplex, Loft
     furnishing = Column(String(50), nullable=True)  # Unfurnished, Semi-Furnished, Fully Furnished
     pet_friendly = Column(Boolean, nullable=True)

     # Contact and lease terms
     contact_phone = Column(String(20), nullable=True)
     contact_email = Column(String(255), nullable=True)
     available_from = Column(Date, nullable=True)
     lease_duration = Column(Integer, nullable=True)  # months

     # Status
     is_available = Column(Boolean, default=True, nullable=False)
     is_featured = Column(Boolean, default=False, nullable=False, index=True)
     view_count = Column(Integer, default=0, nullable=False)
     lifecycle = Column(
          Enum(ApartmentLifecycle, name="apartment_lifecycle", create_constraint=True),
          default=ApartmentLifecycle.ACTIVE,
          nullable=False,
          index=True
     )

     # Timestamps
     created_at = Column(DateTime, default=utc_now, server_default=func.now(), nullable=False)
     updated_at = Column(DateTime, default=utc_now, server_default=func.now(), onupdate=utc_now, nullable=False)
     deleted_at = Column(DateTime, nullable=True)

     __table_args__ = (
          Index("ix_apartments_project_is_available", "project", "is_available"),
          Index("ix_apartments_price_bedrooms_is_available", "price", "bedrooms", "is_available"),
          # Unit numbers only need to be unique among rows that are not soft-deleted
          Index(
               "ux_apartments_unit_number_active",
               "unit_number",
               unique=True,
               mssql_where=text("lifecycle = 'ACTIVE'"),
               postgresql_where=text("lifecycle = 'ACTIVE'"),
               sqlite_where=text("lifecycle = 'ACTIVE'"),
          ),
     )

     def __repr__(self):
          return f"<Apartment(id={self.id}, unit_number='{self.unit_number}', project='{self.project}')>"

     @classmethod
     def active(cls):
          """Rows that have not been soft-deleted."""
          return cls.lifecycle == ApartmentLifecycle.ACTIVE

     @classmethod
     def visible(cls):
          """Rows shown to clients: not soft-deleted and marked available."""
          return and_(cls.active(), cls.is_available == true())

     @property
     def is_deleted(self) -> bool:
          return self.lifecycle == ApartmentLifecycle.DELETED

     def mark_deleted(self) -> datetime:
          """Soft delete the listing and return the deletion time."""
          now = utc_now()
          self.lifecycle = ApartmentLifecycle.DELETED
          self.is_available = False
          self.deleted_at = now
          return now
