# services/apartment_service.py
"""
Apartment Service - Business logic for single apartment records.

Handles create, lookup (with view counting), similar listings, partial
updates, soft delete and the featured list. Methods flush but never commit;
the caller owns the transaction.
"""
import logging
from datetime import datetime
from decimal import Decimal
from typing import List

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from errors import ApartmentNotFoundError, DuplicateUnitNumberError, InvalidInputError
from models import Apartment
from schemas.apartment import ApartmentCreate, ApartmentUpdate
from utils.slug import generate_slug

logger = logging.getLogger(__name__)

# Similar listings are priced within this fraction of the target's price
SIMILAR_PRICE_TOLERANCE = Decimal("0.2")

# Columns that may not be cleared with an explicit null on update
REQUIRED_FIELDS = {
     "unit_name", "unit_number", "project", "price", "bedrooms", "bathrooms",
     "area", "is_available", "is_featured",
}


class ApartmentService:
     """Service class for apartment record operations."""

     @staticmethod
     def _get_visible(db: Session, apartment_id: int) -> Apartment:
          apartment = (
               db.query(Apartment)
               .filter(Apartment.id == apartment_id, Apartment.visible())
               .first()
          )
          if apartment is None:
               raise ApartmentNotFoundError(apartment_id)
          return apartment

     @staticmethod
     def _unit_number_taken(db: Session, unit_number: str, exclude_id: int | None = None) -> bool:
          query = db.query(Apartment.id).filter(
               Apartment.unit_number == unit_number,
               Apartment.active(),
          )
          if exclude_id is not None:
               query = query.filter(Apartment.id != exclude_id)
          return query.first() is not None

     @staticmethod
     def _ensure_unit_number_free(db: Session, unit_number: str, exclude_id: int | None = None) -> None:
          if ApartmentService._unit_number_taken(db, unit_number, exclude_id):
               raise DuplicateUnitNumberError(unit_number)

     @staticmethod
     def _flush_or_conflict(db: Session, unit_number: str, exclude_id: int | None = None) -> None:
          # The filtered unique index still catches a concurrent insert; any
          # other constraint failure propagates unchanged
          try:
               db.flush()
          except IntegrityError:
               db.rollback()
               if ApartmentService._unit_number_taken(db, unit_number, exclude_id):
                    raise DuplicateUnitNumberError(unit_number)
               raise

     @staticmethod
     def create(db: Session, data: ApartmentCreate) -> Apartment:
          """
          Create a new apartment listing.

          Args:
               db: SQLAlchemy database session
               data: Validated creation payload

          Returns:
               The persisted Apartment (flushed, not committed)

          Raises:
               DuplicateUnitNumberError: If an active apartment already has the unit number
          """
          ApartmentService._ensure_unit_number_free(db, data.unit_number)

          apartment = Apartment(
               **data.model_dump(),
               slug=generate_slug(data.unit_name, data.unit_number),
               view_count=0,
          )
          db.add(apartment)
          ApartmentService._flush_or_conflict(db, data.unit_number)
          db.refresh(apartment)

          logger.info(
               f"Created new apartment: {apartment.unit_name} (ID: {apartment.id})",
               extra={"apartment_id": apartment.id},
          )
          return apartment

     @staticmethod
     def increment_view_count(db: Session, apartment_id: int) -> None:
          """Atomically bump view_count in the database, without a read-modify-write."""
          db.query(Apartment).filter(Apartment.id == apartment_id).update(
               {Apartment.view_count: Apartment.view_count + 1},
               synchronize_session=False,
          )

     @staticmethod
     def get_by_id(db: Session, apartment_id: int) -> Apartment:
          """
          Fetch a visible apartment and count the view.

          Every successful call adds exactly one to view_count; the returned
          object carries the incremented value.

          Raises:
               ApartmentNotFoundError: If the apartment is missing, unavailable or deleted
          """
          apartment = ApartmentService._get_visible(db, apartment_id)
          ApartmentService.increment_view_count(db, apartment_id)
          db.refresh(apartment)
          return apartment

     @staticmethod
     def get_similar(db: Session, apartment_id: int, limit: int = 3) -> List[Apartment]:
          """
          Other visible apartments with the same bedroom count, priced within
          20% of the target, most viewed first. Empty if the target is not visible.
          """
          target = (
               db.query(Apartment)
               .filter(Apartment.id == apartment_id, Apartment.visible())
               .first()
          )
          if target is None:
               return []

          price = Decimal(target.price)
          spread = price * SIMILAR_PRICE_TOLERANCE
          return (
               db.query(Apartment)
               .filter(
                    Apartment.visible(),
                    Apartment.id != apartment_id,
                    Apartment.bedrooms == target.bedrooms,
                    Apartment.price.between(price - spread, price + spread),
               )
               .order_by(Apartment.view_count.desc(), Apartment.id.asc())
               .limit(limit)
               .all()
          )

     @staticmethod
     def update(db: Session, apartment_id: int, data: ApartmentUpdate) -> Apartment:
          """
          Overwrite only the supplied fields of a non-deleted apartment.

          The slug is left untouched even if the name or unit number change.

          Raises:
               InvalidInputError: If nothing was supplied or a required field is nulled
               ApartmentNotFoundError: If the apartment is missing or deleted
               DuplicateUnitNumberError: If the new unit number is taken
          """
          changes = data.model_dump(exclude_unset=True)
          if not changes:
               raise InvalidInputError("No fields to update")
          for name, value in changes.items():
               if value is None and name in REQUIRED_FIELDS:
                    raise InvalidInputError(f"Field '{name}' cannot be null", field=name)

          apartment = (
               db.query(Apartment)
               .filter(Apartment.id == apartment_id, Apartment.active())
               .first()
          )
          if apartment is None:
               raise ApartmentNotFoundError(apartment_id)

          new_unit_number = changes.get("unit_number")
          if new_unit_number is not None and new_unit_number != apartment.unit_number:
               ApartmentService._ensure_unit_number_free(db, new_unit_number, exclude_id=apartment_id)

          for name, value in changes.items():
               setattr(apartment, name, value)

          ApartmentService._flush_or_conflict(db, apartment.unit_number, exclude_id=apartment_id)
          db.refresh(apartment)

          logger.info(
               f"Updated apartment: {apartment.unit_name} (ID: {apartment_id})",
               extra={"apartment_id": apartment_id},
          )
          return apartment

     @staticmethod
     def soft_delete(db: Session, apartment_id: int) -> datetime:
          """
          Mark a visible apartment as deleted and unavailable.

          A second call raises ApartmentNotFoundError because the record is no
          longer visible.

          Returns:
               The deletion timestamp
          """
          apartment = ApartmentService._get_visible(db, apartment_id)
          deleted_at = apartment.mark_deleted()
          db.flush()

          logger.info(
               f"Soft deleted apartment: {apartment.unit_name} (ID: {apartment_id})",
               extra={"apartment_id": apartment_id},
          )
          return deleted_at

     @staticmethod
     def get_featured(db: Session, limit: int = 6) -> List[Apartment]:
          """Most viewed visible apartments, newest first on ties."""
          return (
               db.query(Apartment)
               .filter(Apartment.visible())
               .order_by(
                    Apartment.view_count.desc(),
                    Apartment.created_at.desc(),
                    Apartment.id.desc(),
               )
               .limit(limit)
               .all()
          )

     @staticmethod
     def find_by_project(db: Session, project_name: str) -> List[Apartment]:
          """Visible apartments whose project name contains project_name."""
          return (
               db.query(Apartment)
               .filter(
                    Apartment.visible(),
                    Apartment.project.contains(project_name, autoescape=True),
               )
               .order_by(Apartment.created_at.desc(), Apartment.id.desc())
               .all()
          )
