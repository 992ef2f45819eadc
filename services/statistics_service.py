# services/statistics_service.py
"""
Statistics Service - aggregate reports over the apartments table.

The queries run one after another without a shared snapshot, so a write
landing in between can make the numbers disagree slightly.
"""
from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import func
from sqlalchemy.orm import Session

from models import Apartment
from schemas.apartment import (
     ApartmentStats,
     BedroomDistribution,
     FilterOptions,
     PriceRange,
     ProjectStats,
)


def _as_float(value: Optional[object]) -> float:
     return float(value) if value is not None else 0.0


def get_price_range(db: Session) -> PriceRange:
     low, high = (
          db.query(func.min(Apartment.price), func.max(Apartment.price))
          .filter(Apartment.visible())
          .one()
     )
     return PriceRange(min=_as_float(low), max=_as_float(high))


def get_statistics(db: Session) -> ApartmentStats:
     """
     Build the apartment statistics report.

     total counts every non-deleted row, available only the visible ones;
     unavailable is the difference between the two. All price figures and
     groupings are over visible rows.
     """
     total = db.query(func.count(Apartment.id)).filter(Apartment.active()).scalar() or 0
     available = db.query(func.count(Apartment.id)).filter(Apartment.visible()).scalar() or 0
     average_price = db.query(func.avg(Apartment.price)).filter(Apartment.visible()).scalar()

     count_col = func.count(Apartment.id)
     project_rows = (
          db.query(Apartment.project, count_col, func.avg(Apartment.price))
          .filter(Apartment.visible())
          .group_by(Apartment.project)
          .order_by(count_col.desc(), Apartment.project.asc())
          .all()
     )
     bedroom_rows = (
          db.query(Apartment.bedrooms, func.count(Apartment.id))
          .filter(Apartment.visible())
          .group_by(Apartment.bedrooms)
          .order_by(Apartment.bedrooms.asc())
          .all()
     )

     return ApartmentStats(
          total_apartments=total,
          available_apartments=available,
          unavailable_apartments=total - available,
          average_price=_as_float(average_price),
          price_range=get_price_range(db),
          project_stats=[
               ProjectStats(project=project, count=count, average_price=_as_float(avg))
               for project, count, avg in project_rows
          ],
          bedroom_distribution=[
               BedroomDistribution(bedrooms=bedrooms, count=count)
               for bedrooms, count in bedroom_rows
          ],
          last_updated=datetime.now(timezone.utc),
     )


def get_filter_options(db: Session) -> FilterOptions:
     """Distinct values for the listing filter dropdowns."""
     projects = (
          db.query(Apartment.project).distinct()
          .filter(Apartment.visible(), Apartment.project.isnot(None))
          .order_by(Apartment.project.asc())
          .all()
     )
     locations = (
          db.query(Apartment.location).distinct()
          .filter(Apartment.visible(), Apartment.location.isnot(None))
          .order_by(Apartment.location.asc())
          .all()
     )
     bedrooms = (
          db.query(Apartment.bedrooms).distinct()
          .filter(Apartment.visible())
          .order_by(Apartment.bedrooms.asc())
          .all()
     )
     bathrooms = (
          db.query(Apartment.bathrooms).distinct()
          .filter(Apartment.visible())
          .order_by(Apartment.bathrooms.asc())
          .all()
     )

     return FilterOptions(
          projects=[row[0] for row in projects if row[0]],
          locations=[row[0] for row in locations if row[0]],
          price_range=get_price_range(db),
          bedroom_options=[row[0] for row in bedrooms if row[0] is not None],
          bathroom_options=[row[0] for row in bathrooms if row[0] is not None],
     )
