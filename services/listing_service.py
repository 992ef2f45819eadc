# services/listing_service.py
"""
Listing Service - paginated, filtered apartment listings.
"""
import logging
import math

from sqlalchemy.orm import Session

from models import Apartment
from schemas.apartment import (
     ApartmentListResponse,
     ApartmentResponse,
     ApartmentSearchParams,
     PaginationMeta,
)
from services.query_builder import build_listing_query

logger = logging.getLogger(__name__)


def build_pagination(page: int, limit: int, total: int) -> PaginationMeta:
     total_pages = math.ceil(total / limit) if total else 0
     return PaginationMeta(
          page=page,
          limit=limit,
          total=total,
          total_pages=total_pages,
          has_next=page < total_pages,
          has_prev=page > 1,
     )


def list_apartments(db: Session, params: ApartmentSearchParams) -> ApartmentListResponse:
     """
     Return one page of visible apartments matching the filters.

     The total is counted with the same predicates as the page, in a
     separate query.
     """
     query_plan = build_listing_query(params)
     apartments = query_plan.apply(db.query(Apartment)).all()
     total = query_plan.count(db.query(Apartment))
     pagination = build_pagination(params.page, params.limit, total)

     logger.info(
          f"Retrieved {len(apartments)} apartments (page {params.page}/{pagination.total_pages})",
          extra={"total": total, "page": params.page},
     )

     return ApartmentListResponse(
          data=[ApartmentResponse.model_validate(a) for a in apartments],
          pagination=pagination,
          filters=params.applied_filters(),
     )
