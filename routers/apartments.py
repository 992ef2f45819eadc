# routers/apartments.py
"""
Apartment API routes.

Provides listing with filters and pagination, statistics, filter options,
featured and per-project lists, and CRUD on single apartments. Reads are
public; writes go through require_write_access.
"""
from datetime import datetime, timezone
from typing import List, Optional

from fastapi import APIRouter, Depends, Path, Query, status
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from database import check_connection, get_session
from schemas.apartment import (
     ApartmentCreate,
     ApartmentDeleteResponse,
     ApartmentDetailResponse,
     ApartmentListResponse,
     ApartmentMutationResponse,
     ApartmentResponse,
     ApartmentSearchParams,
     ApartmentStats,
     ApartmentType,
     ApartmentUpdate,
     FilterOptions,
     Furnishing,
     SortField,
     SortOrder,
)
from services.apartment_service import ApartmentService
from services.listing_service import list_apartments
from services.statistics_service import get_filter_options, get_statistics
from utils.auth import require_write_access

router = APIRouter(prefix="/api/apartments", tags=["apartments"])

SIMILAR_APARTMENTS_LIMIT = 3
SERVICE_NAME = "apartments-api"
SERVICE_VERSION = "1.0.0"

# Largest value the INTEGER primary key can hold
MAX_APARTMENT_ID = 2**31 - 1


def _mutation_response(apartment, message: str) -> ApartmentMutationResponse:
     body = ApartmentResponse.model_validate(apartment).model_dump()
     return ApartmentMutationResponse(**body, message=message)


@router.get(
     "",
     response_model=ApartmentListResponse,
     summary="List apartments with filters and pagination"
)
def list_all_apartments(
     page: int = Query(1, ge=1, description="Page number (starting from 1)"),
     limit: int = Query(10, ge=1, le=100, description="Items per page (max 100)"),
     search: Optional[str] = Query(None, description="Search in unit name, unit number, project or description"),
     project: Optional[str] = Query(None, description="Filter by project name"),
     location: Optional[str] = Query(None, description="Filter by location"),
     min_price: Optional[float] = Query(None, alias="minPrice", ge=0),
     max_price: Optional[float] = Query(None, alias="maxPrice", ge=0),
     bedrooms: Optional[int] = Query(None, ge=0, description="Exact number of bedrooms"),
     bathrooms: Optional[int] = Query(None, ge=0, description="Exact number of bathrooms"),
     min_area: Optional[float] = Query(None, alias="minArea", ge=0),
     max_area: Optional[float] = Query(None, alias="maxArea", ge=0),
     apartment_type: Optional[ApartmentType] = Query(None, alias="type"),
     furnishing: Optional[Furnishing] = Query(None),
     pet_friendly: Optional[bool] = Query(None, alias="petFriendly"),
     sort_by: SortField = Query(SortField.CREATED_AT, alias="sortBy"),
     sort_order: SortOrder = Query(SortOrder.DESC, alias="sortOrder"),
     db: Session = Depends(get_session),
):
     """
     Retrieve a paginated list of available apartments.

     - **search**: substring match on unit name, unit number, project or description
     - **project** / **location**: substring match
     - **minPrice** / **maxPrice**, **minArea** / **maxArea**: inclusive ranges
     - **bedrooms** / **bathrooms**: exact match
     - **type**, **furnishing**, **petFriendly**: exact match
     - **sortBy**: price, createdAt, area or bedrooms; **sortOrder**: ASC or DESC
     """
     params = ApartmentSearchParams(
          page=page,
          limit=limit,
          search=search,
          project=project,
          location=location,
          min_price=min_price,
          max_price=max_price,
          bedrooms=bedrooms,
          bathrooms=bathrooms,
          min_area=min_area,
          max_area=max_area,
          apartment_type=apartment_type,
          furnishing=furnishing,
          pet_friendly=pet_friendly,
          sort_by=sort_by,
          sort_order=sort_order,
     )
     return list_apartments(db, params)


@router.get(
     "/stats",
     response_model=ApartmentStats,
     summary="Get apartment statistics"
)
def get_apartment_stats(db: Session = Depends(get_session)):
     """Counts, price figures, per-project and per-bedroom breakdowns."""
     return get_statistics(db)


@router.get(
     "/filters",
     response_model=FilterOptions,
     summary="Get filter options"
)
def get_apartment_filter_options(db: Session = Depends(get_session)):
     """Distinct projects, locations, bedroom/bathroom values and the price range."""
     return get_filter_options(db)


@router.get(
     "/featured/recommendations",
     response_model=List[ApartmentResponse],
     summary="Get featured apartments"
)
def get_featured_apartments(
     limit: int = Query(6, ge=1, le=100, description="Number of featured apartments to return"),
     db: Session = Depends(get_session),
):
     return ApartmentService.get_featured(db, limit)


@router.get(
     "/project/{project_name}",
     response_model=List[ApartmentResponse],
     summary="Get apartments by project"
)
def get_apartments_by_project(
     project_name: str = Path(..., min_length=1),
     db: Session = Depends(get_session),
):
     return ApartmentService.find_by_project(db, project_name)


@router.get("/health/status", include_in_schema=False)
def health_check(db: Session = Depends(get_session)):
     """Liveness plus a round trip to the database; 503 when the database is down."""
     database_up = check_connection(db)
     body = {
          "status": "healthy" if database_up else "unhealthy",
          "database": "up" if database_up else "down",
          "timestamp": datetime.now(timezone.utc).isoformat(),
          "service": SERVICE_NAME,
          "version": SERVICE_VERSION,
     }
     if not database_up:
          return JSONResponse(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, content=body)
     return body


@router.get(
     "/{apartment_id}",
     response_model=ApartmentDetailResponse,
     summary="Get apartment by ID"
)
def get_apartment(
     apartment_id: int = Path(..., ge=1, le=MAX_APARTMENT_ID),
     db: Session = Depends(get_session),
):
     """
     Retrieve one apartment and count the view.

     The response carries the incremented view count and up to three
     similar apartments.
     """
     apartment = ApartmentService.get_by_id(db, apartment_id)
     similar = ApartmentService.get_similar(db, apartment_id, SIMILAR_APARTMENTS_LIMIT)
     db.commit()

     detail = ApartmentDetailResponse.model_validate(apartment)
     detail.similar_apartments = [ApartmentResponse.model_validate(a) for a in similar]
     return detail


@router.post(
     "",
     response_model=ApartmentMutationResponse,
     status_code=status.HTTP_201_CREATED,
     summary="Create a new apartment"
)
def create_apartment(
     apartment_data: ApartmentCreate,
     db: Session = Depends(get_session),
     token: Optional[dict] = Depends(require_write_access),
):
     """
     Add a new apartment listing. The slug is generated from the unit
     name and number; the view count starts at zero.
     """
     apartment = ApartmentService.create(db, apartment_data)
     db.commit()
     db.refresh(apartment)
     return _mutation_response(apartment, "Apartment created successfully")


@router.put(
     "/{apartment_id}",
     response_model=ApartmentMutationResponse,
     summary="Update apartment"
)
def update_apartment(
     apartment_data: ApartmentUpdate,
     apartment_id: int = Path(..., ge=1, le=MAX_APARTMENT_ID),
     db: Session = Depends(get_session),
     token: Optional[dict] = Depends(require_write_access),
):
     """Only provided fields are updated."""
     apartment = ApartmentService.update(db, apartment_id, apartment_data)
     db.commit()
     db.refresh(apartment)
     return _mutation_response(apartment, "Apartment updated successfully")


@router.delete(
     "/{apartment_id}",
     response_model=ApartmentDeleteResponse,
     summary="Delete apartment"
)
def delete_apartment(
     apartment_id: int = Path(..., ge=1, le=MAX_APARTMENT_ID),
     db: Session = Depends(get_session),
     token: Optional[dict] = Depends(require_write_access),
):
     """Soft delete: the apartment is marked unavailable and hidden from all reads."""
     deleted_at = ApartmentService.soft_delete(db, apartment_id)
     db.commit()
     return ApartmentDeleteResponse(message="Apartment deleted successfully", deleted_at=deleted_at)
