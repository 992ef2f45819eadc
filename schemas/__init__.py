# schemas/__init__.py
from .apartment import (
     ApartmentCreate,
     ApartmentUpdate,
     ApartmentFilters,
     ApartmentSearchParams,
     ApartmentResponse,
     ApartmentMutationResponse,
     ApartmentDetailResponse,
     ApartmentDeleteResponse,
     ApartmentListResponse,
     ApartmentStats,
     FilterOptions,
     PaginationMeta,
)

__all__ = [
     "ApartmentCreate",
     "ApartmentUpdate",
     "ApartmentFilters",
     "ApartmentSearchParams",
     "ApartmentResponse",
     "ApartmentMutationResponse",
     "ApartmentDetailResponse",
     "ApartmentDeleteResponse",
     "ApartmentListResponse",
     "ApartmentStats",
     "FilterOptions",
     "PaginationMeta",
]
