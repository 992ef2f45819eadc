# services/__init__.py
from .apartment_service import ApartmentService
from .listing_service import list_apartments, build_pagination
from .query_builder import ApartmentQuery, build_listing_query
from .statistics_service import get_statistics, get_filter_options

__all__ = [
     "ApartmentService",
     "list_apartments",
     "build_pagination",
     "ApartmentQuery",
     "build_listing_query",
     "get_statistics",
     "get_filter_options",
]
