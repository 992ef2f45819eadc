# schemas/apartment.py
"""
Pydantic schemas for Apartment API request/response validation.

Fields are snake_case in Python and camelCase on the wire; request bodies
accept either spelling.
"""
from datetime import date, datetime, timezone
from decimal import Decimal
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_serializer
from pydantic.alias_generators import to_camel


class ApartmentType(str, Enum):
     STUDIO = "Studio"
     APARTMENT = "Apartment"
     PENTHOUSE = "Penthouse"
     DUPLEX = "Duplex"
     LOFT = "Loft"


class Furnishing(str, Enum):
     UNFURNISHED = "Unfurnished"
     SEMI_FURNISHED = "Semi-Furnished"
     FULLY_FURNISHED = "Fully Furnished"


class SortField(str, Enum):
     """Columns the listing can be ordered by."""
     PRICE = "price"
     CREATED_AT = "createdAt"
     AREA = "area"
     BEDROOMS = "bedrooms"


class SortOrder(str, Enum):
     ASC = "ASC"
     DESC = "DESC"


def _as_utc(value: Optional[datetime]) -> Optional[datetime]:
     # Stored timestamps are naive UTC
     if value is not None and value.tzinfo is None:
          return value.replace(tzinfo=timezone.utc)
     return value


class CamelModel(BaseModel):
     model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ---------------------------------------------------------------------------
# Request bodies
# ---------------------------------------------------------------------------

class ApartmentCreate(CamelModel):
     """Schema for creating a new apartment listing."""
     unit_name: str = Field(..., min_length=1, max_length=255, description="Display name of the unit")
     unit_number: str = Field(..., min_length=1, max_length=100, description="Unit number, unique among active listings")
     project: str = Field(..., min_length=1, max_length=255, description="Project or building name")
     description: Optional[str] = None
     price: Decimal = Field(..., ge=0, max_digits=10, decimal_places=2, description="Monthly rent")
     bedrooms: int = Field(..., ge=0, le=10)
     bathrooms: int = Field(..., ge=0, le=10)
     area: Decimal = Field(..., ge=0, max_digits=8, decimal_places=2, description="Area in square meters")
     location: Optional[str] = Field(None, max_length=255)
     images: Optional[List[str]] = None
     amenities: Optional[List[str]] = None
     apartment_type: Optional[ApartmentType] = Field(None, alias="type")
     furnishing: Optional[Furnishing] = None
     pet_friendly: Optional[bool] = None
     contact_phone: Optional[str] = Field(None, max_length=20)
     contact_email: Optional[str] = Field(None, max_length=255)
     available_from: Optional[date] = None
     lease_duration: Optional[int] = Field(None, ge=1, description="Lease duration in months")
     security_deposit: Optional[Decimal] = Field(None, ge=0, max_digits=10, decimal_places=2)
     is_available: bool = True
     is_featured: bool = False

     model_config = ConfigDict(
          extra="forbid",
          use_enum_values=True,
          str_strip_whitespace=True,
          json_schema_extra={
               "example": {
                    "unitName": "Luxury Studio A1",
                    "unitNumber": "A1-001",
                    "project": "Marina Heights",
                    "description": "Modern studio apartment with stunning marina views",
                    "price": 1200.00,
                    "bedrooms": 1,
                    "bathrooms": 1,
                    "area": 45.5,
                    "location": "Downtown Marina District",
                    "images": ["https://images.unsplash.com/photo-1560448204-e02f11c3d0e2"],
                    "amenities": ["Pool", "Gym", "Parking"],
                    "isAvailable": True,
               }
          },
     )


class ApartmentUpdate(CamelModel):
     """Schema for updating an apartment. Only supplied fields are written."""
     unit_name: Optional[str] = Field(None, min_length=1, max_length=255)
     unit_number: Optional[str] = Field(None, min_length=1, max_length=100)
     project: Optional[str] = Field(None, min_length=1, max_length=255)
     description: Optional[str] = None
     price: Optional[Decimal] = Field(None, ge=0, max_digits=10, decimal_places=2)
     bedrooms: Optional[int] = Field(None, ge=0, le=10)
     bathrooms: Optional[int] = Field(None, ge=0, le=10)
     area: Optional[Decimal] = Field(None, ge=0, max_digits=8, decimal_places=2)
     location: Optional[str] = Field(None, max_length=255)
     images: Optional[List[str]] = None
     amenities: Optional[List[str]] = None
     apartment_type: Optional[ApartmentType] = Field(None, alias="type")
     furnishing: Optional[Furnishing] = None
     pet_friendly: Optional[bool] = None
     contact_phone: Optional[str] = Field(None, max_length=20)
     contact_email: Optional[str] = Field(None, max_length=255)
     available_from: Optional[date] = None
     lease_duration: Optional[int] = Field(None, ge=1)
     security_deposit: Optional[Decimal] = Field(None, ge=0, max_digits=10, decimal_places=2)
     is_available: Optional[bool] = None
     is_featured: Optional[bool] = None

     model_config = ConfigDict(
          extra="forbid",
          use_enum_values=True,
          str_strip_whitespace=True,
          json_schema_extra={
               "example": {
                    "price": 1350.00,
                    "isAvailable": True
               }
          },
     )


class ApartmentFilters(CamelModel):
     """Listing filters; echoed back in the list response."""
     search: Optional[str] = None
     project: Optional[str] = None
     location: Optional[str] = None
     min_price: Optional[float] = Field(None, ge=0)
     max_price: Optional[float] = Field(None, ge=0)
     bedrooms: Optional[int] = Field(None, ge=0)
     bathrooms: Optional[int] = Field(None, ge=0)
     min_area: Optional[float] = Field(None, ge=0)
     max_area: Optional[float] = Field(None, ge=0)
     apartment_type: Optional[ApartmentType] = Field(None, alias="type")
     furnishing: Optional[Furnishing] = None
     pet_friendly: Optional[bool] = None
     sort_by: SortField = SortField.CREATED_AT
     sort_order: SortOrder = SortOrder.DESC


class ApartmentSearchParams(ApartmentFilters):
     """Filters plus pagination, as accepted by GET /api/apartments."""
     page: int = Field(1, ge=1)
     limit: int = Field(10, ge=1, le=100)

     def applied_filters(self) -> ApartmentFilters:
          return ApartmentFilters.model_validate(self.model_dump(exclude={"page", "limit"}))


# ---------------------------------------------------------------------------
# Responses
# ---------------------------------------------------------------------------

class ApartmentResponse(CamelModel):
     """Schema for a single apartment."""
     id: int
     unit_name: str
     unit_number: str
     project: str
     description: Optional[str] = None
     price: Decimal
     bedrooms: int
     bathrooms: int
     area: Decimal
     location: Optional[str] = None
     images: Optional[List[str]] = None
     amenities: Optional[List[str]] = None
     apartment_type: Optional[str] = Field(None, alias="type")
     furnishing: Optional[str] = None
     pet_friendly: Optional[bool] = None
     contact_phone: Optional[str] = None
     contact_email: Optional[str] = None
     available_from: Optional[date] = None
     lease_duration: Optional[int] = None
     security_deposit: Optional[Decimal] = None
     is_available: bool
     is_featured: bool
     slug: Optional[str] = None
     view_count: int
     created_at: Optional[datetime] = None
     updated_at: Optional[datetime] = None
     deleted_at: Optional[datetime] = None

     model_config = ConfigDict(from_attributes=True)

     @field_serializer("price", "area", "security_deposit")
     def _decimal_as_number(self, value: Optional[Decimal]) -> Optional[float]:
          # JSON clients expect numbers, not decimal strings
          return float(value) if value is not None else None

     @field_serializer("created_at", "updated_at", "deleted_at")
     def _timestamp_as_utc(self, value: Optional[datetime]) -> Optional[datetime]:
          return _as_utc(value)


class ApartmentMutationResponse(ApartmentResponse):
     """Apartment returned from create/update, with a status message."""
     message: str


class ApartmentDetailResponse(ApartmentResponse):
     """Apartment returned from GET /{id}, with similar listings attached."""
     similar_apartments: List[ApartmentResponse] = []


class ApartmentDeleteResponse(CamelModel):
     message: str
     deleted_at: datetime

     @field_serializer("deleted_at")
     def _deleted_at_as_utc(self, value: datetime) -> datetime:
          return _as_utc(value)


class PaginationMeta(CamelModel):
     page: int
     limit: int
     total: int
     total_pages: int
     has_next: bool
     has_prev: bool


class ApartmentListResponse(CamelModel):
     """Schema for paginated apartment list response."""
     data: List[ApartmentResponse]
     pagination: PaginationMeta
     filters: ApartmentFilters


class PriceRange(CamelModel):
     min: float = 0.0
     max: float = 0.0


class ProjectStats(CamelModel):
     project: str
     count: int
     average_price: float


class BedroomDistribution(CamelModel):
     bedrooms: int
     count: int


class ApartmentStats(CamelModel):
     """Aggregate report over the apartments table."""
     total_apartments: int
     available_apartments: int
     unavailable_apartments: int
     average_price: float
     price_range: PriceRange
     project_stats: List[ProjectStats]
     bedroom_distribution: List[BedroomDistribution]
     last_updated: datetime


class FilterOptions(CamelModel):
     """Values for populating the listing filter form."""
     projects: List[str]
     locations: List[str]
     price_range: PriceRange
     bedroom_options: List[int]
     bathroom_options: List[int]
     apartment_types: List[str] = [t.value for t in ApartmentType]
     furnishing_options: List[str] = [f.value for f in Furnishing]
