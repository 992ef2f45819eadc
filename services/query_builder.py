# services/query_builder.py
"""
Listing query builder.

Translates ApartmentSearchParams into SQLAlchemy predicates, an ordering and
an offset/limit pair. Building is pure; nothing touches the session until
ApartmentQuery.apply() / ApartmentQuery.count() are called.
"""
from dataclasses import dataclass, field
from typing import Any, List

from sqlalchemy import or_
from sqlalchemy.orm import Query

from models import Apartment
from schemas.apartment import ApartmentSearchParams, SortField, SortOrder


SORT_COLUMNS = {
     SortField.PRICE: Apartment.price,
     SortField.CREATED_AT: Apartment.created_at,
     SortField.AREA: Apartment.area,
     SortField.BEDROOMS: Apartment.bedrooms,
}

SEARCH_COLUMNS = (
     Apartment.unit_name,
     Apartment.unit_number,
     Apartment.project,
     Apartment.description,
)


@dataclass
class ApartmentQuery:
     """Executable listing query: filters, ordering and one page window."""
     predicates: List[Any] = field(default_factory=list)
     order_by: List[Any] = field(default_factory=list)
     offset: int = 0
     limit: int = 10

     def filtered(self, query: Query) -> Query:
          return query.filter(*self.predicates)

     def apply(self, query: Query) -> Query:
          """Filter, order and slice a query down to one page."""
          return (
               self.filtered(query)
               .order_by(*self.order_by)
               .offset(self.offset)
               .limit(self.limit)
          )

     def count(self, query: Query) -> int:
          """Count all matching rows, ignoring offset/limit."""
          return self.filtered(query).count()


def _range(column, low, high) -> List[Any]:
     if low is not None and high is not None:
          return [column.between(low, high)]
     if low is not None:
          return [column >= low]
     if high is not None:
          return [column <= high]
     return []


def build_predicates(params: ApartmentSearchParams) -> List[Any]:
     predicates = [Apartment.visible()]

     if params.search:
          predicates.append(or_(*(
               col.contains(params.search, autoescape=True) for col in SEARCH_COLUMNS
          )))
     if params.project:
          predicates.append(Apartment.project.contains(params.project, autoescape=True))
     if params.location:
          predicates.append(Apartment.location.contains(params.location, autoescape=True))

     predicates += _range(Apartment.price, params.min_price, params.max_price)
     predicates += _range(Apartment.area, params.min_area, params.max_area)

     if params.bedrooms is not None:
          predicates.append(Apartment.bedrooms == params.bedrooms)
     if params.bathrooms is not None:
          predicates.append(Apartment.bathrooms == params.bathrooms)

     if params.apartment_type is not None:
          predicates.append(Apartment.apartment_type == params.apartment_type.value)
     if params.furnishing is not None:
          predicates.append(Apartment.furnishing == params.furnishing.value)
     if params.pet_friendly is not None:
          predicates.append(Apartment.pet_friendly == params.pet_friendly)

     return predicates


def build_ordering(sort_by: SortField, sort_order: SortOrder) -> List[Any]:
     """Requested column first, then id in the same direction so pages are stable."""
     column = SORT_COLUMNS[sort_by]
     if sort_order == SortOrder.ASC:
          return [column.asc(), Apartment.id.asc()]
     return [column.desc(), Apartment.id.desc()]


def build_listing_query(params: ApartmentSearchParams) -> ApartmentQuery:
     return ApartmentQuery(
          predicates=build_predicates(params),
          order_by=build_ordering(params.sort_by, params.sort_order),
          offset=(params.page - 1) * params.limit,
          limit=params.limit,
     )
