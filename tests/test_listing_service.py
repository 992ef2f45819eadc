"""Paginated listing and pagination metadata."""

import pytest

from schemas.apartment import ApartmentSearchParams
from services.listing_service import build_pagination, list_apartments


@pytest.mark.parametrize(
    "page, limit, total, total_pages, has_next, has_prev",
    [
        (1, 10, 0, 0, False, False),
        (1, 10, 10, 1, False, False),
        (1, 10, 11, 2, True, False),
        (2, 10, 11, 2, False, True),
        (3, 5, 30, 6, True, True),
        (7, 5, 30, 6, False, True),
    ],
)
def test_build_pagination(page, limit, total, total_pages, has_next, has_prev):
    meta = build_pagination(page, limit, total)
    assert meta.total_pages == total_pages
    assert meta.has_next is has_next
    assert meta.has_prev is has_prev
    assert meta.total == total


def test_list_returns_page_and_total(db, make_apartment):
    for _ in range(12):
        make_apartment()

    result = list_apartments(db, ApartmentSearchParams(page=2, limit=5))

    assert len(result.data) == 5
    assert result.pagination.total == 12
    assert result.pagination.total_pages == 3
    assert result.pagination.has_next
    assert result.pagination.has_prev


def test_page_past_the_end_is_empty(db, make_apartment):
    make_apartment()
    result = list_apartments(db, ApartmentSearchParams(page=5, limit=10))
    assert result.data == []
    assert result.pagination.total == 1
    assert result.pagination.has_next is False


def test_filters_are_echoed_without_paging(db):
    params = ApartmentSearchParams(page=1, limit=10, project="Marina", min_price=500)
    result = list_apartments(db, params)
    filters = result.filters.model_dump()
    assert filters["project"] == "Marina"
    assert filters["min_price"] == 500
    assert "page" not in filters
    assert "limit" not in filters
