"""ApartmentService: create, lookups, similar/featured lists, update and soft delete."""

from datetime import datetime
from decimal import Decimal

import pytest
from sqlalchemy.exc import IntegrityError

from errors import ApartmentNotFoundError, DuplicateUnitNumberError, InvalidInputError
from models import Apartment, ApartmentLifecycle
from schemas.apartment import ApartmentCreate, ApartmentUpdate
from services.apartment_service import ApartmentService


def _create_payload(**overrides):
    data = {
        "unit_name": "Luxury Studio A1",
        "unit_number": "A1-001",
        "project": "Marina Heights",
        "price": Decimal("1200.00"),
        "bedrooms": 1,
        "bathrooms": 1,
        "area": Decimal("45.5"),
        "location": "Downtown Marina District",
        "amenities": ["Pool", "Gym"],
    }
    data.update(overrides)
    return ApartmentCreate(**data)


class TestCreate:
    def test_sets_slug_and_defaults(self, db):
        apartment = ApartmentService.create(db, _create_payload())
        db.commit()

        assert apartment.id is not None
        assert apartment.slug == "luxury-studio-a1-a1-001"
        assert apartment.view_count == 0
        assert apartment.is_available is True
        assert apartment.is_featured is False
        assert apartment.lifecycle == ApartmentLifecycle.ACTIVE
        assert apartment.amenities == ["Pool", "Gym"]

    def test_stores_listing_attributes(self, db):
        apartment = ApartmentService.create(
            db, _create_payload(apartment_type="Loft", furnishing="Semi-Furnished", pet_friendly=True),
        )
        assert apartment.apartment_type == "Loft"
        assert apartment.furnishing == "Semi-Furnished"
        assert apartment.pet_friendly is True

    def test_duplicate_unit_number_rejected(self, db, make_apartment):
        make_apartment(unit_number="A1-001")
        with pytest.raises(DuplicateUnitNumberError) as excinfo:
            ApartmentService.create(db, _create_payload(unit_number="A1-001"))
        assert excinfo.value.http_status == 409

    def test_unit_number_reusable_after_delete(self, db, make_deleted):
        make_deleted(unit_number="A1-001")
        apartment = ApartmentService.create(db, _create_payload(unit_number="A1-001"))
        db.commit()
        assert apartment.id is not None

    def test_concurrent_duplicate_caught_at_flush(self, db, make_apartment):
        make_apartment(unit_number="DUP-1")
        db.add(Apartment(
            unit_name="Racer", unit_number="DUP-1", project="Marina Heights",
            price=Decimal("1000"), bedrooms=1, bathrooms=1, area=Decimal("50"),
        ))
        with pytest.raises(DuplicateUnitNumberError):
            ApartmentService._flush_or_conflict(db, "DUP-1")

    def test_other_integrity_errors_propagate(self, db):
        db.add(Apartment(
            unit_name="No Project", unit_number="NP-1", project=None,
            price=Decimal("1000"), bedrooms=1, bathrooms=1, area=Decimal("50"),
        ))
        with pytest.raises(IntegrityError):
            ApartmentService._flush_or_conflict(db, "NP-1")


class TestGetById:
    def test_each_read_counts_one_view(self, db, make_apartment):
        apartment = make_apartment()
        for _ in range(3):
            fetched = ApartmentService.get_by_id(db, apartment.id)
        db.commit()
        assert fetched.view_count == 3

    def test_missing_id(self, db):
        with pytest.raises(ApartmentNotFoundError) as excinfo:
            ApartmentService.get_by_id(db, 999)
        assert excinfo.value.http_status == 404
        assert "999" in excinfo.value.message

    def test_unavailable_and_deleted_are_not_found(self, db, make_apartment, make_deleted):
        hidden = make_apartment(is_available=False)
        deleted = make_deleted()
        for apartment_id in (hidden.id, deleted.id):
            with pytest.raises(ApartmentNotFoundError):
                ApartmentService.get_by_id(db, apartment_id)


class TestSimilar:
    def test_same_bedrooms_within_price_band(self, db, make_apartment):
        target = make_apartment(price=Decimal("1000"), bedrooms=1)
        cheaper = make_apartment(price=Decimal("800"), bedrooms=1, view_count=5)
        pricier = make_apartment(price=Decimal("1200"), bedrooms=1, view_count=10)
        make_apartment(price=Decimal("1201"), bedrooms=1)
        make_apartment(price=Decimal("1000"), bedrooms=2)
        make_apartment(price=Decimal("1000"), bedrooms=1, is_available=False)

        similar = ApartmentService.get_similar(db, target.id)

        assert [a.id for a in similar] == [pricier.id, cheaper.id]

    def test_limit_applies(self, db, make_apartment):
        target = make_apartment()
        for _ in range(5):
            make_apartment()
        assert len(ApartmentService.get_similar(db, target.id)) == 3
        assert len(ApartmentService.get_similar(db, target.id, limit=1)) == 1

    def test_hidden_target_has_no_similar(self, db, make_apartment):
        target = make_apartment(is_available=False)
        make_apartment()
        assert ApartmentService.get_similar(db, target.id) == []


class TestUpdate:
    def test_only_supplied_fields_change(self, db, make_apartment):
        apartment = make_apartment(price=Decimal("1000"), bedrooms=2)
        updated = ApartmentService.update(db, apartment.id, ApartmentUpdate(price=Decimal("1350")))
        db.commit()
        assert updated.price == Decimal("1350")
        assert updated.bedrooms == 2

    def test_slug_is_not_recomputed(self, db, make_apartment):
        apartment = make_apartment(unit_name="Old Name", unit_number="X-1")
        updated = ApartmentService.update(db, apartment.id, ApartmentUpdate(unit_name="New Name"))
        assert updated.unit_name == "New Name"
        assert updated.slug == "old-name-x-1"

    def test_empty_update_rejected(self, db, make_apartment):
        apartment = make_apartment()
        with pytest.raises(InvalidInputError):
            ApartmentService.update(db, apartment.id, ApartmentUpdate())

    def test_required_field_cannot_be_nulled(self, db, make_apartment):
        apartment = make_apartment()
        with pytest.raises(InvalidInputError) as excinfo:
            ApartmentService.update(db, apartment.id, ApartmentUpdate(price=None))
        assert excinfo.value.field == "price"

    def test_optional_field_can_be_cleared(self, db, make_apartment):
        apartment = make_apartment(description="Bright")
        updated = ApartmentService.update(db, apartment.id, ApartmentUpdate(description=None))
        assert updated.description is None

    def test_unavailable_apartment_can_be_updated(self, db, make_apartment):
        apartment = make_apartment(is_available=False)
        updated = ApartmentService.update(db, apartment.id, ApartmentUpdate(is_available=True))
        assert updated.is_available is True

    def test_deleted_apartment_not_found(self, db, make_deleted):
        apartment = make_deleted()
        with pytest.raises(ApartmentNotFoundError):
            ApartmentService.update(db, apartment.id, ApartmentUpdate(price=Decimal("1")))

    def test_unit_number_conflict(self, db, make_apartment):
        make_apartment(unit_number="TAKEN")
        apartment = make_apartment()
        with pytest.raises(DuplicateUnitNumberError):
            ApartmentService.update(db, apartment.id, ApartmentUpdate(unit_number="TAKEN"))

    def test_keeping_own_unit_number_is_fine(self, db, make_apartment):
        apartment = make_apartment(unit_number="MINE")
        updated = ApartmentService.update(
            db, apartment.id, ApartmentUpdate(unit_number="MINE", bedrooms=3),
        )
        assert updated.bedrooms == 3


class TestSoftDelete:
    def test_marks_deleted_and_hides(self, db, make_apartment):
        apartment = make_apartment()
        deleted_at = ApartmentService.soft_delete(db, apartment.id)
        db.commit()

        db.expire_all()
        row = db.get(Apartment, apartment.id)
        assert row.is_deleted
        assert row.is_available is False
        assert row.deleted_at == deleted_at
        with pytest.raises(ApartmentNotFoundError):
            ApartmentService.get_by_id(db, apartment.id)

    def test_second_delete_not_found(self, db, make_apartment):
        apartment = make_apartment()
        ApartmentService.soft_delete(db, apartment.id)
        db.commit()
        with pytest.raises(ApartmentNotFoundError):
            ApartmentService.soft_delete(db, apartment.id)


class TestFeaturedAndProject:
    def test_featured_most_viewed_then_newest(self, db, make_apartment):
        older = make_apartment(view_count=10, created_at=datetime(2026, 1, 1))
        newer = make_apartment(view_count=10, created_at=datetime(2026, 3, 1))
        top = make_apartment(view_count=50, created_at=datetime(2025, 6, 1))
        make_apartment(view_count=99, is_available=False)

        featured = ApartmentService.get_featured(db)

        assert [a.id for a in featured] == [top.id, newer.id, older.id]

    def test_featured_limit(self, db, make_apartment):
        for _ in range(8):
            make_apartment()
        assert len(ApartmentService.get_featured(db)) == 6
        assert len(ApartmentService.get_featured(db, limit=2)) == 2

    def test_find_by_project_substring(self, db, make_apartment, make_deleted):
        first = make_apartment(project="Marina Heights", created_at=datetime(2026, 1, 1))
        second = make_apartment(project="Marina Bay", created_at=datetime(2026, 2, 1))
        make_apartment(project="Sky Tower")
        make_deleted(project="Marina Old")

        found = ApartmentService.find_by_project(db, "Marina")

        assert [a.id for a in found] == [second.id, first.id]
