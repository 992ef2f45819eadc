# models/__init__.py
from .base import Base
from .apartment import Apartment, ApartmentLifecycle, utc_now

__all__ = [
     "Base",
     "Apartment",
     "ApartmentLifecycle",
     "utc_now",
]
