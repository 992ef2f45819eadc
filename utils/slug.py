# utils/slug.py
import re

_NON_ALNUM = re.compile(r"[^a-z0-9]+")


def generate_slug(unit_name: str, unit_number: str) -> str:
     """
     Build a URL-friendly slug from a unit name and number.

     "Luxury Studio A1", "A1-001" -> "luxury-studio-a1-a1-001"
     """
     combined = f"{unit_name}-{unit_number}".lower()
     return _NON_ALNUM.sub("-", combined).strip("-")
