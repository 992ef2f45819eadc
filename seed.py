# seed.py
"""
Sample apartments for local development.

Run directly (python seed.py) or let main.py call seed_database() on
startup when APP_ENV=development. Seeding is skipped if the table has rows.
"""
import logging
from decimal import Decimal

from sqlalchemy import func
from sqlalchemy.orm import Session

from models import Apartment
from utils.slug import generate_slug

logger = logging.getLogger(__name__)

SAMPLE_APARTMENTS = [
     {
          "unit_name": "Luxury Studio A1",
          "unit_number": "A1-001",
          "project": "Marina Heights",
          "description": "Modern studio apartment with stunning marina views, floor-to-ceiling windows, and premium finishes throughout.",
          "price": Decimal("1200.00"),
          "bedrooms": 1,
          "bathrooms": 1,
          "area": Decimal("45.5"),
          "location": "Downtown Marina District",
          "images": [
               "https://images.unsplash.com/photo-1560448204-e02f11c3d0e2?w=800",
               "https://images.unsplash.com/photo-1560185007-5f0bb1866cab?w=800",
               "https://images.unsplash.com/photo-1560185009-5bf9f2849488?w=800",
          ],
          "amenities": ["Pool", "Gym", "Parking", "Security", "24/7 Concierge", "Rooftop Terrace"],
          "view_count": 45,
     },
     {
          "unit_name": "Executive Suite B2",
          "unit_number": "B2-105",
          "project": "Garden Residences",
          "description": "Spacious family apartment with private garden access, modern kitchen, and luxury amenities.",
          "price": Decimal("2500.00"),
          "bedrooms": 3,
          "bathrooms": 2,
          "area": Decimal("120.0"),
          "location": "Green Valley",
          "images": [
               "https://images.unsplash.com/photo-1556020685-ae41abfc9365?w=800",
               "https://images.unsplash.com/photo-1556020689-f83fd73b6a0e?w=800",
               "https://images.unsplash.com/photo-1556020700-c4df7b062c2a?w=800",
          ],
          "amenities": ["Garden", "Playground", "Parking", "Storage", "Pet-Friendly", "Balcony"],
          "pet_friendly": True,
          "view_count": 32,
     },
     {
          "unit_name": "Penthouse Premium",
          "unit_number": "P1-001",
          "project": "Sky Tower",
          "description": "Luxurious penthouse with panoramic city views, private elevator access, and premium amenities.",
          "price": Decimal("4500.00"),
          "bedrooms": 4,
          "bathrooms": 3,
          "area": Decimal("200.0"),
          "location": "City Center",
          "images": [
               "https://images.unsplash.com/photo-1545324418-cc1a3fa10c00?w=800",
               "https://images.unsplash.com/photo-1545324418-5d2d1e1b1e90?w=800",
          ],
          "amenities": ["Private Elevator", "Roof Garden", "Wine Cellar", "Home Theater", "Spa", "Valet Parking"],
          "apartment_type": "Penthouse",
          "view_count": 78,
     },
     {
          "unit_name": "Cozy One Bedroom",
          "unit_number": "C1-204",
          "project": "Urban Living",
          "description": "Perfect starter apartment with modern amenities and great location near public transportation.",
          "price": Decimal("950.00"),
          "bedrooms": 1,
          "bathrooms": 1,
          "area": Decimal("55.0"),
          "location": "Midtown",
          "images": [
               "https://images.unsplash.com/photo-1502672260266-1c1ef2d93688?w=800",
               "https://images.unsplash.com/photo-1502672023488-70e25813eb80?w=800",
          ],
          "amenities": ["Laundry", "Fitness Center", "Parking", "High-Speed Internet"],
          "view_count": 23,
     },
     {
          "unit_name": "Family Haven",
          "unit_number": "F2-301",
          "project": "Sunset Gardens",
          "description": "Spacious two-bedroom apartment perfect for small families, featuring an open floor plan and modern kitchen.",
          "price": Decimal("1800.00"),
          "bedrooms": 2,
          "bathrooms": 2,
          "area": Decimal("85.0"),
          "location": "Suburban District",
          "images": [
               "https://images.unsplash.com/photo-1493809842364-78817add7ffb?w=800",
               "https://images.unsplash.com/photo-1493809842364-78817add7ff1?w=800",
          ],
          "amenities": ["Playground", "Pool", "BBQ Area", "Parking", "Storage", "Pet Park"],
          "view_count": 19,
     },
]


def seed_database(db: Session) -> int:
     """Insert the sample apartments into an empty table. Returns rows added."""
     existing = db.query(func.count(Apartment.id)).scalar() or 0
     if existing > 0:
          logger.info("Database already seeded, skipping...")
          return 0

     for data in SAMPLE_APARTMENTS:
          db.add(Apartment(
               **data,
               slug=generate_slug(data["unit_name"], data["unit_number"]),
          ))
     db.flush()

     logger.info(f"Seeded database with {len(SAMPLE_APARTMENTS)} sample apartments")
     return len(SAMPLE_APARTMENTS)


if __name__ == "__main__":
     from config import LOG_FORMAT, LOG_LEVEL
     from database import get_session_context, init_db
     from utils.log_config import setup_logging

     setup_logging(LOG_LEVEL, LOG_FORMAT)
     init_db()
     with get_session_context() as session:
          seed_database(session)
