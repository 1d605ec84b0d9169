import logging
from sqlalchemy.orm import Session
from . import crud, models

logger = logging.getLogger("villalux.db")

_UNSPLASH = "https://images.unsplash.com/photo-{}?auto=format&fit=crop&q=80&w={}"

# The fixed villa catalog inserted into a fresh database
VILLAS = [
    {"name": "Serenity Cliff Villa", "location": "Uluwatu, Bali", "price_per_night": 750, "rating": 4.9,
     "image_url": _UNSPLASH.format("1613977257365-aaae5a9817ff", 2070)},
    {"name": "Jungle Oasis Retreat", "location": "Ubud, Bali", "price_per_night": 620, "rating": 4.8,
     "image_url": _UNSPLASH.format("1540541338287-41700207dee6", 2070)},
    {"name": "The Rice Paddy View", "location": "Canggu, Bali", "price_per_night": 550, "rating": 4.7,
     "image_url": _UNSPLASH.format("1537996194471-e657df975ab4", 1938)},
    {"name": "Volcano View Lodge", "location": "Kintamani, Bali", "price_per_night": 680, "rating": 4.9,
     "image_url": _UNSPLASH.format("1573843981267-be1999ff37cd", 1974)},
    {"name": "Azure Dreamhouse", "location": "Santorini, Greece", "price_per_night": 980, "rating": 5.0,
     "image_url": _UNSPLASH.format("1564013799919-ab600027ffc6", 2070)},
    {"name": "Caldera Edge Suite", "location": "Santorini, Greece", "price_per_night": 1100, "rating": 4.9,
     "image_url": _UNSPLASH.format("1612349317150-e413f6a5b16e", 2070)},
    {"name": "White Pearl Villa", "location": "Santorini, Greece", "price_per_night": 920, "rating": 4.8,
     "image_url": _UNSPLASH.format("1520250497591-112f2f40a3f4", 2070)},
    {"name": "Aegean Sunset Villa", "location": "Santorini, Greece", "price_per_night": 1250, "rating": 5.0,
     "image_url": _UNSPLASH.format("1590490359838-3486a4225853", 1954)},
    {"name": "The Glass Pavilion", "location": "Malibu, California", "price_per_night": 1200, "rating": 4.8,
     "image_url": _UNSPLASH.format("1568605114967-8130f3a36994", 2070)},
    {"name": "Oceanfront Modern", "location": "Malibu, California", "price_per_night": 1500, "rating": 4.9,
     "image_url": _UNSPLASH.format("1600585154340-be6161a56a0c", 2070)},
    {"name": "Hillside Architectural", "location": "Malibu, California", "price_per_night": 1350, "rating": 4.7,
     "image_url": _UNSPLASH.format("1512917774080-9991f1c4c750", 2070)},
    {"name": "Zuma Beach House", "location": "Malibu, California", "price_per_night": 1600, "rating": 5.0,
     "image_url": _UNSPLASH.format("1582268611958-ebfd161ef9cf", 2070)},
    {"name": "Coastal Hideaway", "location": "Malibu, California", "price_per_night": 1100, "rating": 4.6,
     "image_url": _UNSPLASH.format("1570129477492-45c003edd2be", 2070)},
]


def ensure_seeded(db: Session) -> int:
    """
    Inserts the villa catalog if the villas table is empty.

    Returns the number of villas inserted, 0 when the table already had rows.
    """
    if crud.count_villas(db) > 0:
        return 0

    logger.info("Villas table is empty, inserting initial data...")
    db.add_all([models.Villa(**villa) for villa in VILLAS])
    db.commit()
    logger.info(f"Inserted {len(VILLAS)} villas.")
    return len(VILLAS)
