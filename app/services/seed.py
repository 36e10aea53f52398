# app/services/seed.py
import logging

from sqlalchemy.orm import Session

from app.models.sql_models import MenuItem

logger = logging.getLogger(__name__)

DEFAULT_MENU = [
    {
        "name": "Plov",
        "description": "Ənənəvi Azərbaycan plov",
        "price": 12.00,
        "category": "Əsas yeməklər",
        "image_url": "https://images.unsplash.com/photo-1596560548464-f010549b84d7?w=400",
    },
    {
        "name": "Dolma",
        "description": "Üzüm yarpağında dolma",
        "price": 10.00,
        "category": "Əsas yeməklər",
        "image_url": "https://images.unsplash.com/photo-1574484284002-952d92456975?w=400",
    },
    {
        "name": "Lülə kabab",
        "description": "Əl ilə hazırlanmış qoyun əti kabab",
        "price": 15.00,
        "category": "Əsas yeməklər",
        "image_url": "https://images.unsplash.com/photo-1603360946369-dc9bb6258143?w=400",
    },
    {
        "name": "Paxlava",
        "description": "Azərbaycan şirniyyatı",
        "price": 6.00,
        "category": "Desertlər",
        "image_url": "https://images.unsplash.com/photo-1519915028121-7d3463d20b13?w=400",
    },
    {
        "name": "Şəkərbura",
        "description": "Badam ilə şirin",
        "price": 5.00,
        "category": "Desertlər",
        "image_url": "https://images.unsplash.com/photo-1587241321921-91a834d82ffc?w=400",
    },
    {
        "name": "Çay",
        "description": "Ənənəvi Azərbaycan çayı",
        "price": 2.00,
        "category": "İçkilər",
        "image_url": "https://images.unsplash.com/photo-1594631252845-29fc4cc8cde9?w=400",
    },
]


def seed_default_menu(db: Session) -> int:
    """Fill an empty menu with the house dishes. Returns rows inserted."""
    if db.query(MenuItem).first() is not None:
        return 0
    db.add_all([MenuItem(**item) for item in DEFAULT_MENU])
    db.commit()
    logger.info("Seeded %d default menu items", len(DEFAULT_MENU))
    return len(DEFAULT_MENU)
