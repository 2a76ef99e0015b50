# cat_api/core/seed.py

import logging
from sqlalchemy.orm import Session
from cat_api.models import Cat


logger = logging.getLogger(__name__)


SAMPLE_CATS = [
    {"id": "1", "tag": "tabby", "img": "https://cataas.com/cat/tabby", "description": "A curious tabby who supervises every open drawer in the house."},
    {"id": "2", "tag": "siamese", "img": "https://cataas.com/cat/siamese", "description": "Talkative and affectionate, will narrate your entire morning."},
    {"id": "3", "tag": "persian", "img": "https://cataas.com/cat/persian", "description": "Calm lap cat with a luxurious coat and a taste for sunny windowsills."},
    {"id": "4", "tag": "maine coon", "img": "https://cataas.com/cat/mainecoon", "description": "Gentle giant who gets along with dogs and small children."},
    {"id": "5", "tag": "bengal", "img": "https://cataas.com/cat/bengal", "description": "Energetic climber looking for a home with tall shelves."},
    {"id": "6", "tag": "tabby", "img": "https://cataas.com/cat/orange", "description": "Orange tabby, food-motivated, fluent in the language of treats."},
    {"id": "7", "tag": "black", "img": "https://cataas.com/cat/black", "description": "Sleek black cat, shy at first and then your shadow forever."},
    {"id": "8", "tag": "ragdoll", "img": "https://cataas.com/cat/ragdoll", "description": "Goes limp when picked up. Extremely relaxed, extremely fluffy."},
    {"id": "9", "tag": "sphynx", "img": "https://cataas.com/cat/sphynx", "description": "Warm to the touch and always looking for a blanket to share."},
    {"id": "10", "tag": "calico", "img": "https://cataas.com/cat/calico", "description": "Independent calico with strong opinions about cardboard boxes."},
    {"id": "11", "tag": "siamese", "img": "https://cataas.com/cat/kitten", "description": "Young siamese kitten, playful and quick to learn fetch."},
    {"id": "12", "tag": "british shorthair", "img": "https://cataas.com/cat/grey", "description": "Round-faced and dignified, prefers quiet evenings at home."},
]


def seed_sample_cats(db: Session) -> int:
    """
    Inserts the sample cats when the cat table is empty.
    Returns the number of rows inserted.
    """
    if db.query(Cat.id).first() is not None:
        return 0

    db.add_all(Cat(**row) for row in SAMPLE_CATS)
    db.commit()
    logger.info("Seeded %d sample cats", len(SAMPLE_CATS))
    return len(SAMPLE_CATS)
