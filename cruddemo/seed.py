import logging

from sqlalchemy import select
from sqlalchemy.orm import sessionmaker

from cruddemo.core.database import SessionLocal
from cruddemo.models.student import Student

logger = logging.getLogger(__name__)

SEED_STUDENTS = [
    ("Javier", "Vegas", "javi.vegas@miempresa.com.ar"),
    ("Mailen", "Mancuso", "mailen.mancuso@miempresa.com.ar"),
    ("Diego", "Vitulli", "diego.vitulli@miempresa.com.ar"),
]


def seed_data(session_factory: sessionmaker = SessionLocal) -> int:
    """
    Seed initial students into the database.

    Does nothing when the table already has rows. Returns the number of
    students inserted.
    """
    with session_factory.begin() as db:
        # Skip when data already exists to avoid duplicates
        if db.scalars(select(Student).limit(1)).first() is not None:
            logger.info("Database already contains data. Skipping seed.")
            return 0

        logger.info("Seeding data...")
        db.add_all(
            Student(first_name=first, last_name=last, email=email)
            for first, last, email in SEED_STUDENTS
        )

    logger.info("Data seeded successfully")
    return len(SEED_STUDENTS)


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    seed_data()
