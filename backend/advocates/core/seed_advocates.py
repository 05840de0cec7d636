"""Seed data for a development directory."""

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from advocates.models.advocate import Advocate

SPECIALTIES = [
    "Bipolar",
    "LGBTQ",
    "Medication/Prescribing",
    "Suicide History/Attempts",
    "General Mental Health (anxiety, depression, stress, grief, life transitions)",
    "Men's issues",
    "Relationship Issues (family, friends, couple, etc)",
    "Trauma & PTSD",
    "Personality disorders",
    "Personal growth",
    "Substance use/abuse",
    "Pediatrics",
    "Women's issues (post-partum, infertility, family planning)",
    "Chronic pain",
    "Weight loss & nutrition",
    "Eating disorders",
    "Diabetic Diet and nutrition",
    "Coaching (leadership, career, academic and wellness)",
    "Life coaching",
    "Obsessive-compulsive disorders",
    "Neuropsychological evaluations & testing (ADHD testing)",
    "Attention and Hyperactivity (ADHD)",
    "Sleep issues",
    "Schizophrenia and psychotic disorders",
    "Learning disorders",
    "Domestic abuse",
]

SEED_ADVOCATES = [
    ("John", "Doe", "New York", "MD", 10, 5551234567),
    ("Jane", "Smith", "Los Angeles", "PhD", 8, 5559876543),
    ("Alice", "Johnson", "Chicago", "MSW", 5, 5554567890),
    ("Michael", "Brown", "Houston", "MD", 12, 5556543210),
    ("Emily", "Davis", "Phoenix", "PhD", 7, 5553210987),
    ("Chris", "Martinez", "Philadelphia", "MSW", 9, 5557890123),
    ("Jessica", "Taylor", "San Antonio", "MD", 11, 5554561234),
    ("David", "Harris", "San Diego", "PhD", 6, 5557896543),
    ("Laura", "Clark", "Dallas", "MSW", 4, 5550123456),
    ("Daniel", "Lewis", "San Jose", "MD", 13, 5553217654),
    ("Sarah", "Lee", "Austin", "PhD", 10, 5551238765),
    ("James", "King", "Jacksonville", "MSW", 5, 5556540987),
    ("Megan", "Green", "San Francisco", "MD", 14, 5558765432),
    ("Joshua", "Walker", "Columbus", "PhD", 9, 5556781234),
    ("Amanda", "Hall", "Fort Worth", "MSW", 3, 5559872345),
]


def _specialties_for(index: int) -> list[str]:
    """Deterministic 2-4 specialties per advocate."""
    count = 2 + index % 3
    return [SPECIALTIES[(index * 7 + offset * 5) % len(SPECIALTIES)] for offset in range(count)]


async def seed_advocates(
    session_factory: async_sessionmaker[AsyncSession],
    reset: bool = False,
) -> dict:
    """
    Insert the sample advocates.

    Skips seeding when the table already has rows, unless ``reset`` is set,
    in which case existing rows are deleted first.
    """
    async with session_factory() as db:
        if reset:
            await db.execute(delete(Advocate))
        else:
            existing = (await db.execute(select(func.count()).select_from(Advocate))).scalar_one()
            if existing:
                return {"created": 0, "skipped": int(existing)}

        for index, (first, last, city, degree, years, phone) in enumerate(SEED_ADVOCATES):
            db.add(
                Advocate(
                    first_name=first,
                    last_name=last,
                    city=city,
                    degree=degree,
                    specialties=_specialties_for(index),
                    years_of_experience=years,
                    phone_number=phone,
                )
            )
        await db.commit()

    return {"created": len(SEED_ADVOCATES), "skipped": 0}
