import asyncio
import logging

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select
from sqlalchemy import func

from app.core.config import settings
from app.core.database import AsyncSessionLocal, Base, engine
from app.core.security import get_password_hash
from app.models.category import Category
from app.models.resource import Resource
from app.models.user import User, UserRole, UserStatus
from app.models.volunteer import Volunteer

logger = logging.getLogger(__name__)

DEFAULT_CATEGORIES = [
    {"name": "Healthcare", "description": "Hospitals, clinics, and medical services", "icon": "🏥", "color": "#e74c3c"},
    {"name": "Shelter", "description": "Emergency shelters and housing assistance", "icon": "🏠", "color": "#3498db"},
    {"name": "Food Distribution", "description": "Food banks, meal programs, and nutrition services", "icon": "🍽️", "color": "#27ae60"},
    {"name": "Emergency Services", "description": "Fire, police, and emergency response", "icon": "🚨", "color": "#f39c12"},
    {"name": "Mental Health", "description": "Counseling and psychological support services", "icon": "🧠", "color": "#9b59b6"},
    {"name": "Transportation", "description": "Public transport and emergency transportation", "icon": "🚗", "color": "#34495e"},
]

# (category name, resource fields)
SAMPLE_RESOURCES = [
    ("Healthcare", {
        "name": "AIIMS Delhi",
        "description": "24/7 emergency services and specialized healthcare",
        "address": "Ansari Nagar, New Delhi, Delhi 110029",
        "latitude": 28.5672, "longitude": 77.2100,
        "phone": "+91-11-2659-8955", "email": "info@aiims.edu",
        "website": "https://www.aiims.edu", "operating_hours": "24/7",
        "capacity": 2500, "current_availability": 450,
    }),
    ("Shelter", {
        "name": "Sahaara Shelter Home",
        "description": "Emergency shelter for families and individuals",
        "address": "Sector 15, Gurgaon, Haryana 122001",
        "latitude": 28.4595, "longitude": 77.0266,
        "phone": "+91-124-427-8900", "email": "contact@sahaarashelter.org",
        "operating_hours": "24/7", "capacity": 200, "current_availability": 45,
    }),
    ("Food Distribution", {
        "name": "Annapurna Food Bank",
        "description": "Free food distribution and community kitchen",
        "address": "Karol Bagh, New Delhi, Delhi 110005",
        "latitude": 28.6519, "longitude": 77.1909,
        "phone": "+91-11-2575-3421", "email": "help@annapurnafoodbank.org",
        "website": "https://annapurnafoodbank.org", "operating_hours": "Daily 7AM-9PM",
        "capacity": 500, "current_availability": 275,
    }),
    ("Emergency Services", {
        "name": "Delhi Fire Station - Connaught Place",
        "description": "Emergency response and fire services",
        "address": "Connaught Place, New Delhi, Delhi 110001",
        "latitude": 28.6315, "longitude": 77.2167,
        "phone": "+91-11-2331-1111", "operating_hours": "24/7",
        "capacity": 25, "current_availability": 18,
    }),
    ("Mental Health", {
        "name": "Manas Mental Health Centre",
        "description": "Mental health support and counseling services",
        "address": "Defence Colony, New Delhi, Delhi 110024",
        "latitude": 28.5706, "longitude": 77.2294,
        "phone": "+91-11-2433-7000", "email": "support@manashealth.org",
        "website": "https://manashealth.org", "operating_hours": "Mon-Sat 9AM-6PM",
        "capacity": 100, "current_availability": 25,
    }),
]

SAMPLE_VOLUNTEERS = [
    {
        "name": "Rajesh Kumar", "email": "rajesh.kumar@email.com", "phone": "+91-98765-43210",
        "skills": "First Aid, Transportation", "availability": "Weekends",
        "location": "Connaught Place, Delhi", "latitude": 28.6315, "longitude": 77.2167,
    },
    {
        "name": "Priya Sharma", "email": "priya.sharma@email.com", "phone": "+91-87654-32109",
        "skills": "Counseling, Food Service", "availability": "Evenings",
        "location": "Karol Bagh, Delhi", "latitude": 28.6519, "longitude": 77.1909,
    },
    {
        "name": "Amit Singh", "email": "amit.singh@email.com", "phone": "+91-76543-21098",
        "skills": "Transportation, General Help", "availability": "Flexible",
        "location": "Gurgaon, Haryana", "latitude": 28.4595, "longitude": 77.0266,
    },
    {
        "name": "Sunita Devi", "email": "sunita.devi@email.com", "phone": "+91-65432-10987",
        "skills": "Medical Care, Community Outreach", "availability": "Mornings",
        "location": "Defence Colony, Delhi", "latitude": 28.5706, "longitude": 77.2294,
    },
]


async def _count(db: AsyncSession, model) -> int:
    result = await db.execute(select(func.count(model.id)))
    return result.scalar() or 0


async def seed_categories(db: AsyncSession) -> int:
    if await _count(db, Category):
        return 0

    for data in DEFAULT_CATEGORIES:
        db.add(Category(**data))
    await db.commit()

    logger.info(f"Seeded {len(DEFAULT_CATEGORIES)} categories")
    return len(DEFAULT_CATEGORIES)


async def ensure_admin_user(db: AsyncSession) -> bool:
    """Create the default admin account if it does not exist yet."""
    result = await db.execute(
        select(User).where(User.email == settings.DEFAULT_ADMIN_EMAIL)
    )
    if result.scalar_one_or_none():
        logger.info("Admin user already exists")
        return False

    db.add(User(
        email=settings.DEFAULT_ADMIN_EMAIL,
        hashed_password=get_password_hash(settings.DEFAULT_ADMIN_PASSWORD),
        name=settings.DEFAULT_ADMIN_NAME,
        role=UserRole.ADMIN.value,
        status=UserStatus.ACTIVE.value
    ))
    await db.commit()

    logger.info("Default admin user created")
    return True


async def seed_sample_data(db: AsyncSession):
    """Insert demo resources and volunteers into empty tables."""
    if not await _count(db, Resource):
        result = await db.execute(select(Category))
        categories = {c.name: c.id for c in result.scalars().all()}

        for category_name, data in SAMPLE_RESOURCES:
            db.add(Resource(category_id=categories.get(category_name), **data))
        logger.info(f"Seeded {len(SAMPLE_RESOURCES)} sample resources")

    if not await _count(db, Volunteer):
        for data in SAMPLE_VOLUNTEERS:
            db.add(Volunteer(**data))
        logger.info(f"Seeded {len(SAMPLE_VOLUNTEERS)} sample volunteers")

    await db.commit()


async def init_database(sample_data: bool = False):
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    logger.info("Database tables created/verified")

    async with AsyncSessionLocal() as db:
        await seed_categories(db)
        await ensure_admin_user(db)
        if sample_data:
            await seed_sample_data(db)


if __name__ == "__main__":
    from app.utils.logger import configure_logging

    configure_logging()
    asyncio.run(init_database(sample_data=True))
