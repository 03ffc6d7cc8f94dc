# =============================================
# trainhub/database/seed.py
# =============================================
"""
Development seed data.

Inserts one example account per role plus the default reference data.
Rows that already exist (matched by email, name or state/district) are
left untouched, so running it twice is harmless.

    python -m trainhub.database.seed
"""
from sqlalchemy.ext.asyncio import AsyncSession
import asyncio
import json
import logging

from trainhub.config.database import async_session, create_tables, close_database
from trainhub.config.settings import get_settings
from trainhub.core.security import get_password_hash
from trainhub.database.models.admin_profile import AdminProfile
from trainhub.database.models.freelancer_profile import FreelancerProfile
from trainhub.database.models.maintainer_profile import MaintainerProfile
from trainhub.database.models.organization_profile import OrganizationProfile
from trainhub.database.models.stack import Stack
from trainhub.database.models.training_category import TrainingCategory
from trainhub.database.models.training_location import TrainingLocation
from trainhub.database.models.user import User
from trainhub.repositories.stack_repository import StackRepository
from trainhub.repositories.training_category_repository import TrainingCategoryRepository
from trainhub.repositories.training_location_repository import TrainingLocationRepository
from trainhub.repositories.user_repository import UserRepository
from trainhub.schemas.enums import (
    ActiveStatus,
    AvailabilityStatus,
    TrainerType,
    UserRole,
    VerificationStatus
)

logger = logging.getLogger(__name__)
settings = get_settings()

USERS = [
    {
        "email": "admin@example.com",
        "name": "Admin User",
        "password": "admin123",
        "role": UserRole.ADMIN,
        "phone": "+1234567890",
    },
    {
        "email": "freelancer@example.com",
        "name": "John Doe",
        "password": "freelancer123",
        "role": UserRole.FREELANCER,
        "phone": "+1234567891",
    },
    {
        "email": "organization@example.com",
        "name": "TechCorp Solutions",
        "password": "organization123",
        "role": UserRole.ORGANIZATION,
        "phone": "+1234567892",
    },
    {
        "email": "maintainer@example.com",
        "name": "Alice Johnson",
        "password": "maintainer123",
        "role": UserRole.MAINTAINER,
        "phone": "+1234567893",
    },
]

CATEGORIES = [
    ("Soft Skills", "Communication, teamwork, and interpersonal skills"),
    ("Fundamentals", "Basic programming concepts and computer science fundamentals"),
    ("Frameworks", "Modern web frameworks and libraries"),
]

LOCATIONS = [
    ("New York", "Manhattan"),
    ("California", "San Francisco"),
    ("Texas", "Austin"),
]

STACKS = [
    ("React", "A JavaScript library for building user interfaces"),
    ("Node.js", "JavaScript runtime built on Chrome's V8 JavaScript engine"),
    ("TypeScript", "Typed JavaScript at Any Scale"),
    ("Python", "Programming language for general-purpose programming"),
]

def build_profile(user: User, data: dict):
    """Profile row for a seeded user"""
    role = data["role"]
    if role == UserRole.FREELANCER:
        return FreelancerProfile(
            user=user,
            bio="Full-stack developer and trainer specializing in modern web technologies",
            skills=json.dumps(["JavaScript", "React", "Node.js", "TypeScript"]),
            trainer_type=TrainerType.BOTH,
            availability=AvailabilityStatus.AVAILABLE,
            experience_years=5,
            location="New York, NY"
        )
    if role == UserRole.ORGANIZATION:
        return OrganizationProfile(
            user=user,
            organization_name=data["name"],
            website="https://techcorp.com",
            contact_mail=data["email"],
            phone=data["phone"],
            company_location="San Francisco, CA",
            verified_status=VerificationStatus.VERIFIED,
            active_status=ActiveStatus.ACTIVE,
            ratings=4.5
        )
    if role == UserRole.MAINTAINER:
        return MaintainerProfile(user=user, status=ActiveStatus.ACTIVE)
    return AdminProfile(user=user)

async def seed_users(db: AsyncSession) -> int:
    user_repo = UserRepository(db)
    created = 0
    for data in USERS:
        if await user_repo.email_exists(data["email"]):
            continue
        user = await user_repo.add(User(
            email=data["email"],
            name=data["name"],
            phone=data["phone"],
            role=data["role"],
            password=get_password_hash(data["password"])
        ))
        db.add(build_profile(user, data))
        created += 1
    await db.flush()
    return created

async def seed_reference_data(db: AsyncSession) -> int:
    category_repo = TrainingCategoryRepository(db)
    location_repo = TrainingLocationRepository(db)
    stack_repo = StackRepository(db)
    created = 0

    for name, description in CATEGORIES:
        if not await category_repo.get_by_name(name):
            await category_repo.add(TrainingCategory(name=name, description=description, is_active=True))
            created += 1

    for state, district in LOCATIONS:
        if not await location_repo.get_by_state_district(state, district):
            await location_repo.add(TrainingLocation(state=state, district=district, is_active=True))
            created += 1

    for name, description in STACKS:
        if not await stack_repo.get_by_name(name):
            await stack_repo.add(Stack(name=name, description=description, is_active=True))
            created += 1

    return created

async def seed(db: AsyncSession) -> dict:
    """Insert whatever seed rows are missing and commit"""
    try:
        users = await seed_users(db)
        reference = await seed_reference_data(db)
        await db.commit()
    except Exception:
        await db.rollback()
        raise

    logger.info(f"Seed complete: {users} users, {reference} reference rows created")
    return {"users": users, "reference_data": reference}

async def main():
    if settings.uses_sqlite:
        await create_tables()
    async with async_session() as db:
        await seed(db)
    await close_database()

if __name__ == "__main__":
    logging.basicConfig(level=getattr(logging, settings.LOG_LEVEL), format=settings.LOG_FORMAT)
    asyncio.run(main())
