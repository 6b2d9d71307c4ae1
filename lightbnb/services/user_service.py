"""User service — lookups, creation, and password login."""

import logging

from sqlalchemy import select

from lightbnb.auth.passwords import hash_password, verify_password
from lightbnb.database import Store
from lightbnb.errors import ConstraintViolationError, DuplicateEmailError
from lightbnb.models.user import User
from lightbnb.schemas.user import UserCreate, UserRecord

logger = logging.getLogger(__name__)


async def get_user_with_email(store: Store, email: str) -> UserRecord | None:
    """Look up a user by exact email. Returns ``None`` if there is no such user."""
    async with store.session() as session:
        result = await session.execute(select(User).where(User.email == email))
        user = result.scalar_one_or_none()
        return UserRecord.model_validate(user) if user is not None else None


async def get_user_with_id(store: Store, user_id: int) -> UserRecord | None:
    """Look up a user by id. Returns ``None`` if there is no such user."""
    async with store.session() as session:
        user = await session.get(User, user_id)
        return UserRecord.model_validate(user) if user is not None else None


async def add_user(store: Store, data: UserCreate) -> UserRecord:
    """Insert a user and return it with its generated id.

    Raises:
        DuplicateEmailError: a user with ``data.email`` already exists.
    """
    try:
        async with store.session() as session:
            user = User(name=data.name, email=data.email, password=data.password)
            session.add(user)
            await session.flush()
            await session.refresh(user)
            record = UserRecord.model_validate(user)
    except ConstraintViolationError as exc:
        raise DuplicateEmailError(data.email) from exc

    logger.info("User created: %s (id %s)", record.email, record.id)
    return record


async def register_user(store: Store, name: str, email: str, password: str) -> UserRecord:
    """Hash ``password`` and create the user."""
    return await add_user(store, UserCreate(name=name, email=email, password=hash_password(password)))


async def authenticate_user(store: Store, email: str, password: str) -> UserRecord | None:
    """Return the user when ``password`` matches the stored hash, otherwise ``None``."""
    user = await get_user_with_email(store, email)
    if user is None or not verify_password(password, user.password):
        logger.info("Failed login for %s", email)
        return None
    return user
