"""Property service — listing search and property creation."""

import logging

from lightbnb.database import Store
from lightbnb.models.property import Property
from lightbnb.schemas.property import PropertyCreate, PropertyListing, PropertyRecord, PropertySearchOptions
from lightbnb.services.property_search import DEFAULT_LIMIT, build_property_search

logger = logging.getLogger(__name__)


async def get_all_properties(
    store: Store,
    options: PropertySearchOptions | None = None,
    limit: int = DEFAULT_LIMIT,
) -> list[PropertyListing]:
    """Search properties matching ``options``, cheapest first, at most ``limit`` rows."""
    search = build_property_search(options, limit)
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(
            "Property search: %s params=%s",
            search.statement.compile(dialect=store.engine.dialect),
            search.params,
        )

    async with store.session() as session:
        result = await session.execute(search.statement)
        rows = result.all()

    return [
        PropertyListing(**PropertyRecord.model_validate(prop).model_dump(), average_rating=average_rating)
        for prop, average_rating in rows
    ]


async def add_property(store: Store, data: PropertyCreate) -> PropertyRecord:
    """Insert a property and return it with its generated id."""
    async with store.session() as session:
        prop = Property(**data.model_dump())
        session.add(prop)
        await session.flush()
        await session.refresh(prop)
        record = PropertyRecord.model_validate(prop)

    logger.info("Property created: %s (id %s, owner %s)", record.title, record.id, record.owner_id)
    return record
