"""Query builder for the property search.

Turns a sparse :class:`PropertySearchOptions` into one parameterized SELECT.
Each filter that is set contributes a predicate and exactly one bind value;
predicates are collected in a fixed order and joined with AND under a single
WHERE. The limit is always the last bind parameter.
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from sqlalchemy import BindParameter, ColumnElement, Float, Integer, Select, String, and_, bindparam, func, select
from sqlalchemy.types import TypeEngine

from lightbnb.models.property import Property
from lightbnb.models.review import PropertyReview
from lightbnb.schemas.property import PropertySearchOptions

DEFAULT_LIMIT = 10


@dataclass(frozen=True)
class SearchFilter:
    """One predicate of the WHERE clause and the value bound into it."""

    name: str
    clause: ColumnElement[bool]
    value: Any


@dataclass(frozen=True)
class PropertySearch:
    """A ready-to-execute search statement."""

    statement: Select
    filters: tuple[SearchFilter, ...]
    limit: int

    @property
    def params(self) -> list[Any]:
        """Bind values in statement order: filters first, limit last."""
        return [f.value for f in self.filters] + [self.limit]


def _filter(
    name: str,
    value: Any,
    type_: type[TypeEngine],
    build: Callable[[BindParameter], ColumnElement[bool]],
) -> SearchFilter:
    param = bindparam(name, value, type_=type_)
    return SearchFilter(name=name, clause=build(param), value=value)


def check_limit(limit: int) -> None:
    """Reject a row cap that is not a positive integer."""
    if limit < 1:
        raise ValueError(f"limit must be a positive integer, got {limit}")


def build_filters(options: PropertySearchOptions) -> list[SearchFilter]:
    """Return the predicates for every set (truthy) option, in declaration order."""
    filters: list[SearchFilter] = []

    if options.city:
        filters.append(_filter("city", f"%{options.city}%", String, lambda p: Property.city.like(p)))
    if options.owner_id:
        filters.append(_filter("owner_id", options.owner_id, Integer, lambda p: Property.owner_id == p))
    if options.minimum_price_per_night:
        filters.append(
            _filter(
                "minimum_price_per_night",
                options.minimum_price_per_night,
                Float,
                lambda p: Property.cost_per_night >= p,
            )
        )
    if options.maximum_price_per_night:
        filters.append(
            _filter(
                "maximum_price_per_night",
                options.maximum_price_per_night,
                Float,
                lambda p: Property.cost_per_night <= p,
            )
        )
    if options.minimum_rating:
        filters.append(_filter("minimum_rating", options.minimum_rating, Float, lambda p: PropertyReview.rating >= p))

    return filters


def build_property_search(options: PropertySearchOptions | None = None, limit: int = DEFAULT_LIMIT) -> PropertySearch:
    """Build the search statement for ``options``, capped at ``limit`` rows.

    Rows are grouped per property, carry ``average_rating`` (the mean of the
    property's review ratings, NULL without reviews), and are ordered by
    ``cost_per_night`` ascending.
    """
    check_limit(limit)

    filters = build_filters(options or PropertySearchOptions())
    average_rating = func.avg(PropertyReview.rating).label("average_rating")

    statement = select(Property, average_rating).outerjoin(
        PropertyReview, PropertyReview.property_id == Property.id
    )
    if filters:
        statement = statement.where(and_(*(f.clause for f in filters)))
    statement = (
        statement.group_by(Property.id)
        .order_by(Property.cost_per_night)
        .limit(bindparam("limit", limit, type_=Integer))
    )

    return PropertySearch(statement=statement, filters=tuple(filters), limit=limit)
