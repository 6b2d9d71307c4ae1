"""Tests for the property search query builder (no database needed)."""

from itertools import combinations

import pytest
from sqlalchemy.dialects.postgresql import asyncpg

from lightbnb.schemas.property import PropertySearchOptions
from lightbnb.services.property_search import DEFAULT_LIMIT, build_filters, build_property_search

ALL_FILTERS = {
    "city": "Vancouver",
    "owner_id": 7,
    "minimum_price_per_night": 5000,
    "maximum_price_per_night": 20000,
    "minimum_rating": 4.0,
}
FILTER_ORDER = list(ALL_FILTERS)


def _compile(options: PropertySearchOptions, limit: int = DEFAULT_LIMIT):
    search = build_property_search(options, limit)
    compiled = search.statement.compile(dialect=asyncpg.dialect())
    return search, compiled


def _where_clause(sql: str) -> str:
    """Return the text between WHERE and GROUP BY (empty if there is no WHERE)."""
    if "WHERE" not in sql:
        return ""
    return sql.split("WHERE", 1)[1].split("GROUP BY", 1)[0]


class TestPredicateShape:
    """Every subset of filters yields one WHERE and N-1 ANDs."""

    @pytest.mark.parametrize(
        "names",
        [subset for size in range(len(FILTER_ORDER) + 1) for subset in combinations(FILTER_ORDER, size)],
        ids=lambda names: "+".join(names) or "none",
    )
    def test_where_and_params(self, names):
        options = PropertySearchOptions(**{name: ALL_FILTERS[name] for name in names})
        search, compiled = _compile(options, limit=5)
        sql = str(compiled)

        assert sql.count("WHERE") == (1 if names else 0)
        assert _where_clause(sql).count(" AND ") == max(len(names) - 1, 0)

        # one bind per filter, plus the limit
        assert len(search.params) == len(names) + 1
        assert [f.name for f in search.filters] == list(names)
        assert search.params[-1] == 5

        # the driver receives the values in the same order
        bound = [compiled.params[key] for key in compiled.positiontup]
        assert bound == search.params


class TestFilterValues:
    def test_city_is_wrapped_in_wildcards(self):
        filters = build_filters(PropertySearchOptions(city="Vancouver"))
        assert [f.value for f in filters] == ["%Vancouver%"]

    def test_city_uses_like(self):
        _, compiled = _compile(PropertySearchOptions(city="Vancouver"))
        assert "properties.city LIKE $1" in str(compiled)

    def test_values_never_interpolated(self):
        options = PropertySearchOptions(city="x'; DROP TABLE users; --", owner_id=3)
        _, compiled = _compile(options)
        sql = str(compiled)
        assert "DROP TABLE" not in sql
        assert "$1" in sql and "$2" in sql

    def test_comparison_operators(self):
        options = PropertySearchOptions(**ALL_FILTERS)
        _, compiled = _compile(options)
        where = _where_clause(str(compiled))
        assert "properties.owner_id = $2" in where
        assert "properties.cost_per_night >= $3" in where
        assert "properties.cost_per_night <= $4" in where
        assert "property_reviews.rating >= $5" in where

    def test_limit_is_last_parameter(self):
        search, compiled = _compile(PropertySearchOptions(**ALL_FILTERS), limit=3)
        assert "LIMIT $6" in str(compiled)
        assert search.params == ["%Vancouver%", 7, 5000, 20000, 4.0, 3]

    def test_falsy_values_are_ignored(self):
        options = PropertySearchOptions(city="", owner_id=0, minimum_price_per_night=0, minimum_rating=0)
        assert build_filters(options) == []


class TestStatementShape:
    def test_default_limit(self):
        search = build_property_search()
        assert search.limit == DEFAULT_LIMIT == 10
        assert search.params == [10]

    def test_grouped_and_ordered_by_price(self):
        _, compiled = _compile(PropertySearchOptions())
        sql = str(compiled)
        assert "LEFT OUTER JOIN property_reviews ON property_reviews.property_id = properties.id" in sql
        assert "avg(property_reviews.rating) AS average_rating" in sql
        assert "GROUP BY properties.id" in sql
        assert "ORDER BY properties.cost_per_night" in sql

    def test_rejects_non_positive_limit(self):
        with pytest.raises(ValueError):
            build_property_search(PropertySearchOptions(), limit=0)

    def test_fractional_price_kept(self):
        filters = build_filters(PropertySearchOptions(minimum_price_per_night=99.5))
        assert [(f.name, f.value) for f in filters] == [("minimum_price_per_night", 99.5)]
