"""Declarative visibility filters.

Filters use the canonical must/should/must_not shape:

    {
        "should": [
            {"key": "organization_id", "match": {"any": [...]}},
            {"key": "space_id", "match": {"any": [...]}},
        ]
    }

- must: all conditions hold (AND); an empty list is trivially true
- should: at least one condition holds (OR); an empty list matches nothing
- must_not: no condition holds

A filter with no clauses matches everything. Filters are handed to the
persistence layer (see ``SqlFilterTranslator``); ``matches`` evaluates one
against a single record in memory.
"""

from typing import Any, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, model_validator


class FieldMatch(BaseModel):
    """Match clause: an exact ``value`` or membership in ``any``."""

    value: Any = None
    any: Optional[list[Any]] = None

    model_config = ConfigDict(frozen=True, extra="forbid")

    @model_validator(mode="after")
    def exactly_one_operator(self):
        """Either ``value`` or ``any`` must be given, not both."""
        has_value = "value" in self.model_fields_set
        has_any = self.any is not None
        if has_value == has_any:
            raise ValueError("FieldMatch needs exactly one of 'value' or 'any'")
        return self


class FieldCondition(BaseModel):
    """Condition on a single logical field."""

    key: str
    match: FieldMatch

    model_config = ConfigDict(frozen=True, extra="forbid")

    def matches(self, record: Mapping[str, Any]) -> bool:
        """Evaluate against a record. A missing or ``None`` field never matches."""
        actual = record.get(self.key)
        if actual is None:
            return False
        if self.match.any is not None:
            return actual in self.match.any
        return actual == self.match.value


class Filter(BaseModel):
    """Boolean tree of field conditions."""

    must: Optional[list["Condition"]] = None
    should: Optional[list["Condition"]] = None
    must_not: Optional[list["Condition"]] = None

    model_config = ConfigDict(frozen=True, extra="forbid")

    @classmethod
    def match_all(cls) -> "Filter":
        """Filter that matches every record."""
        return cls()

    @classmethod
    def match_none(cls) -> "Filter":
        """Filter that matches no record."""
        return cls(should=[])

    @classmethod
    def any_of(cls, *conditions: "Condition") -> "Filter":
        """OR of the given conditions (matches nothing when empty)."""
        return cls(should=list(conditions))

    @property
    def is_match_all(self) -> bool:
        """Whether this filter has no clauses."""
        return self.must is None and self.should is None and self.must_not is None

    @property
    def is_match_none(self) -> bool:
        """Whether this filter is the empty disjunction."""
        return self.should == [] and self.must is None and self.must_not is None

    def matches(self, record: Mapping[str, Any]) -> bool:
        """Evaluate the filter against a single record."""
        if self.must is not None and not all(c.matches(record) for c in self.must):
            return False
        if self.should is not None and not any(c.matches(record) for c in self.should):
            return False
        if self.must_not is not None and any(c.matches(record) for c in self.must_not):
            return False
        return True

    def to_dict(self) -> dict[str, Any]:
        """Canonical dict form for persistence layers that take raw filters."""
        return self.model_dump(exclude_none=True)


Condition = Union[FieldCondition, Filter]

Filter.model_rebuild()


def field_in(key: str, values) -> FieldCondition:
    """``key`` is one of ``values`` (sorted for stable output)."""
    return FieldCondition(key=key, match=FieldMatch(any=sorted(values, key=str)))


def field_equals(key: str, value: Any) -> FieldCondition:
    """``key`` equals ``value``."""
    return FieldCondition(key=key, match=FieldMatch(value=value))


def merge_filters(access_filter: Filter, existing_filter: Optional[Filter]) -> Filter:
    """Merge a visibility filter with an existing query filter using AND semantics.

    Results must satisfy both the visibility filter and every condition of the
    existing filter.
    """
    if existing_filter is None or existing_filter.is_match_all:
        return access_filter
    if access_filter.is_match_all:
        return existing_filter
    return Filter(must=[access_filter, existing_filter])
