"""SQL filter translator: converts visibility filters to SQLAlchemy clauses.

Pure transformation logic with no I/O dependencies.
"""

from typing import Any, Mapping, Optional

from sqlalchemy import and_, false, not_, or_, true
from sqlalchemy.sql.elements import ColumnElement

from bastion.core.exceptions import FilterTranslationError
from bastion.core.logging import ContextualLogger
from bastion.core.logging import logger as default_logger
from bastion.domains.access.filters import FieldCondition, Filter


class SqlFilterTranslator:
    """Translates canonical filters to SQLAlchemy WHERE clauses.

    Filter Structure:
        - must: conditions -> AND
        - should: conditions -> OR (an empty list is FALSE)
        - must_not: conditions -> NOT (OR)

    Condition Types:
        - FieldCondition with match.value -> "column IS NOT NULL AND column = value"
        - FieldCondition with match.any -> "column IS NOT NULL AND column IN (...)"
          (FALSE when empty)
        - nested Filter -> recursive

    Logical keys are mapped to columns through ``field_map``. A key with no
    mapped column raises ``FilterTranslationError``; it is never dropped, since
    dropping a condition would widen what the actor can see.

    A NULL column never satisfies a condition, matching ``Filter.matches``. The
    explicit ``IS NOT NULL`` keeps NULL rows under ``must_not`` instead of
    letting SQL three-valued logic drop them.
    """

    def __init__(
        self,
        field_map: Mapping[str, ColumnElement[Any]],
        logger: Optional[ContextualLogger] = None,
    ):
        """Initialize the filter translator.

        Args:
            field_map: Logical filter key -> SQLAlchemy column
            logger: Optional logger for debug messages
        """
        self._field_map = dict(field_map)
        self._logger = logger or default_logger

    def translate(self, filter: Filter) -> ColumnElement[bool]:
        """Translate a filter into a boolean clause usable in ``.where()``."""
        clause = self._build_clause(filter)
        self._logger.debug(f"[SqlFilterTranslator] Translated filter: {filter.to_dict()}")
        return clause

    def _build_clause(self, filter: Filter) -> ColumnElement[bool]:
        clauses = []

        if filter.must is not None:
            clauses.extend(self._translate_condition(c) for c in filter.must)

        if filter.should is not None:
            should_clauses = [self._translate_condition(c) for c in filter.should]
            clauses.append(or_(*should_clauses) if should_clauses else false())

        if filter.must_not:
            clauses.append(not_(or_(*[self._translate_condition(c) for c in filter.must_not])))

        if not clauses:
            return true()
        if len(clauses) == 1:
            return clauses[0]
        return and_(*clauses)

    def _translate_condition(self, condition) -> ColumnElement[bool]:
        if isinstance(condition, Filter):
            return self._build_clause(condition)
        return self._translate_field_condition(condition)

    def _translate_field_condition(self, condition: FieldCondition) -> ColumnElement[bool]:
        column = self._field_map.get(condition.key)
        if column is None:
            raise FilterTranslationError(f"No column mapped for filter key '{condition.key}'")

        if condition.match.any is not None:
            if not condition.match.any:
                return false()
            return and_(column.is_not(None), column.in_(condition.match.any))
        return and_(column.is_not(None), column == condition.match.value)
