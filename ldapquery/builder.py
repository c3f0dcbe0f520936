"""Fluent LDAP filter builder.

Usage::

    from ldapquery import Builder

    query = (
        Builder()
        .select(["cn", "mail"])
        .where_starts_with("cn", "John")
        .or_where_contains("mail", "acme")
    )
    query.get()  # '(&(cn=John*)(|(mail=*acme*)))'
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Sequence

from .escape import escape as escape_value
from .operators import Operator, get_operator
from .schema import MANDATORY_SELECTS
from .types import Condition

logger = logging.getLogger(__name__)


def wrap(query: str) -> str:
    """Wrap ``query`` in brackets."""
    return f"({query})"


def render_condition(condition: Condition) -> str:
    """Render one condition as a single bracketed clause."""
    field, op, value = condition.field, condition.operator, condition.value
    eq = Operator.EQUALS.value
    star = Operator.WILDCARD.value

    if op is Operator.EQUALS:
        return wrap(f"{field}{eq}{value}")
    if op is Operator.DOES_NOT_EQUAL:
        return wrap(op.value + wrap(f"{field}{eq}{value}"))
    if op in (
        Operator.GREATER_THAN_OR_EQUAL,
        Operator.LESS_THAN_OR_EQUAL,
        Operator.APPROXIMATELY_EQUAL,
    ):
        return wrap(f"{field}{op.value}{value}")
    if op is Operator.STARTS_WITH:
        return wrap(f"{field}{eq}{value}{star}")
    if op is Operator.ENDS_WITH:
        return wrap(f"{field}{eq}{star}{value}")
    if op is Operator.CONTAINS:
        return wrap(f"{field}{eq}{star}{value}{star}")
    if op is Operator.WILDCARD:
        return wrap(f"{field}{eq}{star}")
    # AND is accepted as an operator but has no clause of its own.
    return ""


def build_filter(wheres: Sequence[Condition], or_wheres: Sequence[Condition]) -> str:
    """Assemble AND and OR conditions into one filter string.

    Produces e.g. ``(&(cn=John*)(|(mail=*acme*)))``. A lone AND condition is
    returned bare; more than one AND condition, or any OR condition, gets an
    enclosing ``(&...)``. Only-OR input therefore yields ``(&(|...))``.
    """
    query = "".join(render_condition(where) for where in wheres)

    if or_wheres:
        ors = "".join(render_condition(where) for where in or_wheres)
        query += wrap(Operator.OR.value + ors)

    if len(wheres) > 1 or or_wheres:
        query = wrap(Operator.AND.value + query)

    return query


class Builder:
    """Accumulates selects and conditions and renders an LDAP filter.

    ``escape`` sanitizes every value before it is stored; it defaults to
    :func:`ldapquery.escape.escape`. ``mandatory_selects`` are appended to any
    non-empty selection by :meth:`get_selects`.
    """

    def __init__(
        self,
        escape: Callable[[str | None], str] = escape_value,
        mandatory_selects: Sequence[str] | None = None,
    ):
        self._escape = escape
        self._mandatory_selects = list(
            MANDATORY_SELECTS if mandatory_selects is None else mandatory_selects
        )
        self._selects: list[str] = []
        self._wheres: list[Condition] = []
        self._or_wheres: list[Condition] = []
        self._version = 0
        self._cache: tuple[int, str] | None = None

    wrap = staticmethod(wrap)

    # -- Selects --

    def select(self, fields: str | Iterable[str] | None = None) -> Builder:
        """Add one field name or an iterable of names to the selection."""
        if isinstance(fields, str):
            self._add_select(fields)
        elif isinstance(fields, Iterable):
            for field in fields:
                self._add_select(field)
        return self

    def has_selects(self) -> bool:
        return len(self._selects) > 0

    def get_selects(self) -> list[str]:
        """Return the selected fields.

        A non-empty selection always includes the mandatory attributes. An
        empty list means "all attributes" and is returned as is.
        """
        selects = list(self._selects)
        if selects:
            selects.extend(self._mandatory_selects)
        return selects

    # -- Where --

    def where(
        self,
        field: str,
        operator: Operator | str | None,
        value: str | None = None,
    ) -> Builder:
        """Add an AND condition. Raises ``InvalidOperatorError`` for unknown operators."""
        self._wheres.append(self._make_condition(field, operator, value))
        self._touch()
        return self

    def where_contains(self, field: str, value: str) -> Builder:
        return self.where(field, Operator.CONTAINS, value)

    def where_starts_with(self, field: str, value: str) -> Builder:
        return self.where(field, Operator.STARTS_WITH, value)

    def where_ends_with(self, field: str, value: str) -> Builder:
        return self.where(field, Operator.ENDS_WITH, value)

    def or_where(
        self,
        field: str,
        operator: Operator | str | None,
        value: str | None = None,
    ) -> Builder:
        """Add an OR condition. Raises ``InvalidOperatorError`` for unknown operators."""
        self._or_wheres.append(self._make_condition(field, operator, value))
        self._touch()
        return self

    def or_where_contains(self, field: str, value: str) -> Builder:
        return self.or_where(field, Operator.CONTAINS, value)

    def or_where_starts_with(self, field: str, value: str) -> Builder:
        return self.or_where(field, Operator.STARTS_WITH, value)

    def or_where_ends_with(self, field: str, value: str) -> Builder:
        return self.or_where(field, Operator.ENDS_WITH, value)

    def get_wheres(self) -> tuple[Condition, ...]:
        return tuple(self._wheres)

    def get_or_wheres(self) -> tuple[Condition, ...]:
        return tuple(self._or_wheres)

    # -- Query --

    def build(self) -> str:
        """Assemble the filter from the current state, bypassing the cache."""
        return build_filter(self._wheres, self._or_wheres)

    def get(self) -> str:
        """Return the assembled filter, reusing it until the next mutation."""
        if self._cache is not None and self._cache[0] == self._version:
            return self._cache[1]

        query = self.build()
        logger.debug("Assembled LDAP filter %s", query)
        self._cache = (self._version, query)
        return query

    def get_query(self) -> str:
        return self.get()

    # -- Internals --

    def _add_select(self, field: str) -> None:
        if isinstance(field, str) and field.strip():
            self._selects.append(field)

    def _make_condition(
        self,
        field: str,
        operator: Operator | str | None,
        value: str | None,
    ) -> Condition:
        op = get_operator(operator)
        return Condition(field=field, operator=op, value=self._escape(value))

    def _touch(self) -> None:
        self._version += 1
