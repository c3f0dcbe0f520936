"""LDAP filter operators and operator validation."""

from __future__ import annotations

import logging
from enum import Enum

from .exceptions import InvalidOperatorError

logger = logging.getLogger(__name__)


class Operator(str, Enum):
    """Operator tokens mapped to their literal filter symbols."""

    WILDCARD = "*"
    EQUALS = "="
    DOES_NOT_EQUAL = "!"
    GREATER_THAN_OR_EQUAL = ">="
    LESS_THAN_OR_EQUAL = "<="
    APPROXIMATELY_EQUAL = "~="
    # Synthesized from equals + wildcard at render time
    STARTS_WITH = "starts_with"
    ENDS_WITH = "ends_with"
    CONTAINS = "contains"
    AND = "&"
    # Grouping only
    OR = "|"


# Operators accepted by ``where`` / ``or_where``, in diagnostic order.
ACCEPTED_OPERATORS: tuple[Operator, ...] = (
    Operator.WILDCARD,
    Operator.EQUALS,
    Operator.DOES_NOT_EQUAL,
    Operator.GREATER_THAN_OR_EQUAL,
    Operator.LESS_THAN_OR_EQUAL,
    Operator.APPROXIMATELY_EQUAL,
    Operator.STARTS_WITH,
    Operator.ENDS_WITH,
    Operator.CONTAINS,
    Operator.AND,
)

_BY_SYMBOL = {op.value: op for op in ACCEPTED_OPERATORS}


def get_operator(operator: Operator | str | None) -> Operator:
    """Return the :class:`Operator` for ``operator``, matched case-insensitively.

    Raises :class:`InvalidOperatorError` naming the rejected input and the
    accepted symbols.
    """
    symbol = operator.value if isinstance(operator, Operator) else operator
    if isinstance(symbol, str):
        found = _BY_SYMBOL.get(symbol.lower())
        if found is not None:
            return found

    logger.debug("Rejected LDAP filter operator %r", operator)
    raise InvalidOperatorError(symbol, [op.value for op in ACCEPTED_OPERATORS])
