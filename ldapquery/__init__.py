"""ldapquery: fluent builder for RFC 4515 LDAP search filters."""

from .builder import Builder, build_filter, render_condition, wrap
from .escape import escape
from .exceptions import InvalidOperatorError, LdapQueryError
from .operators import ACCEPTED_OPERATORS, Operator, get_operator
from .types import Condition

__version__ = "0.1.0"

__all__ = [
    "Builder",
    "build_filter",
    "render_condition",
    "wrap",
    "escape",
    "LdapQueryError",
    "InvalidOperatorError",
    "ACCEPTED_OPERATORS",
    "Operator",
    "get_operator",
    "Condition",
]
