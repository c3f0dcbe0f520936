"""ldapquery exceptions."""

from __future__ import annotations

from collections.abc import Sequence


class LdapQueryError(Exception):
    """Base exception for ldapquery errors."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class InvalidOperatorError(LdapQueryError):
    """Operator cannot be used in an LDAP filter."""

    def __init__(self, operator: object, operators: Sequence[str]):
        self.operator = operator
        self.operators = list(operators)
        available = ", ".join(self.operators)
        super().__init__(
            f"Operator: {operator} cannot be used in an LDAP query. "
            f"Available operators are: {available}"
        )
