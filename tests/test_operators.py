"""Tests for operator validation."""

import pytest

from ldapquery.exceptions import InvalidOperatorError, LdapQueryError
from ldapquery.operators import ACCEPTED_OPERATORS, Operator, get_operator


class TestGetOperator:
    @pytest.mark.parametrize("op", ACCEPTED_OPERATORS)
    def test_accepts_symbol(self, op):
        assert get_operator(op.value) is op

    def test_accepts_member(self):
        assert get_operator(Operator.CONTAINS) is Operator.CONTAINS

    def test_case_insensitive(self):
        assert get_operator("Contains") is Operator.CONTAINS
        assert get_operator("ENDS_WITH") is Operator.ENDS_WITH

    def test_or_member_rejected(self):
        with pytest.raises(InvalidOperatorError):
            get_operator(Operator.OR)

    def test_non_string_rejected(self):
        with pytest.raises(InvalidOperatorError) as exc_info:
            get_operator(5)
        assert exc_info.value.operator == 5

    def test_error_is_ldapquery_error(self):
        with pytest.raises(LdapQueryError):
            get_operator("==")

    def test_error_message(self):
        with pytest.raises(InvalidOperatorError) as exc_info:
            get_operator("like")
        assert exc_info.value.message == (
            "Operator: like cannot be used in an LDAP query. Available operators are: "
            "*, =, !, >=, <=, ~=, starts_with, ends_with, contains, &"
        )
