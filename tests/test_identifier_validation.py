"""Tests for core/identifier_validation.py."""

from __future__ import annotations

import pytest
from hypothesis import given

from rosettagen.constants import (
    MAX_IDENTIFIER_LENGTH,
    MODULE_LEVEL_NAMES,
    RESERVED_MEMBER_NAMES,
)
from rosettagen.core.identifier_validation import (
    is_identifier_char,
    is_identifier_start,
    is_valid_identifier,
    python_name_conflict,
)
from rosettagen.enums import IdentifierRole
from tests.strategies import key_names, parameter_names


class TestIdentifierGrammar:
    """Grammar: [a-zA-Z_][a-zA-Z0-9_]*"""

    @pytest.mark.parametrize("name", ["hello", "hello_name", "_private", "A1", "x" * 256])
    def test_valid_identifiers(self, name: str) -> None:
        """Letters, digits and underscores, not starting with a digit."""
        assert is_valid_identifier(name)

    @pytest.mark.parametrize(
        "name", ["", "2fa", "hello-name", "hello name", "café", "a.b", "x" * 257]
    )
    def test_invalid_identifiers(self, name: str) -> None:
        """Hyphens, spaces, non-ASCII letters and overlong names are rejected."""
        assert not is_valid_identifier(name)

    def test_length_limit_boundary(self) -> None:
        """The limit is inclusive."""
        assert is_valid_identifier("a" * MAX_IDENTIFIER_LENGTH)
        assert not is_valid_identifier("a" * (MAX_IDENTIFIER_LENGTH + 1))

    def test_start_and_continuation_chars(self) -> None:
        """Digits continue but do not start an identifier."""
        assert is_identifier_start("a")
        assert is_identifier_start("_")
        assert not is_identifier_start("1")
        assert not is_identifier_start("é")
        assert is_identifier_char("1")
        assert not is_identifier_char("-")
        assert not is_identifier_char("")

    @given(name=key_names)
    def test_generated_keys_are_valid(self, name: str) -> None:
        """Strategy-generated keys satisfy the grammar."""
        assert is_valid_identifier(name)


class TestPythonNameConflict:
    """Names valid in the grammar but unusable in generated code."""

    @pytest.mark.parametrize("name", ["class", "def", "None", "match", "type"])
    def test_keywords_rejected_for_every_role(self, name: str) -> None:
        """Hard and soft keywords are rejected regardless of role."""
        for role in IdentifierRole:
            reason = python_name_conflict(name, role)
            assert reason is not None
            assert "keyword" in reason

    @pytest.mark.parametrize("name", sorted(RESERVED_MEMBER_NAMES))
    def test_reserved_member_names_rejected_as_keys(self, name: str) -> None:
        """Keys cannot shadow the selector API."""
        assert python_name_conflict(name, IdentifierRole.KEY) is not None

    def test_reserved_member_names_allowed_as_parameters(self) -> None:
        """Parameters live in the accessor scope; 'value' is fine there."""
        assert python_name_conflict("value", IdentifierRole.PARAMETER) is None

    def test_underscore_key_rejected(self) -> None:
        """Enum treats underscore names specially."""
        reason = python_name_conflict("_hidden", IdentifierRole.KEY)
        assert reason is not None
        assert "underscore" in reason

    def test_self_parameter_rejected(self) -> None:
        """'self' is the accessor receiver."""
        assert python_name_conflict("self", IdentifierRole.PARAMETER) is not None
        assert python_name_conflict("self", IdentifierRole.KEY) is None

    @pytest.mark.parametrize("name", ["Enum", "str"])
    def test_type_name_conflicts(self, name: str) -> None:
        """The generated type cannot shadow names the module uses."""
        assert python_name_conflict(name, IdentifierRole.TYPE_NAME) is not None

    @pytest.mark.parametrize("name", sorted(MODULE_LEVEL_NAMES))
    def test_module_level_names_rejected_as_keys(self, name: str) -> None:
        """An accessor named like a module-level name would shadow it in annotations."""
        reason = python_name_conflict(name, IdentifierRole.KEY)
        assert reason is not None
        assert "generated module" in reason

    def test_module_level_names_allowed_as_parameters(self) -> None:
        """Parameters are bound after annotations are evaluated."""
        assert python_name_conflict("str", IdentifierRole.PARAMETER) is None

    @given(name=parameter_names)
    def test_generated_parameters_have_no_conflict(self, name: str) -> None:
        """Strategy-generated parameter names are usable."""
        assert python_name_conflict(name, IdentifierRole.PARAMETER) is None
