"""Tests for the Field scalar abstraction and registry.

Tests cover:
- zero lookup for builtin and numpy scalars
- negation derived as zero - a
- Field subclasses describing themselves
- register_field for foreign types
"""

import numpy as np
import pytest

from tests.scalars import Mod7
from vecalg.errors import ScalarTypeError
from vecalg.field import Field, field_spec, is_scalar, negate, register_field, zero_of


class TestZero:
    """Test additive identity lookup."""

    def test_builtin_zeros(self):
        """Test builtin scalars have registered zeros."""
        assert zero_of(float) == 0.0
        assert isinstance(zero_of(float), float)
        assert zero_of(int) == 0
        assert isinstance(zero_of(int), int)

    def test_numpy_zeros_keep_dtype(self):
        """Test numpy scalar zeros carry their own dtype."""
        assert isinstance(zero_of(np.float32), np.float32)
        assert isinstance(zero_of(np.float64), np.float64)
        assert isinstance(zero_of(np.float16), np.float16)

    def test_zero_is_additive_identity(self):
        """Test a + zero == a."""
        for a in (2.5, -3, np.float32(1.25)):
            assert a + zero_of(type(a)) == a

    def test_unknown_type_raises(self):
        """Test unregistered types are rejected."""
        with pytest.raises(ScalarTypeError, match="not a registered field scalar"):
            zero_of(str)

    def test_non_type_raises(self):
        """Test non-type arguments are rejected."""
        with pytest.raises(ScalarTypeError, match="Expected a scalar type"):
            field_spec(3.0)


class TestNegate:
    """Test negation derived from subtraction."""

    def test_float(self):
        """Test float negation."""
        assert negate(2.5) == -2.5

    def test_float32_keeps_type(self):
        """Test numpy negation stays float32."""
        result = negate(np.float32(1.5))
        assert isinstance(result, np.float32)
        assert result == np.float32(-1.5)

    def test_field_subclass_neg_operator(self):
        """Test Field supplies __neg__ as zero - a."""
        assert -Mod7(3) == Mod7(4)
        assert negate(Mod7(3)) == Mod7(4)

    def test_double_negation(self):
        """Test -(-a) == a."""
        assert negate(negate(Mod7(5))) == Mod7(5)
        assert negate(negate(7.0)) == 7.0


class TestFieldSubclass:
    """Test Field subclasses resolving their own spec."""

    def test_spec_from_classmethods(self):
        """Test zero is taken from the class."""
        spec = field_spec(Mod7)
        assert spec.scalar_type is Mod7
        assert spec.zero == Mod7(0)
        assert not spec.is_real

    def test_division_is_the_types_own(self):
        """Test division uses the scalar's own arithmetic."""
        assert Mod7(3) / Mod7(3) == Mod7(1)
        assert (Mod7(6) / Mod7(2)) * Mod7(2) == Mod7(6)

    def test_is_scalar(self):
        """Test is_scalar for known and unknown values."""
        assert is_scalar(Mod7(1))
        assert is_scalar(1.0)
        assert is_scalar(np.float32(1.0))
        assert not is_scalar("1.0")
        assert not is_scalar([1.0])

    def test_abstract_field_not_resolved(self):
        """Test abstract Field itself is not a scalar type."""
        with pytest.raises(ScalarTypeError):
            field_spec(Field)


class TestRegisterField:
    """Test registering foreign types."""

    def test_register_foreign_type(self):
        """Test a plain class can be registered with an explicit zero."""

        class Tally:
            def __init__(self, n=0):
                self.n = n

            def __sub__(self, other):
                return Tally(self.n - other.n)

        spec = register_field(Tally, Tally(0))
        assert field_spec(Tally) is spec
        assert not spec.is_real
        assert negate(Tally(4)).n == -4

    def test_subclass_inherits_registration(self):
        """Test subclasses of registered types resolve through the MRO."""

        class Meters(float):
            pass

        assert field_spec(Meters) is field_spec(float)

    def test_spec_repr(self):
        """Test FieldSpec repr names the kind."""
        assert "real" in repr(field_spec(float))
        assert "field" in repr(field_spec(Mod7))
