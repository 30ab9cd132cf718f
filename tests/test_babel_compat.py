"""Tests for babel_compat module - centralized Babel dependency handling.

Tests the lazy import infrastructure, error handling, and availability checking
for the optional Babel dependency behind CldrLookup.
"""

from __future__ import annotations

import sys
from unittest.mock import patch

import pytest
from babel import Locale
from babel.core import UnknownLocaleError
from hypothesis import example, given
from hypothesis import strategies as st

from posixlocale.core.babel_compat import (
    BabelImportError,
    _check_babel_available,
    get_locale_class,
    get_unknown_locale_error,
    is_babel_available,
    require_babel,
)


class TestBabelAvailability:
    """Test Babel availability checking."""

    def test_is_babel_available_is_cached(self) -> None:
        """Repeated calls return consistent result (cached)."""
        assert is_babel_available() == is_babel_available()

    def test_babel_is_available_in_test_environment(self) -> None:
        """Babel is installed through the test extra."""
        assert is_babel_available() is True

    def test_check_returns_false_when_import_fails(self) -> None:
        """A failing import is reported as unavailable, not raised."""
        _check_babel_available.cache_clear()
        try:
            # A None entry in sys.modules makes the import raise ImportError
            with patch.dict(sys.modules, {"babel": None}):
                assert _check_babel_available() is False
        finally:
            _check_babel_available.cache_clear()
        assert _check_babel_available() is True


class TestRequireBabel:
    """Test require_babel guard function."""

    def test_require_babel_does_not_raise_when_available(self) -> None:
        require_babel("CldrLookup")

    def test_require_babel_raises_when_unavailable(self) -> None:
        with patch("posixlocale.core.babel_compat._check_babel_available", return_value=False):
            with pytest.raises(BabelImportError) as exc_info:
                require_babel("CldrLookup")
        assert exc_info.value.feature == "CldrLookup"

    def test_accessors_raise_when_unavailable(self) -> None:
        """Both class accessors guard on availability before importing."""
        with patch("posixlocale.core.babel_compat._check_babel_available", return_value=False):
            with pytest.raises(BabelImportError, match="get_locale_class"):
                get_locale_class()
            with pytest.raises(BabelImportError, match="get_unknown_locale_error"):
                get_unknown_locale_error()


class TestBabelImportError:
    """Test BabelImportError exception class."""

    @given(feature_name=st.text(min_size=1))
    @example(feature_name="CldrLookup")
    @example(feature_name="get_locale_class")
    def test_babel_import_error_properties(self, feature_name: str) -> None:
        """BabelImportError maintains invariants across all feature names.

        Properties tested:
        1. Error is an ImportError subclass
        2. Feature name appears in error message
        3. Install instructions appear in error message
        4. Feature attribute matches constructor argument
        """
        error = BabelImportError(feature_name)

        assert isinstance(error, ImportError)
        assert feature_name in str(error)
        assert "pip install posixlocale[babel]" in str(error)
        assert error.feature == feature_name


class TestClassAccessors:
    """get_locale_class and get_unknown_locale_error."""

    def test_get_locale_class_returns_locale_type(self) -> None:
        assert get_locale_class() is Locale

    def test_get_unknown_locale_error_returns_exception_class(self) -> None:
        assert get_unknown_locale_error() is UnknownLocaleError

    def test_exception_handling_pattern(self) -> None:
        """The returned error class catches Babel's unknown-locale failure."""
        error_class = get_unknown_locale_error()
        locale_class = get_locale_class()
        with pytest.raises(error_class):
            locale_class.parse("zz")
