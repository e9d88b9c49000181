"""Test classes SeriesSettings and ArccosResult."""
from pydantic import ValidationError
import pytest

from arccos_calculator.common.models import ArccosResult, SeriesSettings


def test_series_settings_defaults() -> None:
    """Defaults are 100 terms and a 1e-15 tolerance."""
    settings = SeriesSettings()
    assert settings.max_terms == 100
    assert settings.tolerance == 1e-15


@pytest.mark.parametrize("kwargs", [
    {"max_terms": 0},
    {"max_terms": -5},
    {"tolerance": -1e-9},
    {"max_terms": "many"},
])
def test_series_settings_invalid(kwargs) -> None:
    """Invalid cutoffs raise a ValidationError."""
    with pytest.raises(ValidationError):
        SeriesSettings(**kwargs)


def test_series_settings_frozen() -> None:
    """Settings cannot be changed after creation."""
    settings = SeriesSettings()
    with pytest.raises(ValidationError):
        settings.max_terms = 10


def test_arccos_result_valid() -> None:
    """A valid ArccosResult can be created."""
    res = ArccosResult(value=0.5, radians=1.0471975512, degrees=60.0, duration_ms=0.01)
    assert res.value == 0.5
    assert isinstance(res.radians, float)


@pytest.mark.parametrize("kwargs", [
    {"value": 1.5, "radians": 0.0, "degrees": 0.0, "duration_ms": 0.0},
    {"value": 0.5, "radians": "not a float", "degrees": 0.0, "duration_ms": 0.0},
    {"value": 0.5, "radians": 0.0, "degrees": 0.0, "duration_ms": -1.0},
])
def test_arccos_result_invalid(kwargs) -> None:
    """Invalid result fields raise a ValidationError."""
    with pytest.raises(ValidationError):
        ArccosResult(**kwargs)


def test_arccos_result_format() -> None:
    """format renders radians to 10 places and degrees to 6."""
    res = ArccosResult(value=0.5, radians=1.0471975511965979, degrees=60.00000000000001, duration_ms=0.0123)
    assert res.format() == (
        "arccos(0.500000) = 1.0471975512 radians\n"
        "≈ 60.000000 degrees\n"
        "Computed in 0.012 ms"
    )
