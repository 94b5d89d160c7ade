import pytest
from typing import Optional, Tuple

from pydantic import ValidationError, field_validator

from geomkernel.utils.base_model import ImmutableModel


class Marker(ImmutableModel):
    label: str
    x: float
    y: float


class Disk(ImmutableModel):
    radius: float

    @field_validator("radius")
    @classmethod
    def validate_radius(cls, v: float) -> float:
        if v < 0:
            raise ValueError("radius must not be negative")
        return v


class Layer(ImmutableModel):
    name: str
    markers: Tuple[Marker, ...] = ()
    origin: Optional[Marker] = None


@pytest.fixture
def marker():
    return Marker(label="p", x=1.0, y=2.0)


class TestImmutableModel:
    def test_fields_are_frozen(self, marker):
        with pytest.raises(ValidationError):
            marker.x = 5.0

    def test_equal_fields_mean_equal_values(self, marker):
        twin = Marker(label="p", x=1.0, y=2.0)
        assert marker == twin
        assert hash(marker) == hash(twin)
        assert {marker, twin} == {marker}

    def test_negative_zero_equals_zero(self):
        assert Marker(label="o", x=-0.0, y=0.0) == Marker(label="o", x=0.0, y=0.0)

    def test_with_changes_returns_new_value(self, marker):
        moved = marker.with_changes(x=3.0)
        assert moved == Marker(label="p", x=3.0, y=2.0)
        assert marker.x == 1.0

    def test_with_changes_several_fields(self, marker):
        assert marker.with_changes(label="q", y=-1.0) == Marker(label="q", x=1.0, y=-1.0)

    def test_with_changes_unknown_field(self, marker):
        with pytest.raises(ValueError, match="Invalid field: z"):
            marker.with_changes(z=0.0)

    def test_with_changes_runs_validators(self):
        with pytest.raises(ValidationError):
            Disk(radius=1.0).with_changes(radius=-2.0)

    def test_unsafe_skips_validators(self):
        assert Disk.unsafe(radius=-2.0).radius == -2.0

    def test_nested_values(self, marker):
        layer = Layer(name="base", markers=(marker,), origin=marker)
        renamed = layer.with_changes(name="top")
        assert renamed.markers == (marker,)
        assert renamed.origin == marker
        assert layer.with_changes(origin=None).origin is None

    def test_round_trip_through_dump(self, marker):
        layer = Layer(name="base", markers=(marker, marker.with_changes(x=0.0)))
        assert Layer.model_validate(layer.model_dump()) == layer
