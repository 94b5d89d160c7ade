import math

import pytest

from geomkernel.units.angle import Angle


class TestAngle:
    def test_half_turn_in_degrees_equals_pi_radians(self):
        assert Angle.degrees(180).value == pytest.approx(Angle.radians(math.pi).value)
        assert Angle.degrees(180).equal_within(Angle.radians(1e-12), Angle.radians(math.pi))

    def test_negative_quarter_turn(self):
        assert Angle.turns(-0.25).value == pytest.approx(Angle.degrees(-90).value)

    def test_conversions(self):
        angle = Angle.degrees(90)
        assert angle.in_radians() == pytest.approx(math.pi / 2)
        assert angle.in_degrees() == pytest.approx(90.0)
        assert angle.in_turns() == pytest.approx(0.25)

    def test_trigonometry(self):
        angle = Angle.degrees(30)
        assert angle.sin() == pytest.approx(0.5)
        assert angle.cos() == pytest.approx(math.sqrt(3) / 2)
        assert Angle.degrees(45).tan() == pytest.approx(1.0)

    def test_inverse_trigonometry_clamps(self):
        assert Angle.acos(1.0000000001).value == 0.0
        assert Angle.asin(-1.0000000001).value == pytest.approx(-math.pi / 2)
        assert Angle.atan2(1.0, 1.0).in_degrees() == pytest.approx(45.0)

    def test_normalize(self):
        assert Angle.degrees(270).normalize().in_degrees() == pytest.approx(-90.0)
        assert Angle.radians(-math.pi).normalize().value == math.pi
        assert Angle.degrees(720 + 30).normalize().in_degrees() == pytest.approx(30.0)
