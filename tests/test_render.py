"""Tests for world rendering."""

from garden_world.render import fixed, render
from garden_world.types import WorldSize


class TestRender:
    """Tests for the text rendering of a world."""

    def test_full_output(self, make_world) -> None:
        """All ten lines appear in a fixed order and format."""
        world = make_world(
            atmospheric_mass=0.934,
            hydrographics=0.716,
            surface_temp=288.4,
            blackbody_temp=279.6,
            gravity=0.876,
            resources=-1,
        )
        assert render(world) == "\n".join([
            "Size: Standard",
            "Atmospheric Mass: 0.93",
            "Marginal Atmosphere?: false",
            "Hydrographic Coverage: 0.72",
            "Surface Temperature: 288",
            "Blackbody Temperature: 280",
            "Surface Gravity: 0.88",
            "Atmospheric Pressure: 0.82",
            "Resources: -1",
            "Habitability: 8",
        ])

    def test_large_label(self, make_world) -> None:
        """Size label is capitalized."""
        output = render(make_world(size=WorldSize.LARGE))
        assert output.splitlines()[0] == "Size: Large"

    def test_marginal_flag(self, make_world) -> None:
        """Marginal atmospheres render as true."""
        output = render(make_world(marginal_atmosphere=True))
        assert "Marginal Atmosphere?: true" in output.splitlines()

    def test_labels_in_order(self, make_world) -> None:
        """Every line is 'Label: value' in the documented order."""
        labels = [line.split(": ")[0] for line in render(make_world()).splitlines()]
        assert labels == [
            "Size",
            "Atmospheric Mass",
            "Marginal Atmosphere?",
            "Hydrographic Coverage",
            "Surface Temperature",
            "Blackbody Temperature",
            "Surface Gravity",
            "Atmospheric Pressure",
            "Resources",
            "Habitability",
        ]

    def test_render_does_not_change_derived_values(self, make_world) -> None:
        """Rendering twice gives identical text."""
        world = make_world()
        assert render(world) == render(world)


class TestFixed:
    """Tests for half-up fixed-precision formatting."""

    def test_half_rounds_up(self) -> None:
        """288.5 prints as 289, not the banker's 288."""
        assert fixed(288.5, 0) == "289"
        assert fixed(287.5, 0) == "288"

    def test_half_rounds_up_at_two_places(self) -> None:
        """0.125 prints as 0.13."""
        assert fixed(0.125, 2) == "0.13"

    def test_negative_half_rounds_away_from_zero(self) -> None:
        """Negative halves round away from zero."""
        assert fixed(-2.5, 0) == "-3"

    def test_pads_to_places(self) -> None:
        """Whole numbers keep their trailing zeros."""
        assert fixed(1.0, 2) == "1.00"

    def test_temperature_line_rounds_half_up(self, make_world) -> None:
        """Rendered temperatures use half-up rounding."""
        lines = render(make_world(surface_temp=288.5, blackbody_temp=279.5)).splitlines()
        assert "Surface Temperature: 289" in lines
        assert "Blackbody Temperature: 280" in lines
