"""
Unit tests for the antenna physics engine.

Test Coverage:
1. wavelength_m - free-space wavelength from MHz
2. compute_vertical / compute_dipole / compute_yagi / compute_quad - element formulas
3. compute_design - variant dispatch
4. parse_frequency / calculate_all - invalid input produces no result
5. estimate_impedance / estimate_gain - nominal figures and Yagi element scaling
"""

import pytest
from pydantic import ValidationError

from models import AntennaVariant, VerticalDesign, DipoleDesign, YagiDesign, QuadDesign
from services.physics import (
    wavelength_m, compute_vertical, compute_dipole, compute_yagi, compute_quad,
    compute_design, parse_frequency, calculate_all, COMPUTE_BY_VARIANT,
    estimate_impedance, estimate_gain,
)

FREQUENCIES = [1.8, 7.1, 14.2, 27.185, 146.0, 435.0, 1296.0, 10368.0]


class TestWavelength:

    def test_2m_band_wavelength(self):
        """146 MHz is roughly a 2.0534 m wavelength"""
        assert wavelength_m(146) == pytest.approx(2.0534, abs=1e-4)
        print(f"✓ 146 MHz wavelength: {wavelength_m(146):.4f} m")

    @pytest.mark.parametrize("freq", FREQUENCIES)
    def test_wavelength_formula(self, freq):
        assert wavelength_m(freq) == pytest.approx(299792458 / (freq * 1e6))

    def test_wavelength_decreases_with_frequency(self):
        wavelengths = [wavelength_m(f) for f in FREQUENCIES]
        assert all(a > b for a, b in zip(wavelengths, wavelengths[1:]))
        print("✓ Wavelength strictly decreases as frequency rises")


class TestVertical:

    def test_vertical_146(self):
        design = compute_vertical(146)
        assert isinstance(design, VerticalDesign)
        assert design.quarter_wave == pytest.approx(0.4877, abs=1e-4)
        assert design.ground_plane_length == pytest.approx(design.quarter_wave * 0.95)
        print(f"✓ Vertical @146: height {design.quarter_wave:.4f} m, radials {design.ground_plane_length:.4f} m")

    def test_vertical_fixed_fields(self):
        design = compute_vertical(27.185)
        assert design.impedance == "36.8 Ω"
        assert design.gain == "2.15 dBi"
        assert design.balun.balun_type == "Current Balun"
        assert design.balun.ratio == "1:1"

    def test_design_is_immutable(self):
        design = compute_vertical(146)
        with pytest.raises(ValidationError):
            design.quarter_wave = 1.0


class TestDipole:

    def test_dipole_146(self):
        design = compute_dipole(146)
        assert isinstance(design, DipoleDesign)
        assert design.half_wave == pytest.approx(0.9753, abs=1e-4)
        print(f"✓ Dipole @146: {design.half_wave:.4f} m total")

    @pytest.mark.parametrize("freq", FREQUENCIES)
    def test_each_side_is_half_of_total(self, freq):
        design = compute_dipole(freq)
        assert design.each_side == pytest.approx(design.half_wave / 2)

    def test_dipole_fixed_fields(self):
        design = compute_dipole(7.1)
        assert design.impedance == "73 Ω"
        assert design.gain == "2.15 dBi"
        assert (design.balun.balun_type, design.balun.ratio) == ("Current Balun", "1:1")


class TestYagi:

    @pytest.mark.parametrize("freq", FREQUENCIES)
    def test_element_ordering(self, freq):
        """Reflector > driven > director at every frequency"""
        design = compute_yagi(freq)
        assert design.reflector > design.driven_element > design.director

    def test_yagi_ratios(self):
        design = compute_yagi(28.5)
        wl = wavelength_m(28.5)
        assert design.driven_element == pytest.approx(wl * 0.95)
        assert design.reflector == pytest.approx(design.driven_element * 1.05)
        assert design.director == pytest.approx(design.driven_element * 0.95)
        assert design.boom_length == pytest.approx(wl * 0.2)
        print(f"✓ Yagi @28.5: driven {design.driven_element:.3f} m, boom {design.boom_length:.3f} m")

    def test_yagi_has_no_impedance_field(self):
        design = compute_yagi(146)
        assert isinstance(design, YagiDesign)
        assert not hasattr(design, "impedance")
        assert design.gain == "7-10 dBi"
        assert design.balun.ratio == "1:1"


class TestQuad:

    def test_quad_side_is_quarter_perimeter(self):
        design = compute_quad(146)
        assert isinstance(design, QuadDesign)
        assert design.loop_perimeter == pytest.approx(wavelength_m(146) * 0.95)
        assert design.side_length == pytest.approx(design.loop_perimeter / 4)

    def test_quad_fixed_fields(self):
        design = compute_quad(21.225)
        assert design.impedance == "100-140 Ω"
        assert design.gain == "3-4 dBi"
        assert (design.balun.balun_type, design.balun.ratio) == ("Voltage Balun", "4:1")
        print("✓ Quad uses a 4:1 voltage balun")


class TestDispatch:

    @pytest.mark.parametrize("variant,expected", [
        ("vertical", VerticalDesign), ("dipole", DipoleDesign),
        ("yagi", YagiDesign), ("quad", QuadDesign),
    ])
    def test_compute_design_by_name(self, variant, expected):
        design = compute_design(variant, 146)
        assert isinstance(design, expected)
        assert design.variant == AntennaVariant(variant)

    def test_compute_design_matches_direct_call(self):
        assert compute_design(AntennaVariant.YAGI, 50.0) == compute_yagi(50.0)

    def test_every_variant_has_a_formula(self):
        assert set(COMPUTE_BY_VARIANT) == set(AntennaVariant)

    def test_unknown_variant_raises(self):
        with pytest.raises(ValueError):
            compute_design("log-periodic", 146)


class TestInvalidFrequency:

    @pytest.mark.parametrize("value", [0, -5, float("nan"), float("inf"), "", "abc", None, True, 1e-310])
    def test_parse_frequency_rejects(self, value):
        assert parse_frequency(value) is None

    @pytest.mark.parametrize("value,expected", [("146", 146.0), (" 27.185 ", 27.185), (7, 7.0)])
    def test_parse_frequency_accepts(self, value, expected):
        assert parse_frequency(value) == expected

    @pytest.mark.parametrize("value", [0, -5, float("nan"), "not a number", 1e-310])
    def test_calculate_all_returns_none(self, value):
        """Invalid input yields no designs instead of raising"""
        assert calculate_all(value) is None

    def test_calculate_all_valid(self):
        designs = calculate_all("146")
        assert designs.frequency_mhz == 146.0
        assert designs.wavelength == pytest.approx(wavelength_m(146))
        assert designs.vertical == compute_vertical(146)
        assert designs.dipole == compute_dipole(146)
        assert designs.yagi == compute_yagi(146)
        assert designs.quad == compute_quad(146)
        for variant in AntennaVariant:
            assert designs.get(variant).variant == variant
        print("✓ calculate_all computes all four variants")


class TestEstimates:

    @pytest.mark.parametrize("variant,expected", [
        ("vertical", 36.8), ("dipole", 73.0), ("yagi", 50.0), ("quad", 120.0), ("rhombic", 50.0),
    ])
    def test_impedance(self, variant, expected):
        assert estimate_impedance(variant, 146) == expected

    def test_impedance_ignores_frequency(self):
        for variant in AntennaVariant:
            assert estimate_impedance(variant, 1.8) == estimate_impedance(variant, 1296)

    @pytest.mark.parametrize("variant,expected", [
        ("vertical", 2.15), ("dipole", 2.15), ("quad", 3.5), ("rhombic", 0.0),
    ])
    def test_fixed_gain(self, variant, expected):
        assert estimate_gain(variant, 146, 8) == expected

    def test_yagi_gain_five_elements(self):
        assert estimate_gain("yagi", 146, 5) == pytest.approx(10.0)
        assert estimate_gain(AntennaVariant.YAGI, 7.1, 5) == pytest.approx(10.0)
        print("✓ 5-element Yagi estimate: 10.0 dBi")

    @pytest.mark.parametrize("elements", range(2, 21))
    def test_yagi_gain_is_linear(self, elements):
        assert estimate_gain("yagi", 28.5, elements) == pytest.approx(7 + (elements - 3) * 1.5)

    def test_yagi_default_element_count(self):
        assert estimate_gain("yagi", 146) == pytest.approx(4.0)


class TestSubnormalFrequency:

    def test_wavelength_overflow_is_rejected(self):
        """A tiny positive frequency overflows the wavelength and produces no result"""
        assert parse_frequency(1e-310) is None
        assert calculate_all(1e-310) is None
        assert parse_frequency(1e-6) == 1e-6
        print("✓ 1e-310 MHz rejected before any design is built")
