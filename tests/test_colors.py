"""Unit tests for bfh_plots.colors and bfh_plots.scales."""

import matplotlib.pyplot as plt
import pytest
from matplotlib.colors import ListedColormap, to_hex

from bfh_plots import colors, scales
from bfh_plots.exceptions import InvalidInputError, UnknownColorError, UnknownPaletteError
from bfh_plots.theme import COLORS, PALETTES


class TestCols:
    def test_no_names_returns_full_table(self):
        assert colors.cols() == COLORS

    def test_named_lookup(self):
        assert colors.cols("hospital_primary", "regionh_navy") == {
            "hospital_primary": "#007dbb",
            "regionh_navy": "#002555",
        }

    def test_unknown_name_lists_available(self):
        with pytest.raises(UnknownColorError, match="Available colors") as info:
            colors.cols("primary", "hot_pink")
        assert info.value.names == ["hot_pink"]
        assert isinstance(info.value, KeyError)

    def test_non_string_names(self):
        with pytest.raises(InvalidInputError):
            colors.cols(1)


class TestPalettes:
    def test_main_palette(self):
        assert colors.palette() == ["#007dbb", "#009ce8", "#646c6f", "#333333"]

    def test_reverse(self):
        assert colors.palette("blues", reverse=True) == PALETTES["blues"][::-1]

    def test_palette_is_a_copy(self):
        colors.palette("main").append("#000000")
        assert len(PALETTES["main"]) == 4

    def test_unknown_palette(self):
        with pytest.raises(UnknownPaletteError, match="Available palettes"):
            colors.palette("rainbow")

    def test_every_palette_uses_known_colors(self):
        known = set(COLORS.values())
        for name, values in PALETTES.items():
            assert set(values) <= known, name

    def test_ramp_keeps_endpoints(self):
        ramp = colors.palette_ramp("blues_sequential", 7)
        assert len(ramp) == 7
        assert ramp[0] == "#007dbb"
        assert ramp[-1] == "#ffffff"

    def test_ramp_none_and_zero(self):
        assert colors.palette_ramp("main") == PALETTES["main"]
        assert colors.palette_ramp("main", 0) == []

    @pytest.mark.parametrize("bad", [-1, 2.5, True])
    def test_ramp_rejects_bad_n(self, bad):
        with pytest.raises(InvalidInputError):
            colors.palette_ramp("main", bad)

    def test_cmap_spans_palette(self):
        cmap = colors.palette_cmap("regionh_blues")
        assert cmap.name == "bfh_regionh_blues"
        assert to_hex(cmap(0.0)) == "#002555"

    def test_show_palettes_draws_one_row_per_palette(self):
        fig = colors.show_palettes()
        assert len(fig.axes) == len(PALETTES)

    def test_check_colorblind_safe_passthrough(self):
        values = ["#007dbb", "#333333"]
        assert colors.check_colorblind_safe(values) is values


class TestScales:
    def test_discrete_scale_is_cycler(self):
        scale = scales.color_scale("contrast")
        assert [entry["color"] for entry in scale] == PALETTES["contrast"]

    def test_continuous_scale_is_colormap(self):
        cmap = scales.color_scale("blues", discrete=False)
        assert isinstance(cmap, ListedColormap)
        assert cmap.N == scales.CONTINUOUS_STEPS
        assert to_hex(cmap(0)) == "#007dbb"

    def test_reversed_continuous_name(self):
        cmap = scales.continuous_cmap("blues", reverse=True)
        assert cmap.name == "bfh_blues_r"
        assert to_hex(cmap(0)) == PALETTES["blues"][-1]

    @pytest.mark.parametrize(
        "kwargs",
        [{"palette_name": ""}, {"discrete": "yes"}, {"reverse": None}],
    )
    def test_argument_validation(self, kwargs):
        with pytest.raises(InvalidInputError):
            scales.color_scale(**kwargs)

    def test_apply_scale_sets_axes_cycle(self):
        fig, ax = plt.subplots()
        scales.apply_scale(ax, "regionh")
        lines = [ax.plot([0, 1], [i, i])[0] for i in range(2)]
        assert [to_hex(line.get_color()) for line in lines] == PALETTES["regionh"][:2]
