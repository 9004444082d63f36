"""Unit tests for bfh_plots.fonts.

Tests cover cache keys, cache idempotence, forced refresh, fallback to
``sans``, enumeration sources and the convenience helpers.
"""

import subprocess
import threading
import time
from concurrent.futures import ThreadPoolExecutor
from unittest.mock import patch

import matplotlib.pyplot as plt
import pytest

from bfh_plots import config, fonts
from bfh_plots.exceptions import InvalidInputError
from bfh_plots.fonts import FontCache, FontResolver


PRIORITY = ("Mari", "Roboto", "Arial", "sans")


class TestFontCache:
    """Tests for the cache object itself."""

    def test_key_joins_candidates_and_flag(self):
        """Verify the key format matches 'Mari|Roboto|Arial|sans_true'."""
        assert FontCache.key(PRIORITY, True) == "Mari|Roboto|Arial|sans_true"
        assert FontCache.key(PRIORITY, False) == "Mari|Roboto|Arial|sans_false"

    def test_key_depends_on_order(self):
        """Verify candidate order produces distinct keys."""
        assert FontCache.key(["A", "B"], True) != FontCache.key(["B", "A"], True)

    def test_set_get_clear(self):
        """Verify entries are stored and cleared."""
        cache = FontCache()
        cache.set("k", "Roboto")
        assert cache.get("k") == "Roboto"
        assert "k" in cache
        assert len(cache) == 1
        cache.clear()
        assert cache.get("k") is None
        assert len(cache) == 0


class TestResolve:
    """Tests for FontResolver.resolve()."""

    def test_example_scenario_only_arial_installed(self, counting_source):
        """Verify the first installed candidate wins and is served from cache."""
        source = counting_source({"Arial"})
        resolver = FontResolver(sources=[source])

        assert resolver.resolve(PRIORITY) == "Arial"
        assert resolver.resolve(PRIORITY) == "Arial"
        assert source.calls == 1

    def test_enumeration_runs_at_most_once(self, counting_source):
        """Verify many unforced calls query the system once."""
        source = counting_source({"Roboto", "Arial"})
        resolver = FontResolver(sources=[source])

        results = {resolver.resolve(PRIORITY) for _ in range(50)}
        assert results == {"Roboto"}
        assert source.calls == 1

    def test_force_refresh_requeries_and_overwrites(self, counting_source):
        """Verify force_refresh bypasses and then repopulates the cache."""
        source = counting_source({"Arial"})
        resolver = FontResolver(sources=[source])
        assert resolver.resolve(PRIORITY) == "Arial"

        source.families = {"Mari", "Arial"}
        assert resolver.resolve(PRIORITY) == "Arial"
        assert resolver.resolve(PRIORITY, force_refresh=True) == "Mari"
        assert source.calls == 2
        assert resolver.resolve(PRIORITY) == "Mari"
        assert source.calls == 2

    def test_force_refresh_always_queries(self, counting_source):
        """Verify every forced call hits the enumeration source."""
        source = counting_source({"Arial"})
        resolver = FontResolver(sources=[source])
        for _ in range(3):
            resolver.resolve(PRIORITY, force_refresh=True)
        assert source.calls == 3

    def test_order_matters(self, counting_source):
        """Verify reversed candidate lists resolve and cache independently."""
        resolver = FontResolver(sources=[counting_source({"A", "B"})])
        assert resolver.resolve(["A", "B"]) == "A"
        assert resolver.resolve(["B", "A"]) == "B"
        assert len(resolver.cache) == 2

    def test_none_installed_falls_back_to_sans(self, counting_source):
        """Verify the universal fallback when no candidate is installed."""
        resolver = FontResolver(sources=[counting_source({"Comic Sans MS"})])
        assert resolver.resolve(["Mari", "Roboto"]) == "sans"
        assert resolver.cache.get(FontCache.key(["Mari", "Roboto"], True)) == "sans"

    def test_verify_installed_false_skips_enumeration(self, counting_source):
        """Verify the first candidate is returned without touching the system."""
        source = counting_source({"Arial"})
        resolver = FontResolver(sources=[source])
        assert resolver.resolve(PRIORITY, verify_installed=False) == "Mari"
        assert source.calls == 0
        assert len(resolver.cache) == 0

    def test_no_enumeration_available_is_not_cached(self, counting_source):
        """Verify 'sans' from a missing facility does not stick in the cache."""
        source = counting_source(None)
        resolver = FontResolver(sources=[source])
        assert resolver.resolve(PRIORITY) == "sans"
        assert len(resolver.cache) == 0

        source.families = {"Roboto"}
        assert resolver.resolve(PRIORITY) == "Roboto"

    def test_fallback_source_used_when_primary_unavailable(self, counting_source):
        """Verify sources are tried in order until one answers."""
        primary = counting_source(None)
        secondary = counting_source({"Roboto"})
        resolver = FontResolver(sources=[primary, secondary])
        assert resolver.resolve(PRIORITY) == "Roboto"
        assert primary.calls == 1
        assert secondary.calls == 1

    def test_failing_source_never_raises(self, counting_source):
        """Verify an exploding source degrades to the next one, then to sans."""
        def broken():
            raise RuntimeError("font daemon is down")

        assert FontResolver(sources=[broken]).resolve(PRIORITY) == "sans"
        resolver = FontResolver(sources=[broken, counting_source({"Arial"})])
        assert resolver.resolve(PRIORITY) == "Arial"

    def test_skip_font_checks_env(self, monkeypatch, counting_source):
        """Verify BFH_PLOTS_SKIP_FONT_CHECKS disables enumeration."""
        monkeypatch.setenv(config.SKIP_FONT_CHECKS_ENV, "1")
        source = counting_source({"Mari"})
        assert FontResolver(sources=[source]).resolve(PRIORITY) == "sans"
        assert source.calls == 0

    @pytest.mark.parametrize("bad", [[], (), "Mari", None, ["Mari", ""], [1, 2]])
    def test_invalid_candidates_raise(self, bad):
        """Verify malformed candidate lists are rejected as InvalidInputError."""
        with pytest.raises(InvalidInputError):
            FontResolver(sources=[]).resolve(bad)

    def test_non_bool_flags_raise(self):
        """Verify flags must be real booleans."""
        with pytest.raises(InvalidInputError, match="force_refresh"):
            FontResolver(sources=[]).resolve(PRIORITY, force_refresh="yes")

    def test_clear_cache_forces_new_lookup(self, counting_source):
        """Verify clear_cache() empties every key."""
        source = counting_source({"Arial"})
        resolver = FontResolver(sources=[source])
        resolver.resolve(PRIORITY)
        resolver.resolve(["Arial"])
        resolver.clear_cache()
        assert len(resolver.cache) == 0
        resolver.resolve(PRIORITY)
        assert source.calls == 3

    def test_concurrent_callers_enumerate_once(self):
        """Verify racing threads share a single enumeration."""
        calls = []
        lock = threading.Lock()

        def slow_source():
            with lock:
                calls.append(1)
            time.sleep(0.05)
            return {"Roboto"}

        resolver = FontResolver(sources=[slow_source])
        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(lambda _: resolver.resolve(PRIORITY), range(16)))

        assert set(results) == {"Roboto"}
        assert len(calls) == 1


class TestSources:
    """Tests for the built-in enumeration sources."""

    def test_fontconfig_missing_returns_none(self):
        """Verify a missing fc-list binary means 'unavailable'."""
        with patch("bfh_plots.fonts.shutil.which", return_value=None):
            assert fonts.fontconfig_families() is None

    def test_fontconfig_parses_families(self):
        """Verify comma-separated aliases are split into families."""
        proc = subprocess.CompletedProcess(
            args=[], returncode=0, stdout="DejaVu Sans\nRoboto,Roboto Regular\n\n"
        )
        with patch("bfh_plots.fonts.shutil.which", return_value="/usr/bin/fc-list"), \
                patch("bfh_plots.fonts.subprocess.run", return_value=proc) as run:
            families = fonts.fontconfig_families()

        assert families == {"DejaVu Sans", "Roboto", "Roboto Regular"}
        assert run.call_args.kwargs["timeout"] == fonts.FC_LIST_TIMEOUT

    def test_fontconfig_timeout_returns_none(self):
        """Verify a hung fc-list is treated as unavailable."""
        with patch("bfh_plots.fonts.shutil.which", return_value="/usr/bin/fc-list"), \
                patch("bfh_plots.fonts.subprocess.run",
                      side_effect=subprocess.TimeoutExpired("fc-list", 5)):
            assert fonts.fontconfig_families() is None

    def test_matplotlib_families_returns_names(self):
        """Verify matplotlib's font manager reports at least its bundled DejaVu fonts."""
        families = fonts.matplotlib_families()
        assert families is not None
        assert "DejaVu Sans" in families


class TestHelpers:
    """Tests for the module-level convenience functions."""

    def test_get_font_uses_priority_list(self, fake_fonts):
        """Verify get_font() walks Mari → Roboto → Arial → sans."""
        assert fonts.get_font() == "Arial"
        assert fonts.get_font() == "Arial"
        assert fake_fonts.calls == 1

    def test_resolve_font_and_clear(self, fake_fonts):
        """Verify the module-level cache can be cleared."""
        fonts.resolve_font(["Arial"])
        fonts.clear_font_cache()
        fonts.resolve_font(["Arial"])
        assert fake_fonts.calls == 2

    def test_check_fonts_reports_availability(self, counting_source):
        """Verify the availability report maps each BFH font to a bool."""
        resolver = FontResolver(sources=[counting_source({"Roboto", "Arial"})])
        report = fonts.check_fonts(resolver)
        assert report == {"Mari Office": False, "Mari": False, "Roboto": True, "Arial": True}

    def test_check_fonts_without_enumeration(self, counting_source):
        """Verify availability is None when fonts cannot be listed."""
        report = fonts.check_fonts(FontResolver(sources=[counting_source(None)]))
        assert set(report.values()) == {None}

    def test_set_fonts_updates_rcparams(self, fake_fonts):
        """Verify set_fonts() makes the detected font matplotlib's default."""
        assert fonts.set_fonts() == "Arial"
        assert plt.rcParams["font.family"] == ["Arial"]

    def test_mpl_family_maps_sans(self):
        assert fonts.mpl_family("sans") == "sans-serif"
        assert fonts.mpl_family("Roboto") == "Roboto"

    @pytest.mark.parametrize(
        "platform, expected",
        [("darwin", "brew install"), ("win32", "Install"), ("linux", "apt-get")],
    )
    def test_roboto_install_hint(self, platform, expected):
        hint = fonts.roboto_install_hint(platform)
        assert expected in hint
        assert "fonts.google.com" in hint
