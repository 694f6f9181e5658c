"""Tests for the discipline plugins and their registry."""

import datetime

import pytest

from trizones.disciplines import DisciplineRegistry
from trizones.disciplines.base import DisciplinePlugin, build_zone_table
from trizones.disciplines.bike import BikePlugin
from trizones.disciplines.heart_rate import HeartRatePlugin
from trizones.disciplines.run import RunPlugin
from trizones.disciplines.swim import SwimPlugin
from trizones.engine.freshness import FreshnessConfig
from trizones.engine.zones import compute_zones, is_valid_zone_table
from trizones.schemas.discipline import Discipline

ALL_PLUGINS = [SwimPlugin(), BikePlugin(), RunPlugin(), HeartRatePlugin()]
TESTED_AT = datetime.datetime(2024, 1, 15, 9, 30)


# ======================================================================
# Registry
# ======================================================================


class TestRegistry:
    def test_every_discipline_registered(self):
        assert DisciplineRegistry.missing() == []

    def test_get_or_raise(self):
        plugin = DisciplineRegistry.get_or_raise(Discipline.BIKE)
        assert plugin.threshold_label == "FTP"

    def test_lookup_by_value(self):
        assert DisciplineRegistry.get("hr").threshold_label == "LTHR"
        assert DisciplineRegistry.get("rowing") is None
        with pytest.raises(KeyError, match="rowing"):
            DisciplineRegistry.get_or_raise("rowing")

    def test_all_in_declaration_order(self):
        assert list(DisciplineRegistry.all()) == list(Discipline)

    def test_all_keyed_by_discipline(self):
        plugins = DisciplineRegistry.all()
        assert set(plugins) == set(Discipline)
        for discipline, plugin in plugins.items():
            assert plugin.discipline is discipline

    def test_duplicate_registration_rejected(self):
        with pytest.raises(ValueError, match="already registered"):
            DisciplineRegistry.register(BikePlugin())

    def test_clear_and_restore(self):
        saved = DisciplineRegistry.all()
        try:
            DisciplineRegistry.clear()
            assert DisciplineRegistry.get(Discipline.SWIM) is None
            assert DisciplineRegistry.missing() == list(Discipline)
            with pytest.raises(RuntimeError, match="swim"):
                DisciplineRegistry.ensure_complete()
            with pytest.raises(KeyError, match="not registered"):
                DisciplineRegistry.get_or_raise(Discipline.SWIM)
        finally:
            DisciplineRegistry.clear()
            for plugin in saved.values():
                DisciplineRegistry.register(plugin)
        assert DisciplineRegistry.missing() == []
        DisciplineRegistry.ensure_complete()


# ======================================================================
# Plugin interface compliance
# ======================================================================


@pytest.mark.parametrize("plugin", ALL_PLUGINS, ids=lambda p: p.discipline.value)
class TestPluginInterface:
    def test_is_discipline_plugin(self, plugin):
        assert isinstance(plugin, DisciplinePlugin)

    def test_default_zones_valid(self, plugin):
        zones = plugin.default_zones
        assert len(zones) == 5
        assert is_valid_zone_table(zones)
        assert zones[0].min_pct == 0

    def test_default_zones_fresh_copy(self, plugin):
        assert plugin.default_zones is not plugin.default_zones

    def test_default_profile(self, plugin):
        profile = plugin.default_profile(TESTED_AT)
        assert profile.discipline is plugin.discipline
        assert profile.value == plugin.default_threshold > 0
        assert profile.unit == plugin.unit
        assert profile.last_tested_at == TESTED_AT

    def test_default_zones_compute(self, plugin):
        zones = compute_zones(plugin.default_profile(TESTED_AT), plugin.default_zones)
        assert len(zones) == 5

    def test_empty_log(self, plugin):
        log = plugin.empty_log()
        assert log.discipline is plugin.discipline
        assert log.entries == ()

    def test_recommendations(self, plugin):
        lines = plugin.testing_recommendations()
        assert len(lines) == 3
        assert lines[0].startswith(plugin.threshold_label)
        assert lines[1].startswith("Frequency: Every")


# ======================================================================
# Plugin specifics
# ======================================================================


class TestPluginData:
    @pytest.mark.parametrize(
        "plugin, label, unit, threshold",
        [
            (SwimPlugin(), "CSS", "s/100m", 75.0),
            (BikePlugin(), "FTP", "W", 285.0),
            (RunPlugin(), "Threshold", "s/km", 255.0),
            (HeartRatePlugin(), "LTHR", "bpm", 175.0),
        ],
    )
    def test_labels(self, plugin, label, unit, threshold):
        assert plugin.threshold_label == label
        assert plugin.unit == unit
        assert plugin.default_threshold == threshold

    def test_lower_is_better(self):
        assert SwimPlugin().lower_is_better is True
        assert RunPlugin().lower_is_better is True
        assert BikePlugin().lower_is_better is False
        assert HeartRatePlugin().lower_is_better is False

    def test_frequency_text(self):
        assert BikePlugin().testing_recommendations()[1] == "Frequency: Every 6-8 weeks"
        assert HeartRatePlugin().testing_recommendations()[1] == "Frequency: Every 8-12 weeks"

    def test_frequency_follows_config(self):
        cfg = FreshnessConfig(cadence_weeks={d: (4, 6) for d in Discipline})
        assert SwimPlugin().testing_recommendations(cfg)[1] == "Frequency: Every 4-6 weeks"

    def test_bike_default_display(self):
        plugin = BikePlugin()
        zones = compute_zones(plugin.default_profile(TESTED_AT), plugin.default_zones)
        assert zones[1].display_range == "157 - 214W"


class TestBuildZoneTable:
    def test_indices_and_colors(self):
        zones = build_zone_table([("A", 0, 50, "a"), ("B", 50, 100, "b")])
        assert [z.index for z in zones] == [1, 2]
        assert zones[0].color == "#22D3EE"
        assert zones[1].description == "b"

    def test_more_than_five_zones_reuse_last_color(self):
        rows = [(f"Z{i}", i * 10, (i + 1) * 10, "") for i in range(7)]
        zones = build_zone_table(rows)
        assert zones[6].color == zones[4].color
