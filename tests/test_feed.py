"""Tests for the hazard event feed generator and region registry."""

from __future__ import annotations

import numpy as np
import pytest

from weather_hazard.data.baseline_events import BASELINE_EVENTS, baseline_events
from weather_hazard.data.regions import REGION_BOXES, boxes_for
from weather_hazard.feed import (
    clamp_count,
    filter_events,
    generate_events,
    get_feed,
    parse_int,
    parse_types,
)
from weather_hazard.models import HAZARD_TYPES, SEVERITIES, FeedRequest

BASELINE_COUNT = len(BASELINE_EVENTS)


class TestRegionRegistry:
    def test_every_country_has_boxes(self):
        for country, boxes in REGION_BOXES.items():
            assert country == country.lower()
            assert len(boxes) >= 1

    def test_boxes_are_well_formed(self):
        for boxes in REGION_BOXES.values():
            for box in boxes:
                assert box.lat_min < box.lat_max
                assert box.lon_min < box.lon_max

    def test_lookup_is_case_insensitive(self):
        assert boxes_for("  Indonesia ") == REGION_BOXES["indonesia"]
        assert [b.name for b in boxes_for("indonesia")] == [
            "Sumatra",
            "Jawa",
            "Kalimantan",
            "Sulawesi",
            "Papua",
        ]

    @pytest.mark.parametrize("country", [None, "", "atlantis"])
    def test_unknown_country_has_no_boxes(self, country):
        assert boxes_for(country) == ()

    def test_registry_is_read_only(self):
        with pytest.raises(TypeError):
            REGION_BOXES["france"] = ()  # type: ignore[index]


class TestBaseline:
    def test_covers_all_types(self):
        assert {e.type for e in BASELINE_EVENTS} == set(HAZARD_TYPES)

    def test_spans_four_countries(self):
        assert len({e.country for e in BASELINE_EVENTS}) >= 4

    def test_ids_unique(self):
        ids = [e.id for e in BASELINE_EVENTS]
        assert len(ids) == len(set(ids))

    def test_start_is_stamped(self):
        events = baseline_events("2026-10-19T06:00:00+00:00")
        assert all(e.timeframe.start == "2026-10-19T06:00:00+00:00" for e in events)
        assert BASELINE_EVENTS[0].timeframe.start == ""


class TestParsing:
    def test_parse_types(self):
        assert parse_types("Flood, storm,,EARTHQUAKE ") == frozenset({"flood", "storm", "earthquake"})

    @pytest.mark.parametrize("raw", [None, "", ",,"])
    def test_parse_types_empty(self, raw):
        assert parse_types(raw) == frozenset()

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("25", 25),
            ("-3", -3),
            ("12.5", 12),
            ("25abc", 25),
            (" 7", 7),
            (40, 40),
            ("x", None),
            ("abc25", None),
            ("", None),
            (None, None),
        ],
    )
    def test_parse_int(self, raw, expected):
        assert parse_int(raw) == expected


class TestClampCount:
    @pytest.mark.parametrize(
        ("count", "expected"),
        [(None, None), (0, None), (-7, None), (1, 10), (5, 10), (10, 10), (250, 250), (1000, 1000), (5000, 1000)],
    )
    def test_clamp(self, count, expected):
        assert clamp_count(count) == expected


class TestGenerateEvents:
    def test_box_sampling_stays_inside_region(self, rng):
        events = generate_events(500, "indonesia", rng, "t0")
        boxes = {b.name: b for b in REGION_BOXES["indonesia"]}
        for ev in events:
            box = boxes[ev.location.name]
            assert box.contains(ev.location.lat, ev.location.lon)
            assert ev.country == "Indonesia"

    def test_multi_word_country_label(self, rng):
        events = generate_events(10, "united states", rng, "t0")
        assert {e.country for e in events} == {"United States"}
        assert {e.location.name for e in events} == {"US"}

    def test_global_fallback(self, rng):
        events = generate_events(300, None, rng, "t0")
        for ev in events:
            assert ev.country == "Global"
            assert ev.location.name == "Global"
            assert -60 <= ev.location.lat <= 60
            assert -180 <= ev.location.lon <= 180

    def test_unrecognised_country_is_global(self, rng):
        events = generate_events(10, "atlantis", rng, "t0")
        assert {e.country for e in events} == {"Global"}

    def test_confidence_bounds_and_rounding(self, rng):
        for ev in generate_events(1000, None, rng, "t0"):
            assert 0.40 <= ev.confidence <= 0.90
            assert round(ev.confidence, 2) == ev.confidence

    def test_ids_unique_and_encode_fields(self, rng):
        events = generate_events(200, "japan", rng, "t0")
        ids = [e.id for e in events]
        assert len(set(ids)) == len(ids)
        first = events[0]
        assert first.id == f"EV-1-{first.type}-{first.severity}"

    def test_enumerations_respected(self, rng):
        events = generate_events(400, None, rng, "t0")
        assert {e.type for e in events} <= set(HAZARD_TYPES)
        assert {e.severity for e in events} <= set(SEVERITIES)
        # uniform sampling over 400 draws hits every member
        assert {e.type for e in events} == set(HAZARD_TYPES)
        assert {e.severity for e in events} == set(SEVERITIES)

    def test_description_mentions_region(self, rng):
        ev = generate_events(10, "japan", rng, "t0")[0]
        assert "Honshu" in ev.description
        assert ev.type in ev.description

    def test_seed_is_reproducible(self):
        a = generate_events(20, "india", np.random.default_rng(7), "t0")
        b = generate_events(20, "india", np.random.default_rng(7), "t0")
        assert a == b


class TestFilterEvents:
    def test_country_substring(self):
        events = baseline_events("t0")
        result = filter_events(events, country="INDO")
        assert result
        assert all(e.country == "Indonesia" for e in result)

    def test_unknown_type_matches_nothing(self):
        assert filter_events(baseline_events("t0"), types={"volcano"}) == []

    def test_idempotent(self, rng):
        events = baseline_events("t0") + generate_events(100, "japan", rng, "t0")
        once = filter_events(events, "japan", {"storm", "flood"})
        twice = filter_events(once, "japan", {"storm", "flood"})
        assert once == twice

    def test_no_filters_keeps_everything(self):
        events = baseline_events("t0")
        assert filter_events(events) == events


class TestGetFeed:
    def test_no_count_returns_baseline(self, rng, fixed_now):
        events = get_feed(FeedRequest(), rng=rng, now=fixed_now)
        assert [e.id for e in events] == [e.id for e in BASELINE_EVENTS]
        assert all(e.timeframe.start == fixed_now.isoformat() for e in events)

    @pytest.mark.parametrize("count", [None, 0, -1, -1000])
    def test_non_positive_count_adds_nothing(self, rng, count):
        assert len(get_feed(FeedRequest(count=count), rng=rng)) == BASELINE_COUNT

    @pytest.mark.parametrize(("count", "generated"), [(5, 10), (1, 10), (42, 42), (2000, 1000)])
    def test_generated_count_is_clamped(self, rng, count, generated):
        events = get_feed(FeedRequest(count=count), rng=rng)
        assert len(events) == BASELINE_COUNT + generated

    def test_japan_earthquake_scenario(self, rng):
        events = get_feed(FeedRequest(country="japan", types=frozenset({"earthquake"})), rng=rng)
        assert [e.id for e in events] == ["JP-PAC-EQ-1"]

    def test_baseline_first_then_generated(self, rng):
        events = get_feed(FeedRequest(count=10), rng=rng)
        assert [e.id for e in events[:BASELINE_COUNT]] == [e.id for e in BASELINE_EVENTS]
        assert [e.id.split("-")[1] for e in events[BASELINE_COUNT:]] == [str(i) for i in range(1, 11)]

    def test_country_filter_keeps_generated_for_known_country(self, rng):
        events = get_feed(FeedRequest(country="indonesia", count=50), rng=rng)
        baseline_indonesia = [e for e in BASELINE_EVENTS if e.country == "Indonesia"]
        assert len(events) == len(baseline_indonesia) + 50

    def test_unknown_country_drops_global_events(self, rng):
        assert get_feed(FeedRequest(country="atlantis", count=50), rng=rng) == []

    def test_types_filter_applies_to_generated(self, rng):
        events = get_feed(FeedRequest(count=200, types=frozenset({"tsunami"})), rng=rng)
        assert events
        assert all(e.type == "tsunami" for e in events)

    def test_default_rng_used_when_none(self):
        events = get_feed(FeedRequest(count=10))
        assert len(events) == BASELINE_COUNT + 10
