"""Tests for result models and the standards table."""

from __future__ import annotations

import dataclasses
import logging

import pytest

from en14960.config import limits
from en14960.config.settings import Settings, init_logging
from en14960.models import CalculatorResponse


class TestCalculatorResponse:
    def test_attributes(self, sample_response):
        assert sample_response.value == 42
        assert sample_response.value_suffix == "m"
        assert sample_response.breakdown == (("Step 1", "Value 1"), ("Step 2", "Value 2"))

    def test_defaults(self):
        response = CalculatorResponse(value=42)
        assert response.value_suffix == ""
        assert response.breakdown == ()

    def test_breakdown_is_immutable(self):
        steps = [["Step 1", "Value 1"]]
        response = CalculatorResponse(value=1, breakdown=steps)
        steps.append(["Step 2", "Value 2"])
        assert response.breakdown == (("Step 1", "Value 1"),)
        with pytest.raises(dataclasses.FrozenInstanceError):
            response.breakdown = ()  # type: ignore[misc]

    def test_to_dict(self, sample_response):
        assert sample_response.to_dict() == {
            "value": 42,
            "value_suffix": "m",
            "breakdown": [["Step 1", "Value 1"], ["Step 2", "Value 2"]],
        }

    def test_as_json_alias(self):
        response = CalculatorResponse(value={"users_1000mm": 3})
        assert response.as_json() == response.to_dict()
        assert response.to_dict()["value"] == {"users_1000mm": 3}

    def test_mapping_value_is_read_only(self):
        counts = {"users_1000mm": 3}
        response = CalculatorResponse(value=counts)
        counts["users_1000mm"] = 9
        assert response.value == {"users_1000mm": 3}
        with pytest.raises(TypeError):
            response.value["users_1000mm"] = 5  # type: ignore[index]

    def test_hashable(self, sample_response):
        mapped = CalculatorResponse(value={"users_1000mm": 3}, breakdown=[("a", "b")])
        assert hash(mapped) == hash(CalculatorResponse(value={"users_1000mm": 3}, breakdown=[("a", "b")]))
        assert len({sample_response, sample_response}) == 1

    def test_value_equality(self):
        assert CalculatorResponse(value=1, breakdown=[("a", "b")]) == CalculatorResponse(value=1, breakdown=(("a", "b"),))


class TestLimits:
    def test_anchor_constants(self):
        c = limits.ANCHOR_CALCULATION
        assert (c.area_coefficient, c.base_divisor, c.safety_factor, c.minimum_anchors) == (114.0, 1600.0, 1.5, 6)

    def test_slide_thresholds_increase(self):
        t = limits.SLIDE_HEIGHT_THRESHOLDS
        assert t.no_walls_required < t.basic_walls < t.enhanced_walls < t.max_safe_height
        assert (t.no_walls_required, t.basic_walls, t.enhanced_walls, t.max_safe_height) == (0.6, 3.0, 6.0, 8.0)

    def test_runout_and_wall_constants(self):
        r = limits.RUNOUT_CALCULATION
        assert (r.platform_height_ratio, r.minimum_runout_meters, r.stop_wall_addition) == (0.5, 0.3, 0.5)
        assert limits.WALL_HEIGHT.enhanced_height_multiplier == 1.25

    def test_area_divisor_increases_with_height(self):
        assert dict(limits.AREA_DIVISOR) == {1000: 1.0, 1200: 1.33, 1500: 1.66, 1800: 2.0}
        divisors = [limits.AREA_DIVISOR[h] for h in sorted(limits.AREA_DIVISOR)]
        assert divisors == sorted(divisors)

    def test_material_standards(self):
        m = limits.MATERIAL_STANDARDS
        assert (m.rope.min_diameter, m.rope.max_diameter) == (18, 45)
        assert m.fabric.min_tensile_strength > m.fabric.min_tear_strength
        assert m.netting.max_roof_mesh < m.netting.max_vertical_mesh
        assert m.thread.min_tensile_strength == 88

    def test_constants_are_read_only(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            limits.ANCHOR_CALCULATION.minimum_anchors = 4  # type: ignore[misc]
        with pytest.raises(TypeError):
            limits.AREA_DIVISOR[1000] = 0.5  # type: ignore[index]

    def test_height_categories(self):
        categories = limits.height_categories()
        assert categories[1000]["label"] == "1.0m (Young children)"
        assert categories[1800]["label"] == "1.8m (Adults)"

    def test_material_standards_mapping(self):
        standards = limits.material_standards()
        assert standards["fabric"]["min_tensile_strength"] == 1850
        assert standards["fabric"]["fire_standard"] == "EN 71-3"
        assert standards["rope"]["min_diameter"] == 18
        assert standards["netting"]["max_roof_mesh"] == 8

    def test_reference_data(self):
        assert limits.GROUNDING_TEST_WEIGHTS["height_1800mm"] == 85
        assert limits.REINSPECTION_INTERVAL_DAYS == 365


class TestSettings:
    def test_default(self):
        settings = Settings.default()
        assert settings.log_level == logging.INFO
        assert settings.log_file is None

    def test_init_logging_with_file(self, tmp_path):
        log_file = tmp_path / "logs" / "en14960.log"
        root = logging.getLogger()
        before = list(root.handlers)
        try:
            root.handlers = []
            init_logging(Settings(log_level=logging.DEBUG, log_file=log_file))
            assert log_file.exists()
        finally:
            for handler in root.handlers:
                handler.close()
            root.handlers = before
