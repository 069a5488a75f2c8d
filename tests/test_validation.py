"""Tests for scale config validation"""

import math

import pytest
from typescale import ConfigValidator, ScaleConfig, ScaleConfigError


class TestErrors:
    """Structural problems are errors"""

    def test_default_config_is_valid(self):
        report = ConfigValidator.validate(ScaleConfig())
        assert not report.has_errors
        assert not report.has_warnings

    @pytest.mark.parametrize("field_name", ["positive_steps", "negative_steps"])
    def test_negative_step_count(self, field_name):
        report = ConfigValidator.validate(ScaleConfig(**{field_name: -1}))
        assert any(field_name in error for error in report.errors)

    def test_non_integer_step_count(self):
        report = ConfigValidator.validate(ScaleConfig(positive_steps=2.5))
        assert report.has_errors

    @pytest.mark.parametrize("value", [math.nan, math.inf, -math.inf])
    def test_non_finite_numbers(self, value):
        report = ConfigValidator.validate(ScaleConfig(base_size=value))
        assert report.errors == [f"base_size must be finite, got {value!r}"]

    def test_rem_base_must_be_positive(self):
        report = ConfigValidator.validate(ScaleConfig(rem_base=0))
        assert any("rem_base" in error for error in report.errors)

    def test_viewport_bounds_in_fluid_mode(self):
        """Equal bounds are invalid in fluid mode"""
        report = ConfigValidator.validate(
            ScaleConfig(fluid=True, min_screen_width=800, max_screen_width=800)
        )
        assert any("max_screen_width" in error for error in report.errors)

    def test_viewport_bounds_with_line_heights(self):
        """Line heights need a valid viewport range even without fluid sizes"""
        report = ConfigValidator.validate(
            ScaleConfig(min_line_height=20, max_line_height=28, min_screen_width=1000, max_screen_width=500)
        )
        assert report.has_errors

    def test_viewport_bounds_unused(self):
        """Viewport bounds are not checked when nothing interpolates"""
        report = ConfigValidator.validate(ScaleConfig(min_screen_width=1000, max_screen_width=500))
        assert not report.has_errors

    @pytest.mark.parametrize("prefix", ["", "1step", "step size", "step;"])
    def test_invalid_prefix(self, prefix):
        report = ConfigValidator.validate(ScaleConfig(variable_prefix=prefix))
        assert any("variable_prefix" in error for error in report.errors)

    @pytest.mark.parametrize("prefix", ["step", "fs", "type_scale", "_t-1"])
    def test_valid_prefix(self, prefix):
        assert not ConfigValidator.validate(ScaleConfig(variable_prefix=prefix)).has_errors

    def test_non_integer_element_step(self):
        report = ConfigValidator.validate(ScaleConfig(element_step_assignment={"h1": "7"}))
        assert any("h1" in error for error in report.errors)

    def test_ensure_valid_reports_all_errors(self):
        """Every problem is listed in one error"""
        config = ScaleConfig(negative_steps=-2, rem_base=-1, variable_prefix="9")
        with pytest.raises(ScaleConfigError) as excinfo:
            ConfigValidator.ensure_valid(config)
        message = str(excinfo.value)
        assert "negative_steps" in message
        assert "rem_base" in message
        assert "variable_prefix" in message


class TestWarnings:
    """Degenerate numbers are warnings"""

    def test_zero_base_size(self):
        report = ConfigValidator.ensure_valid(ScaleConfig(base_size=0))
        assert any("base_size" in warning for warning in report.warnings)

    def test_ratio_of_one(self):
        report = ConfigValidator.validate(ScaleConfig(ratio=1))
        assert any("does not grow" in warning for warning in report.warnings)

    def test_advanced_fluid(self):
        report = ConfigValidator.validate(ScaleConfig(fluid=True, advanced_mode=True))
        assert "advanced_mode is not applied to fluid scales" in report.warnings

    def test_mobile_fluid(self):
        report = ConfigValidator.validate(ScaleConfig(fluid=True, mobile_base_size=14))
        assert "Mobile scale is ignored in fluid mode" in report.warnings

    def test_fluid_sizes_checked(self):
        report = ConfigValidator.validate(ScaleConfig(fluid=True, min_base_size=-4))
        assert any("min_base_size" in warning for warning in report.warnings)

    def test_inverted_fluid_bounds(self):
        """A step whose min size is above its max size is reported"""
        report = ConfigValidator.validate(ScaleConfig(fluid=True))
        assert report.warnings == [
            "Fluid min size exceeds max size at step(s) -3; clamp() keeps those steps at the min size"
        ]
        assert ConfigValidator.inverted_fluid_steps(ScaleConfig(fluid=True)) == [-3]

    def test_inverted_bounds_fine_with_locks(self):
        """Locks have no clamp, so a falling step is just a negative slope"""
        report = ConfigValidator.validate(ScaleConfig(fluid=True, use_css_locks=True))
        assert not report.has_warnings

    def test_fluid_bounds_in_order(self):
        config = ScaleConfig(fluid=True, min_ratio=1.2, max_ratio=1.2, min_base_size=14, max_base_size=18)
        assert ConfigValidator.inverted_fluid_steps(config) == []
        assert not ConfigValidator.validate(config).has_warnings
