"""Tests for YAML/JSON scale config parsing"""

import pytest
from typescale import ScaleConfigError, ScaleConfigParser
from typescale.core.ratios import ElementPresets, RatioTable


class TestBasicParsing:
    """Top-level keys"""

    def test_full_single_base_config(self):
        """All single-base keys map onto ScaleConfig"""
        content = '''
base_size: 18
ratio: 1.2
positive_steps: 5
negative_steps: 2
advanced: true
use_rem: false
rem_base: 10
output:
  prefix: fs
  sass: true
font: Inter
preview_text: Sphinx of black quartz
'''
        config = ScaleConfigParser().parse(content)

        assert config.base_size == 18
        assert config.ratio == 1.2
        assert config.positive_steps == 5
        assert config.negative_steps == 2
        assert config.advanced_mode is True
        assert config.use_rem is False
        assert config.rem_base == 10
        assert config.variable_prefix == "fs"
        assert config.emit_sass_variables is True
        assert config.font_family == "Inter"
        assert config.preview_text == "Sphinx of black quartz"

    def test_empty_document_uses_defaults(self):
        """An empty config falls back to defaults and the default preset"""
        config = ScaleConfigParser().parse("")
        assert config.base_size == 16
        assert config.ratio == 1.333
        assert list(config.element_step_assignment)[0] == "display"

    def test_json_content(self):
        """JSON is accepted as YAML"""
        config = ScaleConfigParser().parse('{"base_size": 20, "ratio": "Golden Ratio"}')
        assert config.base_size == 20
        assert config.ratio == 1.618

    def test_parse_file(self, tmp_path):
        """Config files are read from disk"""
        path = tmp_path / "scale.yaml"
        path.write_text("base_size: 15\nratio: Major Third\n", encoding="utf-8")
        config = ScaleConfigParser().parse_file(str(path))
        assert config.base_size == 15
        assert config.ratio == 1.25


class TestNamedRatios:
    """Ratio names resolve through the ratio table"""

    @pytest.mark.parametrize(
        "name,value",
        [("Perfect Fourth", 1.333), ("perfect fourth", 1.333), ("Minor Second", 1.067), ("1.5", 1.5)],
    )
    def test_ratio_names(self, name, value):
        config = ScaleConfigParser().parse(f"ratio: '{name}'")
        assert config.ratio == value

    def test_unknown_ratio(self):
        """Unknown names raise a config error listing the known ratios"""
        with pytest.raises(ScaleConfigError, match="Unknown ratio 'Perfect Tenth'"):
            ScaleConfigParser().parse("ratio: Perfect Tenth")

    def test_ratio_table(self):
        """The packaged table holds the eight classic ratios"""
        assert RatioTable.get("Golden Ratio") == 1.618
        assert len(RatioTable.names()) == 8


class TestSections:
    """Nested sections"""

    def test_fluid_section(self):
        """Fluid keys map to the fluid fields"""
        content = '''
fluid:
  min_base_size: 14
  max_base_size: 20
  min_ratio: Major Second
  max_ratio: Perfect Fifth
  min_screen_width: 360
  max_screen_width: 1440
  css_locks: true
'''
        config = ScaleConfigParser().parse(content)

        assert config.fluid is True
        assert config.min_base_size == 14
        assert config.max_base_size == 20
        assert config.min_ratio == 1.125
        assert config.max_ratio == 1.5
        assert config.min_screen_width == 360
        assert config.max_screen_width == 1440
        assert config.use_css_locks is True

    def test_fluid_flag(self):
        """'fluid: true' enables fluid mode with default bounds"""
        assert ScaleConfigParser().parse("fluid: true").fluid is True
        assert ScaleConfigParser().parse("fluid: {enabled: false}").fluid is False

    def test_line_height_section(self):
        config = ScaleConfigParser().parse("line_height: {min: 22, max: 30}")
        assert config.min_line_height == 22
        assert config.max_line_height == 30
        assert config.line_heights_enabled

    def test_line_height_needs_both(self):
        with pytest.raises(ScaleConfigError, match="both"):
            ScaleConfigParser().parse("line_height: {min: 22}")

    def test_mobile_section(self):
        config = ScaleConfigParser().parse("mobile: {base_size: 14, ratio: Minor Third, breakpoint: 600}")
        assert config.mobile_base_size == 14
        assert config.mobile_ratio == 1.2
        assert config.breakpoint == 600
        assert config.mobile_enabled


class TestElements:
    """Element presets and explicit assignments"""

    def test_named_preset(self):
        """Preset names load the packaged groups in file order"""
        config = ScaleConfigParser().parse("elements: headings")
        assert list(config.element_step_assignment) == ["h1", "h2", "h3", "h4", "h5", "h6"]
        assert config.element_step_assignment == ElementPresets.get("headings")

    def test_default_preset(self):
        """The default preset runs from display down to micro"""
        preset = ElementPresets.get("default")
        assert preset["display"] == 9
        assert preset["p"] == 0
        assert preset["micro"] == -3
        assert len(preset) == 13

    def test_explicit_mapping(self):
        """Mappings keep their order and coerce integer strings"""
        config = ScaleConfigParser().parse("elements:\n  h2: '4'\n  p: 0\n  caption: -1\n")
        assert list(config.element_step_assignment.items()) == [("h2", 4), ("p", 0), ("caption", -1)]

    def test_disabled(self):
        assert ScaleConfigParser().parse("elements: false").element_step_assignment == {}

    def test_unknown_preset(self):
        with pytest.raises(ScaleConfigError, match="Unknown element preset"):
            ScaleConfigParser().parse("elements: everything")

    def test_non_integer_step(self):
        with pytest.raises(ScaleConfigError, match="elements.h1"):
            ScaleConfigParser().parse("elements: {h1: 1.5}")


class TestParserErrors:
    """Malformed documents"""

    def test_unknown_key_strict(self):
        """Strict mode rejects unknown keys"""
        with pytest.raises(ScaleConfigError, match="Unknown key"):
            ScaleConfigParser().parse("base_size: 16\nbase_sizes: 18\n")

    def test_unknown_key_lenient(self):
        """Lenient mode ignores unknown keys"""
        config = ScaleConfigParser(strict_mode=False).parse("base_size: 17\nbase_sizes: 18\n")
        assert config.base_size == 17

    def test_malformed_yaml(self):
        with pytest.raises(ScaleConfigError, match="Malformed"):
            ScaleConfigParser().parse("base_size: [16\n")

    def test_top_level_list(self):
        with pytest.raises(ScaleConfigError, match="mapping"):
            ScaleConfigParser().parse("- 16\n- 18\n")

    def test_non_numeric_size(self):
        with pytest.raises(ScaleConfigError, match="base_size must be a number"):
            ScaleConfigParser().parse("base_size: large")

    def test_section_must_be_mapping(self):
        with pytest.raises(ScaleConfigError, match="'output' must be a mapping"):
            ScaleConfigParser().parse("output: step")
