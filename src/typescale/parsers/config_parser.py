"""
Scale config parser

Reads YAML (or JSON, which YAML accepts) scale configs into ScaleConfig.

Example:

    base_size: 16
    ratio: Perfect Fourth
    positive_steps: 9
    negative_steps: 3
    fluid:
      min_base_size: 14
      max_base_size: 18
      min_ratio: Major Third
      max_ratio: Perfect Fourth
      css_locks: false
    line_height: {min: 24, max: 32}
    output: {prefix: step, sass: true}
    elements: default
"""

from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from ..core.models import ScaleConfig
from ..core.ratios import ElementPresets, RatioTable
from ..core.validation import ScaleConfigError
from ..utils.logging import TypeScaleLogger


class ScaleConfigParser:
    """Parse scale config documents into ScaleConfig"""

    TOP_LEVEL_KEYS = {
        "base_size",
        "ratio",
        "positive_steps",
        "negative_steps",
        "advanced",
        "use_rem",
        "rem_base",
        "fluid",
        "line_height",
        "mobile",
        "output",
        "elements",
        "font",
        "preview_text",
    }
    FLUID_KEYS = {
        "enabled",
        "min_base_size",
        "max_base_size",
        "min_ratio",
        "max_ratio",
        "min_screen_width",
        "max_screen_width",
        "css_locks",
    }
    LINE_HEIGHT_KEYS = {"min", "max"}
    MOBILE_KEYS = {"base_size", "ratio", "breakpoint"}
    OUTPUT_KEYS = {"prefix", "sass"}

    def __init__(self, strict_mode: bool = True):
        self.strict_mode = strict_mode

    def parse_file(self, filepath: str) -> ScaleConfig:
        """Parse a config file"""
        with open(filepath, encoding="utf-8") as f:
            content = f.read()
        TypeScaleLogger.info(f"Parsing scale config {Path(filepath).name}")
        return self.parse(content)

    def parse(self, content: str) -> ScaleConfig:
        """Parse config content"""
        try:
            data = yaml.safe_load(content)
        except yaml.YAMLError as e:
            raise ScaleConfigError(f"Malformed scale config:\n{e}") from e

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ScaleConfigError("Scale config must be a mapping at the top level")

        return self.parse_mapping(data)

    def parse_mapping(self, data: Dict[str, Any]) -> ScaleConfig:
        """Build a ScaleConfig from an already-loaded mapping"""
        self._check_keys(data, self.TOP_LEVEL_KEYS, "config")
        values: Dict[str, Any] = {}

        if "base_size" in data:
            values["base_size"] = self._number(data["base_size"], "base_size")
        if "ratio" in data:
            values["ratio"] = self._ratio(data["ratio"], "ratio")
        elif RatioTable.default_name():
            values["ratio"] = RatioTable.get(RatioTable.default_name())
        if "positive_steps" in data:
            values["positive_steps"] = self._integer(data["positive_steps"], "positive_steps")
        if "negative_steps" in data:
            values["negative_steps"] = self._integer(data["negative_steps"], "negative_steps")
        if "advanced" in data:
            values["advanced_mode"] = bool(data["advanced"])
        if "use_rem" in data:
            values["use_rem"] = bool(data["use_rem"])
        if "rem_base" in data:
            values["rem_base"] = self._number(data["rem_base"], "rem_base")

        values.update(self._parse_fluid(data.get("fluid")))
        values.update(self._parse_line_height(data.get("line_height")))
        values.update(self._parse_mobile(data.get("mobile")))
        values.update(self._parse_output(data.get("output")))

        elements = data.get("elements", "default")
        values["element_step_assignment"] = self._parse_elements(elements)

        if data.get("font") is not None:
            values["font_family"] = str(data["font"])
        if data.get("preview_text") is not None:
            values["preview_text"] = str(data["preview_text"])

        return ScaleConfig(**values)

    # Sections

    def _parse_fluid(self, section: Optional[Any]) -> Dict[str, Any]:
        if section is None or section is False:
            return {}
        if section is True:
            return {"fluid": True}
        section = self._section(section, "fluid")
        self._check_keys(section, self.FLUID_KEYS, "fluid")

        values: Dict[str, Any] = {"fluid": bool(section.get("enabled", True))}
        for key in ("min_base_size", "max_base_size", "min_screen_width", "max_screen_width"):
            if key in section:
                values[key] = self._number(section[key], f"fluid.{key}")
        for key in ("min_ratio", "max_ratio"):
            if key in section:
                values[key] = self._ratio(section[key], f"fluid.{key}")
        if "css_locks" in section:
            values["use_css_locks"] = bool(section["css_locks"])
        return values

    def _parse_line_height(self, section: Optional[Any]) -> Dict[str, Any]:
        if section is None:
            return {}
        section = self._section(section, "line_height")
        self._check_keys(section, self.LINE_HEIGHT_KEYS, "line_height")
        if "min" not in section or "max" not in section:
            raise ScaleConfigError("line_height needs both 'min' and 'max'")
        return {
            "min_line_height": self._number(section["min"], "line_height.min"),
            "max_line_height": self._number(section["max"], "line_height.max"),
        }

    def _parse_mobile(self, section: Optional[Any]) -> Dict[str, Any]:
        if section is None:
            return {}
        section = self._section(section, "mobile")
        self._check_keys(section, self.MOBILE_KEYS, "mobile")
        if "base_size" not in section:
            raise ScaleConfigError("mobile needs a 'base_size'")

        values = {"mobile_base_size": self._number(section["base_size"], "mobile.base_size")}
        if "ratio" in section:
            values["mobile_ratio"] = self._ratio(section["ratio"], "mobile.ratio")
        if "breakpoint" in section:
            values["breakpoint"] = self._number(section["breakpoint"], "mobile.breakpoint")
        return values

    def _parse_output(self, section: Optional[Any]) -> Dict[str, Any]:
        if section is None:
            return {}
        section = self._section(section, "output")
        self._check_keys(section, self.OUTPUT_KEYS, "output")

        values = {}
        if "prefix" in section:
            values["variable_prefix"] = str(section["prefix"])
        if "sass" in section:
            values["emit_sass_variables"] = bool(section["sass"])
        return values

    def _parse_elements(self, elements: Any) -> Dict[str, int]:
        if elements is None or elements is False:
            return {}
        if isinstance(elements, str):
            try:
                return ElementPresets.get(elements)
            except KeyError as e:
                raise ScaleConfigError(str(e.args[0])) from e
        if isinstance(elements, dict):
            return {
                str(element): self._integer(step, f"elements.{element}")
                for element, step in elements.items()
            }
        raise ScaleConfigError("elements must be a preset name or a mapping of element to step")

    # Values

    def _check_keys(self, section: Dict[str, Any], allowed: set, where: str) -> None:
        unknown = [key for key in section if key not in allowed]
        if not unknown:
            return
        message = f"Unknown key(s) in {where}: {', '.join(str(k) for k in unknown)}"
        if self.strict_mode:
            raise ScaleConfigError(message)
        TypeScaleLogger.warning(message)

    @staticmethod
    def _section(value: Any, name: str) -> Dict[str, Any]:
        if not isinstance(value, dict):
            raise ScaleConfigError(f"'{name}' must be a mapping")
        return value

    @staticmethod
    def _number(value: Any, name: str) -> float:
        if isinstance(value, bool):
            raise ScaleConfigError(f"{name} must be a number, got {value!r}")
        try:
            return float(value)
        except (TypeError, ValueError) as e:
            raise ScaleConfigError(f"{name} must be a number, got {value!r}") from e

    @staticmethod
    def _integer(value: Any, name: str) -> int:
        if isinstance(value, bool):
            raise ScaleConfigError(f"{name} must be an integer, got {value!r}")
        if isinstance(value, int):
            return value
        if isinstance(value, float) and value.is_integer():
            return int(value)
        if isinstance(value, str):
            try:
                return int(value.strip())
            except ValueError:
                pass
        raise ScaleConfigError(f"{name} must be an integer, got {value!r}")

    @staticmethod
    def _ratio(value: Any, name: str) -> float:
        try:
            return RatioTable.resolve(value)
        except (KeyError, TypeError) as e:
            detail = e.args[0] if e.args else repr(value)
            raise ScaleConfigError(f"{name}: {detail}") from e
