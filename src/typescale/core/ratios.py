"""
Named modular ratios and element presets

Lookups go through the shared ScaleData, so user copies of the data files
take precedence over the packaged ones.
"""

from typing import Dict, List, Optional, Union

from ..config import get_scale_data


class RatioTable:
    """Lookup of named modular ratios"""

    @staticmethod
    def names() -> List[str]:
        return list(get_scale_data().ratios())

    @staticmethod
    def get(name: str) -> float:
        """Get a ratio by name (case-insensitive)"""
        ratios = get_scale_data().ratios()
        wanted = name.strip().lower()
        for ratio_name, value in ratios.items():
            if ratio_name.lower() == wanted:
                return value
        raise KeyError(f"Unknown ratio '{name}'. Known ratios: {', '.join(ratios)}")

    @staticmethod
    def default_name() -> Optional[str]:
        """Ratio used when a config gives none"""
        return get_scale_data().default_ratio()

    @classmethod
    def resolve(cls, value: Union[str, int, float]) -> float:
        """Accept a ratio name, a numeric string or a number"""
        if isinstance(value, bool):
            raise KeyError(f"Invalid ratio {value!r}")
        if isinstance(value, (int, float)):
            return float(value)
        try:
            return float(value)
        except ValueError:
            return cls.get(value)


class ElementPresets:
    """Named element -> step assignment groups"""

    @staticmethod
    def names() -> List[str]:
        return list(get_scale_data().presets())

    @staticmethod
    def get(name: str) -> Dict[str, int]:
        """Return a copy of a preset group, preserving element order"""
        presets = get_scale_data().presets()
        if name not in presets:
            raise KeyError(f"Unknown element preset '{name}'. Known presets: {', '.join(presets)}")
        return presets[name]
