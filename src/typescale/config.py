"""
Ratio and preset data for typescale

Named ratios (ratios.yaml) and element presets (element-presets.yaml) ship in
the package data directory. A file of the same name in the user data
directory replaces the packaged one. Edits made through ScaleData (and the
typescale-data command) are written there, never to the package.

Both documents are checked on load and before every save:

    ratios:
      Perfect Fourth: 1.333       # positive, finite number
    metadata:
      default: Perfect Fourth     # optional, must name a ratio

    presets:
      headings: {h1: 6, h2: 5}    # element -> integer step
"""

import copy
import math
import os
import platform
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from .core.validation import ScaleConfigError
from .utils.logging import TypeScaleLogger

RATIOS_FILE = "ratios.yaml"
PRESETS_FILE = "element-presets.yaml"
DATA_FILES = (RATIOS_FILE, PRESETS_FILE)


def default_user_data_dir() -> Path:
    """TYPESCALE_DATA_DIR, else the platform's per-user config directory"""
    if custom_dir := os.environ.get("TYPESCALE_DATA_DIR"):
        return Path(custom_dir).expanduser()

    system = platform.system()
    if system == "Darwin":
        return Path.home() / "Library" / "Application Support" / "typescale"
    if system == "Windows":
        return Path(os.environ.get("APPDATA", Path.home() / "AppData" / "Roaming")) / "typescale"
    return Path(os.environ.get("XDG_CONFIG_HOME", Path.home() / ".config")) / "typescale"


def _is_step(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _is_ratio(value: Any) -> bool:
    return (
        isinstance(value, (int, float))
        and not isinstance(value, bool)
        and math.isfinite(value)
        and value > 0
    )


def _raise_problems(source: str, problems: List[str]) -> None:
    if problems:
        raise ScaleConfigError(f"Invalid data in {source}:\n" + "\n".join(f"- {p}" for p in problems))


def check_ratios_document(document: Any, source: str) -> Dict[str, Any]:
    """Check a ratios document, returning it unchanged"""
    ratios = document.get("ratios") if isinstance(document, dict) else None
    if not isinstance(ratios, dict) or not ratios:
        raise ScaleConfigError(f"Invalid data in {source}: expected a non-empty 'ratios' mapping")

    problems = [
        f"ratio '{name}' must be a positive number, got {value!r}"
        for name, value in ratios.items()
        if not _is_ratio(value)
    ]

    metadata = document.get("metadata") or {}
    if not isinstance(metadata, dict):
        problems.append("'metadata' must be a mapping")
    elif metadata.get("default") is not None and metadata["default"] not in ratios:
        problems.append(f"default ratio '{metadata['default']}' is not in 'ratios'")

    _raise_problems(source, problems)
    return document


def check_presets_document(document: Any, source: str) -> Dict[str, Any]:
    """Check an element presets document, returning it unchanged"""
    presets = document.get("presets") if isinstance(document, dict) else None
    if not isinstance(presets, dict) or not presets:
        raise ScaleConfigError(f"Invalid data in {source}: expected a non-empty 'presets' mapping")

    problems = []
    for name, group in presets.items():
        if not isinstance(group, dict):
            problems.append(f"preset '{name}' must map elements to steps")
            continue
        problems.extend(
            f"preset '{name}': step for '{element}' must be an integer, got {step!r}"
            for element, step in group.items()
            if not _is_step(step)
        )

    _raise_problems(source, problems)
    return document


CHECKS = {
    RATIOS_FILE: check_ratios_document,
    PRESETS_FILE: check_presets_document,
}


class ScaleData:
    """Named ratios and element presets, user copies first"""

    def __init__(self, user_data_dir: Optional[Path] = None):
        self.package_data_dir = Path(__file__).parent / "data"
        self.user_data_dir = Path(user_data_dir) if user_data_dir else default_user_data_dir()
        self._documents: Dict[str, Dict[str, Any]] = {}

    def source(self, filename: str) -> Optional[Path]:
        """The file a document is read from, or None when neither exists"""
        for directory in (self.user_data_dir, self.package_data_dir):
            path = directory / filename
            if path.is_file():
                return path
        return None

    def is_overridden(self, filename: str) -> bool:
        return (self.user_data_dir / filename).is_file()

    def _document(self, filename: str) -> Dict[str, Any]:
        if filename not in self._documents:
            path = self.source(filename)
            if path is None:
                raise ScaleConfigError(f"No {filename} found in {self.user_data_dir} or the package")
            try:
                with open(path, encoding="utf-8") as f:
                    document = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise ScaleConfigError(f"Malformed data file {path}:\n{e}") from e
            self._documents[filename] = CHECKS[filename](document, str(path))
            TypeScaleLogger.debug(f"Loaded {filename} from {path}")
        return self._documents[filename]

    def _save(self, filename: str, document: Dict[str, Any]) -> Path:
        path = self.user_data_dir / filename
        CHECKS[filename](document, str(path))

        self.user_data_dir.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            yaml.safe_dump(document, f, default_flow_style=False, allow_unicode=True, sort_keys=False)
        self._documents[filename] = document
        TypeScaleLogger.info(f"Saved {filename} to {path}")
        return path

    # Ratios

    def ratios(self) -> Dict[str, float]:
        """Ratio name -> value, in file order"""
        return {str(name): float(value) for name, value in self._document(RATIOS_FILE)["ratios"].items()}

    def default_ratio(self) -> Optional[str]:
        metadata = self._document(RATIOS_FILE).get("metadata") or {}
        return metadata.get("default")

    def _matching_ratio(self, name: str) -> Optional[str]:
        wanted = name.strip().lower()
        for ratio_name in self._document(RATIOS_FILE)["ratios"]:
            if str(ratio_name).lower() == wanted:
                return ratio_name
        return None

    def add_ratio(self, name: str, value: Any) -> Path:
        """Add or replace a named ratio (names match case-insensitively)"""
        document = self._copy(RATIOS_FILE)
        existing = self._matching_ratio(name)
        if existing is None:
            document["ratios"][name] = value
        else:
            # Replaced in place so file order is kept
            document["ratios"] = {
                (name if key == existing else key): (value if key == existing else current)
                for key, current in document["ratios"].items()
            }
            metadata = document.get("metadata") or {}
            if metadata.get("default") == existing:
                metadata["default"] = name
        return self._save(RATIOS_FILE, document)

    def remove_ratio(self, name: str) -> Path:
        existing = self._matching_ratio(name)
        if existing is None:
            raise ScaleConfigError(f"Unknown ratio '{name}'")
        if existing == self.default_ratio():
            raise ScaleConfigError(f"'{existing}' is the default ratio; choose another default first")
        document = self._copy(RATIOS_FILE)
        del document["ratios"][existing]
        return self._save(RATIOS_FILE, document)

    def set_default_ratio(self, name: str) -> Path:
        existing = self._matching_ratio(name)
        if existing is None:
            raise ScaleConfigError(f"Unknown ratio '{name}'")
        document = self._copy(RATIOS_FILE)
        document.setdefault("metadata", {})["default"] = existing
        return self._save(RATIOS_FILE, document)

    # Presets

    def presets(self) -> Dict[str, Dict[str, int]]:
        """Preset name -> element -> step, in file order"""
        return {
            str(name): {str(element): step for element, step in group.items()}
            for name, group in self._document(PRESETS_FILE)["presets"].items()
        }

    def add_preset(self, name: str, assignment: Dict[str, Any]) -> Path:
        """Add or replace a preset group"""
        document = self._copy(PRESETS_FILE)
        document["presets"][name] = dict(assignment)
        return self._save(PRESETS_FILE, document)

    def remove_preset(self, name: str) -> Path:
        document = self._copy(PRESETS_FILE)
        if name not in document["presets"]:
            raise ScaleConfigError(f"Unknown element preset '{name}'")
        if len(document["presets"]) == 1:
            raise ScaleConfigError(f"'{name}' is the only preset left")
        del document["presets"][name]
        return self._save(PRESETS_FILE, document)

    # User copies

    def _copy(self, filename: str) -> Dict[str, Any]:
        return copy.deepcopy(self._document(filename))

    def reset(self, filename: Optional[str] = None) -> int:
        """Remove user copies (one, or all data files), returning how many were removed"""
        removed = 0
        for name in [filename] if filename else DATA_FILES:
            path = self.user_data_dir / name
            if path.is_file():
                path.unlink()
                removed += 1
                TypeScaleLogger.info(f"Reset {name} to the packaged defaults")
            self._documents.pop(name, None)
        return removed


_scale_data: Optional[ScaleData] = None


def get_scale_data() -> ScaleData:
    """Shared ScaleData for the current user data directory"""
    global _scale_data
    if _scale_data is None:
        _scale_data = ScaleData()
    return _scale_data
