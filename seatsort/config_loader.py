"""
Configuration Loading System

Loads YAML configuration files and converts them to the appropriate
data structures for the seat sorting pipeline.
"""

from typing import Any, Dict, List, Optional, Tuple

import yaml

from .classification import ClassificationStrategy
from .errors import InvalidConfiguration
from .seating import MAX_COLS, MAX_ROWS, LayoutMode, OddSide, SeatConfig
from .sorting import SortStrategy

DEFAULT_CONFIG: Dict[str, Any] = {
    "data": {"source": "random", "path": None, "count": 40, "low": 1, "high": 99, "seed": None},
    "algorithms": {"classifier": "partition", "sorter": "quick"},
    "layout": {"mode": "left_right", "odd_side": "first", "rows": 0, "cols": 0},
    "output": {
        "directory": "output",
        "odd_file": "odd.csv",
        "even_file": "even.csv",
        "seat_file": "seat_map.csv",
        "plot": False
    },
    "logging": {"level": "INFO", "file": None},
}

DATA_SOURCES = ("random", "csv")


class ConfigurationError(InvalidConfiguration):
    """Raised when a configuration file cannot be loaded"""
    pass


def load_config(config_path: str = "config.yaml") -> Dict[str, Any]:
    """Load configuration from YAML file"""
    try:
        with open(config_path, 'r') as f:
            config = yaml.safe_load(f)
    except FileNotFoundError:
        raise ConfigurationError(f"Configuration file not found: {config_path}")
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in configuration file: {e}")

    if config is None:
        raise ConfigurationError(f"Configuration file is empty: {config_path}")
    if not isinstance(config, dict):
        raise ConfigurationError(f"Configuration root must be a mapping: {config_path}")

    return config


def merged_section(config: Dict[str, Any], section: str) -> Dict[str, Any]:
    """Section of config with defaults filled in for missing keys"""
    values = dict(DEFAULT_CONFIG[section])
    values.update(config.get(section) or {})
    return values


def _parse_enum(enum_cls, value, label: str):
    try:
        return enum_cls(str(value).lower())
    except ValueError:
        choices = ", ".join(member.value for member in enum_cls)
        raise InvalidConfiguration(f"Unknown {label}: {value!r} (expected one of: {choices})")


def _parse_dimension(value, label: str) -> Optional[int]:
    """None and 0 mean unspecified"""
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidConfiguration(f"Layout {label} must be an integer, got {value!r}")
    return value or None


def build_seat_config(config: Dict[str, Any]) -> SeatConfig:
    """
    Create a validated SeatConfig from the layout section

    Args:
        config: Loaded configuration dictionary

    Returns:
        SeatConfig (dimensions may still be unresolved)
    """
    layout = merged_section(config, "layout")
    seat_config = SeatConfig(
        rows=_parse_dimension(layout.get("rows"), "rows"),
        cols=_parse_dimension(layout.get("cols"), "cols"),
        mode=_parse_enum(LayoutMode, layout.get("mode"), "layout mode"),
        odd_side=_parse_enum(OddSide, layout.get("odd_side"), "odd side")
    )
    seat_config.validate()
    return seat_config


def get_algorithm_config(config: Dict[str, Any]) -> Tuple[ClassificationStrategy, SortStrategy]:
    """Classifier and sorter selected in the algorithms section"""
    algorithms = merged_section(config, "algorithms")
    classifier = _parse_enum(ClassificationStrategy, algorithms.get("classifier"), "classifier")
    sorter = _parse_enum(SortStrategy, algorithms.get("sorter"), "sorter")
    return classifier, sorter


def get_data_config(config: Dict[str, Any]) -> Dict[str, Any]:
    """Get data acquisition configuration"""
    return merged_section(config, "data")


def get_output_config(config: Dict[str, Any]) -> Dict[str, Any]:
    """Get export configuration"""
    return merged_section(config, "output")


def get_logging_config(config: Dict[str, Any]) -> Dict[str, Any]:
    """Get logging configuration"""
    return merged_section(config, "logging")


def validate_config(config: Dict[str, Any]) -> List[str]:
    """
    Validate configuration and return list of issues

    Returns:
        List of validation error messages (empty if valid)
    """
    issues = []

    for section in config:
        if section not in DEFAULT_CONFIG:
            issues.append(f"Unknown section: {section}")

    malformed = [section for section in DEFAULT_CONFIG
                 if config.get(section) is not None and not isinstance(config[section], dict)]
    if malformed:
        return issues + [f"Section '{section}' must be a mapping" for section in malformed]

    data = get_data_config(config)
    source = data.get("source")
    if source not in DATA_SOURCES:
        issues.append(f"Unknown data source: {source!r}")
    elif source == "csv" and not data.get("path"):
        issues.append("CSV data source requires 'data.path'")
    elif source == "random":
        low, high = data.get("low"), data.get("high")
        if not isinstance(low, int) or not isinstance(high, int):
            issues.append("Random bounds 'data.low' and 'data.high' must be integers")
        elif low > high:
            issues.append(f"Random lower bound {low} is greater than upper bound {high}")
        if not isinstance(data.get("count"), int):
            issues.append("'data.count' must be an integer")

    try:
        get_algorithm_config(config)
    except InvalidConfiguration as e:
        issues.append(str(e))

    layout = merged_section(config, "layout")
    for label, limit in (("rows", MAX_ROWS), ("cols", MAX_COLS)):
        value = layout.get(label)
        if value is None:
            continue
        if isinstance(value, bool) or not isinstance(value, int):
            issues.append(f"Layout {label} must be an integer")
        elif value < 0:
            issues.append(f"Layout {label} must be positive (0 means automatic)")
        elif value > limit:
            issues.append(f"Layout {label} must not exceed {limit}")

    for key, enum_cls, label in (("mode", LayoutMode, "layout mode"), ("odd_side", OddSide, "odd side")):
        try:
            _parse_enum(enum_cls, layout.get(key), label)
        except InvalidConfiguration as e:
            issues.append(str(e))

    return issues


def print_config_summary(config_path: str = "config.yaml"):
    """Print a summary of the configuration"""
    try:
        config = load_config(config_path)

        print("=" * 50)
        print("CONFIGURATION SUMMARY")
        print("=" * 50)

        data = get_data_config(config)
        if data.get("source") == "csv":
            print(f"Data: CSV file {data.get('path')}")
        else:
            print(f"Data: {data.get('count')} random values in [{data.get('low')}, {data.get('high')}]"
                  f", seed={data.get('seed')}")

        algorithms = merged_section(config, "algorithms")
        print(f"Classifier: {algorithms.get('classifier')}")
        print(f"Sorter: {algorithms.get('sorter')}")

        layout = merged_section(config, "layout")
        rows = layout.get("rows") or "auto"
        cols = layout.get("cols") or "auto"
        print(f"Layout: {layout.get('mode')}, odd side {layout.get('odd_side')}, {rows} x {cols}")

        output = get_output_config(config)
        print(f"Output directory: {output.get('directory')}")

        issues = validate_config(config)
        if issues:
            print(f"\nValidation Issues ({len(issues)}):")
            for issue in issues:
                print(f"  - {issue}")
        else:
            print("\nConfiguration is valid")

        print("=" * 50)

    except ConfigurationError as e:
        print(f"Configuration Error: {e}")
