"""Extraction rules: configuration, function matching and script detection."""

from rules.config import (
    ConfigError,
    DetectionConfig,
    ScannerConfig,
    load_config,
)
from rules.functions import FunctionMatcher, is_target_function
from rules.script import ScriptDetector, contains_target_script

__all__ = [
    "ConfigError",
    "DetectionConfig",
    "FunctionMatcher",
    "ScannerConfig",
    "ScriptDetector",
    "contains_target_script",
    "is_target_function",
    "load_config",
]
