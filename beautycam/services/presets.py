import copy
import logging
from collections.abc import Mapping
from typing import Any, Dict, List

from beautycam.models.presets import (
    DEFAULT_PRESET,
    DEFAULT_PRESET_KEY,
    FILTER_KEYS,
    PRESETS_BY_CONCERN,
    FilterParameterBundle,
)

logger = logging.getLogger(__name__)


def _is_number(value: Any) -> bool:
    # bool is an int subclass but must never be interpolated
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def get_preset(key: str) -> FilterParameterBundle:
    """Return an independent copy of the bundle stored under ``key``.

    Unknown keys are not an error: a warning is logged and the default
    bundle is returned instead.
    """
    if key == DEFAULT_PRESET_KEY:
        return copy.deepcopy(DEFAULT_PRESET.config)

    definition = PRESETS_BY_CONCERN.get(key)
    if definition is not None:
        return copy.deepcopy(definition.config)

    logger.warning("Preset '%s' not found, falling back to '%s'", key, DEFAULT_PRESET_KEY)
    return copy.deepcopy(DEFAULT_PRESET.config)


def get_all_presets() -> List[Dict[str, Any]]:
    """List every preset, default first, then concerns in catalog order."""
    entries = [(DEFAULT_PRESET_KEY, DEFAULT_PRESET)]
    entries.extend(PRESETS_BY_CONCERN.items())
    return [
        {
            "key": key,
            "name": definition.name,
            "description": definition.description,
            "config": copy.deepcopy(definition.config),
        }
        for key, definition in entries
    ]


def blend_presets(
    preset_a: Mapping,
    preset_b: Mapping,
    factor: float,
) -> FilterParameterBundle:
    """
    Interpolate two bundles parameter by parameter.

    ``preset_a`` is the structural template: only its filters and parameters
    appear in the result. Numbers are lerped without clamping ``factor``,
    booleans switch to ``preset_b`` once ``factor > 0.5``, and a value missing
    from ``preset_b`` counts as equal to ``preset_a``'s.
    """
    blended: FilterParameterBundle = {}

    for filter_key, setting_a in preset_a.items():
        if not isinstance(setting_a, Mapping):
            blended[filter_key] = copy.deepcopy(setting_a)
            continue

        setting_b = preset_b.get(filter_key)
        if not isinstance(setting_b, Mapping):
            setting_b = {}

        result = {}
        for param_key, val_a in setting_a.items():
            val_b = setting_b.get(param_key, val_a)

            if _is_number(val_a) and _is_number(val_b):
                result[param_key] = val_a + (val_b - val_a) * factor
            elif isinstance(val_a, bool):
                result[param_key] = val_b if factor > 0.5 else val_a
            else:
                result[param_key] = copy.deepcopy(val_a)

        blended[filter_key] = result

    return blended


def validate_preset(preset: Any) -> bool:
    """Check that all seven filters exist and carry a boolean ``enabled``.

    Stops at the first problem and logs it. Numeric ranges are not checked.
    """
    if not isinstance(preset, Mapping):
        preset = {}

    for filter_key in FILTER_KEYS:
        setting = preset.get(filter_key)
        if not isinstance(setting, Mapping):
            logger.error("Invalid preset: missing filter '%s'", filter_key)
            return False

        if not isinstance(setting.get("enabled"), bool):
            logger.error("Invalid preset: '%s.enabled' must be a boolean", filter_key)
            return False

    return True


__all__ = ["get_preset", "get_all_presets", "blend_presets", "validate_preset"]
