import logging
from typing import Any, Dict, Mapping, Optional

from beautycam.services.filter_types import get_filter_type

logger = logging.getLogger(__name__)

DEFAULT_FILTER_TYPE = "wrinkles"


def _number_or(value: Any, fallback: float) -> float:
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return value
    return fallback


def build_shader_config(
    filter_type: str,
    intensity: Optional[float] = None,
    sigma: Optional[float] = None,
    brightness: Optional[float] = None,
    overrides: Optional[Mapping[str, Any]] = None,
) -> Dict[str, Any]:
    """
    Flatten a filter type into the uniforms read by the live WebGL preview.

    Quick-slider values default to the filter type's own defaults; contrast
    and warmth come from its deep bundle. ``overrides`` (admin tuning) win
    over everything except ``filterType``.
    """
    definition = get_filter_type(filter_type)
    if definition is None:
        logger.warning("Unknown filter type '%s', using '%s'", filter_type, DEFAULT_FILTER_TYPE)
        filter_type = DEFAULT_FILTER_TYPE
        definition = get_filter_type(filter_type)

    defaults = definition["defaults"]
    deep = definition["deep"]
    contrast = deep.get("contrast", {})
    warmth = deep.get("warmth", {})

    config = {
        "filterType": filter_type,
        "intensity": intensity if intensity is not None else defaults["intensity"],
        "sigma": sigma if sigma is not None else defaults["sigma"],
        "brightness": brightness if brightness is not None else defaults["brightness"],
        "contrast": _number_or(contrast.get("value"), 1.0),
        "warmthR": _number_or(warmth.get("rPlus"), 0),
        "warmthB": _number_or(warmth.get("bMinus"), 0),
        "warmthA": _number_or(warmth.get("alpha"), 0),
    }
    config.update(overrides or {})
    config["filterType"] = filter_type
    return config


__all__ = ["build_shader_config", "DEFAULT_FILTER_TYPE"]
