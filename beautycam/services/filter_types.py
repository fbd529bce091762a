import copy
from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

from beautycam.models.presets import PRESETS_BY_CONCERN


@dataclass(frozen=True)
class FilterType:
    key: str
    label: str
    intensity: float
    sigma: float
    brightness: float
    concern: str


# Each product is locked to one filter type; its deep bundle is the concern preset.
FILTER_TYPES: Dict[str, FilterType] = {
    "wrinkles": FilterType("wrinkles", "Arrugas", intensity=0.5, sigma=4, brightness=0, concern="arrugas"),
    "brightness": FilterType("brightness", "Luminosidad", intensity=0, sigma=0, brightness=0.07, concern="piel_apagada"),
    "spots": FilterType("spots", "Manchas/Tono", intensity=0.65, sigma=5, brightness=0.05, concern="manchas"),
    "acne": FilterType("acne", "Acné", intensity=0.55, sigma=3.4, brightness=0.1, concern="acne"),
    "firmness": FilterType("firmness", "Firmeza", intensity=0.7, sigma=2, brightness=0, concern="firmeza"),
}

FILTER_ORDER: Tuple[str, ...] = ("wrinkles", "brightness", "spots", "acne", "firmness")


def get_filter_type(key: str) -> Optional[Dict[str, Any]]:
    """Return the filter type definition as a plain dict, or None if unknown."""
    filter_type = FILTER_TYPES.get(key)
    if filter_type is None:
        return None

    return {
        "key": filter_type.key,
        "label": filter_type.label,
        "defaults": {
            "intensity": filter_type.intensity,
            "sigma": filter_type.sigma,
            "brightness": filter_type.brightness,
        },
        "deep": copy.deepcopy(PRESETS_BY_CONCERN[filter_type.concern].config),
    }


__all__ = ["FilterType", "FILTER_TYPES", "FILTER_ORDER", "get_filter_type"]
