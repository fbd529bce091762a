import logging
from typing import Dict, Iterable, Optional

from beautycam.models.presets import DEFAULT_PRESET_KEY, FilterParameterBundle
from beautycam.services.presets import get_preset

logger = logging.getLogger(__name__)

# Partial filter records merged over the default bundle, per product category.
CATEGORY_OVERRIDES: Dict[str, FilterParameterBundle] = {
    "antiaging": {
        "smooth": {"enabled": True, "radius": 6, "passes": 3, "opacity": 0.6},
        "contourLift": {"enabled": True, "lift": 0.07, "shade": 0.05, "feather": 18},
        "brightness": {"enabled": True, "value": 10},
        "warmth": {"enabled": True, "rPlus": 7, "bMinus": 5, "alpha": 0.28},
    },
    "manchas": {
        "toneUnify": {"enabled": True, "threshold": 14, "mix": 0.35},
        "brightness": {"enabled": True, "value": 10},
        "warmth": {"enabled": False},
    },
    "hidratacion": {
        "smooth": {"enabled": True, "radius": 3, "passes": 2, "opacity": 0.35},
        "brightness": {"enabled": True, "value": 8},
        "warmth": {"enabled": True, "rPlus": 5, "bMinus": 3, "alpha": 0.2},
    },
    "acne": {
        "blemish": {"enabled": True, "microBlur": 3, "alpha": 0.35},
        "toneUnify": {"enabled": True, "threshold": 16, "mix": 0.3},
        "brightness": {"enabled": False},
    },
}

# Applied after the category, in the order the product lists its concerns.
CONCERN_OVERRIDES: Dict[str, FilterParameterBundle] = {
    "arrugas": {
        "smooth": {"enabled": True, "radius": 6, "passes": 3, "opacity": 0.6},
        "contourLift": {"enabled": True, "lift": 0.06, "shade": 0.05, "feather": 18},
    },
    "manchas": {
        "toneUnify": {"enabled": True, "threshold": 14, "mix": 0.35},
        "brightness": {"enabled": True, "value": 10},
    },
    "firmeza": {
        "contourLift": {"enabled": True, "lift": 0.08, "shade": 0.06, "feather": 20},
        "contrast": {"enabled": True, "value": 1.07},
    },
    "luminosidad": {
        "brightness": {"enabled": True, "value": 12},
        "warmth": {"enabled": True, "rPlus": 8, "bMinus": 5, "alpha": 0.3},
    },
    "acne": {
        "blemish": {"enabled": True, "microBlur": 3, "alpha": 0.35},
        "toneUnify": {"enabled": True, "threshold": 16, "mix": 0.3},
    },
}


def _apply_overrides(bundle: FilterParameterBundle, overrides: FilterParameterBundle) -> None:
    for filter_key, fields in overrides.items():
        if filter_key in bundle:
            bundle[filter_key].update(fields)


def compose_product_bundle(
    category: Optional[str] = None,
    concerns: Optional[Iterable[str]] = None,
) -> FilterParameterBundle:
    """Build a product bundle: default, then category overrides, then concerns."""
    bundle = get_preset(DEFAULT_PRESET_KEY)

    if category is not None:
        category_overrides = CATEGORY_OVERRIDES.get(category)
        if category_overrides is None:
            logger.debug("No overrides for category '%s'", category)
        else:
            _apply_overrides(bundle, category_overrides)

    for concern in concerns or ():
        concern_overrides = CONCERN_OVERRIDES.get(concern)
        if concern_overrides is None:
            logger.debug("No overrides for concern '%s'", concern)
            continue
        _apply_overrides(bundle, concern_overrides)

    return bundle


__all__ = ["compose_product_bundle", "CATEGORY_OVERRIDES", "CONCERN_OVERRIDES"]
