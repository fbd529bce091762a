from dataclasses import dataclass
from typing import Any, Dict, Tuple

FilterSetting = Dict[str, Any]
FilterParameterBundle = Dict[str, FilterSetting]

# Order matters for validation: the first missing filter is the one reported.
FILTER_KEYS: Tuple[str, ...] = (
    "smooth",
    "brightness",
    "contrast",
    "warmth",
    "toneUnify",
    "blemish",
    "contourLift",
)

DEFAULT_PRESET_KEY = "default"


@dataclass(frozen=True)
class PresetDefinition:
    name: str
    description: str
    config: FilterParameterBundle


DEFAULT_PRESET = PresetDefinition(
    name="Equilibrado",
    description="Mejora general equilibrada para todo tipo de piel",
    config={
        "smooth": {"enabled": True, "radius": 4, "passes": 2, "opacity": 0.4},
        "brightness": {"enabled": True, "value": 8},
        "contrast": {"enabled": True, "value": 1.05},
        "warmth": {"enabled": True, "rPlus": 6, "bMinus": 4, "alpha": 0.25},
        "toneUnify": {"enabled": True, "threshold": 15, "mix": 0.25},
        "blemish": {"enabled": True, "microBlur": 2, "alpha": 0.25},
        "contourLift": {"enabled": True, "lift": 0.08, "shade": 0.06, "feather": 15},
    },
)

PRESETS_BY_CONCERN: Dict[str, PresetDefinition] = {
    # Wrinkles: heavier smoothing and texture softening
    "arrugas": PresetDefinition(
        name="Anti-Arrugas",
        description="Suaviza líneas de expresión y arrugas finas",
        config={
            "smooth": {"enabled": True, "radius": 8, "passes": 4, "opacity": 0.7},
            "brightness": {"enabled": True, "value": 10},
            "contrast": {"enabled": True, "value": 1.03},
            "warmth": {"enabled": True, "rPlus": 8, "bMinus": 5, "alpha": 0.3},
            "toneUnify": {"enabled": True, "threshold": 12, "mix": 0.4},
            "blemish": {"enabled": True, "microBlur": 3, "alpha": 0.4},
            "contourLift": {"enabled": True, "lift": 0.06, "shade": 0.04, "feather": 20},
        },
    ),
    # Firmness: contouring and definition
    "firmeza": PresetDefinition(
        name="Firmeza y Lifting",
        description="Define contornos y mejora la firmeza facial",
        config={
            "smooth": {"enabled": True, "radius": 3, "passes": 2, "opacity": 0.3},
            "brightness": {"enabled": True, "value": 6},
            "contrast": {"enabled": True, "value": 1.12},
            "warmth": {"enabled": True, "rPlus": 5, "bMinus": 3, "alpha": 0.2},
            "toneUnify": {"enabled": True, "threshold": 18, "mix": 0.2},
            "blemish": {"enabled": False, "microBlur": 1, "alpha": 0.1},
            "contourLift": {"enabled": True, "lift": 0.15, "shade": 0.12, "feather": 12},
        },
    ),
    # Dull skin: luminosity and vitality
    "piel_apagada": PresetDefinition(
        name="Luminosidad",
        description="Aporta luminosidad y vitalidad a la piel",
        config={
            "smooth": {"enabled": True, "radius": 5, "passes": 3, "opacity": 0.5},
            "brightness": {"enabled": True, "value": 18},
            "contrast": {"enabled": True, "value": 1.15},
            "warmth": {"enabled": True, "rPlus": 12, "bMinus": 8, "alpha": 0.45},
            "toneUnify": {"enabled": True, "threshold": 10, "mix": 0.3},
            "blemish": {"enabled": True, "microBlur": 2, "alpha": 0.3},
            "contourLift": {"enabled": True, "lift": 0.12, "shade": 0.08, "feather": 18},
        },
    ),
    # Spots: tone uniformity
    "manchas": PresetDefinition(
        name="Uniformidad",
        description="Unifica el tono y reduce manchas",
        config={
            "smooth": {"enabled": True, "radius": 6, "passes": 3, "opacity": 0.6},
            "brightness": {"enabled": True, "value": 12},
            "contrast": {"enabled": True, "value": 1.08},
            "warmth": {"enabled": True, "rPlus": 7, "bMinus": 4, "alpha": 0.3},
            "toneUnify": {"enabled": True, "threshold": 8, "mix": 0.6},
            "blemish": {"enabled": True, "microBlur": 4, "alpha": 0.5},
            "contourLift": {"enabled": True, "lift": 0.08, "shade": 0.06, "feather": 16},
        },
    ),
    # Acne: blemish reduction
    "acne": PresetDefinition(
        name="Piel Perfecta",
        description="Minimiza imperfecciones y suaviza la textura",
        config={
            "smooth": {"enabled": True, "radius": 7, "passes": 4, "opacity": 0.65},
            "brightness": {"enabled": True, "value": 8},
            "contrast": {"enabled": True, "value": 1.02},
            "warmth": {"enabled": True, "rPlus": 6, "bMinus": 3, "alpha": 0.25},
            "toneUnify": {"enabled": True, "threshold": 10, "mix": 0.5},
            "blemish": {"enabled": True, "microBlur": 5, "alpha": 0.7},
            "contourLift": {"enabled": True, "lift": 0.06, "shade": 0.04, "feather": 20},
        },
    ),
}

VALID_PRESETS = {DEFAULT_PRESET_KEY} | set(PRESETS_BY_CONCERN.keys())

__all__ = [
    "FilterSetting",
    "FilterParameterBundle",
    "FILTER_KEYS",
    "DEFAULT_PRESET_KEY",
    "PresetDefinition",
    "DEFAULT_PRESET",
    "PRESETS_BY_CONCERN",
    "VALID_PRESETS",
]
