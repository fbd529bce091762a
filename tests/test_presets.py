import logging

import pytest

from beautycam.models.presets import FILTER_KEYS, PRESETS_BY_CONCERN
from beautycam.services.presets import (
    blend_presets,
    get_all_presets,
    get_preset,
    validate_preset,
)

PRESETS_LOGGER = "beautycam.services.presets"


def _numeric_values(bundle):
    return {
        (filter_key, param): value
        for filter_key, setting in bundle.items()
        for param, value in setting.items()
        if not isinstance(value, bool)
    }


def test_every_catalog_preset_validates(preset_key):
    assert validate_preset(get_preset(preset_key))


def test_arrugas_smooth_values():
    assert get_preset("arrugas")["smooth"] == {
        "enabled": True,
        "radius": 8,
        "passes": 4,
        "opacity": 0.7,
    }


def test_unknown_key_falls_back_to_default(caplog):
    with caplog.at_level(logging.WARNING, logger=PRESETS_LOGGER):
        preset = get_preset("no-such-preset")

    assert preset == get_preset("default")
    assert any("no-such-preset" in record.getMessage() for record in caplog.records)
    assert all(record.levelno == logging.WARNING for record in caplog.records)


def test_returned_copies_are_independent():
    first = get_preset("manchas")
    first["smooth"]["radius"] = 999
    first["brightness"]["enabled"] = False
    del first["warmth"]

    second = get_preset("manchas")
    assert second["smooth"]["radius"] == 6
    assert second["brightness"]["enabled"] is True
    assert "warmth" in second
    assert PRESETS_BY_CONCERN["manchas"].config["smooth"]["radius"] == 6


def test_get_all_presets_order_and_size():
    entries = get_all_presets()

    assert len(entries) == 1 + len(PRESETS_BY_CONCERN)
    assert [entry["key"] for entry in entries] == [
        "default",
        "arrugas",
        "firmeza",
        "piel_apagada",
        "manchas",
        "acne",
    ]
    assert entries[0]["name"] == "Equilibrado"
    assert set(entries[1]) == {"key", "name", "description", "config"}


def test_get_all_presets_configs_are_copies():
    entries = get_all_presets()
    entries[0]["config"]["contrast"]["value"] = 5.0

    assert get_all_presets()[0]["config"]["contrast"]["value"] == 1.05
    assert get_preset("default")["contrast"]["value"] == 1.05


@pytest.mark.parametrize("factor", [0.0, 0.3, 0.5, 1.0, 2.5, -1.0])
def test_identity_blend(factor):
    preset = get_preset("piel_apagada")
    assert blend_presets(preset, preset, factor) == preset


def test_blend_endpoints():
    preset_a = get_preset("default")
    preset_b = get_preset("acne")

    assert _numeric_values(blend_presets(preset_a, preset_b, 0)) == _numeric_values(preset_a)

    at_one = _numeric_values(blend_presets(preset_a, preset_b, 1))
    for key, value in _numeric_values(preset_b).items():
        assert at_one[key] == pytest.approx(value)


def test_blend_default_and_firmeza_brightness():
    blended = blend_presets(get_preset("default"), PRESETS_BY_CONCERN["firmeza"].config, 0.5)
    assert blended["brightness"]["value"] == 7


def test_blend_does_not_clamp_factor():
    blended = blend_presets(get_preset("default"), get_preset("firmeza"), 2)
    assert blended["brightness"]["value"] == 4


@pytest.mark.parametrize("factor, expected", [(0.4, True), (0.5, True), (0.6, False)])
def test_blend_boolean_threshold(factor, expected):
    blended = blend_presets(
        {"smooth": {"enabled": True}},
        {"smooth": {"enabled": False}},
        factor,
    )
    assert blended["smooth"]["enabled"] is expected


def test_blend_missing_values_in_target_keep_template():
    preset_a = {
        "smooth": {"enabled": True, "radius": 4},
        "contrast": {"enabled": True, "value": 1.05},
    }
    preset_b = {"smooth": {"radius": 8}}

    blended = blend_presets(preset_a, preset_b, 0.9)

    assert blended["smooth"] == {"enabled": True, "radius": pytest.approx(7.6)}
    assert blended["contrast"] == {"enabled": True, "value": 1.05}


def test_blend_output_shape_follows_template():
    preset_a = {"brightness": {"enabled": True, "value": 2, "label": "soft"}}
    preset_b = {
        "brightness": {"enabled": True, "value": 4, "label": "hard", "extra": 1},
        "warmth": {"enabled": True, "alpha": 0.3},
    }

    blended = blend_presets(preset_a, preset_b, 0.5)

    assert blended == {"brightness": {"enabled": True, "value": 3.0, "label": "soft"}}


def test_blend_returns_new_objects():
    preset = get_preset("default")
    blended = blend_presets(preset, preset, 0.5)
    blended["smooth"]["radius"] = 0

    assert preset["smooth"]["radius"] == 4


def test_validate_empty_reports_first_missing_filter(caplog):
    with caplog.at_level(logging.ERROR, logger=PRESETS_LOGGER):
        assert validate_preset({}) is False

    assert len(caplog.records) == 1
    assert "smooth" in caplog.records[0].getMessage()


def test_validate_rejects_truthy_enabled(caplog):
    preset = get_preset("default")
    preset["contrast"]["enabled"] = 1

    with caplog.at_level(logging.ERROR, logger=PRESETS_LOGGER):
        assert validate_preset(preset) is False

    assert len(caplog.records) == 1
    assert "contrast.enabled" in caplog.records[0].getMessage()


@pytest.mark.parametrize("filter_key", FILTER_KEYS)
def test_validate_rejects_primitive_filter(filter_key):
    preset = get_preset("default")
    preset[filter_key] = True
    assert validate_preset(preset) is False


def test_validate_ignores_numeric_ranges():
    preset = get_preset("default")
    preset["smooth"]["opacity"] = 7.5
    preset["warmth"]["alpha"] = -3
    assert validate_preset(preset) is True


@pytest.mark.parametrize("value", [None, [], "default", 42])
def test_validate_non_mapping(value):
    assert validate_preset(value) is False
