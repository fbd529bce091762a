import math
from typing import Any, Dict, List, Optional, Union

from fastapi import APIRouter, Body, HTTPException
from pydantic import BaseModel

from beautycam.models.products import (
    PRODUCTS,
    get_product_by_id,
    get_products_by_category,
)
from beautycam.services.composer import compose_product_bundle
from beautycam.services.filter_types import FILTER_ORDER, get_filter_type
from beautycam.services.presets import (
    blend_presets,
    get_all_presets,
    get_preset,
    validate_preset,
)
from beautycam.services.products import (
    build_shader_config_for_product,
    compose_bundle_for_product,
    product_to_dict,
)
from beautycam.services.shader_config import build_shader_config

router = APIRouter(prefix="/api")


class BlendRequest(BaseModel):
    base: Union[str, Dict[str, Any]]
    target: Union[str, Dict[str, Any]]
    factor: float = 0.5


class ComposeRequest(BaseModel):
    category: Optional[str] = None
    concerns: List[str] = []


class ShaderConfigRequest(BaseModel):
    intensity: Optional[float] = None
    sigma: Optional[float] = None
    brightness: Optional[float] = None
    overrides: Dict[str, Any] = {}


def _resolve_bundle(value: Union[str, Dict[str, Any]], field: str) -> Dict[str, Any]:
    if isinstance(value, str):
        return get_preset(value.lower())
    if not validate_preset(value):
        raise HTTPException(status_code=422, detail=f"Invalid preset in '{field}'")
    return value


def _is_finite_bundle(bundle: Dict[str, Any]) -> bool:
    for setting in bundle.values():
        if not isinstance(setting, dict):
            continue
        for value in setting.values():
            if isinstance(value, float) and not math.isfinite(value):
                return False
    return True


def _require_product(product_id: str):
    product = get_product_by_id(product_id)
    if product is None:
        raise HTTPException(status_code=404, detail="Unknown product")
    return product


@router.get("/presets")
def list_presets():
    return get_all_presets()


@router.get("/presets/{key}")
def preset_detail(key: str):
    return get_preset(key.lower())


@router.post("/presets/blend")
def blend_endpoint(request: BlendRequest):
    base = _resolve_bundle(request.base, "base")
    target = _resolve_bundle(request.target, "target")
    blended = blend_presets(base, target, request.factor)
    if not _is_finite_bundle(blended):
        raise HTTPException(status_code=422, detail="Blend factor produces non-finite values")
    return blended


@router.post("/presets/validate")
def validate_endpoint(preset: Any = Body(None)):
    return {"valid": validate_preset(preset)}


@router.get("/filters")
def list_filters():
    return [get_filter_type(key) for key in FILTER_ORDER]


@router.get("/filters/{key}/shader-config")
def shader_config_endpoint(
    key: str,
    intensity: Optional[float] = None,
    sigma: Optional[float] = None,
    brightness: Optional[float] = None,
):
    if get_filter_type(key) is None:
        raise HTTPException(status_code=404, detail="Unknown filter type")
    return build_shader_config(key, intensity=intensity, sigma=sigma, brightness=brightness)


@router.post("/filters/{key}/shader-config")
def tuned_shader_config_endpoint(key: str, request: ShaderConfigRequest):
    if get_filter_type(key) is None:
        raise HTTPException(status_code=404, detail="Unknown filter type")
    return build_shader_config(
        key,
        intensity=request.intensity,
        sigma=request.sigma,
        brightness=request.brightness,
        overrides=request.overrides,
    )


@router.post("/compose")
def compose_endpoint(request: ComposeRequest):
    return compose_product_bundle(request.category, request.concerns)


@router.get("/products")
def list_products(category: Optional[str] = None, concern: Optional[str] = None):
    if category is not None:
        products = get_products_by_category(category)
    else:
        products = list(PRODUCTS.values())
    if concern is not None:
        products = [p for p in products if concern in p.target_concerns]
    return [product_to_dict(product) for product in products]


@router.get("/products/{product_id}")
def product_detail(product_id: str):
    return product_to_dict(_require_product(product_id))


@router.get("/products/{product_id}/bundle")
def product_bundle(product_id: str):
    return compose_bundle_for_product(_require_product(product_id))


@router.get("/products/{product_id}/shader-config")
def product_shader_config(product_id: str):
    return build_shader_config_for_product(_require_product(product_id))
