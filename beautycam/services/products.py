from dataclasses import asdict
from typing import Any, Dict, Mapping, Optional

from beautycam.models.presets import FilterParameterBundle
from beautycam.models.products import Product
from beautycam.services.composer import compose_product_bundle
from beautycam.services.shader_config import build_shader_config


def product_to_dict(product: Product) -> Dict[str, Any]:
    data = asdict(product)
    data["target_concerns"] = list(product.target_concerns)
    return data


def compose_bundle_for_product(product: Product) -> FilterParameterBundle:
    """Default bundle tuned by the product's category, then its concerns."""
    return compose_product_bundle(product.category, product.target_concerns)


def build_shader_config_for_product(
    product: Product,
    overrides: Optional[Mapping[str, Any]] = None,
) -> Dict[str, Any]:
    """Preview uniforms for the product's locked filter type.

    The product's own slider defaults take precedence over the filter type's.
    """
    return build_shader_config(
        product.filter_type,
        intensity=product.default_intensity,
        sigma=product.default_sigma,
        brightness=product.default_brightness,
        overrides=overrides,
    )


__all__ = ["product_to_dict", "compose_bundle_for_product", "build_shader_config_for_product"]
