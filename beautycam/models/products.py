from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple


@dataclass(frozen=True)
class Product:
    id: str
    name: str
    category: str
    line: str
    target_concerns: Tuple[str, ...]
    filter_type: str
    default_intensity: Optional[float] = None
    default_sigma: Optional[float] = None
    default_brightness: Optional[float] = None
    professional_only: bool = False
    price: float = 0.0


PRODUCTS: Dict[str, Product] = {
    "ampollas-skin-complex-advanced": Product(
        id="ampollas-skin-complex-advanced",
        name="Ampollas Skin Complex Advanced",
        category="antiaging",
        line="The Originals",
        target_concerns=("arrugas", "firmeza", "luminosidad"),
        filter_type="wrinkles",
        default_intensity=0.5,
        default_sigma=4,
        default_brightness=0,
        price=73.55,
    ),
    "serum-absolute-lift": Product(
        id="serum-absolute-lift",
        name="Sérum Absolute Lift",
        category="hidratacion",
        line="The Originals",
        target_concerns=("sequedad", "hidratacion"),
        filter_type="firmness",
        default_intensity=0.7,
        default_sigma=2,
        default_brightness=0,
        price=42.50,
    ),
    "acniover-cremigel-activo": Product(
        id="acniover-cremigel-activo",
        name="Acniover Cremige Activo",
        category="acne",
        line="Acniover",
        target_concerns=("acne", "poros", "grasa"),
        filter_type="acne",
        default_intensity=0.55,
        default_sigma=3.4,
        default_brightness=0.1,
        price=28.90,
    ),
    "dsp-crema-fps-50+-despigmentante": Product(
        id="dsp-crema-fps-50+-despigmentante",
        name="DSP-Crema FPS 50+ despigmentante",
        category="manchas",
        line="Pigment Zero",
        target_concerns=("manchas", "uniformidad", "luminosidad"),
        filter_type="spots",
        default_intensity=0.65,
        default_sigma=5,
        default_brightness=0.05,
        professional_only=True,
        price=89.90,
    ),
    "serum-ultimate-antiox": Product(
        id="serum-ultimate-antiox",
        name="Sérum Ultimate Antiox",
        category="hidratacion",
        line="Essentials",
        target_concerns=("sequedad", "hidratacion", "sensibilidad"),
        filter_type="brightness",
        default_intensity=0,
        default_sigma=0,
        default_brightness=0.07,
        price=35.50,
    ),
}


def get_product_by_id(product_id: str) -> Optional[Product]:
    return PRODUCTS.get(product_id)


def get_products_by_category(category: str) -> List[Product]:
    return [product for product in PRODUCTS.values() if product.category == category]


def get_products_by_concern(concern: str) -> List[Product]:
    return [product for product in PRODUCTS.values() if concern in product.target_concerns]


__all__ = [
    "Product",
    "PRODUCTS",
    "get_product_by_id",
    "get_products_by_category",
    "get_products_by_concern",
]
