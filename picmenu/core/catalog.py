import enum
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional, Type

from picmenu.core.errors import InvalidRequestError


class FoodCategory(str, enum.Enum):
    FINE_DINING = "fine-dining"
    FAST_FOOD = "fast-food"
    TO_GO = "to-go"
    HOME_STYLE = "home-style"


class ImageModel(str, enum.Enum):
    FLUX_11_PRO = "flux-1.1-pro"
    KREA_DEV = "krea-dev"
    KONTEXT_PRO = "kontext-pro"
    KONTEXT_MAX = "kontext-max"
    KONTEXT_DEV = "kontext-dev"


DEFAULT_CATEGORY = FoodCategory.FINE_DINING
DEFAULT_MODEL = ImageModel.FLUX_11_PRO


def _frozen(table: Dict[enum.Enum, str], enum_cls: Type[enum.Enum]) -> Mapping[enum.Enum, str]:
    """Freeze a lookup table, refusing one that does not cover ``enum_cls`` exactly."""
    missing = set(enum_cls) - set(table)
    extra = set(table) - set(enum_cls)
    if missing or extra:
        raise TypeError(
            f"{enum_cls.__name__} table mismatch: missing={sorted(m.value for m in missing)} "
            f"extra={sorted(str(e) for e in extra)}"
        )
    return MappingProxyType(dict(table))


CATEGORY_PROMPTS = _frozen({
    FoodCategory.FINE_DINING: (
        "Elegant fine dining presentation, white porcelain plate, sophisticated plating, "
        "garnished with microgreens and artistic sauce drizzles, restaurant quality lighting, "
        "premium ingredients visible, refined composition"
    ),
    FoodCategory.FAST_FOOD: (
        "Classic fast food style, wrapped in branded paper or served in takeout container, "
        "casual presentation, vibrant colors, appetizing and indulgent look, "
        "commercial food photography style"
    ),
    FoodCategory.TO_GO: (
        "Ready-to-eat takeout presentation, eco-friendly packaging, practical portions, "
        "fresh and convenient appearance, grab-and-go style, clean packaging design"
    ),
    FoodCategory.HOME_STYLE: (
        "Comfort food presentation, homemade appearance, served on casual dinnerware, "
        "warm and inviting, generous portions, family-style cooking, cozy home kitchen aesthetic"
    ),
}, FoodCategory)

CATEGORY_LABELS = _frozen({
    FoodCategory.FINE_DINING: "Fine Dining",
    FoodCategory.FAST_FOOD: "Fast Food",
    FoodCategory.TO_GO: "To-Go / Takeout",
    FoodCategory.HOME_STYLE: "Home Style",
}, FoodCategory)

MODEL_IDS = _frozen({
    ImageModel.FLUX_11_PRO: "black-forest-labs/FLUX.1.1-pro",
    ImageModel.KREA_DEV: "black-forest-labs/FLUX.1-krea-dev",
    ImageModel.KONTEXT_PRO: "black-forest-labs/FLUX.1-kontext-pro",
    ImageModel.KONTEXT_MAX: "black-forest-labs/FLUX.1-kontext-max",
    ImageModel.KONTEXT_DEV: "black-forest-labs/FLUX.1-kontext-dev",
}, ImageModel)

MODEL_LABELS = _frozen({
    ImageModel.FLUX_11_PRO: "FLUX 1.1 Pro (Default)",
    ImageModel.KREA_DEV: "FLUX Krea Dev",
    ImageModel.KONTEXT_PRO: "FLUX Kontext Pro",
    ImageModel.KONTEXT_MAX: "FLUX Kontext Max",
    ImageModel.KONTEXT_DEV: "FLUX Kontext Dev",
}, ImageModel)


def parse_category(value: Optional[str]) -> FoodCategory:
    if value is None:
        return DEFAULT_CATEGORY
    try:
        return FoodCategory(value)
    except ValueError:
        raise InvalidRequestError("Invalid category provided")


def parse_model(value: Optional[str]) -> ImageModel:
    if value is None:
        return DEFAULT_MODEL
    try:
        return ImageModel(value)
    except ValueError:
        raise InvalidRequestError("Invalid model provided")


def list_options() -> Dict[str, List[Dict[str, Any]]]:
    """Selectable categories and models, in declaration order."""
    return {
        "categories": [
            {"key": c.value, "label": CATEGORY_LABELS[c], "default": c is DEFAULT_CATEGORY}
            for c in FoodCategory
        ],
        "models": [
            {"key": m.value, "label": MODEL_LABELS[m], "default": m is DEFAULT_MODEL}
            for m in ImageModel
        ],
    }
