"""Built-in sample menu for trying the client without an upload or model calls."""

import copy
from typing import Any, Dict, List

SAMPLE_MENU_NAME = "Italian trattoria"

_ITALIAN_MENU: List[Dict[str, Any]] = [
    {"name": "Bruschetta", "price": "$8",
     "description": "Grilled bread rubbed with garlic and topped with tomatoes, basil and olive oil."},
    {"name": "Caprese Salad", "price": "$11",
     "description": "Fresh mozzarella, ripe tomatoes and basil drizzled with balsamic glaze."},
    {"name": "Spaghetti Carbonara", "price": "$17",
     "description": "Spaghetti tossed with pancetta, egg yolk, pecorino and black pepper."},
    {"name": "Margherita Pizza", "price": "$15",
     "description": "Wood-fired pizza with tomato sauce, mozzarella and fresh basil."},
    {"name": "Osso Buco", "price": "$28",
     "description": "Braised veal shank with gremolata, served over saffron risotto."},
    {"name": "Tiramisu", "price": "$9",
     "description": "Espresso-soaked ladyfingers layered with mascarpone cream and cocoa."},
]


def sample_menu() -> List[Dict[str, Any]]:
    """A fresh copy of the pre-parsed sample menu, safe for callers to modify."""
    return copy.deepcopy(_ITALIAN_MENU)
