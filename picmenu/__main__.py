"""Command-line client for the PicMenu service.

Usage:
    python -m picmenu menu.jpg --category fast-food --output ./dishes/
    python -m picmenu --sample --search pizza
"""

import argparse
import base64
import os
import re
import sys

from picmenu.client import MenuClient, MenuClientError, filter_menu
from picmenu.core.catalog import DEFAULT_CATEGORY, DEFAULT_MODEL, FoodCategory, ImageModel
from picmenu.core.logging import setup_logging


def slugify(name: str) -> str:
    return re.sub(r"[^a-z0-9]+", "-", name.lower()).strip("-") or "dish"


def save_images(items, output_dir: str) -> int:
    os.makedirs(output_dir, exist_ok=True)
    saved = 0
    for index, item in enumerate(items, start=1):
        image = item.get("menuImage")
        if not image:
            continue
        path = os.path.join(output_dir, f"{index}-{slugify(item['name'])}.png")
        with open(path, "wb") as fh:
            fh.write(base64.b64decode(image["base64Image"]))
        saved += 1
    return saved


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Visualize a restaurant menu with AI-generated dish photos")
    parser.add_argument("image", nargs="?", help="Path to the menu photo (jpg, jpeg or png)")
    parser.add_argument("--sample", action="store_true",
                        help="Show the built-in sample menu instead of uploading a photo")
    parser.add_argument("--category", default=DEFAULT_CATEGORY.value,
                        choices=[c.value for c in FoodCategory])
    parser.add_argument("--model", default=DEFAULT_MODEL.value,
                        choices=[m.value for m in ImageModel])
    parser.add_argument("--search", default="", help="Only show dishes whose name contains this text")
    parser.add_argument("--output", help="Directory to write dish images to")
    parser.add_argument("--base-url", default=os.getenv("PICMENU_URL", "http://localhost:8000"))
    args = parser.parse_args(argv)

    setup_logging(os.getenv("LOG_LEVEL", "WARNING"))

    client = MenuClient(args.base_url)
    if args.sample:
        menu = client.sample()
    else:
        if not args.image:
            parser.error("an image path is required unless --sample is given")
        if not os.path.isfile(args.image):
            print(f"Error: image file not found: {args.image}", file=sys.stderr)
            return 1
        try:
            menu = client.visualize(args.image, category=args.category, model=args.model)
        except MenuClientError as exc:
            print(str(exc), file=sys.stderr)
            return 1

    print(f"Menu - {len(menu)} dishes detected")
    shown = filter_menu(menu, args.search)
    for item in shown:
        marker = "" if item.get("menuImage") else " (no image)"
        print(f"  {item['name']}  {item['price']}{marker}")
        print(f"    {item['description']}")

    if args.output:
        saved = save_images(shown, args.output)
        print(f"Saved {saved} images to {args.output}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
