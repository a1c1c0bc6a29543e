"""Entry points for the dish catalog browser."""

from __future__ import annotations

import argparse

from menudishes.catalog_app import MenuDishesApp
from menudishes.data import load_catalog
from menudishes.export import export_catalog
from menudishes.logs import configure_logging


def main() -> None:
    """Run the Textual application."""
    configure_logging()
    MenuDishesApp(load_catalog()).run()


def export_main(argv: list[str] | None = None) -> None:
    """Write the HTML export without starting the UI."""
    parser = argparse.ArgumentParser(description="Export the dish catalog to a static HTML page.")
    parser.add_argument("path", nargs="?", help="Output HTML file (defaults to MENU_DISHES_EXPORT_PATH).")
    parser.add_argument("--image-dir", help="Directory holding dish images (defaults to MENU_DISHES_IMAGE_DIR).")
    parser.add_argument("--catalog", help="JSON catalog to export instead of the embedded dish table.")
    args = parser.parse_args(argv)

    configure_logging()
    path = export_catalog(load_catalog(args.catalog), args.path, args.image_dir)
    print(path)


if __name__ == "__main__":
    main()
