"""Static HTML export of the whole catalog."""

from __future__ import annotations

import base64
import logging
from html import escape
from io import BytesIO
from pathlib import Path
from typing import Iterable

from menudishes.config import (
    APP_TITLE,
    EXPORT_JPEG_QUALITY,
    EXPORT_PATH,
    EXPORT_THUMBNAIL_PX,
    IMAGE_DIR,
    IMAGE_EXTENSIONS,
    INGREDIENTS_HEADING,
)
from menudishes.models import Catalog, Dish

logger = logging.getLogger(__name__)

_STYLE = """
  body{font-family:system-ui,-apple-system,sans-serif;margin:24px auto;max-width:880px;color:#1d1d1f;background:#fafafa}
  h1{font-size:34px;margin-bottom:4px}
  .count{color:#6e6e73;margin-bottom:24px}
  .dish{display:flex;gap:18px;padding:16px 20px;margin-bottom:14px;border:1px solid #ddd;border-radius:12px;background:#fff}
  .dish img,.dish .placeholder{width:180px;height:135px;object-fit:cover;border-radius:10px;flex-shrink:0}
  .placeholder{display:flex;align-items:center;justify-content:center;background:#eee;color:#888;font-size:12px;text-align:center;padding:6px;box-sizing:border-box;word-break:break-all}
  .dish h2{margin:0 0 6px;font-size:20px}
  .dish p{margin:0 0 10px}
  .dish h3{margin:0 0 4px;font-size:14px;text-transform:uppercase;letter-spacing:.04em;color:#6e6e73}
  .dish ul{margin:0;padding-left:18px}
"""


def resolve_image_path(image_name: str, image_dir: str | Path | None = None) -> Path | None:
    """Find the file for a logical image name, trying each known extension."""
    base = Path(image_dir if image_dir is not None else IMAGE_DIR)
    candidates = [base / image_name]
    candidates.extend(base / f"{image_name}{ext}" for ext in IMAGE_EXTENSIONS)
    for candidate in candidates:
        if candidate.is_file():
            return candidate
    return None


def thumbnail_data_uri(path: Path, max_px: int = EXPORT_THUMBNAIL_PX) -> str | None:
    """Downscale an image to a JPEG data URI, or None if it cannot be read."""
    from PIL import Image

    try:
        with Image.open(path) as img:
            thumb = img.convert("RGB")
            thumb.thumbnail((max_px, max_px))
            buffer = BytesIO()
            thumb.save(buffer, format="JPEG", quality=EXPORT_JPEG_QUALITY)
    except (OSError, Image.DecompressionBombError) as exc:
        logger.debug("image unreadable path=%s error=%r", path, exc)
        return None
    encoded = base64.b64encode(buffer.getvalue()).decode("ascii")
    return f"data:image/jpeg;base64,{encoded}"


def _render_image(dish: Dish, image_dir: str | Path | None) -> str:
    image_name = dish.primary_image
    if image_name is None:
        return '<div class="placeholder">—</div>'

    path = resolve_image_path(image_name, image_dir)
    data_uri = thumbnail_data_uri(path) if path is not None else None
    if data_uri is None:
        logger.debug("image missing name=%s", image_name)
        return f'<div class="placeholder">{escape(image_name)}</div>'
    return f'<img src="{data_uri}" alt="{escape(dish.name)}">'


def _render_dish(dish: Dish, image_dir: str | Path | None) -> str:
    ingredients = "".join(f"<li>{escape(ingredient)}</li>" for ingredient in dish.ingredients)
    description = f"<p>{escape(dish.description)}</p>" if dish.description else ""
    return f"""
    <section class="dish" id="dish-{escape(dish.id)}">
      {_render_image(dish, image_dir)}
      <div>
        <h2>{escape(dish.name)}</h2>
        {description}
        <h3>{escape(INGREDIENTS_HEADING)}</h3>
        <ul>{ingredients}</ul>
      </div>
    </section>"""


def render_catalog_html(
    dishes: Iterable[Dish],
    *,
    title: str = APP_TITLE,
    image_dir: str | Path | None = None,
) -> str:
    """Render dishes, in the given order, as a self-contained styled HTML page."""
    dishes = list(dishes)
    body = "".join(_render_dish(dish, image_dir) for dish in dishes)
    return f"""<!DOCTYPE html>
<html lang="pt"><head><meta charset="utf-8"><title>{escape(title)}</title>
<style>{_STYLE}</style></head>
<body>
  <h1>{escape(title)}</h1>
  <div class="count">{len(dishes)} pratos</div>{body}
</body></html>
"""


def export_catalog(
    catalog: Catalog,
    path: str | Path | None = None,
    image_dir: str | Path | None = None,
) -> Path:
    """Write the whole catalog, sorted by name, to an HTML file and return its path."""
    out_path = Path(path or EXPORT_PATH)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    out_path.write_text(render_catalog_html(catalog.sorted_by_name(), image_dir=image_dir), encoding="utf-8")
    logger.info("catalog exported path=%s dishes=%d", out_path, len(catalog))
    return out_path
