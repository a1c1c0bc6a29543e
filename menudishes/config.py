"""Runtime configuration defaults for the catalog browser, export and speech."""

from __future__ import annotations

import os

APP_TITLE = "Ementa"
SEARCH_PROMPT = "Pesquisar por nome ou ingredientes"
INGREDIENTS_HEADING = "Ingredientes"

# Optional JSON catalog replacing the embedded dish table.
CATALOG_JSON_ENV = "MENU_DISHES_CATALOG_JSON"

IMAGE_DIR = os.environ.get("MENU_DISHES_IMAGE_DIR", "assets/images")
IMAGE_EXTENSIONS = (".jpg", ".jpeg", ".png", ".webp")

EXPORT_PATH = os.environ.get("MENU_DISHES_EXPORT_PATH", "export/ementa.html")
EXPORT_THUMBNAIL_PX = 320
EXPORT_JPEG_QUALITY = 82

# The terminal belongs to the TUI, so diagnostics go to a file.
DEBUG_LOG_PATH = os.environ.get("MENU_DISHES_LOG_PATH", "/tmp/menu-dishes-debug.log")
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")

OPENAI_API_KEY = os.environ.get("OPENAI_API_KEY", "")
SPEECH_MODEL = os.environ.get("TTS_MODEL", "gpt-4o-mini-tts")
SPEECH_VOICE = os.environ.get("TTS_VOICE", "alloy")
SPEECH_PLAYER_ENV = "MENU_DISHES_AUDIO_PLAYER"
SPEECH_PLAYER_FALLBACKS = (
    ("afplay",),
    ("mpg123", "-q"),
    ("ffplay", "-nodisp", "-autoexit", "-loglevel", "quiet"),
    ("paplay",),
)
