"""Speech announcement of dish names."""

from __future__ import annotations

import logging
import os
import shlex
import shutil
import subprocess
from abc import ABC, abstractmethod
from pathlib import Path
from tempfile import TemporaryDirectory

from menudishes.config import (
    OPENAI_API_KEY,
    SPEECH_MODEL,
    SPEECH_PLAYER_ENV,
    SPEECH_PLAYER_FALLBACKS,
    SPEECH_VOICE,
)

logger = logging.getLogger(__name__)


class SpeechError(RuntimeError):
    """Raised when a name cannot be synthesized or played back."""


class SpeechPort(ABC):
    @abstractmethod
    def synthesize(self, text: str, output_path: Path) -> Path:
        """Write spoken `text` as an audio file at `output_path`."""


class OpenAISpeechAdapter(SpeechPort):
    """Text-to-speech through the OpenAI audio speech endpoint."""

    def __init__(self, api_key: str | None = None, model: str = SPEECH_MODEL, voice: str = SPEECH_VOICE) -> None:
        self.api_key = api_key if api_key is not None else OPENAI_API_KEY
        self.model = model
        self.voice = voice
        self._client = None

    def _get_client(self):
        if not self.api_key:
            raise SpeechError("OPENAI_API_KEY is required for speech")
        if self._client is None:
            from openai import OpenAI

            self._client = OpenAI(api_key=self.api_key)
        return self._client

    def synthesize(self, text: str, output_path: Path) -> Path:
        client = self._get_client()
        try:
            with client.audio.speech.with_streaming_response.create(
                model=self.model,
                voice=self.voice,
                input=text,
                response_format="mp3",
            ) as response:
                response.stream_to_file(output_path)
        except Exception as exc:
            raise SpeechError(f"Speech synthesis failed: {exc}") from exc
        return output_path


def resolve_player_command() -> list[str]:
    """
    Resolve the command used to play synthesized audio.

    Resolution order:
    1. MENU_DISHES_AUDIO_PLAYER (if set, split shell-style)
    2. The first of SPEECH_PLAYER_FALLBACKS found on PATH
    """
    env_override = os.environ.get(SPEECH_PLAYER_ENV, "").strip()
    if env_override:
        return shlex.split(env_override)

    for candidate in SPEECH_PLAYER_FALLBACKS:
        if shutil.which(candidate[0]):
            return list(candidate)

    tried = ", ".join(candidate[0] for candidate in SPEECH_PLAYER_FALLBACKS)
    raise SpeechError(f"No audio player found. Set {SPEECH_PLAYER_ENV}. Tried: {tried}")


def play_audio(path: Path) -> None:
    command = [*resolve_player_command(), str(path)]
    try:
        subprocess.run(command, check=True, stdout=subprocess.DEVNULL, stderr=subprocess.DEVNULL)
    except (OSError, subprocess.CalledProcessError) as exc:
        raise SpeechError(f"Audio playback failed: {exc}") from exc


def announce(text: str, port: SpeechPort | None = None) -> None:
    """Synthesize `text` into a temporary file and play it."""
    if not text.strip():
        return
    speech = port or OpenAISpeechAdapter()
    with TemporaryDirectory(prefix="menu-dishes-") as tmp:
        audio_path = speech.synthesize(text, Path(tmp) / "speech.mp3")
        logger.info("speech synthesized chars=%d", len(text))
        play_audio(audio_path)
