"""
Speech capabilities seen from the client: plain text in, plain text out.

Engines are optional. Callers check ``supported`` and fall back to typed
input or silent output; nothing else depends on an engine being present.
"""
from __future__ import annotations

from typing import Optional, Protocol

from culinarycompanion.features.recipes.domain.models import Recipe


class SpeechToText(Protocol):
    supported: bool

    def listen(self, language: str = "en-US") -> Optional[str]:
        ...


class TextToSpeech(Protocol):
    supported: bool

    def speak(self, text: str, *, rate: float = 0.9, pitch: float = 1.0) -> None:
        ...


class NullSpeech:
    """Stands in for a platform without speech support."""

    supported = False

    def listen(self, language: str = "en-US") -> Optional[str]:
        return None

    def speak(self, text: str, *, rate: float = 0.9, pitch: float = 1.0) -> None:
        return None


def recipe_speech_text(recipe: Recipe) -> str:
    return f"Recipe: {recipe.title}. {recipe.description}"
