from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

import httpx

from culinarycompanion.client.session import Preferences, RecentSearches, SessionStore
from culinarycompanion.client.speech import NullSpeech, SpeechToText, TextToSpeech, recipe_speech_text
from culinarycompanion.features.recipes.api.schemas import InputType, RecipeRequest, RecipeResponse
from culinarycompanion.features.recipes.domain.models import Recipe

log = logging.getLogger("client.api")


class RecipeServiceError(RuntimeError):
    """Raised when the service answers a generation call with an error body."""


class CulinaryClient:
    """
    HTTP client for the recipe service, carrying the per-session caches
    (recent searches and preferences) a browser tab would keep.
    """

    def __init__(
        self,
        base_url: str = "http://127.0.0.1:8076",
        *,
        timeout: float = 30,
        transport: Optional[httpx.BaseTransport] = None,
        store: Optional[SessionStore] = None,
        speech: Optional[SpeechToText] = None,
        speaker: Optional[TextToSpeech] = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self._http = httpx.Client(base_url=self.base_url, timeout=timeout, transport=transport)
        self.store = store or SessionStore()
        self.recent = RecentSearches(self.store)
        self.preferences = Preferences.load(self.store)
        self.speech = speech or NullSpeech()
        self.speaker = speaker or NullSpeech()

    def close(self) -> None:
        self._http.close()

    def __enter__(self) -> "CulinaryClient":
        return self

    def __exit__(self, *exc) -> None:
        self.close()

    def set_preferences(self, preferences: Preferences) -> None:
        self.preferences = preferences
        preferences.save(self.store)

    def health(self) -> Dict[str, Any]:
        r = self._http.get("/api/health")
        r.raise_for_status()
        return r.json()

    def generate(self, request: RecipeRequest) -> RecipeResponse:
        if self.preferences is not None:
            request = request.model_copy(update={"language": self.preferences.output_language})
        self.recent.save(request.ingredients)

        r = self._http.post(
            "/api/recipes/generate",
            json=request.model_dump(mode="json", by_alias=True, exclude_none=True),
        )
        if r.is_error:
            try:
                body = r.json()
            except ValueError:
                body = {}
            raise RecipeServiceError(body.get("error") or f"Failed to generate recipes ({r.status_code})")
        return RecipeResponse.model_validate(r.json())

    def generate_from_speech(self, **options: Any) -> Optional[RecipeResponse]:
        """Listen for ingredients and submit them as audio input; None when speech is unavailable."""
        if not self.speech.supported:
            return None
        language = self.preferences.input_language if self.preferences else "en"
        transcript = self.speech.listen(language)
        if not transcript or not transcript.strip():
            return None
        request = RecipeRequest(ingredients=transcript, input_type=InputType.AUDIO, **options)
        return self.generate(request)

    def read_aloud(self, recipe: Recipe) -> bool:
        """Speak the recipe title and description when audio output is available and wanted."""
        if not self.speaker.supported:
            return False
        if self.preferences is not None and self.preferences.preferred_mode == "text":
            return False
        self.speaker.speak(recipe_speech_text(recipe), rate=0.9, pitch=1.0)
        return True

    def history(self) -> List[Dict[str, Any]]:
        r = self._http.get("/api/recipes/history")
        r.raise_for_status()
        return r.json().get("history", [])
