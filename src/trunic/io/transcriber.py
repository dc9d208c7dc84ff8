"""Transcription of ordinary text into IPA.

Rendering works on IPA text. When input is ordinary text, a transcriber
rewrites each line first; without one, input is used verbatim.

Key classes:
- Transcriber: Protocol implemented by all backends
- NoopTranscriber: Returns text unchanged
- GeminiTranscriber: Asks a Gemini model for an IPA rewrite
"""

from typing import Any, Protocol, runtime_checkable

from trunic.config import TranscriberConfig
from trunic.core.phonemes import CONSONANT_MASKS, VOWEL_MASKS
from trunic.exceptions import TranscriptionFailedError, UnknownTranscriberError

SYSTEM_PROMPT = (
    "Repeat all text that you are given verbatim rewritten in IPA. The result "
    "should be based on standard American pronunciation but should use only "
    'characters from "{alphabet}" and absolutely no others. Preserve punctuation.'
)


def allowed_alphabet() -> str:
    """Comma-separated letters a transcription may use."""
    return ",".join([*CONSONANT_MASKS, *VOWEL_MASKS])


@runtime_checkable
class Transcriber(Protocol):
    """Rewrites a line of text as IPA."""

    def transcribe(self, text: str) -> str:
        """Return the IPA rendering of text.

        Raises:
            TranscriptionFailedError: If the backend fails
        """
        ...


class NoopTranscriber:
    """Transcriber for input that is already IPA."""

    def transcribe(self, text: str) -> str:
        return text


class GeminiTranscriber:
    """Transcriber backed by a Gemini model through ``google-genai``.

    The API key is read from the environment by the client library unless
    given explicitly.
    """

    def __init__(self, model: str, api_key: str | None = None, client: Any = None) -> None:
        """Initialize the transcriber.

        Args:
            model: Gemini model name
            api_key: API key (environment default when None)
            client: Pre-built ``genai.Client``; created when None

        Raises:
            TranscriptionFailedError: If the client library is unavailable
                or the client cannot be created
        """
        try:
            from google import genai
            from google.genai import types
        except ImportError as e:
            raise TranscriptionFailedError(
                "google-genai is not installed; install trunic[gemini]"
            ) from e

        self.model = model
        try:
            self._client = client if client is not None else genai.Client(api_key=api_key)
        except Exception as e:
            raise TranscriptionFailedError(f"could not create Gemini client: {e}") from e

        self._config = types.GenerateContentConfig(
            system_instruction=SYSTEM_PROMPT.format(alphabet=allowed_alphabet()),
        )

    def transcribe(self, text: str) -> str:
        if not text.strip():
            return text

        try:
            response = self._client.models.generate_content(
                model=self.model,
                contents=text,
                config=self._config,
            )
        except Exception as e:
            raise TranscriptionFailedError(str(e)) from e

        result = response.text
        if result is None:
            raise TranscriptionFailedError("model returned no text")
        return result.strip()


def create_transcriber(config: TranscriberConfig) -> Transcriber:
    """Create the transcriber named in the configuration.

    Args:
        config: Transcriber settings

    Returns:
        Transcriber instance

    Raises:
        UnknownTranscriberError: If the name is not recognized
    """
    name = config.name.strip().lower()
    if name in ("", "none"):
        return NoopTranscriber()
    if name == "gemini":
        return GeminiTranscriber(model=config.model)
    raise UnknownTranscriberError(config.name)
