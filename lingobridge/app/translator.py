"""Language-pair translation through a chat-completion model.

The model is steered by a fixed few-shot prompt: the source language name is
wrapped in ``{{...}}`` and the target language name in ``[[...]]`` after the
text to translate. ``{{Auto}}`` asks the model to detect the source language.
"""

import logging
from collections.abc import Awaitable, Callable

from pydantic import BaseModel

from .languages import Language, find_language_name, list_input_languages, list_output_languages
from .llm import ChatMessage

logger = logging.getLogger(__name__)

ChatCompletion = Callable[[list[ChatMessage]], Awaitable[str | None]]

TRANSLATION_FAILED_MESSAGE = "Error translating text"
TRANSLATION_FAILED_REASON = "Translation request failed"

SYSTEM_PROMPT = (
    "You are an AI that translates text. You receive a text from the user. "
    "Do not answer, just translate the text. The original language is surrounded by `{{` and `}}`. "
    "You can also receive {{auto}} wich means that you have to detect the language. "
    "The language you translate to is surrounded by `[[` and `]]`."
)

FEW_SHOT_EXAMPLES: tuple[tuple[str, str], ...] = (
    ("Hola mundo {{Español}} [[English]]", "Hello world"),
    ("How are you? {{Auto}} [[Deutsch]]", "Wie geht es dir?"),
    ("Buen día, como estás? {{Auto}} [[English]]", "Good morning, how are you?"),
)


class TranslationResult(BaseModel):
    success: bool
    text: str = ""
    error: str | None = None

    @property
    def output_text(self) -> str:
        """What a user should see: the translation, or the fallback message on failure."""
        return self.text if self.success else TRANSLATION_FAILED_MESSAGE


def annotate(text: str, source_name: str, target_name: str) -> str:
    return f"{text} {{{{{source_name}}}}} [[{target_name}]]"


def build_messages(text: str, source_name: str, target_name: str) -> list[ChatMessage]:
    messages = [ChatMessage(role="system", content=SYSTEM_PROMPT)]
    for example_input, example_output in FEW_SHOT_EXAMPLES:
        messages.append(ChatMessage(role="user", content=example_input))
        messages.append(ChatMessage(role="assistant", content=example_output))
    messages.append(ChatMessage(role="user", content=annotate(text, source_name, target_name)))
    return messages


class TranslationService:
    def __init__(self, complete: ChatCompletion) -> None:
        self._complete = complete

    async def translate(
        self,
        source_language_id: str,
        target_language_id: str,
        text: str,
    ) -> TranslationResult:
        if source_language_id == target_language_id:
            logger.debug("Source and target are both %r; returning input unchanged", source_language_id)
            return TranslationResult(success=True, text=text)

        source_name = self._resolve_name(list_input_languages(), source_language_id, "source")
        target_name = self._resolve_name(list_output_languages(), target_language_id, "target")
        messages = build_messages(text, source_name, target_name)

        try:
            content = await self._complete(messages)
        except Exception as exc:
            logger.warning(
                "Translation %s -> %s failed: %s",
                source_language_id,
                target_language_id,
                exc,
                exc_info=True,
            )
            return TranslationResult(success=False, error=TRANSLATION_FAILED_REASON)

        return TranslationResult(success=True, text=content or "")

    async def translate_text(self, source_language_id: str, target_language_id: str, text: str) -> str:
        result = await self.translate(source_language_id, target_language_id, text)
        return result.output_text

    @staticmethod
    def _resolve_name(languages: list[Language], language_id: str, role: str) -> str:
        name = find_language_name(languages, language_id)
        if name is None:
            logger.warning("Unknown %s language id %r; sending an empty name", role, language_id)
            return ""
        return name
