from typing import Literal

from pydantic import BaseModel

AUTO_LANGUAGE_ID = "auto"

InputLanguageId = Literal["auto", "en", "es", "de"]
OutputLanguageId = Literal["en", "es", "de"]


class Language(BaseModel):
    id: str
    name: str

    model_config = {"frozen": True}


def list_output_languages() -> list[Language]:
    return [
        Language(id="en", name="English"),
        Language(id="es", name="Español"),
        Language(id="de", name="Deutsch"),
    ]


def list_input_languages() -> list[Language]:
    return [Language(id=AUTO_LANGUAGE_ID, name="Auto"), *list_output_languages()]


def find_language_name(languages: list[Language], language_id: str) -> str | None:
    for language in languages:
        if language.id == language_id:
            return language.name
    return None
