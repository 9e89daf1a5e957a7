from pydantic import BaseModel, Field

from .languages import InputLanguageId, Language, OutputLanguageId

MIN_TEXT_LENGTH = 3
MAX_TEXT_LENGTH = 50


class LanguagesResponse(BaseModel):
    input_languages: list[Language]
    output_languages: list[Language]
    default_input_language: InputLanguageId
    default_output_language: OutputLanguageId


class TranslateRequest(BaseModel):
    input_language: InputLanguageId = "auto"
    output_language: OutputLanguageId
    text: str = Field(..., min_length=MIN_TEXT_LENGTH, max_length=MAX_TEXT_LENGTH)


class TranslateResponse(BaseModel):
    success: bool
    output_text: str
    error: str | None = None
