from fastapi import APIRouter, Depends, HTTPException, Request, status

from ..languages import AUTO_LANGUAGE_ID, list_input_languages, list_output_languages
from ..schemas import LanguagesResponse, TranslateRequest, TranslateResponse
from ..translator import TranslationService

router = APIRouter(tags=["translate"])


def get_translation_service(request: Request) -> TranslationService:
    service = getattr(request.app.state, "translation_service", None)
    if service is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Translation service is not configured.",
        )
    return service


@router.get("/languages", response_model=LanguagesResponse)
def list_languages() -> LanguagesResponse:
    output_languages = list_output_languages()
    return LanguagesResponse(
        input_languages=list_input_languages(),
        output_languages=output_languages,
        default_input_language=AUTO_LANGUAGE_ID,
        default_output_language=output_languages[0].id,
    )


@router.post("/translate", response_model=TranslateResponse)
async def translate(
    payload: TranslateRequest,
    service: TranslationService = Depends(get_translation_service),
) -> TranslateResponse:
    result = await service.translate(payload.input_language, payload.output_language, payload.text)
    return TranslateResponse(success=result.success, output_text=result.output_text, error=result.error)
