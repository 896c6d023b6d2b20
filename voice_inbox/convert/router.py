"""FastAPI router for the /convert endpoint."""

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse

from voice_inbox.convert.formatting import generate_filename, generate_note_content
from voice_inbox.convert.models import ConvertFailure, ConvertResult, ConvertSuccess
from voice_inbox.convert.validation import ConvertError, parse_convert_request
from voice_inbox.dependencies import Clock, get_clock, logger

router = APIRouter(tags=["convert"])

GENERIC_ERROR = "Failed to process request"


def convert_transcription(body: bytes, clock: Clock) -> ConvertResult:
    """Turn a raw request body into a note or a failure.

    Validation errors become a ConvertFailure carrying their message; they
    are never raised to the caller.

    Args:
        body: Raw request body
        clock: Time source for the note date and filename

    Returns:
        ConvertSuccess with note content and filename, or ConvertFailure
    """
    try:
        request = parse_convert_request(body)
    except ConvertError as e:
        logger.info(
            "convert_rejected",
            extra={"error": str(e), "error_type": type(e).__name__},
        )
        return ConvertFailure(error=str(e))

    now = clock.now()
    result = ConvertSuccess(
        note_content=generate_note_content(request.text, request.source, now),
        filename=generate_filename(now),
    )
    logger.info(
        "convert_succeeded",
        extra={
            "source": request.source,
            "text_length": len(request.text),
            "note_filename": result.filename,
        },
    )
    return result


@router.post("/convert", response_model=None)
async def convert(request: Request, clock: Clock = Depends(get_clock)) -> JSONResponse:
    """Convert a transcription into Obsidian note content.

    Returns:
        200 with {success, noteContent, filename}, or 400 with {success, error}
    """
    try:
        body = await request.body()
        result = convert_transcription(body, clock)
    except Exception as e:
        logger.error("convert_failed", extra={"error": str(e)}, exc_info=True)
        result = ConvertFailure(error=GENERIC_ERROR)

    status_code = status.HTTP_200_OK if result.success else status.HTTP_400_BAD_REQUEST
    return JSONResponse(content=result.model_dump(by_alias=True), status_code=status_code)
