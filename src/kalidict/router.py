import logging
from typing import Any, Optional

from fastapi import APIRouter, Body
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from .config import settings
from .globals import repository
from .models import QuizMode
from .repository import WordNotFound, to_dicts
from .transfer import (
    InvalidDictionaryFormat,
    build_export_data,
    export_filename,
    parse_dictionary_words,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api")


class WordCreate(BaseModel):
    word: str
    meaning: str = ""


@router.get("/words")
async def list_words(q: Optional[str] = None):
    words = repository.search(q) if q else repository.list_words()
    return to_dicts(words)


@router.post("/words")
async def add_word(payload: WordCreate):
    if not payload.word.strip():
        return JSONResponse({"error": "Word is required"}, status_code=400)
    word = repository.add_word(payload.word, payload.meaning)
    return word.model_dump(mode="json")


@router.delete("/words/{word_id}")
async def delete_word(word_id: int):
    try:
        repository.delete_word(word_id)
    except WordNotFound as e:
        return JSONResponse({"error": str(e)}, status_code=404)
    return {"status": "success"}


@router.get("/words/random")
async def random_word(exclude_id: Optional[int] = None):
    word = repository.random_word(exclude_id=exclude_id)
    if word is None:
        return JSONResponse({"error": "Dictionary is empty"}, status_code=404)
    return word.model_dump(mode="json")


@router.post("/import")
async def import_words(
    payload: Any = Body(...),
    replace_existing: bool = False,
    only_add_missing: bool = False,
):
    try:
        words = parse_dictionary_words(payload)
    except InvalidDictionaryFormat as e:
        logger.warning(f"Rejected import: {e}")
        return JSONResponse({"error": str(e)}, status_code=400)

    added = repository.import_words(
        words,
        replace_existing=replace_existing,
        only_add_missing=only_add_missing,
    )
    return {"status": "success", "imported": added}


@router.get("/export")
async def export_words():
    data = build_export_data(repository.all_words())
    return JSONResponse(
        data,
        headers={
            "Content-Disposition": f'attachment; filename="{export_filename()}"'
        },
    )


@router.get("/settings")
async def quiz_settings():
    """Defaults the client uses when it starts a quiz session."""
    return {
        "questionLimit": settings.QUESTION_LIMIT,
        "mode": QuizMode(settings.DEFAULT_MODE).value,
        "modes": [m.value for m in QuizMode],
    }
