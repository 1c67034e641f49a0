import logging

from fastapi import APIRouter, File, HTTPException, UploadFile

from vocab_drill.config import get_settings
from vocab_drill.models.session import AnswerUpdate, KeyPress, SessionDeleted, SessionOut, session_to_out
from vocab_drill.services.drill import DrillState, fail_load, load, restart, set_answer
from vocab_drill.services.intents import Intent, dispatch, press_key
from vocab_drill.services.row_parser import parse_rows
from vocab_drill.services.session_store import SessionNotFoundError, get_store
from vocab_drill.services.spreadsheet import SpreadsheetDecodeError, decode_spreadsheet

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/sessions", tags=["sessions"])


def _get_state(session_id: str) -> DrillState:
    try:
        return get_store().get(session_id)
    except SessionNotFoundError:
        raise HTTPException(status_code=404, detail="Session not found")


def _save(session_id: str, state: DrillState) -> SessionOut:
    # The upload awaits between read and write, so the session may be gone.
    try:
        get_store().put(session_id, state)
    except SessionNotFoundError:
        raise HTTPException(status_code=404, detail="Session not found")
    return session_to_out(session_id, state)


@router.post("", response_model=SessionOut)
async def create_session():
    session_id, state = get_store().create()
    return session_to_out(session_id, state)


@router.get("/{session_id}", response_model=SessionOut)
async def get_session(session_id: str):
    return session_to_out(session_id, _get_state(session_id))


@router.delete("/{session_id}", response_model=SessionDeleted)
async def delete_session(session_id: str):
    try:
        get_store().delete(session_id)
    except SessionNotFoundError:
        raise HTTPException(status_code=404, detail="Session not found")
    return SessionDeleted(deleted=True)


@router.post("/{session_id}/upload", response_model=SessionOut)
async def upload_spreadsheet(session_id: str, file: UploadFile = File(...)):
    state = restart(_get_state(session_id))
    limit = get_settings().max_upload_bytes
    data = await file.read(limit + 1)
    if len(data) > limit:
        raise HTTPException(status_code=413, detail=f"File is larger than {limit} bytes")

    # Decoding runs on the event loop: it blocks other sessions but cannot interleave with them.
    try:
        rows = decode_spreadsheet(data, file.filename)
    except SpreadsheetDecodeError as exc:
        logger.warning(
            "Upload %r for session %s failed: %s (%r)", file.filename, session_id, exc, exc.__cause__
        )
        return _save(session_id, fail_load(state, str(exc)))

    exercises = parse_rows(rows)
    logger.info("Parsed %d exercises from %d rows of %r", len(exercises), len(rows), file.filename)
    return _save(session_id, load(state, exercises))


@router.put("/{session_id}/answer", response_model=SessionOut)
async def update_answer(session_id: str, payload: AnswerUpdate):
    return _save(session_id, set_answer(_get_state(session_id), payload.userAnswer))


@router.post("/{session_id}/intents/{intent}", response_model=SessionOut)
async def apply_intent(session_id: str, intent: Intent):
    return _save(session_id, dispatch(_get_state(session_id), intent))


@router.post("/{session_id}/keys", response_model=SessionOut)
async def apply_key(session_id: str, payload: KeyPress):
    return _save(session_id, press_key(_get_state(session_id), payload.key))
