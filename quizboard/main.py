import logging

from fastapi import FastAPI, UploadFile, File, HTTPException

from . import config
from .board import build_board
from .models import BoardResponse, BoardTextRequest, HealthResponse
from .normalize import decode_csv_bytes

logging.basicConfig(
    level=config.LOG_LEVEL,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
log = logging.getLogger(__name__)

app = FastAPI(
    title="quizboard",
    description="Turns a spreadsheet export of trivia clues into a fixed 6x5 quiz board",
    version="0.1.0",
)


def _board_response(text: str, source: str) -> BoardResponse:
    board = build_board(text)
    return BoardResponse(source=source, **board.model_dump())


@app.get("/health", response_model=HealthResponse)
def health():
    return {"ok": True}


@app.post("/board", response_model=BoardResponse)
async def board_from_upload(file: UploadFile = File(...)):
    if not (file.filename or "").lower().endswith(".csv"):
        raise HTTPException(status_code=422, detail="Only CSV files are supported")

    raw = await file.read()
    log.info("building board from upload %s (%d bytes)", file.filename, len(raw))
    return _board_response(decode_csv_bytes(raw), source=file.filename)


@app.post("/board/text", response_model=BoardResponse)
def board_from_text(body: BoardTextRequest):
    return _board_response(body.text, source="text")


@app.get("/board/default", response_model=BoardResponse)
def board_default():
    path = config.DEFAULT_CSV_PATH
    if not path.is_file():
        raise HTTPException(status_code=404, detail=f"Default CSV not found: {path.name}")

    log.info("building board from default csv %s", path)
    return _board_response(decode_csv_bytes(path.read_bytes()), source=path.name)
