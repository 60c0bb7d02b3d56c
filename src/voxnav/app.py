"""
voxnav/app.py

FastAPI application for the voice-command interpreter.

This module wires together:
- Logging configuration (file-based under logs/)
- CORS and a request-logging middleware
- The interpretation endpoint used by the front-end once speech capture
  produced a transcript, and a catalog listing for help screens
"""

from typing import List

from dotenv import load_dotenv, find_dotenv
from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from starlette.requests import Request

# Load environment
load_dotenv(find_dotenv(), override=False)

from voxnav import config
from voxnav.logging_config import setup_logging, get_logger
from voxnav.interpreter import VoiceCommandInterpreter
from voxnav.schemas.api_models import IntentOut, InterpretRequest, InterpretResponse

# Configure logging before creating the app
setup_logging()
logger = get_logger("voxnav.api")

app = FastAPI(title="VoxNav Voice Commands", version="1.0.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.state.interpreter = VoiceCommandInterpreter()


@app.middleware("http")
async def log_requests(request: Request, call_next):
    """
    Lightweight request logger.
    """
    logger.info(
        "HTTP %s %s from %s",
        request.method,
        request.url.path,
        request.client.host if request.client else "?",
    )
    response = await call_next(request)
    logger.info("HTTP %s %s -> %s", request.method, request.url.path, response.status_code)
    return response


@app.post("/api/voice/interpret", response_model=InterpretResponse)
async def interpret_transcript(body: InterpretRequest):
    """
    Interpret one transcript. A rejected transcript is a normal 200 response
    with ``accepted=false`` and no navigation.
    """
    interpreter: VoiceCommandInterpreter = app.state.interpreter
    try:
        result = interpreter.interpret(body.transcript)
    except Exception as e:
        logger.exception("Interpretation failed for transcript=%r: %s", body.transcript, e)
        raise HTTPException(status_code=500, detail="interpretation_failed")
    return result.to_response()


@app.get("/api/voice/intents", response_model=List[IntentOut])
async def list_intents():
    interpreter: VoiceCommandInterpreter = app.state.interpreter
    return [IntentOut(**intent.to_dict()) for intent in interpreter.catalog]


@app.get("/health")
async def health():
    return {"status": "healthy"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("voxnav.app:app", host=config.HOST, port=config.PORT, reload=False)
