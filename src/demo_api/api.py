from fastapi import FastAPI, APIRouter, HTTPException
import structlog

from cesar_cipher.config import CesarConfig
from cesar_cipher.errors import CesarError

from . import models

log = structlog.get_logger(
    processors=[
        structlog.processors.JSONRenderer(indent=2),
    ],
)

# Create the FastAPI app
app = FastAPI(title="Cesar Cipher Demo API")

# Create the router for API endpoints
router = APIRouter()


def config_from_request(req: models.EncryptRequest) -> CesarConfig:
    """ Apply the request overrides on top of the default configuration. """
    config = CesarConfig.default()
    if req.key_value is not None:
        config = config.key_value(req.key_value)
    if req.group_size is not None:
        config = config.group_size(req.group_size)
    if req.number_of_possibilities is not None:
        config = config.number_of_possibilities(req.number_of_possibilities)
    if req.index_digit_number is not None:
        config = config.index_digit_number(req.index_digit_number)
    if req.start_index is not None:
        config = config.start_index(req.start_index)
    return config


def build_encrypted_response(config: CesarConfig, word: str) -> models.EncryptResponse:
    """ Build a response with the ciphertext of the given word. """
    trace = config.trace_word(word)
    log.info(
        "encrypted",
        word=word,
        config=repr(config),
        groups=list(trace.shifted),
        ciphertext=trace.ciphertext,
    )
    return models.EncryptResponse(
        word=word,
        ciphertext=trace.ciphertext,
        groups=list(trace.shifted),
    )


@router.get("/demo1", response_model=models.EncryptResponse)
def demo1():
    """ Three letters under the default configuration. """
    return build_encrypted_response(CesarConfig.default(), "ABC")


@router.post("/encrypt", response_model=models.EncryptResponse)
def encrypt_api(req: models.EncryptRequest):
    """ Encrypt the given word and return the ciphertext. """
    config = config_from_request(req)
    try:
        return build_encrypted_response(config, req.word)
    except CesarError as e:
        log.warning("encryption rejected", word=req.word, error=str(e), error_type=type(e).__name__)
        raise HTTPException(status_code=400, detail=f"Encryption error: {e}")


# Include the router in the app (after all routes are defined)
app.include_router(router, prefix="/api")
