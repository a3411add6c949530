from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import logging
from dotenv import load_dotenv

from calculators.config import CORS_ORIGINS, LOG_LEVEL
from calculators.i18n import SUPPORTED_LOCALES
from calculators.routes import router as calculators_router

load_dotenv()

logging.basicConfig(level=getattr(logging, LOG_LEVEL.upper(), logging.INFO))
logging.info(f"App starting with locales {', '.join(SUPPORTED_LOCALES)}")

app = FastAPI(title="VistoFlow API")

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(calculators_router)


@app.get("/health", tags=["meta"], summary="Health check")
def health():
    return {"status": "ok"}


@app.get("/locales", tags=["meta"], summary="List supported locales")
def list_locales():
    return {"locales": list(SUPPORTED_LOCALES)}
