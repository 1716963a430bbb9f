from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

router = APIRouter(tags=["health"])

BANNER = "🍿 PopcornPick Backend Running"

@router.get("/", response_class=PlainTextResponse)
def root():
    return BANNER

@router.get("/health")
def health():
    return {"status": "ok"}
