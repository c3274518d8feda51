"""Welcome endpoint served at the root path."""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

router = APIRouter()

WELCOME_MESSAGE = "Welcome to the product API! Use /api/products for product operations"


@router.get("/", response_class=PlainTextResponse)
async def welcome() -> str:
    return WELCOME_MESSAGE
