from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

GREETING = "Hello from test.local!"

router = APIRouter()


@router.api_route(
    "/",
    methods=["GET", "HEAD"],
    response_class=PlainTextResponse,
    summary="Greeting",
)
async def greet() -> str:
    return GREETING
