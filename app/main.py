"""FastAPI application entrypoint."""

from dotenv import load_dotenv
from fastapi import FastAPI, Request

from app.adapters.inbound.http.errors import register_exception_handlers
from app.adapters.inbound.http.routes import router
from app.infrastructure.logging.logger import log_http_request

# Load environment variables from .env file
load_dotenv()

app = FastAPI(
    title="Outbound Call Manager",
    description="Customers and outbound call attempts using Clean Architecture",
    version="0.1.0",
)

register_exception_handlers(app)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    response = await call_next(request)
    log_http_request(request.method, request.url.path, status_code=response.status_code)
    return response


app.include_router(router, prefix="/api/v1")
