import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import HTMLResponse, JSONResponse

from .config.settings import settings
from .exceptions import MemberScrapeError
from .middleware.request_logging import RequestLoggingMiddleware
from .routes import members
from .schemas import ErrorResponse, HealthResponse
from .utils.logging import configure_logging

app = FastAPI(
    title="OMUSP Members API",
    description="Serves the OMUSP member list scraped from omusp.jp",
    version="1.0.0",
)

app.add_middleware(RequestLoggingMiddleware)

app.include_router(members.router, tags=["Members"])


@app.exception_handler(MemberScrapeError)
async def member_scrape_error_handler(request: Request, exc: MemberScrapeError):
    cause = exc.__cause__ or exc.cause
    request.state.error = str(cause or exc)
    return JSONResponse(
        status_code=500,
        content=ErrorResponse(error=str(exc)).model_dump(by_alias=True),
    )


@app.get("/health", response_model=HealthResponse, tags=["Health Check"])
def health_check():
    """
    Health check endpoint. Never contacts the upstream site.
    """
    return HealthResponse()


@app.get("/", response_class=HTMLResponse)
def read_root():
    return "Hello, Azure Container Apps!"


def run():
    configure_logging(settings.LOG_LEVEL)
    # RequestLoggingMiddleware already writes one line per request
    uvicorn.run(app, host=settings.HOST, port=settings.PORT, log_config=None, access_log=False)


if __name__ == "__main__":
    run()
