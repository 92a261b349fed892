import logging
from typing import Optional

from fastapi import Depends, FastAPI, Form, Request, status
from fastapi.responses import HTMLResponse, PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from relay_core import IncidentClient, IncidentSubmission, RelayConfig, RelayError
from .form import render_form

logger = logging.getLogger("relay-web")


def incident_form(
    short_description: str = Form(""),
    category: str = Form(""),
    subcategory: str = Form(""),
    urgency: str = Form(""),
    impact: str = Form(""),
    caller_id: str = Form(""),
    description: str = Form(""),
    cmdb_ci: str = Form(""),
    username: str = Form(""),
    password: str = Form(""),
    apikey: str = Form(""),
) -> IncidentSubmission:
    return IncidentSubmission(
        short_description=short_description,
        category=category,
        subcategory=subcategory,
        urgency=urgency,
        impact=impact,
        caller_id=caller_id,
        description=description,
        cmdb_ci=cmdb_ci,
        username=username,
        password=password,
        apikey=apikey,
    )


def create_app(config: RelayConfig, client: Optional[IncidentClient] = None) -> FastAPI:
    """Build the relay app around one configuration and one outbound client."""
    client = client or IncidentClient(config)

    app = FastAPI(
        title="Incident Relay",
        description="Local form that creates ServiceNow incidents.",
        version="0.1.0",
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.state.config = config
    app.state.client = client

    @app.exception_handler(RelayError)
    async def relay_error_handler(request: Request, exc: RelayError):
        logger.error(f"{type(exc).__name__}: {str(exc)}")
        return PlainTextResponse(exc.user_message, status_code=exc.status_code)

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        detail = "Method not allowed" if exc.status_code == status.HTTP_405_METHOD_NOT_ALLOWED else str(exc.detail)
        return PlainTextResponse(detail, status_code=exc.status_code, headers=getattr(exc, "headers", None))

    @app.get("/", response_class=HTMLResponse)
    async def index():
        return HTMLResponse(render_form())

    @app.post("/submit", response_class=PlainTextResponse)
    def submit(submission: IncidentSubmission = Depends(incident_form)):
        # Sync handler: runs in the threadpool, one worker per request.
        result = app.state.client.create_incident(submission)
        return PlainTextResponse(f"Incident was successfully created: {result.number}")

    return app
