from .client import IncidentClient
from .auth import AuthMode, API_KEY_HEADER, select_auth_mode
from .config import RelayConfig
from .models import IncidentSubmission, IncidentCreationResult, ServiceNowIncidentResponse
from .exceptions import (
    RelayError,
    MissingCredentialsError,
    RequestBuildError,
    TransportError,
    ResponseDecodeError,
    MissingTicketNumberError,
)

__all__ = ["IncidentClient", "AuthMode", "API_KEY_HEADER", "select_auth_mode", "RelayConfig", "IncidentSubmission", "IncidentCreationResult", "ServiceNowIncidentResponse", "RelayError", "MissingCredentialsError", "RequestBuildError", "TransportError", "ResponseDecodeError", "MissingTicketNumberError"]
