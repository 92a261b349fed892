import json
import logging
import sys
from typing import Callable

import requests
from requests.auth import AuthBase
from pydantic import ValidationError

from .auth import API_KEY_HEADER, AuthMode, select_auth_mode
from .config import RelayConfig
from .exceptions import (
    MissingCredentialsError,
    MissingTicketNumberError,
    RequestBuildError,
    ResponseDecodeError,
    TransportError,
)
from .models import IncidentCreationResult, IncidentSubmission, ServiceNowIncidentResponse

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    stream=sys.stdout,
)
logger = logging.getLogger("relay-core")


class NoAuth(AuthBase):
    """Leaves the request untouched, so requests does not fall back to ~/.netrc."""

    def __call__(self, r):
        return r


class IncidentClient:
    def __init__(self, config: RelayConfig, session_factory: Callable[[], requests.Session] = requests.Session):
        self.config = config
        # A fresh session per submission; cookies never outlive one request.
        self.session_factory = session_factory
        logger.info("IncidentClient initialized")

    def create_incident(self, submission: IncidentSubmission) -> IncidentCreationResult:
        """Create one incident from a form submission. Single attempt, no retries."""
        url = self.config.incident_url
        logger.info(f"Endpoint URL: {url}")

        headers = {
            "Accept": "application/json",
            "Content-Type": "application/json",
        }
        try:
            mode = select_auth_mode(submission)
        except MissingCredentialsError:
            logger.error("Error: Neither username/password nor API key provided")
            raise
        if mode is AuthMode.BASIC:
            logger.info("Using username and password")
            auth = (submission.username, submission.password)
        else:
            logger.info("Using API key")
            auth = NoAuth()
            headers[API_KEY_HEADER] = submission.apikey

        try:
            body = json.dumps(submission.ticket_payload())
        except (TypeError, ValueError) as e:
            logger.error(f"Error during JSON encoding: {str(e)}")
            raise RequestBuildError(f"Failed to encode payload: {str(e)}")

        try:
            with self.session_factory() as session:
                response = session.post(url, data=body, headers=headers, auth=auth)
        except requests.RequestException as e:
            logger.error(f"Error sending the request: {str(e)}")
            raise TransportError(f"Failed to reach {url}: {str(e)}")

        logger.info(f"Response Status: {response.status_code} {response.reason}")
        logger.info(f"Response Body: {response.text}")

        try:
            parsed = ServiceNowIncidentResponse.model_validate_json(response.content)
        except ValidationError as e:
            logger.error(f"Error parsing the response: {str(e)}")
            raise ResponseDecodeError(f"Failed to parse response: {str(e)}")

        number = parsed.result.number
        if not number:
            logger.error("Error: No incident number in the response")
            raise MissingTicketNumberError("No incident number in the response")

        logger.info(f"Incident created: {number}")
        return IncidentCreationResult(number=number)
