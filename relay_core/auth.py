from enum import Enum

from .exceptions import MissingCredentialsError
from .models import IncidentSubmission

API_KEY_HEADER = "X-sn-apikey"

class AuthMode(Enum):
    BASIC = "basic"
    API_KEY = "api_key"


def select_auth_mode(submission: IncidentSubmission) -> AuthMode:
    """Pick the authentication mode for a submission.

    Username and password win over the API key; both halves must be set.
    """
    if submission.username and submission.password:
        return AuthMode.BASIC
    if submission.apikey:
        return AuthMode.API_KEY
    raise MissingCredentialsError("Neither username/password nor API key provided")
