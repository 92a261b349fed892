class RelayError(Exception):
    """Base exception for incident relay errors."""
    status_code = 500
    user_message = "Internal server error"

class MissingCredentialsError(RelayError):
    """Raised when neither username/password nor an API key is provided."""
    status_code = 400
    user_message = "Authentication data missing"

class RequestBuildError(RelayError):
    """Raised when the outbound request cannot be built."""
    user_message = "Error creating the request"

class TransportError(RelayError):
    """Raised when the ticketing service cannot be reached."""
    user_message = "Error sending the request"

class ResponseDecodeError(RelayError):
    """Raised when the ticketing service response is not the expected JSON."""
    user_message = "Error processing the response"

class MissingTicketNumberError(RelayError):
    """Raised when the response carries no incident number."""
    user_message = "Error: Incident number missing in ServiceNow response"
