from pydantic import BaseModel, Field, field_validator

INCIDENT_TABLE_PATH = "/api/now/table/incident"

class RelayConfig(BaseModel):
    """
    Startup configuration for the relay.
    Built once and handed to the client and the web app.
    """
    hostname: str = Field(..., description="ServiceNow hostname. example: dev12345.service-now.com")
    listen_host: str = Field(default="localhost", description="Local address the form is served on")
    listen_port: int = Field(default=8080, description="Local port the form is served on")
    open_browser: bool = Field(default=True, description="Open the form in the default browser on startup")

    @field_validator("hostname")
    @classmethod
    def hostname_not_empty(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Hostname must not be empty")
        return v

    @property
    def incident_url(self) -> str:
        return f"https://{self.hostname}{INCIDENT_TABLE_PATH}"

    @property
    def local_url(self) -> str:
        return f"http://{self.listen_host}:{self.listen_port}"
