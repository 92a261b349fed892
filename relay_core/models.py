from pydantic import BaseModel, ConfigDict, Field, model_validator
from typing import Any, Dict

TICKET_FIELDS = (
    "short_description",
    "category",
    "subcategory",
    "urgency",
    "impact",
    "caller_id",
    "description",
    "cmdb_ci",
)

class IncidentSubmission(BaseModel):
    model_config = ConfigDict(frozen=True)

    short_description: str = Field("", description="Short summary of the incident")
    category: str = Field("", description="Incident category")
    subcategory: str = Field("", description="Incident subcategory")
    urgency: str = Field("", description="Urgency, passed through as text")
    impact: str = Field("", description="Impact, passed through as text")
    caller_id: str = Field("", description="sys_id of the caller")
    description: str = Field("", description="Long description")
    cmdb_ci: str = Field("", description="sys_id of the configuration item")

    username: str = Field("", description="Basic auth username")
    password: str = Field("", description="Basic auth password")
    apikey: str = Field("", description="ServiceNow API key")

    def ticket_payload(self) -> Dict[str, str]:
        """Fields sent to the incident table. Credentials are never included."""
        return {name: getattr(self, name) for name in TICKET_FIELDS}

class IncidentCreationResult(BaseModel):
    number: str

class IncidentRecord(BaseModel):
    number: str = ""

    @model_validator(mode="before")
    @classmethod
    def null_number_is_empty(cls, data: Any) -> Any:
        if isinstance(data, dict) and data.get("number") is None:
            return {**data, "number": ""}
        return data

class ServiceNowIncidentResponse(BaseModel):
    """
    Reply from the incident table API.
    JSON nulls decode like missing keys: the record ends up with an empty number.
    """
    result: IncidentRecord = Field(default_factory=IncidentRecord)

    @model_validator(mode="before")
    @classmethod
    def null_result_is_empty(cls, data: Any) -> Any:
        if data is None:
            return {}
        if isinstance(data, dict) and data.get("result") is None:
            return {**data, "result": {}}
        return data
