"""
Operational records read from the document store.

Documents in the store are schema-less, so every record here treats its
fields as optional and normalises them when it is built. Alternative field
names used by older documents are accepted through alias choices.
"""

from typing import Any, Dict, List, Optional
from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

TBA = "TBA"


def _optional_text(value: Any) -> Optional[str]:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _optional_number(value: Any) -> Optional[float]:
    if value is None or isinstance(value, bool):
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


def _text_list(value: Any) -> List[str]:
    if isinstance(value, str):
        value = [value]
    if not isinstance(value, (list, tuple)):
        return []
    return [str(v).strip() for v in value if v is not None and str(v).strip()]


class _Record(BaseModel):
    """Base for store records."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True, frozen=True)

    id: str = Field(default="", validation_alias=AliasChoices("id", "_id"))

    @field_validator("id", mode="before")
    @classmethod
    def _coerce_id(cls, value: Any) -> str:
        return _optional_text(value) or ""

    @classmethod
    def from_document(cls, doc: Dict[str, Any]):
        """Build a record from a raw store document."""
        return cls.model_validate(doc if isinstance(doc, dict) else {})


class ScheduleRecord(_Record):
    """A theatre session on a given day."""

    date: str = ""
    theatre: str = Field(
        default=TBA,
        validation_alias=AliasChoices("theatre", "theatreName", "theatreId", "theatre_id"),
    )
    session_type: Optional[str] = Field(
        default=None, validation_alias=AliasChoices("sessionType", "session_type")
    )
    surgeon: Optional[str] = Field(
        default=None, validation_alias=AliasChoices("surgeon", "consultant")
    )
    specialty: Optional[str] = Field(
        default=None, validation_alias=AliasChoices("specialty", "specialtyName")
    )
    start_time: Optional[str] = Field(
        default=None, validation_alias=AliasChoices("startTime", "start_time", "scheduledTime")
    )
    end_time: Optional[str] = Field(
        default=None, validation_alias=AliasChoices("endTime", "end_time")
    )
    booked_minutes: Optional[float] = Field(
        default=None, validation_alias=AliasChoices("bookedMinutes", "booked_minutes")
    )
    utilization: Optional[float] = None
    status: Optional[str] = None
    issues: List[str] = Field(
        default_factory=list, validation_alias=AliasChoices("issues", "delayReason", "delay_reason")
    )

    @field_validator("date", mode="before")
    @classmethod
    def _coerce_date(cls, value: Any) -> str:
        return (_optional_text(value) or "")[:10]

    @field_validator("theatre", mode="before")
    @classmethod
    def _coerce_theatre(cls, value: Any) -> str:
        return _optional_text(value) or TBA

    @field_validator("session_type", "surgeon", "specialty", "start_time", "end_time", "status", mode="before")
    @classmethod
    def _coerce_text(cls, value: Any) -> Optional[str]:
        return _optional_text(value)

    @field_validator("booked_minutes", "utilization", mode="before")
    @classmethod
    def _coerce_number(cls, value: Any) -> Optional[float]:
        return _optional_number(value)

    @field_validator("issues", mode="before")
    @classmethod
    def _coerce_issues(cls, value: Any) -> List[str]:
        return _text_list(value)


class StaffRecord(_Record):
    """A member of theatre staff."""

    first_name: str = Field(default="", validation_alias=AliasChoices("firstName", "first_name"))
    last_name: str = Field(default="", validation_alias=AliasChoices("lastName", "last_name"))
    role: str = "Unknown"
    specialty: Optional[str] = None
    availability: Optional[str] = None
    skills: List[str] = Field(default_factory=list)
    experience: Optional[float] = None

    @field_validator("first_name", "last_name", mode="before")
    @classmethod
    def _coerce_name(cls, value: Any) -> str:
        return _optional_text(value) or ""

    @field_validator("role", mode="before")
    @classmethod
    def _coerce_role(cls, value: Any) -> str:
        return _optional_text(value) or "Unknown"

    @field_validator("specialty", "availability", mode="before")
    @classmethod
    def _coerce_text(cls, value: Any) -> Optional[str]:
        return _optional_text(value)

    @field_validator("skills", mode="before")
    @classmethod
    def _coerce_skills(cls, value: Any) -> List[str]:
        return _text_list(value)

    @field_validator("experience", mode="before")
    @classmethod
    def _coerce_number(cls, value: Any) -> Optional[float]:
        return _optional_number(value)

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()


class ProcedureRecord(_Record):
    """A procedure waiting to be scheduled."""

    name: str = Field(default="", validation_alias=AliasChoices("name", "procedureName", "procedure"))
    opcs_code: Optional[str] = Field(default=None, validation_alias=AliasChoices("opcsCode", "opcs_code"))
    specialty: Optional[str] = Field(
        default=None, validation_alias=AliasChoices("specialty", "specialtyName")
    )
    duration: Optional[float] = Field(
        default=None, validation_alias=AliasChoices("duration", "estimatedDuration")
    )
    complexity: Optional[str] = None
    priority: Optional[str] = None
    status: Optional[str] = None
    created_at: Optional[str] = Field(
        default=None, validation_alias=AliasChoices("createdAt", "created_at")
    )

    @field_validator("name", mode="before")
    @classmethod
    def _coerce_name(cls, value: Any) -> str:
        return _optional_text(value) or ""

    @field_validator("opcs_code", "specialty", "complexity", "priority", "status", "created_at", mode="before")
    @classmethod
    def _coerce_text(cls, value: Any) -> Optional[str]:
        return _optional_text(value)

    @field_validator("duration", mode="before")
    @classmethod
    def _coerce_number(cls, value: Any) -> Optional[float]:
        return _optional_number(value)


class TheatreRecord(_Record):
    """An operating theatre and what it is equipped for."""

    name: str = TBA
    capacity: Optional[float] = None
    equipment: List[str] = Field(default_factory=list)
    specialty: Optional[str] = None

    @field_validator("name", mode="before")
    @classmethod
    def _coerce_name(cls, value: Any) -> str:
        return _optional_text(value) or TBA

    @field_validator("capacity", mode="before")
    @classmethod
    def _coerce_number(cls, value: Any) -> Optional[float]:
        return _optional_number(value)

    @field_validator("equipment", mode="before")
    @classmethod
    def _coerce_equipment(cls, value: Any) -> List[str]:
        return _text_list(value)

    @field_validator("specialty", mode="before")
    @classmethod
    def _coerce_text(cls, value: Any) -> Optional[str]:
        return _optional_text(value)
