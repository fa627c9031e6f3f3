# app/schemas/weekly_report_schema.py

import re
from datetime import date, datetime
from enum import Enum
from typing import Annotated, Optional

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictBool,
    StringConstraints,
    field_validator,
    model_validator,
)
from pydantic.alias_generators import to_camel

NonEmptyStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]

# Campos controlados pelo servidor: descartados se vierem no payload
SERVER_FIELDS = ("id", "userId", "createdAt", "updatedAt")

_ISO_DATE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


class StudentClass(str, Enum):
    cp = "cp"
    ce1 = "ce1"
    ce2 = "ce2"
    cm1 = "cm1"
    cm2 = "cm2"


class DailyStatus(str, Enum):
    done = "done"
    in_progress = "in_progress"
    not_reached = "not_reached"
    unset = "unset"


class HomeStatus(str, Enum):
    realized = "realized"
    not_realized = "not_realized"


# Valores antigos do formulário (selects em francês)
LEGACY_DAILY_STATUS = {
    "": "unset",
    "reussi": "done",
    "en_cours": "in_progress",
    "non_atteint": "not_reached",
}
LEGACY_HOME_STATUS = {
    "": None,
    "realise": "realized",
    "non_realise": "not_realized",
}


def parse_iso_date(value) -> Optional[date]:
    """Converte 'AAAA-MM-DD' em date; devolve None se o valor não for uma data ISO."""
    if isinstance(value, date) and not isinstance(value, datetime):
        return value
    if not isinstance(value, str) or not _ISO_DATE.match(value):
        return None
    try:
        return date.fromisoformat(value)
    except ValueError:
        return None


class WireModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        extra="forbid",
        use_enum_values=True,
    )


# ==========================================================
# Competências: chaves fixas, todas presentes, padrão False
# ==========================================================
class AutonomySkills(WireModel):
    dressing: StrictBool = False
    washing: StrictBool = False
    toilet: StrictBool = False
    materials: StrictBool = False
    organizing: StrictBool = False


class FineMotorSkills(WireModel):
    pencil: StrictBool = False
    scissors: StrictBool = False
    buttons: StrictBool = False
    laces: StrictBool = False
    shapes: StrictBool = False
    writing: StrictBool = False


class CommunicationSkills(WireModel):
    needs: StrictBool = False
    questions: StrictBool = False
    initiate: StrictBool = False
    listening: StrictBool = False
    vocabulary: StrictBool = False
    instructions: StrictBool = False


class SocialSkills(WireModel):
    rules: StrictBool = False
    sharing: StrictBool = False
    waiting: StrictBool = False
    teamwork: StrictBool = False
    conflicts: StrictBool = False
    interactions: StrictBool = False


# ==========================================================
# Acompanhamento diário
# ==========================================================
class DayTracking(WireModel):
    objective: str = ""
    status: DailyStatus = Field(default=DailyStatus.unset, validate_default=True)
    remark: str = ""

    @field_validator("objective", "remark", mode="before")
    @classmethod
    def _null_as_empty(cls, value):
        return "" if value is None else value

    @field_validator("status", mode="before")
    @classmethod
    def _legacy_status(cls, value):
        if value is None:
            return DailyStatus.unset.value
        if isinstance(value, str) and value in LEGACY_DAILY_STATUS:
            return LEGACY_DAILY_STATUS[value]
        return value


class DailyTracking(WireModel):
    monday: DayTracking = Field(default_factory=DayTracking)
    tuesday: DayTracking = Field(default_factory=DayTracking)
    wednesday: DayTracking = Field(default_factory=DayTracking)
    thursday: DayTracking = Field(default_factory=DayTracking)
    friday: DayTracking = Field(default_factory=DayTracking)


# ==========================================================
# [Entrada] criação e atualização
# ==========================================================
class _ReportPayload(WireModel):
    @model_validator(mode="before")
    @classmethod
    def _strip_server_fields(cls, data):
        if isinstance(data, dict):
            return {key: value for key, value in data.items() if key not in SERVER_FIELDS}
        return data

    @field_validator("week_start_date", "week_end_date", mode="before", check_fields=False)
    @classmethod
    def _iso_date(cls, value):
        if value is None:
            return value
        parsed = parse_iso_date(value)
        if parsed is None:
            raise ValueError("data inválida, use o formato AAAA-MM-DD")
        return parsed

    @field_validator("home_status", mode="before", check_fields=False)
    @classmethod
    def _legacy_home_status(cls, value):
        if isinstance(value, str) and value in LEGACY_HOME_STATUS:
            return LEGACY_HOME_STATUS[value]
        return value


class WeeklyReportCreate(_ReportPayload):
    student_first_name: NonEmptyStr
    student_last_name: NonEmptyStr
    student_class: StudentClass
    observer_name: NonEmptyStr
    week_start_date: date
    week_end_date: date

    autonomy_skills: AutonomySkills = Field(default_factory=AutonomySkills)
    autonomy_comment: Optional[str] = None
    fine_motor_skills: FineMotorSkills = Field(default_factory=FineMotorSkills)
    fine_motor_comment: Optional[str] = None
    communication_skills: CommunicationSkills = Field(default_factory=CommunicationSkills)
    communication_comment: Optional[str] = None
    social_skills: SocialSkills = Field(default_factory=SocialSkills)
    social_comment: Optional[str] = None

    daily_tracking: DailyTracking = Field(default_factory=DailyTracking)

    home_objective_worked: StrictBool = False
    home_status: Optional[HomeStatus] = None
    family_comment: Optional[str] = None

    final_observation: Optional[str] = None
    free_comments: Optional[str] = None


# Campos que não aceitam null numa atualização
NON_NULLABLE_FIELDS = (
    "student_first_name",
    "student_last_name",
    "student_class",
    "observer_name",
    "week_start_date",
    "week_end_date",
    "autonomy_skills",
    "fine_motor_skills",
    "communication_skills",
    "social_skills",
    "daily_tracking",
    "home_objective_worked",
)


class WeeklyReportUpdate(_ReportPayload):
    """Todos os campos opcionais; só os enviados são aplicados."""

    student_first_name: Optional[NonEmptyStr] = None
    student_last_name: Optional[NonEmptyStr] = None
    student_class: Optional[StudentClass] = None
    observer_name: Optional[NonEmptyStr] = None
    week_start_date: Optional[date] = None
    week_end_date: Optional[date] = None

    autonomy_skills: Optional[AutonomySkills] = None
    autonomy_comment: Optional[str] = None
    fine_motor_skills: Optional[FineMotorSkills] = None
    fine_motor_comment: Optional[str] = None
    communication_skills: Optional[CommunicationSkills] = None
    communication_comment: Optional[str] = None
    social_skills: Optional[SocialSkills] = None
    social_comment: Optional[str] = None

    daily_tracking: Optional[DailyTracking] = None

    home_objective_worked: Optional[StrictBool] = None
    home_status: Optional[HomeStatus] = None
    family_comment: Optional[str] = None

    final_observation: Optional[str] = None
    free_comments: Optional[str] = None

    @field_validator(*NON_NULLABLE_FIELDS, mode="before")
    @classmethod
    def _reject_null(cls, value):
        if value is None:
            raise ValueError("campo não pode ser nulo")
        return value

    def changes(self) -> dict:
        """Campos enviados pelo cliente; competências e dias vêm completos (filtro só no primeiro nível)."""
        return {
            name: value
            for name, value in self.model_dump().items()
            if name in self.model_fields_set
        }


# ==========================================================
# [Saída] registro completo
# ==========================================================
class WeeklyReportRead(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )

    id: str
    student_first_name: str
    student_last_name: str
    student_class: str
    observer_name: str
    week_start_date: date
    week_end_date: date

    autonomy_skills: AutonomySkills
    autonomy_comment: Optional[str] = None
    fine_motor_skills: FineMotorSkills
    fine_motor_comment: Optional[str] = None
    communication_skills: CommunicationSkills
    communication_comment: Optional[str] = None
    social_skills: SocialSkills
    social_comment: Optional[str] = None

    daily_tracking: DailyTracking

    home_objective_worked: bool
    home_status: Optional[str] = None
    family_comment: Optional[str] = None

    final_observation: Optional[str] = None
    free_comments: Optional[str] = None

    user_id: str
    created_at: datetime
    updated_at: datetime
