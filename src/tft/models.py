"""Core data models for case facts and calculation results."""

from __future__ import annotations

import json
from datetime import date
from enum import Enum
from pathlib import Path
from typing import Any

import yaml
from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    ValidationInfo,
    computed_field,
    field_validator,
)

from tft.dates import parse_local_date
from tft.errors import InvalidInputError


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------

class CustodyStatus(str, Enum):
    DETAINED = "detained"
    NOT_DETAINED = "not-detained"


class ResetType(str, Enum):
    WAIVER = "waiver"
    FAILURE_TO_APPEAR = "failure-to-appear"
    NEW_TRIAL = "new-trial"
    APPELLATE_REVIEW = "appellate-review"
    COLLATERAL = "collateral"
    VENUE_CHANGE = "venue-change"
    DISQUALIFICATION = "disqualification"
    DEFERRED_PROSECUTION = "deferred-prosecution"


class ExclusionType(str, Enum):
    COMPETENCY = "competency"
    UNRELATED = "unrelated"
    CONTINUANCE = "continuance"
    DISMISSAL_REFILING = "dismissal-refiling"
    RELATED_CHARGE = "related-charge"
    FOREIGN_CUSTODY = "foreign-custody"
    JUVENILE = "juvenile"
    UNAVOIDABLE = "unavoidable"
    JUDGE_DISQUALIFICATION = "judge-disqualification"


def _required_date(value: Any, field_name: str | None) -> date:
    if value is None or (isinstance(value, str) and not value.strip()):
        raise InvalidInputError(f"{field_name} is required")
    return parse_local_date(value)


def _optional_date(value: Any) -> date | None:
    if value is None or (isinstance(value, str) and not value.strip()):
        return None
    return parse_local_date(value)


# ---------------------------------------------------------------------------
# Reset / Exclusion
# ---------------------------------------------------------------------------

class ResetEvent(BaseModel):
    """An event that restarts the clock at a new commencement date."""

    model_config = ConfigDict(frozen=True)

    id: int | None = None
    type: str = ""  # one of ResetType, kept open for display pass-through
    date: date
    notes: str = ""

    @field_validator("date", mode="before")
    @classmethod
    def parse_date(cls, value: Any, info: ValidationInfo) -> Any:
        return _required_date(value, info.field_name)


class ExclusionPeriod(BaseModel):
    """A span of days that does not count against the time limit."""

    model_config = ConfigDict(frozen=True)

    id: int | None = None
    type: str = ""  # one of ExclusionType
    start_date: date
    end_date: date
    notes: str = ""

    @field_validator("start_date", "end_date", mode="before")
    @classmethod
    def parse_dates(cls, value: Any, info: ValidationInfo) -> Any:
        return _required_date(value, info.field_name)


class CalculatedExclusionPeriod(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: str
    start_date: date
    end_date: date
    days: int


# ---------------------------------------------------------------------------
# Case facts (engine input)
# ---------------------------------------------------------------------------

class CaseFacts(BaseModel):
    model_config = ConfigDict(frozen=True)

    arraignment_date: date
    custody_status: CustodyStatus
    release_date: date | None = None

    resets: list[ResetEvent] = Field(default_factory=list)
    exclusions: list[ExclusionPeriod] = Field(default_factory=list)

    scheduled_trial_date: date | None = None
    use_cure_period: bool = False

    @field_validator("arraignment_date", mode="before")
    @classmethod
    def parse_arraignment_date(cls, value: Any, info: ValidationInfo) -> Any:
        return _required_date(value, info.field_name)

    @field_validator("release_date", "scheduled_trial_date", mode="before")
    @classmethod
    def parse_optional_dates(cls, value: Any) -> Any:
        return _optional_date(value)

    @classmethod
    def from_mapping(cls, data: dict[str, Any]) -> CaseFacts:
        """Build case facts from plain data, e.g. a decoded JSON or YAML file.

        Malformed date strings raise DateParseError; anything else pydantic
        rejects is reported as InvalidInputError.
        """
        if not isinstance(data, dict):
            raise InvalidInputError(f"Case data must be a mapping, got {type(data).__name__}")
        try:
            return cls.model_validate(data)
        except ValidationError as e:
            problems = "; ".join(
                f"{'.'.join(str(p) for p in err['loc']) or 'case'}: {err['msg']}"
                for err in e.errors()
            )
            raise InvalidInputError(problems) from e

    @classmethod
    def load(cls, path: Path) -> CaseFacts:
        """Load case facts from a .json, .yaml or .yml file."""
        text = Path(path).read_text()
        if Path(path).suffix.lower() == ".json":
            try:
                data = json.loads(text)
            except json.JSONDecodeError as e:
                raise InvalidInputError(f"{path}: {e}") from e
        else:
            try:
                data = yaml.safe_load(text)
            except yaml.YAMLError as e:
                raise InvalidInputError(f"{path}: {e}") from e
        return cls.from_mapping(data or {})


# ---------------------------------------------------------------------------
# Calculation result (engine output)
# ---------------------------------------------------------------------------

class CalculationResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    initial_commencement_date: date
    effective_commencement_date: date

    base_time_limit: int
    was_released: bool = False

    excluded_days: int = 0
    excluded_periods: list[CalculatedExclusionPeriod] = Field(default_factory=list)

    base_deadline: date
    thirty_day_rule_applied: bool = False
    final_deadline: date

    use_cure_period: bool = False
    cure_days: int = 0
    cure_deadline: date | None = None

    scheduled_trial_date: date | None = None
    is_timely: bool | None = None
    days_until_deadline: int | None = None

    resets: list[ResetEvent] = Field(default_factory=list)

    @computed_field
    @property
    def applicable_deadline(self) -> date:
        """Cure deadline when one was elected, otherwise the final deadline."""
        if self.use_cure_period and self.cure_deadline is not None:
            return self.cure_deadline
        return self.final_deadline
