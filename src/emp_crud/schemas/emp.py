# src/emp_crud/schemas/emp.py
from __future__ import annotations

from datetime import date, datetime
from typing import Annotated, Optional

from pydantic import AfterValidator, BaseModel, ConfigDict, field_validator

# Code tables for the SMALLINT columns emp.gender / emp.job
GENDER_VALUES = {1: "male", 2: "female"}
JOB_VALUES = {
    1: "head teacher",
    2: "lecturer",
    3: "student affairs lead",
    4: "academic lead",
    5: "consultant",
}


def _check_gender(v: Optional[int]) -> Optional[int]:
    if v is not None and v not in GENDER_VALUES:
        raise ValueError(f"gender must be one of {tuple(GENDER_VALUES)}")
    return v


def _check_job(v: Optional[int]) -> Optional[int]:
    if v is not None and v not in JOB_VALUES:
        raise ValueError(f"job must be one of {tuple(JOB_VALUES)}")
    return v


RequiredGender = Annotated[int, AfterValidator(_check_gender)]
GenderCode = Annotated[Optional[int], AfterValidator(_check_gender)]
JobCode = Annotated[Optional[int], AfterValidator(_check_job)]


class EmpCreate(BaseModel):
    username: str
    name: str
    gender: RequiredGender
    image: Optional[str] = None
    job: JobCode = None
    entrydate: Optional[date] = None
    dept_id: Optional[int] = None

    @field_validator("username", "name")
    @classmethod
    def not_blank(cls, v: str) -> str:
        v = (v or "").strip()
        if not v:
            raise ValueError("must not be blank")
        return v


class EmpUpdate(BaseModel):
    """
    Partial update: every field is optional and only the ones that are set
    (not None) end up in the UPDATE statement.
    """
    id: Optional[int] = None
    username: Optional[str] = None
    name: Optional[str] = None
    gender: GenderCode = None
    image: Optional[str] = None
    job: JobCode = None
    entrydate: Optional[date] = None
    dept_id: Optional[int] = None

    @field_validator("username", "name")
    @classmethod
    def strip_text(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return None
        v = v.strip()
        if not v:
            raise ValueError("must not be blank")
        return v


class EmpOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    username: str
    name: str
    gender: int
    image: Optional[str] = None
    job: Optional[int] = None
    entrydate: Optional[date] = None
    dept_id: Optional[int] = None
    create_time: datetime
    update_time: datetime
