"""Departments and the jobs they contain."""

from __future__ import annotations

from pydantic import Field

from cinevault.shared.models.base import TmdbModel


class TmdbDepartment(TmdbModel):
    department: str = ""
    job_list: list[str] = Field(default_factory=list)


class TmdbDepartments(TmdbModel):
    departments: list[TmdbDepartment] = Field(default_factory=list, alias="jobs")
