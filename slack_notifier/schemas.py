"""Pydantic schemas for the execution data handed over by Rundeck."""

from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class JobInfo(BaseModel):
    name: str
    href: str
    group: Optional[str] = None
    project: Optional[str] = None

    model_config = ConfigDict(extra="ignore", frozen=True)

    @property
    def display_name(self) -> str:
        if self.group:
            return f"{self.group} / {self.name}"
        return self.name


class ExecutionData(BaseModel):
    id: Union[int, str]
    href: str
    project: str
    job: JobInfo
    user: Optional[str] = None
    status: Optional[str] = None
    failed_node_list_string: Optional[str] = Field(None, alias="failedNodeListString")
    failed_node_list: Optional[list[Any]] = Field(None, alias="failedNodeList")

    model_config = ConfigDict(extra="ignore", frozen=True, populate_by_name=True)
