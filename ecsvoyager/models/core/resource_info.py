"""Inventory record models returned by data providers."""

from pydantic import BaseModel


class ServiceRecord(BaseModel):
    """One row of the services list."""

    name: str
    status: str = "ACTIVE"
    desired_count: int = 0
    running_count: int = 0
    pending_count: int = 0
    launch_type: str = "FARGATE"
    task_definition: str = ""


class TaskRecord(BaseModel):
    """One row of the tasks list."""

    task_arn: str
    task_id: str
    status: str = "RUNNING"  # last status
    desired_status: str = "RUNNING"
    container_instance: str = "-"
    cpu: str = "-"
    memory: str = "-"
    launch_type: str = "FARGATE"


class TaskDefinitionRecord(BaseModel):
    """One row of the task definitions list."""

    arn: str
    family: str
    revision: int = 1
    status: str = "ACTIVE"
    cpu: str = "-"
    memory: str = "-"


class DescribeResult(BaseModel):
    """Both renderings of a described resource, built eagerly on fetch."""

    title: str
    formatted: str
    json_text: str
