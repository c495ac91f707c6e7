"""Inventory record models."""

from ecsvoyager.models.core.resource_info import (
    DescribeResult,
    ServiceRecord,
    TaskDefinitionRecord,
    TaskRecord,
)

__all__ = ["DescribeResult", "ServiceRecord", "TaskDefinitionRecord", "TaskRecord"]
