"""Shared errors and warnings fields for command outputs."""

from pydantic import BaseModel, Field


class BaseOutputSchema(BaseModel):
    """Fields shared by every command output.

    Failures and caveats are reported here rather than raised.
    """

    errors: list[str] = Field(default_factory=list, description="List of error messages, empty list if no errors")
    warnings: list[str] = Field(default_factory=list, description="List of warning messages, empty list if no warnings")
