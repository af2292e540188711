"""Output schema for the list command."""

from pydantic import BaseModel, Field

from ..BaseOutputSchema import BaseOutputSchema


class ResolverTypeInfo(BaseModel):
    """Description of one resolver type."""

    type: str
    description: str
    requires_base: bool


class ListOutput(BaseOutputSchema):
    """Available resolver types."""

    resolvers: list[ResolverTypeInfo] = Field(default_factory=list)
    count: int
    success: bool
