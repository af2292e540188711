"""Output schema for the resolve command."""

from pydantic import Field

from ..BaseOutputSchema import BaseOutputSchema


class ResolveOutput(BaseOutputSchema):
    """Result of resolving a single wikilink."""

    resolver: str | None = Field(..., description="Resolver type used, None if it could not be built")
    target: str = Field(..., description="Wikilink target")
    fragment: str = Field(..., description="Wikilink fragment without '#'")
    destination: str | None = Field(..., description="Resolved destination, None if there is none")
    plain_text: bool = Field(..., description="True when the link should be rendered as plain text")
    success: bool
