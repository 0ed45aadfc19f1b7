from collections.abc import Mapping
from typing import Annotated, Any, ClassVar, Self

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
from pydantic.json_schema import SkipJsonSchema

from google_search_mcp.models.errors import InvalidSearchArgumentsError

DEFAULT_NUM_RESULTS = 5
MAX_NUM_RESULTS = 10
REGION_CODE_LENGTH = 2

NO_RESULTS_TEXT = "No results found."

COUNTRY_DESCRIPTION = (
    "Region for localized results. Use 2-letter ISO 3166-1 country codes "
    "(e.g., 'us' for United States, 'gb' for United Kingdom, 'au' for Australia)"
)


def region_code(country: str | None) -> str | None:
    """Return the country when it looks like a 2-letter region code, otherwise None.

    Other values are accepted by the arguments schema but ignored when searching and formatting.
    """
    if country and len(country) == REGION_CODE_LENGTH:
        return country

    return None


class SearchArguments(BaseModel):
    """The arguments accepted by the `search` tool."""

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True, populate_by_name=True)

    query: Annotated[str, Field(min_length=1, description="The search query")]
    num_results: Annotated[
        int,
        Field(
            alias="numResults",
            ge=1,
            le=MAX_NUM_RESULTS,
            description=f"Number of results to return (max {MAX_NUM_RESULTS})",
        ),
    ] = DEFAULT_NUM_RESULTS
    country: Annotated[str | SkipJsonSchema[None], Field(description=COUNTRY_DESCRIPTION)] = None

    @field_validator("num_results", mode="before")
    @classmethod
    def only_numbers(cls, value: Any) -> Any:
        # Whole-number floats such as 3.0 are coerced to int; booleans and numeric strings are not numbers.
        if isinstance(value, bool | str):
            msg = "Input should be a number"
            raise ValueError(msg)

        return value

    @classmethod
    def from_arguments(cls, arguments: Mapping[str, Any] | None) -> Self:
        """Validate untrusted tool arguments, reporting every invalid field at once."""
        try:
            return cls.model_validate(arguments)
        except ValidationError as e:
            violations = [f"{'.'.join(str(part) for part in error['loc']) or 'arguments'}: {error['msg']}" for error in e.errors()]
            raise InvalidSearchArgumentsError(violations) from e

    @classmethod
    def tool_parameters(cls) -> dict[str, Any]:
        return cls.model_json_schema(by_alias=True)


class SearchResult(BaseModel):
    title: str | None = None
    url: str | None = None
    snippet: str | None = None

    def to_text(self, position: int) -> str:
        return "\n".join(
            [
                f"Result {position}:",
                f"Title: {self.title or 'No title'}",
                f"URL: {self.url or 'No URL'}",
                f"Description: {self.snippet or 'No description'}",
                "---",
            ]
        )


class SearchResponse(BaseModel):
    items: list[SearchResult] | None = None

    def to_text(self, country: str | None = None) -> str:
        """Render the results as numbered blocks, in the order the provider returned them."""
        if not self.items:
            return NO_RESULTS_TEXT

        header = ""
        if region := region_code(country):
            header = f"Search results for region: {region.upper()}\n\n"

        return header + "\n\n".join(item.to_text(position) for position, item in enumerate(self.items, start=1))
