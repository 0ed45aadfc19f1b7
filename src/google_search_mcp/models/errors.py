from fastmcp.exceptions import ToolError


class GoogleSearchMCPError(Exception):
    pass


class ConfigurationError(GoogleSearchMCPError):
    """Required configuration is missing or empty."""

    variables: list[str]

    def __init__(self, variables: list[str]):
        self.variables = variables
        super().__init__(f"Missing or empty environment variables: {', '.join(variables)}")


class GoogleSearchAPIError(GoogleSearchMCPError):
    """The Custom Search API answered with an error status."""

    status: int

    def __init__(self, status: int, message: str):
        self.status = status
        super().__init__(message)


class InvalidSearchArgumentsError(ToolError):
    def __init__(self, violations: list[str]):
        self.violations = violations
        super().__init__(f"Invalid arguments: {', '.join(violations)}")
