"""GitHub error body models."""

import json
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from burr.transport import RawResponse


@dataclass
class ErrorDetail:
    """Structured error body returned by the GitHub API.

    See: https://docs.github.com/en/rest/using-the-rest-api/troubleshooting-the-rest-api
    """

    message: str | None = None  # Human-readable summary
    documentation_url: str | None = None  # Link to the relevant API docs
    errors: list[dict[str, Any]] | None = None  # Per-field errors (resource, field, code)

    # Any other members the API sent along
    extensions: dict[str, Any] | None = None

    @classmethod
    def from_response(cls, response: "RawResponse") -> "ErrorDetail | None":
        """Parse a GitHub error body from a raw response.

        Args:
            response: Raw transport response

        Returns:
            ErrorDetail object or None if the body is not a GitHub error object
        """
        if not response.content:
            return None

        try:
            data = json.loads(response.content)
        except (ValueError, TypeError):
            return None

        if not isinstance(data, dict):
            return None

        standard_fields = {"message", "documentation_url", "errors"}
        if not any(field in data for field in standard_fields):
            return None

        errors = data.get("errors")
        extensions = {k: v for k, v in data.items() if k not in standard_fields}

        return cls(
            message=data.get("message"),
            documentation_url=data.get("documentation_url"),
            errors=errors if isinstance(errors, list) else None,
            extensions=extensions if extensions else None,
        )

    def to_exception_message(self) -> str:
        """Convert the error body to an exception message."""
        lines = []

        if self.message:
            lines.append(self.message)

        for error in self.errors or []:
            if not isinstance(error, dict):
                lines.append(f"  - {error}")
                continue
            parts = [f"{key}={value}" for key, value in error.items()]
            lines.append(f"  - {', '.join(parts)}")

        if self.documentation_url:
            lines.append(f"Documentation: {self.documentation_url}")

        return "\n".join(lines) if lines else "Unknown API error"
