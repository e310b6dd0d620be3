"""
Error taxonomy for the movie lookup and translation pipeline.

Each error carries the HTTP status the API boundary should answer with and a
message that is safe to show to the user.
"""
from __future__ import annotations


class MoviePlotsError(RuntimeError):
    status_code: int = 500
    default_message: str = "Internal Server Error"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class MovieQueryValidationError(MoviePlotsError):
    """The user-supplied movie name violates the length/format rules."""

    status_code = 400
    default_message = "name required, minimum 2 characters"


class MovieNotFoundError(MoviePlotsError):
    """OMDB answered, but reported that no movie matches the name."""

    status_code = 404
    default_message = "Movie not found"


class MovieLookupTimeoutError(MoviePlotsError):
    status_code = 500
    default_message = "Timed out while looking up the movie. Please try again."


class UpstreamUnavailableError(MoviePlotsError):
    """
    A provider could not be reached or answered with a non-2xx status.

    `provider` is "omdb" or "translation"; both collapse into the same
    user-facing category, the tag is kept for logs and callers that care.
    `detail` may hold the transport error text (request URL included) and is
    for logging only.
    """

    status_code = 500
    default_message = "Upstream service unavailable"

    def __init__(
        self,
        message: str | None = None,
        *,
        provider: str,
        upstream_status: int | None = None,
        body_snippet: str | None = None,
        detail: str | None = None,
    ) -> None:
        super().__init__(message)
        self.provider = provider
        self.detail = detail
        self.upstream_status = upstream_status
        self.body_snippet = body_snippet


class InternalPipelineError(MoviePlotsError):
    """
    Unexpected failure (bad JSON, unexpected payload shape).

    `message` stays generic; the detail is kept on `detail` for logging only.
    """

    status_code = 500

    def __init__(self, detail: str) -> None:
        super().__init__(None)
        self.detail = detail
