"""
Failure Envelope: Engine Error Classification.

Every error the projection engine raises is a KnownError: the engine is pure
arithmetic over already-shaped data, so there is nothing transient to retry
and nothing it does not know about its own failures.

Error taxonomy:
- InvalidRarityError: rarity not present in the rarity table
- InvalidInputError: negative or out-of-range levels/counts, malformed entries
- UnknownStatError: stat name outside an entry kind's vocabulary

Designed "empty" outcomes (all-locked columns, unresolved aliases, empty
partitions) are NOT errors and never raise.

The API layer renders KnownError through ApiResponse.known_failure().
"""

from enum import Enum

from pydantic import BaseModel, Field


class FailureKind(str, Enum):
    """Classification of failure types."""

    # Input validation failures
    INVALID_INPUT = "invalid_input"
    INVALID_RARITY = "invalid_rarity"
    UNKNOWN_STAT = "unknown_stat"


class OutcomeType(str, Enum):
    """High-level outcome classification of a failure body."""

    KNOWN_FAILURE = "known_failure"


class FailureDetail(BaseModel):
    """Detailed information about a failure."""

    kind: FailureKind = Field(
        ...,
        description="Classification of the failure",
    )
    message: str = Field(
        ...,
        description="Explanation of what went wrong",
    )
    detail: str | None = Field(
        default=None,
        description="Additional technical detail (optional)",
    )
    suggestion: str | None = Field(
        default=None,
        description="Suggested action for the caller",
    )


class ApiResponse(BaseModel):
    """
    Response envelope for failed API calls.

    Successful endpoints return their own response models; failures are
    wrapped here so clients can branch on `outcome` and `failure.kind`.
    """

    outcome: OutcomeType = Field(
        ...,
        description="High-level classification of the result",
    )
    failure: FailureDetail = Field(
        ...,
        description="Failure details",
    )

    @classmethod
    def known_failure(
        cls,
        kind: FailureKind,
        message: str,
        detail: str | None = None,
        suggestion: str | None = None,
    ) -> "ApiResponse":
        """
        Create a known failure response.

        Use when the system knows exactly why the operation failed.
        """
        return cls(
            outcome=OutcomeType.KNOWN_FAILURE,
            failure=FailureDetail(
                kind=kind,
                message=message,
                detail=detail,
                suggestion=suggestion,
            ),
        )


class KnownError(Exception):
    """
    Base class for exceptions that represent known, explainable failures.

    Subclass this for errors where the system knows exactly what went wrong.
    """

    def __init__(
        self,
        kind: FailureKind,
        message: str,
        detail: str | None = None,
        suggestion: str | None = None,
        status_code: int = 400,
    ):
        self.kind = kind
        self.message = message
        self.detail = detail
        self.suggestion = suggestion
        self.status_code = status_code
        super().__init__(message)

    def to_response(self) -> ApiResponse:
        """Convert to an ApiResponse."""
        return ApiResponse.known_failure(
            kind=self.kind,
            message=self.message,
            detail=self.detail,
            suggestion=self.suggestion,
        )


class InvalidRarityError(KnownError):
    """Raised when a rarity is not a tier of the rarity table."""

    def __init__(self, rarity: object):
        self.rarity = rarity
        super().__init__(
            kind=FailureKind.INVALID_RARITY,
            message=f"Unknown rarity: {rarity!r}",
            suggestion="Use one of the rarity tiers 0 (Basic) through 5 (Special Edition).",
        )


class InvalidInputError(KnownError):
    """Raised for negative or out-of-range levels, card counts and entry shapes."""

    def __init__(self, message: str, detail: str | None = None):
        super().__init__(
            kind=FailureKind.INVALID_INPUT,
            message=message,
            detail=detail,
        )


class UnknownStatError(KnownError):
    """
    Raised when a stat name is outside an entry kind's vocabulary.

    This is a programming error in the caller. A stat that is merely absent
    from one level's map is NOT unknown; it projects to 0.
    """

    def __init__(self, stat_name: str, kind: str, vocabulary: tuple[str, ...]):
        self.stat_name = stat_name
        self.entry_kind = kind
        self.vocabulary = vocabulary
        super().__init__(
            kind=FailureKind.UNKNOWN_STAT,
            message=f"Unknown stat '{stat_name}' for {kind} entries",
            detail=f"Known stats: {', '.join(vocabulary)}",
            suggestion="Resolve external stat names with resolve_stat() first.",
        )
