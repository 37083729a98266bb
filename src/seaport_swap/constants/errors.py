"""Error codes and messages used in the swap system."""


class ErrorCodes:
    """Error codes for API responses and submission failures."""

    NO_ACCOUNT = "NO_ACCOUNT"
    USER_REJECTED = "USER_REJECTED"
    PROTOCOL_ERROR = "PROTOCOL_ERROR"
    PERSISTENCE_FAILED = "PERSISTENCE_FAILED"
    CURRENCY_MODE_CONFLICT = "CURRENCY_MODE_CONFLICT"
    SUBMISSION_IN_PROGRESS = "SUBMISSION_IN_PROGRESS"
    DUPLICATE_RECORD = "DUPLICATE_RECORD"
    RECORD_NOT_FOUND = "RECORD_NOT_FOUND"
    INTERNAL_ERROR = "INTERNAL_ERROR"


class ErrorMessages:
    """Error messages for user responses."""

    NO_ACCOUNT = "No connected account address found"
    RECORD_NOT_FOUND = "Order record not found"

    @staticmethod
    def format_duplicate_record(record_id: str) -> str:
        """Format duplicate record message."""
        return f"Order record already exists: {record_id}"

    @staticmethod
    def format_rejected(action_type: str) -> str:
        """Format user rejection message."""
        return f"User rejected {action_type} action"
