"""Error codes and user-friendly messages.

This module defines the error catalog for the finance tracker API.
Each error has:
- code: Unique identifier
- message: Technical description (for logs)
- user_message: User-friendly explanation
- suggestion: Actionable guidance for the user
- retry_allowed: Whether the error is retryable
"""

ERROR_CATALOG: dict[str, dict] = {
    # Users / authentication
    "USR_001": {
        "code": "USR_001",
        "message": "User with this email already exists",
        "user_message": "This email is already registered.",
        "suggestion": "Log in instead, or register with a different email.",
        "retry_allowed": False,
    },
    "USR_002": {
        "code": "USR_002",
        "message": "Incorrect email or password",
        "user_message": "Incorrect email or password.",
        "suggestion": "Check your credentials and try again.",
        "retry_allowed": True,
    },
    # Categories
    "CAT_001": {
        "code": "CAT_001",
        "message": "Category not found",
        "user_message": "We couldn't find this category.",
        "suggestion": "Please check the category ID and try again.",
        "retry_allowed": False,
    },
    "CAT_002": {
        "code": "CAT_002",
        "message": "This category already exists",
        "user_message": "You already have a category with this title.",
        "suggestion": "Choose a different title.",
        "retry_allowed": False,
    },
    # Transactions
    "TXN_001": {
        "code": "TXN_001",
        "message": "Transaction not found",
        "user_message": "We couldn't find this transaction.",
        "suggestion": "Please refresh and try again.",
        "retry_allowed": False,
    },
    "TXN_002": {
        "code": "TXN_002",
        "message": "Transaction could not be saved",
        "user_message": "Something went wrong while saving the transaction.",
        "suggestion": "Please try again.",
        "retry_allowed": True,
    },
    "TXN_003": {
        "code": "TXN_003",
        "message": "Category does not belong to the transaction owner",
        "user_message": "That category isn't available.",
        "suggestion": "Choose one of your own categories.",
        "retry_allowed": False,
    },
    # Ownership checks
    "OWN_001": {
        "code": "OWN_001",
        "message": "Unsupported resource type",
        "user_message": "This kind of resource doesn't exist.",
        "suggestion": "Use 'transaction' or 'category'.",
        "retry_allowed": False,
    },
    "OWN_002": {
        "code": "OWN_002",
        "message": "Entity not found",
        "user_message": "Something went wrong with this request.",
        "suggestion": "Check the ID and make sure the record is yours.",
        "retry_allowed": False,
    },
    "OWN_003": {
        "code": "OWN_003",
        "message": "Caller is not the author of the entity",
        "user_message": "Something went wrong with this request.",
        "suggestion": "Check the ID and make sure the record is yours.",
        "retry_allowed": False,
    },
    # Generic
    "VAL_001": {
        "code": "VAL_001",
        "message": "Request data failed validation",
        "user_message": "Invalid input data",
        "suggestion": "Please check your input and try again",
        "retry_allowed": True,
    },
    "DB_001": {
        "code": "DB_001",
        "message": "Database operation failed",
        "user_message": "A database error occurred",
        "suggestion": "Please try again later",
        "retry_allowed": True,
    },
    "DB_002": {
        "code": "DB_002",
        "message": "Resource already exists",
        "user_message": "This record already exists",
        "suggestion": "Please check if the record was already created",
        "retry_allowed": False,
    },
    "SYS_001": {
        "code": "SYS_001",
        "message": "Internal server error",
        "user_message": "An unexpected error occurred",
        "suggestion": "Please try again later or contact support",
        "retry_allowed": True,
    },
}


def get_error(error_code: str) -> dict:
    """Get error definition by code.

    Unknown codes resolve to a generic definition instead of raising.

    Args:
        error_code: Error code from the catalog

    Returns:
        Dict with error details
    """
    if error_code not in ERROR_CATALOG:
        return {
            "code": "UNKNOWN",
            "message": f"Unknown error code: {error_code}",
            "user_message": "An unexpected error occurred.",
            "suggestion": "Please try again. Contact support if the problem persists.",
            "retry_allowed": True,
        }
    return ERROR_CATALOG[error_code]


def error_body(error_code: str, message: str | None = None) -> dict:
    """Build the JSON body returned to clients for an error code."""
    error_info = get_error(error_code)
    return {
        "error_code": error_code,
        "message": message or error_info["message"],
        "user_message": error_info["user_message"],
        "suggestion": error_info["suggestion"],
        "retry_allowed": error_info["retry_allowed"],
    }
