"""Error codes and user-friendly messages.

Each entry carries:
- code: Unique identifier
- message: Short description returned to clients
- user_message: Friendlier explanation for UIs
- suggestion: Actionable guidance
- retry_allowed: Whether the request can be retried as-is
"""

ERROR_CATALOG: dict[str, dict] = {
    "AUTH_001": {
        "code": "AUTH_001",
        "message": "Not authorized, no token",
        "user_message": "You need to sign in to do that.",
        "suggestion": "Send an 'Authorization: Bearer <token>' header.",
        "retry_allowed": False,
    },
    "AUTH_002": {
        "code": "AUTH_002",
        "message": "Not authorized, token failed",
        "user_message": "Your session is invalid or has expired.",
        "suggestion": "Please log in again.",
        "retry_allowed": False,
    },
    "AUTH_003": {
        "code": "AUTH_003",
        "message": "Invalid email or password",
        "user_message": "The email or password you entered is incorrect.",
        "suggestion": "Check your credentials and try again.",
        "retry_allowed": True,
    },
    "AUTH_004": {
        "code": "AUTH_004",
        "message": "Please provide email and password",
        "user_message": "Email and password are both required.",
        "suggestion": "Fill in both fields and try again.",
        "retry_allowed": True,
    },
    "USER_001": {
        "code": "USER_001",
        "message": "User already exists",
        "user_message": "An account with this email already exists.",
        "suggestion": "Log in instead, or register with a different email.",
        "retry_allowed": False,
    },
    "USER_002": {
        "code": "USER_002",
        "message": "Email already in use",
        "user_message": "Another account already uses this email.",
        "suggestion": "Choose a different email address.",
        "retry_allowed": False,
    },
    "USER_003": {
        "code": "USER_003",
        "message": "User not found",
        "user_message": "We couldn't find your account.",
        "suggestion": "Please log in again.",
        "retry_allowed": False,
    },
    "REM_001": {
        "code": "REM_001",
        "message": "Remark not found",
        "user_message": "We couldn't find this remark.",
        "suggestion": "Please refresh and try again.",
        "retry_allowed": False,
    },
    "REM_002": {
        "code": "REM_002",
        "message": "Not authorized to access this remark",
        "user_message": "You don't have permission to change this remark.",
        "suggestion": "You can only change your own remarks.",
        "retry_allowed": False,
    },
    "REM_003": {
        "code": "REM_003",
        "message": "Invalid priority level",
        "user_message": "That priority isn't supported.",
        "suggestion": "Use one of: low, medium, high.",
        "retry_allowed": False,
    },
    "REM_004": {
        "code": "REM_004",
        "message": "Invalid date format",
        "user_message": "We couldn't understand that date.",
        "suggestion": "Use an ISO date such as 2024-03-15.",
        "retry_allowed": False,
    },
    "UPL_001": {
        "code": "UPL_001",
        "message": "Only image files are allowed!",
        "user_message": "Only image files can be used as a profile picture.",
        "suggestion": "Upload a PNG, JPEG, GIF or WebP image.",
        "retry_allowed": False,
    },
    "UPL_002": {
        "code": "UPL_002",
        "message": "File size too large. Maximum size is 5MB.",
        "user_message": "The image is too large.",
        "suggestion": "Upload an image of 5MB or less.",
        "retry_allowed": False,
    },
    "UPL_003": {
        "code": "UPL_003",
        "message": "Please upload an image file",
        "user_message": "No image was attached.",
        "suggestion": "Attach the image in the 'profileImage' form field.",
        "retry_allowed": True,
    },
    "UPL_004": {
        "code": "UPL_004",
        "message": "Failed to store uploaded image",
        "user_message": "We couldn't save your image.",
        "suggestion": "Please try again in a few moments.",
        "retry_allowed": True,
    },
    "VAL_001": {
        "code": "VAL_001",
        "message": "Invalid input data",
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


def get_user_message(error_code: str) -> str:
    return get_error(error_code)["user_message"]


def is_retryable(error_code: str) -> bool:
    return get_error(error_code)["retry_allowed"]
