"""
Error types and centralized error handling.
Record errors are raised by the store and turned into ActionResult by the
service layer; unexpected errors are logged with a reference id and shown
to the user as a safe message.
"""
import streamlit as st
import logging
import traceback
from datetime import datetime
from functools import wraps

logger = logging.getLogger("DeviceCare")

# User-safe error messages (hide technical details)
USER_SAFE_MESSAGES = {
    "validation": "Dữ liệu không hợp lệ. Vui lòng kiểm tra lại thông tin.",
    "conflict": "Thao tác xung đột với dữ liệu hiện có.",
    "not_found": "Không tìm thấy bản ghi được yêu cầu.",
    "default": "Đã xảy ra lỗi không mong muốn. Vui lòng thử lại."
}


# ============================================
# RECORD ERRORS
# ============================================
class RecordError(Exception):
    """Base class for errors raised by the record store."""

    error_type = "default"

    def __init__(self, message: str, entity: str = None, record_id: str = None):
        super().__init__(message)
        self.message = message
        self.entity = entity
        self.record_id = record_id


class RecordValidationError(RecordError):
    """A submitted record is missing required fields or has malformed values."""

    error_type = "validation"

    def __init__(self, message: str, entity: str = None, record_id: str = None, fields: list = None):
        super().__init__(message, entity, record_id)
        self.fields = fields or []


class DuplicateIdError(RecordError):
    error_type = "conflict"


class RecordNotFoundError(RecordError):
    error_type = "not_found"


class ActionResult:
    """Result of a create/update/delete as seen by the UI."""
    def __init__(self, success: bool, message: str, data=None):
        self.success = success
        self.message = message
        self.data = data

    def __bool__(self):
        return self.success

    def __repr__(self):
        return f"ActionResult(success={self.success!r}, message={self.message!r})"


# ============================================
# LOGGING HELPERS
# ============================================
def get_error_id() -> str:
    """Generate unique error ID for support reference."""
    import hashlib
    timestamp = datetime.now().isoformat()
    return hashlib.md5(timestamp.encode()).hexdigest()[:8].upper()

def log_error(error: Exception, context: str = "") -> str:
    """
    Log technical error details to file and return error ID for user reference.

    Args:
        error: The exception that occurred
        context: Additional context about what was being attempted

    Returns:
        Error ID for user reference
    """
    error_id = get_error_id()
    st.session_state.error_count = st.session_state.get("error_count", 0) + 1

    logger.error(
        f"ERROR_ID={error_id} | "
        f"CONTEXT={context} | "
        f"TYPE={type(error).__name__} | "
        f"MESSAGE={str(error)} | "
        f"TRACE={traceback.format_exc()}"
    )

    return error_id

def classify_error(error: Exception) -> str:
    """Classify error type to determine user-safe message."""
    if isinstance(error, RecordError):
        return error.error_type

    error_str = str(error).lower()

    if isinstance(error, (KeyError, LookupError)) or 'not found' in error_str:
        return "not_found"
    if isinstance(error, (ValueError, TypeError)) or any(x in error_str for x in ['invalid', 'required', 'missing']):
        return "validation"

    return "default"

def safe_execute(func=None, context: str = "", fallback=None, show_error: bool = True):
    """
    Decorator/function for safe execution with error handling.

    Can be used as decorator:
        @safe_execute(context="Rendering devices")
        def render(ctx): ...

    Or as wrapper:
        result = safe_execute(lambda: risky_operation(), context="Risky op", fallback={})()
    """
    def decorator(f):
        @wraps(f)
        def wrapper(*args, **kwargs):
            try:
                return f(*args, **kwargs)
            except Exception as e:
                error_id = log_error(e, context or f.__name__)
                error_type = classify_error(e)

                if show_error:
                    user_message = USER_SAFE_MESSAGES.get(error_type, USER_SAFE_MESSAGES["default"])
                    st.error(f"{user_message} (Mã lỗi: {error_id})")

                return fallback() if callable(fallback) else fallback
        return wrapper

    # Allow use as @safe_execute or @safe_execute(context="...")
    if func is not None:
        return decorator(func)
    return decorator
