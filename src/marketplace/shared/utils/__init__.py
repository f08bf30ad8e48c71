from .auth import get_caller_id
from .http_response import api_response
from .validators import to_decimal, to_decimal_or_none

__all__ = ["api_response", "get_caller_id", "to_decimal", "to_decimal_or_none"]
