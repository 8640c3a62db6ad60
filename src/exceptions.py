from typing import Any, Dict, Optional


class NewsdeskError(Exception):
    status_code: int = 500

    def __init__(self, message: str, error_code: Optional[str] = None, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        return {"error": self.message}


class ValidationError(NewsdeskError):
    status_code = 400


class NewsNotFoundError(ValidationError):
    # Unknown ids are reported as 400, not 404.
    def __init__(self, news_id: int):
        super().__init__(
            message=f"news {news_id} not found",
            error_code="NEWS_NOT_FOUND",
            details={"news_id": news_id}
        )


class AuthenticationError(NewsdeskError):
    status_code = 401


class DatabaseError(NewsdeskError):
    status_code = 500
