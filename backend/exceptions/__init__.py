from typing import Optional, Dict, Any

class TruthGuardException(Exception):
    status_code: int = 500

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)
    
    def to_dict(self) -> Dict[str, Any]:
        return {
            "error": self.__class__.__name__,
            "message": self.message,
            "details": self.details
        }

    def to_response_body(self) -> Dict[str, Any]:
        """Body returned to HTTP callers: a single ``error`` field."""
        return {"error": self.message}

class ConfigError(TruthGuardException):
    def __init__(self, setting: str, message: Optional[str] = None):
        super().__init__(
            message or f"{setting} not configured on server.",
            {"setting": setting}
        )

class ValidationException(TruthGuardException):
    status_code = 400

    def __init__(self, field: str, message: str):
        super().__init__(message, {"field": field})

class SearchException(TruthGuardException):
    pass

class UpstreamError(SearchException):
    def __init__(self, status_code: int, body: str):
        super().__init__(body, {"upstream_status": status_code})
        self.status_code = status_code

class TransportError(SearchException):
    def __init__(self, reason: str):
        super().__init__(reason, {"reason": reason})

class AnalysisInProgress(TruthGuardException):
    status_code = 409

    def __init__(self):
        super().__init__("An analysis is already in progress.")
