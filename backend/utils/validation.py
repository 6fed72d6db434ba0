from typing import Optional
from exceptions import ValidationException

class InputValidator:
    
    @staticmethod
    def require_text(value: Optional[str], field: str, message: str) -> str:
        """Return ``value`` unchanged, or raise if it is blank after trimming."""
        if value is None or not str(value).strip():
            raise ValidationException(field, message)
        return value
    
    @staticmethod
    def require_present(value: Optional[str], field: str, message: str) -> str:
        """Return ``value`` unchanged, or raise if it is missing or empty."""
        if not value:
            raise ValidationException(field, message)
        return value
