from app.validation.validator import validate

__all__ = ["validate"]
