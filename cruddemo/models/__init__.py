from cruddemo.models.student import Student

__all__ = ["Student"]
