"""Domain policies package."""

from .doctor_filters import is_valid_doctor_name

__all__ = ["is_valid_doctor_name"]
