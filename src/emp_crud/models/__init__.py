# src/emp_crud/models/__init__.py
from .emp import Emp

__all__ = ["Emp"]
