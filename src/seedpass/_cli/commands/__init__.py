from .check import check
from .generate import generate
from .schema import schema

__all__ = ("check", "generate", "schema")
