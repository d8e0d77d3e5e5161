from .base import Strategy
from .wrapper import JSONWrapper, extract_json_object

__all__ = ["Strategy", "JSONWrapper", "extract_json_object"]
