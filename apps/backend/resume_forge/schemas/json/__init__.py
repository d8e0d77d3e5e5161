from typing import Any, Dict

from .structured_resume import SCHEMA as STRUCTURED_RESUME_SCHEMA

_SCHEMAS: Dict[str, Dict[str, Any]] = {
    "structured_resume": STRUCTURED_RESUME_SCHEMA,
}


class JSONSchemaFactory:
    def get(self, name: str) -> Dict[str, Any]:
        if name not in _SCHEMAS:
            raise KeyError(f"Unknown JSON schema: {name}")
        return _SCHEMAS[name]


json_schema_factory = JSONSchemaFactory()

__all__ = ["json_schema_factory"]
