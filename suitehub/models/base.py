"""
Shared configuration for records persisted in the key-value store
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

class CamelModel(BaseModel):
    """Field names are camelCase on the wire, snake_case in Python"""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

class StoredRecord(CamelModel):
    """JSON record kept under a single store key"""

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True, exclude_none=True)

    @classmethod
    def from_json(cls, raw: str):
        return cls.model_validate_json(raw)
