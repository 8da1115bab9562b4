"""Schema Base — camelCase wire names, snake_case attributes.

Invariants:
    - Every API schema inherits CamelModel
    - Input accepts both camelCase and snake_case keys (populate_by_name)
    - Responses serialize with camelCase aliases (FastAPI response_model_by_alias default)
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, from_attributes=True,
    )
