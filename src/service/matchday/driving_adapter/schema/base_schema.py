from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """snake_case in Python, camelCase on the wire; builds from attrs entities via attributes"""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)
