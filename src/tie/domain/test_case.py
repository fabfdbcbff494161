from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, JsonValue, field_validator
from pydantic.alias_generators import to_camel

from tie.util.json_util import ensure_json_shaped


class TestCase(BaseModel):
    """A single input run against the student's code, with the outputs accepted for it."""

    __test__ = False  # not a pytest test class

    input: JsonValue = Field(description="The input passed to the student's code.")
    allowed_outputs: List[JsonValue] = Field(
        default_factory=list,
        description="Outputs that count as correct for this input.",
    )
    tag: Optional[str] = Field(None, examples=["edge_case"])

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, frozen=True
    )

    @field_validator("input", "allowed_outputs", mode="before")
    @classmethod
    def _check_json_shaped(cls, v: Any) -> Any:
        return ensure_json_shaped(v)

    def matches_output(self, output: Any) -> bool:
        return any(output == allowed for allowed in self.allowed_outputs)
