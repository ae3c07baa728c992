"""Models shared by the behavior and transaction scorers."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """snake_case in Python, camelCase on the wire."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    def to_wire(self) -> dict:
        return self.model_dump(mode="json", by_alias=True)


class FactorResult(BaseModel):
    """Outcome of one weighted risk factor."""

    factor_id: str
    score: float = 0.0
    weight: float = 0.0
    # behavior flag or transaction reason code, set only when the factor fired
    label: str | None = None
    details: str = ""

    @property
    def triggered(self) -> bool:
        return self.score > 0

    @property
    def contribution(self) -> float:
        return self.score * self.weight
