from enum import Enum
from typing import Any, Dict
from pydantic import BaseModel, ConfigDict, field_serializer, field_validator
from pydantic.alias_generators import to_camel

class Stance(str, Enum):
    """Where a piece of evidence stands relative to the claim."""
    SUPPORTS = "supports"
    CONTRADICTS = "contradicts"
    NEUTRAL = "neutral"

    @property
    def supports(self) -> bool:
        return self is Stance.SUPPORTS

    @property
    def contradicts(self) -> bool:
        return self is Stance.CONTRADICTS

    def to_flags(self) -> Dict[str, bool]:
        """Front-end shape: ``{"supports": true}``, ``{"contradicts": true}`` or ``{}``."""
        if self is Stance.NEUTRAL:
            return {}
        return {self.value: True}

    @classmethod
    def from_flags(cls, flags: Dict[str, Any]) -> "Stance":
        supports = bool(flags.get("supports"))
        contradicts = bool(flags.get("contradicts"))
        if supports and contradicts:
            raise ValueError("stance cannot both support and contradict")
        if supports:
            return cls.SUPPORTS
        if contradicts:
            return cls.CONTRADICTS
        return cls.NEUTRAL

class WireModel(BaseModel):
    """Immutable model serialised with camelCase keys."""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

class Credibility(WireModel):
    is_credible: bool = False
    type: str = "unknown"
    domain: str = ""

class Evidence(WireModel):
    title: str
    snippet: str
    link: str
    credibility: Credibility = Credibility()
    stance: Stance = Stance.NEUTRAL

    @field_validator("stance", mode="before")
    @classmethod
    def parse_stance_flags(cls, v):
        if isinstance(v, dict):
            return Stance.from_flags(v)
        return v

    @field_serializer("stance")
    def serialize_stance(self, stance: Stance) -> Dict[str, bool]:
        return stance.to_flags()
