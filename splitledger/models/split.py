"""
Split rules - how an expense total is divided among its participants.

A rule is a tagged union discriminated on ``kind``:

- EqualSplit: everyone pays the same, leftover cents go to the first
  participants in list order
- ExactSplit: explicit cents per participant
- PercentageSplit: one percentage per participant, summing to 100
- SharesSplit: one weight per participant, allocated proportionally

Percentages and weights are positional: ``percentages[i]`` belongs to
``participants[i]``.
"""

from decimal import Decimal
from enum import Enum
from typing import Annotated, Dict, List, Literal, Union

from pydantic import BaseModel, Field


class SplitKind(str, Enum):
    EQUAL = "equal"
    EXACT = "exact"
    PERCENTAGE = "percentage"
    SHARES = "shares"


class EqualSplit(BaseModel):
    kind: Literal["equal"] = "equal"


class ExactSplit(BaseModel):
    kind: Literal["exact"] = "exact"
    amounts: Dict[str, int]  # participant -> cents


class PercentageSplit(BaseModel):
    kind: Literal["percentage"] = "percentage"
    percentages: List[Decimal]


class SharesSplit(BaseModel):
    kind: Literal["shares"] = "shares"
    weights: List[Decimal]


SplitRule = Annotated[
    Union[EqualSplit, ExactSplit, PercentageSplit, SharesSplit],
    Field(discriminator="kind"),
]
