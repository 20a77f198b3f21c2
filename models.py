from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Union


class Gender(str, Enum):
    WOMAN = "woman"
    MAN = "man"


class WeightStatus(str, Enum):
    LOOSE = "loose"
    GAIN = "gain"
    MAINTAIN = "maintain"


Number = Union[int, float, str]


@dataclass(frozen=True)
class MetricsInput:
    gender: Gender
    age: int
    height: float              # cm
    weight: Number             # kg, "70,5" or "70.5"
    activity_factor: Number    # 1.55 or "1.55,72"
    goal: Number               # kg, target or current weight


@dataclass(frozen=True)
class IdealWeight:
    devine: float
    robinson: float
    miller: float
    average: float


@dataclass(frozen=True)
class Calories:
    bmr: int
    maintain: int
    loose1: int
    loose2: int
    gain1: int
    gain2: int


@dataclass(frozen=True)
class WeightDifference:
    status: WeightStatus
    diff: float


@dataclass(frozen=True)
class MetricsResult:
    bmi: float
    ideal_weight: IdealWeight
    calories: Calories
    water_need: float          # liters
    weight_difference: WeightDifference
    calorie_deficit: int
    diet_duration_days: int
    diet_completion_date: date
    diet_completion_label: str  # "June 2 2027"
