import logging
import math
import re
from datetime import date, timedelta
from decimal import ROUND_HALF_UP, Decimal
from typing import Optional

from constants import (
    BASE_HEIGHT_IN,
    BMR_OFFSET,
    CALORIE_STEP,
    DEFICIT_SHARE,
    FL_OZ_TO_LITER,
    IDEAL_WEIGHT_COEFFICIENTS,
    INCH_TO_CM,
    KCAL_PER_LB,
    LB_TO_KG,
    MONTHS,
    WATER_OZ_PER_LB,
)
from models import (
    Calories,
    Gender,
    IdealWeight,
    MetricsInput,
    MetricsResult,
    Number,
    WeightDifference,
    WeightStatus,
)

logger = logging.getLogger(__name__)

# "1.55,72" -> "1.55"
_TRAILING_ANNOTATION = re.compile(r",[0-9]+$")
# "1.55,72" -> "72"
_LEADING_FACTOR = re.compile(r"[0-9]+.[0-9]+,")


class CalculationError(ValueError):
    """Raised when the inputs lead to a non-finite or undefined result."""


def round_half_up(value: float, places: int = 0) -> float:
    """
    Round half away from zero on the exact binary value of ``value``.

    The builtin round() rounds ties to even (round(0.125, 2) == 0.12,
    round(1420.5) == 1420), so rounding goes through Decimal instead.
    """
    if not math.isfinite(value):
        raise CalculationError(f"Cannot round non-finite value {value!r}")
    quantum = Decimal(1).scaleb(-places)
    return float(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP))


def _to_number(text: str, field: str) -> float:
    text = text.strip()
    if not text:
        return 0.0
    try:
        value = float(text)
    except ValueError:
        raise CalculationError(f"{field}: {text!r} is not a number") from None
    if not math.isfinite(value):
        raise CalculationError(f"{field}: {text!r} is not a finite number")
    return value


def normalize_decimal(value: Number, field: str = "value") -> float:
    """Accept both "70,5" and "70.5" (or a plain number)."""
    if isinstance(value, (int, float)):
        return float(value)
    if not value.strip():
        raise CalculationError(f"{field}: value is empty")
    return _to_number(value.replace(",", "."), field)


def maintenance_factor(activity: Number) -> float:
    """Activity multiplier with any trailing ``,<digits>`` annotation removed."""
    return _to_number(_TRAILING_ANNOTATION.sub("", str(activity)), "activity")


def weekly_extra_water(activity: Number) -> float:
    """Weekly extra water (US fl oz) encoded after the activity multiplier."""
    return _to_number(_LEADING_FACTOR.sub("", str(activity)), "activity")


def format_completion_date(day: date) -> str:
    return f"{MONTHS[day.month - 1]} {day.day} {day.year}"


class MetricsCalculator:
    """
    Core logic:
    - Normalize weight/goal decimal separators
    - BMI and ideal weight (Devine, Robinson, Miller)
    - Mifflin-St Jeor BMR -> maintenance calories -> +/- targets
    - Daily water need
    - Weight difference, daily deficit and projected diet completion date

    Stateless: one instance can serve any number of calls.
    """

    def _bmi(self, weight_kg: float, height_cm: float) -> float:
        if height_cm <= 0:
            raise CalculationError("Height must be greater than zero")
        return round_half_up(weight_kg / (height_cm / 100) ** 2, 2)

    def _ideal_weight(self, gender: Gender, height_cm: float) -> IdealWeight:
        excess_in = (height_cm - BASE_HEIGHT_IN * INCH_TO_CM) / INCH_TO_CM
        values = {}
        for method, by_gender in IDEAL_WEIGHT_COEFFICIENTS.items():
            base, slope = by_gender[gender.value]
            values[method] = round_half_up(
                base * LB_TO_KG + slope * LB_TO_KG * excess_in, 2
            )
        average = round_half_up(sum(values.values()) / len(values), 2)
        return IdealWeight(average=average, **values)

    def _bmr(self, gender: Gender, age: int, weight_kg: float, height_cm: float) -> int:
        val = 10 * weight_kg + 6.25 * height_cm - 5 * age + BMR_OFFSET[gender.value]
        return int(round_half_up(val))

    def _calories(self, bmr: int, activity: Number) -> Calories:
        maintain = int(round_half_up(bmr * maintenance_factor(activity)))
        return Calories(
            bmr=bmr,
            maintain=maintain,
            loose1=maintain - CALORIE_STEP,
            loose2=maintain - CALORIE_STEP * 2,
            gain1=maintain + CALORIE_STEP,
            gain2=maintain + CALORIE_STEP * 2,
        )

    def _water_need(self, weight_kg: float, activity: Number) -> float:
        ounces = weight_kg / LB_TO_KG * WATER_OZ_PER_LB + weekly_extra_water(activity) / 7
        return round_half_up(ounces * FL_OZ_TO_LITER, 2)

    def _weight_difference(self, weight_kg: float, goal_kg: float) -> WeightDifference:
        if weight_kg > goal_kg:
            return WeightDifference(WeightStatus.LOOSE, round_half_up(weight_kg - goal_kg, 2))
        if weight_kg < goal_kg:
            return WeightDifference(WeightStatus.GAIN, round_half_up(goal_kg - weight_kg, 2))
        return WeightDifference(WeightStatus.MAINTAIN, 0.0)

    def _diet_days(self, difference: WeightDifference, deficit: int) -> int:
        """
        Days needed to cover the weight difference at the daily deficit.
        Maintaining needs no diet at all.
        """
        if difference.status is WeightStatus.MAINTAIN:
            return 0
        if deficit <= 0:
            raise CalculationError(
                f"Calorie deficit must be positive to reach the goal (got {deficit})"
            )
        return int(round_half_up((difference.diff / LB_TO_KG * KCAL_PER_LB) / deficit))

    def compute(self, data: MetricsInput, today: Optional[date] = None) -> MetricsResult:
        today = today or date.today()

        weight_kg = normalize_decimal(data.weight, "weight")
        goal_kg = normalize_decimal(data.goal, "goal")
        height_cm = float(data.height)

        bmi = self._bmi(weight_kg, height_cm)
        ideal_weight = self._ideal_weight(data.gender, height_cm)

        bmr = self._bmr(data.gender, data.age, weight_kg, height_cm)
        calories = self._calories(bmr, data.activity_factor)

        water_need = self._water_need(weight_kg, data.activity_factor)

        difference = self._weight_difference(weight_kg, goal_kg)
        deficit = int(round_half_up(calories.maintain * DEFICIT_SHARE))
        days = self._diet_days(difference, deficit)
        try:
            completion = today + timedelta(days=days)
        except OverflowError:
            raise CalculationError(f"Diet of {days} days ends past the calendar range") from None

        logger.debug(
            "Computed metrics: bmi=%s bmr=%s maintain=%s status=%s days=%s",
            bmi, bmr, calories.maintain, difference.status.value, days,
        )

        return MetricsResult(
            bmi=bmi,
            ideal_weight=ideal_weight,
            calories=calories,
            water_need=water_need,
            weight_difference=difference,
            calorie_deficit=deficit,
            diet_duration_days=days,
            diet_completion_date=completion,
            diet_completion_label=format_completion_date(completion),
        )
