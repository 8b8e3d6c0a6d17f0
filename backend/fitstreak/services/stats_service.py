"""Challenge statistics derivation service.

Turns a user's complete list of check-ins into the numbers the app shows:
- Progress towards the day goal
- Current streak of consecutive active days
- Calorie and duration totals
- Weight trend and BMI
- Achievement badges
- Trailing activity heatmap

Every calculation is a pure function of the logs passed in and the current
instant. Nothing is cached; callers re-derive after each change to the logs.
"""

import logging
import math
from dataclasses import dataclass
from datetime import date, datetime, timedelta, timezone
from decimal import Decimal, ROUND_HALF_UP
from typing import Any, Optional, Sequence, Union
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from fitstreak.config import Settings, get_settings
from fitstreak.models.fitness_log import ExerciseType
from fitstreak.schemas.stats import (
    Badge,
    BMICategory,
    BMIResult,
    HeatmapDay,
    StatsSnapshot,
    WeightPoint,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BadgeRule:
    """Unlock rule for one achievement badge.

    ``metric`` names one of the derived values passed to ``is_met``
    (total_days, current_streak, total_calories, strength_count, ...).
    """

    id: int
    name: str
    description: str
    icon: str
    metric: str
    threshold: float
    strict: bool = False  # ">" instead of ">="

    def is_met(self, values: dict[str, float]) -> bool:
        value = values.get(self.metric, 0)
        if self.strict:
            return value > self.threshold
        return value >= self.threshold


DEFAULT_BADGE_RULES: tuple[BadgeRule, ...] = (
    BadgeRule(1, "Kickoff", "Complete your first check-in", "🚀", "total_days", 1),
    BadgeRule(2, "Week Warrior", "Check in on 7 days", "🔥", "total_days", 7),
    BadgeRule(3, "Unstoppable", "Check in 3 days in a row", "⚡", "current_streak", 3),
    BadgeRule(4, "Furnace", "Burn more than 3000 kcal in total", "🌋", "total_calories", 3000, strict=True),
    BadgeRule(5, "Strength King", "Log 5 strength sessions", "🦍", "strength_count", 5),
    BadgeRule(6, "Halfway There", "Reach 50 days of the goal", "🏆", "total_days", 50),
)


@dataclass(frozen=True)
class StatsConfig:
    """Tunable constants for the derivation."""

    goal_days: int = 100
    heatmap_window_days: int = 28
    timezone: str = "UTC"
    badge_rules: tuple[BadgeRule, ...] = DEFAULT_BADGE_RULES

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "StatsConfig":
        settings = settings or get_settings()
        return cls(
            goal_days=settings.GOAL_DAYS,
            heatmap_window_days=settings.HEATMAP_WINDOW_DAYS,
            timezone=settings.TIMEZONE,
        )


class StatsService:
    """Derive challenge statistics from fitness logs."""

    # BMI band lower bounds, checked from the top down
    BMI_BANDS = (
        (28.0, BMICategory.OBESE),
        (24.0, BMICategory.OVERWEIGHT),
        (18.5, BMICategory.NORMAL),
    )

    def __init__(self, config: Optional[StatsConfig] = None):
        self.config = config or StatsConfig()
        if self.config.goal_days <= 0:
            raise ValueError("Goal must be at least one day")
        if self.config.heatmap_window_days <= 0:
            raise ValueError("Heatmap window must be at least one day")
        try:
            self.tz = ZoneInfo(self.config.timezone)
        except ZoneInfoNotFoundError:
            raise ValueError(
                f"Invalid timezone '{self.config.timezone}'. Use IANA timezone identifiers."
            )

    def local_date(self, timestamp: datetime) -> date:
        """
        Calendar date of a timestamp in the configured timezone.

        Naive timestamps are taken to be UTC, which is how SQLite hands
        back the values it stored.
        """
        return _as_utc(timestamp).astimezone(self.tz).date()

    def active_dates(self, logs: Sequence[Any]) -> set[date]:
        """Distinct local dates with at least one check-in."""
        return {self.local_date(log.date) for log in logs}

    def calculate_streak(self, logs: Sequence[Any], today: date) -> int:
        """
        Count consecutive active days ending today or yesterday.

        A day without a check-in yet does not break the streak, so the
        count starts from yesterday when today is still empty.

        Args:
            logs: Check-ins to inspect
            today: Local date the streak is measured from

        Returns:
            Streak length in days (0 when neither today nor yesterday is active)
        """
        dates = self.active_dates(logs)
        if not dates:
            return 0

        check = today
        if check not in dates:
            check -= timedelta(days=1)

        streak = 0
        for _ in range(len(dates) + 1):
            if check not in dates:
                break
            streak += 1
            check -= timedelta(days=1)

        return streak

    def build_heatmap(self, logs: Sequence[Any], today: date) -> list[HeatmapDay]:
        """Flag each day of the trailing window as active or not, oldest first."""
        dates = self.active_dates(logs)
        window = self.config.heatmap_window_days
        return [
            HeatmapDay(date=day, active=day in dates)
            for day in (today - timedelta(days=offset) for offset in range(window - 1, -1, -1))
        ]

    def build_weight_history(self, logs: Sequence[Any]) -> list[WeightPoint]:
        """Recorded weights in chronological order, oldest first."""
        weighed = sorted(
            (log for log in logs if log.weight is not None and log.weight > 0),
            key=lambda log: _as_utc(log.date),
        )
        history = []
        for log in weighed:
            day = self.local_date(log.date)
            history.append(WeightPoint(date=day, label=f"{day.month}/{day.day}", weight=log.weight))
        return history

    def evaluate_badges(self, values: dict[str, float]) -> list[Badge]:
        """Check every badge rule against the derived values, in catalog order."""
        return [
            Badge(
                id=rule.id,
                name=rule.name,
                description=rule.description,
                icon=rule.icon,
                unlocked=rule.is_met(values),
            )
            for rule in self.config.badge_rules
        ]

    @classmethod
    def classify_bmi(cls, bmi: float) -> BMICategory:
        """
        Classify a BMI value.

        Bands: < 18.5 underweight, 18.5-24 normal, 24-28 overweight,
        28 and above obese. Lower bounds are inclusive.
        """
        for lower_bound, category in cls.BMI_BANDS:
            if bmi >= lower_bound:
                return category
        return BMICategory.UNDERWEIGHT

    def calculate_bmi(
        self,
        weight_history: Sequence[WeightPoint],
        height_cm: Union[str, float, None],
    ) -> BMIResult:
        """
        Calculate BMI from the latest recorded weight.

        BMI = weight (kg) / height (m)^2, rounded half-up to one decimal.
        The category is decided on the rounded value.

        Args:
            weight_history: Weight trend, oldest first
            height_cm: Height in centimeters, as typed by the user

        Returns:
            BMIResult; value 0 and label "unknown" when there is no weight
            or the height cannot be used
        """
        height = _parse_height(height_cm)
        if not weight_history or height is None:
            return BMIResult(
                value=0,
                label=BMICategory.UNKNOWN,
                height_cm=height,
                weight=weight_history[-1].weight if weight_history else None,
            )

        latest_weight = weight_history[-1].weight
        height_m = height / 100
        bmi = latest_weight / (height_m * height_m)
        rounded = float(Decimal(bmi).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))

        return BMIResult(
            value=rounded,
            label=self.classify_bmi(rounded),
            height_cm=height,
            weight=latest_weight,
        )

    def derive(self, logs: Sequence[Any], now: Optional[datetime] = None) -> StatsSnapshot:
        """
        Derive the full statistics snapshot for a set of check-ins.

        Args:
            logs: The user's complete list of check-ins, in any order.
                Each item needs date, duration, type, calories and weight.
            now: Current instant (defaults to the current UTC time)

        Returns:
            StatsSnapshot; an empty list yields zeroed values, locked badges
            and an all-inactive heatmap
        """
        now = now or datetime.now(timezone.utc)
        today = self.local_date(now)
        goal = self.config.goal_days

        # Raw record count: two check-ins on one day count twice
        total_days = len(logs)
        progress = min(total_days / goal * 100, 100)
        total_calories = sum(log.calories or 0 for log in logs)
        total_duration = sum(log.duration or 0 for log in logs)
        cardio_count = sum(1 for log in logs if log.type == ExerciseType.CARDIO)
        strength_count = sum(1 for log in logs if log.type == ExerciseType.STRENGTH)
        current_streak = self.calculate_streak(logs, today)

        badges = self.evaluate_badges({
            "total_days": total_days,
            "current_streak": current_streak,
            "total_calories": total_calories,
            "total_duration": total_duration,
            "cardio_count": cardio_count,
            "strength_count": strength_count,
        })

        logger.debug(
            f"Derived stats for {total_days} logs: streak={current_streak}, "
            f"calories={total_calories}, unlocked={sum(b.unlocked for b in badges)}"
        )

        return StatsSnapshot(
            total_days=total_days,
            goal=goal,
            progress=progress,
            days_remaining=max(goal - total_days, 0),
            total_calories=total_calories,
            total_duration=total_duration,
            total_duration_hours=math.floor(total_duration / 60 + 0.5),
            current_streak=current_streak,
            weight_history=self.build_weight_history(logs),
            cardio_count=cardio_count,
            strength_count=strength_count,
            strength_ratio=round(strength_count / (total_days or 1) * 100, 2),
            badges=badges,
            heatmap=self.build_heatmap(logs, today),
        )


def _as_utc(timestamp: datetime) -> datetime:
    if timestamp.tzinfo is None:
        return timestamp.replace(tzinfo=timezone.utc)
    return timestamp


def _parse_height(height_cm: Union[str, float, None]) -> Optional[float]:
    """Parse a free-text height; None when blank, non-numeric or not positive."""
    if height_cm is None:
        return None
    try:
        height = float(str(height_cm).strip())
    except ValueError:
        return None
    if not math.isfinite(height) or height <= 0:
        return None
    return height


# Create a singleton instance for convenience
stats_service = StatsService(StatsConfig.from_settings())
