"""
Unit conversion utilities for emissions calculations.

Provides conversions between the units the activity form submits and the
units emission factors are expressed in (stateless utilities).
"""

import math


class UnitConverter:
    """
    Unit conversion service.

    Provides methods to convert between different units of measurement
    used in emissions calculations.
    """

    MINUTES_PER_HOUR = 60

    @staticmethod
    def round2(value: float) -> float:
        """
        Round to 2 decimal places, halves away from zero.

        Args:
            value: Number to round

        Returns:
            Rounded value

        Example:
            >>> UnitConverter.round2(5.8986675)
            5.9
            >>> UnitConverter.round2(-0.125)
            -0.13
        """
        if not math.isfinite(value):
            return value
        scaled = abs(value) * 100
        rounded = math.floor(scaled + 0.5) / 100
        return math.copysign(rounded, value) if value else 0.0

    @staticmethod
    def total_minutes(
        duration_hours: float | None = None,
        duration_minutes: float | None = None,
        total_minutes: float | None = None,
    ) -> float:
        """
        Collapse a duration to minutes.

        An explicit total wins; otherwise hours and minutes are combined.

        Example:
            >>> UnitConverter.total_minutes(duration_hours=1, duration_minutes=30)
            90.0
        """
        if total_minutes is not None:
            return float(total_minutes)
        hours = duration_hours or 0
        minutes = duration_minutes or 0
        return float(hours * UnitConverter.MINUTES_PER_HOUR + minutes)

    @staticmethod
    def minutes_to_km(minutes: float, speed_kmh: float) -> float:
        """
        Convert a travel duration to distance at an average speed.

        Args:
            minutes: Travel time in minutes
            speed_kmh: Average speed in km/h

        Returns:
            Distance in kilometres, rounded to 2 decimal places

        Example:
            >>> UnitConverter.minutes_to_km(60, 30)
            30.0
        """
        hours = minutes / UnitConverter.MINUTES_PER_HOUR
        return UnitConverter.round2(hours * speed_kmh)
