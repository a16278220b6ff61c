"""
Dashboard overview and progress chart data.
"""

from datetime import date

from recovery.models.schemas import (
    ChartData,
    ChartDataset,
    Measurement,
    Profile,
    ProgressOverview,
)
from recovery.services import postpartum_clock
from recovery.services.units import (
    format_length,
    format_weight,
    from_canonical_length,
    from_canonical_weight,
)


class ProgressService:
    """Builds display-ready summaries from canonical measurements."""

    def __init__(self, length_unit: str = "cm") -> None:
        self.length_unit = length_unit

    def to_display(self, measurement: Measurement, weight_unit: str) -> Measurement:
        """Copy of a measurement converted to display units."""
        return measurement.model_copy(
            update={
                "weight": from_canonical_weight(measurement.weight, weight_unit),
                "waist_size": from_canonical_length(measurement.waist_size, self.length_unit),
                "hip_size": from_canonical_length(measurement.hip_size, self.length_unit),
                "bust_size": from_canonical_length(measurement.bust_size, self.length_unit),
            }
        )

    def overview(
        self,
        profile: Profile,
        measurements: list[Measurement],
        today: date | None = None,
    ) -> ProgressOverview:
        """
        Summary cards: latest measurement, postpartum week and weight change.

        measurements must be ordered oldest first.
        """
        today = today or date.today()
        unit = profile.weight_unit
        latest = measurements[-1] if measurements else None

        latest_weight = None
        weight_change = None
        if latest and latest.weight:
            latest_weight = format_weight(from_canonical_weight(latest.weight, unit), unit)
            change = from_canonical_weight(latest.weight - profile.pre_pregnancy_weight, unit)
            weight_change = f"{'+' if change > 0 else ''}{format_weight(change, unit)}"

        latest_waist = None
        if latest and latest.waist_size:
            latest_waist = format_length(
                from_canonical_length(latest.waist_size, self.length_unit), self.length_unit
            )

        return ProgressOverview(
            first_name=profile.first_name,
            delivery_type=profile.delivery_type,
            delivery_date=profile.delivery_date,
            postpartum_week=postpartum_clock.compute_week(profile.delivery_date, today),
            days_since_delivery=postpartum_clock.days_since_delivery(profile.delivery_date, today),
            weight_unit=unit,
            length_unit=self.length_unit,
            latest_measurement_date=latest.date if latest else None,
            latest_weight=latest_weight,
            latest_waist=latest_waist,
            weight_change=weight_change,
        )

    def chart(self, measurements: list[Measurement], weight_unit: str) -> ChartData:
        """Weight and body size series in display units, one point per measurement."""
        points = [self.to_display(m, weight_unit) for m in measurements]

        def series(label: str, field: str) -> ChartDataset:
            values = []
            for point in points:
                value = getattr(point, field)
                values.append(round(value, 1) if value else None)
            return ChartDataset(label=label, data=values)

        return ChartData(
            labels=[f"{m.date:%b} {m.date.day}" for m in points],
            datasets=[
                series("Weight", "weight"),
                series("Waist Size", "waist_size"),
                series("Hip Size", "hip_size"),
                series("Bust Size", "bust_size"),
            ],
        )
