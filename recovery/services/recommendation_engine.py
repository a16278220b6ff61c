"""
Exercise recommendation engine.

Maps a postpartum week and delivery type to an ordered list of exercise
suggestions. Tiers are checked in order and the first one whose upper bound
covers the week wins; the universal exercises always come first.
"""

from dataclasses import dataclass

from recovery.models.schemas import DeliveryType, ExerciseSuggestion


# Shown above the list regardless of week
GENERAL_GUIDELINES = [
    "Always consult your healthcare provider before starting any exercise routine",
    "Stop immediately if you experience pain or discomfort",
    "Listen to your body and don't overexert yourself",
    "Stay hydrated and maintain good posture",
]


UNIVERSAL_SUGGESTIONS = [
    ExerciseSuggestion(
        name="Deep Breathing",
        description="Practice deep diaphragmatic breathing while lying down or sitting comfortably.",
        duration="5-10 minutes",
        frequency="3-4 times daily",
    ),
    ExerciseSuggestion(
        name="Kegel Exercises",
        description="Gently contract and relax your pelvic floor muscles.",
        duration="5-10 minutes",
        frequency="3 times daily",
        cautions=["Stop if you feel pain", "Don't hold your breath"],
    ),
]


@dataclass(frozen=True)
class RecoveryTier:
    """
    One week range of the program.

    max_week is inclusive; None marks the open-ended last tier.
    extra is appended only when the delivery type equals extra_for.
    """

    label: str
    max_week: int | None
    base: list[ExerciseSuggestion]
    extra_for: DeliveryType | None = None
    extra: ExerciseSuggestion | None = None

    def covers(self, week: int) -> bool:
        return self.max_week is None or week <= self.max_week

    def suggestions_for(self, delivery_type: str) -> list[ExerciseSuggestion]:
        suggestions = list(self.base)
        if self.extra is not None and delivery_type == self.extra_for:
            suggestions.append(self.extra)
        return suggestions


RECOVERY_TIERS = [
    RecoveryTier(
        label="Week 1-2",
        max_week=2,
        base=[
            ExerciseSuggestion(
                name="Gentle Walking",
                description="Short, slow walks around your home or garden.",
                duration="5-10 minutes",
                frequency="2-3 times daily",
                cautions=["Listen to your body", "Stop if you feel dizzy or tired"],
            ),
        ],
        extra_for="vaginal",
        extra=ExerciseSuggestion(
            name="Pelvic Tilts",
            description="Lying on your back, gently tilt your pelvis while engaging your core.",
            duration="5 minutes",
            frequency="2-3 times daily",
            cautions=["Keep movements small and gentle"],
        ),
    ),
    RecoveryTier(
        label="Week 3-4",
        max_week=4,
        base=[
            ExerciseSuggestion(
                name="Extended Walking",
                description="Gradually increase walking distance and duration.",
                duration="15-20 minutes",
                frequency="1-2 times daily",
                cautions=["Maintain good posture", "Wear supportive shoes"],
            ),
            ExerciseSuggestion(
                name="Shoulder Rolls",
                description="Gentle shoulder rotations to relieve upper body tension.",
                duration="5 minutes",
                frequency="2-3 times daily",
            ),
        ],
        extra_for="vaginal",
        extra=ExerciseSuggestion(
            name="Bridge Pose",
            description="Lying on your back, gently lift your hips off the ground.",
            duration="5-10 minutes",
            frequency="Once daily",
            cautions=["Stop if you feel any discomfort"],
        ),
    ),
    RecoveryTier(
        label="Week 5-6",
        max_week=6,
        base=[
            ExerciseSuggestion(
                name="Brisk Walking",
                description="Increase walking pace while maintaining comfort.",
                duration="20-30 minutes",
                frequency="Daily",
            ),
            ExerciseSuggestion(
                name="Modified Planks",
                description="Start with knee planks, focusing on proper form.",
                duration="30 seconds",
                frequency="2-3 sets daily",
                cautions=["Check for diastasis recti", "Maintain proper alignment"],
            ),
        ],
        extra_for="c-section",
        extra=ExerciseSuggestion(
            name="Scar Tissue Massage",
            description="Gentle massage around the scar area (after healing).",
            duration="5 minutes",
            frequency="2-3 times daily",
            cautions=["Wait for complete healing", "Use gentle pressure"],
        ),
    ),
    RecoveryTier(
        label="Week 7-8",
        max_week=8,
        base=[
            ExerciseSuggestion(
                name="Swimming",
                description="Gentle swimming or water walking (if cleared by doctor).",
                duration="20-30 minutes",
                frequency="2-3 times weekly",
                cautions=["Wait for bleeding to stop", "Start slowly"],
            ),
            ExerciseSuggestion(
                name="Modified Squats",
                description="Bodyweight squats with proper form.",
                duration="10-15 repetitions",
                frequency="2-3 sets daily",
                cautions=["Keep feet hip-width apart", "Don't overexert"],
            ),
        ],
    ),
    RecoveryTier(
        label="Week 8+",
        max_week=None,
        base=[
            ExerciseSuggestion(
                name="Strength Training",
                description="Light weights or resistance bands (if cleared by doctor).",
                duration="20-30 minutes",
                frequency="2-3 times weekly",
                cautions=["Start with light weights", "Focus on form"],
            ),
            ExerciseSuggestion(
                name="Yoga",
                description="Postpartum yoga classes or gentle home practice.",
                duration="30 minutes",
                frequency="2-3 times weekly",
                cautions=["Modify poses as needed", "Listen to your body"],
            ),
        ],
    ),
]


def find_tier(week: int, tiers: list[RecoveryTier] = RECOVERY_TIERS) -> RecoveryTier:
    """Return the first tier covering the week."""
    for tier in tiers:
        if tier.covers(week):
            return tier
    raise ValueError(f"No recovery tier covers week {week}")


def suggest(
    week: int,
    delivery_type: str,
    tiers: list[RecoveryTier] = RECOVERY_TIERS,
) -> list[ExerciseSuggestion]:
    """Build the exercise list for a postpartum week and delivery type."""
    tier = find_tier(week, tiers)
    return [
        suggestion.model_copy(deep=True)
        for suggestion in UNIVERSAL_SUGGESTIONS + tier.suggestions_for(delivery_type)
    ]
