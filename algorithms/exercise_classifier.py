class ExerciseType:
    """Keyword classifier separating compound from isolation movements."""

    COMPOUND = "compound"
    ISOLATION = "isolation"

    COMPOUND_KEYWORDS: tuple[str, ...] = (
        "squat",
        "deadlift",
        "bench",
        "press",
        "row",
        "pull up",
        "pullup",
        "pull-up",
        "chin up",
        "dip",
        "lunge",
        "clean",
        "snatch",
        "thruster",
    )

    # Checked before the compound list: "leg extension" or "lateral raise"
    # must not fall through to a compound keyword.
    ISOLATION_KEYWORDS: tuple[str, ...] = (
        "curl",
        "extension",
        "raise",
        "fly",
        "flye",
        "crunch",
        "shrug",
        "calf",
        "lateral",
        "rear delt",
    )

    @classmethod
    def classify(cls, exercise_name: str) -> str:
        """Return ``compound`` or ``isolation``; unknown names are isolation."""
        name = exercise_name.lower()
        if any(k in name for k in cls.ISOLATION_KEYWORDS):
            return cls.ISOLATION
        if any(k in name for k in cls.COMPOUND_KEYWORDS):
            return cls.COMPOUND
        return cls.ISOLATION

    @classmethod
    def is_compound(cls, exercise_name: str) -> bool:
        return cls.classify(exercise_name) == cls.COMPOUND


class ExperienceTier:
    """Coarse training experience derived from an activity-level figure."""

    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"

    ADVANCED_LEVEL: float = 1.7
    INTERMEDIATE_LEVEL: float = 1.5

    MULTIPLIERS: dict[str, float] = {
        BEGINNER: 0.3,
        INTERMEDIATE: 0.5,
        ADVANCED: 0.7,
    }

    @classmethod
    def from_activity_level(cls, activity_level: float) -> str:
        if activity_level >= cls.ADVANCED_LEVEL:
            return cls.ADVANCED
        if activity_level >= cls.INTERMEDIATE_LEVEL:
            return cls.INTERMEDIATE
        return cls.BEGINNER

    @classmethod
    def multiplier(cls, tier: str) -> float:
        return cls.MULTIPLIERS[tier]
