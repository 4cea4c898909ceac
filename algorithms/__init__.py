from .math_tools import MathTools
from .exercise_classifier import ExerciseType, ExperienceTier
from .muscle_groups import MuscleGroupClassifier, MUSCLE_GROUPS, default_classifier, load_catalog

__all__ = [
    "MathTools",
    "ExerciseType",
    "ExperienceTier",
    "MuscleGroupClassifier",
    "MUSCLE_GROUPS",
    "default_classifier",
    "load_catalog",
]
