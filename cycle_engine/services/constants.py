"""
Constants and shared data for cycle-related services.
"""
import os

from cycle_engine.models.phase import CyclePhase
from cycle_engine.models.symptom import Mood, PainLevel

DEFAULT_CYCLE_LENGTH = int(os.environ.get("DEFAULT_CYCLE_LENGTH", "28"))
DEFAULT_PERIOD_LENGTH = int(os.environ.get("DEFAULT_PERIOD_LENGTH", "5"))

# Luteal phase length, ovulation happens this many days before the next start
OVULATION_OFFSET_DAYS = 14

# Fertile window is [ovulation - 5, ovulation + 1], both ends inclusive
FERTILE_DAYS_BEFORE_OVULATION = 5
FERTILE_DAYS_AFTER_OVULATION = 1

# Backtest
DEFAULT_ACCURACY = 85
MIN_EVENTS_FOR_ACCURACY = 3
ACCURACY_TOLERANCE_DAYS = 2

ENGINE_CACHE_SIZE = int(os.environ.get("ENGINE_CACHE_SIZE", "1024"))

PENDING_LABEL = "pending"

DEFAULT_ADVICE = {
    "nutrition": "Stay well hydrated and keep a balanced diet throughout your cycle.",
    "wellness": "Listen to your body and adjust your activities to your energy level."
}

PHASE_ADVICE = {
    CyclePhase.MENSTRUAL: {
        "nutrition": (
            "Favor iron-rich foods such as spinach and lentils to make up for losses. "
            "Ginger can help relieve cramps."
        ),
        "wellness": (
            "Choose gentle exercise such as yoga or walking. "
            "A warm bath can relax the muscles and ease pain."
        )
    },
    CyclePhase.FOLLICULAR: {
        "nutrition": (
            "Time to refuel with complex carbohydrates (oats, quinoa) and lean proteins."
        ),
        "wellness": (
            "Your energy is rising. Make the most of it with more intense training "
            "such as running or cardio."
        )
    },
    CyclePhase.OVULATION: {
        "nutrition": (
            "Support your liver with cruciferous vegetables (broccoli, cauliflower) "
            "and antioxidant-rich foods such as berries."
        ),
        "wellness": (
            "You are at your peak of energy and sociability. "
            "A good moment for group activities or strength training."
        )
    },
    CyclePhase.LUTEAL: {
        "nutrition": (
            "Limit sugar and caffeine to reduce mood swings. Increase magnesium intake "
            "(dark chocolate, almonds) to reduce cramps."
        ),
        "wellness": (
            "Favor calming activities such as meditation or reading. "
            "If you feel irritable, a moderate workout can help."
        )
    },
    CyclePhase.UNKNOWN: DEFAULT_ADVICE
}

PAIN_WELLNESS_ADVICE = {
    PainLevel.LIGHT: "Gentle stretching or a walk can help relieve the discomfort.",
    PainLevel.MODERATE: "A hot water bottle on the lower belly or back can bring real relief.",
    PainLevel.STRONG: (
        "Rest is essential. Slow down and consider a painkiller if needed, "
        "after medical advice."
    )
}

LOW_MOOD_ADVICE = (
    "A relaxing herbal tea (chamomile, verbena) or a few minutes of meditation "
    "can help you refocus."
)

LOW_MOODS = {Mood.IRRITABLE, Mood.SAD}
