"""Built-in writing prompts per theme."""

import random
from typing import Optional

from shared_types import Theme

BUILTIN_PROMPTS = {
    Theme.PATIENCE: [
        "What are you waiting for right now, and how does the waiting feel?",
        "When did you slow down today instead of rushing?",
        "What is something that is taking longer than you hoped?",
        "Who showed you patience recently?",
        "What would change if you gave yourself more time?",
    ],
    Theme.GRATITUDE: [
        "What is one small thing that made today better?",
        "Who are you thankful for this week, and why?",
        "What comfort do you usually take for granted?",
        "Which moment today would you like to remember?",
        "What is something your body did for you today?",
    ],
    Theme.GROWTH: [
        "What did you learn about yourself this week?",
        "What felt hard a year ago but feels easier now?",
        "Which mistake taught you something recently?",
        "What habit are you building, and how is it going?",
        "Where did you step outside your comfort zone?",
    ],
    Theme.REFLECTION: [
        "How are you really feeling right now?",
        "What has been on your mind most today?",
        "What would you tell yourself from this morning?",
        "What drained your energy, and what restored it?",
        "What do you want to let go of tonight?",
    ],
    Theme.HOPE: [
        "What are you looking forward to?",
        "What small step could you take tomorrow toward something you want?",
        "What gives you hope when things feel heavy?",
        "Describe a good day a month from now.",
        "What is quietly getting better in your life?",
    ],
}


def get_prompts(theme: str | Theme) -> list[str]:
    """Prompts for a theme, falling back to general reflection prompts."""
    key = Theme.parse(theme) or Theme.REFLECTION
    return list(BUILTIN_PROMPTS[key])


def random_prompt(theme: str | Theme, rng: Optional[random.Random] = None) -> str:
    rng = rng or random
    return rng.choice(get_prompts(theme))


def greeting(hour: int) -> str:
    """Time-of-day greeting for a 0-23 hour."""
    if 5 <= hour < 12:
        return "Good Morning"
    if 12 <= hour < 17:
        return "Good Afternoon"
    if 17 <= hour < 21:
        return "Good Evening"
    return "Good Night"
