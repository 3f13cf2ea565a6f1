"""
Event-specific system prompts.

Sandi Metz Principles:
- Single Responsibility: Pick the system message for a prompt
- Data over branching: Event families kept in tables
"""

import re
from typing import Dict, Tuple

from coachgen.models.prompt import PromptMetadata

AGE_GROUPS = ("U12", "U14", "U16", "U18", "U20")

# Specific events, checked before the broad families below. Hurdle events
# come first so "110m Hurdles" is not read as a flat sprint.
SPECIFIC_EVENTS = (
    "75m Hurdles", "80m Hurdles", "100m Hurdles", "110m Hurdles",
    "300m Hurdles", "400m Hurdles",
    "Long Jump", "Triple Jump", "High Jump", "Pole Vault",
    "Shot Put", "Discus", "Javelin", "Hammer",
    "1200m", "1500m", "3000m", "800m",
    "150m", "200m", "300m", "400m", "100m", "75m",
)
EVENT_FAMILIES = (
    "Sprints", "Middle Distance", "Long Distance", "Hurdles", "Jumps", "Throws",
)

WEEK_PATTERN = re.compile(r"Week \d+")

BASE_PROMPT = """You are a professional track and field coach specializing in {event} training.
Format your response exactly as shown in the template.
Use proper bullet points (•) and consistent indentation.
Include specific numbers for all sets, reps, and intensities.
Start each day with its name in capitals (MONDAY, TUESDAY, ...) followed by a "Focus:" line.
Keep workouts appropriate for the specified age group and event."""

FAMILY_GUIDANCE: Dict[str, Tuple[str, ...]] = {
    "sprint": (
        "Focus on explosive starts and acceleration",
        "Include sprint mechanics drills",
        "Include block starts and reaction time drills",
        "Add plyometric exercises for power development",
    ),
    "middle": (
        "Focus on aerobic and anaerobic conditioning",
        "Include pace judgment and race strategy",
        "Include interval training with appropriate work/rest ratios",
    ),
    "hurdles": (
        "Focus on hurdle technique and rhythm",
        "Include lead leg and trail leg drills",
        "Include approach run practice",
    ),
    "jumps": (
        "Focus on approach run and takeoff technique",
        "Emphasize proper landing mechanics",
        "Add plyometric exercises for power development",
    ),
    "throws": (
        "Focus on throwing technique and mechanics",
        "Emphasize proper release and follow-through",
        "Add strength exercises for throwing power",
    ),
    "general": (
        "Focus on event-specific technique and conditioning",
        "Include strength and power development",
    ),
}

COMMON_GUIDANCE = (
    "Include core stability work",
    "Adapt training volume based on age group",
    "Include injury prevention exercises",
)


def extract_prompt_metadata(prompt: str) -> PromptMetadata:
    """
    Pull age group, event and week out of a prompt.

    Args:
        prompt: Free-text prompt

    Returns:
        Metadata with defaults for anything not found
    """
    age_group = next((age for age in AGE_GROUPS if age in prompt), "Senior")
    event = next((e for e in SPECIFIC_EVENTS if e in prompt), None)
    if event is None:
        event = next((f for f in EVENT_FAMILIES if f in prompt), "General Training")
    match = WEEK_PATTERN.search(prompt)
    week = match.group(0) if match else "Week 1"
    return PromptMetadata(age_group=age_group, event=event, week=week)


def event_family(event: str) -> str:
    """Map an event name to its guidance family."""
    name = event.lower()
    if "hurdle" in name:
        return "hurdles"
    if any(k in name for k in ("jump", "vault")):
        return "jumps"
    if any(k in name for k in ("throw", "shot", "discus", "javelin", "hammer")):
        return "throws"
    if name in {"800m", "1200m", "1500m", "3000m"} or "distance" in name:
        return "middle"
    if name.endswith("m") or "sprint" in name:
        return "sprint"
    return "general"


def build_system_prompt(prompt: str) -> str:
    """
    Build the system message for a user prompt.

    Args:
        prompt: User prompt

    Returns:
        Event-specific system prompt
    """
    event = extract_prompt_metadata(prompt).event
    guidance = FAMILY_GUIDANCE[event_family(event)] + COMMON_GUIDANCE
    bullets = "\n".join(f"- {line}" for line in guidance)
    return f"{BASE_PROMPT.format(event=event)}\n\nFor {event} specifically:\n{bullets}"
