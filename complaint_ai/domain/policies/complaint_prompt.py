"""Prompt construction for complaint prioritization.

Pure functions: a ComplaintSnapshot in, prompt text out.
"""

from complaint_ai.domain.entities.complaint import ComplaintSnapshot

SYSTEM_PROMPT = (
    "You are an AI assistant specialized in analyzing public transport complaints. "
    "Always respond with valid JSON."
)

RUBRIC = (
    "Safety implications",
    "Service disruption impact",
    "Number of affected passengers",
    "Urgency of resolution needed",
    "Emotional sentiment of the complaint",
)

RESPONSE_SHAPE = """\
{
  "priority": "high|medium|low",
  "reasoning": "brief explanation",
  "sentiment": -1 to 1,
  "confidence": 0 to 1,
  "suggestedCategory": "suggested category if different"
}"""


def build_user_prompt(complaint: ComplaintSnapshot) -> str:
    factors = "\n".join(f"- {factor}" for factor in RUBRIC)
    return (
        "Analyze this public transport complaint and determine its priority level:\n"
        "\n"
        f"Title: {complaint.title}\n"
        f"Description: {complaint.description}\n"
        f"Category: {complaint.category}\n"
        f"Date: {complaint.incident_time_display()}\n"
        f"Location: {complaint.location_display()}\n"
        f"Vehicle: {complaint.vehicle_display()}\n"
        "\n"
        "Consider factors like:\n"
        f"{factors}\n"
        "\n"
        "Respond with JSON only:\n"
        f"{RESPONSE_SHAPE}"
    )
