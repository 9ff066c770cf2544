"""All prompt templates for completion service calls."""

import json

RESUME_SHAPE = """{
  "personalInfo": {
    "name": "string",
    "email": "string",
    "phone": "string (optional)",
    "location": "string (optional)",
    "linkedin": "string (optional, full URL)",
    "website": "string (optional, full URL)"
  },
  "summary": "string (at least 10 characters)",
  "experience": [
    {
      "title": "string",
      "company": "string",
      "location": "string (optional)",
      "startDate": "string",
      "endDate": "string (optional, use 'Present' for current)",
      "description": ["string", "string", ...]
    }
  ],
  "education": [
    {
      "degree": "string",
      "institution": "string",
      "location": "string (optional)",
      "graduationDate": "string (optional)",
      "gpa": "string (optional)"
    }
  ],
  "skills": [
    {
      "category": "string",
      "items": ["string", "string", ...]
    }
  ],
  "projects": [
    {
      "name": "string",
      "description": "string",
      "technologies": ["string", "string", ...] (optional),
      "url": "string (optional)"
    }
  ],
  "certifications": [
    {
      "name": "string",
      "issuer": "string",
      "date": "string (optional)"
    }
  ]
}"""

FIELD_PRECEDENCE_POLICY = (
    "Conversation-stated facts override background-context facts whenever they conflict; "
    "background context supplies values absent from the conversation; "
    "fields absent from both sources are omitted rather than inferred."
)

EXTRACTION_INSTRUCTIONS = f"""You are a resume data extraction specialist. Analyze the conversation history and any provided background context to extract structured resume information.

You will be provided with:
1. Background Context: information about the person (if available)
2. Conversation History: the user's chat with the assistant

EXTRACT THE FOLLOWING:
1. Personal Information: full name, email address, phone number, location (city, state/country), LinkedIn profile URL, personal website URL
2. Professional Summary: a concise 2-3 sentence summary based on the person's background and goals
3. Work Experience: job title, company, location, start and end dates (format as "Month Year" or "Present"), key responsibilities and achievements as bullet points
4. Education: degree and field of study, institution, location, graduation date, GPA (if mentioned)
5. Skills: grouped into categories (e.g. "Programming Languages", "Tools", "Soft Skills") with specific skills under each
6. Projects (if mentioned): name, description, technologies used, URL
7. Certifications (if mentioned): name, issuing organization, date obtained

FIELD PRECEDENCE (follow strictly):
{FIELD_PRECEDENCE_POLICY}

GUIDELINES:
- Use "Present" as the end date for current positions
- If dates are vague, estimate them (e.g. "about 2 years ago" becomes an approximate month and year)
- Group similar skills together logically
- Write achievement-focused bullet points for experience

TARGET STRUCTURE:
{RESUME_SHAPE}"""


def build_extraction_prompt(transcript: str, background_context: str | None = None) -> str:
    """Extraction request: instructions, optional background, transcript, answer format."""
    context_section = ""
    if background_context and background_context.strip():
        context_section = f"""
BACKGROUND CONTEXT:
---
{background_context}
---
"""

    return f"""{EXTRACTION_INSTRUCTIONS}
{context_section}
CONVERSATION HISTORY:
---
{transcript}
---

Respond with ONLY a valid JSON object matching the target structure above (no markdown, no code fences, no additional text)."""


def build_update_prompt(current_data: dict, description: str) -> str:
    """Edit request: current record plus the user's change description."""
    current_json = json.dumps(current_data, indent=2, ensure_ascii=False)

    return f"""You are a resume editing assistant. Update the following resume data based on the user's request.

CURRENT RESUME DATA:
---
{current_json}
---

USER'S UPDATE REQUEST:
---
{description}
---

Only modify the parts that the user requested to change. Keep every other field exactly as it is.

Respond with ONLY the updated resume as a valid JSON object with the exact same structure (no markdown, no code fences, no additional text)."""
