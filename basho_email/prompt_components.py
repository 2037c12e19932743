"""
Prompt components for email generation.

The outreach form fields, their example values, and the template that
turns a filled-in form into the instruction sent to the model.
"""

# Form fields in display order
FIELD_NAMES: tuple[str, ...] = (
    "recipient_name",
    "job_title",
    "company_name",
    "industry",
    "location",
    "recent_news",
    "key_challenge",
    "solution",
    "case_study",
    "cta",
    "tone",
    "urgency",
)

FIELD_LABELS: dict[str, str] = {
    "recipient_name": "Recipient name",
    "job_title": "Job title",
    "company_name": "Company name",
    "industry": "Industry",
    "location": "Location",
    "recent_news": "Recent news",
    "key_challenge": "Key challenge",
    "solution": "Solution",
    "case_study": "Case study",
    "cta": "Call to action",
    "tone": "Tone",
    "urgency": "Urgency",
}

# Rendered as <textarea>, everything else is a single-line <input>
MULTILINE_FIELDS: frozenset[str] = frozenset({
    "recent_news",
    "key_challenge",
    "solution",
    "case_study",
    "cta",
    "urgency",
})

DEFAULT_FORM_VALUES: dict[str, str] = {
    "recipient_name": "John Doe",
    "job_title": "VP of Sales",
    "company_name": "ABC Corp",
    "industry": "SaaS",
    "location": "San Francisco",
    "recent_news": (
        "ABC Corp recently raised $10M in Series B funding "
        "and is expanding into new markets."
    ),
    "key_challenge": "Struggling to scale the sales team and improve customer engagement.",
    "solution": (
        "Our platform helps SaaS companies streamline sales processes and boost "
        "customer engagement through personalized marketing automation."
    ),
    "case_study": "We helped XYZ Corp (a competitor) increase engagement by 30%.",
    "cta": "Schedule a 10-minute call to discuss how our solution could benefit ABC Corp.",
    "tone": "Professional but friendly",
    "urgency": "Mention the potential to kick off a conversation this week.",
}

SYSTEM_INSTRUCTION = (
    "You are a helpful assistant that generates personalized outreach emails."
)

ERROR_PLACEHOLDER = (
    "An error occurred while generating the email. "
    "Please check the server logs for more details."
)

PROMPT_TEMPLATE = (
    "Generate a personalized outreach email for {recipient_name}, {job_title} "
    "at {company_name}, a {industry} company based in {location}. {recent_news} "
    "The email should reference this news and address their challenge of "
    "{key_challenge} The product we're offering is {solution} "
    "Include a case study: {case_study} "
    "The tone should be {tone}, with a call to action: {cta} {urgency}"
)


def build_prompt(record: dict[str, str]) -> str:
    """
    Build the user prompt for a filled-in outreach form.
    
    Values are substituted verbatim, without escaping.
    
    Args:
        record: Mapping with all 12 form fields.
    
    Returns:
        The instruction string sent as the user message.
    """
    # Substitute each field once; a value containing "{...}" stays literal
    return PROMPT_TEMPLATE.format_map({name: record[name] for name in FIELD_NAMES})
