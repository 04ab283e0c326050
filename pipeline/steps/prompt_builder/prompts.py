"""
Prompts for the email generation request.

All generation prompts are defined here for easy modification and A/B testing.
"""

from pipeline.models.core import EmailRequest, Tone


TONE_GUIDANCE = {
    Tone.FORMAL: (
        "Use complete sentences, no contractions and no slang. Address the "
        "recipient by title where possible and keep the structure traditional."
    ),
    Tone.FRIENDLY: (
        "Sound warm and approachable. Contractions are fine, and a short "
        "personal touch in the opening is welcome."
    ),
    Tone.PROFESSIONAL: (
        "Be clear, courteous and direct. Keep sentences concise and focus on "
        "the purpose and the next step."
    ),
    Tone.HUMOROUS: (
        "Add light, good-natured humor that never undermines the message. "
        "Keep jokes short and avoid anything that could offend."
    ),
    Tone.URGENT: (
        "State the time-sensitive point in the first paragraph, name any "
        "deadline explicitly and make the requested action unmistakable."
    ),
    Tone.CASUAL: (
        "Write the way you would message a colleague you know well: relaxed, "
        "short sentences and plain words."
    ),
}


SYSTEM_PROMPT_TEMPLATE = """You are an expert email writer. Your task is to write a professional, well-structured email based on the context provided.

<guidelines>
- Write in {language} language
- Use a {tone} tone
- Be concise but comprehensive
- Do not include any explanations or notes outside the email content itself
</guidelines>

<structure>
1. Subject line on the first line, written as "Subject: ..." and no longer than 50 characters
2. Greeting addressed to the recipient
3. Opening sentence that states why you are writing
4. Body with the relevant details, split into short paragraphs
5. Clear call-to-action
6. Closing phrase and sign-off
Separate every section with a blank line.
</structure>

<tone_guidance>
{tone_guidance}
</tone_guidance>"""


def build_system_prompt(language: str, tone: Tone) -> str:
    """
    Generate the system prompt for a language and tone.

    Args:
        language: Target language name (e.g. "english")
        tone: Desired tone

    Returns:
        Formatted system prompt
    """
    return SYSTEM_PROMPT_TEMPLATE.format(
        language=language,
        tone=tone.value,
        tone_guidance=TONE_GUIDANCE[tone],
    )


def build_user_prompt(purpose: str, context: str, recipient: str = "") -> str:
    """
    Generate the user prompt.

    Args:
        purpose: Email purpose value (e.g. "follow-up")
        context: User-supplied situation description
        recipient: Optional recipient description

    Returns:
        Formatted user prompt
    """
    recipient_text = f" to {recipient}" if recipient else ""
    return f"""Write a {purpose} email{recipient_text} with the following context:

{context}"""


def build_prompts(request: EmailRequest) -> tuple[str, str]:
    """Return (system_prompt, user_prompt) for a validated request."""
    system_prompt = build_system_prompt(request.language, request.tone)
    user_prompt = build_user_prompt(
        purpose=request.purpose.value,
        context=request.context,
        recipient=request.recipient,
    )
    return system_prompt, user_prompt
