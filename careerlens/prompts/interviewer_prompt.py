"""Prompt templates for the AI interviewer."""

from careerlens.models.interview_models import InterviewSessionRequest, InterviewTurnRequest, Speaker

WRAP_UP_AFTER = 5
MAY_END_AFTER = 6

AVATAR_STYLES = {
    "HR": "a warm HR partner who focuses on motivation, culture fit and communication",
    "Mentor": "a supportive senior mentor who encourages the candidate and probes for depth",
    "Robot": "a precise, neutral interviewer who asks crisp and structured questions",
}

OPENING_SYSTEM_PROMPT = """You are "Alex", a warm and professional interviewer at CareerLens.
You're about to start a conversational interview with a candidate.

Start with a friendly greeting and a natural opening question. Be conversational and welcoming.
Examples of good openers:
- "Hi there! Thanks for joining me today. I'd love to start by hearing a bit about yourself and what brings you here."
- "Welcome! Before we dive in, could you walk me through your background and what interests you about this role?"
- "Great to meet you! Let's start with you telling me about your journey so far and why you're excited about this opportunity."

Keep it natural and conversational - like you're starting a real conversation, not reading from a script.

OUTPUT FORMAT (strict JSON):
{"firstQuestion": "..."}

Respond ONLY with the JSON object.
"""

FOLLOW_UP_SYSTEM_PROMPT = """You are "Alex", a friendly and experienced interviewer conducting a conversational interview.

KEY BEHAVIORS:
- Listen carefully to what the candidate says and respond DIRECTLY to their specific answers
- Ask follow-up questions that dig deeper into what they just mentioned
- Reference specific details from their previous answers
- Keep questions short and focused (1-2 sentences max)
- Vary your question types: clarifying, behavioral, situational
- After 5-7 meaningful exchanges, naturally conclude the interview

Never ask generic questions that ignore what the candidate just said.

When concluding, thank the candidate warmly, invite any final questions and set isEndOfInterview to true.

OUTPUT FORMAT (strict JSON):
{"followUp": "...", "isEndOfInterview": false}

Respond ONLY with the JSON object.
"""


def build_opening_request(req: InterviewSessionRequest) -> str:
    """Render the user message that asks for the first question."""
    style = AVATAR_STYLES[req.avatar_type.value]
    return (
        f"Interview type: '{req.interview_type.value}'\n"
        f"Role: {req.job_description or 'Not specified'}\n"
        f"Persona: {style}\n\n"
        'Return a single JSON object with the key "firstQuestion".'
    )


def count_interviewer_turns(req: InterviewTurnRequest) -> int:
    return sum(1 for item in req.transcript if item.speaker == Speaker.AI)


def build_follow_up_request(req: InterviewTurnRequest) -> str:
    """Render the transcript and turn-count guidance for the next question."""
    lines = [
        f"You are conducting an interview for the role: {req.job_description or 'Software Engineer'}.",
        f"Persona: {AVATAR_STYLES[req.avatar_type.value]}",
        "",
        "Conversation so far:",
    ]
    for item in req.transcript:
        speaker = "Interviewer" if item.speaker == Speaker.AI else "Candidate"
        lines.append(f"{speaker}: {item.text}")

    last_answer = next(
        (item.text for item in reversed(req.transcript) if item.speaker == Speaker.USER),
        "",
    )
    question_count = count_interviewer_turns(req)

    if question_count >= WRAP_UP_AFTER:
        guidance = (
            "You have asked several questions. Consider wrapping up the interview "
            "soon with a concluding statement."
        )
    else:
        guidance = (
            "Generate a thoughtful, natural follow-up question that directly relates "
            "to what the candidate just said."
        )
    end_rule = (
        "true if you want to conclude, false to continue"
        if question_count >= MAY_END_AFTER
        else "false (continue the interview)"
    )

    lines += [
        "",
        f'Based on the candidate\'s last response: "{last_answer}"',
        "",
        guidance,
        "",
        f"Question count so far: {question_count}",
        "",
        "Return a JSON object with:",
        "- followUp: your next question or statement",
        f"- isEndOfInterview: {end_rule}",
    ]
    return "\n".join(lines)
