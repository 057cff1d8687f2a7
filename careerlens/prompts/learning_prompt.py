"""Prompt template for the learning helper."""

# Keep requests within the model's context window.
MAX_MATERIAL_CHARS = 60_000

QUICK_POINTS_SYSTEM_PROMPT = """You are an AI learning assistant. Your task is to summarize the given
text content into a concise list of key bullet points.

Focus on the main concepts, definitions, formulas, and important takeaways.

OUTPUT FORMAT (strict JSON):
{"quickPoints": ["...", "..."]}

Respond ONLY with the JSON object.
"""


def build_quick_points_request(text_content: str) -> str:
    return f"Extracted Text:\n```\n{text_content[:MAX_MATERIAL_CHARS]}\n```"
