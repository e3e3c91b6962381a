"""Prompt templates for the study flows."""

from typing import Literal

SummaryDepth = Literal["brief", "detailed", "comprehensive"]
ResearchDepth = Literal["light", "medium", "deep"]

_PLAIN_TEXT_RULE = (
    "CRITICAL INSTRUCTION: You must NOT use asterisks (*) anywhere in your response. "
    "Do not use any markdown formatting symbols like asterisks (*), underscores (_), "
    "hashtags (#), or other formatting characters. Provide only plain text"
)

_SUMMARY_DEPTHS: dict[str, str] = {
    "brief": (
        "Provide a brief summary focusing only on the most essential points. "
        "Keep it to 1-2 paragraphs maximum. Highlight only the key takeaways."
    ),
    "detailed": (
        "Provide a detailed summary covering the main points and key concepts. "
        "Aim for 3-5 paragraphs with good coverage of important information."
    ),
    "comprehensive": (
        "Provide a comprehensive summary with in-depth analysis, examples, and detailed "
        "explanations. Aim for 5+ paragraphs with thorough coverage of all aspects."
    ),
}

_RESEARCH_DEPTHS: dict[str, dict[str, str]] = {
    "light": {
        "length": "2-3 pages",
        "sources": "3-5 reliable sources",
        "detail": "basic overview with key concepts",
    },
    "medium": {
        "length": "4-6 pages",
        "sources": "8-12 authoritative sources",
        "detail": "detailed analysis with examples and case studies",
    },
    "deep": {
        "length": "7+ pages",
        "sources": "15+ comprehensive sources",
        "detail": (
            "comprehensive study with multiple perspectives, historical context, "
            "and future implications"
        ),
    },
}


def summary_prompt(content: str, depth: SummaryDepth) -> str:
    return (
        f"You are a helpful study assistant. {_SUMMARY_DEPTHS[depth]} Summarize the given content "
        "into clear, educational notes that are easy to understand and remember.\n\n"
        f"{_PLAIN_TEXT_RULE} with simple dashes (-) for bullet points if needed.\n\n"
        f"Content to summarize:\n{content}\n\n"
        "Please provide a clear, well-structured summary that highlights the main points and key "
        f"information according to the {depth} level requested. If multiple notes are provided, "
        "synthesize the information across all sources to create a cohesive summary."
    )


def translation_prompt(text: str, language: str) -> str:
    return (
        "You are a professional translator. Translate the given text accurately and naturally "
        f"into {language}. Maintain the original meaning and context while ensuring the "
        "translation sounds natural in the target language.\n\n"
        f"{_PLAIN_TEXT_RULE}.\n\n"
        f"Text to translate:\n{text}\n\n"
        "Please provide only the translation without any additional commentary, explanation, "
        "or formatting symbols."
    )


def revision_notes_prompt(text: str) -> str:
    return (
        "You are an expert study coach. Create comprehensive revision notes from the given text. "
        "Include key concepts, definitions, examples, and study tips. Format the notes in a "
        "clear, structured way that's perfect for revision and exam preparation.\n\n"
        f"{_PLAIN_TEXT_RULE} with simple dashes (-) for bullet points.\n\n"
        f"Text to create revision notes from:\n{text}\n\n"
        "Please create detailed, well-organized revision notes that include:\n"
        "- Key concepts and main ideas\n"
        "- Important definitions\n"
        "- Relevant examples\n"
        "- Study tips and memory aids\n"
        "- Summary points for quick review"
    )


def mind_map_prompt(text: str) -> str:
    return (
        "Create a comprehensive, educational mind map from the following text. The mind map "
        "should help students understand the topic structure and relationships clearly. "
        "Return ONLY a valid JSON object with this exact structure:\n\n"
        '{"nodes": [{"id": "central", "label": "Main Topic", "type": "central", "level": 0, '
        '"description": "Brief description"}, '
        '{"id": "node1", "label": "Primary Concept 1", "type": "primary", "level": 1, '
        '"description": "Key details"}, '
        '{"id": "sub1", "label": "Sub-concept 1.1", "type": "secondary", "level": 2, '
        '"description": "Specific details"}, '
        '{"id": "example1", "label": "Example/Application", "type": "example", "level": 3, '
        '"description": "Real-world example"}], '
        '"edges": [{"source": "central", "target": "node1", "relationship": "main_topic"}, '
        '{"source": "node1", "target": "sub1", "relationship": "includes"}, '
        '{"source": "sub1", "target": "example1", "relationship": "example_of"}]}\n\n'
        "GUIDELINES:\n"
        "1. Create 3-5 primary concepts (level 1) branching from the central topic\n"
        "2. Add 2-3 secondary concepts (level 2) under each primary concept\n"
        "3. Include specific examples, applications, or details (level 3) where relevant\n"
        "4. Use clear, educational labels and brief descriptions\n"
        "5. Show relationships between concepts with meaningful edge labels\n\n"
        f"Text to create mind map from:\n{text}\n\n"
        "Return only the JSON object without any additional formatting or explanation."
    )


def research_prompt(topic: str, depth: ResearchDepth) -> str:
    config = _RESEARCH_DEPTHS[depth]
    return (
        f'Create a comprehensive educational research report on "{topic}".\n\n'
        "Requirements:\n"
        f"- Length: {config['length']}\n"
        f"- Detail Level: {config['detail']}\n"
        f"- Sources: {config['sources']}\n"
        "- Format: Academic-style report with clear sections\n"
        "- Focus: Educational content suitable for students\n\n"
        f"{_PLAIN_TEXT_RULE} with simple dashes (-) for bullet points if needed.\n\n"
        "Structure the report with:\n"
        "1. Executive Summary\n"
        "2. Introduction and Background\n"
        "3. Main Concepts and Key Points\n"
        "4. Examples and Case Studies\n"
        "5. Current Applications and Relevance\n"
        "6. Future Implications and Trends\n"
        "7. Conclusion and Key Takeaways"
    )


def video_summary_prompt() -> str:
    return (
        "Summarize this educational video in a comprehensive, educational format. Focus on key "
        "concepts, main points, and learning outcomes. Make it suitable for students.\n\n"
        f"{_PLAIN_TEXT_RULE} with simple dashes (-) for bullet points if needed."
    )


def title_prompt(kind: str, excerpt: str, context: str = "") -> str:
    """Ask for a short title for a generated *kind* (e.g. "educational summary")."""
    extra = f"\n{context}" if context else ""
    return (
        f"Create a concise, descriptive title (max 60 characters) for this {kind}. Focus on the "
        "main topic or subject matter. Make it clear and informative for students:\n\n"
        f"{excerpt}...{extra}\n\n"
        "Provide only the title, no quotes or extra text."
    )
