"""Rule-based topic tagging for news articles.

Each article gets exactly one label. Rules are checked in a fixed priority
order and the first rule with a matching keyword wins, so text mentioning
both "openai" and "robot" is tagged GPT. Matching is un-anchored substring
containment on the case-folded text ("ml" matches inside "html" too).
"""

GPT = "GPT"
COMPUTER_VISION = "Computer Vision"
NLP = "NLP"
ROBOTICS = "Robotics"
MACHINE_LEARNING = "Machine Learning"
DEEP_LEARNING = "Deep Learning"
AI_ETHICS = "AI Ethics"
QUANTUM_COMPUTING = "Quantum Computing"

CATEGORIES: tuple[str, ...] = (
    GPT,
    COMPUTER_VISION,
    NLP,
    ROBOTICS,
    MACHINE_LEARNING,
    DEEP_LEARNING,
    AI_ETHICS,
    QUANTUM_COMPUTING,
)

ALL_TOPICS = "All"
TOPICS: tuple[str, ...] = (ALL_TOPICS, *CATEGORIES)

DEFAULT_CATEGORY = MACHINE_LEARNING

# Order matters: earlier rules shadow later ones.
CATEGORY_RULES: tuple[tuple[str, tuple[str, ...]], ...] = (
    (GPT, ("gpt", "chatgpt", "openai")),
    (COMPUTER_VISION, ("computer vision", "image recognition")),
    (NLP, ("nlp", "natural language")),
    (ROBOTICS, ("robot",)),
    (MACHINE_LEARNING, ("machine learning", "ml")),
    (DEEP_LEARNING, ("deep learning", "neural network")),
    (AI_ETHICS, ("ethic", "bias")),
    (QUANTUM_COMPUTING, ("quantum",)),
)


def classify(text: str) -> str:
    """Return the topic label for *text*, falling back to ``DEFAULT_CATEGORY``."""
    lowered = text.lower()
    for label, keywords in CATEGORY_RULES:
        if any(keyword in lowered for keyword in keywords):
            return label
    return DEFAULT_CATEGORY


def classify_article(title: str, description: str | None) -> str:
    """Classify an article from its headline and (optional) description."""
    if description:
        return classify(f"{title} {description}")
    return classify(title)
