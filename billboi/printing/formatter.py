from __future__ import annotations
from datetime import datetime

from billboi.fetchers.base import ATTRIBUTION, MAX_STORIES, Story
from billboi.printing.masthead import MASTHEAD

RULE = "-" * 40
WRAP_WIDTH = 30

# Glyphs the printer's PC437 code page cannot render.
_PRINTABLE = str.maketrans(
    {
        "“": '"',
        "”": '"',
        "‘": "'",
        "’": "'",
        "–": "-",
        "—": "-",
        "…": "...",
    }
)


def sanitize(text: str) -> str:
    return (text or "").translate(_PRINTABLE)


def wrap_text(text: str, width: int = WRAP_WIDTH) -> list[str]:
    """Greedy word wrap: a word moves to a new line when it would push the current one past ``width``.

    Words are never split, so a single word longer than ``width`` gets a line of its own.
    """
    lines: list[str] = []
    current = ""
    for word in (text or "").split():
        candidate = f"{current} {word}" if current else word
        if current and len(candidate) > width:
            lines.append(current)
            current = word
        else:
            current = candidate
    if current:
        lines.append(current)
    return lines


def double_space(text: str) -> str:
    return "\n\n".join(text.split("\n"))


def format_date(now: datetime) -> str:
    return f"{now:%A, %B} {now.day}, {now.year}"


def format_time(now: datetime) -> str:
    hour = now.hour % 12 or 12
    return f"{hour}:{now:%M} {'AM' if now.hour < 12 else 'PM'}"


def render_story(story: Story, width: int = WRAP_WIDTH) -> str:
    parts = [
        story.section.upper() + "\n\n\n\n",
        sanitize(story.title) + "\n\n\n\n",
        "\n\n".join(wrap_text(sanitize(story.abstract), width)) + "\n\n\n\n",
    ]
    if story.byline:
        parts.append(sanitize(story.byline) + "\n\n\n\n")
    parts.append(f"\n\nRead more: {story.url}\n\n\n\n")
    return "".join(parts)


def render_print_content(stories: list[Story], now: datetime | None = None, width: int = WRAP_WIDTH) -> str:
    now = now or datetime.now()
    stories = stories[:MAX_STORIES]

    content = double_space(MASTHEAD)
    content += "\n\n" + format_date(now) + "\n\n\n\n"
    content += "\n\n" + RULE + "\n\n\n\n"

    for idx, story in enumerate(stories):
        content += render_story(story, width)
        content += "\n\n"
        if idx < len(stories) - 1:
            content += RULE + "\n\n\n\n"

    content += "\n\n\n\n"
    content += f"Printed by {ATTRIBUTION}\n\n"
    content += f"{format_time(now)}\n\n"
    content += "\n\n\n\n"
    return content


def render_font_test(size: int, cpi: int, now: datetime | None = None) -> str:
    now = now or datetime.now()
    sample = (
        "This is sample article text to test the readability of different font sizes "
        "on the Star TSP100 thermal printer. Please check if this text is clear and "
        "legible with the added line height between paragraphs."
    )
    content = "\n\n"
    content += f"FONT SIZE TEST - SIZE {size} (CPI={cpi})\n\n"
    content += "=" * 32 + "\n\n\n\n"
    content += double_space(MASTHEAD) + "\n\n"
    content += "POLITICS\n\n\n\n"
    content += "Major Headline: This Is How Headlines Will Look\n\n\n\n"
    content += "\n\n".join(wrap_text(sample, 34)) + "\n\n\n\n"
    content += "By JOHN SMITH\n\n\n\n"
    content += "Read more: https://example.com/article\n\n"
    content += RULE + "\n\n"
    content += f"Printed by {ATTRIBUTION}\n"
    content += f"Test completed: {format_time(now)}\n\n\n"
    return content
