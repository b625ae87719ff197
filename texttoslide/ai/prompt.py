from __future__ import annotations


def system_prompt() -> str:
    return (
        "You are a presentation writer that produces Marp Markdown decks. "
        "Return ONLY the Marp document. "
        "No code fences, no commentary."
    )


def user_prompt(text: str, theme: str) -> str:
    return f"""
Create a Marp presentation from the text below.

Format requirements:
- Markdown (Marp)
- Theme: {theme}
- Structure: one title slide followed by as many content slides as the text needs
- Give every slide a fitting title and a short explanation
- Separate slides with a line containing only ---
- Start with a front-matter block that contains `marp: true` and `theme: {theme}`

Input text:
```
{text}
```

Output the Marp slides only. Do not wrap them in a markdown code block.
""".strip()


def deck_prompt(text: str, theme: str) -> str:
    return system_prompt() + "\n\n" + user_prompt(text, theme)
