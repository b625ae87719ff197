from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

# Shared credentials for agent skills; never overrides the local .env.
_GLOBAL_ENV = Path.home() / ".claude" / ".env"
if _GLOBAL_ENV.exists():
    load_dotenv(_GLOBAL_ENV)


@dataclass(frozen=True)
class Settings:
    # --- AI provider configuration ---
    # AI_PROVIDER can be: auto | gemini | openai
    ai_provider: str = os.getenv("AI_PROVIDER", "auto").strip().lower()

    gemini_api_key: str | None = (
        os.getenv("GEMINI_API_KEY") or os.getenv("NANOBANANA_GEMINI_API_KEY") or None
    )
    gemini_model: str = (
        os.getenv("GEMINI_MODEL") or os.getenv(
            "NANOBANANA_MODEL") or "gemini-2.0-flash-exp"
    )

    openai_api_key: str | None = os.getenv("OPENAI_API_KEY") or None
    openai_model: str = os.getenv("OPENAI_MODEL", "gpt-4o-mini")

    # SLIDE_STRATEGY can be: auto | model | deterministic
    strategy: str = os.getenv("SLIDE_STRATEGY", "auto").strip().lower()

    # --- Rendering ---
    default_theme: str = os.getenv("MARP_THEME", "default")

    # --- Downstream prompt derivation ---
    prompt_tool: str = os.getenv("PROMPT_TOOL", "node")
    prompt_script: str = os.getenv(
        "PROMPT_SCRIPT", "scripts/marp_to_prompts.js")

    log_level: str = os.getenv("LOG_LEVEL", "INFO").strip().upper()


settings = Settings()
