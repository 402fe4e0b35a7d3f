"""Tagger configuration loading."""

from __future__ import annotations

from pathlib import Path

import yaml
from pydantic import BaseModel

HASHTAG_PROMPT = """You are a marketing assistant specialized in generating hashtags for video content.

Based on the input video metadata, generate a list of 5 to 10 relevant hashtags.

**Each of the following categories must be represented by at least one hashtag:**

- Demographics
- Sector
- Emotion
- Location
- Mentioned Brands

**Instructions:**

1. Use only the values provided in each category.
2. Do not invent new hashtags. Only use values from the inputs.
3. Hashtags must be lowercase, contain no spaces, and be prefixed with `#`.
4. Do not output any explanations or category names, only return the final hashtag list.

---

**Input Example:**

Demographics: woman

Sector: beauty

Emotion: uplifting

Location: seoul

Mentioned Brands: fentybeauty

---

**Allowed Options:**

Demographics: Male, Female, 18-25, 25-34, 35-44, 45-54, 55+

Sector: Beauty, Fashion, Tech, Travel, CPG, Food & Bev, Retail

Emotion: happy/positive, exciting, relaxing, inspiring, serious, festive, calm

Location: any real-world location

Mentioned Brands: any mentioned brands in the input"""


class TaggerConfig(BaseModel):
    """Batch tagging and API client settings."""

    request_delay_seconds: float = 0.5
    page_limit: int = 10
    timeout_seconds: float = 60.0
    hashtag_prompt: str = HASHTAG_PROMPT


def get_default_config_path() -> Path:
    """Default to config/tagger.yaml relative to project root."""
    return Path(__file__).parent.parent.parent / "config" / "tagger.yaml"


def load_tagger_config(config_path: Path | None = None) -> TaggerConfig:
    """Load tagger configuration from YAML file."""
    if config_path is None:
        config_path = get_default_config_path()

    if not config_path.exists():
        return TaggerConfig()

    with open(config_path, encoding="utf-8") as f:
        data = yaml.safe_load(f)

    return TaggerConfig(**(data or {}))
