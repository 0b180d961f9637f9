"""Quiz and scraper configuration.

A -config.json file may specify:
- source_url: page holding the word table (default: LEAP revised list)
- output_path: where the scraper writes the bundled dataset
- min_expected_records: below this count the scraper warns (default: 2000)
- cache_dir: directory for the key-value persistence store
- direction: "word_to_meaning" or "meaning_to_word"
- request_timeout / max_retries: fetch behaviour

LEAPQUIZ_SOURCE_URL and LEAPQUIZ_CACHE_DIR (environment or .env) override the file.
"""

import json
import os
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Optional

from leapquiz.common.utils import _load_env_file


CONFIG_FILENAME = "-config.json"

DEFAULT_SOURCE_URL = "https://ukaru-eigo.com/leap-modified-list/"
DEFAULT_OUTPUT_PATH = Path(__file__).parent.parent / "data" / "words.json"
DEFAULT_CACHE_DIR = Path.home() / ".leapquiz"
DIRECTIONS = ("word_to_meaning", "meaning_to_word")


@dataclass
class QuizConfig:
    """Configuration shared by the scraper and the quiz host."""
    source_url: str = DEFAULT_SOURCE_URL
    output_path: Path = field(default_factory=lambda: DEFAULT_OUTPUT_PATH)
    min_expected_records: int = 2000
    cache_dir: Path = field(default_factory=lambda: DEFAULT_CACHE_DIR)
    direction: str = "word_to_meaning"
    request_timeout: float = 20.0
    max_retries: int = 3

    def __post_init__(self):
        self.output_path = Path(self.output_path).expanduser()
        self.cache_dir = Path(self.cache_dir).expanduser()
        if self.direction not in DIRECTIONS:
            raise ValueError(f"direction must be one of {DIRECTIONS}, got '{self.direction}'")
        if self.min_expected_records < 0:
            raise ValueError("min_expected_records must not be negative")
        if self.max_retries < 1:
            raise ValueError("max_retries must be at least 1")
        if self.request_timeout <= 0:
            raise ValueError("request_timeout must be positive")


def load_config(path: Optional[Path] = None) -> QuizConfig:
    """Load configuration from a -config.json file.

    Missing file (or no path) yields defaults. Relative paths inside the file
    resolve against the file's folder. Environment overrides apply last.
    """
    _load_env_file()
    data = {}
    if path is not None and path.exists():
        with open(path, encoding="utf-8") as f:
            loaded = json.load(f)
        if not isinstance(loaded, dict):
            raise ValueError(f"{path} must contain a JSON object")
        data = loaded

    kwargs = {}
    for key in ("source_url", "min_expected_records", "direction", "request_timeout", "max_retries"):
        if key in data:
            kwargs[key] = data[key]
    for key in ("output_path", "cache_dir"):
        if key in data:
            p = Path(data[key]).expanduser()
            if not p.is_absolute() and path is not None:
                p = (path.parent / p).resolve()
            kwargs[key] = p

    env_url = os.environ.get("LEAPQUIZ_SOURCE_URL")
    if env_url:
        kwargs["source_url"] = env_url
    env_cache = os.environ.get("LEAPQUIZ_CACHE_DIR")
    if env_cache:
        kwargs["cache_dir"] = Path(env_cache)

    return QuizConfig(**kwargs)


def write_config(folder: Path, config: QuizConfig) -> Path:
    """Write a configuration file to a folder."""
    config_path = folder / CONFIG_FILENAME
    data = asdict(config)
    data["output_path"] = str(config.output_path)
    data["cache_dir"] = str(config.cache_dir)
    with open(config_path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2, ensure_ascii=False)
    return config_path
