# ABOUTME: Configuration loading and validation for figma-markdown.
# ABOUTME: Reads environment variables and an optional config.yaml into a dataclass.

from dataclasses import dataclass
from pathlib import Path
import os

from dotenv import load_dotenv
import yaml

from .figma.client import DEFAULT_API_BASE, DEFAULT_TIMEOUT

DEFAULT_TOKEN_ENV = "FIGMA_TOKEN"
FILE_KEY_ENV = "FIGMA_FILE_KEY"
OUTPUT_DIR_ENV = "FIGMA_OUTPUT_DIR"


class ConfigError(Exception):
    """Raised when configuration is invalid."""
    pass


@dataclass
class Config:
    """Main configuration for figma-markdown."""
    file_key: str
    token_env: str = DEFAULT_TOKEN_ENV
    output_dir: Path = Path("output")
    raw_dump_path: Path = Path("figma.json")
    api_base: str = DEFAULT_API_BASE
    request_timeout: float = DEFAULT_TIMEOUT
    strict_images: bool = False

    def __post_init__(self):
        if not self.file_key:
            raise ConfigError(f"A Figma file key is required (set {FILE_KEY_ENV} or 'file_key')")
        if self.request_timeout <= 0:
            raise ConfigError(f"request_timeout must be positive, got {self.request_timeout}")
        self.output_dir = Path(self.output_dir)
        self.raw_dump_path = Path(self.raw_dump_path)

    def get_token(self) -> str:
        """Retrieve the Figma access token from environment variable."""
        token = os.environ.get(self.token_env)
        if not token:
            raise ConfigError(f"Environment variable '{self.token_env}' not set")
        return token


def load_config(
    path: Path | None = None,
    file_key: str | None = None,
    output_dir: Path | None = None,
) -> Config:
    """Load configuration from .env, an optional YAML file and the environment.

    Explicit arguments take precedence over environment variables, which take
    precedence over the YAML file.
    """
    load_dotenv()

    raw = {}
    if path is not None:
        if not path.exists():
            raise ConfigError(f"Config file not found: {path}")

        with open(path) as f:
            try:
                raw = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise ConfigError(f"Invalid YAML in config file: {e}")

        if raw is None:
            raw = {}
        if not isinstance(raw, dict):
            raise ConfigError("Config file must contain a YAML mapping")

    file_key = file_key or os.environ.get(FILE_KEY_ENV) or raw.get("file_key", "")
    output_dir = output_dir or os.environ.get(OUTPUT_DIR_ENV) or raw.get("output_dir", "output")

    try:
        request_timeout = float(raw.get("request_timeout", DEFAULT_TIMEOUT))
    except (TypeError, ValueError):
        raise ConfigError(f"request_timeout must be a number, got {raw.get('request_timeout')!r}")

    strict_images = raw.get("strict_images", False)
    if not isinstance(strict_images, bool):
        raise ConfigError(f"strict_images must be true or false, got {strict_images!r}")

    return Config(
        file_key=file_key,
        token_env=raw.get("token_env", DEFAULT_TOKEN_ENV),
        output_dir=Path(output_dir),
        raw_dump_path=Path(raw.get("raw_dump_path", "figma.json")),
        api_base=raw.get("api_base", DEFAULT_API_BASE),
        request_timeout=request_timeout,
        strict_images=strict_images,
    )
