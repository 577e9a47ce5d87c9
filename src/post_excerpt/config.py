from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings


def resolve_project_root(package_dir: Path = Path(__file__).parent) -> Path:
    """
    Source checkout (src/post_excerpt inside a tree with pyproject.toml) → checkout root.
    Installed package → current working directory.
    """
    checkout_root = package_dir.parent.parent
    if (checkout_root / "pyproject.toml").is_file():
        return checkout_root
    return Path.cwd()


project_root_path = resolve_project_root()


class Settings(BaseSettings):
    LOG_LEVEL: str = "INFO"
    LOG_PATH: str = "logs"

    EXCERPT_BLOCK_NAME: str = "core/post-excerpt"
    SINGULAR_POST_TYPE: str = "post"
    EXCERPT_EDITOR_ID: str = "excerpt"
    RENDER_FILTER_PRIORITY: int = 10

    PLUGIN_NAME: str = "Advanced Post Excerpt"
    PLUGIN_VERSION: str = "1.0.0"
    TEXT_DOMAIN: str = "advanced-post-excerpt"

    @field_validator("LOG_LEVEL")
    @classmethod
    def _upper_level(cls, v: str) -> str:
        return v.upper()

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


settings = Settings(_env_file=project_root_path / ".env")
