import tomllib
from dataclasses import dataclass
from pathlib import Path

import click

from sdgdash.tui.data.types import LabelVocabulary

DEFAULT_CONFIG_DIR = Path.home() / ".sdgdash"


@dataclass(frozen=True)
class CatalogConfig:
    """In-memory representation of `config.toml`.

    Example config.toml:
      [labels]
      policies = ["Water Conservation", "Clean Energy"]
      sdgs = ["SDG 6", "SDG 7"]

      [projects]
      # Relative paths resolve against the config directory
      path = "projects.json"
    """

    vocabulary: LabelVocabulary
    projects_path: Path | None  # None = must be given on the command line


def load_config(config_dir: Path) -> CatalogConfig:
    """Load config.toml from the given directory if present; otherwise return defaults.

    Label lists that are not set fall back to the built-in vocabulary.

    Raises:
        click.ClickException: If the file is not valid TOML or has wrong types
    """
    default = LabelVocabulary.default()
    cfg_path = config_dir / "config.toml"
    if not cfg_path.exists():
        return CatalogConfig(vocabulary=default, projects_path=None)

    try:
        data = tomllib.loads(cfg_path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as e:
        raise click.ClickException(f"Invalid config file {cfg_path}: {e}") from e

    labels = _table(data, "labels", cfg_path)
    policies = _label_list(labels, "policies", cfg_path)
    sdgs = _label_list(labels, "sdgs", cfg_path)
    vocabulary = LabelVocabulary(
        policies=policies if policies is not None else default.policies,
        sdgs=sdgs if sdgs is not None else default.sdgs,
    )

    projects_path: Path | None = None
    raw_path = _table(data, "projects", cfg_path).get("path")
    if raw_path is not None:
        projects_path = Path(str(raw_path)).expanduser()
        if not projects_path.is_absolute():
            projects_path = config_dir / projects_path

    return CatalogConfig(vocabulary=vocabulary, projects_path=projects_path)


def _label_list(section: dict, key: str, cfg_path: Path) -> tuple[str, ...] | None:
    value = section.get(key)
    if value is None:
        return None
    if not isinstance(value, list):
        raise click.ClickException(f"{cfg_path}: labels.{key} must be a list of strings")
    return tuple(str(x) for x in value)


def _table(data: dict, key: str, cfg_path: Path) -> dict:
    value = data.get(key, {})
    if not isinstance(value, dict):
        raise click.ClickException(f"{cfg_path}: [{key}] must be a table")
    return value
