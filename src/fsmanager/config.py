"""
Configuration loading for the file manager.

Settings come from the packaged defaults/fsmanager.yaml, merged with an
optional user fsmanager.yaml. User values win; nested mappings are merged
key by key and lists are replaced wholesale.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path

import yaml

CONFIG_FILENAME = "fsmanager.yaml"
CONFIG_ENV_VAR = "FSMANAGER_CONFIG"


class ConfigError(ValueError):
    """Raised when the merged configuration is unusable."""


@dataclass
class ContentTypeSpec:
    """A content type whose records can be linked from the editor."""

    slug: str
    name: str
    singular_slug: str
    singular_name: str
    title_field: str = "title"


@dataclass
class AppConfig:
    """Effective configuration after merging defaults with user settings."""

    root: Path
    namespaces: dict[str, Path]
    contenttypes: dict[str, ContentTypeSpec] = field(default_factory=dict)
    content_path: Path | None = None
    prefix: str = "/async"
    locale: str = "en"
    max_duplicate_attempts: int = 1000
    autocomplete_namespace: str = "files"
    autocomplete_limit: int | None = None
    host: str = "127.0.0.1"
    port: int = 8000
    cors_origins: list[str] = field(default_factory=list)
    source: Path | None = None


def get_default_config_path() -> Path:
    """Path of the configuration shipped with the package."""
    return Path(__file__).parent / "defaults" / CONFIG_FILENAME


def _load_yaml(path) -> dict:
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e
    if not isinstance(data, dict):
        raise ConfigError(f"Top level of {path} must be a mapping")
    return data


def _merge_dicts(base: dict, override: dict) -> dict:
    merged = dict(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge_dicts(merged[key], value)
        else:
            merged[key] = value
    return merged


def find_user_config(start_dir=None) -> Path | None:
    """
    Locate the user configuration file.

    Looks at the FSMANAGER_CONFIG environment variable first, then for
    fsmanager.yaml in start_dir (defaults to the working directory).
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        candidate = Path(env_path)
        if not candidate.is_file():
            raise ConfigError(f"{CONFIG_ENV_VAR} points to a missing file: {env_path}")
        return candidate

    candidate = Path(start_dir or Path.cwd()) / CONFIG_FILENAME
    if candidate.is_file():
        return candidate
    return None


def _resolve(root: Path, value) -> Path:
    path = Path(value).expanduser()
    return path if path.is_absolute() else root / path


def _build_contenttypes(raw: dict) -> dict[str, ContentTypeSpec]:
    contenttypes = {}
    for slug, spec in (raw or {}).items():
        # A null entry removes a content type declared in the defaults
        if spec is None:
            continue
        name = spec.get("name", slug.replace("_", " ").title())
        singular_slug = spec.get("singular_slug", slug.rstrip("s") or slug)
        contenttypes[slug] = ContentTypeSpec(
            slug=slug,
            name=name,
            singular_slug=singular_slug,
            singular_name=spec.get(
                "singular_name", singular_slug.replace("_", " ").title()
            ),
            title_field=spec.get("title_field", "title"),
        )
    return contenttypes


def _merge_configs(default_config: dict, user_config: dict, base_dir=None) -> AppConfig:
    """Merge raw YAML mappings and build a validated AppConfig."""
    data = _merge_dicts(default_config, user_config)

    base = Path(base_dir) if base_dir else Path.cwd()
    root = _resolve(base, data.get("root") or ".").resolve()

    namespaces = {
        str(name): _resolve(root, directory)
        for name, directory in (data.get("namespaces") or {}).items()
        if directory is not None
    }
    if not namespaces:
        raise ConfigError("At least one namespace must be configured")

    duplicate = data.get("duplicate") or {}
    max_attempts = int(duplicate.get("max_attempts", 1000))
    if max_attempts < 1:
        raise ConfigError("duplicate.max_attempts must be at least 1")

    autocomplete = data.get("autocomplete") or {}
    autocomplete_namespace = autocomplete.get("namespace", "files")
    if autocomplete_namespace not in namespaces:
        raise ConfigError(
            f"autocomplete.namespace '{autocomplete_namespace}' is not a configured namespace"
        )

    server = data.get("server") or {}
    prefix = "/" + str(data.get("prefix", "/async")).strip("/")
    content_path = data.get("content_path")

    return AppConfig(
        root=root,
        namespaces=namespaces,
        contenttypes=_build_contenttypes(data.get("contenttypes")),
        content_path=_resolve(root, content_path) if content_path else None,
        prefix="" if prefix == "/" else prefix,
        locale=str(data.get("locale", "en")),
        max_duplicate_attempts=max_attempts,
        autocomplete_namespace=autocomplete_namespace,
        autocomplete_limit=autocomplete.get("limit"),
        host=str(server.get("host", "127.0.0.1")),
        port=int(server.get("port", 8000)),
        cors_origins=list(data.get("cors_origins") or []),
    )


def load_config(config_path=None) -> AppConfig:
    """
    Load the effective configuration.

    Args:
        config_path: Explicit user config file. When omitted the file is
            discovered with find_user_config().

    Returns:
        AppConfig with every relative directory resolved against `root`.
    """
    default_config = _load_yaml(get_default_config_path())

    user_path = Path(config_path) if config_path else find_user_config()
    if user_path is None:
        return _merge_configs(default_config, {})

    if not user_path.is_file():
        raise ConfigError(f"Config file not found: {user_path}")

    config = _merge_configs(
        default_config, _load_yaml(user_path), base_dir=user_path.parent.resolve()
    )
    config.source = user_path
    return config
