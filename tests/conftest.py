import os
import subprocess
import sys

import pytest
import yaml
from fastapi.testclient import TestClient

from fsmanager.api.main import create_app
from fsmanager.config import _load_yaml, _merge_configs, get_default_config_path

# Path to the src directory
SRC_DIR = os.path.join(os.path.dirname(__file__), "..", "src")

PAGES = [
    {"id": 1, "title": "About us", "slug": "about-us", "status": "published"},
    {"id": 2, "title": "Contact", "slug": "contact", "status": "published"},
    {"id": 3, "title": "Unfinished", "slug": "unfinished", "status": "draft"},
    {"id": 4, "title": "", "status": "published"},
]

ENTRIES = [
    {"id": 10, "title": "Hello world", "slug": "hello-world", "status": "published"},
    {"id": 11, "title": "Held back", "slug": "held-back", "status": "held"},
]


def create_dummy_file(base_dir, path, content=""):
    """Write a file below base_dir, creating parent folders."""
    full_path = os.path.join(str(base_dir), path)
    os.makedirs(os.path.dirname(full_path), exist_ok=True)
    with open(full_path, "w", encoding="utf-8") as f:
        f.write(content)
    return full_path


def make_config(base_dir, **overrides):
    """Effective config for a site rooted at base_dir."""
    return _merge_configs(
        _load_yaml(get_default_config_path()), overrides, base_dir=base_dir
    )


@pytest.fixture
def site(tmp_path):
    """A site folder with two namespaces and some content records."""
    files = tmp_path / "files"
    create_dummy_file(files, "docs/report.pdf", "%PDF-1.4")
    create_dummy_file(files, "docs/notes.txt", "notes")
    create_dummy_file(files, "images/2024/logo.png", "png")
    create_dummy_file(files, "images/banner.jpg", "jpg")
    create_dummy_file(files, ".hidden/secret.txt", "secret")
    (tmp_path / "themes" / "base").mkdir(parents=True)

    content = tmp_path / "content"
    content.mkdir()
    (content / "pages.yaml").write_text(yaml.safe_dump(PAGES), encoding="utf-8")
    (content / "entries.yaml").write_text(yaml.safe_dump(ENTRIES), encoding="utf-8")
    return tmp_path


@pytest.fixture
def config(site):
    return make_config(site)


@pytest.fixture
def client(config):
    return TestClient(create_app(config))


@pytest.fixture
def run_cli():
    """Run the fsmanager CLI in a subprocess."""

    def _run(args, cwd=None, env_overrides=None):
        cmd = [sys.executable, "-m", "fsmanager"] + args
        env = os.environ.copy()
        env["PYTHONPATH"] = SRC_DIR + os.pathsep + env.get("PYTHONPATH", "")
        env["NO_COLOR"] = "1"
        env.pop("FSMANAGER_CONFIG", None)
        env.update(env_overrides or {})
        return subprocess.run(cmd, capture_output=True, text=True, env=env, cwd=cwd)

    return _run
