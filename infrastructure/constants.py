from pathlib import Path

# Tag vocabulary understood out of the box
INCLUDE_TAG = "!include"
INCLUDE_DIR_NAMED_TAG = "!include_dir_named"

# Repo-root conventional directories/files (overrideable from the command line)
CONFIG_DIR = Path("configs")
LOADER_CONFIG_FILE = CONFIG_DIR / "loader.yaml"

EXAMPLES_DIR = Path("examples")
EXAMPLE_DOCUMENT = EXAMPLES_DIR / "site.yaml"
