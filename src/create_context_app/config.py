"""Configuration constants for the context engineering project scaffolder.

Describes the layout of the template source: which directories and files are
copied into every new project, where the PRP templates live, and which LLM
branding files exist.
"""

# ---------------------------------------------------------------------------
# Environment variables
# ---------------------------------------------------------------------------

TEMPLATE_SOURCE_ENV = "CONTEXT_APP_TEMPLATE"
LOG_FILE_ENV = "CONTEXT_APP_LOG_FILE"


# ---------------------------------------------------------------------------
# Template layout
# ---------------------------------------------------------------------------

RULES_DIR = "Rules"
RULES_SUFFIX = ".md"

# Staged source directory renamed to the project name after copying.
STAGED_SOURCE_DIR = "src"

REQUIRED_DIRS = (".gemini", "examples", RULES_DIR)
OPTIONAL_DIRS = (STAGED_SOURCE_DIR, "tests")

REQUIRED_FILES = ("INITIAL.md", "INITIAL_EXAMPLE.md", "README.md")
OPTIONAL_FILES = (".gitattributes", ".gitignore")

PRP_TEMPLATES_DIR = (".gemini", "templates")
PRP_TEMPLATE_NAME = "prp_template.md"
PRP_VARIANT_PATTERN = "prp_template_{lang}.md"

PLACEHOLDER_TOKEN = "{{LLM_AGENT}}"


# ---------------------------------------------------------------------------
# Template source detection
# ---------------------------------------------------------------------------

# Prefix used for the temporary clone directory of a remote template source.
CLONE_DIR_PREFIX = "create-context-app-"

REMOTE_SCHEMES = ("https://", "http://", "ssh://", "git://", "file://")
