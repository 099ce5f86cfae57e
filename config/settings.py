# config/settings.py

# Pathfinder defaults, overridden by pathfinder.yml and command-line flags
DEFAULT_HEURISTIC = "euclidean"
ALLOW_DIAGONAL = False
ALLOW_CORNER_CUTTING = False  # Diagonal steps need both flanking cells open

# Logging
LOG_LEVEL = "INFO"
LOG_DIR = "logs"

# File name of the pathfinder settings inside the config directory
PATHFINDER_CONFIG_FILE = "pathfinder.yml"
