"""Constants for the configuration module."""

# Log component names
COMPONENT_CONFIG = "config"
COMPONENT_CLI = "cli"

# Command-line override flags
USE_CONFIG_FLAG = "--use-config"
ADD_CONFIG_FLAG = "--add-config"
DEFINE_PREFIX = "-D"

# Default primary configuration file
DEFAULT_CONFIG_FILE = "config.cfg"

# Sources reported in re-definition warnings
SOURCE_ASSIGNMENT = "assignment"
SOURCE_INCLUDE = "include"
SOURCE_OVERRIDE_FILE = "override_file"
