# src/hoststoggle/config.py

HOSTS_FILE = "/etc/hosts"
HOSTS_FILE_MODE = 0o644

# Marker lines. The project name is substituted into the start pattern.
START_MARKER_TEMPLATE = "^#[ ]?TOGGLE[ ]+{project}$"
END_MARKER_PATTERN = "^#[ ]?END[ ]?TOGGLE$"

# Set by sudo; the first non-empty one counts as evidence of elevation.
SUDO_ENV_VARS = ("SUDO_USER", "SUDO_UID")

GREEN = "\033[0;32m"
RED = "\033[0;31m"
RESET = "\033[0m"

UNCOMMENTED_HEADER = f"{GREEN}Uncommented the following lines:{RESET}"
COMMENTED_HEADER = f"{RED}Commented the following lines:{RESET}"
