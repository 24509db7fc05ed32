# src/hoststoggle/utils/privilege.py
import os
from typing import Mapping, Optional

from hoststoggle.config import SUDO_ENV_VARS

def is_super_user(environ: Optional[Mapping[str, str]] = None) -> bool:
    """True if any sudo indicator variable is set and non-empty."""
    env = os.environ if environ is None else environ
    return any(env.get(name) for name in SUDO_ENV_VARS)
