# src/hoststoggle/errors.py

class HostsToggleError(Exception):
    """Base class for errors the CLI reports and exits on."""

class ProjectNotFoundError(HostsToggleError):
    def __init__(self, project: str):
        self.project = project
        super().__init__(f"Project not found: {project}")

class ProjectEndNotFoundError(HostsToggleError):
    def __init__(self, project: str = ""):
        self.project = project
        message = "Project ending not found"
        super().__init__(f"{message}: {project}" if project else message)

class InvalidProjectPatternError(HostsToggleError):
    def __init__(self, project: str, reason: str):
        self.project = project
        super().__init__(f"Invalid project pattern '{project}': {reason}")
