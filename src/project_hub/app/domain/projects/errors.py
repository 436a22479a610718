class ProjectValidationError(ValueError):
    """Raised when a title, description or status value is rejected."""
    pass


class ProjectNotFound(Exception):
    def __init__(self, project_id: str):
        super().__init__(f"Project with id {project_id} not found.")
        self.project_id = project_id


class ProjectOperationFailed(Exception):
    operation = "process project"

    def __init__(self, reason: str):
        super().__init__(f"Failed to {self.operation}: {reason}")
        self.reason = reason


class FailedToCreateProject(ProjectOperationFailed):
    operation = "create project"


class FailedToUpdateProject(ProjectOperationFailed):
    operation = "update project"


class FailedToGetProject(ProjectOperationFailed):
    operation = "get project"


class FailedToListProjects(ProjectOperationFailed):
    operation = "list projects"


class FailedToDeleteProject(ProjectOperationFailed):
    operation = "delete project"
