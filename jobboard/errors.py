# jobboard/errors.py


class JobBoardError(Exception):
    """ Base class for every error the job board reports to its callers. """
    code = "JOB_BOARD_ERROR"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidInput(JobBoardError):
    code = "INVALID_INPUT"


class Conflict(JobBoardError):
    code = "CONFLICT"


class AuthError(JobBoardError):
    code = "AUTH_ERROR"

    def __init__(self, message: str = "Invalid email or password"):
        super().__init__(message)


class Forbidden(JobBoardError):
    code = "FORBIDDEN"


class NotFound(JobBoardError):
    code = "NOT_FOUND"


class DuplicateApplication(JobBoardError):
    code = "DUPLICATE_APPLICATION"

    def __init__(self, message: str = "You have already applied for this job"):
        super().__init__(message)


class InvalidToken(JobBoardError):
    code = "INVALID_TOKEN"

    def __init__(self, message: str = "Invalid authentication token."):
        super().__init__(message)


class StorageError(JobBoardError):
    code = "STORAGE_ERROR"
