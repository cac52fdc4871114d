class VcsError(Exception):
    """Base class for every failure raised by a repository operation."""


class NotFoundError(VcsError):
    pass


class AlreadyExistsError(VcsError):
    pass


class EmptyStagingError(VcsError):
    pass


class RepositoryIOError(VcsError):
    pass


class NotInitializedError(VcsError):
    pass
