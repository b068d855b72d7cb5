class FrameException(Exception):
    """Base class of all errors raised by a FrameGraph.

    :param msg:  Human readable description
    :type  msg:  str
    :param path: Path or handle path the error refers to
    :type  path: str, NoneType
    """
    def __init__(self, msg, path=None):
        super(FrameException, self).__init__(msg)
        self.path = path


class InvalidPathError(FrameException):
    """A path does not resolve against the current tree, or is malformed."""
    pass


class FrameNameCollisionError(FrameException):
    """The parent frame already has a child of the requested name."""
    pass


class FrameDeletedError(FrameException):
    """A handle refers to a frame which has been removed from its graph."""
    pass


class IllegalFrameOperationError(FrameException):
    """The operation would break the single-rooted tree, e.g. deleting the root."""
    pass
