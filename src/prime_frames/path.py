"""Parsing and resolution of frame paths.

A path is a sequence of frame names joined by a separator, `/` by default.
A leading separator makes the path absolute, i.e. rooted at the graph's
implicit root. `/` on its own denotes the root.
"""
from typing import List, Tuple

from .exceptions import InvalidPathError


SEPARATOR = '/'


def is_absolute(path : str, separator=SEPARATOR) -> bool:
    return path[:1] == separator


def split_path(path : str, separator=SEPARATOR) -> Tuple[bool, List[str]]:
    """Splits a path into its name segments.

    :param path:      Path to split
    :type  path:      str
    :param separator: Path separator
    :type  separator: str
    :return: Whether the path is absolute and the ordered list of names
    :rtype: tuple
    """
    if type(path) != str:
        raise InvalidPathError(f'Paths need to be strings, got {type(path)}.', path)

    if path == '':
        raise InvalidPathError('Path is empty.', path)

    absolute = is_absolute(path, separator)
    if path == separator:
        return True, []

    body     = path[1:] if absolute else path
    segments = body.split(separator)
    for s in segments:
        if s == '':
            raise InvalidPathError(f'Path "{path}" contains an empty name.', path)
        check_name(s, separator, path)
    return absolute, segments


def check_name(name : str, separator=SEPARATOR, path=None):
    """Raises an InvalidPathError if `name` cannot be used as a frame name."""
    if type(name) != str or name == '':
        raise InvalidPathError(f'Frame names need to be non-empty strings, got {name!r}.', path or name)

    if separator in name:
        raise InvalidPathError(f'Frame name "{name}" contains the path separator "{separator}".', path or name)


def join_path(names, separator=SEPARATOR) -> str:
    """Builds the absolute path of a sequence of names below the root."""
    return separator + separator.join(names)


def resolve(root, start, path : str, separator=SEPARATOR):
    """Resolves a path to a frame.

    Absolute paths are resolved from `root` regardless of `start`.

    :param root:  Root frame of the graph
    :type  root:  prime_frames.frame.Frame
    :param start: Frame relative paths are resolved from
    :type  start: prime_frames.frame.Frame
    :type  path:  str
    :rtype: prime_frames.frame.Frame
    """
    absolute, names = split_path(path, separator)
    frame = root if absolute else start

    for x, name in enumerate(names):
        if name not in frame.children:
            missing = separator.join(names[:x + 1])
            raise InvalidPathError(f'Path "{path}" cannot be resolved: '
                                   f'"{separator if absolute else ""}{missing}" does not exist.', path)
        frame = frame.children[name]
    return frame
