import logging

from dataclasses import dataclass
from itertools   import count
from omegaconf   import OmegaConf
from typing      import List, Union

from .config     import FrameConfig, \
                        FrameGraphConfig, \
                        load_conf
from .exceptions import FrameDeletedError, \
                        FrameNameCollisionError, \
                        IllegalFrameOperationError, \
                        InvalidPathError
from .frame      import Frame
from .geometry   import Transform
from .path       import check_name, \
                        is_absolute, \
                        join_path, \
                        resolve

logger = logging.getLogger(__name__)

_GRAPH_IDS = count()


@dataclass(frozen=True)
class FrameRef:
    """Non-owning handle to a frame of a specific graph.

    Frame ids are never reused by a graph, so a handle to a deleted frame
    stays invalid even if a new frame is later created at the same path.
    """
    graph_id : int
    frame_id : int
    path     : str

    def __str__(self):
        return self.path


@dataclass(frozen=True)
class RelativePose:
    """A resolved pair of frames, used to query their relative pose repeatedly
    without parsing paths. Only meaningful for the graph that created it.
    """
    dst : FrameRef
    src : FrameRef


class FrameGraph(object):
    """A tree of named frames and their poses relative to each other.

    The graph owns all of its frames. Callers address frames by path, or by
    FrameRef handles which are checked for liveness on every use.
    Relative paths passed to graph operations are resolved from the root.

    The graph does no locking. Concurrent use from multiple threads needs
    to be serialized by the caller.
    """
    def __init__(self, conf=None):
        """Constructs a graph containing only the root frame.

        :param conf: Configuration, see prime_frames.config.FrameGraphConfig
        :type  conf: dict, FrameGraphConfig, omegaconf.DictConfig, NoneType
        """
        self._conf = load_conf(conf)
        if len(self._conf.separator) != 1:
            raise IllegalFrameOperationError(f'Path separator needs to be a single character, got "{self._conf.separator}".')

        self._separator = self._conf.separator
        self._truncate  = self._conf.truncate_at_common_ancestor
        self._id        = next(_GRAPH_IDS)
        self._frame_ids = count()
        self._root      = Frame(next(self._frame_ids), '')
        self._frames    = {self._root.id: self._root}

        for fc in self._conf.frames:
            self.add_frame(fc.parent, fc.name, Transform(list(fc.position), list(fc.quaternion)))

        if len(self._conf.frames) > 0:
            logger.info(f'Built frame graph {self._id} with {len(self._conf.frames)} frames from configuration.')

    def __len__(self):
        return len(self._frames)

    def __repr__(self):
        return f'FrameGraph(id={self._id}, frames={len(self._frames)})'

    @property
    def separator(self):
        return self._separator

    @property
    def root(self) -> FrameRef:
        return self._ref(self._root)

    def add_frame(self, parent : Union[str, FrameRef], name : str, pose : Transform=Transform.identity()) -> FrameRef:
        """Adds a new frame to the graph.

        :param parent: Path of, or handle to, the new frame's parent
        :type  parent: str, FrameRef
        :param name:   Name of the new frame
        :type  name:   str
        :param pose:   Pose of the new frame relative to its parent
        :type  pose:   Transform
        :return: Handle to the new frame
        """
        if type(pose) != Transform:
            raise TypeError(f'Frame poses need to be of type Transform, got {type(pose)}.')

        check_name(name, self._separator)
        p_frame = self._lookup(parent)

        if name in p_frame.children:
            raise FrameNameCollisionError(f'Frame "{self._path_of(p_frame.children[name])}" already exists.',
                                          self._path_of(p_frame.children[name]))

        frame = Frame(next(self._frame_ids), name, p_frame, pose)
        p_frame.children[name] = frame
        self._frames[frame.id] = frame
        logger.debug(f'Added frame "{self._path_of(frame)}" ({frame.id}).')
        return self._ref(frame)

    def delete_frame(self, frame : Union[str, FrameRef]):
        """Removes a frame and all of its descendants.

        Handles to any of the removed frames become invalid.

        :param frame: Path of, or handle to, the frame to delete
        :type  frame: str, FrameRef
        """
        target = self._lookup(frame)
        if target is self._root:
            raise IllegalFrameOperationError('The root frame cannot be deleted.', self._separator)

        path    = self._path_of(target)
        removed = 0
        for f in target.subtree():
            del self._frames[f.id]
            removed += 1
        target.detach()
        logger.debug(f'Deleted frame "{path}" and {removed - 1} descendants.')

    def local_pose(self, frame : Union[str, FrameRef]) -> Transform:
        """Returns the pose of a frame relative to its parent.

        :type frame: str, FrameRef
        :rtype: Transform
        """
        return self._lookup(frame).local_pose

    def set_local_pose(self, frame : Union[str, FrameRef], pose : Transform):
        """Sets the pose of a frame relative to its parent.
        The local poses of its children stay the same.

        :type frame: str, FrameRef
        :type pose:  Transform
        """
        if type(pose) != Transform:
            raise TypeError(f'Frame poses need to be of type Transform, got {type(pose)}.')

        target = self._lookup(frame)
        if target is self._root:
            raise IllegalFrameOperationError('The pose of the root frame is fixed.', self._separator)
        target.local_pose = pose

    def pose(self, dst : Union[str, FrameRef, RelativePose], src : Union[str, FrameRef]=None) -> Transform:
        """Computes the pose of `dst` expressed in the frame of `src`.

        Either pass two paths or handles, or a single RelativePose.

        :rtype: Transform
        """
        if src is None:
            if type(dst) != RelativePose:
                raise TypeError(f'Expected a RelativePose or a pair of frames, got {type(dst)}.')
            return self._relative_pose(self._deref(dst.dst), self._deref(dst.src))
        return self._relative_pose(self._lookup(dst), self._lookup(src))

    def world_pose(self, frame : Union[str, FrameRef]) -> Transform:
        """Returns the pose of a frame relative to the root."""
        return self._lookup(frame).pose

    def create_relative_pose(self, dst : Union[str, FrameRef], src : Union[str, FrameRef], anchor : FrameRef=None) -> RelativePose:
        """Resolves a pair of frames once for repeated pose queries.

        :param dst:    Absolute path of, or handle to, the destination frame
        :type  dst:    str, FrameRef
        :param src:    Path of, or handle to, the source frame. Relative paths
                       are resolved from `anchor`, or the root if it is None.
        :type  src:    str, FrameRef
        :param anchor: Frame to resolve a relative `src` from
        :type  anchor: FrameRef, NoneType
        :rtype: RelativePose
        """
        if type(dst) == str and not is_absolute(dst, self._separator):
            raise InvalidPathError(f'Destination path "{dst}" needs to be absolute.', dst)

        dst_frame = self._lookup(dst)
        if type(src) == str and anchor is not None and not is_absolute(src, self._separator):
            src_frame = resolve(self._root, self._deref(anchor), src, self._separator)
        else:
            src_frame = self._lookup(src)
        return RelativePose(self._ref(dst_frame), self._ref(src_frame))

    def frame(self, frame : Union[str, FrameRef], relative_path : str=None) -> FrameRef:
        """Returns a handle to a frame.

        :param frame:         Path of the frame, or handle to start from
        :type  frame:         str, FrameRef
        :param relative_path: Path to resolve from `frame`
        :type  relative_path: str, NoneType
        :rtype: FrameRef
        """
        if relative_path is None:
            return self._ref(self._lookup(frame))

        if type(frame) != FrameRef:
            raise TypeError(f'Relative paths need to be resolved from a FrameRef, got {type(frame)}.')
        start = self._deref(frame)
        return self._ref(resolve(self._root, start, relative_path, self._separator))

    def has_frame(self, path : str) -> bool:
        try:
            resolve(self._root, self._root, path, self._separator)
        except InvalidPathError:
            return False
        return True

    def is_valid(self, handle : Union[str, FrameRef, RelativePose]) -> bool:
        """Checks whether a path, a handle, or both frames of a RelativePose, still exist."""
        if type(handle) == str:
            return self.has_frame(handle)
        if type(handle) == RelativePose:
            return self.is_valid(handle.dst) and self.is_valid(handle.src)
        if type(handle) != FrameRef:
            raise TypeError(f'Expected a path, FrameRef or RelativePose, got {type(handle)}.')
        return handle.graph_id == self._id and handle.frame_id in self._frames

    def path(self, handle : FrameRef) -> str:
        """Returns the current absolute path of a frame."""
        return self._path_of(self._deref(handle))

    def children(self, frame : Union[str, FrameRef]) -> List[str]:
        return list(self._lookup(frame).children.keys())

    def frames(self) -> List[str]:
        """Returns the absolute paths of all frames, depth first, starting with the root."""
        out   = []
        stack = [(self._root, self._separator)]
        while len(stack) > 0:
            frame, path = stack.pop()
            out.append(path)
            prefix = path if frame is self._root else path + self._separator
            stack.extend((c, prefix + n) for n, c in reversed(list(frame.children.items())))
        return out

    def conf(self) -> OmegaConf:
        """Returns a configuration from which an identical tree can be built."""
        out = FrameGraphConfig(separator=self._separator,
                               truncate_at_common_ancestor=self._truncate)
        for frame in self._root.subtree():
            if frame is self._root:
                continue
            out.frames.append(FrameConfig(parent=self._path_of(frame.parent),
                                          name=frame.name,
                                          position=list(frame.local_pose.position),
                                          quaternion=list(frame.local_pose.quaternion)))
        return OmegaConf.structured(out)

    def _relative_pose(self, dst : Frame, src : Frame) -> Transform:
        ancestor = self._common_ancestor(dst, src) if self._truncate else None
        return src.pose_in(ancestor).inv().dot(dst.pose_in(ancestor))

    def _common_ancestor(self, a : Frame, b : Frame) -> Frame:
        b_ancestors = {f.id for f in b.ancestors()}
        for f in a.ancestors():
            if f.id in b_ancestors:
                return f
        raise IllegalFrameOperationError(f'Frames {a} and {b} share no common ancestor.')

    def _lookup(self, frame : Union[str, FrameRef]) -> Frame:
        if type(frame) == FrameRef:
            return self._deref(frame)
        return resolve(self._root, self._root, frame, self._separator)

    def _deref(self, handle : FrameRef) -> Frame:
        if type(handle) != FrameRef:
            raise TypeError(f'Expected a FrameRef, got {type(handle)}.')

        if handle.graph_id != self._id:
            raise IllegalFrameOperationError(f'Handle to "{handle.path}" belongs to a different graph.', handle.path)

        try:
            return self._frames[handle.frame_id]
        except KeyError:
            raise FrameDeletedError(f'Frame "{handle.path}" has been deleted.', handle.path)

    def _ref(self, frame : Frame) -> FrameRef:
        return FrameRef(self._id, frame.id, self._path_of(frame))

    def _path_of(self, frame : Frame) -> str:
        names = [f.name for f in frame.ancestors()][:-1]
        return join_path(reversed(names), self._separator)
