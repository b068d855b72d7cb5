from .geometry import Transform


class Frame(object):
    """A single node of a frame tree.

    A frame is owned by its parent, which stores it by name. The reference back
    to the parent is only used for walking towards the root.
    """
    def __init__(self, id, name, parent=None, local_pose=Transform.identity()):
        self._id         = id
        self._name       = name
        self._parent     = parent
        self._local_pose = local_pose
        self.children    = {}

    def __repr__(self):
        return f'Frame({self._name!r}, id={self._id})'

    @property
    def id(self):
        return self._id

    @property
    def name(self):
        return self._name

    @property
    def parent(self):
        return self._parent

    @property
    def local_pose(self) -> Transform:
        return self._local_pose

    @local_pose.setter
    def local_pose(self, pose : Transform):
        self._local_pose = pose

    @property
    def pose(self) -> Transform:
        return self.pose_in(None)

    def ancestors(self):
        """Yields this frame and all of its ancestors, ending with the root."""
        frame = self
        while frame is not None:
            yield frame
            frame = frame._parent

    def pose_in(self, ancestor) -> Transform:
        """Accumulates the local poses from this frame up to, but excluding, `ancestor`.

        Passing `None` accumulates all the way to the root, including its local pose.
        """
        out   = Transform.identity()
        frame = self
        while frame is not ancestor:
            out   = frame.local_pose.dot(out)
            frame = frame._parent
        return out

    def subtree(self):
        """Yields this frame and all of its descendants, depth first."""
        stack = [self]
        while len(stack) > 0:
            frame = stack.pop()
            yield frame
            stack.extend(reversed(list(frame.children.values())))

    def detach(self):
        """Removes this frame from its parent's children."""
        if self._parent is not None:
            del self._parent.children[self._name]
            self._parent = None
