from .geometry    import Point3, \
                         Vector3, \
                         Quaternion, \
                         Transform

from .exceptions  import FrameException, \
                         InvalidPathError, \
                         FrameNameCollisionError, \
                         FrameDeletedError, \
                         IllegalFrameOperationError

from .config      import FrameConfig, \
                         FrameGraphConfig

from .frame       import Frame
from .frame_graph import FrameGraph, \
                         FrameRef, \
                         RelativePose

from .utils       import setup_logger
