import pytest

from prime_frames import FrameGraph, Transform


@pytest.fixture
def graph():
    return FrameGraph()


@pytest.fixture
def world_graph():
    """/world, /world/a (translated), /world/a/b (rotated), /world/c"""
    g = FrameGraph()
    g.add_frame('/', 'world')
    g.add_frame('/world', 'a', Transform.from_xyz_rpy(1, 2, 0, 0, 0, 0.5))
    g.add_frame('/world/a', 'b', Transform.from_xyz_rpy(0, 0, 3, 0.3, 0, 0))
    g.add_frame('/world', 'c', Transform.from_xyz_rpy(-1, 0, 0.5, 0, 0.2, 0))
    return g


def assert_pose_equal(a, b, tol=1e-5):
    assert a.almost_equal(b, tol), f'{a} != {b}'
