#!/usr/bin/env python
import sys

from math import pi

from prime_frames import FrameGraph,        \
                         FrameDeletedError, \
                         Transform,         \
                         setup_logger


class DemoIntro(object):
    def __init__(self):
        pass

    def run(self):
        graph = FrameGraph()
        graph.add_frame('/', 'world')
        graph.add_frame('/world', 'robot', Transform.from_xyz(1, 0, 0))
        graph.add_frame('/world/robot', 'camera', Transform.from_xyz_rpy(0, 0, 0.5, 0, 0, pi * 0.5))

        print('Frames:\n  {}'.format('\n  '.join(graph.frames())))
        print(f'Camera in world: {graph.pose("/world/robot/camera", "/world")}')
        print(f'World in camera: {graph.pose("/world", "/world/robot/camera")}')


class DemoRelativePose(object):
    def __init__(self):
        pass

    def run(self):
        graph = FrameGraph()
        graph.add_frame('/', 'world')
        graph.add_frame('/world', 'table', Transform.from_xyz(2, 0, 0.8))
        graph.add_frame('/world/table', 'cup', Transform.from_xyz(0.1, 0.2, 0))
        graph.add_frame('/world', 'gripper', Transform.from_xyz(0, 0, 1.5))

        cup_in_gripper = graph.create_relative_pose('/world/table/cup', '/world/gripper')
        for x in range(5):
            graph.set_local_pose('/world/gripper', Transform.from_xyz(x * 0.5, 0, 1.5))
            print(f'Cup in gripper: {graph.pose(cup_in_gripper).position}')

        graph.delete_frame('/world/table')
        try:
            graph.pose(cup_in_gripper)
        except FrameDeletedError as e:
            print(f'Query failed after deletion: {e}')


class DemoConfig(object):
    def __init__(self):
        pass

    def run(self):
        graph = FrameGraph({'frames': [{'parent': '/', 'name': 'map'},
                                       {'parent': '/map', 'name': 'odom', 'position': [3, 1, 0]},
                                       {'parent': '/map/odom', 'name': 'base_link'}]})
        print(f'Base link in map: {graph.pose("/map/odom/base_link", "/map")}')
        print(f'Configuration:\n{graph.conf()}')


demos = {'intro': DemoIntro,
         'relative_pose': DemoRelativePose,
         'config': DemoConfig}

if __name__ == '__main__':
    setup_logger('prime_frames', 'DEBUG')

    if len(sys.argv) < 2:
        print('Name of demo to run required. Options are:\n  {}'.format('\n  '.join(sorted(demos.keys()))))
    else:
        demo = sys.argv[1]

        if demo not in demos:
            print('Unknown demo {}. Options are:\n  {}'.format(demo, '\n  '.join(sorted(demos.keys()))))
        else:
            d = demos[demo]()
            d.run()
