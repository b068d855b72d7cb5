import pytest

from prime_frames       import Frame, InvalidPathError
from prime_frames.path  import check_name, join_path, resolve, split_path


@pytest.fixture
def tree():
    root  = Frame(0, '')
    world = Frame(1, 'world', root)
    robot = Frame(2, 'robot', world)
    root.children['world']  = world
    world.children['robot'] = robot
    return root, world, robot


class TestSplitPath:
    def test_absolute(self):
        assert split_path('/world/robot') == (True, ['world', 'robot'])

    def test_relative(self):
        assert split_path('robot/arm') == (False, ['robot', 'arm'])

    def test_root(self):
        assert split_path('/') == (True, [])

    def test_custom_separator(self):
        assert split_path('.world.robot', '.') == (True, ['world', 'robot'])
        assert split_path('world/robot', '.') == (False, ['world/robot'])

    @pytest.mark.parametrize('path', ['', '//', '/world//robot', '/world/', 'world/'])
    def test_malformed(self, path):
        with pytest.raises(InvalidPathError) as e:
            split_path(path)
        assert e.value.path == path

    def test_not_a_string(self):
        with pytest.raises(InvalidPathError):
            split_path(None)


class TestCheckName:
    def test_valid(self):
        check_name('robot')
        check_name('link.0')

    @pytest.mark.parametrize('name', ['', 'a/b', '/', None])
    def test_invalid(self, name):
        with pytest.raises(InvalidPathError):
            check_name(name)


class TestResolve:
    def test_absolute(self, tree):
        root, world, robot = tree
        assert resolve(root, root, '/world/robot') is robot

    def test_absolute_ignores_start(self, tree):
        root, world, robot = tree
        assert resolve(root, robot, '/world') is world

    def test_relative(self, tree):
        root, world, robot = tree
        assert resolve(root, world, 'robot') is robot

    def test_root(self, tree):
        root, world, robot = tree
        assert resolve(root, robot, '/') is root

    def test_missing_segment(self, tree):
        root, world, robot = tree
        with pytest.raises(InvalidPathError) as e:
            resolve(root, root, '/world/missing/robot')
        assert '/world/missing' in str(e.value)

    def test_relative_does_not_start_at_root(self, tree):
        root, world, robot = tree
        with pytest.raises(InvalidPathError):
            resolve(root, world, 'world/robot')


def test_join_path():
    assert join_path([]) == '/'
    assert join_path(['world', 'robot']) == '/world/robot'
