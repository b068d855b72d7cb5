import numpy    as np
import pybullet as pb

from dataclasses import dataclass


# Datastructure representing a vector
class Vector3(tuple):
    def __new__(cls, x, y, z):
        return super(Vector3, cls).__new__(cls, (float(x), float(y), float(z)))

    def __add__(self, other):
        return type(self)(*(np.asarray(self) + other))

    def __sub__(self, other):
        return type(self)(*(np.asarray(self) - other))

    def __mul__(self, other):
        return type(self)(*(np.asarray(self) * other))

    def __truediv__(self, other):
        return type(self)(*(np.asarray(self) / other))

    def __str__(self):
        return self.__repr__()

    def __repr__(self):
        return f'Vector3{super().__repr__()}'

    @property
    def x(self):
        return self[0]

    @property
    def y(self):
        return self[1]

    @property
    def z(self):
        return self[2]

    def norm(self):
        return np.sqrt((np.asarray(self) ** 2).sum())



# Datastructure representing a point
class Point3(Vector3):
    def __sub__(self, other):
        if type(other) == Vector3:
            return Point3(*(np.asarray(self) - other))
        return Vector3(*(np.asarray(self) - other))

    def __repr__(self):
        return f'Point3{tuple.__repr__(self)}'


# Datastructure representing a quaternion, stored as (x, y, z, w)
class Quaternion(tuple):
    def __new__(cls, x, y, z, w):
        return super(Quaternion, cls).__new__(cls, (float(x), float(y), float(z), float(w)))

    def __str__(self):
        return self.__repr__()

    def __repr__(self):
        return f'Quaternion{super().__repr__()}'

    @property
    def x(self):
        return self[0]

    @property
    def y(self):
        return self[1]

    @property
    def z(self):
        return self[2]

    @property
    def w(self):
        return self[3]

    def dot(self, other):
        if type(other) == Quaternion:
            return Quaternion(*pb.multiplyTransforms((0, 0, 0), self,
                                                     (0, 0, 0), other)[1])
        elif isinstance(other, Vector3):
            return type(other)(*pb.multiplyTransforms((0, 0, 0), self,
                                                      other, (0, 0, 0, 1))[0])
        raise TypeError(f'Cannot rotate type {type(other)}')

    def inv(self):
        return Quaternion(*pb.invertTransform((0, 0, 0), self)[1])

    def matrix(self):
        return np.asarray(pb.getMatrixFromQuaternion(self)).reshape((3, 3))

    def angle(self, other=None):
        """Rotation angle of this quaternion, or the angle between this one and `other`."""
        q = self if other is None else self.inv().dot(other)
        # q and -q encode the same rotation
        return 2 * np.arccos(np.clip(abs(q[3]), 0.0, 1.0))

    @staticmethod
    def from_euler(r, p, y):
        return Quaternion(*pb.getQuaternionFromEuler((r, p, y)))

    @staticmethod
    def from_axis_angle(axis : Vector3, angle : float):
        axis = Vector3(*axis)
        if axis.norm() <= 1e-4:
            return Quaternion.identity()

        axis /= axis.norm()
        axis *= np.sin(angle * 0.5)
        return Quaternion(*axis, np.cos(angle * 0.5))

    @staticmethod
    def identity():
        return Quaternion(0, 0, 0, 1)


# Datastructure representing a rigid transform as a Point3 and a Quaternion
@dataclass(frozen=True)
class Transform:
    position   : Point3
    quaternion : Quaternion

    def __post_init__(self):
        object.__setattr__(self, 'position', Point3(*self.position))
        object.__setattr__(self, 'quaternion', Quaternion(*self.quaternion))

    def __str__(self):
        return self.__repr__()

    def __repr__(self):
        return f'Transform({self.position}, {self.quaternion})'

    def dot(self, other):
        """Composes this transform with `other`, or applies it to a point, vector or rotation.

        `a.dot(b)` expresses `b`, given relative to `a`, in the frame `a` is relative to.
        """
        if type(other) == Transform:
            new_pose = pb.multiplyTransforms(self.position, self.quaternion,
                                             other.position, other.quaternion)
            return Transform(Point3(*new_pose[0]), Quaternion(*new_pose[1]))
        elif type(other) == Vector3:
            return Vector3(*pb.multiplyTransforms((0, 0, 0), self.quaternion,
                                                  other, (0, 0, 0, 1))[0])
        elif type(other) == Point3:
            return Point3(*pb.multiplyTransforms(self.position, self.quaternion,
                                                 other, (0, 0, 0, 1))[0])
        elif type(other) == Quaternion:
            return Quaternion(*pb.multiplyTransforms((0, 0, 0), self.quaternion,
                                                     (0, 0, 0), other)[1])
        raise TypeError(f'Cannot transform type {type(other)}')

    def inv(self):
        temp = pb.invertTransform(self.position, self.quaternion)
        return Transform(Point3(*temp[0]), Quaternion(*temp[1]))

    def relative(self, other):
        """Returns `other` expressed in this transform's frame."""
        return self.inv().dot(other)

    def matrix(self):
        out = np.eye(4)
        out[:3, 3]  = self.position
        out[:3, :3] = self.quaternion.matrix()
        return out

    def array(self):
        return np.hstack((self.position, self.quaternion))

    def almost_equal(self, other, tol=1e-5, rot_tol=1e-7):
        """Compares two transforms up to a tolerance.

        Rotations are compared by `1 - |q1 . q2|` of the normalized quaternions,
        which is `1 - cos(angle / 2)` of the rotation between them. pybullet
        returns single precision quaternions, so their norm is not exactly one.

        :param other:   Transform to compare against
        :type  other:   Transform
        :param tol:     Tolerance of the translation distance
        :type  tol:     float
        :param rot_tol: Tolerance of 1 - |q1 . q2|
        :type  rot_tol: float
        :rtype: bool
        """
        if (self.position - other.position).norm() > tol:
            return False

        q1 = np.asarray(self.quaternion)
        q2 = np.asarray(other.quaternion)
        d  = min(abs(np.dot(q1, q2)) / (np.linalg.norm(q1) * np.linalg.norm(q2)), 1.0)
        return 1.0 - d <= rot_tol

    @staticmethod
    def from_xyz_rpy(x, y, z, rr, rp, ry):
        return Transform(Point3(x, y, z), Quaternion.from_euler(rr, rp, ry))

    @staticmethod
    def from_xyz(x, y, z):
        return Transform(Point3(x, y, z), Quaternion.identity())

    @staticmethod
    def identity():
        return Transform(Point3(0, 0, 0), Quaternion.identity())
