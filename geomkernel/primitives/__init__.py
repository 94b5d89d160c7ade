from geomkernel.primitives.vector import Vector2d, Vector3d, Vector4d
from geomkernel.primitives.direction import Direction2d, Direction3d
from geomkernel.primitives.point import Point2d, Point3d, Point4d
from geomkernel.primitives.axis import Axis2d, Axis3d
from geomkernel.primitives.plane import Plane3d
from geomkernel.primitives.sketch_plane import SketchPlane3d
from geomkernel.primitives.frame import Frame2d, Frame3d
from geomkernel.primitives.bounding_box import BoundingBox2d, BoundingBox3d

__all__ = [
    'Vector2d', 'Vector3d', 'Vector4d',
    'Direction2d', 'Direction3d',
    'Point2d', 'Point3d', 'Point4d',
    'Axis2d', 'Axis3d',
    'Plane3d',
    'SketchPlane3d',
    'Frame2d', 'Frame3d',
    'BoundingBox2d', 'BoundingBox3d',
]
