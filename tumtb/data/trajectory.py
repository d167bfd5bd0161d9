"""Conversion between trajectory entries and rigid transformations.
"""
import quaternion

from tumtb.camera import RTCamera

from .entry import TrajectoryEntry


def to_rt_camera(entry):
    """Builds the camera to world transformation of a pose: rotation by
    the (qw, qx, qy, qz) quaternion followed by the (tx, ty, tz)
    translation.

    Args:

        entry (:obj:`tumtb.data.entry.TrajectoryEntry`): Pose.

    Returns: (:obj:`tumtb.camera.RTCamera`): Extrinsic camera.
    """
    return RTCamera.create_from_pos_quat(entry.tx, entry.ty, entry.tz,
                                         entry.qw, entry.qx, entry.qy, entry.qz)


def from_rt_camera(rt_cam, timestamp=0.0):
    """Extracts the translation and rotation quaternion of an extrinsic
    camera.

    Args:

        rt_cam (:obj:`tumtb.camera.RTCamera`): Extrinsic camera.

        timestamp (float, optional): The entry timestamp, it's not part
         of the transformation.

    Returns: (:obj:`tumtb.data.entry.TrajectoryEntry`): Pose with a
     unit quaternion.
    """
    rot = quaternion.from_rotation_matrix(rt_cam.rotation_matrix.numpy(),
                                          nonorthogonal=False)
    tx, ty, tz = rt_cam.translation.tolist()

    return TrajectoryEntry(timestamp, tx, ty, tz,
                           rot.x, rot.y, rot.z, rot.w)
