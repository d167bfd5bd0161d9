"""Intrinsic and extrinsic camera handling.
"""
from collections import namedtuple

import numpy as np
import quaternion
import torch

from tumtb._utils import ensure_torch


class Intrinsics(namedtuple('Intrinsics', [
        'width', 'height', 'fx', 'fy', 'ox', 'oy',
        'd0', 'd1', 'd2', 'd3', 'd4', 'depth_scale'])):
    """Flat calibration record of a RGB-D sensor.

    Attributes:

        width, height (int): Image size in pixels.

        fx, fy (float): Focal lengths.

        ox, oy (float): Optical center.

        d0, d1, d2, d3, d4 (float): Distortion coefficients.

        depth_scale (float): Factor converting raw depth values into
         meters.
    """

    __slots__ = ()

    @property
    def distortion(self):
        """List[float]: The five distortion coefficients."""
        return [self.d0, self.d1, self.d2, self.d3, self.d4]

    def to_kcamera(self):
        """Converts to an intrinsic camera model.

        Returns: (:obj:`KCamera`): Pinhole camera with this record's
         focal lengths, center, distortion and image size.
        """
        return KCamera.from_params(self.fx, self.fy, (self.ox, self.oy),
                                   undist_coeff=self.distortion,
                                   image_size=(self.width, self.height))


class KCamera:
    """Intrinsic pinhole camera model.

    Attributes:

        matrix (:obj:`torch.Tensor`): A 3x3 intrinsic camera
         transformation. Converts from image's column and row
         (0..img.width and 0..img.height) to u and v in camera space.

        undist_coeff (List[float], optional): Radial distortion
         coefficients. Default is `[]`.

        image_size ((int, int), optional): Width and height of the
         produced image. Default is `None`.

    """

    def __init__(self, matrix, undist_coeff=None, image_size=None):
        self.matrix = ensure_torch(matrix)

        if undist_coeff is not None:
            self.undist_coeff = undist_coeff
        else:
            self.undist_coeff = []

        self.image_size = image_size

    @classmethod
    def from_params(cls, flen_x, flen_y, center_point,
                    undist_coeff=None, image_size=None):
        """Computes the intrinsic matrix from given focal lengths and center
        point information.

        Args:

            flen_x (float): X-axis focal length.

            flen_y (float): Y-axis focal length.

            center_point (float, float): Camera's central point on
            image space.

            undist_coeff (List[float], optional): Radial distortion
             coefficients. Default is `[]`.

            image_size ((int, int), optional): Width and height of the
             produced image. Default is `None`.

        """
        center_x, center_y = center_point
        k_trans = torch.tensor([[1.0, 0.0, center_x],
                                [0.0, 1.0, center_y],
                                [0.0, 0.0, 1.0]], dtype=torch.double)
        k_scale = torch.tensor([[flen_x, 0.0, 0.0],
                                [0.0, flen_y, 0.0],
                                [0.0, 0.0, 1.0]], dtype=torch.double)
        return cls(k_trans @ k_scale, undist_coeff, image_size)


class RTCamera:
    """Extrinsic camera wrapper.

    Attributes:

        matrix (:obj:`torch.Tensor`): A (4 x 4) matrix that transforms from camera space into world
         space. Type is double precision float.

    """

    def __init__(self, matrix=None):
        if matrix is not None:
            self.matrix = ensure_torch(matrix, dtype=torch.double)
        else:
            self.matrix = torch.eye(4, dtype=torch.double)

    @classmethod
    def create_from_pos_quat(cls, x, y, z, qw, qx, qy, qz):
        """
        Constructs from position and quaternion. The rotation is
        applied first, then the translation.

        """
        rot_mtx = quaternion.as_rotation_matrix(
            np.quaternion(qw, qx, qy, qz))

        cam_mtx = np.eye(4, dtype=np.float64)
        cam_mtx[0:3, 0:3] = rot_mtx
        cam_mtx[0:3, 3] = [x, y, z]

        return cls(cam_mtx)

    @classmethod
    def from_trajectory_entry(cls, entry):
        """Constructs from a trajectory pose, see
        :func:`tumtb.data.trajectory.to_rt_camera`.
        """
        from tumtb.data.trajectory import to_rt_camera
        return to_rt_camera(entry)

    def to_trajectory_entry(self, timestamp=0.0):
        """Converts into a trajectory pose, see
        :func:`tumtb.data.trajectory.from_rt_camera`.
        """
        from tumtb.data.trajectory import from_rt_camera
        return from_rt_camera(self, timestamp)

    @property
    def rotation_matrix(self):
        """(:obj:`torch.Tensor`): The (3 x 3) rotation part."""
        return self.matrix[:3, :3]

    @property
    def translation(self):
        """(:obj:`torch.Tensor`): The X, Y and Z translation."""
        return self.matrix[:3, 3]

    @property
    def center(self):
        """

        Returns:
            ((float, float, float)): X, Y and Z camera position.
        """
        return (self.matrix[0, 3].item(), self.matrix[1, 3].item(),
                self.matrix[2, 3].item())

    def __str__(self):
        return str(self.__dict__)

    def __repr__(self):
        return str(self.__dict__)
