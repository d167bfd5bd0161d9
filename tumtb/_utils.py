import numpy as np
import torch


def ensure_torch(x, dtype=None):
    """Converts numpy arrays and nested sequences into tensors.
    """
    if isinstance(x, np.ndarray):
        x = torch.from_numpy(x)
    elif isinstance(x, (list, tuple)):
        x = torch.tensor(x)
    if dtype is not None:
        return x.type(dtype)
    return x
