import numpy as np


def gather_entries_naive(tensor, *indices) -> np.ndarray:
    """
    Pick one entry per batch element by direct iteration.

    ``result[i] == tensor[i, indices[0][i], indices[1][i], ...]``

    Parameters
    ----------
    tensor : array-like
        Batched tensor of shape (batch_size, d1, d2, ...).
    *indices : array-like
        One index vector of length batch_size per spatial axis.

    Returns
    -------
    np.ndarray
        Vector of shape (batch_size,).
    """
    tensor = np.asarray(tensor)
    batch_size = tensor.shape[0]
    result = np.empty(batch_size, dtype=tensor.dtype)
    for i in range(batch_size):
        position = tuple(int(index[i]) for index in indices)
        result[i] = tensor[i][position]
    return result
