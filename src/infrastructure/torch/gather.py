import torch


def gather_entries(tensor, *indices) -> torch.Tensor:
    """
    Pick one entry per batch element with advanced indexing.

    Parameters
    ----------
    tensor : array-like
        Batched tensor of shape (batch_size, d1, d2, ...).
    *indices : array-like
        One index vector of length batch_size per spatial axis.

    Returns
    -------
    torch.Tensor
        Vector of shape (batch_size,).
    """
    values = torch.as_tensor(tensor)
    batch = torch.arange(values.shape[0])
    coordinates = [torch.as_tensor(index, dtype=torch.long) for index in indices]
    return values[(batch, *coordinates)]
