from __future__ import annotations

import tensorflow as tf


def gather_entries(tensor, *indices) -> tf.Tensor:
    """
    Pick one entry per batch element with a single batched gather.

    The batch range is stacked with the index vectors into (batch_size, rank)
    coordinates, then gathered in one ``tf.gather_nd`` call.

    Parameters
    ----------
    tensor : array-like
        Batched tensor of shape (batch_size, d1, d2, ...).
    *indices : array-like
        One index vector of length batch_size per spatial axis.

    Returns
    -------
    tf.Tensor
        Vector of shape (batch_size,).
    """
    params = tf.convert_to_tensor(tensor)
    batch_size = tf.shape(params, out_type=tf.int64)[0]
    coordinates = tf.stack(
        [tf.range(batch_size, dtype=tf.int64)]
        + [tf.convert_to_tensor(index, dtype=tf.int64) for index in indices],
        axis=1,
    )
    return tf.gather_nd(params, coordinates)
