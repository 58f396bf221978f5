"""
Input/Output Manager (HDF5)
Handles saving and loading named matrices to .h5 files.

Each matrix is stored as one 2-D dataset under the "matrices" group; the
dataset name is the matrix name.
"""
from __future__ import annotations

import logging
from importlib.metadata import version, PackageNotFoundError
from typing import Mapping

import h5py
import numpy as np

from matrixmath.model.matrix import Matrix

# Get module logger
logger = logging.getLogger(__name__)

try:
    LIB_VERSION = version("matrixmath")
except PackageNotFoundError:
    LIB_VERSION = "0.0.0-dev"

GROUP_NAME = "matrices"


def save_matrices(filepath: str, matrices: Mapping[str, Matrix]) -> None:
    """
    Save `matrices` to the HDF5 file `filepath`, replacing its contents.

    Args:
        filepath: Target .h5 path.
        matrices: Matrices keyed by the name they are stored under. Names must
            not contain "/", which HDF5 reads as a group separator.

    Raises:
        ValueError: If a name is invalid, or a matrix holds integers outside
            the 64-bit range.
    """
    for name in matrices:
        if not name or "/" in name:
            msg = f"Invalid matrix name '{name}': names must be non-empty and must not contain '/'."
            logger.error(msg)
            raise ValueError(msg)
    arrays = {name: _dataset_array(name, matrix) for name, matrix in matrices.items()}

    logger.info(f"Saving {len(matrices)} matrices to: {filepath}")
    try:
        with h5py.File(filepath, "w") as f:
            f.attrs["version"] = LIB_VERSION
            grp = f.create_group(GROUP_NAME)
            for name, data in arrays.items():
                grp.create_dataset(name, data=data)
                logger.debug(f"Saved matrix '{name}' ({data.shape[0]}x{data.shape[1]}).")
    except Exception as e:
        logger.exception(f"Failed to save matrices: {e}")
        raise e


def load_matrices(filepath: str) -> dict[str, Matrix]:
    """
    Load every matrix stored in the HDF5 file `filepath`.

    Raises:
        ValueError: If `filepath` is not an HDF5 file.
    """
    logger.info(f"Loading matrices from: {filepath}")
    if not h5py.is_hdf5(filepath):
        msg = f"File '{filepath}' is not a valid HDF5 file."
        logger.error(msg)
        raise ValueError(msg)

    matrices: dict[str, Matrix] = {}
    with h5py.File(filepath, "r") as f:
        if GROUP_NAME not in f:
            logger.warning(f"No '{GROUP_NAME}' group in {filepath}.")
            return matrices
        for name, item in f[GROUP_NAME].items():
            if not isinstance(item, h5py.Dataset):
                logger.warning(f"Skipping group '{name}': not a matrix dataset.")
                continue
            matrices[name] = Matrix(item[()])
    logger.info(f"Loaded {len(matrices)} matrices from: {filepath}")
    return matrices


def _dataset_array(name: str, matrix: Matrix) -> np.ndarray:
    """HDF5 has no arbitrary-precision integers: exact ints are written as int64."""
    data = matrix.to_array()
    if data.dtype != object:
        return data
    try:
        return data.astype(np.int64)
    except OverflowError:
        raise ValueError(f"Matrix '{name}' holds integers beyond the 64-bit range HDF5 can store.") from None
