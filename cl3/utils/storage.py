"""
Binary layout of cliffors for array and file interop.

A cliffor is stored as 8 consecutive native-endian float64 values in the
order of the full embedding:

    [a0, a1, a2, a3, a23, a31, a12, a123]

64 bytes per value, 8-byte aligned. Every variant is written in this full
form and every read reconstructs an APS, so records are interchangeable with
numpy arrays of shape (N, 8), float64 torch tensors and raw ``.bin`` files.
"""

import logging
from pathlib import Path
from typing import Iterable, List, Union

import numpy as np
import torch

from ..algebra.cliffor import Cliffor, from_components
from ..core.constants import CLIFFOR_ALIGNMENT, CLIFFOR_NBYTES, COMPONENT_ORDER, NUM_COMPONENTS

logger = logging.getLogger(__name__)

__all__ = [
    "COMPONENT_ORDER",
    "CLIFFOR_NBYTES",
    "CLIFFOR_ALIGNMENT",
    "to_bytes",
    "from_bytes",
    "to_array",
    "from_array",
    "to_tensor",
    "from_tensor",
    "save",
    "load",
]

CliffordBatch = Union[Cliffor, Iterable[Cliffor]]


def _as_list(xs: CliffordBatch) -> List[Cliffor]:
    if isinstance(xs, Cliffor):
        return [xs]
    return list(xs)


# =============================================================================
# Bytes
# =============================================================================

def to_bytes(x: Cliffor) -> bytes:
    """Serialize one cliffor to its 64-byte record."""
    return np.asarray(x.components, dtype=np.float64).tobytes()


def from_bytes(buf: bytes) -> Union[Cliffor, List[Cliffor]]:
    """
    Deserialize 64-byte records.

    Args:
        buf: A buffer whose length is a multiple of 64

    Returns:
        An APS for a single record, else a list of APS values

    Raises:
        ValueError: If the buffer length is not a multiple of 64
    """
    if len(buf) % CLIFFOR_NBYTES != 0:
        raise ValueError(
            f"Buffer length {len(buf)} is not a multiple of {CLIFFOR_NBYTES} bytes"
        )
    arr = np.frombuffer(buf, dtype=np.float64).reshape(-1, NUM_COMPONENTS)
    if arr.shape[0] == 1:
        return from_array(arr[0])
    return from_array(arr)


# =============================================================================
# numpy
# =============================================================================

def to_array(xs: CliffordBatch) -> np.ndarray:
    """
    Stack cliffors into a float64 array of shape (N, 8).

    Args:
        xs: A cliffor or an iterable of cliffors

    Returns:
        C-contiguous array, one row per cliffor
    """
    rows = [x.components for x in _as_list(xs)]
    if not rows:
        return np.zeros((0, NUM_COMPONENTS), dtype=np.float64)
    return np.ascontiguousarray(rows, dtype=np.float64)


def from_array(arr: np.ndarray) -> Union[Cliffor, List[Cliffor]]:
    """
    Rebuild cliffors from an array whose last axis holds 8 components.

    Args:
        arr: Array of shape (8,) or (..., 8)

    Returns:
        An APS for shape (8,), else a flat list of APS values in C order
    """
    arr = np.asarray(arr, dtype=np.float64)
    if arr.ndim == 0 or arr.shape[-1] != NUM_COMPONENTS:
        raise ValueError(f"Expected {NUM_COMPONENTS} components in the last axis, got shape {arr.shape}")
    if arr.ndim == 1:
        return from_components(float(c) for c in arr)
    return [from_components(float(c) for c in row) for row in arr.reshape(-1, NUM_COMPONENTS)]


# =============================================================================
# torch
# =============================================================================

def to_tensor(xs: CliffordBatch, device: Union[str, torch.device] = 'cpu') -> torch.Tensor:
    """
    Stack cliffors into a float64 tensor of shape (N, 8).

    Args:
        xs: A cliffor or an iterable of cliffors
        device: Device for the returned tensor
    """
    return torch.from_numpy(to_array(xs)).to(device)


def from_tensor(t: torch.Tensor) -> Union[Cliffor, List[Cliffor]]:
    """
    Rebuild cliffors from a tensor whose last dimension holds 8 components.

    Args:
        t: Tensor of shape (8,) or (..., 8), any float dtype or device
    """
    if t.dim() == 0 or t.shape[-1] != NUM_COMPONENTS:
        raise ValueError(f"Expected {NUM_COMPONENTS} components in the last dimension, got shape {tuple(t.shape)}")
    return from_array(t.detach().to(device='cpu', dtype=torch.float64).numpy())


# =============================================================================
# Files
# =============================================================================

def save(path: Union[str, Path], xs: CliffordBatch) -> int:
    """
    Write cliffors as consecutive 64-byte records.

    Returns:
        Number of cliffors written
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    arr = to_array(xs)
    with open(path, 'wb') as f:
        f.write(arr.tobytes())
    logger.debug(f"Wrote {arr.shape[0]} cliffors to {path}")
    return arr.shape[0]


def load(path: Union[str, Path]) -> List[Cliffor]:
    """
    Read every 64-byte record of a file.

    Raises:
        ValueError: If the file size is not a multiple of 64 bytes
    """
    path = Path(path)
    data = path.read_bytes()
    if len(data) % CLIFFOR_NBYTES != 0:
        logger.warning(f"{path} holds {len(data)} bytes, not a whole number of cliffor records")
        raise ValueError(
            f"File size {len(data)} is not a multiple of {CLIFFOR_NBYTES} bytes"
        )
    arr = np.frombuffer(data, dtype=np.float64).reshape(-1, NUM_COMPONENTS)
    logger.debug(f"Read {arr.shape[0]} cliffors from {path}")
    return from_array(arr)
