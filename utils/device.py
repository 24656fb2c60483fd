"""
Device management utilities for PyTorch.

Picks where batched feedback tensors live: CUDA (NVIDIA), MPS (Apple
Silicon), or CPU fallback. The WORDLE_DEVICE environment variable overrides
detection (tests pin it to "cpu").
"""

from typing import Optional
import os

import torch

DEVICE_ENV_VAR = "WORDLE_DEVICE"

_DEVICE_NAMES = {
    "cuda": "CUDA",
    "mps": "MPS (Apple Silicon)",
    "cpu": "CPU",
}


def _detect_device() -> torch.device:
    if torch.cuda.is_available():
        return torch.device("cuda")
    if hasattr(torch.backends, "mps") and torch.backends.mps.is_available():
        return torch.device("mps")
    return torch.device("cpu")


def get_device(preferred: Optional[str] = None) -> torch.device:
    """
    Get the compute device.

    Args:
        preferred: Explicit device string ("cpu", "cuda", "mps" or "auto").
                   Falls back to WORDLE_DEVICE, then auto-detection.

    Returns:
        torch.device: Requested device, or best available (CUDA > MPS > CPU)
    """
    choice = preferred or os.environ.get(DEVICE_ENV_VAR) or "auto"
    if choice == "auto":
        return _detect_device()
    return torch.device(choice)


def get_device_name(device: Optional[torch.device] = None) -> str:
    """
    Get human-readable device name.

    Returns:
        str: Device name (e.g., "CUDA", "MPS (Apple Silicon)", "CPU")
    """
    if device is None:
        device = get_device()
    return _DEVICE_NAMES.get(device.type, device.type.upper())
