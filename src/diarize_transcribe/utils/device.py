"""Compute device selection."""


def resolve_device(device: str) -> str:
    """Resolve 'auto' to 'cuda' when torch sees a GPU, else 'cpu'."""
    if device != "auto":
        return device

    try:
        import torch
        return "cuda" if torch.cuda.is_available() else "cpu"
    except ImportError:
        return "cpu"
