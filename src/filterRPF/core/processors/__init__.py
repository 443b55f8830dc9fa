"""Core processing modules for filterRPF."""

from .frames import count_frames
from .periodicity import accepted_lengths, evaluate_periodicity
from .selector import select_lengths

__all__ = ["count_frames", "accepted_lengths", "evaluate_periodicity", "select_lengths"]
