"""Models and type definitions for jikan-wrapper."""

from .types import Envelope, Result, unwrap

__all__ = ["Envelope", "Result", "unwrap"]
