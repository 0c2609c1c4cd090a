# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
# author: Sławomir Liszniański; created: 2026-10-18
"""
Target description consumed by layout computations.

The only target property the checker needs is the pointer width: it fixes the
size of pointer-like types and bounds every Size so that offset arithmetic
cannot overflow a signed pointer-sized integer.
"""

from __future__ import annotations

import struct
from dataclasses import dataclass


# Largest alignment a type may request (matches common object-file limits).
MAX_ALIGN_LOG2 = 29


@dataclass(frozen=True)
class Target:
	"""Pointer width in bytes; everything else is derived."""

	ptr_size: int = 8

	def __post_init__(self) -> None:
		if self.ptr_size <= 0 or self.ptr_size & (self.ptr_size - 1):
			raise ValueError(f"pointer size must be a power of two, got {self.ptr_size}")

	@property
	def ptr_align(self) -> int:
		return self.ptr_size

	@property
	def word_bits(self) -> int:
		return self.ptr_size * 8

	@property
	def max_size(self) -> int:
		"""Largest valid Size: isize::MAX for this pointer width."""
		return 2 ** (self.word_bits - 1) - 1

	@property
	def max_align(self) -> int:
		return 2 ** MAX_ALIGN_LOG2


DEFAULT_TARGET = Target()


def host_target() -> Target:
	"""Return a Target matching the running interpreter's pointer width."""
	return Target(ptr_size=struct.calcsize("P"))
