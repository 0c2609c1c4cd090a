# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
# author: Sławomir Liszniański; created: 2026-10-18
"""
Checked Size/Align arithmetic.

Sizes and alignments are plain ints; validity is a property of the value
relative to a Target. Every helper returns None instead of producing an
out-of-range value, so callers can propagate the failure with an early
return.
"""

from __future__ import annotations

from typing import Optional

from minir.core.target import DEFAULT_TARGET, Target


Size = int  # byte count in [0, target.max_size]
Align = int  # power of two in [1, target.max_align]


def is_power_of_two(n: int) -> bool:
	return n > 0 and n & (n - 1) == 0


def size_from_bytes(n: int, target: Target = DEFAULT_TARGET) -> Optional[Size]:
	if 0 <= n <= target.max_size:
		return n
	return None


def align_from_bytes(n: int, target: Target = DEFAULT_TARGET) -> Optional[Align]:
	if is_power_of_two(n) and n <= target.max_align:
		return n
	return None


def checked_add(a: Size, b: Size, target: Target = DEFAULT_TARGET) -> Optional[Size]:
	return size_from_bytes(a + b, target)


def checked_mul(a: Size, b: int, target: Target = DEFAULT_TARGET) -> Optional[Size]:
	return size_from_bytes(a * b, target)


def max_align_for_offset(offset: Size, target: Target = DEFAULT_TARGET) -> Align:
	"""
	Largest alignment guaranteed for an address `offset` bytes past an
	arbitrarily-aligned base: the largest power of two dividing `offset`.
	Offset 0 imposes no restriction.
	"""
	if offset == 0:
		return target.max_align
	return min(offset & -offset, target.max_align)


def restrict_align_for_offset(align: Align, offset: Size, target: Target = DEFAULT_TARGET) -> Align:
	"""Alignment still guaranteed after moving `offset` bytes from an `align`-aligned place."""
	return min(align, max_align_for_offset(offset, target))
