# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
# author: Sławomir Liszniański; created: 2026-10-18
"""
Type model shared by the validator and the expression checker.

Types are a closed set of frozen dataclasses. Nested types are owned by value
(tuples of fields, never shared handles), so equality is structural: two types
are "the same" exactly when they compare equal.

Layout (size/alignment) is derived from structure plus the Target. The derived
values are only meaningful for types that passed `check_type`; for other
types they are computed anyway (Python ints do not overflow) but carry no
guarantee.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Tuple

from minir.core.sizes import Align, Size
from minir.core.target import DEFAULT_TARGET, Target


class Signedness(Enum):
	"""Signedness of an integer type."""

	SIGNED = auto()
	UNSIGNED = auto()


class Mutability(Enum):
	"""Mutability of a pointer or reference."""

	IMMUTABLE = auto()
	MUTABLE = auto()


@dataclass(frozen=True)
class IntType:
	"""Integer type: signedness plus size in bytes (a power of two when well-formed)."""

	signed: Signedness
	size: Size

	@property
	def bits(self) -> int:
		return self.size * 8

	def bring_in_bounds(self, value: int) -> int:
		"""Wrap `value` modulo 2**bits into this type's range."""
		modulus = 2 ** self.bits
		value %= modulus
		if self.signed is Signedness.SIGNED and value >= modulus // 2:
			value -= modulus
		return value

	def can_represent(self, value: int) -> bool:
		"""
		Same answer as `bring_in_bounds(value) == value`, but never builds
		2**bits (int sizes can be very large).
		"""
		if self.signed is Signedness.UNSIGNED:
			return value >= 0 and value.bit_length() <= self.bits
		# Signed range is [-2**(bits-1), 2**(bits-1)); ~value == -value - 1.
		magnitude = value if value >= 0 else ~value
		return magnitude.bit_length() <= self.bits - 1


@dataclass(frozen=True)
class Layout:
	"""Size/alignment pair; well-formed when size is a multiple of align."""

	size: Size
	align: Align


class Type:
	"""Base class for IR types."""

	__slots__ = ()


@dataclass(frozen=True)
class IntTy(Type):
	int_type: IntType


@dataclass(frozen=True)
class BoolTy(Type):
	pass


@dataclass(frozen=True)
class RawPtrTy(Type):
	"""Raw pointer: carries no layout information about its pointee."""

	mutbl: Mutability


@dataclass(frozen=True)
class RefTy(Type):
	"""Reference: the pointee is described only by its layout."""

	pointee: Layout
	mutbl: Mutability


@dataclass(frozen=True)
class BoxTy(Type):
	pointee: Type


def _freeze_fields(obj: object, name: str) -> None:
	# Accept lists from callers; store tuples so equality/hashing stay structural.
	object.__setattr__(obj, name, tuple(tuple(f) for f in getattr(obj, name)))


@dataclass(frozen=True)
class TupleTy(Type):
	"""
	Tuple/struct with explicit layout.

	fields: (offset, type) pairs in declaration order; offsets need not be sorted.
	"""

	fields: Tuple[Tuple[Size, Type], ...]
	size: Size
	align: Align

	def __post_init__(self) -> None:
		_freeze_fields(self, "fields")


@dataclass(frozen=True)
class ArrayTy(Type):
	elem: Type
	count: int


@dataclass(frozen=True)
class UnionTy(Type):
	"""Union: like a tuple, but fields may overlap freely."""

	fields: Tuple[Tuple[Size, Type], ...]
	size: Size

	def __post_init__(self) -> None:
		_freeze_fields(self, "fields")


@dataclass(frozen=True)
class EnumTy(Type):
	"""Enum: every variant is a full type that must fit into `size` bytes."""

	variants: Tuple[Type, ...]
	size: Size

	def __post_init__(self) -> None:
		object.__setattr__(self, "variants", tuple(self.variants))


@dataclass(frozen=True)
class PlaceType:
	"""
	Type of a place plus the alignment guaranteed at that place.

	`align` may be weaker than the type's own alignment (packed projections) or
	stronger.
	"""

	ty: Type
	align: Align


def type_size(ty: Type, target: Target = DEFAULT_TARGET) -> Size:
	"""Size in bytes of `ty`."""
	if isinstance(ty, IntTy):
		return ty.int_type.size
	if isinstance(ty, BoolTy):
		return 1
	if isinstance(ty, (RawPtrTy, RefTy, BoxTy)):
		return target.ptr_size
	if isinstance(ty, (TupleTy, UnionTy, EnumTy)):
		return ty.size
	if isinstance(ty, ArrayTy):
		return type_size(ty.elem, target) * ty.count
	raise TypeError(f"unknown type node {ty!r}")


def type_align(ty: Type, target: Target = DEFAULT_TARGET) -> Align:
	"""Intrinsic alignment of `ty`."""
	if isinstance(ty, IntTy):
		return ty.int_type.size
	if isinstance(ty, BoolTy):
		return 1
	if isinstance(ty, (RawPtrTy, RefTy, BoxTy)):
		return target.ptr_align
	if isinstance(ty, TupleTy):
		return ty.align
	if isinstance(ty, ArrayTy):
		return type_align(ty.elem, target)
	if isinstance(ty, UnionTy):
		return max((type_align(f_ty, target) for _, f_ty in ty.fields), default=1)
	if isinstance(ty, EnumTy):
		return max((type_align(v, target) for v in ty.variants), default=1)
	raise TypeError(f"unknown type node {ty!r}")


def type_layout(ty: Type, target: Target = DEFAULT_TARGET) -> Layout:
	return Layout(size=type_size(ty, target), align=type_align(ty, target))


def int_ty(size: Size, signed: bool = False) -> IntTy:
	"""Shorthand: `int_ty(4)` is u32, `int_ty(1, signed=True)` is i8."""
	return IntTy(IntType(Signedness.SIGNED if signed else Signedness.UNSIGNED, size))
