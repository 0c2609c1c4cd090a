# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
# author: Sławomir Liszniański; created: 2026-10-18
"""
Core building blocks: target description, checked size arithmetic, types.
"""

from .target import DEFAULT_TARGET, Target, host_target
from .sizes import (
	Align,
	Size,
	align_from_bytes,
	checked_add,
	checked_mul,
	is_power_of_two,
	max_align_for_offset,
	restrict_align_for_offset,
	size_from_bytes,
)
from .types_core import (
	ArrayTy,
	BoolTy,
	BoxTy,
	EnumTy,
	IntTy,
	IntType,
	Layout,
	Mutability,
	PlaceType,
	RawPtrTy,
	RefTy,
	Signedness,
	TupleTy,
	Type,
	UnionTy,
	int_ty,
	type_align,
	type_layout,
	type_size,
)

__all__ = [
	"DEFAULT_TARGET",
	"Target",
	"host_target",
	"Align",
	"Size",
	"align_from_bytes",
	"checked_add",
	"checked_mul",
	"is_power_of_two",
	"max_align_for_offset",
	"restrict_align_for_offset",
	"size_from_bytes",
	"ArrayTy",
	"BoolTy",
	"BoxTy",
	"EnumTy",
	"IntTy",
	"IntType",
	"Layout",
	"Mutability",
	"PlaceType",
	"RawPtrTy",
	"RefTy",
	"Signedness",
	"TupleTy",
	"Type",
	"UnionTy",
	"int_ty",
	"type_align",
	"type_layout",
	"type_size",
]
