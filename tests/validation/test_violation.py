"""Tests for the ConstraintViolation record."""
from __future__ import annotations

import dataclasses

import pytest

from krazo.validation import ConstraintViolation, PropertyNode, PropertyPath


def test_violation_carries_only_the_fields_resolution_reads():
    names = [field.name for field in dataclasses.fields(ConstraintViolation)]

    assert names == [
        "message",
        "property_path",
        "invalid_value",
        "root_bean",
        "leaf_bean",
        "constraint",
    ]


def test_violation_is_immutable_and_compared_by_identity():
    path = PropertyPath.of(PropertyNode("color"))
    first = ConstraintViolation("must not be blank", path, invalid_value="")
    second = ConstraintViolation("must not be blank", path, invalid_value="")

    assert first != second
    with pytest.raises(dataclasses.FrozenInstanceError):
        first.message = "changed"
