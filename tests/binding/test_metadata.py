"""Tests for ConstraintViolationMetadata - parameter name lookup and invariants."""
from __future__ import annotations

from dataclasses import dataclass

import pytest

from krazo.binding import MvcBinding
from krazo.binding.validate import PARAM_NAME_MARKERS, ConstraintViolationMetadata
from krazo.params import (
    BeanParam,
    CookieParam,
    FormParam,
    MatrixParam,
    PathParam,
    QueryParam,
)
from krazo.validation import ConstraintViolation, PropertyNode, PropertyPath


@pytest.fixture()
def violation() -> ConstraintViolation:
    return ConstraintViolation(
        message="must not be blank",
        property_path=PropertyPath.of(PropertyNode("color")),
    )


@pytest.mark.parametrize(
    "marker",
    [
        QueryParam("color"),
        PathParam("color"),
        FormParam("color"),
        MatrixParam("color"),
        CookieParam("color"),
    ],
)
def test_each_web_parameter_marker_names_the_parameter(violation, marker):
    metadata = ConstraintViolationMetadata(violation, [MvcBinding(), marker], True)

    assert metadata.get_param_name() == "color"


def test_param_name_is_absent_without_web_parameter_marker(violation):
    metadata = ConstraintViolationMetadata(violation, [MvcBinding(), BeanParam()], True)

    assert metadata.get_param_name() is None


def test_param_name_lookup_follows_marker_table_order(violation):
    """
    GIVEN: An element carrying both a form and a query parameter marker
    WHEN: The parameter name is looked up
    THEN: The marker listed first in the lookup table wins, regardless of declaration order
    """
    metadata = ConstraintViolationMetadata(
        violation, [FormParam("form-name"), QueryParam("query-name")], False
    )

    assert [kind for kind, _ in PARAM_NAME_MARKERS][:3] == [QueryParam, PathParam, FormParam]
    assert metadata.get_param_name() == "query-name"


def test_metadata_exposes_violation_and_annotations(violation):
    metadata = ConstraintViolationMetadata(violation, [QueryParam("color")], False)

    assert metadata.violation is violation
    assert metadata.annotations == (QueryParam("color"),)
    assert metadata.mvc_bound_constraint is False
    assert metadata.get_annotation(QueryParam) == QueryParam("color")
    assert metadata.get_annotation(FormParam) is None


def test_metadata_requires_violation_and_annotations(violation):
    with pytest.raises(ValueError, match="violation"):
        ConstraintViolationMetadata(None, [], False)

    with pytest.raises(ValueError, match="annotations"):
        ConstraintViolationMetadata(violation, None, False)


@dataclass(frozen=True)
class LegacyQueryParam(QueryParam):
    """A project-specific query marker derived from the built-in one."""


def test_param_name_is_read_from_a_subclassed_marker(violation):
    """
    GIVEN: An element carrying a subclass of QueryParam
    WHEN: The parameter name is looked up
    THEN: The subclass names the parameter like QueryParam itself
    """
    metadata = ConstraintViolationMetadata(violation, [LegacyQueryParam("color")], False)

    assert metadata.get_param_name() == "color"
