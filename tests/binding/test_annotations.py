"""Tests for marker attachment, lookup and proxy unwrapping."""
import functools
from dataclasses import dataclass
from typing import Annotated, Optional

from krazo.annotations import (
    Annotation,
    annotations_of,
    declared_type,
    field_annotations,
    find_annotation,
    has_annotation,
    merge_annotations,
)
from krazo.binding import MvcBinding
from krazo.binding.validate import KrazoValidated, KrazoValidatedScope
from krazo.params import FormParam, QueryParam
from krazo.proxy import (
    SYNTHETIC_ATTR,
    is_synthetic,
    make_proxy_class,
    synthetic,
    unwrap_proxy_class,
)


@dataclass(frozen=True)
class Size(Annotation):
    minimum: int = 0
    maximum: int = 255


@KrazoValidated(validation_scope=KrazoValidatedScope.FIELDS_ONLY)
class ProfileForm:
    nickname: Annotated[str, FormParam("nick"), Size(maximum=20)]
    age: Optional[int] = None

    @functools.cached_property
    @QueryParam("lang")
    def language(self):
        return "en"


class ExtendedProfileForm(ProfileForm):
    pass


def test_decorator_application_records_marker_on_class():
    assert annotations_of(ProfileForm) == (
        KrazoValidated(validation_scope=KrazoValidatedScope.FIELDS_ONLY),
    )


def test_markers_are_not_inherited_by_subclasses():
    assert annotations_of(ExtendedProfileForm) == ()
    assert field_annotations(ExtendedProfileForm, "nickname") == ()


def test_field_annotations_read_annotated_metadata():
    assert field_annotations(ProfileForm, "nickname") == (FormParam("nick"), Size(maximum=20))
    assert field_annotations(ProfileForm, "age") == ()
    assert field_annotations(ProfileForm, "missing") == ()


def test_markers_on_cached_property_land_on_wrapped_function():
    descriptor = vars(ProfileForm)["language"]

    assert annotations_of(descriptor) == (QueryParam("lang"),)


def test_markers_applied_above_property_attach_to_getter():
    class Form:
        @MvcBinding()
        @property
        def color(self):
            return "red"

    assert annotations_of(vars(Form)["color"].fget) == (MvcBinding(),)


def test_find_and_has_annotation_match_exact_type():
    markers = (FormParam("a"), QueryParam("b"))

    assert find_annotation(markers, QueryParam) == QueryParam("b")
    assert has_annotation(markers, FormParam) is True
    assert has_annotation(markers, Annotation) is False


def test_merge_annotations_drops_equal_duplicates_keeping_first_order():
    merged = merge_annotations(
        [MvcBinding(), FormParam("color")],
        [FormParam("color"), Size(maximum=5)],
        [MvcBinding()],
    )

    assert merged == (MvcBinding(), FormParam("color"), Size(maximum=5))


def test_declared_type_strips_annotated():
    import inspect

    assert declared_type(Annotated[str, QueryParam("q")]) is str
    assert declared_type(int) is int
    assert declared_type(inspect.Parameter.empty) is object


def test_make_proxy_class_builds_marked_subclass_without_markers():
    proxy_class = make_proxy_class(ProfileForm)

    assert issubclass(proxy_class, ProfileForm)
    assert is_synthetic(proxy_class) is True
    assert annotations_of(proxy_class) == ()
    assert unwrap_proxy_class(proxy_class) is ProfileForm


def test_unwrap_leaves_real_classes_alone():
    proxy_class = make_proxy_class(ProfileForm)

    class Subclass(proxy_class):
        pass

    assert is_synthetic(ProfileForm) is False
    assert is_synthetic(Subclass) is False
    assert unwrap_proxy_class(ProfileForm) is ProfileForm
    assert unwrap_proxy_class(Subclass) is Subclass


def test_synthetic_decorator_marks_handwritten_proxy():
    @synthetic
    class ProfileFormInterceptor(ProfileForm):
        pass

    assert vars(ProfileFormInterceptor)[SYNTHETIC_ATTR] is True
    assert unwrap_proxy_class(ProfileFormInterceptor) is ProfileForm
