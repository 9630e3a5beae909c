# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Color Form Demo: Which violations reach the binding result?

A form bean is bound from a POSTed ``color`` field. A validation engine (stubbed
here) reports a blank color and a type-level "not a good color" failure. The
demo shows how the KrazoValidated scope on the form decides which of them the
controller sees in its BindingResult and which are raised.

Run with:
    python examples/color_form_demo.py
"""

from dataclasses import dataclass

from krazo import (
    Annotation,
    BindingResult,
    ConstraintViolationError,
    FormParam,
    KrazoValidated,
    KrazoValidatedScope,
    MvcBinding,
    bind_violations,
    make_proxy_class,
)
from krazo.validation import (
    BeanNode,
    ConstraintViolation,
    MethodNode,
    ParameterNode,
    PropertyNode,
    PropertyPath,
)

GOOD_COLORS = ("red", "orange", "yellow")


@dataclass(frozen=True)
class NotBlank(Annotation):
    message: str = "color must not be blank"


@dataclass(frozen=True)
class GoodColor(Annotation):
    message: str = "That is not a good color"


def build_form_class(scope):
    @KrazoValidated(validation_scope=scope)
    @GoodColor()
    class ColorFormModel:
        def __init__(self, color_input=None):
            self._color_input = color_input

        @property
        @NotBlank()
        def color_input(self):
            return self._color_input

        @color_input.setter
        @FormParam("color")
        def color_input(self, value):
            self._color_input = value

    return ColorFormModel


class ColorController:
    def process_color_form(self, form) -> str:
        return "success.jsp"


def validate(form, controller):
    """Stand-in for the validation engine."""

    violations = []
    path_prefix = (MethodNode("process_color_form", (object,)), ParameterNode("form", 0))
    color = form.color_input
    if not color or not color.strip():
        violations.append(
            ConstraintViolation(
                message=NotBlank().message,
                property_path=PropertyPath.of(*path_prefix, PropertyNode("color_input")),
                invalid_value=color,
                root_bean=controller,
                leaf_bean=form,
            )
        )
    elif color.lower() not in GOOD_COLORS:
        violations.append(
            ConstraintViolation(
                message=GoodColor().message,
                property_path=PropertyPath.of(*path_prefix, BeanNode()),
                invalid_value=form,
                root_bean=controller,
                leaf_bean=form,
            )
        )
    return violations


def submit(scope, color):
    form_class = build_form_class(scope)
    # containers hand out generated subclasses; markers still resolve
    form = make_proxy_class(form_class)(color)
    controller = ColorController()
    binding_result = BindingResult()

    print(f"\n  scope={scope.name:<12} color={color!r}")
    try:
        bind_violations(validate(form, controller), binding_result)
    except ConstraintViolationError as e:
        print(f"    raised: {e}")
        return

    if binding_result.is_failed():
        for error in binding_result.get_all_errors():
            print(f"    binding result: param={error.param_name!r} message={error.message!r}")
    else:
        print("    success")


def main():
    print("=" * 70)
    print("Color form submissions")
    print("=" * 70)

    for scope in KrazoValidatedScope:
        submit(scope, "")
        submit(scope, "purple")
        submit(scope, "orange")

    print("\nAn explicit MvcBinding on the accessor binds regardless of scope:")
    print("  MvcBinding() ->", MvcBinding())


if __name__ == "__main__":
    main()
