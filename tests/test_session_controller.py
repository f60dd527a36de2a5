from __future__ import annotations

import copy
import logging
import math

import pytest

from complexplane.config import COLOR_INITIAL, COLOR_MULTIPLIER, COLOR_PRODUCT, COLOR_ROTATED
from complexplane.model.arithmetic import ComplexNumber
from complexplane.model.errors import InvalidNumericInput
from complexplane.model.state import DEFAULT_INPUTS, Action, Field, FormState, Output


def _snapshot(controller):
    return (
        controller.session.current,
        copy.deepcopy(controller.form),
        list(controller.renderer.surface.calls),
    )


def test_initial_state_after_reset(controller) -> None:
    form = controller.form
    assert not controller.session.is_set
    assert form.inputs == DEFAULT_INPUTS
    assert form.enabled[Field.REAL] and form.enabled[Action.CONFIRM_COMPLEX]
    assert not form.enabled[Field.ANGLE] and not form.enabled[Field.MULTIPLIER_REAL]
    assert form.focus is Field.REAL


def test_confirm_sets_session_and_unlocks_operations(controller) -> None:
    controller.confirm("1", "1")
    form = controller.form

    assert controller.session.current == ComplexNumber(1.0, 1.0)
    assert form.outputs[Output.INITIAL] == "1.00 + 1.00i"
    assert all(form.outputs[o] == "" for o in Output if o is not Output.INITIAL)

    for key in (Field.ANGLE, Field.MULTIPLIER_REAL, Field.MULTIPLIER_IMAG,
                Action.CONFIRM_ROTATE, Action.CONFIRM_MULTIPLY):
        assert form.enabled[key]
    for key in (Field.REAL, Field.IMAG, Action.CONFIRM_COMPLEX):
        assert not form.enabled[key]
    assert form.focus is Field.ANGLE


def test_confirm_redraws_axes_and_initial_vector(controller) -> None:
    controller.confirm("1", "1")
    surface = controller.renderer.surface
    assert surface.calls[0] == ("clear",)
    assert surface.colors() - {"#ccc"} == {COLOR_INITIAL}
    assert "z = 1.00 + 1.00i" in surface.texts()


def test_confirm_clears_previous_outputs(controller) -> None:
    controller.confirm("1", "1")
    controller.multiply("2", "0")
    controller.confirm("0.5", "-2")
    assert controller.form.outputs[Output.PRODUCT] == ""
    assert controller.form.outputs[Output.INITIAL] == "0.50 + -2.00i"


def test_rotate_by_ninety_degrees(controller) -> None:
    controller.confirm("1", "1")
    controller.renderer.surface.calls.clear()

    rotated = controller.rotate("90")

    assert rotated.real == pytest.approx(-1.0)
    assert rotated.imag == pytest.approx(1.0)
    assert controller.form.outputs[Output.ROTATED] == "-1.00 + 1.00i"
    assert controller.form.outputs[Output.ROTATION_ANGLE] == "90.0° (1.57 rad)"

    surface = controller.renderer.surface
    assert surface.calls[0] == ("clear",)
    assert {COLOR_INITIAL, COLOR_ROTATED} <= surface.colors()
    assert len(surface.of_kind("polyline")) == 1


def test_rotate_arc_uses_initial_magnitude(controller) -> None:
    controller.confirm("3", "4")
    controller.rotate("30")
    (_, points, _, _, _), = controller.renderer.surface.of_kind("polyline")
    assert points[0] == pytest.approx((300 + 5 * 40, 300))


def test_rotate_relocks_angle_and_keeps_session(controller) -> None:
    controller.confirm("1", "1")
    controller.rotate("45")
    form = controller.form

    assert controller.session.current == ComplexNumber(1.0, 1.0)
    assert not form.enabled[Field.ANGLE] and not form.enabled[Action.CONFIRM_ROTATE]
    assert form.enabled[Field.REAL] and form.enabled[Action.CONFIRM_COMPLEX]
    assert form.enabled[Field.MULTIPLIER_REAL]
    assert form.focus is Field.REAL

    # Session survives for a further multiply
    assert controller.multiply("0", "1") == ComplexNumber(-1.0, 1.0)


def test_multiply_by_i(controller) -> None:
    controller.confirm("1", "1")
    controller.rotate("45")
    enabled_before = dict(controller.form.enabled)
    controller.renderer.surface.calls.clear()

    product = controller.multiply("0", "1")

    assert product == ComplexNumber(-1.0, 1.0)
    form = controller.form
    assert form.outputs[Output.PRODUCT] == "-1.00 + 1.00i"
    assert form.outputs[Output.MULTIPLIER] == "0.00 + 1.00i"
    assert form.outputs[Output.ROTATED] == ""
    assert form.outputs[Output.ROTATION_ANGLE] == ""
    assert form.enabled == enabled_before

    surface = controller.renderer.surface
    assert {COLOR_INITIAL, COLOR_MULTIPLIER, COLOR_PRODUCT} <= surface.colors()
    assert surface.of_kind("polyline") == []


def test_zero_multiplier_is_not_drawn(controller) -> None:
    controller.confirm("1", "1")
    controller.renderer.surface.calls.clear()
    controller.multiply("0", "0")

    colors = controller.renderer.surface.colors()
    assert COLOR_MULTIPLIER not in colors
    assert COLOR_PRODUCT in colors
    assert controller.form.outputs[Output.PRODUCT] == "0.00 + 0.00i"


def test_multiply_can_repeat(controller) -> None:
    controller.confirm("2", "0")
    controller.multiply("0", "1")
    assert controller.multiply("3", "0") == ComplexNumber(6.0, 0.0)
    assert controller.form.outputs[Output.PRODUCT] == "6.00 + 0.00i"


def test_invalid_confirm_changes_nothing(controller) -> None:
    before = _snapshot(controller)
    with pytest.raises(InvalidNumericInput) as exc_info:
        controller.confirm("abc", "1")
    assert exc_info.value.fields == ("real",)
    assert exc_info.value.message == "请输入有效的实部和虚部！"
    assert _snapshot(controller) == before
    assert not controller.session.is_set


def test_invalid_confirm_reports_both_fields(controller) -> None:
    with pytest.raises(InvalidNumericInput) as exc_info:
        controller.confirm("", "x")
    assert exc_info.value.fields == ("real", "imag")


def test_invalid_angle_changes_nothing(controller, caplog) -> None:
    controller.confirm("1", "1")
    before = _snapshot(controller)
    with caplog.at_level(logging.WARNING, logger="complexplane"):
        with pytest.raises(InvalidNumericInput):
            controller.rotate("ninety")
    assert _snapshot(controller) == before
    assert "Invalid rotation angle" in caplog.text


def test_invalid_multiplier_changes_nothing(controller) -> None:
    controller.confirm("1", "1")
    before = _snapshot(controller)
    with pytest.raises(InvalidNumericInput) as exc_info:
        controller.multiply("1", "i")
    assert exc_info.value.fields == ("multiplier_imag",)
    assert _snapshot(controller) == before


@pytest.mark.parametrize("operation", [
    lambda c: c.rotate("45"),
    lambda c: c.multiply("0", "1"),
])
def test_operations_rejected_while_unset(controller, operation) -> None:
    before = _snapshot(controller)
    with pytest.raises(InvalidNumericInput) as exc_info:
        operation(controller)
    assert exc_info.value.message == "请先确定初始复数！"
    assert _snapshot(controller) == before


def test_reset_restores_everything(controller) -> None:
    controller.form.inputs.update({Field.REAL: "7", Field.ANGLE: "-30", Field.MULTIPLIER_IMAG: "2"})
    controller.confirm("7", "1")
    controller.rotate("-30")
    controller.multiply("0", "2")
    controller.renderer.surface.calls.clear()

    controller.reset()

    assert controller.form == FormState()
    assert controller.form.inputs == {
        Field.REAL: "1", Field.IMAG: "1", Field.ANGLE: "45",
        Field.MULTIPLIER_REAL: "0", Field.MULTIPLIER_IMAG: "1",
    }
    assert not controller.session.is_set
    surface = controller.renderer.surface
    assert surface.calls[0] == ("clear",)
    assert surface.colors() == {"#ccc"}


def test_reset_is_idempotent(controller) -> None:
    controller.confirm("2", "3")
    controller.reset()
    once = _snapshot(controller)
    controller.renderer.surface.calls.clear()
    controller.reset()
    twice = _snapshot(controller)

    assert once[0] == twice[0]
    assert once[1] == twice[1]
    # Same scene drawn both times
    assert once[2][-len(twice[2]):] == twice[2]


def test_actions_are_logged(controller, caplog) -> None:
    with caplog.at_level(logging.INFO, logger="complexplane"):
        controller.confirm("1", "0")
        controller.rotate("180")
    assert "Confirmed initial complex number 1.00 + 0.00i" in caplog.text
    assert math.isclose(controller.session.current.magnitude, 1.0)
    assert "-1.00 + 0.00i" in caplog.text


@pytest.mark.parametrize("angle_text", ["1e20", "1e300", "-720"])
def test_rotate_by_huge_angle_completes(controller, angle_text) -> None:
    controller.confirm("1", "1")
    controller.renderer.surface.calls.clear()

    rotated = controller.rotate(angle_text)

    assert rotated.magnitude == pytest.approx(math.sqrt(2))
    surface = controller.renderer.surface
    (_, points, _, _, _), = surface.of_kind("polyline")
    assert len(points) <= 181
    assert controller.form.outputs[Output.ROTATED] != ""
    assert controller.form.outputs[Output.ROTATION_ANGLE].startswith(
        f"{float(angle_text):.1f}°"
    )
    assert not controller.form.enabled[Field.ANGLE]


def test_multiply_leaves_focus_alone(controller) -> None:
    controller.confirm("1", "1")
    assert controller.form.focus is Field.ANGLE

    controller.multiply("0", "1")

    assert controller.form.focus is None
    controller.reset()
    assert controller.form.focus is Field.REAL
