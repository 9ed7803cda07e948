"""Tests for stamp placer resolution."""

from codestamp.stamping.constants import PLACEHOLDER_STAMP
from codestamp.stamping.models import StampPlacerError
from codestamp.stamping.placement import (
    default_stamp_placer,
    describe_placer,
    get_stamp_placer_from_template,
    place_stamp,
    remove_default_stamp,
    resolve_stamp_placer,
)


def test_default_placer_prepends_banner():
    assert default_stamp_placer(content="body", stamp="S") == "/* @generated S */\nbody"


def test_template_replaces_every_token():
    place = get_stamp_placer_from_template("%STAMP%|%CONTENT%|%STAMP%")
    assert place(content="c", stamp="s") == "s|c|s"


def test_resolve_absent_uses_default():
    placer, error = resolve_stamp_placer(None)
    assert error is None
    assert placer is default_stamp_placer


def test_resolve_callable_as_is():
    def my_placer(content, stamp):
        return stamp + content

    placer, error = resolve_stamp_placer(my_placer)
    assert error is None
    assert placer is my_placer


def test_resolve_rejects_other_types():
    placer, error = resolve_stamp_placer(["%STAMP%"])
    assert placer is None
    assert isinstance(error, StampPlacerError)
    assert error.placer_return_value is None


def test_place_stamp_reports_template_text():
    placer, _ = resolve_stamp_placer("no stamp")
    placed, error = place_stamp(placer, "no stamp", "content")
    assert placed is None
    assert error.placer == "no stamp"
    assert error.placer_return_value == "no stamp"


def test_describe_named_function_uses_source():
    def shout(content, stamp):
        return stamp

    assert describe_placer(shout).startswith("def shout(content, stamp):")


def test_remove_default_stamp():
    content = f"/* @generated {PLACEHOLDER_STAMP} */\nhello"
    assert remove_default_stamp(content) == "hello"

    custom = f"// {PLACEHOLDER_STAMP}\nhello"
    assert remove_default_stamp(custom) == custom
