import pytest

from rocketlog.decorators.phrasing import to_negative, to_past_tense


def test_auxiliary_is_dropped_in_past_tense():
    assert to_past_tense("will launch the rocket") == "launched the rocket"


def test_leading_verb_is_put_in_past_tense():
    assert to_past_tense("launches the rocket") == "launched the rocket"


def test_past_tense_keeps_leading_capital():
    assert to_past_tense("Will launch the rocket") == "Launched the rocket"


def test_auxiliary_after_subject():
    assert to_past_tense("the crew will launch the rocket") == "the crew launched the rocket"


def test_fuel_up_keeps_particle_and_object():
    assert to_past_tense("will fuel up the rocket") == "fueled up the rocket"


def test_text_without_verb_is_unchanged():
    assert to_past_tense("the red rocket") == "the red rocket"
    assert to_negative("the red rocket") == "the red rocket"
    assert to_past_tense("") == ""


def test_negated_past_tense():
    assert to_negative("launched the rocket") == "did not launch the rocket"


def test_negated_auxiliary():
    assert to_negative("will launch the rocket") == "will not launch the rocket"


def test_negated_fuel_up():
    assert to_negative(to_past_tense("will fuel up the rocket")) == "did not fuel up the rocket"


@pytest.mark.parametrize("rewrite", [to_past_tense, to_negative])
def test_non_string_is_rejected(rewrite):
    with pytest.raises(TypeError):
        rewrite(None)


def test_auxiliary_without_verb_is_unchanged():
    assert to_past_tense("do the launch") == "do the launch"
    assert to_negative("do the launch") == "do the launch"
