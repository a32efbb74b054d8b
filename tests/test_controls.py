import pytest

from jamctl.controls import BYPASS_RED, BandAction, BypassBlinker, CrossoverControls


def test_initial_actions_are_active():
    controls = CrossoverControls()
    assert controls.actions() == [BandAction.ACTIVE] * 3


def test_solo_mutes_other_bands():
    controls = CrossoverControls()
    result = controls.set_solo(1, True)
    assert result == [BandAction.MUTE, BandAction.ACTIVE, BandAction.MUTE]
    assert controls.actions() == result


def test_soloed_band_follows_bypass():
    controls = CrossoverControls()
    controls.set_bypass(0, True)
    assert controls.set_solo(0, True) == [
        BandAction.BYPASS,
        BandAction.MUTE,
        BandAction.MUTE,
    ]


def test_release_solo_restores_bypass_states():
    controls = CrossoverControls()
    controls.set_bypass(2, True)
    controls.set_solo(0, True)
    assert controls.set_solo(0, False) == [
        BandAction.ACTIVE,
        BandAction.ACTIVE,
        BandAction.BYPASS,
    ]


def test_bypass_without_solo():
    controls = CrossoverControls()
    assert controls.set_bypass(1, True) is BandAction.BYPASS
    assert controls.set_bypass(1, False) is BandAction.ACTIVE


def test_bypass_of_muted_band_is_deferred():
    controls = CrossoverControls()
    controls.set_solo(0, True)
    assert controls.set_bypass(1, True) is BandAction.MUTE
    assert controls.set_solo(0, False)[1] is BandAction.BYPASS


def test_bypass_of_soloed_band_applies():
    controls = CrossoverControls()
    controls.set_solo(2, True)
    assert controls.set_bypass(2, True) is BandAction.BYPASS


def test_actions_returns_copy():
    controls = CrossoverControls()
    controls.actions()[0] = BandAction.MUTE
    assert controls.actions()[0] is BandAction.ACTIVE


@pytest.mark.parametrize("band", [-1, 3])
def test_band_out_of_range(band):
    controls = CrossoverControls()
    with pytest.raises(IndexError):
        controls.set_solo(band, True)
    with pytest.raises(IndexError):
        controls.set_bypass(band, True)


def test_no_bands_rejected():
    with pytest.raises(ValueError):
        CrossoverControls(0)


def test_blink_start_lights_red():
    blinker = BypassBlinker((1, 2, 3))
    assert blinker.blink(1) == BYPASS_RED
    assert BYPASS_RED == (65535, 0, 0)


def test_blink_flips_between_colours():
    normal = (10, 20, 30)
    blinker = BypassBlinker(normal)
    seq = [blinker.blink(1), blinker.blink(0), blinker.blink(0), blinker.blink(0)]
    assert seq == [BYPASS_RED, normal, BYPASS_RED, normal]


def test_blink_negative_restores_normal():
    normal = (5, 5, 5)
    blinker = BypassBlinker(normal)
    blinker.blink(1)
    assert blinker.blink(-1) == normal


def test_blink_zero_without_start_begins_normal():
    normal = (7, 8, 9)
    blinker = BypassBlinker(normal)
    assert blinker.blink(0) == normal
    assert blinker.blink(0) == BYPASS_RED