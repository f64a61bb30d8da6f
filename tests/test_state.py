from patternkit.state import OffState, OnState, Switch, main


def test_on_switch_stays_on():
    switch = Switch(OnState())
    assert switch.on() == "Switch already On"
    assert isinstance(switch.state, OnState)


def test_on_switch_turns_off():
    switch = Switch(OnState())
    assert switch.off() == "Switch return from On to Off"
    assert isinstance(switch.state, OffState)


def test_off_switch_behaviour():
    switch = Switch(OffState())
    assert switch.off() == "Switch already Off"
    assert switch.on() == "Switch return from Off to On"
    assert isinstance(switch.state, OnState)


def test_main_output(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out.splitlines() == [
        "Switch already On",
        "Switch return from On to Off",
    ]