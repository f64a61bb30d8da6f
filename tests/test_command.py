from patternkit.command import TV, Button, OffCommand, OnCommand, main


def test_on_button_turns_tv_on():
    tv = TV()
    assert Button(OnCommand(tv)).press() == "TV on"
    assert tv.is_on is True


def test_off_button_turns_tv_off():
    tv = TV()
    Button(OnCommand(tv)).press()
    assert Button(OffCommand(tv)).press() == "TV off"
    assert tv.is_on is False


def test_commands_execute_directly():
    tv = TV()
    assert OnCommand(tv).execute() == tv.on()


def test_main_output(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out.splitlines() == ["TV on", "TV off"]