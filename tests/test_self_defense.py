from unittest.mock import call, patch

from ixcipher.self_defense import SelfDefense


def test_not_triggered_initially():
    assert SelfDefense().triggered() is False


def test_trigger_sets_flag():
    defense = SelfDefense()
    defense.trigger_illegal_access()
    assert defense.triggered() is True


def test_monitor_waits_while_not_triggered():
    with patch("subprocess.Popen") as popen:
        thread = SelfDefense().monitor()
        thread.join(timeout=0.05)
        assert thread.is_alive() is True
        assert popen.call_count == 0


def test_monitor_shuts_down_on_linux_after_trigger():
    with patch("subprocess.Popen") as popen, patch("sys.platform", "linux"):
        defense = SelfDefense()
        defense.trigger_illegal_access()
        thread = defense.monitor()
        thread.join(timeout=5)
        assert thread.is_alive() is False
        assert popen.call_args_list == [call(["shutdown", "-h", "now"])]


def test_monitor_shuts_down_on_windows_after_trigger():
    with patch("subprocess.Popen") as popen, patch("sys.platform", "win32"):
        defense = SelfDefense()
        defense.trigger_illegal_access()
        thread = defense.monitor()
        thread.join(timeout=5)
        assert thread.is_alive() is False
        assert popen.call_args_list == [call(["shutdown", "/s", "/t", "1", "/f"])]


def test_unsupported_platform_reports_and_does_not_spawn(capsys):
    with patch("subprocess.Popen") as popen, patch("sys.platform", "plan9"):
        defense = SelfDefense()
        defense.trigger_illegal_access()
        defense.monitor().join(timeout=5)
        assert popen.call_count == 0
    assert "Unsupported OS for shutdown procedure" in capsys.readouterr().err