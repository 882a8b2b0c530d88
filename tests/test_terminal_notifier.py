import io

from rich.console import Console

from adapters.terminal_notifier import BELL, CLEAR_AND_HOME, TerminalNotifier
from core.domain.models import Duration
from core.interfaces.notifier import Notifier


def _notifier():
    buffer = io.StringIO()
    return TerminalNotifier(Console(file=buffer, width=120)), buffer


def test_control_sequences():
    assert CLEAR_AND_HOME == "\x1b[2J\x1b[H"
    assert BELL == "\x07"


def test_terminal_notifier_matches_protocol():
    notifier, _ = _notifier()
    assert isinstance(notifier, Notifier)


def test_announce_prints_wait_time():
    notifier, buffer = _notifier()
    notifier.announce(Duration(hours=2, minutes=30))
    assert buffer.getvalue() == "Remind in 2 hour(s) and 30 minute(s).\n"


def test_clear_and_alert_write_raw_sequences_when_not_a_tty():
    notifier, buffer = _notifier()
    notifier.clear()
    notifier.alert("Go for a walk")
    assert buffer.getvalue() == "\x1b[2J\x1b[H\x07Go for a walk\n"


def test_alert_message_is_not_treated_as_markup():
    notifier, buffer = _notifier()
    notifier.alert("[bold]call mom[/bold]")
    assert buffer.getvalue() == "\x07[bold]call mom[/bold]\n"
