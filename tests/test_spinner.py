from tran_receiver.models.messages import Schedule, SpinnerTickMsg
from tran_receiver.tui.spinner import TRANSFER, WAITING, Spinner


def test_tick_schedules_message_for_this_spinner():
    spinner = Spinner(WAITING, fps=10)
    cmd = spinner.tick()
    assert isinstance(cmd, Schedule)
    assert cmd.delay == 0.1
    assert cmd.message.spinner_id == spinner.id


def test_update_advances_and_wraps_around():
    spinner = Spinner(TRANSFER)
    cmd = spinner.tick()
    seen = []
    for _ in range(len(TRANSFER.frames) + 1):
        cmd = spinner.update(cmd.message)
        seen.append(spinner.view())
    assert seen[-1] == TRANSFER.frames[1]
    assert seen[len(TRANSFER.frames) - 1] == TRANSFER.frames[0]


def test_update_ignores_other_spinners_and_stale_ticks():
    spinner = Spinner()
    other = Spinner()
    assert spinner.update(other.tick().message) is None

    first = spinner.tick()
    assert spinner.update(first.message) is not None
    # The same tick delivered twice must not advance the spinner again.
    assert spinner.update(first.message) is None
    assert spinner.frame == 1


def test_update_ignores_unrelated_messages():
    spinner = Spinner()
    assert spinner.update(object()) is None
    assert spinner.update(SpinnerTickMsg(spinner_id=-1, tag=0)) is None
    assert spinner.frame == 0


def test_use_switches_symbols_and_keeps_tick_chain():
    spinner = Spinner(WAITING)
    cmd = spinner.update(spinner.tick().message)
    spinner.use(TRANSFER)
    assert spinner.view() == TRANSFER.frames[0]
    assert spinner.update(cmd.message) is not None
