import asyncio

from bladearena.battle.countdown import countdown


def test_countdown_steps_then_none():
    seen = []
    asyncio.run(countdown(["3", "2", "1"], seen.append, 0))
    assert seen == ["3", "2", "1", None]


def test_countdown_empty_steps_signals_once():
    seen = []
    asyncio.run(countdown([], seen.append, 0))
    assert seen == [None]


def test_countdown_waits_between_steps(monkeypatch):
    sleeps = []
    real_sleep = asyncio.sleep
    async def fake_sleep(delay):
        sleeps.append(delay)
        await real_sleep(0)
    monkeypatch.setattr(asyncio, "sleep", fake_sleep)
    seen = []
    asyncio.run(countdown(["3", "2", "1", "Go!"], seen.append))
    assert sleeps == [0.8, 0.8, 0.8, 0.8]
    assert seen[-1] is None


def test_countdown_cancel_skips_remaining_steps():
    seen = []
    async def scenario():
        cancel = asyncio.Event()
        def on_step(value):
            seen.append(value)
            if value == "2":
                cancel.set()
        await countdown(["3", "2", "1"], on_step, 0, cancel=cancel)
    asyncio.run(scenario())
    assert seen == ["3", "2", None]
